import pytest

from salesbook.database import load_sales
from salesbook.models import (
    MEAL_BOX_PRICE,
    DrinkType,
    SaleType,
    food_by_weight,
    make_drink,
)
from salesbook.register import (
    ask_drink,
    ask_has_drink,
    ask_meal_weight,
    ask_sale_type,
    build_sale,
    register_new_sale,
)


def scripted(*answers):
    remaining = iter(answers)

    def ask(prompt):
        return next(remaining)

    return ask


@pytest.fixture
def output():
    return []


def test_sale_type_per_kilo(output):
    assert ask_sale_type(scripted("1"), output.append) == SaleType.PER_KILO
    assert output == []


def test_sale_type_retries_then_meal_box(output):
    result = ask_sale_type(scripted("x", " 2"), output.append)
    assert result == SaleType.MEAL_BOX
    text = "".join(output)
    assert "Opção inválida. Digite 1 ou 2." in text
    assert "Adicionando quentinha de R$20 reais ao pedido." in text


@pytest.mark.parametrize("answer, expected", [("1", True), ("2", False)])
def test_has_drink(answer, expected, output):
    assert ask_has_drink(scripted(answer), output.append) is expected


def test_has_drink_retries(output):
    assert ask_has_drink(scripted("3", "2"), output.append) is False
    assert "Opção inválida" in "".join(output)


def test_ask_drink_retries_invalid_type(output):
    drink = ask_drink(scripted("9", "abc", "2", "3"), output.append)
    assert drink == make_drink(DrinkType.BEER, 3)
    assert "".join(output).count("Opção inválida. Tente novamente.") == 2


def test_ask_drink_rejects_negative_amount(output):
    drink = ask_drink(scripted("1", "-1", "2"), output.append)
    assert drink == make_drink(DrinkType.SODA, 2)
    text = "".join(output)
    assert "Quantidade inválida. Tente novamente." in text
    assert "Adicionando 2 bebida(s) ao pedido." in text


def test_ask_drink_accepts_zero(output):
    drink = ask_drink(scripted("3", "0"), output.append)
    assert drink.amount == 0
    assert drink.total == 0


def test_ask_meal_weight_retries(output):
    food = ask_meal_weight(scripted("0", "abc", "500"), output.append)
    assert food == food_by_weight(500.0)
    assert "".join(output).count("Peso inválido") == 2


def test_build_sale_per_kilo_with_drink(output):
    sale = build_sale(scripted("1", "500", "1", "4", "2"), output.append, 42, 1000)
    assert sale.sale_id == 42
    assert sale.timestamp == 1000
    assert sale.sale_type == SaleType.PER_KILO
    assert sale.food == food_by_weight(500.0)
    assert sale.drink == make_drink(DrinkType.JUICE, 2)
    assert sale.total == pytest.approx(sale.food.total + sale.drink.total)


def test_build_sale_meal_box_without_drink(output):
    sale = build_sale(scripted("2", "2"), output.append, 7, 0)
    assert sale.sale_type == SaleType.MEAL_BOX
    assert sale.drink.kind is None
    assert sale.total == pytest.approx(MEAL_BOX_PRICE)


def test_register_new_sale_persists(tmp_path, output):
    path = tmp_path / "sales.txt"
    sale = register_new_sale(path, scripted("2", "1", "3", "2"), output.append)
    assert 0 <= sale.sale_id < 1000
    assert load_sales(path) == [sale]
    assert "Venda registrada com sucesso!" in "".join(output)


def test_register_new_sale_appends(tmp_path, output):
    path = tmp_path / "sales.txt"
    register_new_sale(path, scripted("2", "2"), output.append)
    register_new_sale(path, scripted("2", "2"), output.append)
    assert len(load_sales(path)) == 2