import pytest

from salesbook.models import (
    DRINK_PRICES,
    KILO_PRICE,
    MEAL_BOX_PRICE,
    Drink,
    DrinkType,
    Food,
    Sale,
    SaleType,
    food_by_weight,
    make_drink,
    meal_box_food,
)


def test_make_drink_uses_menu_price():
    drink = make_drink(DrinkType.BEER, 3)
    assert drink.kind is DrinkType.BEER
    assert drink.price == 7.00
    assert drink.amount == 3
    assert drink.total == drink.price * 3


def test_make_drink_accepts_plain_int():
    drink = make_drink(4, 2)
    assert drink.kind is DrinkType.JUICE
    assert drink.total == DRINK_PRICES[DrinkType.JUICE] * 2


def test_make_drink_zero_amount_costs_nothing():
    drink = make_drink(DrinkType.WATER, 0)
    assert drink.total == 0.0
    assert drink.price == 3.00


@pytest.mark.parametrize("drink_type", [0, 5, -1])
def test_make_drink_rejects_unknown_type(drink_type):
    with pytest.raises(ValueError):
        make_drink(drink_type, 1)


def test_make_drink_rejects_negative_amount():
    with pytest.raises(ValueError):
        make_drink(DrinkType.SODA, -1)


def test_food_by_weight_one_kilo_costs_kilo_price():
    food = food_by_weight(1000.0)
    assert food.weight == 1000.0
    assert food.total == KILO_PRICE


def test_food_by_weight_scales_linearly():
    small = food_by_weight(200.0)
    large = food_by_weight(400.0)
    assert large.total == pytest.approx(small.total * 2)


@pytest.mark.parametrize("weight", [0.0, -10.0])
def test_food_by_weight_rejects_non_positive(weight):
    with pytest.raises(ValueError):
        food_by_weight(weight)


def test_meal_box_is_fixed_price():
    food = meal_box_food()
    assert food.total == MEAL_BOX_PRICE
    assert food.weight == 0.0


def test_sale_defaults():
    sale = Sale(sale_id=12)
    assert sale.drink == Drink()
    assert sale.food == Food()
    assert sale.sale_type is SaleType.PER_KILO
    assert sale.total == 0.0