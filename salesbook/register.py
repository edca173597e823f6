"""Interactive registration of a new sale."""

from __future__ import annotations

import random
import re
import sys
import time
from typing import Callable

from .database import SALES_FILE_PATH, save_sale
from .models import Drink, Food, Sale, SaleType, food_by_weight, make_drink, meal_box_food

Ask = Callable[[str], str]
Say = Callable[[str], None]

_SEPARATOR = "\n\n- - - - - - - - - - \n\n"
_INT_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _first_char(answer: str) -> str:
    stripped = answer.strip()
    return stripped[:1]


def _leading_int(answer: str) -> int | None:
    match = _INT_RE.match(answer)
    return int(match.group(1)) if match else None


def _leading_float(answer: str) -> float | None:
    match = _FLOAT_RE.match(answer)
    return float(match.group(1)) if match else None


def ask_sale_type(ask: Ask, say: Say) -> SaleType:
    """Ask until the user picks a meal by weight or a meal box."""
    prompt = "Qual o tipo de venda?\n1 - Refeição com peso\n2 - Quentinha\n\n"
    while True:
        option = _first_char(ask(prompt))
        if option == "1":
            return SaleType.PER_KILO
        if option == "2":
            say("\nAdicionando quentinha de R$20 reais ao pedido.\n")
            return SaleType.MEAL_BOX
        say("\n\nOpção inválida. Digite 1 ou 2.\n\n")


def ask_has_drink(ask: Ask, say: Say) -> bool:
    """Ask whether the order includes drinks."""
    prompt = "\nVocê tem bebida para acrescentar ao pedido?\n1 - Sim\n2 - Não\n\n"
    while True:
        option = _first_char(ask(prompt))
        if option == "1":
            return True
        if option == "2":
            return False
        say("\n\nOpção inválida. Digite 1 ou 2.\n")


def ask_drink(ask: Ask, say: Say) -> Drink:
    """Ask which drink was consumed and how many, then price the order."""
    prompt = (
        "\nQual bebida foi consumida?\n"
        "1 - Refrigerante (R$5,00)\n"
        "2 - Cerveja (R$7,00)\n"
        "3 - Água (R$3,00)\n"
        "4 - Suco (R$6,00)\n\n"
    )
    while True:
        drink_type = _leading_int(ask(prompt))
        if drink_type is not None and 0 < drink_type < 5:
            break
        say("\n\nOpção inválida. Tente novamente.\n")

    while True:
        amount = _leading_int(ask("\nDigite a quantidade de bebidas:\n"))
        if amount is not None and amount >= 0:
            say(f"\nAdicionando {amount} bebida(s) ao pedido.\n")
            return make_drink(drink_type, amount)
        say("Quantidade inválida. Tente novamente.\n")


def ask_meal_weight(ask: Ask, say: Say) -> Food:
    """Ask for the meal weight in grams until a positive value is given."""
    while True:
        weight = _leading_float(ask("\nDigite o peso da refeição em gramas:\n"))
        if weight is not None and weight > 0.0:
            kilos = weight / 1000.0
            say(f"\nPeso da refeição: {weight:.2f} gramas / {kilos:.2f} quilos\n")
            return food_by_weight(weight)
        say("\n\nPeso inválido. Tente novamente.\n")


def build_sale(ask: Ask, say: Say, sale_id: int, timestamp: int) -> Sale:
    """Walk through the questions of a new sale and return it, priced."""
    sale = Sale(sale_id=sale_id, timestamp=timestamp)
    sale.sale_type = ask_sale_type(ask, say)

    if sale.sale_type == SaleType.PER_KILO:
        sale.food = ask_meal_weight(ask, say)
    else:
        sale.food = meal_box_food()

    if ask_has_drink(ask, say):
        sale.drink = ask_drink(ask, say)
        say(f"Total em bebidas: R${sale.drink.total:.2f}\n")

    sale.total = sale.food.total + sale.drink.total
    say(f"\nTotal da Refeição: R${sale.total:.2f}\n")
    say("- - - - - - - - - - - -\n")
    return sale


def register_new_sale(path=SALES_FILE_PATH, ask: Ask | None = None, say: Say | None = None) -> Sale:
    """Register a sale interactively, append it to the sales file and return it."""
    ask = ask if ask is not None else input
    say = say if say is not None else _write

    say("Registro de nova venda")
    say(_SEPARATOR)

    sale = build_sale(ask, say, random.randrange(1000), int(time.time()))
    save_sale(sale, path)

    say("Venda registrada com sucesso!\n\n")
    say("Digite qualquer coisa para continuar.\n")
    return sale