"""Sale records and the price rules used when building them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

KILO_PRICE = 50.0
MEAL_BOX_PRICE = 20.0 + 0.50


class SaleType(IntEnum):
    """How the meal part of a sale is charged."""

    PER_KILO = 1
    MEAL_BOX = 2


class DrinkType(IntEnum):
    """Drinks on the menu."""

    SODA = 1
    BEER = 2
    WATER = 3
    JUICE = 4


DRINK_PRICES: dict[DrinkType, float] = {
    DrinkType.SODA: 5.00,
    DrinkType.BEER: 7.00,
    DrinkType.WATER: 3.00,
    DrinkType.JUICE: 6.00,
}


@dataclass
class Drink:
    """Drinks added to a sale; ``kind`` is None when no drink was ordered."""

    kind: DrinkType | None = None
    amount: int = 0
    price: float = 0.0
    total: float = 0.0


@dataclass
class Food:
    """The meal part of a sale; ``weight`` is in grams."""

    weight: float = 0.0
    total: float = 0.0


@dataclass
class Sale:
    """One registered sale; ``timestamp`` is seconds since the epoch."""

    sale_id: int
    drink: Drink = field(default_factory=Drink)
    food: Food = field(default_factory=Food)
    total: float = 0.0
    sale_type: SaleType | None = SaleType.PER_KILO
    timestamp: int = 0


def make_drink(drink_type, amount):
    """Build a drink order, priced from the menu.

    Raises ValueError for an unknown drink or a negative amount.
    """
    kind = DrinkType(drink_type)
    if amount < 0:
        raise ValueError(f"invalid drink amount: {amount}")
    price = DRINK_PRICES[kind]
    return Drink(kind=kind, amount=amount, price=price, total=amount * price)


def food_by_weight(weight):
    """Price a meal sold by weight in grams.

    Raises ValueError unless the weight is positive.
    """
    if not weight > 0.0:
        raise ValueError(f"invalid meal weight: {weight}")
    kilos = weight / 1000.0
    return Food(weight=weight, total=kilos * KILO_PRICE)


def meal_box_food():
    """Return the fixed-price meal box."""
    return Food(weight=0.0, total=MEAL_BOX_PRICE)