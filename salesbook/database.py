"""Plain-text storage of sales, one record per line."""

from __future__ import annotations

import os
from enum import IntEnum
from typing import Iterable, TypeVar

from .models import Drink, DrinkType, Food, Sale, SaleType

SALES_FILE_PATH = "sales.txt"
_FIELDS = 10

_E = TypeVar("_E", bound=IntEnum)


def _enum_or_none(enum_cls: type[_E], value: int) -> _E | None:
    try:
        return enum_cls(value)
    except ValueError:
        return None


def format_sale_line(sale):
    """Render a sale as one line of the sales file."""
    drink_id = int(sale.drink.kind) if sale.drink.kind is not None else 0
    sale_type = int(sale.sale_type) if sale.sale_type is not None else 0
    return (
        f"{sale.sale_id} {drink_id} {sale.drink.total:.2f} {sale.drink.price:.2f} "
        f"{sale.drink.amount} {sale.food.weight:.2f} {sale.food.total:.2f} "
        f"{sale.total:.2f} {sale_type} {sale.timestamp} \n"
    )


def _parse_record(fields: tuple[str, ...]) -> Sale:
    (sale_id, drink_id, drink_total, drink_price, amount,
     weight, food_total, total, sale_type, timestamp) = fields
    return Sale(
        sale_id=int(sale_id),
        drink=Drink(
            kind=_enum_or_none(DrinkType, int(drink_id)),
            amount=int(amount),
            price=float(drink_price),
            total=float(drink_total),
        ),
        food=Food(weight=float(weight), total=float(food_total)),
        total=float(total),
        sale_type=_enum_or_none(SaleType, int(sale_type)),
        timestamp=int(timestamp),
    )


def parse_sales(text):
    """Parse sales from file contents, stopping at the first malformed record."""
    sales = []
    for record in zip(*[iter(text.split())] * _FIELDS):
        try:
            sales.append(_parse_record(record))
        except ValueError:
            break
    return sales


def save_sale(sale, path=SALES_FILE_PATH):
    """Append one sale to the sales file."""
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(format_sale_line(sale))


def load_sales(path=SALES_FILE_PATH):
    """Read every sale from the sales file; a missing file holds no sales."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except FileNotFoundError:
        return []
    return parse_sales(text)


def rewrite_sales(sales: Iterable[Sale], path=SALES_FILE_PATH):
    """Replace the sales file with the given sales, in order."""
    sales = list(sales)
    if not sales:
        if os.path.exists(path):
            os.remove(path)
        return
    with open(path, "w", encoding="utf-8") as handle:
        handle.writelines(format_sale_line(sale) for sale in sales)