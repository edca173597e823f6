"""Daily listing and monthly totals of sales."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone

from .models import DrinkType, SaleType

MONTH_NAMES = (
    "Janeiro", "Fevereiro", "Março", "Abril", "Maio",
    "Junho", "Julho", "Agosto", "Setembro", "Outubro",
    "Novembro", "Dezembro",
)

DRINK_NAMES = {
    DrinkType.SODA: "Refrigerante",
    DrinkType.BEER: "Cerveja",
    DrinkType.WATER: "Água",
    DrinkType.JUICE: "Suco",
}

_TABLE_HEADER = "\tid\t|\tTotal\t|\tRefeição\t|\tBebida\t|\tQtd.\t|\tData e Hora\t\n"
_MONTH_HEADER = "\tMês\t|\tTotal\t\n"


def sale_datetime(timestamp):
    """Convert a stored timestamp to a UTC datetime."""
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)


def sort_sales_by_date(sales):
    """Return the sales ordered from oldest to newest."""
    return sorted(sales, key=lambda sale: sale.timestamp)


def monthly_totals(sales):
    """Sum sale totals per month (1-12), keyed in order of first appearance."""
    totals: dict[int, float] = {}
    for sale in sales:
        month = sale_datetime(sale.timestamp).month
        totals[month] = totals.get(month, 0.0) + sale.total
    return totals


def sort_months_by_total(totals):
    """Return (month, total) pairs from the highest total to the lowest."""
    return sorted(totals.items(), key=lambda item: item[1], reverse=True)


def _meal_label(sale) -> str:
    if sale.sale_type == SaleType.PER_KILO:
        return f"{sale.food.weight:.2f} gramas"
    if sale.sale_type == SaleType.MEAL_BOX:
        return "Quentinha"
    return "N/A"


def _date_label(timestamp: int) -> str:
    moment = sale_datetime(timestamp)
    return (
        f"{moment.day:02d}/{moment.month:02d}/{moment.year} "
        f"{moment.hour:02d}:{moment.minute:02d}"
    )


def format_sales_table(sales):
    """Render the sales listing with its grand total."""
    parts = [_TABLE_HEADER]
    grand_total = 0.0
    for sale in sales:
        drink = DRINK_NAMES.get(sale.drink.kind, "N/A")
        parts.append(
            f"\t{sale.sale_id}\t|\tR${sale.total:.2f}\t|\t{_meal_label(sale)}\t"
            f"|{drink:<15}|\t{sale.drink.amount}\t|\t{_date_label(sale.timestamp)}\t\n"
        )
        grand_total += sale.total
    parts.append(f"\nO total de vendas até hoje foi de: R${grand_total:.2f}\n\n")
    return "".join(parts)


def format_monthly_report(totals):
    """Render month totals given as a mapping or as (month, total) pairs."""
    pairs = totals.items() if isinstance(totals, Mapping) else totals
    parts = [_MONTH_HEADER]
    for month, total in pairs:
        parts.append(f"{MONTH_NAMES[month - 1]:<18}|\tR${total:.2f}\t\n")
    return "".join(parts)