# salesbook

A small terminal point-of-sale log for a restaurant that sells meals by
weight and fixed-price meal boxes, with optional drinks. Each sale is
appended as one line to a plain-text file, `sales.txt` in the current
directory by default.

## Installing

```
pip install .
```

## Running

```
salesbook
salesbook --file path/to/sales.txt
```

`--file` chooses the sales file (default `sales.txt`). A menu, in
Portuguese, offers:

1. Register a new sale: pick a per-kilo meal (weight in grams, R$50.00 per
   kilo) or a meal box (R$20.50), then optionally a drink — soda R$5.00,
   beer R$7.00, water R$3.00 or juice R$6.00 — and a quantity. The sale
   gets a random id below 1000 and the current time, and is appended to
   the file.
2. Daily report: every recorded sale as a table (id, total, meal, drink,
   quantity, date and time in UTC), with the grand total.
3. Monthly report: totals per calendar month, largest first.
4. Sort the sales file by date, oldest first, rewriting it in place.
5. Quit.

Invalid answers are asked again. End of input or Ctrl-C leaves the menu.

## Using it as a library

```python
from salesbook.database import load_sales
from salesbook.reports import monthly_totals, sort_months_by_total, format_monthly_report

sales = load_sales("sales.txt")
print(format_monthly_report(sort_months_by_total(monthly_totals(sales))))
```

- `salesbook.models` — `Sale`, `Drink`, `Food`, the `SaleType` and
  `DrinkType` enums, and the price rules `make_drink`, `food_by_weight`
  and `meal_box_food` (which raise `ValueError` for bad input).
- `salesbook.database` — `format_sale_line`, `parse_sales`, `save_sale`,
  `load_sales` and `rewrite_sales`. A missing file holds no sales; reading
  stops at the first malformed record.
- `salesbook.reports` — `sort_sales_by_date`, `monthly_totals`,
  `sort_months_by_total`, `format_sales_table`, `format_monthly_report`
  and `sale_datetime`.
- `salesbook.register` — the interactive prompts (`ask_sale_type`,
  `ask_has_drink`, `ask_drink`, `ask_meal_weight`, `build_sale`,
  `register_new_sale`), which take `ask` and `say` callables so they can
  be driven from code.
- `salesbook.cli` — `main` and the menu actions `show_daily_sales`,
  `show_monthly_sales` and `sort_sales_file`.

## What it does not do

Sales can only be added: there is no way to edit or delete a sale, no
report for a single day (the daily report lists every sale), and the
monthly report groups by calendar month only, so the same month of
different years is added together.

## Tests

```
pip install .[test]
pytest
```