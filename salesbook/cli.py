"""Menu-driven command line for registering and reporting sales."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from typing import Callable

from .database import SALES_FILE_PATH, load_sales, rewrite_sales
from .register import register_new_sale
from .reports import (
    format_monthly_report,
    format_sales_table,
    monthly_totals,
    sort_months_by_total,
    sort_sales_by_date,
)

Say = Callable[[str], None]

_SEPARATOR = "\n\n- - - - - - - - - - \n\n"


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def menu_text() -> str:
    """Return the main menu as shown to the user."""
    return (
        "\n- - - - Menu - - - - \n\n"
        "1 - Cadastrar uma nova venda\n"
        "- - - - - - - - - - - -\n"
        "2 - Relatório Diário\n"
        "3 - Relatório Mensal\n"
        "- - - - - - - - - - - -\n"
        "4 - Organizar Vendas por Data\n"
        "5 - Sair"
        + _SEPARATOR
        + "-> "
    )


def clear_terminal() -> None:
    """Clear the terminal screen."""
    try:
        if os.name == "nt":
            subprocess.run("cls", shell=True, check=False)
        else:
            subprocess.run(["clear"], check=False)
    except OSError:
        pass


def show_daily_sales(path=SALES_FILE_PATH, say: Say | None = None):
    """Print every registered sale with the grand total; return the sales."""
    say = say if say is not None else _write
    say("Carregando vendas registradas..")
    say(_SEPARATOR)

    sales = load_sales(path)
    say(f"Total de {len(sales)} vendas carregadas com sucesso.\n\n")
    say(format_sales_table(sales))
    say("Digite qualquer coisa para continuar...")
    return sales


def show_monthly_sales(path=SALES_FILE_PATH, say: Say | None = None):
    """Print sale totals per month, highest first; return the (month, total) pairs."""
    say = say if say is not None else _write
    say("Carregando vendas registradas..")
    say(_SEPARATOR)

    ranked = sort_months_by_total(monthly_totals(load_sales(path)))
    say(format_monthly_report(ranked))
    return ranked


def sort_sales_file(path=SALES_FILE_PATH, say: Say | None = None):
    """Rewrite the sales file ordered by date; return the sorted sales."""
    say = say if say is not None else _write
    say("\nReorganizando vendas.. um momento.\n")

    ordered = sort_sales_by_date(load_sales(path))
    rewrite_sales(ordered, path)

    say("\nVendas reorganizadas por data com sucesso.\n\n")
    say("\nDigite qualquer coisa para continuar...")
    return ordered


def _pause(ask: Callable[[str], str], say: Say) -> None:
    say("\nPressione Enter para continuar...")
    ask("")


def _parse_option(answer: str) -> int | None:
    try:
        return int(answer.strip())
    except ValueError:
        return None


def main(argv=None) -> int:
    """Run the interactive sales menu until the user quits."""
    parser = argparse.ArgumentParser(prog="salesbook", description="Register and report sales.")
    parser.add_argument("--file", default=SALES_FILE_PATH, help="path of the sales file")
    args = parser.parse_args(argv)
    path = args.file

    ask = input
    say = _write

    try:
        while True:
            clear_terminal()
            option = _parse_option(ask(menu_text()))
            clear_terminal()

            if option == 1:
                register_new_sale(path, ask, say)
            elif option == 2:
                show_daily_sales(path, say)
            elif option == 3:
                show_monthly_sales(path, say)
            elif option == 4:
                sort_sales_file(path, say)
            elif option == 5:
                break
            else:
                continue
            _pause(ask, say)
    except (EOFError, KeyboardInterrupt):
        say("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())