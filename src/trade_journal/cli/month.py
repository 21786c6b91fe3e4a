"""Month command - calendar grid of daily P&L."""

from __future__ import annotations

import calendar
from pathlib import Path  # noqa: TC003 - Required at runtime for Typer introspection
from typing import TYPE_CHECKING, Annotated

import typer
from rich.table import Table

from trade_journal.cli._helpers import (
    MARKET_OPTION_HELP,
    MONTH_NAMES,
    format_pl,
    load_journal,
    resolve_year,
)
from trade_journal.cli.utils import console

if TYPE_CHECKING:
    from trade_journal.journal import MonthAggregate

WEEKDAY_HEADERS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


def build_calendar_table(month: MonthAggregate) -> Table:
    """Render a month as a Sunday-first calendar grid."""
    from trade_journal.journal import format_currency

    table = Table(
        title=f"{MONTH_NAMES[month.month]} {month.year}",
        caption=f"Total: {format_currency(month.total_pl)} ({month.trade_count} trades)",
        show_lines=True,
    )
    for header in WEEKDAY_HEADERS:
        table.add_column(header, justify="center", min_width=7)

    weeks = calendar.Calendar(firstweekday=calendar.SUNDAY).monthdayscalendar(
        month.year, month.month + 1
    )
    for week in weeks:
        cells: list[str] = []
        for day_number in week:
            if day_number == 0:
                cells.append("")
                continue
            day = month.days.get(day_number)
            if day is None:
                cells.append(f"[dim]{day_number}[/dim]")
                continue
            cells.append(
                f"[bold]{day_number}[/bold]\n{format_pl(day.total_pl)}\nT:{day.trade_count}"
            )
        table.add_row(*cells)

    return table


def journal_month(
    csv_path: Annotated[Path, typer.Argument(help="Trade history CSV export.")],
    year: Annotated[
        int | None,
        typer.Option("--year", "-y", help="Calendar year (default: most recent year)."),
    ] = None,
    month: Annotated[
        int | None,
        typer.Option(
            "--month",
            "-m",
            min=1,
            max=12,
            help="Month number 1-12 (default: latest month with trades).",
        ),
    ] = None,
    market: Annotated[str | None, typer.Option("--market", help=MARKET_OPTION_HELP)] = None,
) -> None:
    """Show a month of daily P&L as a calendar."""
    from trade_journal.journal import MonthKey, group_by_month, sorted_months

    records = load_journal(csv_path, market)
    selected_year = resolve_year(records, year)
    months = sorted_months(group_by_month(records), year=selected_year)

    if not months:
        console.print(f"[yellow]No trades in {selected_year}[/yellow]")
        return

    if month is None:
        _, month_data = months[-1]
    else:
        key = MonthKey(selected_year, month - 1)
        found = dict(months).get(key)
        if found is None:
            console.print(f"[yellow]No trades in {MONTH_NAMES[key.month]} {key.year}[/yellow]")
            return
        month_data = found

    console.print(build_calendar_table(month_data))
