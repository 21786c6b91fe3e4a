"""Week command - week-of-year P&L totals."""

from __future__ import annotations

from pathlib import Path  # noqa: TC003 - Required at runtime for Typer introspection
from typing import Annotated

import typer
from rich.table import Table

from trade_journal.cli._helpers import (
    MARKET_OPTION_HELP,
    MONTH_ABBRS,
    format_pl,
    load_journal,
    resolve_year,
)
from trade_journal.cli.utils import console


def journal_week(
    csv_path: Annotated[Path, typer.Argument(help="Trade history CSV export.")],
    year: Annotated[
        int | None,
        typer.Option("--year", "-y", help="Calendar year (default: most recent year)."),
    ] = None,
    market: Annotated[str | None, typer.Option("--market", help=MARKET_OPTION_HELP)] = None,
    show_all: Annotated[
        bool,
        typer.Option("--all", "-a", help="Include weeks without trades."),
    ] = False,
) -> None:
    """Show P&L per week of the year."""
    from trade_journal.journal import format_currency, group_by_week

    records = load_journal(csv_path, market)
    selected_year = resolve_year(records, year)
    weeks = group_by_week(records, selected_year)

    traded_weeks = [week for week in weeks if week.trade_count > 0]
    if not traded_weeks:
        console.print(f"[yellow]No trades in {selected_year}[/yellow]")
        return

    year_total = sum(week.total_pl for week in weeks)
    table = Table(
        title=f"Weekly P&L {selected_year}",
        caption=f"Total: {format_currency(year_total)}",
    )
    table.add_column("Week", justify="right", style="cyan")
    table.add_column("Month", style="dim")
    table.add_column("P&L", justify="right")
    table.add_column("Trades", justify="right")

    for week in weeks if show_all else traded_weeks:
        if week.trade_count == 0:
            table.add_row(str(week.week_number), "", "[dim]-[/dim]", "0")
            continue
        month_label = MONTH_ABBRS[week.month] if week.month is not None else ""
        table.add_row(
            str(week.week_number),
            month_label,
            format_pl(week.total_pl),
            str(week.trade_count),
        )

    console.print(table)
