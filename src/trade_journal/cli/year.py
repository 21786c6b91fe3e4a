"""Year command - monthly P&L totals for a year."""

from __future__ import annotations

import json
from pathlib import Path  # noqa: TC003 - Required at runtime for Typer introspection
from typing import Annotated

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


def journal_year(
    csv_path: Annotated[Path, typer.Argument(help="Trade history CSV export.")],
    year: Annotated[
        int | None,
        typer.Option("--year", "-y", help="Calendar year (default: most recent year)."),
    ] = None,
    market: Annotated[str | None, typer.Option("--market", help=MARKET_OPTION_HELP)] = None,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show P&L per month of a year."""
    from trade_journal.journal import available_years, summarize_year

    records = load_journal(csv_path, market)
    selected_year = resolve_year(records, year)
    summary = summarize_year(records, selected_year)

    if output_json:
        payload = {
            "year": summary.year,
            "total_pl": summary.total_pl,
            "trade_count": summary.trade_count,
            "months": [
                {
                    "month": totals.month + 1,
                    "name": MONTH_NAMES[totals.month],
                    "total_pl": totals.total_pl,
                    "trade_count": totals.trade_count,
                }
                for totals in summary.months
            ],
        }
        typer.echo(json.dumps(payload, indent=2))
        return

    table = Table(title=f"P&L {summary.year}")
    table.add_column("Month", style="cyan")
    table.add_column("P&L", justify="right")
    table.add_column("Trades", justify="right")

    for totals in summary.months:
        if totals.trade_count == 0:
            table.add_row(MONTH_NAMES[totals.month], "[dim]-[/dim]", "0")
            continue
        table.add_row(
            MONTH_NAMES[totals.month], format_pl(totals.total_pl), str(totals.trade_count)
        )

    table.add_section()
    table.add_row("[bold]Total[/bold]", format_pl(summary.total_pl), str(summary.trade_count))
    console.print(table)

    years = available_years(records)
    if len(years) > 1:
        console.print(f"[dim]Years with trades: {', '.join(str(y) for y in years)}[/dim]")
