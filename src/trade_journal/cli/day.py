"""Day command - per-market breakdown of one trading day."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path  # noqa: TC003 - Required at runtime for Typer introspection
from typing import TYPE_CHECKING, Annotated

import typer
from rich.table import Table

from trade_journal.cli._helpers import MARKET_OPTION_HELP, format_pl, load_journal
from trade_journal.cli.utils import console

if TYPE_CHECKING:
    from trade_journal.journal import TradeRecord


def _build_market_table(title: str, transactions: list[TradeRecord]) -> Table:
    from trade_journal.journal import format_points, summarize_markets

    table = Table(title=title)
    table.add_column("Market", style="cyan")
    table.add_column("P&L", justify="right")
    table.add_column("Trades", justify="right")
    table.add_column("Points", justify="right")

    for summary in summarize_markets(transactions):
        table.add_row(
            summary.market,
            format_pl(summary.total_pl),
            str(summary.trade_count),
            format_points(summary.total_points),
        )
    return table


def _build_trades_table(title: str, transactions: list[TradeRecord]) -> Table:
    from trade_journal.journal import (
        format_duration,
        format_points,
        point_difference,
        trade_duration,
    )

    table = Table(title=title)
    table.add_column("Closed", style="dim")
    table.add_column("Reference", no_wrap=True)
    table.add_column("Open", justify="right")
    table.add_column("Close", justify="right")
    table.add_column("Points", justify="right")
    table.add_column("Duration", justify="right")
    table.add_column("P&L", justify="right")

    for record in transactions:
        closed_at = record.closed_at
        table.add_row(
            closed_at.strftime("%H:%M:%S") if closed_at else record.date_utc,
            record.reference,
            record.open_level,
            record.close_level,
            format_points(point_difference(record)),
            format_duration(trade_duration(record)),
            format_pl(record.pl_amount),
        )
    return table


def journal_day(
    csv_path: Annotated[Path, typer.Argument(help="Trade history CSV export.")],
    day: Annotated[str, typer.Argument(help="Trading day (YYYY-MM-DD).")],
    market: Annotated[str | None, typer.Option("--market", help=MARKET_OPTION_HELP)] = None,
    ticker: Annotated[
        str | None,
        typer.Option("--ticker", "-t", help="List individual trades for one market."),
    ] = None,
) -> None:
    """Show the markets traded on one day, or the trades of one market."""
    from trade_journal.journal import MonthKey, format_currency, group_by_month

    try:
        selected = datetime.strptime(day, "%Y-%m-%d").date()
    except ValueError:
        console.print(f"[red]Error:[/red] Invalid date '{day}'. Expected YYYY-MM-DD.")
        raise typer.Exit(1) from None

    records = load_journal(csv_path, market)
    month = group_by_month(records).get(MonthKey(selected.year, selected.month - 1))
    day_data = month.days.get(selected.day) if month is not None else None
    if day_data is None:
        console.print(f"[yellow]No trades on {selected.isoformat()}[/yellow]")
        return

    heading = f"{selected.strftime('%A, %B')} {selected.day}, {selected.year}"
    if ticker is None:
        console.print(
            _build_market_table(
                f"{heading} - {format_currency(day_data.total_pl)} "
                f"({day_data.trade_count} trades)",
                day_data.transactions,
            )
        )
        return

    trades = [record for record in day_data.transactions if record.market == ticker]
    if not trades:
        console.print(f"[yellow]No trades for '{ticker}' on {selected.isoformat()}[/yellow]")
        return

    total = sum(record.pl_amount for record in trades)
    console.print(
        _build_trades_table(f"{ticker} - {heading} - {format_currency(total)}", trades)
    )
