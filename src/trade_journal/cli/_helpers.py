"""Shared helper functions for journal CLI commands."""

from __future__ import annotations

import calendar
from typing import TYPE_CHECKING

import typer

from trade_journal.cli.utils import console
from trade_journal.config import JournalConfig
from trade_journal.exceptions import JournalError
from trade_journal.journal import available_years, filter_by_market, format_currency, load_trades

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from trade_journal.journal import TradeRecord

MONTH_NAMES = tuple(calendar.month_name[1:])
MONTH_ABBRS = tuple(calendar.month_abbr[1:])
MARKET_OPTION_HELP = "Only include trades for this market ('all' for every market)."


def format_pl(amount: float) -> str:
    """Format an amount with `format_currency` and color markup (green profit, red loss)."""
    value = format_currency(amount)
    if amount > 0:
        return f"[green]{value}[/green]"
    if amount < 0:
        return f"[red]{value}[/red]"
    return value


def load_journal(path: Path, market: str | None) -> list[TradeRecord]:
    """Load a trade history export and apply the market filter.

    Raises:
        typer.Exit: With code 1 if the file can't be read, or code 0 if no trades remain.
    """
    config = JournalConfig.from_env()
    try:
        records = load_trades(path, encoding=config.encoding)
    except JournalError as e:
        console.print(f"[red]Error:[/red] {e}")
        console.print("[dim]Check that the file is a trade history CSV export.[/dim]")
        raise typer.Exit(1) from None

    selected = config.resolve_market(market)
    filtered = filter_by_market(records, selected)
    if not filtered:
        if selected is not None and records:
            console.print(f"[yellow]No trades found for market '{selected}'[/yellow]")
        else:
            console.print("[yellow]No trades found[/yellow]")
        raise typer.Exit(0)
    return filtered


def resolve_year(records: Sequence[TradeRecord], year: int | None) -> int:
    """Return the requested year, or the most recent year with trades.

    Raises:
        typer.Exit: If no trade has a parseable close date.
    """
    years = available_years(records)
    if not years:
        console.print("[yellow]No trades with a valid close date[/yellow]")
        raise typer.Exit(0)
    if year is None:
        return years[-1]
    return year
