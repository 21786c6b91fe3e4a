"""
CLI application for Trade Journal.

Provides calendar views (month, week, year, day) over a trade history CSV export.
"""

from __future__ import annotations

import typer
from dotenv import find_dotenv, load_dotenv

from trade_journal.cli.day import journal_day
from trade_journal.cli.export_cmd import journal_export
from trade_journal.cli.markets import journal_markets
from trade_journal.cli.month import journal_month
from trade_journal.cli.utils import console
from trade_journal.cli.week import journal_week
from trade_journal.cli.year import journal_year

app = typer.Typer(
    name="journal",
    help="Trade Journal CLI - Calendar P&L views over trade history exports.",
    add_completion=False,
)

app.command("month")(journal_month)
app.command("week")(journal_week)
app.command("year")(journal_year)
app.command("day")(journal_day)
app.command("markets")(journal_markets)
app.command("export")(journal_export)


@app.callback()
def main() -> None:
    """Trade Journal CLI."""
    load_dotenv(find_dotenv(usecwd=True))


@app.command()
def version() -> None:
    """Show version information."""
    from trade_journal import __version__

    console.print(f"trade-journal v{__version__}")


__all__ = ["app"]
