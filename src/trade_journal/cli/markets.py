"""Markets command - list traded markets."""

from __future__ import annotations

import json
from pathlib import Path  # noqa: TC003 - Required at runtime for Typer introspection
from typing import Annotated

import typer
from rich.table import Table

from trade_journal.cli._helpers import format_pl, load_journal
from trade_journal.cli.utils import console


def journal_markets(
    csv_path: Annotated[Path, typer.Argument(help="Trade history CSV export.")],
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """List traded markets, most traded first."""
    from trade_journal.journal import market_counts, summarize_markets

    records = load_journal(csv_path, "all")
    totals = {summary.market: summary.total_pl for summary in summarize_markets(records)}
    counts = market_counts(records)

    if output_json:
        payload = [
            {"market": market, "trades": count, "total_pl": totals[market]}
            for market, count in counts
        ]
        typer.echo(json.dumps(payload, indent=2))
        return

    table = Table(title="Markets")
    table.add_column("Market", style="cyan")
    table.add_column("Trades", justify="right")
    table.add_column("P&L", justify="right")

    for market, count in counts:
        table.add_row(market, str(count), format_pl(totals[market]))

    console.print(table)
