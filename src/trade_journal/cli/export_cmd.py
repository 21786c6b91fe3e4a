"""Export command - write monthly aggregates to JSON."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path  # noqa: TC003 - Required at runtime for Typer introspection
from typing import TYPE_CHECKING, Annotated, Any

import typer

from trade_journal.cli._helpers import MARKET_OPTION_HELP, load_journal
from trade_journal.cli.utils import atomic_write_json, console

if TYPE_CHECKING:
    from trade_journal.journal import MonthAggregate


def month_to_dict(month: MonthAggregate) -> dict[str, Any]:
    """Serialize a month aggregate with its days in calendar order."""
    from trade_journal.journal import sorted_days

    return {
        "key": str(month.key),
        "year": month.year,
        "month": month.month,
        "total_pl": month.total_pl,
        "trade_count": month.trade_count,
        "days": [
            {
                "day": day_number,
                "date": day.date,
                "total_pl": day.total_pl,
                "trade_count": day.trade_count,
                "transactions": [record.model_dump(mode="json") for record in day.transactions],
            }
            for day_number, day in sorted_days(month)
        ],
    }


def journal_export(
    csv_path: Annotated[Path, typer.Argument(help="Trade history CSV export.")],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output JSON path (default: TRADE_JOURNAL_EXPORTS_DIR/monthly_pnl.json).",
        ),
    ] = None,
    market: Annotated[str | None, typer.Option("--market", help=MARKET_OPTION_HELP)] = None,
) -> None:
    """Export monthly and daily P&L aggregates as JSON."""
    from trade_journal.config import JournalConfig
    from trade_journal.journal import group_by_month, sorted_months
    from trade_journal.paths import DEFAULT_EXPORT_FILENAME

    config = JournalConfig.from_env()
    records = load_journal(csv_path, market)
    months = sorted_months(group_by_month(records))

    payload: dict[str, Any] = {
        "source": str(csv_path),
        "generated_at": datetime.now(UTC).isoformat(),
        "market": config.resolve_market(market),
        "trade_count": len(records),
        "months": [month_to_dict(month) for _, month in months],
    }

    output_path = output or config.exports_dir / DEFAULT_EXPORT_FILENAME
    try:
        atomic_write_json(output_path, payload)
    except OSError as e:
        console.print(f"[red]Error:[/red] Could not write {output_path}: {e}")
        raise typer.Exit(1) from None

    console.print(
        f"[green]✓[/green] Exported {len(months)} months ({len(records)} trades) to {output_path}"
    )
