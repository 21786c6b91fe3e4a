"""Per-market views over parsed trades (filtering, breakdowns, trade-level metrics)."""

from __future__ import annotations

import re
from collections import Counter
from typing import TYPE_CHECKING

from trade_journal.constants import ALL_MARKETS
from trade_journal.journal.models import MarketSummary
from trade_journal.journal.parser import parse_leading_float

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from datetime import timedelta

    from trade_journal.journal.models import TradeRecord

# Exports of non-base-currency markets append e.g. " converted at 0.7912".
_CONVERTED_SUFFIX = re.compile(r"^(.+?)\s+converted at")


def clean_market_name(name: str) -> str:
    """Strip a currency conversion suffix from a market name."""
    match = _CONVERTED_SUFFIX.match(name)
    return match.group(1) if match else name


def market_names(records: Iterable[TradeRecord]) -> list[str]:
    """Return distinct market names, most traded first."""
    counts = Counter(record.market for record in records)
    return [market for market, _ in counts.most_common()]


def market_counts(records: Iterable[TradeRecord]) -> list[tuple[str, int]]:
    """Return (market, trade count) pairs, most traded first."""
    return Counter(record.market for record in records).most_common()


def filter_by_market(records: Sequence[TradeRecord], market: str | None) -> list[TradeRecord]:
    """Restrict records to one market. `None` or "all" (any case) keeps every record."""
    if market is None or market.strip().lower() == ALL_MARKETS:
        return list(records)
    return [record for record in records if record.market == market]


def point_difference(record: TradeRecord) -> float | None:
    """Absolute move between open and close level, or None if either is not numeric."""
    open_level = parse_leading_float(record.open_level)
    close_level = parse_leading_float(record.close_level)
    if open_level is None or close_level is None:
        return None
    return abs(close_level - open_level)


def trade_duration(record: TradeRecord) -> timedelta | None:
    """Time between open and close, or None when unknown or negative."""
    opened_at = record.opened_at
    closed_at = record.closed_at
    if opened_at is None or closed_at is None:
        return None
    duration = closed_at - opened_at
    if duration.total_seconds() < 0:
        return None
    return duration


def summarize_markets(records: Iterable[TradeRecord]) -> list[MarketSummary]:
    """Per-market totals, highest absolute P&L first."""
    summaries: dict[str, MarketSummary] = {}
    for record in records:
        summary = summaries.get(record.market)
        if summary is None:
            summary = MarketSummary(market=record.market)
            summaries[record.market] = summary

        summary.total_pl += record.pl_amount
        summary.trade_count += 1
        points = point_difference(record)
        if points is not None:
            summary.total_points += points

    return sorted(summaries.values(), key=lambda s: abs(s.total_pl), reverse=True)
