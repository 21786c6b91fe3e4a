"""Trade journal data models (parsed records and calendar aggregates)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, NamedTuple

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from datetime import datetime


class TradeRecord(BaseModel):
    """One parsed, deduplicated row of a trade history export."""

    model_config = ConfigDict(frozen=True)

    text_date: str
    summary: str
    market_name: str
    period: str
    profit_and_loss: str  # Raw text, e.g. "£1,234.50"
    transaction_type: str
    reference: str
    open_level: str
    close_level: str
    size: str
    currency: str
    pl_amount: float
    cash_transaction: str
    date_utc: str  # Close timestamp, sole basis for calendar bucketing
    open_date_utc: str
    currency_iso_code: str

    @property
    def closed_at(self) -> datetime | None:
        """Close timestamp as a naive local datetime, or None if unparseable."""
        from trade_journal.journal.timestamps import parse_timestamp

        return parse_timestamp(self.date_utc)

    @property
    def opened_at(self) -> datetime | None:
        """Open timestamp as a naive local datetime, or None if unparseable."""
        from trade_journal.journal.timestamps import parse_timestamp

        return parse_timestamp(self.open_date_utc)

    @property
    def market(self) -> str:
        """Market name with any currency conversion suffix removed."""
        from trade_journal.journal.markets import clean_market_name

        return clean_market_name(self.market_name)


class MonthKey(NamedTuple):
    """Calendar month bucket key (month is zero-based, 0-11)."""

    year: int
    month: int

    def __str__(self) -> str:
        return f"{self.year}-{self.month}"


@dataclass
class DayAggregate:
    """All trades whose close timestamp falls on one calendar day."""

    date: str  # Close timestamp text of the first trade routed into the day
    total_pl: float = 0.0
    trade_count: int = 0
    transactions: list[TradeRecord] = field(default_factory=list)


@dataclass
class MonthAggregate:
    """All trades whose close timestamp falls in one calendar month."""

    year: int
    month: int
    total_pl: float = 0.0
    days: dict[int, DayAggregate] = field(default_factory=dict)

    @property
    def key(self) -> MonthKey:
        return MonthKey(self.year, self.month)

    @property
    def trade_count(self) -> int:
        return sum(day.trade_count for day in self.days.values())


@dataclass
class PeriodTotals:
    """P&L roll-up for one month of a year summary."""

    month: int
    total_pl: float = 0.0
    trade_count: int = 0
    transactions: list[TradeRecord] = field(default_factory=list)


@dataclass
class WeekAggregate:
    """P&L roll-up for one week of a year."""

    week_number: int
    total_pl: float = 0.0
    trade_count: int = 0
    transactions: list[TradeRecord] = field(default_factory=list)
    month: int | None = None  # Zero-based month of the first trade in the week


@dataclass
class YearSummary:
    """Monthly totals for one calendar year."""

    year: int
    months: list[PeriodTotals]
    total_pl: float = 0.0

    @property
    def trade_count(self) -> int:
        return sum(month.trade_count for month in self.months)


@dataclass
class MarketSummary:
    """Per-market totals over a set of trades."""

    market: str
    total_pl: float = 0.0
    trade_count: int = 0
    total_points: float = 0.0
