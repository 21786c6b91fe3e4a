"""Calendar aggregation of trades into month/day, week and year buckets.

All functions rebuild their output from scratch on each call. Bucketing uses each
trade's close timestamp in local time; trades whose close timestamp can't be parsed
are left out of every calendar bucket (and logged).
"""

from __future__ import annotations

import math
from datetime import date
from typing import TYPE_CHECKING

import structlog

from trade_journal.constants import WEEKS_PER_YEAR
from trade_journal.journal.models import (
    DayAggregate,
    MonthAggregate,
    MonthKey,
    PeriodTotals,
    WeekAggregate,
    YearSummary,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping
    from datetime import datetime

    from trade_journal.journal.models import TradeRecord

logger = structlog.get_logger()


def _dated(records: Iterable[TradeRecord]) -> Iterator[tuple[TradeRecord, datetime]]:
    """Yield (record, close time) pairs, skipping records without a usable close time."""
    for record in records:
        closed_at = record.closed_at
        if closed_at is None:
            logger.warning(
                "Skipping trade with unparseable close timestamp",
                reference=record.reference,
                date_utc=record.date_utc,
            )
            continue
        yield record, closed_at


def group_by_month(records: Iterable[TradeRecord]) -> dict[MonthKey, MonthAggregate]:
    """Group trades into month buckets holding day-of-month buckets.

    The result is not ordered; use `sorted_months()` when order matters.
    """
    monthly: dict[MonthKey, MonthAggregate] = {}

    for record, closed_at in _dated(records):
        key = MonthKey(closed_at.year, closed_at.month - 1)
        month = monthly.get(key)
        if month is None:
            month = MonthAggregate(year=key.year, month=key.month)
            monthly[key] = month

        day = month.days.get(closed_at.day)
        if day is None:
            day = DayAggregate(date=record.date_utc)
            month.days[closed_at.day] = day

        day.total_pl += record.pl_amount
        day.trade_count += 1
        day.transactions.append(record)
        month.total_pl += record.pl_amount

    return monthly


def sorted_months(
    monthly: Mapping[MonthKey, MonthAggregate], *, year: int | None = None
) -> list[tuple[MonthKey, MonthAggregate]]:
    """Month buckets in calendar order, optionally restricted to one year."""
    return sorted(
        (item for item in monthly.items() if year is None or item[0].year == year),
        key=lambda item: item[0],
    )


def sorted_days(month: MonthAggregate) -> list[tuple[int, DayAggregate]]:
    """Day buckets of a month in day-of-month order."""
    return sorted(month.days.items())


def available_years(records: Iterable[TradeRecord]) -> list[int]:
    """Distinct close years, ascending."""
    return sorted({closed_at.year for _, closed_at in _dated(records)})


def week_number(moment: datetime) -> int:
    """Week of the year, with week 1 starting on Jan 1 and weeks rolling over on Sunday."""
    first_day = date(moment.year, 1, 1)
    past_days = (moment.date() - first_day).days
    # date.weekday() is Monday=0; the week count is Sunday-based
    first_weekday = (first_day.weekday() + 1) % 7
    return math.ceil((past_days + first_weekday + 1) / 7)


def group_by_week(records: Iterable[TradeRecord], year: int) -> list[WeekAggregate]:
    """Week-of-year totals for `year`.

    Always returns weeks 1-52; a trailing week 53 is included only when it has trades.
    """
    weeks: dict[int, WeekAggregate] = {
        number: WeekAggregate(week_number=number) for number in range(1, WEEKS_PER_YEAR + 1)
    }

    for record, closed_at in _dated(records):
        if closed_at.year != year:
            continue
        number = week_number(closed_at)
        week = weeks.get(number)
        if week is None:
            week = WeekAggregate(week_number=number)
            weeks[number] = week

        if week.month is None:
            week.month = closed_at.month - 1
        week.total_pl += record.pl_amount
        week.trade_count += 1
        week.transactions.append(record)

    return [weeks[number] for number in sorted(weeks)]


def summarize_year(records: Iterable[TradeRecord], year: int) -> YearSummary:
    """Monthly totals (January..December) and the year total for `year`."""
    months = [PeriodTotals(month=index) for index in range(12)]

    for record, closed_at in _dated(records):
        if closed_at.year != year:
            continue
        totals = months[closed_at.month - 1]
        totals.total_pl += record.pl_amount
        totals.trade_count += 1
        totals.transactions.append(record)

    return YearSummary(
        year=year,
        months=months,
        total_pl=sum(totals.total_pl for totals in months),
    )
