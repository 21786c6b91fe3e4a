"""Unit tests for calendar aggregation."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import pytest

from tests.csv_fixtures import SAMPLE_CSV, build_csv, build_csv_row
from trade_journal.journal.aggregator import (
    available_years,
    group_by_month,
    group_by_week,
    sorted_days,
    sorted_months,
    summarize_year,
    week_number,
)
from trade_journal.journal.models import MonthKey
from trade_journal.journal.parser import parse_csv

if TYPE_CHECKING:
    from collections.abc import Callable

    from trade_journal.journal.models import TradeRecord


@pytest.fixture
def sample_records() -> list[TradeRecord]:
    return parse_csv(SAMPLE_CSV)


class TestGroupByMonth:
    """Tests for group_by_month()."""

    def test_two_months_produce_two_entries(self, sample_records: list[TradeRecord]) -> None:
        monthly = group_by_month(sample_records)

        assert set(monthly) == {MonthKey(2024, 0), MonthKey(2024, 1)}

    def test_day_buckets_and_totals(self, sample_records: list[TradeRecord]) -> None:
        monthly = group_by_month(sample_records)

        january = monthly[MonthKey(2024, 0)]
        assert january.year == 2024
        assert january.month == 0
        assert set(january.days) == {15, 20}
        assert january.total_pl == pytest.approx(1260.25)

        day_15 = january.days[15]
        assert day_15.trade_count == 2
        assert day_15.total_pl == pytest.approx(60.25)
        assert [t.reference for t in day_15.transactions] == ["A1", "A2"]
        assert day_15.date == "2024-01-15T10:30:00"

        february = monthly[MonthKey(2024, 1)]
        assert set(february.days) == {2}
        assert february.total_pl == pytest.approx(-300.0)
        assert february.trade_count == 1

    def test_aggregate_invariants_hold(self, sample_records: list[TradeRecord]) -> None:
        for month in group_by_month(sample_records).values():
            assert month.total_pl == pytest.approx(sum(d.total_pl for d in month.days.values()))
            for day in month.days.values():
                assert day.trade_count == len(day.transactions)
                assert day.total_pl == pytest.approx(sum(t.pl_amount for t in day.transactions))

    def test_regrouping_is_idempotent(self, sample_records: list[TradeRecord]) -> None:
        assert group_by_month(sample_records) == group_by_month(sample_records)

    def test_empty_input(self) -> None:
        assert group_by_month([]) == {}

    def test_day_date_comes_from_first_record(self, make_trade: Callable[..., TradeRecord]) -> None:
        later = make_trade(reference="L", date_utc="2024-03-05T18:00:00")
        earlier = make_trade(reference="E", date_utc="2024-03-05T08:00:00")

        monthly = group_by_month([later, earlier])

        assert monthly[MonthKey(2024, 2)].days[5].date == "2024-03-05T18:00:00"

    @pytest.mark.parametrize(
        "date_utc", ["not-a-date", "0001-01-01T00:00:00+05:00", "9999-12-31T23:00:00-05:00"]
    )
    def test_unparseable_close_timestamp_is_skipped(
        self, make_trade: Callable[..., TradeRecord], date_utc: str
    ) -> None:
        good = make_trade(reference="G", date_utc="2024-03-05T18:00:00", pl_amount="5")
        bad = make_trade(reference="B", date_utc=date_utc, pl_amount="1000")

        monthly = group_by_month([good, bad])

        assert list(monthly) == [MonthKey(2024, 2)]
        assert monthly[MonthKey(2024, 2)].total_pl == 5.0

    def test_month_key_label(self) -> None:
        assert str(MonthKey(2024, 0)) == "2024-0"
        assert str(MonthKey(2023, 11)) == "2023-11"


class TestOrdering:
    """Tests for sorted_months() and sorted_days()."""

    def test_sorted_months_orders_by_year_then_month(
        self, make_trade: Callable[..., TradeRecord]
    ) -> None:
        records = [
            make_trade(reference="1", date_utc="2024-02-01T10:00:00"),
            make_trade(reference="2", date_utc="2023-12-01T10:00:00"),
            make_trade(reference="3", date_utc="2024-01-01T10:00:00"),
            make_trade(reference="4", date_utc="2023-11-01T10:00:00"),
        ]

        keys = [key for key, _ in sorted_months(group_by_month(records))]

        assert keys == [
            MonthKey(2023, 10),
            MonthKey(2023, 11),
            MonthKey(2024, 0),
            MonthKey(2024, 1),
        ]

    def test_sorted_months_year_filter(self, make_trade: Callable[..., TradeRecord]) -> None:
        records = [
            make_trade(reference="1", date_utc="2024-02-01T10:00:00"),
            make_trade(reference="2", date_utc="2023-12-01T10:00:00"),
        ]

        keys = [key for key, _ in sorted_months(group_by_month(records), year=2023)]

        assert keys == [MonthKey(2023, 11)]

    def test_sorted_days(self, make_trade: Callable[..., TradeRecord]) -> None:
        records = [
            make_trade(reference="1", date_utc="2024-02-20T10:00:00"),
            make_trade(reference="2", date_utc="2024-02-03T10:00:00"),
            make_trade(reference="3", date_utc="2024-02-11T10:00:00"),
        ]
        month = group_by_month(records)[MonthKey(2024, 1)]

        assert [day for day, _ in sorted_days(month)] == [3, 11, 20]

    def test_available_years(self, make_trade: Callable[..., TradeRecord]) -> None:
        records = [
            make_trade(reference="1", date_utc="2024-02-20T10:00:00"),
            make_trade(reference="2", date_utc="2022-02-03T10:00:00"),
            make_trade(reference="3", date_utc="2024-05-11T10:00:00"),
            make_trade(reference="4", date_utc="garbage"),
        ]

        assert available_years(records) == [2022, 2024]


class TestWeeks:
    """Tests for week_number() and group_by_week()."""

    @pytest.mark.parametrize(
        ("moment", "expected"),
        [
            (datetime(2024, 1, 1, 10, 0), 1),  # Monday
            (datetime(2024, 1, 6, 23, 59), 1),  # Saturday
            (datetime(2024, 1, 7, 0, 0), 2),  # Sunday starts week 2
            (datetime(2024, 1, 15, 10, 30), 3),
            (datetime(2023, 12, 30, 12, 0), 52),
            (datetime(2023, 12, 31, 12, 0), 53),
        ],
    )
    def test_week_number(self, moment: datetime, expected: int) -> None:
        assert week_number(moment) == expected

    def test_group_by_week(self, sample_records: list[TradeRecord]) -> None:
        weeks = group_by_week(sample_records, 2024)

        assert len(weeks) == 52
        assert [w.week_number for w in weeks] == list(range(1, 53))

        week_3 = weeks[2]
        assert week_3.trade_count == 3
        assert week_3.total_pl == pytest.approx(1260.25)
        assert week_3.month == 0

        week_5 = weeks[4]
        assert week_5.trade_count == 1
        assert week_5.total_pl == pytest.approx(-300.0)
        assert week_5.month == 1

        assert sum(w.trade_count for w in weeks) == 4

    def test_other_years_are_excluded(self, sample_records: list[TradeRecord]) -> None:
        weeks = group_by_week(sample_records, 2023)

        assert all(w.trade_count == 0 for w in weeks)
        assert all(w.month is None for w in weeks)

    def test_week_53_included_when_traded(self, make_trade: Callable[..., TradeRecord]) -> None:
        records = [make_trade(reference="NYE", date_utc="2023-12-31T12:00:00", pl_amount="7")]

        weeks = group_by_week(records, 2023)

        assert len(weeks) == 53
        assert weeks[-1].week_number == 53
        assert weeks[-1].trade_count == 1
        assert weeks[-1].month == 11


class TestSummarizeYear:
    """Tests for summarize_year()."""

    def test_monthly_totals(self, sample_records: list[TradeRecord]) -> None:
        summary = summarize_year(sample_records, 2024)

        assert summary.year == 2024
        assert len(summary.months) == 12
        assert summary.months[0].total_pl == pytest.approx(1260.25)
        assert summary.months[0].trade_count == 3
        assert summary.months[1].total_pl == pytest.approx(-300.0)
        assert all(m.trade_count == 0 for m in summary.months[2:])
        assert summary.total_pl == pytest.approx(960.25)
        assert summary.trade_count == 4

    def test_year_without_trades(self, sample_records: list[TradeRecord]) -> None:
        summary = summarize_year(sample_records, 2019)

        assert summary.total_pl == 0.0
        assert summary.trade_count == 0


def test_out_of_range_close_timestamp_does_not_halt_aggregation() -> None:
    text = build_csv(
        build_csv_row(reference="OK", date_utc="2024-01-15T10:30:00", pl_amount="10"),
        build_csv_row(reference="FAR", date_utc="0001-01-01T00:00:00+05:00", pl_amount="99"),
    )
    records = parse_csv(text)

    assert len(records) == 2
    assert list(group_by_month(records)) == [MonthKey(2024, 0)]
    assert available_years(records) == [2024]
    assert summarize_year(records, 2024).trade_count == 1
    assert sum(week.trade_count for week in group_by_week(records, 2024)) == 1
