"""Trade history parsing, calendar aggregation and display formatting."""

from trade_journal.journal.aggregator import (
    available_years,
    group_by_month,
    group_by_week,
    sorted_days,
    sorted_months,
    summarize_year,
    week_number,
)
from trade_journal.journal.formatting import format_currency, format_duration, format_points
from trade_journal.journal.markets import (
    clean_market_name,
    filter_by_market,
    market_counts,
    market_names,
    point_difference,
    summarize_markets,
    trade_duration,
)
from trade_journal.journal.models import (
    DayAggregate,
    MarketSummary,
    MonthAggregate,
    MonthKey,
    PeriodTotals,
    TradeRecord,
    WeekAggregate,
    YearSummary,
)
from trade_journal.journal.parser import load_trades, parse_csv, read_csv_file

__all__ = [
    "DayAggregate",
    "MarketSummary",
    "MonthAggregate",
    "MonthKey",
    "PeriodTotals",
    "TradeRecord",
    "WeekAggregate",
    "YearSummary",
    "available_years",
    "clean_market_name",
    "filter_by_market",
    "format_currency",
    "format_duration",
    "format_points",
    "group_by_month",
    "group_by_week",
    "load_trades",
    "market_counts",
    "market_names",
    "parse_csv",
    "point_difference",
    "read_csv_file",
    "sorted_days",
    "sorted_months",
    "summarize_markets",
    "summarize_year",
    "trade_duration",
    "week_number",
]
