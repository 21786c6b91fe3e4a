"""
Trade Journal.

Parses broker trade history CSV exports and rolls profit/loss up into
day, week, month and year calendar views.
"""

__version__ = "0.1.0"

from trade_journal.journal import (
    MonthAggregate,
    MonthKey,
    TradeRecord,
    format_currency,
    group_by_month,
    parse_csv,
)

# Configure structlog once at import time (quiet by default).
from trade_journal.logging import configure_structlog

configure_structlog()

__all__ = [
    "MonthAggregate",
    "MonthKey",
    "TradeRecord",
    "__version__",
    "format_currency",
    "group_by_month",
    "parse_csv",
]
