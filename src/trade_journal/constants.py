"""Named constants for the trade history export format and journal views.

Column positions follow the broker's "Trade history" CSV export:

    textDate, summary, marketName, period, profitAndLoss, transactionType, reference,
    openLevel, closeLevel, size, currency, plAmount, cashTransaction, dateUtc,
    openDateUtc, currencyIsoCode
"""

from __future__ import annotations

# =============================================================================
# CSV Export Layout
# =============================================================================

# Minimum number of comma-separated fields for a data row to be accepted.
#
# Used by:
# - journal/parser.py: parse_csv() drops shorter rows without raising
CSV_MIN_FIELDS: int = 16

# Column holding the broker's unique trade reference (deduplication key).
#
# Used by:
# - journal/parser.py: parse_csv()
CSV_REFERENCE_COLUMN: int = 6

# Column holding the numeric P&L amount (may include currency symbols/commas).
#
# Used by:
# - journal/parser.py: parse_csv()
CSV_PL_AMOUNT_COLUMN: int = 11

# =============================================================================
# Calendar Views
# =============================================================================

# Number of weeks shown for a year in the week view. Weeks beyond this are only
# shown when they contain trades (e.g. Dec 31 of a year starting late in the week).
#
# Used by:
# - journal/aggregator.py: group_by_week()
WEEKS_PER_YEAR: int = 52

# Magnitude at which amounts are abbreviated to thousands ("$2k").
#
# Used by:
# - journal/formatting.py: format_currency()
CURRENCY_THOUSANDS_THRESHOLD: int = 1000

# Value accepted by --market meaning "no market filter".
#
# Used by:
# - journal/markets.py: filter_by_market()
ALL_MARKETS: str = "all"
