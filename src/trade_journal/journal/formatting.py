"""Display formatting for journal amounts, durations and point moves.

These are lossy, display-only transforms; never feed their output back into
calculations.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from trade_journal.constants import CURRENCY_THOUSANDS_THRESHOLD

if TYPE_CHECKING:
    from datetime import timedelta


def format_currency(amount: float) -> str:
    """Format an amount as an abbreviated dollar string.

    The amount is rounded up (toward +inf) to a whole number first; magnitudes of
    1000 or more are shown in thousands, also rounded up.

    Examples:
        999 -> "$999", 1000 -> "$1k", -1999 -> "-$2k", 0.4 -> "$1", -0.5 -> "$0"
    """
    rounded = math.ceil(amount)
    magnitude = abs(rounded)
    sign = "-" if rounded < 0 else ""
    if magnitude >= CURRENCY_THOUSANDS_THRESHOLD:
        return f"{sign}${math.ceil(magnitude / CURRENCY_THOUSANDS_THRESHOLD)}k"
    return f"{sign}${magnitude}"


def format_duration(duration: timedelta | None) -> str:
    """Format a duration as H:MM:SS ("-" when unknown)."""
    if duration is None:
        return "-"
    total_seconds = int(duration.total_seconds())
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours}:{minutes:02d}:{seconds:02d}"


def format_points(points: float | None) -> str:
    """Format a point move with one decimal ("-" when unknown)."""
    if points is None:
        return "-"
    return f"{points:.1f}"
