"""Presentation helpers: K/M point strings and display rounding."""

import math
from decimal import ROUND_HALF_UP, Decimal

from src.validation import require_finite


def round_half_up(value: float) -> int:
    """Round for display the way the web client does (0.5 goes up)."""
    return int(math.floor(value + 0.5))


def _scaled(value, divisor: int) -> Decimal:
    """*value* / *divisor* rounded half up to one decimal place."""
    return (Decimal(str(value)) / divisor).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)


class MagnitudeFormatter:
    """Formats raw point totals as short human-readable strings.

    ``999 -> "999"``, ``1250 -> "1.3K"``, ``2_500_000 -> "2.5M"``.
    Ties round half up. Values below one thousand keep their thousands
    separators (relevant for negative totals only).
    """

    def format(self, value) -> str:
        require_finite(value, "value")
        if value >= 1_000_000:
            return f"{_scaled(value, 1_000_000)}M"
        if value >= 1_000:
            return f"{_scaled(value, 1_000)}K"
        return f"{value:,}"


_formatter = MagnitudeFormatter()


def format_points(value) -> str:
    return _formatter.format(value)
