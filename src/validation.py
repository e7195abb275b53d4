"""Errors and input guards shared by the tier, scoring and leaderboard packages."""

import math
import numbers

import pandas as pd


class InvalidInputError(ValueError):
    """Raised when a caller passes a negative, non-finite or non-numeric value."""

    pass


class ConfigurationError(Exception):
    """Raised when a tier table or scoring configuration is malformed."""

    pass


def _is_number(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def require_finite(value, name: str) -> float:
    """Return *value* unchanged if it is a finite real number."""
    if not _is_number(value):
        raise InvalidInputError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidInputError(f"{name} must be finite, got {value!r}")
    return value


def require_non_negative(value, name: str) -> float:
    """Return *value* unchanged if it is a finite number >= 0."""
    require_finite(value, name)
    if value < 0:
        raise InvalidInputError(f"{name} must be non-negative, got {value!r}")
    return value


def require_points(points):
    """Guard for cumulative point totals fed to a classifier."""
    return require_non_negative(points, "points")


def require_page(page) -> int:
    """Pages are 1-based integers."""
    if not isinstance(page, numbers.Integral) or isinstance(page, bool):
        raise InvalidInputError(f"page must be an integer, got {page!r}")
    if page < 1:
        raise InvalidInputError(f"page must be >= 1, got {page}")
    return int(page)


def require_limit(limit, max_limit: int) -> int:
    """Page sizes are integers in ``[1, max_limit]``."""
    if not isinstance(limit, numbers.Integral) or isinstance(limit, bool):
        raise InvalidInputError(f"limit must be an integer, got {limit!r}")
    if not 1 <= limit <= max_limit:
        raise InvalidInputError(
            f"limit must be between 1 and {max_limit}, got {limit}"
        )
    return int(limit)


def require_finite_series(values: pd.Series, name: str, allow_negative: bool = False) -> pd.Series:
    """Coerce *values* to numbers; reject NaN, infinite and non-numeric cells.

    Returns the numeric Series. Negative values are rejected as well unless
    *allow_negative* is set.
    """
    numeric = pd.to_numeric(values, errors="coerce")
    invalid = numeric.isna() | numeric.isin([math.inf, -math.inf])
    if not allow_negative:
        invalid |= numeric < 0
    if invalid.any():
        raise InvalidInputError(
            f"{name}: {int(invalid.sum())} value(s) are "
            f"{'' if allow_negative else 'negative, '}non-finite or non-numeric: "
            f"{values[invalid].tolist()}"
        )
    return numeric
