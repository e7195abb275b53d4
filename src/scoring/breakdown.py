"""Event point-award breakdown and category shares.

A participation award is split into three components::

    total = base + max(0, hours) * hourly_multiplier + bonus

Components are never rounded. Percentage shares are computed on demand and
only rounded by the ``display_*`` helpers.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

from src.formatting import round_half_up
from src.scoring.config import (
    DEFAULT_BASE_POINTS,
    DEFAULT_BONUS_POINTS,
    DEFAULT_HOURLY_MULTIPLIER,
    VOLUNTEER_POINT_CATEGORIES,
)
from src.validation import require_finite, require_non_negative

logger = logging.getLogger(__name__)

BREAKDOWN_COMPONENTS = ("base", "hour_bonus", "bonus")


@dataclass(frozen=True)
class EventScoringConfig:
    """Per-event scoring parameters."""

    base_points: float = DEFAULT_BASE_POINTS
    hourly_multiplier: float = DEFAULT_HOURLY_MULTIPLIER
    bonus_points: float = DEFAULT_BONUS_POINTS

    def __post_init__(self):
        require_non_negative(self.base_points, "base_points")
        require_non_negative(self.hourly_multiplier, "hourly_multiplier")
        require_non_negative(self.bonus_points, "bonus_points")


@dataclass(frozen=True)
class PointsBreakdown:
    """Decomposition of a single event award."""

    base: float
    hour_bonus: float
    bonus: float
    total: float
    hours_contributed: float = 0  # after clamping to >= 0
    hourly_multiplier: float = 0

    def share_of(self, component: str) -> float:
        """Unrounded percentage of the total taken by *component*."""
        if component not in BREAKDOWN_COMPONENTS:
            raise KeyError(f"Unknown breakdown component: {component!r}")
        if self.total == 0:
            return 0.0
        return getattr(self, component) / self.total * 100

    def shares(self) -> Dict[str, float]:
        return {c: self.share_of(c) for c in BREAKDOWN_COMPONENTS}

    def display_shares(self) -> Dict[str, int]:
        return {c: round_half_up(pct) for c, pct in self.shares().items()}


@dataclass(frozen=True)
class CategoryShare:
    """One non-empty slice of a volunteer's accumulated points."""

    key: str
    label: str
    value: float
    percentage: float

    @property
    def display_percentage(self) -> int:
        return round_half_up(self.percentage)


class PointsBreakdownCalculator:
    """Computes event award breakdowns.

    The calculator holds an :class:`EventScoringConfig` used by
    :meth:`compute_for_event`; :meth:`compute` takes every parameter
    explicitly.
    """

    def __init__(self, config: Optional[EventScoringConfig] = None):
        self.config = config or EventScoringConfig()

    def compute(
        self,
        base_points,
        hours_contributed,
        hourly_multiplier,
        bonus_points,
    ) -> PointsBreakdown:
        """Break an award into base, hour bonus and bonus.

        Negative hours are clamped to zero; they never reduce the award.

        Raises:
            InvalidInputError: If base, multiplier or bonus is negative or
                any argument is non-finite.
        """
        require_non_negative(base_points, "base_points")
        require_finite(hours_contributed, "hours_contributed")
        require_non_negative(hourly_multiplier, "hourly_multiplier")
        require_non_negative(bonus_points, "bonus_points")

        hours = max(0, hours_contributed)
        hour_bonus = hours * hourly_multiplier
        total = base_points + hour_bonus + bonus_points

        logger.debug(
            "Breakdown: base=%s hours=%s x %s -> %s bonus=%s total=%s",
            base_points, hours, hourly_multiplier, hour_bonus, bonus_points, total,
        )

        return PointsBreakdown(
            base=base_points,
            hour_bonus=hour_bonus,
            bonus=bonus_points,
            total=total,
            hours_contributed=hours,
            hourly_multiplier=hourly_multiplier,
        )

    def compute_for_event(
        self,
        hours_contributed,
        config: Optional[EventScoringConfig] = None,
    ) -> PointsBreakdown:
        """Breakdown using an event's scoring config (or the default one)."""
        config = config or self.config
        return self.compute(
            config.base_points,
            hours_contributed,
            config.hourly_multiplier,
            config.bonus_points,
        )


def category_shares(
    breakdown: Mapping[str, float],
    categories: Optional[Mapping[str, str]] = None,
) -> List[CategoryShare]:
    """Turn accumulated points per category into percentage slices.

    Categories with no points are dropped. An all-zero breakdown yields an
    empty list.

    Args:
        breakdown: Points per category key, e.g.
            ``{"event_participation": 300, "hours_volunteered": 120}``.
            Missing keys count as zero.
        categories: Ordered ``{key: label}`` mapping. Defaults to
            ``VOLUNTEER_POINT_CATEGORIES``.
    """
    categories = categories or VOLUNTEER_POINT_CATEGORIES

    unknown = set(breakdown) - set(categories)
    if unknown:
        raise KeyError(f"Unknown point categories: {sorted(unknown)}")

    values = {
        key: require_non_negative(breakdown.get(key, 0), key) for key in categories
    }
    total = sum(values.values())
    if total == 0:
        return []

    return [
        CategoryShare(
            key=key,
            label=label,
            value=values[key],
            percentage=values[key] / total * 100,
        )
        for key, label in categories.items()
        if values[key] > 0
    ]
