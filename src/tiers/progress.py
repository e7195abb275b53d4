"""Progress-to-next-band calculation."""

from dataclasses import dataclass
from typing import Optional

from src.formatting import round_half_up
from src.tiers.tier_table import TierBand, TierTable
from src.validation import ConfigurationError, require_points


@dataclass(frozen=True)
class ProgressState:
    """How far a point total has travelled through its band."""

    current_value: float
    lower_bound: int
    upper_bound: Optional[int]  # None once the top band is reached
    percentage: float  # 0-100, unrounded
    is_max_tier: bool = False

    @property
    def points_into_band(self) -> float:
        return self.current_value - self.lower_bound

    @property
    def points_required(self) -> Optional[int]:
        """Width of the band, or None for the top band."""
        if self.upper_bound is None:
            return None
        return self.upper_bound - self.lower_bound

    @property
    def points_to_next(self) -> Optional[float]:
        if self.upper_bound is None:
            return None
        return max(self.upper_bound - self.current_value, 0)

    @property
    def display_percentage(self) -> int:
        return round_half_up(self.percentage)


class ProgressCalculator:
    """Computes percentage progress toward the next band.

    Top band policy: once there is no next band the volunteer or community
    is "maxed out" and progress is reported as 100% with ``is_max_tier``
    set, rather than an undefined ratio.
    """

    def progress(
        self,
        points,
        band: TierBand,
        next_band_lower_bound: Optional[int],
    ) -> ProgressState:
        """Progress of *points* within *band*.

        Formula::

            percentage = clamp(100 * (points - lower) / (next - lower), 0, 100)

        Raises:
            InvalidInputError: If *points* is negative or not finite.
            ConfigurationError: If the range up to the next band is empty.
        """
        require_points(points)

        if next_band_lower_bound is None:
            return ProgressState(
                current_value=points,
                lower_bound=band.min_points,
                upper_bound=None,
                percentage=100.0,
                is_max_tier=True,
            )

        span = next_band_lower_bound - band.min_points
        if span <= 0:
            raise ConfigurationError(
                f"Band {band.name!r} has a zero-width progress range "
                f"({band.min_points} -> {next_band_lower_bound})"
            )

        raw = 100.0 * (points - band.min_points) / span
        return ProgressState(
            current_value=points,
            lower_bound=band.min_points,
            upper_bound=next_band_lower_bound,
            percentage=min(max(raw, 0.0), 100.0),
        )

    def progress_in_table(self, points, table: TierTable) -> ProgressState:
        """Classify *points* in *table* and report progress within that band."""
        band = table.classify(points)
        return self.progress(points, band, table.next_lower_bound(band))
