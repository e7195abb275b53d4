"""Tier tables - ordered, immutable bands of cumulative points.

A :class:`TierTable` is validated once when it is built and never changes
afterwards, so a single instance can be shared by every classifier in the
process.
"""

import logging
import math
import numbers
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

import pandas as pd

from src.validation import ConfigurationError, require_finite_series, require_points

logger = logging.getLogger(__name__)


def _is_boundary(value) -> bool:
    """Band boundaries are whole point counts (bools excluded)."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


@dataclass(frozen=True)
class TierBand:
    """A named range of cumulative points with its display metadata."""

    name: str
    min_points: int
    max_points: float  # math.inf for the open top band
    color: str
    icon: Optional[str] = None
    benefits: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_unbounded(self) -> bool:
        return math.isinf(self.max_points)

    def contains(self, points) -> bool:
        """Check whether *points* falls inside this band.

        A bounded band reaches up to (not including) ``max_points + 1``, the
        next band's lower bound, so fractional totals such as ``499.5`` land
        in the same band :meth:`TierTable.classify` picks.
        """
        if self.is_unbounded:
            return self.min_points <= points
        return self.min_points <= points < self.max_points + 1

    @classmethod
    def from_dict(cls, data: Mapping) -> "TierBand":
        """Build a band from its config/JSON form (``max_points: None`` = open)."""
        if not isinstance(data, Mapping):
            raise ConfigurationError(f"Tier band must be an object, got {data!r}")
        try:
            name = data["name"]
            min_points = data["min_points"]
            color = data["color"]
        except KeyError as e:
            raise ConfigurationError(f"Tier band is missing field {e}: {data!r}") from e

        max_points = data.get("max_points")
        if not _is_boundary(min_points):
            raise ConfigurationError(
                f"Tier band {name!r}: min_points must be an integer, got {min_points!r}"
            )
        if max_points is not None and not _is_boundary(max_points):
            raise ConfigurationError(
                f"Tier band {name!r}: max_points must be an integer or null, "
                f"got {max_points!r}"
            )
        return cls(
            name=name,
            min_points=min_points,
            max_points=math.inf if max_points is None else max_points,
            color=color,
            icon=data.get("icon"),
            benefits=tuple(data.get("benefits", ())),
        )

    def to_dict(self) -> Dict:
        data = {
            "name": self.name,
            "min_points": self.min_points,
            "max_points": None if self.is_unbounded else self.max_points,
            "color": self.color,
        }
        if self.icon is not None:
            data["icon"] = self.icon
        if self.benefits:
            data["benefits"] = list(self.benefits)
        return data


class TierTable:
    """Contiguous, exhaustive bands covering ``[0, +inf)``.

    Bands are kept in ascending order. Classification scans them from the
    highest ``min_points`` downward and returns the first band whose lower
    bound is reached, so a value sitting exactly on a boundary belongs to
    the upper band.
    """

    def __init__(self, name: str, bands: Iterable[TierBand]):
        self.name = name
        self._bands: Tuple[TierBand, ...] = tuple(bands)
        self._validate()
        self._by_name = {band.name: band for band in self._bands}

    @classmethod
    def from_dicts(cls, name: str, bands: Iterable[Dict]) -> "TierTable":
        if not isinstance(bands, (list, tuple)):
            raise ConfigurationError(f"{name}: bands must be a list, got {bands!r}")
        return cls(name, [TierBand.from_dict(b) for b in bands])

    @classmethod
    def from_thresholds(
        cls,
        name: str,
        thresholds: Dict,
        color: str,
    ) -> "TierTable":
        """Build a table from a ``{label: min_points}`` mapping.

        Each band ends one point below the next threshold; the highest
        threshold opens the unbounded top band.
        """
        ordered = sorted(thresholds.items(), key=lambda item: item[1])
        bands = []
        for i, (label, min_points) in enumerate(ordered):
            if i + 1 < len(ordered):
                max_points = ordered[i + 1][1] - 1
            else:
                max_points = math.inf
            bands.append(
                TierBand(
                    name=str(label),
                    min_points=min_points,
                    max_points=max_points,
                    color=color,
                )
            )
        return cls(name, bands)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def bands(self) -> Tuple[TierBand, ...]:
        return self._bands

    def __len__(self) -> int:
        return len(self._bands)

    def __iter__(self):
        return iter(self._bands)

    def __repr__(self) -> str:
        names = ", ".join(band.name for band in self._bands)
        return f"TierTable({self.name!r}, [{names}])"

    def classify(self, points) -> TierBand:
        """Return the band containing *points*.

        Raises:
            InvalidInputError: If *points* is negative, non-finite or not
                a number.
        """
        require_points(points)
        for band in reversed(self._bands):
            if points >= band.min_points:
                return band
        # Unreachable: validation guarantees the lowest band starts at 0.
        raise ConfigurationError(f"{self.name}: no band matches {points!r}")

    def get_band(self, name: str) -> TierBand:
        """Look up a band by name."""
        try:
            return self._by_name[name]
        except KeyError:
            raise KeyError(f"{self.name}: unknown band {name!r}") from None

    def next_band(self, band: TierBand) -> Optional[TierBand]:
        """Return the band directly above *band*, or None at the top."""
        index = self._index_of(band)
        if index + 1 < len(self._bands):
            return self._bands[index + 1]
        return None

    def next_lower_bound(self, band: TierBand) -> Optional[int]:
        nxt = self.next_band(band)
        return nxt.min_points if nxt is not None else None

    def classify_series(self, points: pd.Series) -> pd.Series:
        """Classify a whole column of point totals at once.

        Uses the same boundary rule as :meth:`classify` (bins are closed
        on the left). Returns a Series of band names aligned with *points*.
        """
        values = require_finite_series(points, f"{self.name} points")

        edges = [band.min_points for band in self._bands] + [math.inf]
        labels = [band.name for band in self._bands]
        names = pd.cut(values, bins=edges, right=False, labels=labels)
        return names.astype(str)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _index_of(self, band: TierBand) -> int:
        for i, candidate in enumerate(self._bands):
            if candidate == band:
                return i
        raise KeyError(f"{self.name}: band {band.name!r} is not in this table")

    def _validate(self) -> None:
        """Check contiguity, monotonicity and coverage of ``[0, +inf)``."""
        errors: List[str] = []
        bands = self._bands

        if not bands:
            raise ConfigurationError(f"{self.name}: tier table has no bands")

        # Bounds are compared below, so bad types are reported on their own.
        for band in bands:
            if not _is_boundary(band.min_points):
                errors.append(f"band {band.name!r} min_points {band.min_points!r} is not an integer")
            if not (band.max_points == math.inf or _is_boundary(band.max_points)):
                errors.append(f"band {band.name!r} max_points {band.max_points!r} is not an integer")
        if errors:
            raise ConfigurationError(f"{self.name}: " + "; ".join(errors))

        names = [band.name for band in bands]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            errors.append(f"duplicate band names {duplicates}")

        if bands[0].min_points != 0:
            errors.append(
                f"lowest band {bands[0].name!r} must start at 0 "
                f"(starts at {bands[0].min_points})"
            )

        for band in bands:
            if band.min_points < 0:
                errors.append(f"band {band.name!r} has negative min_points")
            if band.max_points < band.min_points:
                errors.append(
                    f"band {band.name!r} ends ({band.max_points}) "
                    f"before it starts ({band.min_points})"
                )

        for lower, upper in zip(bands, bands[1:]):
            if lower.is_unbounded:
                errors.append(f"only the top band may be unbounded ({lower.name!r})")
            elif upper.min_points != lower.max_points + 1:
                kind = "gap" if upper.min_points > lower.max_points + 1 else "overlap"
                errors.append(
                    f"{kind} between {lower.name!r} (max {lower.max_points}) "
                    f"and {upper.name!r} (min {upper.min_points})"
                )

        if not bands[-1].is_unbounded:
            errors.append(f"top band {bands[-1].name!r} must be unbounded")

        if errors:
            raise ConfigurationError(f"{self.name}: " + "; ".join(errors))

        logger.debug("Validated tier table %r with %d bands", self.name, len(bands))
