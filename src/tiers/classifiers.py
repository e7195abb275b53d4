"""Volunteer rank, community tier and volunteer level classifiers.

The canonical tables are built once, at import, from ``src.tiers.config``.
Every classifier accepts an alternative :class:`TierTable` so tests and
callers with their own schedule can inject one.
"""

import logging
from typing import Optional

import pandas as pd

from src.tiers.config import (
    COMMUNITY_TIER_BANDS,
    LEVEL_COLOR,
    LEVEL_THRESHOLDS,
    VOLUNTEER_RANK_BANDS,
)
from src.tiers.progress import ProgressCalculator, ProgressState
from src.tiers.tier_table import TierBand, TierTable
from src.validation import ConfigurationError

logger = logging.getLogger(__name__)

VOLUNTEER_RANK_TABLE = TierTable.from_dicts("volunteer_ranks", VOLUNTEER_RANK_BANDS)
COMMUNITY_TIER_TABLE = TierTable.from_dicts("community_tiers", COMMUNITY_TIER_BANDS)
LEVEL_TABLE = TierTable.from_thresholds("levels", LEVEL_THRESHOLDS, color=LEVEL_COLOR)


class TierClassifier:
    """Maps cumulative points to a band of a single :class:`TierTable`."""

    default_table: Optional[TierTable] = None

    def __init__(self, table: Optional[TierTable] = None):
        if table is None:
            table = self.default_table
        if table is None:
            raise ConfigurationError(
                f"{type(self).__name__} has no default table; pass a TierTable"
            )
        self.table = table
        self._progress = ProgressCalculator()

    def classify(self, points) -> TierBand:
        band = self.table.classify(points)
        logger.debug("%s: %s points -> %s", self.table.name, points, band.name)
        return band

    def next_band(self, band: TierBand) -> Optional[TierBand]:
        return self.table.next_band(band)

    def progress(self, points) -> ProgressState:
        """Progress toward the band above the one *points* falls in."""
        return self._progress.progress_in_table(points, self.table)

    def classify_series(self, points: pd.Series) -> pd.Series:
        return self.table.classify_series(points)


class RankClassifier(TierClassifier):
    """Volunteer rank (Beginner .. Legend)."""

    default_table = VOLUNTEER_RANK_TABLE


class CommunityTierClassifier(TierClassifier):
    """Community tier (Bronze .. Diamond)."""

    default_table = COMMUNITY_TIER_TABLE


class LevelClassifier(TierClassifier):
    """Volunteer level (1 .. 10).

    Level bands are named after their number, so :meth:`level_for` simply
    converts the matched band's name back to an int.
    """

    default_table = LEVEL_TABLE

    def level_for(self, points) -> int:
        return int(self.classify(points).name)

    @property
    def max_level(self) -> int:
        return int(self.table.bands[-1].name)
