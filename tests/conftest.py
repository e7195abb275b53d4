"""Shared fixtures for the impact engine test suite."""

import pytest

from src.leaderboard.ranker import LeaderboardRanker
from src.scoring.breakdown import PointsBreakdownCalculator
from src.tiers.classifiers import (
    CommunityTierClassifier,
    LevelClassifier,
    RankClassifier,
)
from src.tiers.progress import ProgressCalculator
from src.tiers.tier_table import TierTable


# ------------------------------------------------------------------
# Lightweight factories – cheap to construct, no I/O
# ------------------------------------------------------------------

@pytest.fixture(scope="module")
def rank_classifier():
    return RankClassifier()


@pytest.fixture(scope="module")
def community_classifier():
    return CommunityTierClassifier()


@pytest.fixture(scope="module")
def level_classifier():
    return LevelClassifier()


@pytest.fixture(scope="module")
def progress_calculator():
    return ProgressCalculator()


@pytest.fixture(scope="module")
def breakdown_calculator():
    return PointsBreakdownCalculator()


@pytest.fixture
def ranker():
    return LeaderboardRanker(metric_field="metric_value")


@pytest.fixture(scope="module")
def small_table():
    """Three-band table used to test with an alternate schedule."""
    return TierTable.from_dicts(
        "small",
        [
            {"name": "Low", "min_points": 0, "max_points": 9, "color": "#111111"},
            {"name": "Mid", "min_points": 10, "max_points": 99, "color": "#222222"},
            {"name": "High", "min_points": 100, "max_points": None, "color": "#333333"},
        ],
    )
