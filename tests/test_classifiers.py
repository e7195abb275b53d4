"""Tests for the volunteer rank, community tier and level classifiers."""

import pandas as pd
import pytest

from src.tiers.classifiers import (
    COMMUNITY_TIER_TABLE,
    VOLUNTEER_RANK_TABLE,
    CommunityTierClassifier,
    LevelClassifier,
    RankClassifier,
    TierClassifier,
)
from src.tiers.config import LEVEL_THRESHOLDS
from src.validation import ConfigurationError, InvalidInputError


# ── Volunteer ranks ──────────────────────────────────────────────────

class TestRankClassifier:
    @pytest.mark.parametrize(
        "points, expected",
        [
            (0, "Beginner"),
            (499, "Beginner"),
            (500, "Contributor"),
            (1499, "Contributor"),
            (1500, "Leader"),
            (2999, "Leader"),
            (3000, "Champion"),
            (4999, "Champion"),
            (5000, "Legend"),
            (1_000_000, "Legend"),
        ],
    )
    def test_rank_boundaries(self, rank_classifier, points, expected):
        assert rank_classifier.classify(points).name == expected

    def test_boundary_law(self, rank_classifier):
        """classify(b - 1) is the lower band and classify(b) the upper one."""
        bands = VOLUNTEER_RANK_TABLE.bands
        for lower, upper in zip(bands, bands[1:]):
            b = upper.min_points
            assert rank_classifier.classify(b - 1) == lower
            assert rank_classifier.classify(b) == upper

    def test_display_metadata(self, rank_classifier):
        legend = rank_classifier.classify(5000)
        assert legend.color == "#ef4444"
        assert legend.icon == "🔴"
        assert legend.is_unbounded

    def test_negative_points_rejected(self, rank_classifier):
        with pytest.raises(InvalidInputError):
            rank_classifier.classify(-1)

    def test_next_band(self, rank_classifier):
        beginner = rank_classifier.classify(0)
        assert rank_classifier.next_band(beginner).name == "Contributor"
        assert rank_classifier.next_band(rank_classifier.classify(5000)) is None

    def test_progress(self, rank_classifier):
        state = rank_classifier.progress(1000)
        assert state.lower_bound == 500
        assert state.upper_bound == 1500
        assert state.percentage == pytest.approx(50.0)

    def test_injected_table(self, small_table):
        classifier = RankClassifier(small_table)
        assert classifier.classify(10).name == "Mid"

    def test_classify_series(self, rank_classifier):
        result = rank_classifier.classify_series(pd.Series([0, 500, 5000]))
        assert result.tolist() == ["Beginner", "Contributor", "Legend"]


# ── Community tiers ──────────────────────────────────────────────────

class TestCommunityTierClassifier:
    @pytest.mark.parametrize(
        "points, expected",
        [
            (0, "Bronze"),
            (999, "Bronze"),
            (1000, "Silver"),
            (2499, "Silver"),
            (2500, "Gold"),
            (4999, "Gold"),
            (5000, "Platinum"),
            (9999, "Platinum"),
            (10000, "Diamond"),
            (250_000, "Diamond"),
        ],
    )
    def test_tier_boundaries(self, community_classifier, points, expected):
        assert community_classifier.classify(points).name == expected

    def test_boundary_law(self, community_classifier):
        bands = COMMUNITY_TIER_TABLE.bands
        for lower, upper in zip(bands, bands[1:]):
            b = upper.min_points
            assert community_classifier.classify(b - 1) == lower
            assert community_classifier.classify(b) == upper

    def test_every_tier_has_benefits(self):
        for band in COMMUNITY_TIER_TABLE:
            assert band.benefits, f"{band.name} should list benefits"

    def test_tables_are_independent(self, rank_classifier, community_classifier):
        assert rank_classifier.table is not community_classifier.table
        assert community_classifier.classify(1000).name == "Silver"
        assert rank_classifier.classify(1000).name == "Contributor"

    def test_top_tier_progress_is_maxed(self, community_classifier):
        state = community_classifier.progress(12_000)
        assert state.is_max_tier
        assert state.percentage == 100.0


# ── Levels ───────────────────────────────────────────────────────────

class TestLevelClassifier:
    @pytest.mark.parametrize("level, threshold", sorted(LEVEL_THRESHOLDS.items()))
    def test_level_starts_at_threshold(self, level_classifier, level, threshold):
        assert level_classifier.level_for(threshold) == level
        if threshold > 0:
            assert level_classifier.level_for(threshold - 1) == level - 1

    def test_max_level(self, level_classifier):
        assert level_classifier.max_level == 10
        assert level_classifier.level_for(10**9) == 10

    def test_level_progress(self, level_classifier):
        state = level_classifier.progress(6250)
        # Level 5 spans 5000 -> 7500
        assert state.lower_bound == 5000
        assert state.upper_bound == 7500
        assert state.display_percentage == 50

    def test_top_level_is_maxed(self, level_classifier):
        state = level_classifier.progress(30_000)
        assert state.is_max_tier
        assert state.points_to_next is None


# ── Base classifier ──────────────────────────────────────────────────

class TestTierClassifier:
    def test_without_table_rejected(self):
        with pytest.raises(ConfigurationError, match="no default table"):
            TierClassifier()

    def test_with_injected_table(self, small_table):
        classifier = TierClassifier(small_table)
        assert classifier.classify(10).name == "Mid"

    def test_subclass_without_default_rejected(self):
        class Unconfigured(TierClassifier):
            pass

        with pytest.raises(ConfigurationError, match="Unconfigured"):
            Unconfigured()
