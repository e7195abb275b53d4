"""Tests for src.leaderboard.ranker."""

import logging
import math
from types import SimpleNamespace

import pandas as pd
import pytest

from src.leaderboard.ranker import LeaderboardRanker
from src.tiers.classifiers import CommunityTierClassifier, RankClassifier
from src.validation import InvalidInputError


# ── Helpers ──────────────────────────────────────────────────────────

def _make_page(*metrics):
    return [{"id": f"user{i}", "metric_value": m} for i, m in enumerate(metrics)]


# ── Positional ranking ───────────────────────────────────────────────

class TestRank:
    def test_first_page(self, ranker):
        ranked = ranker.rank(_make_page(900, 800, 700), page=1, limit=10)
        assert [e.computed_rank for e in ranked] == [1, 2, 3]

    def test_second_page_offsets_ranks(self, ranker):
        ranked = ranker.rank(_make_page(300, 200, 100), page=2, limit=10)
        assert [e.computed_rank for e in ranked] == [11, 12, 13]

    def test_order_and_ids_preserved(self, ranker):
        ranked = ranker.rank(_make_page(5, 4), page=3, limit=2)
        assert [e.id for e in ranked] == ["user0", "user1"]
        assert [e.metric_value for e in ranked] == [5, 4]
        assert [e.computed_rank for e in ranked] == [5, 6]

    def test_ties_get_sequential_ranks(self, ranker):
        ranked = ranker.rank(_make_page(100, 100, 100), page=1, limit=20)
        assert [e.computed_rank for e in ranked] == [1, 2, 3]

    def test_empty_page(self, ranker):
        assert ranker.rank([], page=4, limit=20) == []

    def test_does_not_sort(self, ranker, caplog):
        with caplog.at_level(logging.WARNING, logger="src.leaderboard.ranker"):
            ranked = ranker.rank(_make_page(10, 50), page=1, limit=10)
        assert [e.metric_value for e in ranked] == [10, 50]
        assert [e.computed_rank for e in ranked] == [1, 2]
        assert "not sorted descending" in caplog.text

    def test_object_records(self):
        ranker = LeaderboardRanker(id_field="user_id", metric_field="total_points")
        records = [SimpleNamespace(user_id=7, total_points=1200)]
        ranked = ranker.rank(records, page=1, limit=5)
        assert ranked[0].id == "7"
        assert ranked[0].metric_value == 1200

    def test_attaches_tier(self):
        ranker = LeaderboardRanker(metric_field="metric_value", classifier=RankClassifier())
        ranked = ranker.rank(_make_page(5000, 499), page=1, limit=10)
        assert [e.tier.name for e in ranked] == ["Legend", "Beginner"]

    def test_no_tier_without_classifier(self, ranker):
        assert ranker.rank(_make_page(1), page=1, limit=1)[0].tier is None

    def test_idempotent(self, ranker):
        page = _make_page(3, 2, 1)
        assert ranker.rank(page, 2, 5) == ranker.rank(page, 2, 5)


# ── Invalid input ────────────────────────────────────────────────────

class TestRankErrors:
    @pytest.mark.parametrize("page", [0, -1, 1.5, "1", True])
    def test_bad_page(self, ranker, page):
        with pytest.raises(InvalidInputError):
            ranker.rank(_make_page(1), page=page, limit=10)

    @pytest.mark.parametrize("limit", [0, -5, 101, 2.0])
    def test_bad_limit(self, ranker, limit):
        with pytest.raises(InvalidInputError):
            ranker.rank(_make_page(1), page=1, limit=limit)

    def test_page_larger_than_limit(self, ranker):
        with pytest.raises(InvalidInputError, match="limit is 2"):
            ranker.rank(_make_page(3, 2, 1), page=1, limit=2)

    def test_non_finite_metric(self, ranker):
        with pytest.raises(InvalidInputError):
            ranker.rank(_make_page(float("nan")), page=1, limit=10)

    def test_missing_field(self, ranker):
        with pytest.raises(KeyError, match="metric_value"):
            ranker.rank([{"id": "a"}], page=1, limit=10)


# ── DataFrame pages ──────────────────────────────────────────────────

class TestRankFrame:
    def test_adds_rank_column(self, ranker):
        df = pd.DataFrame({"id": ["a", "b", "c"], "metric_value": [30, 20, 10]})
        result = ranker.rank_frame(df, page=2, limit=10)
        assert result["computed_rank"].tolist() == [11, 12, 13]
        assert "computed_rank" not in df.columns

    def test_adds_tier_column(self):
        ranker = LeaderboardRanker(
            metric_field="community_points", classifier=CommunityTierClassifier()
        )
        df = pd.DataFrame({"community_points": [12000, 2500, 999]}, index=[5, 6, 7])
        result = ranker.rank_frame(df, page=1, limit=20)
        assert result["tier"].tolist() == ["Diamond", "Gold", "Bronze"]
        assert result["computed_rank"].tolist() == [1, 2, 3]

    def test_missing_metric_column(self, ranker):
        with pytest.raises(KeyError):
            ranker.rank_frame(pd.DataFrame({"id": ["a"]}), page=1, limit=10)

    def test_too_many_rows(self, ranker):
        df = pd.DataFrame({"metric_value": range(5)})
        with pytest.raises(InvalidInputError):
            ranker.rank_frame(df, page=1, limit=4)

    @pytest.mark.parametrize("bad", [float("nan"), math.inf, -math.inf, "lots", None])
    def test_rejects_invalid_metric(self, ranker, bad):
        df = pd.DataFrame({"id": ["a", "b"], "metric_value": [30, bad]})
        with pytest.raises(InvalidInputError, match="metric_value"):
            ranker.rank_frame(df, page=1, limit=10)

    def test_negative_metric_allowed(self, ranker):
        df = pd.DataFrame({"id": ["a", "b"], "metric_value": [5, -5]})
        assert ranker.rank_frame(df, page=1, limit=10)["computed_rank"].tolist() == [1, 2]


# ── Pagination ───────────────────────────────────────────────────────

class TestPaginate:
    def test_total_pages(self, ranker):
        meta = ranker.paginate(total=45, page=2, limit=20)
        assert meta.total_pages == 3
        assert meta.skip == 20
        assert meta.has_next is True
        assert meta.has_previous is True

    def test_exact_multiple(self, ranker):
        assert ranker.paginate(total=40, page=1, limit=20).total_pages == 2

    def test_empty_leaderboard(self, ranker):
        meta = ranker.paginate(total=0, page=1, limit=20)
        assert meta.total_pages == 0
        assert meta.has_next is False
        assert meta.has_previous is False

    def test_negative_total(self, ranker):
        with pytest.raises(InvalidInputError):
            ranker.paginate(total=-1, page=1, limit=20)
