"""Positional leaderboard ranking for paginated results.

The upstream query sorts by the metric (descending) and returns one page.
This module only turns page positions into global rank numbers::

    computed_rank = (page - 1) * limit + index_within_page + 1

Equal metric values still get distinct, sequential ranks in the order the
upstream sort produced.
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional

import pandas as pd

from src.leaderboard.config import (
    DEFAULT_ID_FIELD,
    DEFAULT_METRIC_FIELD,
    MAX_PAGE_LIMIT,
)
from src.tiers.classifiers import TierClassifier
from src.tiers.tier_table import TierBand
from src.validation import (
    InvalidInputError,
    require_finite,
    require_finite_series,
    require_limit,
    require_page,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LeaderboardEntry:
    """A single ranked row of a leaderboard page."""

    id: str
    metric_value: float
    computed_rank: int
    tier: Optional[TierBand] = None


@dataclass(frozen=True)
class PaginationMeta:
    """Pagination details for a leaderboard query."""

    total: int
    page: int
    limit: int
    total_pages: int
    skip: int

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1


class LeaderboardRanker:
    """Assigns global rank numbers to a pre-sorted leaderboard page.

    Records may be mappings or plain objects; ``id_field`` and
    ``metric_field`` name the keys/attributes to read. When a classifier
    is given each entry also carries its tier band.
    """

    def __init__(
        self,
        id_field: str = DEFAULT_ID_FIELD,
        metric_field: str = DEFAULT_METRIC_FIELD,
        classifier: Optional[TierClassifier] = None,
        max_limit: int = MAX_PAGE_LIMIT,
    ):
        self.id_field = id_field
        self.metric_field = metric_field
        self.classifier = classifier
        self.max_limit = max_limit

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def rank(
        self,
        page_entries: Iterable[Any],
        page: int,
        limit: int,
    ) -> List[LeaderboardEntry]:
        """Attach ``computed_rank`` to every entry, keeping their order.

        Raises:
            InvalidInputError: If page/limit are invalid, the page holds
                more than *limit* entries, or a metric is not finite.
        """
        page, limit = self._check_paging(page, limit)
        entries = list(page_entries)
        if len(entries) > limit:
            raise InvalidInputError(
                f"Page holds {len(entries)} entries but limit is {limit}"
            )

        offset = (page - 1) * limit
        ranked: List[LeaderboardEntry] = []
        for index, record in enumerate(entries):
            metric = require_finite(self._read(record, self.metric_field), self.metric_field)
            ranked.append(
                LeaderboardEntry(
                    id=str(self._read(record, self.id_field)),
                    metric_value=metric,
                    computed_rank=offset + index + 1,
                    tier=self.classifier.classify(metric) if self.classifier else None,
                )
            )

        self._warn_if_unsorted([e.metric_value for e in ranked], page)
        return ranked

    def rank_frame(self, page_df: pd.DataFrame, page: int, limit: int) -> pd.DataFrame:
        """DataFrame variant of :meth:`rank`.

        Returns a copy of *page_df* with a ``computed_rank`` column (and a
        ``tier`` column of band names when a classifier is configured).
        Row order is preserved.

        Raises:
            InvalidInputError: If page/limit are invalid, the frame holds
                more than *limit* rows, or a metric is NaN, infinite or
                not numeric.
        """
        page, limit = self._check_paging(page, limit)
        if len(page_df) > limit:
            raise InvalidInputError(
                f"Page holds {len(page_df)} rows but limit is {limit}"
            )
        if self.metric_field not in page_df.columns:
            raise KeyError(f"Leaderboard frame has no {self.metric_field!r} column")
        metrics = require_finite_series(
            page_df[self.metric_field], self.metric_field, allow_negative=True
        )

        out = page_df.copy()
        offset = (page - 1) * limit
        out["computed_rank"] = range(offset + 1, offset + len(out) + 1)
        if self.classifier is not None:
            out["tier"] = self.classifier.classify_series(out[self.metric_field])

        self._warn_if_unsorted(metrics.tolist(), page)
        return out

    def paginate(self, total: int, page: int, limit: int) -> PaginationMeta:
        """Pagination metadata for a leaderboard of *total* entries."""
        page, limit = self._check_paging(page, limit)
        if not isinstance(total, int) or isinstance(total, bool) or total < 0:
            raise InvalidInputError(f"total must be a non-negative integer, got {total!r}")
        return PaginationMeta(
            total=total,
            page=page,
            limit=limit,
            total_pages=math.ceil(total / limit),
            skip=(page - 1) * limit,
        )

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _check_paging(self, page, limit):
        return require_page(page), require_limit(limit, self.max_limit)

    @staticmethod
    def _read(record: Any, field_name: str):
        if isinstance(record, Mapping):
            if field_name not in record:
                raise KeyError(f"Leaderboard record has no {field_name!r} field: {record!r}")
            return record[field_name]
        try:
            return getattr(record, field_name)
        except AttributeError:
            raise KeyError(
                f"Leaderboard record has no {field_name!r} field: {record!r}"
            ) from None

    @staticmethod
    def _warn_if_unsorted(metrics: List[float], page: int) -> None:
        """Positions are only meaningful on a descending page; never re-sort."""
        for i in range(1, len(metrics)):
            if metrics[i] > metrics[i - 1]:
                logger.warning(
                    "Leaderboard page %d is not sorted descending at position %d "
                    "(%s after %s); ranks follow the given order",
                    page, i + 1, metrics[i], metrics[i - 1],
                )
                return
