"""Build display-ready impact summaries for volunteers and communities.

Usage:
    python -m src.impact_summary volunteer <points> [tier_tables.json]
    python -m src.impact_summary community <points> [tier_tables.json]

Examples:
    python -m src.impact_summary volunteer 1200
    python -m src.impact_summary community 4800 config/tier_tables.json
"""

import json
import logging
import sys
from pathlib import Path
from typing import Dict, Optional

from src.formatting import format_points
from src.logging_config import setup_logging
from src.tiers.classifiers import (
    CommunityTierClassifier,
    LevelClassifier,
    RankClassifier,
)
from src.tiers.progress import ProgressState
from src.tiers.table_loader import load_tier_tables
from src.validation import InvalidInputError

logger = logging.getLogger(__name__)


def _progress_to_dict(progress: ProgressState) -> Dict:
    return {
        "lower_bound": progress.lower_bound,
        "upper_bound": progress.upper_bound,
        "percentage": progress.percentage,
        "display_percentage": progress.display_percentage,
        "points_into_band": progress.points_into_band,
        "points_required": progress.points_required,
        "points_to_next": progress.points_to_next,
        "is_max_tier": progress.is_max_tier,
    }


def volunteer_summary(
    points,
    rank_classifier: Optional[RankClassifier] = None,
    level_classifier: Optional[LevelClassifier] = None,
) -> Dict:
    """Rank, level and progress for a volunteer's cumulative points."""
    rank_classifier = rank_classifier or RankClassifier()
    level_classifier = level_classifier or LevelClassifier()

    rank = rank_classifier.classify(points)
    next_rank = rank_classifier.next_band(rank)
    level = level_classifier.level_for(points)

    return {
        "points": points,
        "formatted_points": format_points(points),
        "rank": {
            "name": rank.name,
            "color": rank.color,
            "icon": rank.icon,
            "next": next_rank.name if next_rank else None,
            "progress": _progress_to_dict(rank_classifier.progress(points)),
        },
        "level": {
            "current": level,
            "max": level_classifier.max_level,
            "progress": _progress_to_dict(level_classifier.progress(points)),
        },
    }


def community_summary(
    points,
    tier_classifier: Optional[CommunityTierClassifier] = None,
) -> Dict:
    """Tier, benefits and progress for a community's cumulative points."""
    tier_classifier = tier_classifier or CommunityTierClassifier()

    tier = tier_classifier.classify(points)
    next_tier = tier_classifier.next_band(tier)

    return {
        "points": points,
        "formatted_points": format_points(points),
        "tier": {
            "name": tier.name,
            "color": tier.color,
            "benefits": list(tier.benefits),
            "next": next_tier.name if next_tier else None,
            "progress": _progress_to_dict(tier_classifier.progress(points)),
        },
    }


def build_summary(kind: str, points, tables_file: Optional[Path] = None) -> Dict:
    """Dispatch to the volunteer or community summary.

    When *tables_file* is given its tables replace the built-in ones.
    """
    tables = load_tier_tables(tables_file) if tables_file else {}

    if kind == "volunteer":
        return volunteer_summary(
            points,
            RankClassifier(tables.get("volunteer_ranks")),
            LevelClassifier(tables.get("levels")),
        )
    if kind == "community":
        return community_summary(
            points, CommunityTierClassifier(tables.get("community_tiers"))
        )
    raise InvalidInputError(f"Unknown summary kind {kind!r}; use 'volunteer' or 'community'")


def _parse_points(raw: str):
    try:
        return int(raw)
    except ValueError:
        return float(raw)


if __name__ == "__main__":
    setup_logging()

    if len(sys.argv) < 3:
        print(__doc__)
        sys.exit(2)

    kind = sys.argv[1]
    tables_file = Path(sys.argv[3]) if len(sys.argv) > 3 else None

    try:
        summary = build_summary(kind, _parse_points(sys.argv[2]), tables_file)
        print(json.dumps(summary, indent=2, ensure_ascii=False))
    except Exception:
        logger.exception("Summary failed")
        sys.exit(1)
