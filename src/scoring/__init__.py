from src.scoring.awards import AwardOutcome, AwardSchedule, PointsAward
from src.scoring.breakdown import (
    CategoryShare,
    EventScoringConfig,
    PointsBreakdown,
    PointsBreakdownCalculator,
    category_shares,
)

__all__ = [
    "AwardOutcome",
    "AwardSchedule",
    "CategoryShare",
    "EventScoringConfig",
    "PointsAward",
    "PointsBreakdown",
    "PointsBreakdownCalculator",
    "category_shares",
]
