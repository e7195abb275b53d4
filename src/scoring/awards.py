"""Point-award schedule for volunteers and communities.

Pure computations only: each method returns a :class:`PointsAward`
describing what would be credited. Storing awards, de-duplicating them and
notifying anyone are the caller's job.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from src.scoring.breakdown import (
    EventScoringConfig,
    PointsBreakdown,
    PointsBreakdownCalculator,
)
from src.scoring.config import COMMUNITY_POINTS_CONFIG, POINTS_CONFIG
from src.tiers.classifiers import LevelClassifier, RankClassifier
from src.tiers.tier_table import TierBand
from src.validation import require_points

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PointsAward:
    """Points credited for a single activity."""

    points: float
    award_type: str
    description: str
    breakdown: Optional[PointsBreakdown] = None


@dataclass(frozen=True)
class AwardOutcome:
    """Effect of crediting an award to a running total."""

    previous_points: float
    new_points: float
    previous_level: int
    new_level: int
    rank: TierBand

    @property
    def leveled_up(self) -> bool:
        return self.new_level > self.previous_level


class AwardSchedule:
    """Looks up and computes the points each activity is worth."""

    def __init__(
        self,
        volunteer_points: Optional[Dict[str, float]] = None,
        community_points: Optional[Dict[str, float]] = None,
        rank_classifier: Optional[RankClassifier] = None,
        level_classifier: Optional[LevelClassifier] = None,
    ):
        self.volunteer_points = volunteer_points or POINTS_CONFIG
        self.community_points = community_points or COMMUNITY_POINTS_CONFIG
        self.rank_classifier = rank_classifier or RankClassifier()
        self.level_classifier = level_classifier or LevelClassifier()
        self.breakdown_calculator = PointsBreakdownCalculator(
            EventScoringConfig(
                base_points=self.volunteer_points["EVENT_PARTICIPATED"],
                hourly_multiplier=self.volunteer_points["HOURS_VOLUNTEERED"],
            )
        )

    # ------------------------------------------------------------------
    # Volunteer awards
    # ------------------------------------------------------------------

    def event_participation(
        self,
        hours_contributed=0,
        config: Optional[EventScoringConfig] = None,
    ) -> PointsAward:
        """Base participation points plus the hourly bonus."""
        breakdown = self.breakdown_calculator.compute_for_event(hours_contributed, config)
        description = f"Participated in event and earned {breakdown.total} points"
        if breakdown.hours_contributed > 0:
            description += f" ({breakdown.hours_contributed} hours)"
        return PointsAward(
            points=breakdown.total,
            award_type="event_participation",
            description=description,
            breakdown=breakdown,
        )

    def event_creation(self) -> PointsAward:
        return self._volunteer_award("EVENT_CREATED", "event_creation", "Created event")

    def community_creation(self) -> PointsAward:
        return self._volunteer_award(
            "COMMUNITY_CREATED", "community_creation", "Created community"
        )

    def community_joined(self) -> PointsAward:
        return self._volunteer_award("COMMUNITY_JOINED", "community_joined", "Joined community")

    def badge_earned(self) -> PointsAward:
        return self._volunteer_award("BADGE_EARNED", "badge_earned", "Earned badge")

    # ------------------------------------------------------------------
    # Community awards
    # ------------------------------------------------------------------

    def member_joined(self) -> PointsAward:
        return PointsAward(
            points=self.community_points["MEMBER_JOINED"],
            award_type="member_joined",
            description="New member joined community",
        )

    def community_event_created(self) -> PointsAward:
        return PointsAward(
            points=self.community_points["EVENT_CREATED"],
            award_type="event_created",
            description="Event created in community",
        )

    def verification_bonus(self) -> PointsAward:
        return PointsAward(
            points=self.community_points["VERIFICATION_BONUS"],
            award_type="verification_bonus",
            description="Community verified by admin",
        )

    # ------------------------------------------------------------------
    # Applying awards
    # ------------------------------------------------------------------

    def apply_award(self, current_points, award: PointsAward) -> AwardOutcome:
        """Compute a volunteer's new total, level and rank after *award*.

        Raises:
            InvalidInputError: If *current_points* is negative or not finite.
        """
        require_points(current_points)
        new_points = current_points + award.points

        outcome = AwardOutcome(
            previous_points=current_points,
            new_points=new_points,
            previous_level=self.level_classifier.level_for(current_points),
            new_level=self.level_classifier.level_for(new_points),
            rank=self.rank_classifier.classify(new_points),
        )

        if outcome.leveled_up:
            logger.info(
                "%s award lifts %s -> %s points: level %d -> %d (%s)",
                award.award_type, current_points, new_points,
                outcome.previous_level, outcome.new_level, outcome.rank.name,
            )
        return outcome

    def _volunteer_award(self, key: str, award_type: str, action: str) -> PointsAward:
        points = self.volunteer_points[key]
        return PointsAward(
            points=points,
            award_type=award_type,
            description=f"{action} and earned {points} points",
        )
