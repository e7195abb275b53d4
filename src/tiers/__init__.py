from src.tiers.classifiers import (
    COMMUNITY_TIER_TABLE,
    LEVEL_TABLE,
    VOLUNTEER_RANK_TABLE,
    CommunityTierClassifier,
    LevelClassifier,
    RankClassifier,
)
from src.tiers.progress import ProgressCalculator, ProgressState
from src.tiers.table_loader import load_tier_tables, save_tier_tables
from src.tiers.tier_table import TierBand, TierTable

__all__ = [
    "COMMUNITY_TIER_TABLE",
    "CommunityTierClassifier",
    "LEVEL_TABLE",
    "LevelClassifier",
    "ProgressCalculator",
    "ProgressState",
    "RankClassifier",
    "TierBand",
    "TierTable",
    "VOLUNTEER_RANK_TABLE",
    "load_tier_tables",
    "save_tier_tables",
]
