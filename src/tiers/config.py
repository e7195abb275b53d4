from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Optional JSON override for the tier tables (see table_loader)
CONFIG_DIR = PROJECT_ROOT / "config"
TIER_TABLES_FILE = CONFIG_DIR / "tier_tables.json"

# Volunteer ranks, lowest first. max_points None means unbounded.
VOLUNTEER_RANK_BANDS = [
    {"name": "Beginner", "min_points": 0, "max_points": 499, "color": "#10b981", "icon": "🟢"},
    {"name": "Contributor", "min_points": 500, "max_points": 1499, "color": "#3b82f6", "icon": "🔵"},
    {"name": "Leader", "min_points": 1500, "max_points": 2999, "color": "#8b5cf6", "icon": "🟣"},
    {"name": "Champion", "min_points": 3000, "max_points": 4999, "color": "#f59e0b", "icon": "🟡"},
    {"name": "Legend", "min_points": 5000, "max_points": None, "color": "#ef4444", "icon": "🔴"},
]

# Community tiers, lowest first
COMMUNITY_TIER_BANDS = [
    {
        "name": "Bronze", "min_points": 0, "max_points": 999, "color": "#cd7f32",
        "benefits": [
            "Community listing visibility",
            "Member engagement tracking",
            "Basic event support",
        ],
    },
    {
        "name": "Silver", "min_points": 1000, "max_points": 2499, "color": "#c0c0c0",
        "benefits": [
            "All Bronze benefits",
            "Priority community features",
            "Enhanced analytics",
            "Community badge display",
        ],
    },
    {
        "name": "Gold", "min_points": 2500, "max_points": 4999, "color": "#ffd700",
        "benefits": [
            "All Silver benefits",
            "Featured community listing",
            "Advanced reporting tools",
            "Custom community page theme",
        ],
    },
    {
        "name": "Platinum", "min_points": 5000, "max_points": 9999, "color": "#e5e4e2",
        "benefits": [
            "All Gold benefits",
            "Premium support access",
            "Community ambassador program",
            "Exclusive networking events",
        ],
    },
    {
        "name": "Diamond", "min_points": 10000, "max_points": None, "color": "#b9f2ff",
        "benefits": [
            "All Platinum benefits",
            "Dedicated account manager",
            "Custom integrations",
            "Speaking opportunities",
            "Featured case study",
        ],
    },
]

# Volunteer level -> minimum cumulative points
LEVEL_THRESHOLDS = {
    1: 0,
    2: 500,
    3: 1500,
    4: 3000,
    5: 5000,
    6: 7500,
    7: 10000,
    8: 15000,
    9: 20000,
    10: 25000,
}

LEVEL_COLOR = "#6b7280"  # Levels carry no colour of their own
