# Points awarded to volunteers
POINTS_CONFIG = {
    "EVENT_CREATED": 100,
    "EVENT_PARTICIPATED": 50,
    "COMMUNITY_CREATED": 150,
    "COMMUNITY_JOINED": 10,
    "BADGE_EARNED": 200,
    "HOURS_VOLUNTEERED": 10,  # Per hour
}

# Points awarded to communities
COMMUNITY_POINTS_CONFIG = {
    "MEMBER_JOINED": 5,
    "EVENT_CREATED": 50,
    "VERIFICATION_BONUS": 500,
}

# Default per-event scoring parameters
DEFAULT_BASE_POINTS = POINTS_CONFIG["EVENT_PARTICIPATED"]
DEFAULT_HOURLY_MULTIPLIER = POINTS_CONFIG["HOURS_VOLUNTEERED"]
DEFAULT_BONUS_POINTS = 0

# Accumulated volunteer breakdown categories, in display order
VOLUNTEER_POINT_CATEGORIES = {
    "event_participation": "Event Participation",
    "event_creation": "Event Creation",
    "community_creation": "Community Creation",
    "hours_volunteered": "Hours Volunteered",
    "other": "Other",
}
