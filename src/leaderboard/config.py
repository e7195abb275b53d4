# Pagination limits for leaderboard pages
DEFAULT_PAGE_LIMIT = 20
MAX_PAGE_LIMIT = 100

# Field names read from upstream leaderboard records
DEFAULT_ID_FIELD = "id"
DEFAULT_METRIC_FIELD = "total_points"
