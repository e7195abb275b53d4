from src.leaderboard.ranker import LeaderboardEntry, LeaderboardRanker, PaginationMeta

__all__ = ["LeaderboardEntry", "LeaderboardRanker", "PaginationMeta"]
