from .leaderboard import LeaderboardEntry, LeaderboardResponse, ErrorResponse

__all__ = [
    "LeaderboardEntry",
    "LeaderboardResponse",
    "ErrorResponse",
]
