from .result import ResultRecord, parse_score, coerce_score
from .identity import AccountRecord, ProfileRecord, IdentityRecord
from .leaderboard import LeaderboardView, ScoreAggregate, LeaderboardEntry
from .summary import Badge, TrendPoint, AthleteSummary, AthleteProfileResponse

__all__ = [
    "ResultRecord",
    "parse_score",
    "coerce_score",
    "AccountRecord",
    "ProfileRecord",
    "IdentityRecord",
    "LeaderboardView",
    "ScoreAggregate",
    "LeaderboardEntry",
    "Badge",
    "TrendPoint",
    "AthleteSummary",
    "AthleteProfileResponse",
]
