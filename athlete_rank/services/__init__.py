from .score_service import aggregate_scores, round_half_up
from .identity_service import resolve_identity
from .summary_service import summarize_athlete, badge_for
from athlete_rank.services.leaderboard_service import LeaderboardService, build_leaderboard
from athlete_rank.services.athlete_service import AthleteService

__all__ = [
    "aggregate_scores",
    "round_half_up",
    "resolve_identity",
    "summarize_athlete",
    "badge_for",
    "build_leaderboard",
    "LeaderboardService",
    "AthleteService",
]
