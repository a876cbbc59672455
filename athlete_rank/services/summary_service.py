"""Athlete summary statistics for profile reporting."""

from collections import Counter
from typing import Iterable

from athlete_rank.models import AthleteSummary, Badge, ResultRecord, TrendPoint
from .score_service import round_half_up

GOLD_THRESHOLD = 80
SILVER_THRESHOLD = 60
DOMAIN_PADDING = 10
SCORE_FLOOR = 0
SCORE_CEILING = 100


def badge_for(overall_score: float) -> Badge:
    """Map an overall score to its tier; lower bounds are inclusive."""
    if overall_score >= GOLD_THRESHOLD:
        return Badge.GOLD
    elif overall_score >= SILVER_THRESHOLD:
        return Badge.SILVER
    return Badge.BRONZE


def summarize_athlete(results: Iterable[ResultRecord]) -> AthleteSummary:
    """
    Compute summary statistics over one athlete's results.
    
    Records are sorted by ``createdAt`` here, so ``trendSeries`` is oldest
    first and ``lastTestAt`` is the newest submission whichever way the
    caller fetched them. Results sharing a timestamp keep the reverse of
    their input order, as for a newest-first fetch.
    
    With no results the summary is Bronze, 0, domain [0, 100] and empty
    series.
    """
    # Input arrives newest first; reversing before the stable sort keeps
    # results that share a timestamp in submission order
    records = sorted(reversed(list(results)), key=lambda r: r.createdAt)
    if not records:
        return AthleteSummary()
    
    scores = [r.score for r in records]
    overall_score = round_half_up(sum(scores) / len(scores))
    
    distribution = Counter(r.exercise for r in records if r.exercise)
    
    return AthleteSummary(
        badge=badge_for(overall_score),
        overallScore=overall_score,
        bestScore=max(scores),
        lastTestAt=records[-1].createdAt,
        trendSeries=[
            TrendPoint(timestamp=r.createdAt, score=r.score)
            for r in records
        ],
        yAxisDomain=(
            max(SCORE_FLOOR, min(scores) - DOMAIN_PADDING),
            min(SCORE_CEILING, max(scores) + DOMAIN_PADDING),
        ),
        distribution=dict(distribution),
    )
