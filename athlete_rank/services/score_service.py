"""Score aggregation shared by the leaderboard and athlete summaries."""

import math
from typing import Iterable

from athlete_rank.models import ResultRecord, ScoreAggregate


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding towards +infinity."""
    return math.floor(value + 0.5)


def aggregate_scores(results: Iterable[ResultRecord]) -> dict[str, ScoreAggregate]:
    """
    Reduce results into one ScoreAggregate per athlete.
    
    Every athlete id present in ``results`` appears exactly once; athletes
    without results never appear. Scores that failed coercion were already
    turned into 0 by ResultRecord, so they still count as a test.
    
    Returns:
        dict mapping athlete id to its aggregate
    """
    totals: dict[str, float] = {}
    counts: dict[str, int] = {}
    
    for result in results:
        totals[result.athleteId] = totals.get(result.athleteId, 0.0) + result.score
        counts[result.athleteId] = counts.get(result.athleteId, 0) + 1
    
    return {
        athlete_id: ScoreAggregate(
            averageScore=total / counts[athlete_id],
            totalScore=total,
            testsCount=counts[athlete_id],
        )
        for athlete_id, total in totals.items()
    }
