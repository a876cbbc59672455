"""Leaderboard service for ranking athletes by average score."""

import asyncio
import logging
from typing import Iterable, Mapping, Optional, Sequence, Union

from athlete_rank.datasources import DataSource
from athlete_rank.models import (
    AccountRecord,
    LeaderboardEntry,
    LeaderboardView,
    ProfileRecord,
    ResultRecord,
)
from .identity_service import DEFAULT_AVATAR, resolve_identity
from .score_service import aggregate_scores, round_half_up

logger = logging.getLogger(__name__)

DEFAULT_LEADERBOARD_VIEW = LeaderboardView.DISTRICT


def parse_view(
    view: Union[LeaderboardView, str, None],
    default: Union[LeaderboardView, str] = DEFAULT_LEADERBOARD_VIEW,
) -> LeaderboardView:
    """
    Resolve a requested view.
    
    A missing (or empty) view falls back to ``default``; a view that is
    not recognised shows everything, like ``global``.
    """
    if not view:
        view = default
    if isinstance(view, LeaderboardView):
        return view
    try:
        return LeaderboardView(view)
    except ValueError:
        logger.debug(f"Unrecognised leaderboard view {view!r}, using global")
        return LeaderboardView.GLOBAL


def filter_by_view(
    entries: Sequence[LeaderboardEntry],
    view: LeaderboardView,
) -> list[LeaderboardEntry]:
    """Keep the entries that have the location field the view groups by."""
    if view == LeaderboardView.DISTRICT:
        return [e for e in entries if e.district]
    elif view == LeaderboardView.STATE:
        return [e for e in entries if e.state]
    return list(entries)


def rank_entries(entries: Sequence[LeaderboardEntry]) -> list[LeaderboardEntry]:
    """
    Order entries and assign 1-based ranks.
    
    Sorted by score descending, then athlete id ascending so equal scores
    always come out in the same order. Ties do not share a rank.
    """
    ordered = sorted(entries, key=lambda e: (-e.score, e.athleteId))
    return [
        entry.model_copy(update={"rank": i + 1})
        for i, entry in enumerate(ordered)
    ]


def build_leaderboard(
    results: Iterable[ResultRecord],
    accounts: Mapping[str, Optional[AccountRecord]],
    profiles: Mapping[str, Optional[ProfileRecord]],
    view: Union[LeaderboardView, str, None] = None,
    default_view: Union[LeaderboardView, str] = DEFAULT_LEADERBOARD_VIEW,
    default_image: str = DEFAULT_AVATAR,
) -> list[LeaderboardEntry]:
    """
    Generate a leaderboard from the full result set.
    
    Args:
        results: Every submitted result
        accounts: Account record per athlete id (missing ids are allowed)
        profiles: Profile record per athlete id (missing ids are allowed)
        view: global, state or district; None uses ``default_view``
        default_view: View applied when no view is requested
        default_image: Avatar used when neither record has an image
        
    Returns:
        List of LeaderboardEntry sorted by rank (1 = best), ranked after
        the view filter
    """
    resolved_view = parse_view(view, default_view)
    aggregates = aggregate_scores(results)
    
    entries = []
    for athlete_id, aggregate in aggregates.items():
        identity = resolve_identity(
            accounts.get(athlete_id),
            profiles.get(athlete_id),
            default_image=default_image,
        )
        entries.append(LeaderboardEntry(
            rank=0,
            athleteId=athlete_id,
            name=identity.name,
            state=identity.state,
            district=identity.district,
            imageUrl=identity.imageUrl,
            score=round_half_up(aggregate.averageScore),
            testsCount=aggregate.testsCount,
        ))
    
    # Rank over what the view actually shows
    return rank_entries(filter_by_view(entries, resolved_view))


class LeaderboardService:
    """Service for generating athlete leaderboards."""

    def __init__(
        self,
        datasource: DataSource,
        default_view: Union[LeaderboardView, str] = DEFAULT_LEADERBOARD_VIEW,
        default_image: str = DEFAULT_AVATAR,
    ):
        self.datasource = datasource
        self.default_view = default_view
        self.default_image = default_image

    async def get_leaderboard(
        self,
        view: Union[LeaderboardView, str, None] = None,
    ) -> list[LeaderboardEntry]:
        """
        Fetch every result and rank the athletes that submitted them.
        
        Account and profile lookups for the athletes run concurrently; the
        ranking starts once all of them have completed.
        """
        results = await self.datasource.fetch_results()
        athlete_ids = sorted({r.athleteId for r in results})
        
        accounts, profiles = await asyncio.gather(
            asyncio.gather(*(self.datasource.fetch_account(a) for a in athlete_ids)),
            asyncio.gather(*(self.datasource.fetch_profile(a) for a in athlete_ids)),
        )
        
        logger.info(f"Building leaderboard from {len(results)} results for {len(athlete_ids)} athletes")
        return build_leaderboard(
            results=results,
            accounts=dict(zip(athlete_ids, accounts)),
            profiles=dict(zip(athlete_ids, profiles)),
            view=view,
            default_view=self.default_view,
            default_image=self.default_image,
        )
