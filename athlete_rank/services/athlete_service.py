"""Athlete service for per-athlete results, summaries and profiles."""

import asyncio
import logging
from typing import Optional

from athlete_rank.datasources import DataSource
from athlete_rank.models import AthleteProfileResponse, AthleteSummary, ResultRecord
from .identity_service import DEFAULT_AVATAR, resolve_identity
from .summary_service import summarize_athlete

logger = logging.getLogger(__name__)


class AthleteService:
    """Service for reporting on a single athlete."""

    def __init__(self, datasource: DataSource, default_image: str = DEFAULT_AVATAR):
        self.datasource = datasource
        self.default_image = default_image

    async def get_results(self, athlete_id: str) -> list[ResultRecord]:
        """Get the athlete's results, newest first."""
        return await self.datasource.fetch_results(athlete_id=athlete_id)

    async def get_summary(self, athlete_id: str) -> AthleteSummary:
        """Get summary statistics; an athlete without results gets the empty summary."""
        results = await self.get_results(athlete_id)
        return summarize_athlete(results)

    async def get_profile(self, athlete_id: str) -> Optional[AthleteProfileResponse]:
        """
        Get identity, raw records, results and summary for an athlete.
        
        Returns:
            AthleteProfileResponse, or None if the athlete has neither an
            account nor a profile
        """
        account, profile, results = await asyncio.gather(
            self.datasource.fetch_account(athlete_id),
            self.datasource.fetch_profile(athlete_id),
            self.get_results(athlete_id),
        )
        
        if account is None and profile is None:
            logger.info(f"No account or profile for athlete {athlete_id}")
            return None
        
        return AthleteProfileResponse(
            athleteId=athlete_id,
            identity=resolve_identity(account, profile, default_image=self.default_image),
            user=account,
            profile=profile,
            results=results,
            summary=summarize_athlete(results),
        )
