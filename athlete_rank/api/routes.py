"""API routes for the ranking service."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from athlete_rank.config import Config
from athlete_rank.datasources import DataSource
from athlete_rank.models import (
    AthleteProfileResponse,
    AthleteSummary,
    LeaderboardEntry,
    ResultRecord,
)
from athlete_rank.services import AthleteService, LeaderboardService
from .dependencies import get_config, get_datasource, valid_athlete_id

router = APIRouter(prefix="/v1")


@router.get("/leaderboard", response_model=list[LeaderboardEntry])
async def get_leaderboard(
    view: Optional[str] = Query(
        None,
        description="Leaderboard view: global, state or district (default from config)",
        example="district"
    ),
    datasource: DataSource = Depends(get_datasource),
    config: Config = Depends(get_config),
) -> list[LeaderboardEntry]:
    """
    Get the leaderboard ranking athletes by average score.
    
    Returns ranked list: rank, athleteId, name, state, district, imageUrl, score, testsCount
    """
    service = LeaderboardService(
        datasource,
        default_view=config.default_leaderboard_view,
        default_image=config.default_avatar,
    )
    return await service.get_leaderboard(view=view)


@router.get("/results/{athlete_id}", response_model=list[ResultRecord])
async def get_results(
    athlete_id: str = Depends(valid_athlete_id),
    datasource: DataSource = Depends(get_datasource),
) -> list[ResultRecord]:
    """
    Get an athlete's submitted results, newest first.
    """
    service = AthleteService(datasource)
    return await service.get_results(athlete_id)


@router.get("/athletes/{athlete_id}/summary", response_model=AthleteSummary)
async def get_athlete_summary(
    athlete_id: str = Depends(valid_athlete_id),
    datasource: DataSource = Depends(get_datasource),
) -> AthleteSummary:
    """
    Get summary statistics for an athlete.
    
    Returns: badge, overallScore, bestScore, lastTestAt, trendSeries, yAxisDomain, distribution
    """
    service = AthleteService(datasource)
    return await service.get_summary(athlete_id)


@router.get("/athletes/{athlete_id}", response_model=AthleteProfileResponse)
async def get_athlete_profile(
    athlete_id: str = Depends(valid_athlete_id),
    datasource: DataSource = Depends(get_datasource),
    config: Config = Depends(get_config),
) -> AthleteProfileResponse:
    """
    Get identity, records, results and summary for an athlete's profile page.
    """
    service = AthleteService(datasource, default_image=config.default_avatar)
    profile = await service.get_profile(athlete_id)
    if profile is None:
        raise HTTPException(status_code=404, detail="User/Profile not found")
    return profile
