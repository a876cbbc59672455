"""Athlete summary models used for profile reporting."""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from .identity import AccountRecord, IdentityRecord, ProfileRecord
from .result import ResultRecord


class Badge(str, Enum):
    """Performance tier derived from the overall score."""
    BRONZE = "Bronze"
    SILVER = "Silver"
    GOLD = "Gold"


class TrendPoint(BaseModel):
    """One point of an athlete's score trend."""
    model_config = ConfigDict(populate_by_name=True)
    
    timestamp: datetime
    score: float


class AthleteSummary(BaseModel):
    """
    Summary statistics over one athlete's result history.
    """
    model_config = ConfigDict(populate_by_name=True)
    
    badge: Badge = Badge.BRONZE
    overallScore: int = Field(default=0, description="Mean score rounded half up")
    bestScore: float = 0.0
    lastTestAt: Optional[datetime] = Field(default=None, description="Most recent submission")
    trendSeries: list[TrendPoint] = Field(default_factory=list, description="Chronological, oldest first")
    yAxisDomain: tuple[float, float] = (0.0, 100.0)
    distribution: dict[str, int] = Field(default_factory=dict, description="Result count per exercise")


class AthleteProfileResponse(BaseModel):
    """
    Everything the profile page needs for one athlete.
    """
    model_config = ConfigDict(populate_by_name=True)
    
    athleteId: str
    identity: IdentityRecord
    user: Optional[AccountRecord] = None
    profile: Optional[ProfileRecord] = None
    results: list[ResultRecord] = Field(default_factory=list, description="Newest first")
    summary: AthleteSummary
