"""Score aggregate and leaderboard entry models."""

from enum import Enum
from pydantic import BaseModel, Field, ConfigDict


class LeaderboardView(str, Enum):
    """Geographic scope used to filter leaderboard entries."""
    GLOBAL = "global"
    STATE = "state"
    DISTRICT = "district"


class ScoreAggregate(BaseModel):
    """
    Aggregated scores for one athlete.
    """
    model_config = ConfigDict(populate_by_name=True)
    
    averageScore: float = Field(description="Mean of the athlete's scores")
    totalScore: float = Field(description="Sum of the athlete's scores")
    testsCount: int = Field(ge=1, description="Number of results submitted")


class LeaderboardEntry(BaseModel):
    """
    A single entry in the leaderboard.
    """
    model_config = ConfigDict(populate_by_name=True)
    
    rank: int
    athleteId: str
    name: str
    state: str
    district: str
    imageUrl: str
    score: int = Field(description="Average score rounded half up")
    testsCount: int
