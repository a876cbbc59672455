"""Result record model for submitted performance tests."""

import logging
import math
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from athlete_rank.errors import InvalidInputError
from .document import unwrap_date, unwrap_number, unwrap_object_id

logger = logging.getLogger(__name__)


def parse_score(value: Any) -> float:
    """
    Strictly parse a raw score value.

    Accepts ints, floats and numeric strings. Extended JSON number
    wrappers are unwrapped first. Missing values parse as 0.

    Raises:
        InvalidInputError: if the value is not a finite number
    """
    try:
        value = unwrap_number(value)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Malformed number wrapper: {value!r}") from e
    if value is None:
        return 0.0
    if isinstance(value, bool):
        raise InvalidInputError(f"Boolean is not a valid score: {value!r}")
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    try:
        score = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Score is not numeric: {value!r}") from e
    if math.isnan(score) or math.isinf(score):
        raise InvalidInputError(f"Score is not finite: {value!r}")
    return score


def coerce_score(value: Any) -> float:
    """Parse a score, treating anything that cannot be parsed as 0."""
    try:
        return parse_score(value)
    except InvalidInputError as e:
        logger.warning(f"Treating invalid score as 0: {e}")
        return 0.0


class ResultRecord(BaseModel):
    """
    One submitted test result as stored in the document database.
    
    Only ``athleteId``, ``exercise``, ``score`` and ``createdAt`` drive
    aggregation; the structured metrics are carried through untouched.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")
    
    id: Optional[str] = Field(default=None, alias="_id", description="Result document id")
    athleteId: str = Field(description="Athlete the result belongs to")
    exercise: str = Field(default="", description="Exercise category label")
    score: float = Field(default=0.0, description="Score, 0-100 by convention")
    createdAt: datetime = Field(description="Submission timestamp")
    
    # Structured metrics written by the submission pipeline
    reps: Optional[int] = None
    jumpHeightCm: Optional[float] = None
    jumpDisplacementNorm: Optional[float] = None
    turns: Optional[int] = None
    splitTimes: Optional[list[float]] = None
    cadence: Optional[float] = None
    trunkAngleAvg: Optional[float] = None
    trunkAngleMin: Optional[float] = None
    trunkAngleMax: Optional[float] = None
    distanceKm: Optional[float] = None
    durationSec: Optional[float] = None
    paceMinPerKm: Optional[float] = None
    feedback: list[str] = Field(default_factory=list)
    corrections: list[str] = Field(default_factory=list)
    videoUrl: str = ""

    @field_validator("id", "athleteId", mode="before")
    @classmethod
    def _unwrap_ids(cls, value: Any) -> Any:
        return unwrap_object_id(value)

    @field_validator("createdAt", mode="before")
    @classmethod
    def _unwrap_created_at(cls, value: Any) -> Any:
        return unwrap_date(value)

    @field_validator("exercise", mode="before")
    @classmethod
    def _exercise_or_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("score", mode="before")
    @classmethod
    def _coerce_score(cls, value: Any) -> float:
        return coerce_score(value)

    @field_validator(
        "reps", "jumpHeightCm", "jumpDisplacementNorm", "turns", "cadence",
        "trunkAngleAvg", "trunkAngleMin", "trunkAngleMax",
        "distanceKm", "durationSec", "paceMinPerKm",
        mode="before",
    )
    @classmethod
    def _unwrap_metric(cls, value: Any) -> Any:
        return unwrap_number(value)

    @field_validator("splitTimes", mode="before")
    @classmethod
    def _unwrap_split_times(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [unwrap_number(v) for v in value]
        return value
