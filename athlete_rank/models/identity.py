"""Account, profile and merged identity models."""

from typing import Any, Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator

from .document import unwrap_object_id


class AccountRecord(BaseModel):
    """
    Primary account record for an athlete.
    
    Created at sign-up; carries the district, which profiles do not.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")
    
    id: Optional[str] = Field(default=None, alias="_id", description="Athlete id")
    name: Optional[str] = None
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    email: Optional[str] = None
    state: Optional[str] = None
    district: Optional[str] = None
    imageUrl: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def _unwrap_id(cls, value: Any) -> Any:
        return unwrap_object_id(value)


class ProfileRecord(BaseModel):
    """Secondary, athlete-edited profile record."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")
    
    userId: Optional[str] = Field(default=None, description="Athlete id the profile belongs to")
    name: Optional[str] = None
    profileImage: Optional[str] = None
    state: Optional[str] = None
    sport: Optional[str] = None

    @field_validator("userId", mode="before")
    @classmethod
    def _unwrap_user_id(cls, value: Any) -> Any:
        return unwrap_object_id(value)


class IdentityRecord(BaseModel):
    """
    Display identity of an athlete, merged from account and profile.
    
    Derived on every query, never stored.
    """
    model_config = ConfigDict(populate_by_name=True)
    
    name: str = Field(default="", description="Display name, empty when unknown")
    state: str
    district: str
    imageUrl: str
