"""Merging of account and profile records into a display identity."""

from typing import Optional

from athlete_rank.models import AccountRecord, IdentityRecord, ProfileRecord

UNKNOWN_LOCATION = "Unknown"
DEFAULT_AVATAR = "/defaultImg.png"


def _first(*values: Optional[str]) -> Optional[str]:
    """Return the first non-empty value."""
    for value in values:
        if value:
            return value
    return None


def _full_name(account: Optional[AccountRecord]) -> str:
    if account is None:
        return ""
    return f"{account.firstName or ''} {account.lastName or ''}".strip()


def resolve_identity(
    account: Optional[AccountRecord],
    profile: Optional[ProfileRecord],
    default_image: str = DEFAULT_AVATAR,
) -> IdentityRecord:
    """
    Merge an athlete's account and profile into one IdentityRecord.
    
    Precedence, first non-empty value wins:
        name:     profile.name, account.name, "firstName lastName", ""
        state:    profile.state, account.state, "Unknown"
        district: account.district, "Unknown" (profiles carry no district)
        imageUrl: profile.profileImage, account.imageUrl, default_image
    
    Both records may be missing; the fallbacks then apply to every field.
    Whether such an athlete exists at all is for the caller to decide.
    """
    return IdentityRecord(
        name=_first(
            profile.name if profile else None,
            account.name if account else None,
        ) or _full_name(account),
        state=_first(
            profile.state if profile else None,
            account.state if account else None,
        ) or UNKNOWN_LOCATION,
        district=_first(account.district if account else None) or UNKNOWN_LOCATION,
        imageUrl=_first(
            profile.profileImage if profile else None,
            account.imageUrl if account else None,
        ) or default_image,
    )
