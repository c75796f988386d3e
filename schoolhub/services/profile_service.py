# /schoolhub/services/profile_service.py

from typing import Optional

from ..models.profile_model import Profile, ProfileDetails, ROLE_DESCRIPTIONS
from .database_service import DatabaseService


def get_my_profile(db: DatabaseService, user_id: str) -> Profile:
    """
    Re-fetches the caller's profile row. A user without a row yet is returned
    as a profile with no role, which resolves to an empty scope everywhere.
    """
    row = db.get_profile_by_id(user_id)
    return Profile.from_row(user_id, row)


def describe_profile(profile: Profile) -> ProfileDetails:
    description: Optional[str] = ROLE_DESCRIPTIONS.get(profile.role) if profile.role else None
    return ProfileDetails(
        id=profile.id,
        role=profile.role,
        raw_role=profile.raw_role,
        school_id=profile.school_id,
        display_name=profile.display_name,
        description=description,
    )
