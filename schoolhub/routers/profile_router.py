# /schoolhub/routers/profile_router.py

from fastapi import APIRouter, Depends

from ..core.deps import get_current_profile
from ..models.profile_model import Profile, ProfileDetails
from ..services import profile_service

router = APIRouter()


@router.get("/me", response_model=ProfileDetails, summary="Get the Caller's Profile and Role")
def read_current_profile(profile: Profile = Depends(get_current_profile)):
    """
    Returns the caller's profile as the access layer sees it: the normalized
    role next to the raw stored value, which makes legacy spellings visible.
    """
    return profile_service.describe_profile(profile)
