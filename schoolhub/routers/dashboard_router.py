# /schoolhub/routers/dashboard_router.py

# --- Core FastAPI Imports ---
from fastapi import APIRouter, Depends

# --- Service and Model Imports ---
from ..core.deps import get_access_scope, get_current_profile
from ..models.dashboard_model import DashboardSummary
from ..models.profile_model import Profile
from ..services import dashboard_service
from ..services.access_resolver import AccessScope

# --- APIRouter Instance ---
router = APIRouter()

# --- Endpoint Definition ---
@router.get(
    "/summary",
    response_model=DashboardSummary,
    summary="Get Dashboard Summary",
    description="Retrieves the caller's role and the size of their classroom and student scope."
)
def get_dashboard_summary(
    profile: Profile = Depends(get_current_profile),
    scope: AccessScope = Depends(get_access_scope),
):
    # Delegate immediately to the service layer to get the summary data.
    return dashboard_service.get_summary_data(profile=profile, scope=scope)
