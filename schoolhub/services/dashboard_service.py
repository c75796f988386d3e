# /schoolhub/services/dashboard_service.py

# --- Core Imports ---
# Import the Pydantic model to ensure our output matches the data contract.
from ..models.dashboard_model import DashboardSummary
from ..models.profile_model import Profile
from .access_resolver import AccessScope

# --- Core Public Function ---

def get_summary_data(profile: Profile, scope: AccessScope) -> DashboardSummary:
    """
    Builds the dashboard summary from the caller's already-resolved scope.

    Args:
        profile: The caller's profile, re-fetched for this request.
        scope: The caller's classroom and student scope.

    Returns:
        A DashboardSummary Pydantic object containing the calculated counts.
    """
    return DashboardSummary(
        role=profile.role,
        display_name=profile.display_name,
        school_id=profile.school_id,
        classroomCount=len(scope.classroom_ids),
        studentCount=len(scope.student_ids),
    )
