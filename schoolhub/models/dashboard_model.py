# /schoolhub/models/dashboard_model.py

# --- Core Imports ---
# Import the necessary components from Pydantic for data modeling.
from typing import Optional

from pydantic import BaseModel, Field

from .profile_model import Role

# --- Model Definition ---

class DashboardSummary(BaseModel):
    """
    Defines the data contract for the response of the dashboard summary endpoint.
    Counts are computed over the caller's access scope, so a teacher sees the
    size of their own classrooms and a director sees the whole school.
    """

    role: Optional[Role] = Field(default=None, description="The caller's normalized role.")
    display_name: Optional[str] = Field(default=None)
    school_id: Optional[str] = Field(default=None)

    classroomCount: int = Field(
        ...,  # This field is required.
        description="The number of classrooms the caller can access.",
        examples=[4]
    )

    studentCount: int = Field(
        ...,  # This field is required.
        description="The number of students the caller can access.",
        examples=[112]
    )
