# /schoolhub/core/debug_context.py

from typing import List, Optional

from pydantic import BaseModel, Field

from ..models.profile_model import Role
from .errors import to_message


class DebugClassroom(BaseModel):
    id: str
    name: str


class DebugContext(BaseModel):
    """
    Diagnostics for a single request. Created by a dependency, filled in by
    whoever handles the request, and rendered as-is by the debug route.
    """
    user_id: Optional[str] = None
    role: Optional[Role] = None
    raw_role: Optional[str] = None
    school_id: Optional[str] = None
    classrooms: List[DebugClassroom] = Field(default_factory=list)
    students_count_selected: int = 0
    last_error: Optional[str] = None

    def record_profile(self, profile) -> None:
        self.user_id = profile.id
        self.role = profile.role
        self.raw_role = profile.raw_role
        self.school_id = profile.school_id

    def record_classrooms(self, classrooms) -> None:
        self.classrooms = [DebugClassroom(id=c.id, name=c.name) for c in classrooms]

    def record_error(self, error) -> None:
        self.last_error = to_message(error)
