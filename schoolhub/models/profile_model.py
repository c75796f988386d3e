# /schoolhub/models/profile_model.py

# --- Core Imports ---
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# --- Role Enumeration ---
class Role(str, Enum):
    DIRECTOR = "director"
    TEACHER = "teacher"
    GUARDIAN = "guardian"


# Every spelling that has been written into `user_profile.role` over time.
ROLE_ALIASES = {
    "director": Role.DIRECTOR,
    "teacher": Role.TEACHER,
    "maestra": Role.TEACHER,
    "guardian": Role.GUARDIAN,
    "parent": Role.GUARDIAN,
    "padre": Role.GUARDIAN,
    "madre": Role.GUARDIAN,
    "tutor": Role.GUARDIAN,
}

ROLE_DESCRIPTIONS = {
    Role.DIRECTOR: "Full visibility over the classrooms and students of one school.",
    Role.TEACHER: "Access limited to the classrooms explicitly assigned by the director.",
    Role.GUARDIAN: "Access limited to linked children and the classrooms they are enrolled in.",
}


def normalize_role(raw) -> Optional[Role]:
    """
    Collapses a stored role string into a `Role`. Unknown or empty values
    return None, which every access check treats as "no access".
    """
    if raw is None:
        return None
    if isinstance(raw, Role):
        return raw
    return ROLE_ALIASES.get(str(raw).strip().lower())


def spellings_for(role: Role):
    """All stored spellings that normalize to `role`, e.g. for IN (...) filters."""
    return sorted(alias for alias, value in ROLE_ALIASES.items() if value is role)


# --- Model Definitions ---

class Profile(BaseModel):
    """
    The caller as seen by the access layer: re-fetched on every request.
    A user with no profile row is represented with `role=None`.
    """
    model_config = ConfigDict(from_attributes=True)

    id: str
    role: Optional[Role] = None
    raw_role: Optional[str] = None
    school_id: Optional[str] = None
    display_name: Optional[str] = None

    @classmethod
    def from_row(cls, user_id: str, row) -> "Profile":
        if row is None:
            return cls(id=user_id)
        return cls(
            id=row.id,
            role=normalize_role(row.role),
            raw_role=row.role,
            school_id=row.school_id,
            display_name=row.display_name,
        )


class ProfileDetails(BaseModel):
    """Response body for GET /api/profile/me."""
    id: str
    role: Optional[Role] = Field(default=None, description="Normalized role, or null when unknown.")
    raw_role: Optional[str] = Field(default=None, description="The role exactly as stored on the profile.")
    school_id: Optional[str] = None
    display_name: Optional[str] = None
    description: Optional[str] = None
