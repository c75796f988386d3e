# /schoolhub/models/admin_model.py

from typing import List, Optional

from pydantic import BaseModel, Field


class EnrollmentCreate(BaseModel):
    student_id: str
    classroom_id: str


class Enrollment(BaseModel):
    id: str
    student_id: str
    classroom_id: str
    school_id: str


class TeacherAssignmentCreate(BaseModel):
    teacher_id: str
    classroom_id: str


class TeacherAssignment(BaseModel):
    id: str
    teacher_id: str
    classroom_id: str


class GuardianLinkCreate(BaseModel):
    user_id: str
    student_id: str
    relationship: Optional[str] = Field(default=None, max_length=50, examples=["madre"])


class GuardianLink(BaseModel):
    id: str
    user_id: str
    student_id: str
    relationship: Optional[str] = None


class StaffMember(BaseModel):
    """A teacher of the school with the classrooms assigned to them."""
    id: str
    display_name: Optional[str] = None
    role: Optional[str] = None
    classroom_ids: List[str] = Field(default_factory=list)


class GuardianMember(BaseModel):
    """A guardian of the school with the students linked to them."""
    id: str
    display_name: Optional[str] = None
    role: Optional[str] = None
    student_ids: List[str] = Field(default_factory=list)
