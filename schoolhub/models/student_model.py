# /schoolhub/models/student_model.py

# --- Core Imports ---
from datetime import date
from pydantic import BaseModel, Field, ConfigDict, computed_field
from typing import Optional

# --- Model Definitions ---

class StudentBase(BaseModel):
    """
    The base model for a Student. Contains fields common to write and read operations.
    """
    first_name: str = Field(..., min_length=1, description="The student's given name.")
    last_name: str = Field(..., min_length=1, description="The student's family name.")
    date_of_birth: Optional[date] = Field(default=None)

class StudentUpsert(StudentBase):
    """
    The model used by the director's student form. Supplying `id` updates an
    existing student of the same school.
    """
    id: Optional[str] = Field(default=None)

class Student(StudentBase):
    """
    The full representation of a Student resource, as it is stored in the
    database and returned by the API.
    """
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="The unique, server-generated identifier for the student.")
    school_id: str = Field(..., description="The school this student belongs to.")

    @computed_field
    @property
    def display_name(self) -> str:
        return display_name_for(self.first_name, self.last_name)


def display_name_for(first_name: Optional[str], last_name: Optional[str]) -> str:
    names = [value.strip() for value in (first_name, last_name) if value and value.strip()]
    return " ".join(names)
