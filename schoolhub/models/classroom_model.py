# /schoolhub/models/classroom_model.py

from pydantic import BaseModel, Field, ConfigDict
from typing import Optional


class ClassroomBase(BaseModel):
    name: str = Field(..., min_length=1, description="Display name of the classroom, e.g. '3rd grade A'.")


class ClassroomUpsert(ClassroomBase):
    """
    Payload for the director's classroom form. When `id` is given the existing
    classroom is renamed, otherwise a new one is created.
    """
    id: Optional[str] = Field(default=None, description="Existing classroom ID to update.")


class Classroom(ClassroomBase):
    model_config = ConfigDict(from_attributes=True)

    id: str
    school_id: str
