# /schoolhub/models/attendance_model.py

from datetime import date as date_type
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class AttendanceStatus(str, Enum):
    PRESENT = "P"
    ABSENT = "A"
    LATE = "R"


class AttendanceEntry(BaseModel):
    """One row of the attendance sheet as submitted by a teacher."""
    student_id: str
    # A null status means "not taken"; such entries are ignored on save.
    status: Optional[AttendanceStatus] = None
    note: Optional[str] = Field(default=None, max_length=500)


class AttendanceSave(BaseModel):
    classroom_id: str
    date: date_type
    entries: List[AttendanceEntry] = Field(default_factory=list)


class AttendanceRosterRow(BaseModel):
    student_id: str
    display_name: str
    status: Optional[AttendanceStatus] = None
    note: Optional[str] = None


class AttendanceTotals(BaseModel):
    P: int = 0
    A: int = 0
    R: int = 0


class AttendanceSheet(BaseModel):
    """
    The attendance sheet for one classroom on one day: the full roster, with
    whatever has been recorded so far, and the running totals per status.
    """
    classroom_id: str
    date: date_type
    can_edit: bool
    rows: List[AttendanceRosterRow]
    totals: AttendanceTotals
