# /schoolhub/models/report_model.py

from datetime import date as date_type
from typing import List, Optional

from pydantic import BaseModel, Field


class ClassroomDayRow(BaseModel):
    date: date_type
    present: int = 0
    absent: int = 0
    late: int = 0
    total: int = 0


class ClassroomAttendanceReport(BaseModel):
    classroom_id: str
    start: date_type
    end: date_type
    rows: List[ClassroomDayRow]


class StudentMonthReport(BaseModel):
    student_id: str
    month: str = Field(..., description="The reported month in YYYY-MM form.", examples=["2025-03"])
    present: int = 0
    absent: int = 0
    late: int = 0
    total: int = 0
    attendance_rate: Optional[float] = Field(
        default=None,
        description="Percentage of days attended (present or late). Null when nothing was recorded.",
    )
