# /schoolhub/services/report_service.py

"""
Attendance reports: a per-day summary for one classroom over a date range,
and a monthly summary for one student. Both are aggregated in pandas from
the raw attendance rows of the caller's scope.
"""

import calendar
from datetime import date, datetime
from typing import List, Tuple

import pandas as pd

from ..core.errors import ResourceNotFound
from ..models.attendance_model import AttendanceStatus
from ..models.report_model import ClassroomAttendanceReport, ClassroomDayRow, StudentMonthReport
from . import classroom_service
from .access_resolver import AccessScope
from .database_service import DatabaseService

STATUS_COLUMNS = {
    AttendanceStatus.PRESENT.value: "present",
    AttendanceStatus.ABSENT.value: "absent",
    AttendanceStatus.LATE.value: "late",
}


def _records_to_dataframe(records) -> pd.DataFrame:
    return pd.DataFrame(
        [{"date": r.date, "status": r.status} for r in records],
        columns=["date", "status"],
    )


def _count_by_status(df: pd.DataFrame) -> pd.DataFrame:
    """Pivot raw (date, status) rows into one row per date with a column per status."""
    counts = df.groupby(["date", "status"]).size().unstack(fill_value=0)
    counts = counts.reindex(columns=list(STATUS_COLUMNS), fill_value=0).rename(columns=STATUS_COLUMNS)
    counts["total"] = counts[list(STATUS_COLUMNS.values())].sum(axis=1)
    return counts


def parse_month(month: str) -> Tuple[date, date]:
    """'2025-03' -> (2025-03-01, 2025-03-31)."""
    try:
        first = datetime.strptime(month, "%Y-%m").date()
    except (TypeError, ValueError):
        raise ValueError(f"Invalid month '{month}'. Expected YYYY-MM.")
    last_day = calendar.monthrange(first.year, first.month)[1]
    return first, first.replace(day=last_day)


def get_classroom_report(
    classroom_id: str, start: date, end: date, scope: AccessScope, db: DatabaseService
) -> ClassroomAttendanceReport:
    if start > end:
        raise ValueError("The start date must not be after the end date.")
    classroom_service.get_classroom(classroom_id, scope, db)

    df = _records_to_dataframe(db.get_attendance_for_classroom_range(classroom_id, start, end))
    rows: List[ClassroomDayRow] = []
    if not df.empty:
        counts = _count_by_status(df).sort_index()
        for day, values in counts.iterrows():
            rows.append(ClassroomDayRow(
                date=day,
                present=int(values["present"]),
                absent=int(values["absent"]),
                late=int(values["late"]),
                total=int(values["total"]),
            ))

    return ClassroomAttendanceReport(classroom_id=classroom_id, start=start, end=end, rows=rows)


def get_student_month_report(student_id: str, month: str, scope: AccessScope, db: DatabaseService) -> StudentMonthReport:
    start, end = parse_month(month)
    if not scope.can_access_student(student_id):
        raise ResourceNotFound(f"Student with ID {student_id} not found")

    df = _records_to_dataframe(db.get_attendance_for_student_range(student_id, start, end))
    totals = df["status"].value_counts().to_dict() if not df.empty else {}

    present = int(totals.get(AttendanceStatus.PRESENT.value, 0))
    absent = int(totals.get(AttendanceStatus.ABSENT.value, 0))
    late = int(totals.get(AttendanceStatus.LATE.value, 0))
    total = present + absent + late
    rate = round((present + late) / total * 100, 1) if total else None

    return StudentMonthReport(
        student_id=student_id,
        month=start.strftime("%Y-%m"),
        present=present,
        absent=absent,
        late=late,
        total=total,
        attendance_rate=rate,
    )
