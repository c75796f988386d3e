# /schoolhub/services/attendance_service.py

"""
Business logic for the daily attendance sheet.

Anyone whose scope contains the classroom may read the sheet; only directors
and teachers may write it, and only for students actually enrolled in that
classroom.
"""

import logging
from datetime import date
from typing import Dict, List

from ..core.errors import AccessDenied
from ..models.attendance_model import (
    AttendanceRosterRow,
    AttendanceSave,
    AttendanceSheet,
    AttendanceStatus,
    AttendanceTotals,
)
from ..models.student_model import display_name_for
from . import classroom_service
from .access_resolver import AccessScope
from .database_service import DatabaseService

logger = logging.getLogger(__name__)


def get_sheet(classroom_id: str, day: date, scope: AccessScope, db: DatabaseService) -> AttendanceSheet:
    classroom_service.get_classroom(classroom_id, scope, db)

    students = classroom_service.get_visible_students(classroom_id, scope, db)
    records = {r.student_id: r for r in db.get_attendance_for_classroom_date(classroom_id, day)}

    rows: List[AttendanceRosterRow] = []
    totals = AttendanceTotals()
    for student in students:
        record = records.get(student.id)
        status = AttendanceStatus(record.status) if record and record.status else None
        if status is not None:
            setattr(totals, status.value, getattr(totals, status.value) + 1)
        rows.append(AttendanceRosterRow(
            student_id=student.id,
            display_name=display_name_for(student.first_name, student.last_name),
            status=status,
            note=record.note if record else None,
        ))

    return AttendanceSheet(
        classroom_id=classroom_id,
        date=day,
        can_edit=scope.is_staff,
        rows=rows,
        totals=totals,
    )


def save_sheet(payload: AttendanceSave, scope: AccessScope, db: DatabaseService) -> AttendanceSheet:
    """
    Upserts the submitted entries and returns the refreshed sheet.
    Entries without a status are skipped; a student listed twice keeps the
    last entry.
    """
    classroom = classroom_service.get_classroom(payload.classroom_id, scope, db)
    if not scope.is_staff:
        raise AccessDenied("Only directors and teachers can take attendance.")

    enrolled = {s.id for s in classroom_service.get_enrolled_students(classroom.id, db)}

    records: Dict[str, Dict] = {}
    for entry in payload.entries:
        if entry.status is None:
            continue
        if entry.student_id not in enrolled:
            raise ValueError(f"Student {entry.student_id} is not enrolled in classroom {classroom.id}.")
        records[entry.student_id] = {
            "student_id": entry.student_id,
            "classroom_id": classroom.id,
            "school_id": classroom.school_id,
            "date": payload.date,
            "status": entry.status.value,
            "note": (entry.note or "").strip() or None,
            "taken_by": scope.user_id,
        }

    if records:
        written = db.upsert_attendance(records.values())
        logger.info("User %s saved %d attendance records for %s on %s", scope.user_id, written, classroom.id, payload.date)

    return get_sheet(classroom.id, payload.date, scope, db)
