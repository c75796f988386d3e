# /schoolhub/services/database_helpers/attendance_repository_sql.py

import uuid
from datetime import date
from typing import Dict, Iterable, List

from sqlalchemy.orm import Session

from ...db.models.attendance_models import Attendance


class AttendanceRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_attendance_for_classroom_date(self, classroom_id: str, day: date) -> List[Attendance]:
        return (
            self.db.query(Attendance)
            .filter(Attendance.classroom_id == classroom_id, Attendance.date == day)
            .all()
        )

    def get_attendance_for_classroom_range(self, classroom_id: str, start: date, end: date) -> List[Attendance]:
        return (
            self.db.query(Attendance)
            .filter(Attendance.classroom_id == classroom_id, Attendance.date >= start, Attendance.date <= end)
            .order_by(Attendance.date.asc())
            .all()
        )

    def get_attendance_for_student_range(self, student_id: str, start: date, end: date) -> List[Attendance]:
        return (
            self.db.query(Attendance)
            .filter(Attendance.student_id == student_id, Attendance.date >= start, Attendance.date <= end)
            .order_by(Attendance.date.asc())
            .all()
        )

    def upsert_attendance(self, records: Iterable[Dict]) -> int:
        """
        Writes a batch of attendance records keyed on (student_id, date).
        An existing record for the same key is overwritten. The whole batch is
        committed at once, so a failure leaves the sheet untouched.
        """
        written = 0
        for record in records:
            existing = (
                self.db.query(Attendance)
                .filter(Attendance.student_id == record["student_id"], Attendance.date == record["date"])
                .first()
            )
            if existing:
                for key, value in record.items():
                    setattr(existing, key, value)
            else:
                self.db.add(Attendance(id=f"att_{uuid.uuid4().hex[:12]}", **record))
            written += 1
        self.db.commit()
        return written
