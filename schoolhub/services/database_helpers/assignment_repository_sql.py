# /schoolhub/services/database_helpers/assignment_repository_sql.py

"""
Queries for the two tables that grant non-director access: teacher to
classroom assignments (`teacher_classroom`) and guardian to student links
(`guardian`). Both are unique on their pair of ids, so writes are upserts.
"""

import uuid
from typing import Dict, Iterable, List

from sqlalchemy.orm import Session

from ...db.models.school_models import TeacherClassroom, Guardian


class AssignmentRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    # --- Teacher Assignment Methods ---

    def get_teacher_classroom_ids(self, teacher_id: str) -> List[str]:
        rows = self.db.query(TeacherClassroom.classroom_id).filter(TeacherClassroom.teacher_id == teacher_id).all()
        return [row.classroom_id for row in rows if row.classroom_id]

    def get_assignments_by_classroom_ids(self, classroom_ids: Iterable[str]) -> List[TeacherClassroom]:
        ids = list(classroom_ids)
        if not ids:
            return []
        return self.db.query(TeacherClassroom).filter(TeacherClassroom.classroom_id.in_(ids)).all()

    def upsert_teacher_assignment(self, record: Dict) -> TeacherClassroom:
        existing = (
            self.db.query(TeacherClassroom)
            .filter(
                TeacherClassroom.teacher_id == record["teacher_id"],
                TeacherClassroom.classroom_id == record["classroom_id"],
            )
            .first()
        )
        if existing:
            return existing
        assignment = TeacherClassroom(id=f"tc_{uuid.uuid4().hex[:12]}", **record)
        self.db.add(assignment)
        self.db.commit()
        self.db.refresh(assignment)
        return assignment

    # --- Guardian Link Methods ---

    def get_guardian_student_ids(self, user_id: str) -> List[str]:
        rows = self.db.query(Guardian.student_id).filter(Guardian.user_id == user_id).all()
        return [row.student_id for row in rows if row.student_id]

    def get_guardian_links_by_student_ids(self, student_ids: Iterable[str]) -> List[Guardian]:
        ids = list(student_ids)
        if not ids:
            return []
        return self.db.query(Guardian).filter(Guardian.student_id.in_(ids)).all()

    def upsert_guardian_link(self, record: Dict) -> Guardian:
        """Re-linking an existing pair only refreshes the relationship label."""
        link = (
            self.db.query(Guardian)
            .filter(Guardian.user_id == record["user_id"], Guardian.student_id == record["student_id"])
            .first()
        )
        if link:
            link.relationship = record.get("relationship")
        else:
            link = Guardian(id=f"grd_{uuid.uuid4().hex[:12]}", **record)
            self.db.add(link)
        self.db.commit()
        self.db.refresh(link)
        return link
