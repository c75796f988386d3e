# /schoolhub/services/database_helpers/roster_repository_sql.py

"""
This module contains all the raw SQLAlchemy queries for the roster tables:
user profiles, classrooms, students and enrollments.

Unlike the repositories of a single-owner app, nothing here decides who may
see a row. Reads are plain equality / set-membership lookups; the callers
(the AccessResolver and the services) decide which ids to ask for. Empty id
lists short-circuit to an empty result without touching the database.
"""

import uuid
from typing import Dict, Iterable, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

# Import the SQLAlchemy models this repository will interact with.
from ...db.models.school_models import UserProfile, Classroom, Student, Enrollment


class RosterRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    # --- Profile Methods ---

    def get_profile_by_id(self, user_id: str) -> Optional[UserProfile]:
        return self.db.query(UserProfile).filter(UserProfile.id == user_id).first()

    def get_profiles_by_school_and_roles(self, school_id: str, roles: Iterable[str]) -> List[UserProfile]:
        """
        Profiles of a school whose stored role is one of `roles`. The stored
        value is trimmed and lower-cased the same way `normalize_role` does, so
        " Maestra " and "maestra" both match.
        """
        roles = [r.lower() for r in roles]
        if not roles:
            return []
        return (
            self.db.query(UserProfile)
            .filter(UserProfile.school_id == school_id, func.lower(func.trim(UserProfile.role)).in_(roles))
            .order_by(UserProfile.display_name.asc())
            .all()
        )

    # --- Classroom Methods ---

    def get_classrooms_by_school(self, school_id: str) -> List[Classroom]:
        return (
            self.db.query(Classroom)
            .filter(Classroom.school_id == school_id)
            .order_by(Classroom.name.asc())
            .all()
        )

    def get_classrooms_by_ids(self, classroom_ids: Iterable[str]) -> List[Classroom]:
        ids = list(classroom_ids)
        if not ids:
            return []
        return self.db.query(Classroom).filter(Classroom.id.in_(ids)).order_by(Classroom.name.asc()).all()

    def get_classroom_by_id(self, classroom_id: str) -> Optional[Classroom]:
        return self.db.query(Classroom).filter(Classroom.id == classroom_id).first()

    def upsert_classroom(self, record: Dict) -> Classroom:
        """
        Creates a classroom, or updates it in place when `record['id']` names
        an existing row of the same school.
        """
        db_classroom = None
        if record.get("id"):
            db_classroom = (
                self.db.query(Classroom)
                .filter(Classroom.id == record["id"], Classroom.school_id == record["school_id"])
                .first()
            )
        if db_classroom:
            for key, value in record.items():
                setattr(db_classroom, key, value)
        else:
            record = {**record, "id": record.get("id") or f"cls_{uuid.uuid4().hex[:12]}"}
            db_classroom = Classroom(**record)
            self.db.add(db_classroom)
        self.db.commit()
        self.db.refresh(db_classroom)
        return db_classroom

    # --- Student Methods ---

    def get_students_by_school(self, school_id: str) -> List[Student]:
        return (
            self.db.query(Student)
            .filter(Student.school_id == school_id)
            .order_by(Student.last_name.asc(), Student.first_name.asc())
            .all()
        )

    def get_students_by_ids(self, student_ids: Iterable[str]) -> List[Student]:
        ids = list(student_ids)
        if not ids:
            return []
        return (
            self.db.query(Student)
            .filter(Student.id.in_(ids))
            .order_by(Student.last_name.asc(), Student.first_name.asc())
            .all()
        )

    def get_student_by_id(self, student_id: str) -> Optional[Student]:
        return self.db.query(Student).filter(Student.id == student_id).first()

    def upsert_student(self, record: Dict) -> Student:
        db_student = None
        if record.get("id"):
            db_student = (
                self.db.query(Student)
                .filter(Student.id == record["id"], Student.school_id == record["school_id"])
                .first()
            )
        if db_student:
            for key, value in record.items():
                setattr(db_student, key, value)
        else:
            record = {**record, "id": record.get("id") or f"stu_{uuid.uuid4().hex[:12]}"}
            db_student = Student(**record)
            self.db.add(db_student)
        self.db.commit()
        self.db.refresh(db_student)
        return db_student

    # --- Enrollment Methods ---

    def get_enrollments_by_classroom_ids(self, classroom_ids: Iterable[str]) -> List[Enrollment]:
        ids = list(classroom_ids)
        if not ids:
            return []
        return self.db.query(Enrollment).filter(Enrollment.classroom_id.in_(ids)).all()

    def get_enrollments_by_student_ids(self, student_ids: Iterable[str], school_id: Optional[str] = None) -> List[Enrollment]:
        ids = list(student_ids)
        if not ids:
            return []
        query = self.db.query(Enrollment).filter(Enrollment.student_id.in_(ids))
        if school_id is not None:
            query = query.filter(Enrollment.school_id == school_id)
        return query.all()

    def add_enrollment(self, record: Dict) -> Enrollment:
        """Idempotent: enrolling a student twice in the same classroom returns the existing row."""
        existing = (
            self.db.query(Enrollment)
            .filter(Enrollment.student_id == record["student_id"], Enrollment.classroom_id == record["classroom_id"])
            .first()
        )
        if existing:
            return existing
        new_enrollment = Enrollment(id=f"enr_{uuid.uuid4().hex[:12]}", **record)
        self.db.add(new_enrollment)
        self.db.commit()
        self.db.refresh(new_enrollment)
        return new_enrollment
