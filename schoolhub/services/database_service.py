# /schoolhub/services/database_service.py

from datetime import date
from typing import Dict, Generator, Iterable, List, Optional

from fastapi import Depends
from sqlalchemy.orm import Session

# --- Core Database Setup ---
from ..db.database import get_db

# --- Repository Imports ---
from .database_helpers.roster_repository_sql import RosterRepositorySQL
from .database_helpers.assignment_repository_sql import AssignmentRepositorySQL
from .database_helpers.attendance_repository_sql import AttendanceRepositorySQL
from .database_helpers.message_repository_sql import MessageRepositorySQL


class DatabaseService:
    def __init__(self, db_session: Session):
        """
        Initializes the DatabaseService: a thin facade that owns one
        repository per aggregate, all sharing the same request-scoped session.
        """
        if db_session is None:
            raise ValueError("A database session is required.")
        self.db_session = db_session
        self.roster_repo = RosterRepositorySQL(db_session)
        self.assignment_repo = AssignmentRepositorySQL(db_session)
        self.attendance_repo = AttendanceRepositorySQL(db_session)
        self.message_repo = MessageRepositorySQL(db_session)

    # --- SESSION CONTROL ---
    def rollback(self) -> None:
        """Discards the failed transaction so the session can be used again."""
        self.db_session.rollback()

    # --- PROFILE METHODS (DELEGATED) ---
    def get_profile_by_id(self, user_id: str): return self.roster_repo.get_profile_by_id(user_id)
    def get_profiles_by_school_and_roles(self, school_id: str, roles: Iterable[str]) -> List: return self.roster_repo.get_profiles_by_school_and_roles(school_id, roles)

    # --- CLASSROOM & STUDENT METHODS (DELEGATED) ---
    def get_classrooms_by_school(self, school_id: str) -> List: return self.roster_repo.get_classrooms_by_school(school_id)
    def get_classrooms_by_ids(self, classroom_ids: Iterable[str]) -> List: return self.roster_repo.get_classrooms_by_ids(classroom_ids)
    def get_classroom_by_id(self, classroom_id: str): return self.roster_repo.get_classroom_by_id(classroom_id)
    def upsert_classroom(self, record: Dict): return self.roster_repo.upsert_classroom(record)
    def get_students_by_school(self, school_id: str) -> List: return self.roster_repo.get_students_by_school(school_id)
    def get_students_by_ids(self, student_ids: Iterable[str]) -> List: return self.roster_repo.get_students_by_ids(student_ids)
    def get_student_by_id(self, student_id: str): return self.roster_repo.get_student_by_id(student_id)
    def upsert_student(self, record: Dict): return self.roster_repo.upsert_student(record)

    # --- ENROLLMENT METHODS (DELEGATED) ---
    def get_enrollments_by_classroom_ids(self, classroom_ids: Iterable[str]) -> List: return self.roster_repo.get_enrollments_by_classroom_ids(classroom_ids)
    def get_enrollments_by_student_ids(self, student_ids: Iterable[str], school_id: Optional[str] = None) -> List:
        return self.roster_repo.get_enrollments_by_student_ids(student_ids, school_id=school_id)
    def add_enrollment(self, record: Dict): return self.roster_repo.add_enrollment(record)

    # --- TEACHER ASSIGNMENT & GUARDIAN METHODS (DELEGATED) ---
    def get_teacher_classroom_ids(self, teacher_id: str) -> List[str]: return self.assignment_repo.get_teacher_classroom_ids(teacher_id)
    def get_assignments_by_classroom_ids(self, classroom_ids: Iterable[str]) -> List: return self.assignment_repo.get_assignments_by_classroom_ids(classroom_ids)
    def upsert_teacher_assignment(self, record: Dict): return self.assignment_repo.upsert_teacher_assignment(record)
    def get_guardian_student_ids(self, user_id: str) -> List[str]: return self.assignment_repo.get_guardian_student_ids(user_id)
    def get_guardian_links_by_student_ids(self, student_ids: Iterable[str]) -> List: return self.assignment_repo.get_guardian_links_by_student_ids(student_ids)
    def upsert_guardian_link(self, record: Dict): return self.assignment_repo.upsert_guardian_link(record)

    # --- ATTENDANCE METHODS (DELEGATED) ---
    def get_attendance_for_classroom_date(self, classroom_id: str, day: date) -> List: return self.attendance_repo.get_attendance_for_classroom_date(classroom_id, day)
    def get_attendance_for_classroom_range(self, classroom_id: str, start: date, end: date) -> List: return self.attendance_repo.get_attendance_for_classroom_range(classroom_id, start, end)
    def get_attendance_for_student_range(self, student_id: str, start: date, end: date) -> List: return self.attendance_repo.get_attendance_for_student_range(student_id, start, end)
    def upsert_attendance(self, records: Iterable[Dict]) -> int: return self.attendance_repo.upsert_attendance(records)

    # --- MESSAGE BOARD METHODS (DELEGATED) ---
    def create_thread_with_message(self, thread_record: Dict, body: str): return self.message_repo.create_thread_with_message(thread_record, body)
    def get_thread_by_id(self, thread_id: str): return self.message_repo.get_thread_by_id(thread_id)
    def get_general_threads(self, school_id: str, limit: int) -> List: return self.message_repo.get_general_threads(school_id, limit)
    def get_threads_by_classroom_ids(self, classroom_ids: Iterable[str], limit: int) -> List: return self.message_repo.get_threads_by_classroom_ids(classroom_ids, limit)
    def add_message(self, record: Dict): return self.message_repo.add_message(record)
    def get_messages_by_thread_id(self, thread_id: str) -> List: return self.message_repo.get_messages_by_thread_id(thread_id)
    def get_latest_message(self, thread_id: str): return self.message_repo.get_latest_message(thread_id)


# --- DEPENDENCY PROVIDER ---
def get_db_service(db: Session = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """
    FastAPI dependency that provides a DatabaseService bound to the
    request's session.
    """
    yield DatabaseService(db_session=db)
