# /schoolhub/services/classroom_service.py

"""
This service module is the read side of the roster: the classrooms and
students a caller may browse.

Every function receives the caller's resolved `AccessScope` and only ever
fetches ids inside it. Out-of-scope requests raise `ResourceNotFound`, the
same error a missing row produces.
"""

from typing import List

from ..core.errors import ResourceNotFound
from ..models import classroom_model, student_model
from .access_resolver import AccessScope
from .database_service import DatabaseService


def _sort_classrooms(classrooms) -> List:
    return sorted(classrooms, key=lambda c: (c.name or "").casefold())


def _sort_students(students) -> List:
    return sorted(students, key=lambda s: ((s.last_name or "").casefold(), (s.first_name or "").casefold()))


def list_classrooms(scope: AccessScope, db: DatabaseService) -> List[classroom_model.Classroom]:
    """The caller's classrooms, sorted by name (case-insensitive)."""
    rows = db.get_classrooms_by_ids(scope.classroom_ids)
    return [classroom_model.Classroom.model_validate(row) for row in _sort_classrooms(rows)]


def get_classroom(classroom_id: str, scope: AccessScope, db: DatabaseService):
    if not scope.can_access_classroom(classroom_id):
        raise ResourceNotFound(f"Classroom with ID {classroom_id} not found")
    classroom = db.get_classroom_by_id(classroom_id)
    if classroom is None:
        raise ResourceNotFound(f"Classroom with ID {classroom_id} not found")
    return classroom


def get_enrolled_students(classroom_id: str, db: DatabaseService) -> List:
    """
    Students enrolled in one classroom, sorted by last then first name.
    No access check: callers must have checked the classroom first.
    """
    enrollments = db.get_enrollments_by_classroom_ids([classroom_id])
    student_ids = {e.student_id for e in enrollments if e.student_id}
    return _sort_students(db.get_students_by_ids(student_ids))


def get_visible_students(classroom_id: str, scope: AccessScope, db: DatabaseService) -> List:
    """
    The classroom roster as the caller may see it. Directors and teachers get
    every enrolled student; anyone else only the students in their own scope,
    so a guardian never sees their ward's classmates.
    """
    students = get_enrolled_students(classroom_id, db)
    if scope.is_staff:
        return students
    return [s for s in students if scope.can_access_student(s.id)]


def list_classroom_students(classroom_id: str, scope: AccessScope, db: DatabaseService) -> List[student_model.Student]:
    get_classroom(classroom_id, scope, db)
    return [student_model.Student.model_validate(s) for s in get_visible_students(classroom_id, scope, db)]


def list_students(scope: AccessScope, db: DatabaseService) -> List[student_model.Student]:
    rows = db.get_students_by_ids(scope.student_ids)
    return [student_model.Student.model_validate(s) for s in _sort_students(rows)]
