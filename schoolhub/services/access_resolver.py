# /schoolhub/services/access_resolver.py

"""
The single source of truth for "who may see what".

Every route resolves the caller's scope here before it issues its own data
query or permits a write. The rules:

- A director sees every classroom and student of their school. Without a
  school they see nothing.
- A teacher sees the classrooms assigned to them through `teacher_classroom`
  and the students enrolled in those classrooms.
- A guardian sees the students linked to them through `guardian` and the
  classrooms those students are enrolled in.
- Anyone else (unknown role, missing profile) sees nothing.

The resolver is stateless: it keeps no cache, so each call reflects the rows
as they are now. It never catches backend errors; a failed fetch propagates
to the caller, which must deny access. Empty scopes are a normal result, not
an error, and "does not exist" is indistinguishable from "not allowed".
"""

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional, Set

from ..models.profile_model import Profile, Role, normalize_role
from .database_service import DatabaseService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ThreadVisibility:
    can_read: bool = False
    can_post: bool = False


DENIED = ThreadVisibility(can_read=False, can_post=False)


@dataclass(frozen=True)
class AccessScope:
    """A caller's resolved scope, computed once per request."""
    user_id: str
    role: Optional[Role] = None
    school_id: Optional[str] = None
    classroom_ids: FrozenSet[str] = field(default_factory=frozenset)
    student_ids: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def is_staff(self) -> bool:
        return self.role in (Role.DIRECTOR, Role.TEACHER)

    def can_access_classroom(self, classroom_id: Optional[str]) -> bool:
        return bool(classroom_id) and classroom_id in self.classroom_ids

    def can_access_student(self, student_id: Optional[str]) -> bool:
        return bool(student_id) and student_id in self.student_ids


class AccessResolver:
    def __init__(self, db: DatabaseService):
        self.db = db

    # --- Classrooms ---

    def resolve_classrooms(self, role, user_id: str, school_id: Optional[str]) -> Set[str]:
        role = normalize_role(role)

        if role is Role.DIRECTOR:
            if not school_id:
                return set()
            return {classroom.id for classroom in self.db.get_classrooms_by_school(school_id)}

        if role is Role.TEACHER:
            return set(self.db.get_teacher_classroom_ids(user_id))

        if role is Role.GUARDIAN:
            # GuardianLink -> Student -> Enrollment -> Classroom. The guardian's
            # own school id plays no part: the wards' enrollments are the scope.
            ward_ids = self.db.get_guardian_student_ids(user_id)
            if not ward_ids:
                return set()
            enrollments = self.db.get_enrollments_by_student_ids(ward_ids)
            return {e.classroom_id for e in enrollments if e.classroom_id}

        return set()

    # --- Students ---

    def resolve_students(
        self,
        role,
        user_id: str,
        school_id: Optional[str],
        classroom_ids: Optional[Iterable[str]] = None,
    ) -> Set[str]:
        """
        For teachers the student scope is derived from the classroom scope.
        Pass the already-resolved `classroom_ids` to avoid fetching it twice;
        when omitted it is resolved here first.
        """
        role = normalize_role(role)

        if role is Role.DIRECTOR:
            if not school_id:
                return set()
            return {student.id for student in self.db.get_students_by_school(school_id)}

        if role is Role.TEACHER:
            if classroom_ids is None:
                classroom_ids = self.resolve_classrooms(role, user_id, school_id)
            classroom_ids = list(classroom_ids)
            if not classroom_ids:
                return set()
            enrollments = self.db.get_enrollments_by_classroom_ids(classroom_ids)
            return {e.student_id for e in enrollments if e.student_id}

        if role is Role.GUARDIAN:
            return set(self.db.get_guardian_student_ids(user_id))

        return set()

    # --- Message threads ---

    def resolve_thread_visibility(
        self,
        role,
        user_id: str,
        school_id: Optional[str],
        thread_school_id: Optional[str],
        thread_classroom_id: Optional[str],
        classroom_ids: Optional[Iterable[str]] = None,
    ) -> ThreadVisibility:
        role = normalize_role(role)
        if role is None:
            return DENIED

        if thread_classroom_id is None:
            return self._general_thread_visibility(role, user_id, school_id, thread_school_id)

        if classroom_ids is None:
            classroom_ids = self.resolve_classrooms(role, user_id, school_id)
        if thread_classroom_id not in set(classroom_ids):
            return DENIED

        if role in (Role.DIRECTOR, Role.TEACHER):
            return ThreadVisibility(can_read=True, can_post=True)

        # Guardian: readable through the scope; postable only when one of the
        # wards is enrolled in this very classroom.
        return ThreadVisibility(can_read=True, can_post=self._has_ward_in_classroom(user_id, thread_classroom_id))

    def _general_thread_visibility(
        self, role: Role, user_id: str, school_id: Optional[str], thread_school_id: Optional[str]
    ) -> ThreadVisibility:
        # General announcements are scoped to the caller's own school.
        if not school_id or school_id != thread_school_id:
            return DENIED

        if role in (Role.DIRECTOR, Role.TEACHER):
            return ThreadVisibility(can_read=True, can_post=True)

        # Guardians read (never post) announcements of a school where one of
        # their wards is enrolled.
        ward_ids = self.db.get_guardian_student_ids(user_id)
        if not ward_ids:
            return DENIED
        enrollments = self.db.get_enrollments_by_student_ids(ward_ids, school_id=thread_school_id)
        return ThreadVisibility(can_read=bool(enrollments), can_post=False)

    def _has_ward_in_classroom(self, user_id: str, classroom_id: str) -> bool:
        ward_ids = self.db.get_guardian_student_ids(user_id)
        if not ward_ids:
            return False
        enrollments = self.db.get_enrollments_by_student_ids(ward_ids)
        return any(e.classroom_id == classroom_id for e in enrollments)

    # --- Convenience ---

    def resolve_scope(self, profile: Profile) -> AccessScope:
        """Resolves both classroom and student scope for a fetched profile."""
        classroom_ids = self.resolve_classrooms(profile.role, profile.id, profile.school_id)
        student_ids = self.resolve_students(profile.role, profile.id, profile.school_id, classroom_ids)
        logger.debug(
            "Resolved scope for user %s (role=%s): %d classrooms, %d students",
            profile.id, profile.role, len(classroom_ids), len(student_ids),
        )
        return AccessScope(
            user_id=profile.id,
            role=profile.role,
            school_id=profile.school_id,
            classroom_ids=frozenset(classroom_ids),
            student_ids=frozenset(student_ids),
        )

    def thread_visibility_for(self, scope: AccessScope, thread) -> ThreadVisibility:
        """Visibility of a fetched `MessageThread` row for an already-resolved scope."""
        return self.resolve_thread_visibility(
            scope.role,
            scope.user_id,
            scope.school_id,
            thread.school_id,
            thread.classroom_id,
            classroom_ids=scope.classroom_ids,
        )
