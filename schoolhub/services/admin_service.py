# /schoolhub/services/admin_service.py

"""
This service module backs the director's administration screens: creating
and renaming classrooms and students, enrolling students, assigning teachers
and linking guardians.

Every operation is gated by `require_director`, and every row it touches must
belong to the director's own school. This is also where the school id of an
enrollment is stamped, so an enrollment always carries the same school as both
its student and its classroom.
"""

import logging
from collections import defaultdict
from typing import List

from ..core.errors import AccessDenied, ResourceNotFound
from ..models import admin_model, classroom_model, student_model
from ..models.profile_model import Profile, Role, normalize_role, spellings_for
from .database_service import DatabaseService

logger = logging.getLogger(__name__)


def require_director(profile: Profile) -> str:
    """Returns the director's school id, or raises if the caller may not administer."""
    if profile.role is not Role.DIRECTOR:
        raise AccessDenied("Only directors can manage the school.")
    if not profile.school_id:
        raise ValueError("You need to be linked to a school before continuing.")
    return profile.school_id


def _classroom_in_school(classroom_id: str, school_id: str, db: DatabaseService):
    classroom = db.get_classroom_by_id(classroom_id)
    if classroom is None or classroom.school_id != school_id:
        raise ResourceNotFound(f"Classroom with ID {classroom_id} not found")
    return classroom


def _student_in_school(student_id: str, school_id: str, db: DatabaseService):
    student = db.get_student_by_id(student_id)
    if student is None or student.school_id != school_id:
        raise ResourceNotFound(f"Student with ID {student_id} not found")
    return student


def _member_of_school(user_id: str, school_id: str, expected: Role, db: DatabaseService):
    member = db.get_profile_by_id(user_id)
    if member is None or member.school_id != school_id:
        raise ResourceNotFound(f"User with ID {user_id} not found")
    if normalize_role(member.role) is not expected:
        raise ValueError(f"User {user_id} does not have the {expected.value} role.")
    return member


# --- Classrooms & Students ---

def save_classroom(payload: classroom_model.ClassroomUpsert, profile: Profile, db: DatabaseService) -> classroom_model.Classroom:
    school_id = require_director(profile)
    name = payload.name.strip()
    if not name:
        raise ValueError("The classroom name is required.")

    record = {"name": name, "school_id": school_id}
    if payload.id:
        existing = db.get_classroom_by_id(payload.id)
        if existing is not None and existing.school_id != school_id:
            raise ResourceNotFound(f"Classroom with ID {payload.id} not found")
        record["id"] = payload.id

    saved = db.upsert_classroom(record)
    logger.info("Director %s saved classroom %s", profile.id, saved.id)
    return classroom_model.Classroom.model_validate(saved)


def save_student(payload: student_model.StudentUpsert, profile: Profile, db: DatabaseService) -> student_model.Student:
    school_id = require_director(profile)
    first_name = payload.first_name.strip()
    last_name = payload.last_name.strip()
    if not first_name or not last_name:
        raise ValueError("First and last name are required.")

    record = {
        "first_name": first_name,
        "last_name": last_name,
        "date_of_birth": payload.date_of_birth,
        "school_id": school_id,
    }
    if payload.id:
        existing = db.get_student_by_id(payload.id)
        if existing is not None and existing.school_id != school_id:
            raise ResourceNotFound(f"Student with ID {payload.id} not found")
        record["id"] = payload.id

    saved = db.upsert_student(record)
    logger.info("Director %s saved student %s", profile.id, saved.id)
    return student_model.Student.model_validate(saved)


# --- Join Tables ---

def enroll_student(payload: admin_model.EnrollmentCreate, profile: Profile, db: DatabaseService) -> admin_model.Enrollment:
    school_id = require_director(profile)
    student = _student_in_school(payload.student_id, school_id, db)
    classroom = _classroom_in_school(payload.classroom_id, school_id, db)

    enrollment = db.add_enrollment({"student_id": student.id, "classroom_id": classroom.id, "school_id": school_id})
    return admin_model.Enrollment(
        id=enrollment.id,
        student_id=enrollment.student_id,
        classroom_id=enrollment.classroom_id,
        school_id=enrollment.school_id,
    )


def assign_teacher(payload: admin_model.TeacherAssignmentCreate, profile: Profile, db: DatabaseService) -> admin_model.TeacherAssignment:
    school_id = require_director(profile)
    classroom = _classroom_in_school(payload.classroom_id, school_id, db)
    teacher = _member_of_school(payload.teacher_id, school_id, Role.TEACHER, db)

    assignment = db.upsert_teacher_assignment({"teacher_id": teacher.id, "classroom_id": classroom.id})
    logger.info("Director %s assigned teacher %s to classroom %s", profile.id, teacher.id, classroom.id)
    return admin_model.TeacherAssignment(
        id=assignment.id, teacher_id=assignment.teacher_id, classroom_id=assignment.classroom_id
    )


def link_guardian(payload: admin_model.GuardianLinkCreate, profile: Profile, db: DatabaseService) -> admin_model.GuardianLink:
    school_id = require_director(profile)
    student = _student_in_school(payload.student_id, school_id, db)
    guardian = _member_of_school(payload.user_id, school_id, Role.GUARDIAN, db)

    relationship = (payload.relationship or "").strip() or None
    link = db.upsert_guardian_link({"user_id": guardian.id, "student_id": student.id, "relationship": relationship})
    return admin_model.GuardianLink(
        id=link.id, user_id=link.user_id, student_id=link.student_id, relationship=link.relationship
    )


# --- Listings ---

def list_teachers(profile: Profile, db: DatabaseService) -> List[admin_model.StaffMember]:
    school_id = require_director(profile)
    teachers = db.get_profiles_by_school_and_roles(school_id, spellings_for(Role.TEACHER))
    classroom_ids = [c.id for c in db.get_classrooms_by_school(school_id)]

    assigned = defaultdict(list)
    for row in db.get_assignments_by_classroom_ids(classroom_ids):
        assigned[row.teacher_id].append(row.classroom_id)

    return [
        admin_model.StaffMember(
            id=t.id, display_name=t.display_name, role=t.role, classroom_ids=sorted(assigned.get(t.id, []))
        )
        for t in teachers
    ]


def list_guardians(profile: Profile, db: DatabaseService) -> List[admin_model.GuardianMember]:
    school_id = require_director(profile)
    guardians = db.get_profiles_by_school_and_roles(school_id, spellings_for(Role.GUARDIAN))
    student_ids = [s.id for s in db.get_students_by_school(school_id)]

    linked = defaultdict(list)
    for row in db.get_guardian_links_by_student_ids(student_ids):
        linked[row.user_id].append(row.student_id)

    return [
        admin_model.GuardianMember(
            id=g.id, display_name=g.display_name, role=g.role, student_ids=sorted(linked.get(g.id, []))
        )
        for g in guardians
    ]
