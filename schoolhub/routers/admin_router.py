# /schoolhub/routers/admin_router.py

"""
Director-only administration endpoints. Each one delegates to
`admin_service`, which checks the director role and school membership and
raises; this layer only maps those errors to HTTP status codes.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ..core.deps import get_current_profile
from ..core.errors import AccessDenied, ResourceNotFound
from ..models import admin_model, classroom_model, student_model
from ..models.profile_model import Profile
from ..services import admin_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


def _admin_call(fn, *args):
    try:
        return fn(*args)
    except AccessDenied as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except ResourceNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


# --- CLASSROOMS & STUDENTS ---

@router.put("/classrooms", response_model=classroom_model.Classroom, summary="Create or Rename a Classroom")
def save_classroom(
    payload: classroom_model.ClassroomUpsert,
    profile: Profile = Depends(get_current_profile),
    db: DatabaseService = Depends(get_db_service),
):
    return _admin_call(admin_service.save_classroom, payload, profile, db)


@router.put("/students", response_model=student_model.Student, summary="Create or Update a Student")
def save_student(
    payload: student_model.StudentUpsert,
    profile: Profile = Depends(get_current_profile),
    db: DatabaseService = Depends(get_db_service),
):
    return _admin_call(admin_service.save_student, payload, profile, db)


# --- ENROLLMENTS, ASSIGNMENTS & GUARDIAN LINKS ---

@router.post("/enrollments", response_model=admin_model.Enrollment, status_code=status.HTTP_201_CREATED, summary="Enroll a Student in a Classroom")
def enroll_student(
    payload: admin_model.EnrollmentCreate,
    profile: Profile = Depends(get_current_profile),
    db: DatabaseService = Depends(get_db_service),
):
    return _admin_call(admin_service.enroll_student, payload, profile, db)


@router.post("/teacher-assignments", response_model=admin_model.TeacherAssignment, status_code=status.HTTP_201_CREATED, summary="Assign a Teacher to a Classroom")
def assign_teacher(
    payload: admin_model.TeacherAssignmentCreate,
    profile: Profile = Depends(get_current_profile),
    db: DatabaseService = Depends(get_db_service),
):
    return _admin_call(admin_service.assign_teacher, payload, profile, db)


@router.post("/guardians", response_model=admin_model.GuardianLink, status_code=status.HTTP_201_CREATED, summary="Link a Guardian to a Student")
def link_guardian(
    payload: admin_model.GuardianLinkCreate,
    profile: Profile = Depends(get_current_profile),
    db: DatabaseService = Depends(get_db_service),
):
    return _admin_call(admin_service.link_guardian, payload, profile, db)


# --- LISTINGS ---

@router.get("/teachers", response_model=List[admin_model.StaffMember], summary="List the School's Teachers")
def list_teachers(
    profile: Profile = Depends(get_current_profile),
    db: DatabaseService = Depends(get_db_service),
):
    return _admin_call(admin_service.list_teachers, profile, db)


@router.get("/guardians", response_model=List[admin_model.GuardianMember], summary="List the School's Guardians")
def list_guardians(
    profile: Profile = Depends(get_current_profile),
    db: DatabaseService = Depends(get_db_service),
):
    return _admin_call(admin_service.list_guardians, profile, db)
