# /schoolhub/routers/reports_router.py

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, status

from ..core.deps import get_access_scope
from ..core.errors import ResourceNotFound
from ..models import report_model
from ..services import report_service
from ..services.access_resolver import AccessScope
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get(
    "/attendance/classroom",
    response_model=report_model.ClassroomAttendanceReport,
    summary="Daily Attendance Totals for a Classroom"
)
def get_classroom_attendance_report(
    classroom_id: str,
    start: date,
    end: date,
    scope: AccessScope = Depends(get_access_scope),
    db: DatabaseService = Depends(get_db_service),
):
    try:
        return report_service.get_classroom_report(classroom_id=classroom_id, start=start, end=end, scope=scope, db=db)
    except ResourceNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get(
    "/attendance/student",
    response_model=report_model.StudentMonthReport,
    summary="Monthly Attendance Totals for a Student"
)
def get_student_attendance_report(
    student_id: str,
    month: str,
    scope: AccessScope = Depends(get_access_scope),
    db: DatabaseService = Depends(get_db_service),
):
    try:
        return report_service.get_student_month_report(student_id=student_id, month=month, scope=scope, db=db)
    except ResourceNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
