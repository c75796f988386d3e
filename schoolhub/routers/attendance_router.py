# /schoolhub/routers/attendance_router.py

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, status

from ..core.deps import get_access_scope
from ..core.errors import AccessDenied, ResourceNotFound
from ..models import attendance_model
from ..services import attendance_service
from ..services.access_resolver import AccessScope
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get("", response_model=attendance_model.AttendanceSheet, summary="Get the Attendance Sheet for a Classroom and Day")
def get_attendance_sheet(
    classroom_id: str,
    date: date,
    scope: AccessScope = Depends(get_access_scope),
    db: DatabaseService = Depends(get_db_service),
):
    try:
        return attendance_service.get_sheet(classroom_id=classroom_id, day=date, scope=scope, db=db)
    except ResourceNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.put("", response_model=attendance_model.AttendanceSheet, summary="Save the Attendance Sheet")
def save_attendance_sheet(
    payload: attendance_model.AttendanceSave,
    scope: AccessScope = Depends(get_access_scope),
    db: DatabaseService = Depends(get_db_service),
):
    try:
        return attendance_service.save_sheet(payload=payload, scope=scope, db=db)
    except ResourceNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except AccessDenied as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
