# /schoolhub/routers/classrooms_router.py

from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from ..core.deps import get_access_scope
from ..core.errors import ResourceNotFound
from ..models import classroom_model, student_model
from ..services import classroom_service
from ..services.access_resolver import AccessScope
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()

# --- CLASSROOM COLLECTION ENDPOINTS (/api/classrooms) ---

@router.get("", response_model=List[classroom_model.Classroom], summary="Get the Caller's Classrooms")
def get_classrooms(
    scope: AccessScope = Depends(get_access_scope),
    db: DatabaseService = Depends(get_db_service),
):
    return classroom_service.list_classrooms(scope=scope, db=db)

# --- INDIVIDUAL CLASSROOM RESOURCE ENDPOINTS (/api/classrooms/{classroom_id}) ---

@router.get("/{classroom_id}/students", response_model=List[student_model.Student], summary="Get the Students of a Classroom")
def get_classroom_students(
    classroom_id: str,
    scope: AccessScope = Depends(get_access_scope),
    db: DatabaseService = Depends(get_db_service),
):
    try:
        return classroom_service.list_classroom_students(classroom_id=classroom_id, scope=scope, db=db)
    except ResourceNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
