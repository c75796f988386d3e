# /schoolhub/routers/students_router.py

from fastapi import APIRouter, Depends
from typing import List

from ..core.deps import get_access_scope
from ..models import student_model
from ..services import classroom_service
from ..services.access_resolver import AccessScope
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get("", response_model=List[student_model.Student], summary="Get the Caller's Students")
def get_students(
    scope: AccessScope = Depends(get_access_scope),
    db: DatabaseService = Depends(get_db_service),
):
    return classroom_service.list_students(scope=scope, db=db)
