# /schoolhub/routers/messages_router.py

from fastapi import APIRouter, Depends, HTTPException, status

from ..core.deps import get_access_resolver, get_access_scope
from ..core.errors import AccessDenied, ResourceNotFound
from ..models import message_model
from ..services import message_service
from ..services.access_resolver import AccessResolver, AccessScope
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()

# --- THREAD COLLECTION ENDPOINTS (/api/messages/threads) ---

@router.get("/threads", response_model=message_model.ThreadListResponse, summary="List Message Threads")
def list_threads(
    classroom: str = "all",
    scope: AccessScope = Depends(get_access_scope),
    resolver: AccessResolver = Depends(get_access_resolver),
    db: DatabaseService = Depends(get_db_service),
):
    """
    `classroom` is 'all' (default), 'general' for school-wide announcements,
    or a classroom id.
    """
    return message_service.list_threads(classroom_filter=classroom, scope=scope, resolver=resolver, db=db)


@router.post(
    "/threads",
    response_model=message_model.ThreadDetails,
    status_code=status.HTTP_201_CREATED,
    summary="Start a New Thread"
)
def create_thread(
    payload: message_model.ThreadCreate,
    scope: AccessScope = Depends(get_access_scope),
    resolver: AccessResolver = Depends(get_access_resolver),
    db: DatabaseService = Depends(get_db_service),
):
    try:
        return message_service.create_thread(payload=payload, scope=scope, resolver=resolver, db=db)
    except AccessDenied as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

# --- INDIVIDUAL THREAD ENDPOINTS (/api/messages/threads/{thread_id}) ---

@router.get("/threads/{thread_id}", response_model=message_model.ThreadDetails, summary="Get a Thread with its Messages")
def get_thread(
    thread_id: str,
    scope: AccessScope = Depends(get_access_scope),
    resolver: AccessResolver = Depends(get_access_resolver),
    db: DatabaseService = Depends(get_db_service),
):
    try:
        return message_service.get_thread_details(thread_id=thread_id, scope=scope, resolver=resolver, db=db)
    except ResourceNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post(
    "/threads/{thread_id}/messages",
    response_model=message_model.MessageRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Reply in a Thread"
)
def post_message(
    thread_id: str,
    payload: message_model.MessageCreate,
    scope: AccessScope = Depends(get_access_scope),
    resolver: AccessResolver = Depends(get_access_resolver),
    db: DatabaseService = Depends(get_db_service),
):
    try:
        return message_service.post_message(thread_id=thread_id, payload=payload, scope=scope, resolver=resolver, db=db)
    except ResourceNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except AccessDenied as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
