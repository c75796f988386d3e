# /schoolhub/routers/debug_router.py

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from ..core.config import settings
from ..core.debug_context import DebugContext
from ..core.deps import get_access_resolver, get_current_profile, get_debug_context
from ..models.profile_model import Profile
from ..services import debug_service
from ..services.access_resolver import AccessResolver
from ..services.database_service import DatabaseService, get_db_service


def require_debug_routes():
    # Runs before any endpoint dependency, so a disabled route looks absent
    # whether or not the caller is authenticated.
    if not settings.ENABLE_DEBUG_ROUTES:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")


router = APIRouter(dependencies=[Depends(require_debug_routes)])


@router.get("/access", response_model=DebugContext, summary="Inspect the Caller's Resolved Access")
def get_access_debug(
    classroom_id: Optional[str] = None,
    profile: Profile = Depends(get_current_profile),
    resolver: AccessResolver = Depends(get_access_resolver),
    db: DatabaseService = Depends(get_db_service),
    ctx: DebugContext = Depends(get_debug_context),
):
    return debug_service.fill_debug_context(ctx, profile, resolver, db, classroom_id=classroom_id)
