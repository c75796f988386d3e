# /schoolhub/core/deps.py

"""
Request-scoped dependencies shared by the routers.

Sessions are issued by the hosted auth service; by the time a request reaches
this API the gateway has verified the session and forwards the user id in the
`X-User-Id` header. The profile is re-read from the database on every request
so role or school changes made by an administrator apply immediately.
"""

from typing import Optional

from fastapi import Depends, Header, HTTPException, status

from ..models.profile_model import Profile
from ..services import profile_service
from ..services.access_resolver import AccessResolver, AccessScope
from ..services.database_service import DatabaseService, get_db_service
from .debug_context import DebugContext


def get_current_profile(
    x_user_id: Optional[str] = Header(default=None),
    db: DatabaseService = Depends(get_db_service),
) -> Profile:
    user_id = (x_user_id or "").strip()
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return profile_service.get_my_profile(db, user_id)


def get_access_resolver(db: DatabaseService = Depends(get_db_service)) -> AccessResolver:
    return AccessResolver(db)


def get_access_scope(
    profile: Profile = Depends(get_current_profile),
    resolver: AccessResolver = Depends(get_access_resolver),
) -> AccessScope:
    return resolver.resolve_scope(profile)


def get_debug_context() -> DebugContext:
    # A fresh object per request; nothing survives between requests.
    return DebugContext()
