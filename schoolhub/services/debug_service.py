# /schoolhub/services/debug_service.py

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from ..core.debug_context import DebugContext
from ..models.profile_model import Profile
from . import classroom_service
from .access_resolver import AccessResolver
from .database_service import DatabaseService

logger = logging.getLogger(__name__)


def fill_debug_context(
    ctx: DebugContext,
    profile: Profile,
    resolver: AccessResolver,
    db: DatabaseService,
    classroom_id: Optional[str] = None,
) -> DebugContext:
    """
    Populates `ctx` with what the access layer sees for this caller.

    Unlike the regular routes, a backend failure here does not fail the
    request: the diagnostics page exists precisely to show that error.
    """
    ctx.record_profile(profile)
    try:
        classroom_ids = resolver.resolve_classrooms(profile.role, profile.id, profile.school_id)
        ctx.record_classrooms(sorted(db.get_classrooms_by_ids(classroom_ids), key=lambda c: (c.name or "").casefold()))
        if classroom_id and classroom_id in classroom_ids:
            ctx.students_count_selected = len(classroom_service.get_enrolled_students(classroom_id, db))
    except SQLAlchemyError as e:
        logger.error("Debug context for user %s failed: %s", profile.id, e)
        db.rollback()
        ctx.record_error(e)
    return ctx
