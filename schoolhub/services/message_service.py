# /schoolhub/services/message_service.py

"""
Business logic for the school message board.

Threads are either general announcements (no classroom) or attached to one
classroom. What a caller may read or post is decided by
`AccessResolver.resolve_thread_visibility`; this module only orchestrates the
queries around that decision.
"""

import logging
from typing import List

from ..core.config import settings
from ..core.errors import AccessDenied, ResourceNotFound
from ..models.message_model import (
    MessageCreate,
    MessagePreview,
    MessageRecord,
    MessageSender,
    ThreadCreate,
    ThreadDetails,
    ThreadKind,
    ThreadListResponse,
    ThreadSummary,
)
from ..models.profile_model import Role
from .access_resolver import AccessResolver, AccessScope
from .database_service import DatabaseService

logger = logging.getLogger(__name__)

FILTER_ALL = "all"
FILTER_GENERAL = "general"


# --- Helpers ---

def _to_summary(thread, db: DatabaseService) -> ThreadSummary:
    latest = db.get_latest_message(thread.id)
    return ThreadSummary(
        id=thread.id,
        title=thread.title,
        school_id=thread.school_id,
        classroom_id=thread.classroom_id,
        classroom_name=thread.classroom.name if thread.classroom is not None else None,
        created_at=thread.created_at,
        last_message=MessagePreview(body=latest.body, created_at=latest.created_at) if latest else None,
    )


def _to_record(message) -> MessageRecord:
    sender = None
    if message.sender is not None:
        sender = MessageSender(
            id=message.sender.id,
            display_name=message.sender.display_name,
            role=message.sender.role,
        )
    return MessageRecord(id=message.id, body=message.body, created_at=message.created_at, sender=sender)


def _newest_first(threads) -> List:
    unique = {t.id: t for t in threads}
    return sorted(unique.values(), key=lambda t: t.created_at.isoformat() if t.created_at else "", reverse=True)


def _readable_thread(thread_id: str, scope: AccessScope, resolver: AccessResolver, db: DatabaseService):
    thread = db.get_thread_by_id(thread_id)
    if thread is None:
        raise ResourceNotFound(f"Thread with ID {thread_id} not found")
    visibility = resolver.thread_visibility_for(scope, thread)
    if not visibility.can_read:
        raise ResourceNotFound(f"Thread with ID {thread_id} not found")
    return thread, visibility


def can_create_threads(scope: AccessScope) -> bool:
    return scope.is_staff and bool(scope.school_id)


# --- Public Service Functions ---

def list_threads(
    classroom_filter: str, scope: AccessScope, resolver: AccessResolver, db: DatabaseService
) -> ThreadListResponse:
    """
    `classroom_filter` is 'all', 'general' or a classroom id. A classroom
    outside the caller's scope yields an empty list rather than an error.
    """
    classroom_filter = (classroom_filter or FILTER_ALL).strip()
    threads = []

    general_readable = bool(scope.school_id) and resolver.resolve_thread_visibility(
        scope.role, scope.user_id, scope.school_id, scope.school_id, None
    ).can_read

    if classroom_filter == FILTER_GENERAL:
        if general_readable:
            threads = db.get_general_threads(scope.school_id, settings.GENERAL_THREAD_LIMIT)
    elif classroom_filter != FILTER_ALL:
        if scope.can_access_classroom(classroom_filter):
            threads = db.get_threads_by_classroom_ids([classroom_filter], settings.CLASSROOM_THREAD_LIMIT)
    else:
        if general_readable:
            threads.extend(db.get_general_threads(scope.school_id, settings.GENERAL_THREAD_LIMIT))
        threads.extend(db.get_threads_by_classroom_ids(scope.classroom_ids, settings.CLASSROOM_THREAD_LIMIT))

    return ThreadListResponse(
        threads=[_to_summary(t, db) for t in _newest_first(threads)],
        can_create=can_create_threads(scope),
    )


def get_thread_details(thread_id: str, scope: AccessScope, resolver: AccessResolver, db: DatabaseService) -> ThreadDetails:
    thread, visibility = _readable_thread(thread_id, scope, resolver, db)
    messages = db.get_messages_by_thread_id(thread.id)
    return ThreadDetails(
        thread=_to_summary(thread, db),
        messages=[_to_record(m) for m in messages],
        can_post=visibility.can_post,
    )


def create_thread(payload: ThreadCreate, scope: AccessScope, resolver: AccessResolver, db: DatabaseService) -> ThreadDetails:
    if not scope.is_staff:
        raise AccessDenied("You do not have permission to create threads.")
    if not scope.school_id:
        raise ValueError("You need to belong to a school to post announcements.")

    title = payload.title.strip()
    body = payload.body.strip()
    if len(title) < 3:
        raise ValueError("The title must be at least 3 characters long.")
    if len(body) < 5:
        raise ValueError("The message must be at least 5 characters long.")

    school_id = scope.school_id
    classroom_id = None
    if payload.kind is ThreadKind.GENERAL:
        # Only the director's office publishes school-wide announcements.
        if scope.role is not Role.DIRECTOR:
            raise AccessDenied("Only the director can create general announcements.")
    else:
        if not payload.classroom_id:
            raise ValueError("Select a classroom for the thread.")
        if not scope.can_access_classroom(payload.classroom_id):
            raise AccessDenied("You do not have access to that classroom.")
        classroom = db.get_classroom_by_id(payload.classroom_id)
        if classroom is None:
            raise AccessDenied("You do not have access to that classroom.")
        classroom_id = classroom.id
        school_id = classroom.school_id

    thread = db.create_thread_with_message(
        {"school_id": school_id, "classroom_id": classroom_id, "title": title, "created_by": scope.user_id},
        body,
    )
    logger.info("User %s created thread %s (classroom=%s)", scope.user_id, thread.id, classroom_id)
    return get_thread_details(thread.id, scope, resolver, db)


def post_message(
    thread_id: str, payload: MessageCreate, scope: AccessScope, resolver: AccessResolver, db: DatabaseService
) -> MessageRecord:
    thread, visibility = _readable_thread(thread_id, scope, resolver, db)
    if not visibility.can_post:
        raise AccessDenied("You cannot post in this thread.")

    body = payload.body.strip()
    if not body:
        raise ValueError("The message cannot be empty.")

    message = db.add_message({"thread_id": thread.id, "sender_id": scope.user_id, "body": body})
    return _to_record(message)
