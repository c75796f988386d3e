# /schoolhub/services/database_helpers/message_repository_sql.py

import uuid
from typing import Dict, Iterable, List, Optional

from sqlalchemy.orm import Session

from ...db.models.message_models import MessageThread, Message


class MessageRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    # --- Thread Methods ---
    def create_thread_with_message(self, thread_record: Dict, body: str) -> MessageThread:
        """Creates the thread and its opening message in a single commit."""
        new_thread = MessageThread(id=f"thr_{uuid.uuid4().hex[:12]}", **thread_record)
        self.db.add(new_thread)
        self.db.flush()
        self.db.add(Message(
            id=f"msg_{uuid.uuid4().hex[:12]}",
            thread_id=new_thread.id,
            sender_id=thread_record["created_by"],
            body=body,
        ))
        self.db.commit()
        self.db.refresh(new_thread)
        return new_thread

    def get_thread_by_id(self, thread_id: str) -> Optional[MessageThread]:
        return self.db.query(MessageThread).filter(MessageThread.id == thread_id).first()

    def get_general_threads(self, school_id: str, limit: int) -> List[MessageThread]:
        return (
            self.db.query(MessageThread)
            .filter(MessageThread.school_id == school_id, MessageThread.classroom_id.is_(None))
            .order_by(MessageThread.created_at.desc())
            .limit(limit)
            .all()
        )

    def get_threads_by_classroom_ids(self, classroom_ids: Iterable[str], limit: int) -> List[MessageThread]:
        ids = list(classroom_ids)
        if not ids:
            return []
        return (
            self.db.query(MessageThread)
            .filter(MessageThread.classroom_id.in_(ids))
            .order_by(MessageThread.created_at.desc())
            .limit(limit)
            .all()
        )

    # --- Message Methods ---
    def add_message(self, record: Dict) -> Message:
        new_message = Message(id=f"msg_{uuid.uuid4().hex[:12]}", **record)
        self.db.add(new_message)
        self.db.commit()
        self.db.refresh(new_message)
        return new_message

    def get_messages_by_thread_id(self, thread_id: str) -> List[Message]:
        return (
            self.db.query(Message)
            .filter(Message.thread_id == thread_id)
            .order_by(Message.created_at.asc())
            .all()
        )

    def get_latest_message(self, thread_id: str) -> Optional[Message]:
        return (
            self.db.query(Message)
            .filter(Message.thread_id == thread_id)
            .order_by(Message.created_at.desc())
            .first()
        )
