# /schoolhub/models/message_model.py

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ThreadKind(str, Enum):
    GENERAL = "general"
    CLASSROOM = "classroom"


class MessagePreview(BaseModel):
    body: str
    created_at: Optional[datetime] = None


class ThreadSummary(BaseModel):
    """One entry of the message board listing."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    school_id: str
    classroom_id: Optional[str] = None
    classroom_name: Optional[str] = None
    created_at: Optional[datetime] = None
    last_message: Optional[MessagePreview] = None


class ThreadListResponse(BaseModel):
    threads: List[ThreadSummary]
    can_create: bool


class MessageSender(BaseModel):
    id: str
    display_name: Optional[str] = None
    role: Optional[str] = None


class MessageRecord(BaseModel):
    id: str
    body: str
    created_at: Optional[datetime] = None
    sender: Optional[MessageSender] = None


class ThreadDetails(BaseModel):
    thread: ThreadSummary
    messages: List[MessageRecord]
    can_post: bool


class ThreadCreate(BaseModel):
    """
    Payload for starting a new thread. The first message body is sent along
    with the title so a thread never exists without content.
    """
    kind: ThreadKind
    title: str = Field(..., min_length=3, max_length=200)
    body: str = Field(..., min_length=5)
    classroom_id: Optional[str] = Field(default=None, description="Required when kind is 'classroom'.")


class MessageCreate(BaseModel):
    body: str = Field(..., min_length=1)
