# /schoolhub/db/models/message_models.py

from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..base_class import Base


class MessageThread(Base):
    __tablename__ = "message_thread"
    id = Column(String, primary_key=True)
    school_id = Column(String, ForeignKey("school.id"), nullable=False, index=True)
    # NULL means a general announcement for the whole school.
    classroom_id = Column(String, ForeignKey("classroom.id"), nullable=True, index=True)
    title = Column(String, nullable=False)
    created_by = Column(String, ForeignKey("user_profile.id"), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    # Relationship to Messages
    messages = relationship("Message", back_populates="thread", cascade="all, delete-orphan")
    classroom = relationship("Classroom")


class Message(Base):
    __tablename__ = "message"
    id = Column(String, primary_key=True)
    thread_id = Column(String, ForeignKey("message_thread.id"), nullable=False, index=True)
    sender_id = Column(String, ForeignKey("user_profile.id"), nullable=False)
    body = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationship to Thread
    thread = relationship("MessageThread", back_populates="messages")
    sender = relationship("UserProfile")
