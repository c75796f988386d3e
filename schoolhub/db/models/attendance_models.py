# /schoolhub/db/models/attendance_models.py

from sqlalchemy import Column, String, Date, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.sql import func

from ..base_class import Base


class Attendance(Base):
    __tablename__ = "attendance"
    # One record per student per day; saving a day again overwrites it.
    __table_args__ = (UniqueConstraint("student_id", "date", name="uq_attendance_student_date"),)

    id = Column(String, primary_key=True)
    student_id = Column(String, ForeignKey("student.id"), nullable=False, index=True)
    classroom_id = Column(String, ForeignKey("classroom.id"), nullable=False, index=True)
    school_id = Column(String, ForeignKey("school.id"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    status = Column(String(1), nullable=False)  # 'P', 'A' or 'R'
    note = Column(String, nullable=True)
    taken_by = Column(String, ForeignKey("user_profile.id"), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
