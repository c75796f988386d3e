# /schoolhub/db/models/school_models.py

"""
This module defines the SQLAlchemy ORM models for the school roster: the
school itself, user profiles, classrooms, students, and the three join tables
that every access decision is derived from (`enrollment`, `teacher_classroom`
and `guardian`).

Table names are singular to match the hosted schema the web client was built
against, so each model overrides the automatic table name.
"""

from sqlalchemy import Column, String, Date, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..base_class import Base


class School(Base):
    __tablename__ = "school"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    classrooms = relationship("Classroom", back_populates="school")
    students = relationship("Student", back_populates="school")


class UserProfile(Base):
    """
    One row per authenticated user. The primary key is the user id issued by
    the hosted auth service.

    `role` is stored exactly as an administrator typed it (historical rows use
    several spellings such as 'maestra' or 'padre'); it is normalized at read
    time by `models.profile_model.normalize_role`.
    """
    __tablename__ = "user_profile"

    id = Column(String, primary_key=True)
    role = Column(String, nullable=True)
    display_name = Column(String, nullable=True)
    # A profile may exist before an administrator attaches it to a school.
    school_id = Column(String, ForeignKey("school.id"), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class Classroom(Base):
    __tablename__ = "classroom"

    id = Column(String, primary_key=True)
    name = Column(String, index=True, nullable=False)
    school_id = Column(String, ForeignKey("school.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    school = relationship("School", back_populates="classrooms")
    enrollments = relationship("Enrollment", back_populates="classroom")


class Student(Base):
    __tablename__ = "student"

    id = Column(String, primary_key=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    date_of_birth = Column(Date, nullable=True)
    school_id = Column(String, ForeignKey("school.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    school = relationship("School", back_populates="students")
    enrollments = relationship("Enrollment", back_populates="student")


class Enrollment(Base):
    """
    Many-to-many join between students and classrooms.

    `school_id` is denormalized onto the row. The admin service only creates
    enrollments whose student and classroom share the director's school, so
    the three school ids always agree for rows written through this API.
    """
    __tablename__ = "enrollment"
    __table_args__ = (UniqueConstraint("student_id", "classroom_id", name="uq_enrollment_student_classroom"),)

    id = Column(String, primary_key=True)
    student_id = Column(String, ForeignKey("student.id"), nullable=False, index=True)
    classroom_id = Column(String, ForeignKey("classroom.id"), nullable=False, index=True)
    school_id = Column(String, ForeignKey("school.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    student = relationship("Student", back_populates="enrollments")
    classroom = relationship("Classroom", back_populates="enrollments")


class TeacherClassroom(Base):
    __tablename__ = "teacher_classroom"
    __table_args__ = (UniqueConstraint("teacher_id", "classroom_id", name="uq_teacher_classroom"),)

    id = Column(String, primary_key=True)
    teacher_id = Column(String, ForeignKey("user_profile.id"), nullable=False, index=True)
    classroom_id = Column(String, ForeignKey("classroom.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class Guardian(Base):
    """A link between a guardian's profile and one of their wards."""
    __tablename__ = "guardian"
    __table_args__ = (UniqueConstraint("user_id", "student_id", name="uq_guardian_user_student"),)

    id = Column(String, primary_key=True)
    user_id = Column(String, ForeignKey("user_profile.id"), nullable=False, index=True)
    student_id = Column(String, ForeignKey("student.id"), nullable=False, index=True)
    relationship = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
