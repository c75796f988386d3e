"""Create school, roster, attendance and messaging tables

Revision ID: a1c4e2f7d9b0
Revises:
Create Date: 2025-02-03 10:15:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1c4e2f7d9b0'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at() -> sa.Column:
    return sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now())


def upgrade() -> None:
    """Create every table the API reads and writes."""
    op.create_table(
        'school',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        _created_at(),
    )
    op.create_table(
        'user_profile',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('role', sa.String(), nullable=True),
        sa.Column('display_name', sa.String(), nullable=True),
        sa.Column('school_id', sa.String(), sa.ForeignKey('school.id'), nullable=True, index=True),
        _created_at(),
    )
    op.create_table(
        'classroom',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False, index=True),
        sa.Column('school_id', sa.String(), sa.ForeignKey('school.id'), nullable=False, index=True),
        _created_at(),
    )
    op.create_table(
        'student',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('first_name', sa.String(), nullable=False),
        sa.Column('last_name', sa.String(), nullable=False),
        sa.Column('date_of_birth', sa.Date(), nullable=True),
        sa.Column('school_id', sa.String(), sa.ForeignKey('school.id'), nullable=False, index=True),
        _created_at(),
    )
    op.create_table(
        'enrollment',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('student_id', sa.String(), sa.ForeignKey('student.id'), nullable=False, index=True),
        sa.Column('classroom_id', sa.String(), sa.ForeignKey('classroom.id'), nullable=False, index=True),
        sa.Column('school_id', sa.String(), sa.ForeignKey('school.id'), nullable=False, index=True),
        _created_at(),
        sa.UniqueConstraint('student_id', 'classroom_id', name='uq_enrollment_student_classroom'),
    )
    op.create_table(
        'teacher_classroom',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('teacher_id', sa.String(), sa.ForeignKey('user_profile.id'), nullable=False, index=True),
        sa.Column('classroom_id', sa.String(), sa.ForeignKey('classroom.id'), nullable=False, index=True),
        _created_at(),
        sa.UniqueConstraint('teacher_id', 'classroom_id', name='uq_teacher_classroom'),
    )
    op.create_table(
        'guardian',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('user_id', sa.String(), sa.ForeignKey('user_profile.id'), nullable=False, index=True),
        sa.Column('student_id', sa.String(), sa.ForeignKey('student.id'), nullable=False, index=True),
        sa.Column('relationship', sa.String(), nullable=True),
        _created_at(),
        sa.UniqueConstraint('user_id', 'student_id', name='uq_guardian_user_student'),
    )
    op.create_table(
        'attendance',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('student_id', sa.String(), sa.ForeignKey('student.id'), nullable=False, index=True),
        sa.Column('classroom_id', sa.String(), sa.ForeignKey('classroom.id'), nullable=False, index=True),
        sa.Column('school_id', sa.String(), sa.ForeignKey('school.id'), nullable=False, index=True),
        sa.Column('date', sa.Date(), nullable=False, index=True),
        sa.Column('status', sa.String(length=1), nullable=False),
        sa.Column('note', sa.String(), nullable=True),
        sa.Column('taken_by', sa.String(), sa.ForeignKey('user_profile.id'), nullable=False),
        _created_at(),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint('student_id', 'date', name='uq_attendance_student_date'),
    )
    op.create_table(
        'message_thread',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('school_id', sa.String(), sa.ForeignKey('school.id'), nullable=False, index=True),
        sa.Column('classroom_id', sa.String(), sa.ForeignKey('classroom.id'), nullable=True, index=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('created_by', sa.String(), sa.ForeignKey('user_profile.id'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), index=True),
    )
    op.create_table(
        'message',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('thread_id', sa.String(), sa.ForeignKey('message_thread.id'), nullable=False, index=True),
        sa.Column('sender_id', sa.String(), sa.ForeignKey('user_profile.id'), nullable=False),
        sa.Column('body', sa.String(), nullable=False),
        _created_at(),
    )


def downgrade() -> None:
    """Drop everything, children first."""
    for table in ('message', 'message_thread', 'attendance', 'guardian', 'teacher_classroom',
                  'enrollment', 'student', 'classroom', 'user_profile', 'school'):
        op.drop_table(table)
