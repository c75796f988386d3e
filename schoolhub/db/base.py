# /schoolhub/db/base.py

# This file acts as a central registry for all our SQLAlchemy models.
# By importing them all here, we ensure that the Base class knows about them
# when Alembic runs its auto-generation scan (and when tests call create_all).

# Import the Base class that all models inherit from.
from .base_class import Base

# Import all of our model classes from their respective files.
from .models.school_models import School, UserProfile, Classroom, Student, Enrollment, TeacherClassroom, Guardian
from .models.attendance_models import Attendance
from .models.message_models import MessageThread, Message
