"""
AdaptiveMath SQLAlchemy Models
"""

from .base import Base, TimestampMixin, UUIDPrimaryKeyMixin
from .courses import BankQuestion, Course
from .results import DiagnosticResultRecord, PracticeSession
from .students import StudentProfile
from .syllabi import Syllabus

__all__ = [
    # Base
    "Base",
    "UUIDPrimaryKeyMixin",
    "TimestampMixin",
    # Courses
    "Course",
    "BankQuestion",
    # Students
    "StudentProfile",
    # Results
    "DiagnosticResultRecord",
    "PracticeSession",
    # Syllabi
    "Syllabus",
]
