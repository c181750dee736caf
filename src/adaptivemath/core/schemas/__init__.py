"""Pydantic schemas for API validation."""

from .courses import (
    CourseCreate,
    CourseSchema,
    CourseUpdate,
    QuestionCreate,
    QuestionSchema,
    QuestionUpdate,
)
from .learning_styles import StyleProfileSchema, StyleRatingsSubmit, StyleStatementSchema
from .sessions import (
    AnswerResponse,
    AnswerSubmit,
    AttemptSchema,
    DiagnosticResultSchema,
    PresentedQuestionSchema,
    SessionSchema,
    SessionStart,
)
from .students import (
    PracticeSessionSchema,
    ResultReportSchema,
    StoredResultSchema,
    StudentCreate,
    StudentSchema,
)
from .syllabi import ChapterSchema, SyllabusCreate, SyllabusSchema

__all__ = [
    # Courses
    "CourseCreate",
    "CourseUpdate",
    "CourseSchema",
    "QuestionCreate",
    "QuestionUpdate",
    "QuestionSchema",
    # Sessions
    "SessionStart",
    "SessionSchema",
    "AnswerSubmit",
    "AnswerResponse",
    "AttemptSchema",
    "PresentedQuestionSchema",
    "DiagnosticResultSchema",
    # Students
    "StudentCreate",
    "StudentSchema",
    "StoredResultSchema",
    "ResultReportSchema",
    "PracticeSessionSchema",
    # Syllabi
    "ChapterSchema",
    "SyllabusCreate",
    "SyllabusSchema",
    # Learning styles
    "StyleStatementSchema",
    "StyleRatingsSubmit",
    "StyleProfileSchema",
]
