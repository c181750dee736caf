"""
Session Pydantic Schemas

Request/response models for diagnostic and practice session endpoints.
"""

from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from adaptivemath.diagnostic.values import MAX_TIME_TAKEN


# Request schemas
class SessionStart(BaseModel):
    """Request schema for starting a session."""

    student_id: UUID
    course_id: str = Field(min_length=1, max_length=64)
    mode: Literal["diagnostic", "practice"] = "diagnostic"


class AnswerSubmit(BaseModel):
    """Request schema for answering the presented question."""

    question_id: str
    response: str
    time_taken: float = Field(
        le=MAX_TIME_TAKEN,
        allow_inf_nan=False,
        description="Seconds; negative values are treated as 0",
    )


# Response schemas
class PresentedQuestionSchema(BaseModel):
    """Question as shown to a student (answer withheld)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    statement: str
    difficulty: int
    target_time: float


class AttemptSchema(BaseModel):
    """One recorded attempt."""

    model_config = ConfigDict(from_attributes=True)

    question_id: str
    correct: bool
    time_taken: float
    difficulty: int
    target_time: float | None = None


class DiagnosticResultSchema(BaseModel):
    """Scored diagnostic result."""

    model_config = ConfigDict(from_attributes=True)

    course_id: str
    skill_level: int
    correct_percentage: int
    average_time: int
    attempts: list[AttemptSchema]


class SessionSchema(BaseModel):
    """Active or completed session."""

    id: UUID
    student_id: UUID
    course_id: str
    mode: str
    state: str
    question_number: int
    total_questions: int | None = None
    current_question: PresentedQuestionSchema | None = None
    exhausted: bool = False


class AnswerResponse(BaseModel):
    """Response after an answer or timeout."""

    correct: bool
    feedback: str
    correct_answer: str
    time_taken: float
    target_time: float
    next_question: PresentedQuestionSchema | None = None
    session_completed: bool = False
    result: DiagnosticResultSchema | None = None
    message: str | None = None
