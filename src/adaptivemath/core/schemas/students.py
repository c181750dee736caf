"""
Student Pydantic Schemas

Request/response models for profiles, stored results and practice history.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from .sessions import AttemptSchema


# Request schemas
class StudentCreate(BaseModel):
    """Request schema for creating a profile."""

    name: str = Field(min_length=1, max_length=120)
    is_teacher: bool = False


# Response schemas
class StudentSchema(BaseModel):
    """Profile response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    is_teacher: bool
    learning_style: str | None = None
    created_at: datetime


class StoredResultSchema(BaseModel):
    """Persisted diagnostic result."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    student_id: UUID
    course_id: str
    skill_level: int
    correct_percentage: int
    average_time: int
    attempts: list[AttemptSchema]
    completed_at: datetime


class ResultSummarySchema(BaseModel):
    """Display labels for a diagnostic result."""

    skill_level: int
    skill_label: str
    correct_percentage: int
    accuracy_remark: str
    average_time: int
    speed_remark: str
    recommendation: str


class PerformanceSeriesSchema(BaseModel):
    """Per-attempt chart data."""

    labels: list[str]
    difficulty: list[int]
    time_taken: list[float]
    correct: list[int]


class ResultReportSchema(BaseModel):
    """Latest result with its summary and chart series."""

    result: StoredResultSchema
    summary: ResultSummarySchema
    performance: PerformanceSeriesSchema


class PracticeSessionSchema(BaseModel):
    """Persisted practice session."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    student_id: UUID
    course_id: str
    attempts: list[AttemptSchema]
    started_at: datetime
    completed_at: datetime
