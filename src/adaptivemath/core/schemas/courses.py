"""
Course Pydantic Schemas

Request/response models for course and question management endpoints.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from adaptivemath.diagnostic.values import MAX_TIME_TAKEN


# Request schemas
class CourseCreate(BaseModel):
    """Request schema for creating a course. The id defaults to a slug of the name."""

    id: str | None = Field(default=None, pattern=r"^[a-z0-9][a-z0-9\-]*$", max_length=64)
    name: str = Field(min_length=1, max_length=120)
    description: str = Field(min_length=1)


class CourseUpdate(BaseModel):
    """Request schema for updating a course."""

    name: str | None = Field(default=None, min_length=1, max_length=120)
    description: str | None = Field(default=None, min_length=1)


class QuestionCreate(BaseModel):
    """Request schema for adding a question to a course."""

    id: str | None = Field(default=None, min_length=1, max_length=64)
    statement: str = Field(min_length=1)
    correct_answer: str = Field(min_length=1, max_length=255)
    difficulty: int = Field(default=5, ge=1, le=10)
    target_time: float = Field(default=60, gt=0, le=MAX_TIME_TAKEN, allow_inf_nan=False)


class QuestionUpdate(BaseModel):
    """Request schema for editing a question."""

    statement: str | None = Field(default=None, min_length=1)
    correct_answer: str | None = Field(default=None, min_length=1, max_length=255)
    difficulty: int | None = Field(default=None, ge=1, le=10)
    target_time: float | None = Field(default=None, gt=0, le=MAX_TIME_TAKEN, allow_inf_nan=False)


# Response schemas
class CourseSchema(BaseModel):
    """Course response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str
    created_at: datetime


class QuestionSchema(BaseModel):
    """Full question, including the answer (teacher views)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    course_id: str
    statement: str
    correct_answer: str
    difficulty: int
    target_time: float
