"""
Learning Style Pydantic Schemas

Request/response models for the VARK questionnaire.
"""

from uuid import UUID

from pydantic import BaseModel, Field


class StyleStatementSchema(BaseModel):
    """Questionnaire statement."""

    id: str
    text: str
    style: str


class StyleRatingsSubmit(BaseModel):
    """Ratings keyed by statement id (1 = disagree, 5 = agree)."""

    ratings: dict[str, int] = Field(min_length=1)
    student_id: UUID | None = None


class StyleProfileSchema(BaseModel):
    """Scored questionnaire."""

    scores: dict[str, int]
    dominant: list[str]
