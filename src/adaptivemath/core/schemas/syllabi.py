"""
Syllabus Pydantic Schemas

Request/response models for structured course authoring.
"""

from datetime import datetime
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ChapterSchema(BaseModel):
    """One numbered chapter and its concepts."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    number: int = Field(ge=1)
    title: str = Field(min_length=1, max_length=200)
    concepts: list[str] = Field(default_factory=list)

    @field_validator("concepts")
    @classmethod
    def strip_concepts(cls, v: list[str]) -> list[str]:
        """Drop blank concepts and surrounding whitespace."""
        return [concept.strip() for concept in v if concept.strip()]


class SyllabusCreate(BaseModel):
    """Request schema for creating a syllabus."""

    name: str = Field(min_length=1, max_length=120)
    description: str = ""
    teacher_id: str = Field(min_length=1, max_length=64)
    chapters: list[ChapterSchema] = Field(default_factory=list)

    @field_validator("chapters")
    @classmethod
    def unique_chapter_numbers(cls, v: list[ChapterSchema]) -> list[ChapterSchema]:
        """Reject duplicate chapter numbers and return chapters in number order."""
        numbers = [chapter.number for chapter in v]
        if len(numbers) != len(set(numbers)):
            raise ValueError("Chapter numbers must be unique")
        return sorted(v, key=lambda chapter: chapter.number)


class SyllabusSchema(BaseModel):
    """Syllabus response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: str
    teacher_id: str
    chapters: list[ChapterSchema]
    created_at: datetime
