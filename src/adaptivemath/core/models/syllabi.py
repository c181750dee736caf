"""
Syllabus Models

Teacher-authored structured courses: numbered chapters, each with concepts.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class Syllabus(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """A structured course framework.

    chapters: [{"id": str, "number": int, "title": str, "concepts": [str, ...]}, ...]
    """

    __tablename__ = "syllabi"

    name: Mapped[str] = mapped_column(String(120), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    teacher_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    chapters: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)

    def __repr__(self) -> str:
        return f"<Syllabus {self.name} ({len(self.chapters or [])} chapters)>"
