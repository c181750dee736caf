"""
Student Models

Learner (and teacher) profiles that own diagnostic results and practice history.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin, UUIDPrimaryKeyMixin

if TYPE_CHECKING:
    from .results import DiagnosticResultRecord, PracticeSession


class StudentProfile(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """A user of the platform."""

    __tablename__ = "student_profiles"

    name: Mapped[str] = mapped_column(String(120), nullable=False)
    is_teacher: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    learning_style: Mapped[str | None] = mapped_column(
        String(60), nullable=True, comment="Dominant VARK style(s), comma separated"
    )

    diagnostic_results: Mapped[list[DiagnosticResultRecord]] = relationship(
        back_populates="student", cascade="all, delete-orphan"
    )
    practice_sessions: Mapped[list[PracticeSession]] = relationship(
        back_populates="student", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<StudentProfile {self.name}>"
