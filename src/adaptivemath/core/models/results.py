"""
Result Models

Completed diagnostic results and practice-session histories. Attempts are
stored as JSON lists in presentation order; summary columns are written from
the engine's DiagnosticResult and never edited on their own.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any
from uuid import UUID

from sqlalchemy import JSON, CheckConstraint, DateTime, ForeignKey, Index, SmallInteger, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, UUIDPrimaryKeyMixin

if TYPE_CHECKING:
    from adaptivemath.diagnostic.values import DiagnosticResult

    from .students import StudentProfile


class DiagnosticResultRecord(Base, UUIDPrimaryKeyMixin):
    """One completed diagnostic session for a (student, course) pair."""

    __tablename__ = "diagnostic_results"
    __table_args__ = (
        CheckConstraint("skill_level BETWEEN 1 AND 10", name="check_result_skill_level"),
        CheckConstraint(
            "correct_percentage BETWEEN 0 AND 100", name="check_result_correct_percentage"
        ),
        Index("idx_results_student_course", "student_id", "course_id"),
    )

    student_id: Mapped[UUID] = mapped_column(
        ForeignKey("student_profiles.id", name="fk_results_student", ondelete="CASCADE"),
        nullable=False,
    )
    # Plain column: results outlive course edits and deletions
    course_id: Mapped[str] = mapped_column(String(64), nullable=False)

    skill_level: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    correct_percentage: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    average_time: Mapped[int] = mapped_column(nullable=False, comment="Seconds, rounded")
    attempts: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)

    completed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )

    student: Mapped[StudentProfile] = relationship(back_populates="diagnostic_results")

    def to_result(self) -> DiagnosticResult:
        """Rebuild the engine value object with the summary as it was stored.

        The summary is not rescored, so rows stay loadable after the scoring
        weights change.
        """
        from adaptivemath.diagnostic.values import DiagnosticResult, QuestionAttempt

        return DiagnosticResult.model_construct(
            course_id=self.course_id,
            skill_level=self.skill_level,
            correct_percentage=self.correct_percentage,
            average_time=self.average_time,
            attempts=tuple(QuestionAttempt.model_validate(a) for a in self.attempts),
        )


class PracticeSession(Base, UUIDPrimaryKeyMixin):
    """Attempts from one open-ended practice run."""

    __tablename__ = "practice_sessions"
    __table_args__ = (Index("idx_practice_student_course", "student_id", "course_id"),)

    student_id: Mapped[UUID] = mapped_column(
        ForeignKey("student_profiles.id", name="fk_practice_student", ondelete="CASCADE"),
        nullable=False,
    )
    course_id: Mapped[str] = mapped_column(String(64), nullable=False)
    attempts: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)

    started_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    completed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )

    student: Mapped[StudentProfile] = relationship(back_populates="practice_sessions")
