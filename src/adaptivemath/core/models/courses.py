"""
Course Models

Courses and their question banks, managed by teachers.
"""

from __future__ import annotations

from sqlalchemy import CheckConstraint, Float, ForeignKey, Index, SmallInteger, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin


class Course(Base, TimestampMixin):
    """A subject students can take diagnostics and practice in.

    The id is a slug derived from the name (e.g. "linear-algebra").
    """

    __tablename__ = "courses"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, comment="Course slug")
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    questions: Mapped[list[BankQuestion]] = relationship(
        back_populates="course",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="BankQuestion.difficulty",
    )

    def __repr__(self) -> str:
        return f"<Course {self.id}>"


class BankQuestion(Base, TimestampMixin):
    """A question in a course's bank. Edits replace the row's content in place."""

    __tablename__ = "questions"
    __table_args__ = (
        CheckConstraint("difficulty BETWEEN 1 AND 10", name="check_question_difficulty"),
        CheckConstraint("target_time > 0", name="check_question_target_time"),
        Index("idx_questions_course_difficulty", "course_id", "difficulty"),
    )

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    course_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("courses.id", name="fk_questions_course", ondelete="CASCADE"),
        nullable=False,
    )
    statement: Mapped[str] = mapped_column(Text, nullable=False)
    correct_answer: Mapped[str] = mapped_column(String(255), nullable=False)
    difficulty: Mapped[int] = mapped_column(
        SmallInteger, nullable=False, default=5, comment="1 (easiest) to 10 (hardest)"
    )
    target_time: Mapped[float] = mapped_column(
        Float, nullable=False, default=60, comment="Expected seconds to answer"
    )

    course: Mapped[Course] = relationship(back_populates="questions")

    def __repr__(self) -> str:
        return f"<BankQuestion {self.id} course={self.course_id} difficulty={self.difficulty}>"
