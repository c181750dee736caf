"""
Adaptive Engine Value Objects

Immutable, validated records exchanged between the engine and its callers.
Out-of-range difficulties are clamped into the 1-10 scale and negative times
are clamped to zero. Non-positive target times, non-finite times and times
longer than a day are rejected.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 10
MAX_TIME_TAKEN = 86_400.0


def clamp_difficulty(value: int) -> int:
    """Clamp a difficulty value into [MIN_DIFFICULTY, MAX_DIFFICULTY]."""
    return max(MIN_DIFFICULTY, min(MAX_DIFFICULTY, int(value)))


class Question(BaseModel):
    """A question in a course's bank. Edits replace the question by id."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: str = Field(min_length=1)
    course_id: str = Field(min_length=1)
    statement: str = Field(min_length=1)
    correct_answer: str = Field(min_length=1)
    difficulty: int = 5
    target_time: float = Field(
        default=60,
        gt=0,
        le=MAX_TIME_TAKEN,
        allow_inf_nan=False,
        description="Expected seconds to answer",
    )

    @field_validator("difficulty")
    @classmethod
    def _clamp_difficulty(cls, v: int) -> int:
        return clamp_difficulty(v)


class QuestionAttempt(BaseModel):
    """One answered or timed-out question, appended once to a session history."""

    model_config = ConfigDict(frozen=True)

    question_id: str
    correct: bool
    time_taken: float = Field(
        le=MAX_TIME_TAKEN, allow_inf_nan=False, description="Seconds spent on the question"
    )
    difficulty: int
    target_time: float | None = Field(
        default=None,
        gt=0,
        le=MAX_TIME_TAKEN,
        allow_inf_nan=False,
        description="Target seconds of the question, if known",
    )

    @field_validator("difficulty")
    @classmethod
    def _clamp_difficulty(cls, v: int) -> int:
        return clamp_difficulty(v)

    @field_validator("time_taken")
    @classmethod
    def _clamp_time(cls, v: float) -> float:
        return max(0.0, v)

    @property
    def within_target(self) -> bool:
        """True when no target is known or the answer came in on time."""
        return self.target_time is None or self.time_taken <= self.target_time

    @property
    def on_target(self) -> bool:
        """Correct and within the target time."""
        return self.correct and self.within_target

    @classmethod
    def for_question(
        cls, question: Question, *, correct: bool, time_taken: float
    ) -> QuestionAttempt:
        """Build an attempt carrying the question's difficulty and target time."""
        return cls(
            question_id=question.id,
            correct=correct,
            time_taken=time_taken,
            difficulty=question.difficulty,
            target_time=question.target_time,
        )


class DiagnosticResult(BaseModel):
    """Scored outcome of a completed diagnostic session.

    Every summary field is derived from ``attempts``; construction fails if
    the supplied values disagree with a recomputation.
    """

    model_config = ConfigDict(frozen=True)

    course_id: str
    skill_level: int = Field(ge=MIN_DIFFICULTY, le=MAX_DIFFICULTY)
    correct_percentage: int = Field(ge=0, le=100)
    average_time: int = Field(ge=0)
    attempts: tuple[QuestionAttempt, ...] = Field(min_length=1)

    @model_validator(mode="after")
    def _check_derived_fields(self) -> DiagnosticResult:
        from .scoring import score

        expected = score(self.attempts)
        if (
            expected.skill_level != self.skill_level
            or expected.correct_percentage != self.correct_percentage
            or expected.average_time != self.average_time
        ):
            raise ValueError("Result summary does not match its attempts")
        return self

    @classmethod
    def from_attempts(
        cls, course_id: str, attempts: Sequence[QuestionAttempt]
    ) -> DiagnosticResult:
        """Score ``attempts`` and wrap them into a result.

        Raises:
            EmptyHistoryError: If ``attempts`` is empty
        """
        from .scoring import score

        summary = score(attempts)
        return cls(
            course_id=course_id,
            skill_level=summary.skill_level,
            correct_percentage=summary.correct_percentage,
            average_time=summary.average_time,
            attempts=tuple(attempts),
        )
