"""
Adaptive Session Orchestrator

Drives one diagnostic or practice run: presents questions picked by the
difficulty selector, records attempts, produces feedback, and scores the
session when it completes.

State machine:
    NOT_STARTED --start()--> IN_PROGRESS --(length reached | pool exhausted | finish())--> COMPLETED

Sessions are single-use and single-threaded; the caller serializes calls and
owns any countdown timer (calling ``timeout_current_question`` when it fires).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from adaptivemath.core.validation import check_answer

from .difficulty import STARTING_DIFFICULTY, WINDOW_SIZE, next_difficulty
from .errors import InvalidStateError, PoolExhaustedError
from .feedback import TIMEOUT_FEEDBACK, generate_feedback
from .scoring import ScoreSummary, score
from .values import DiagnosticResult, QuestionAttempt

if TYPE_CHECKING:
    from .question_bank import QuestionBank
    from .values import Question

logger = logging.getLogger(__name__)

DEFAULT_DIAGNOSTIC_LENGTH = 8


class SessionState(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class SessionMode(str, Enum):
    DIAGNOSTIC = "diagnostic"
    PRACTICE = "practice"


@dataclass(frozen=True)
class SubmissionOutcome:
    """What the caller needs to render after an answer or timeout."""

    attempt: QuestionAttempt
    feedback: str
    next_question: Question | None
    completed: bool
    result: DiagnosticResult | None = None


class AdaptiveSession:
    """Controller for a single diagnostic or practice run.

    Args:
        mode: Diagnostic (fixed length, scored) or practice (open-ended)
        length: Questions per diagnostic session, or optional practice cap
        start_difficulty: Difficulty of the first question
        window: Trailing attempts the selector inspects
    """

    def __init__(
        self,
        mode: SessionMode = SessionMode.DIAGNOSTIC,
        *,
        length: int | None = None,
        start_difficulty: int = STARTING_DIFFICULTY,
        window: int = WINDOW_SIZE,
    ):
        if mode is SessionMode.DIAGNOSTIC and length is None:
            length = DEFAULT_DIAGNOSTIC_LENGTH
        if length is not None and length < 1:
            raise ValueError(f"Session length must be positive, got {length}")

        self.mode = mode
        self.length = length
        self.start_difficulty = start_difficulty
        self.window = window

        self.state = SessionState.NOT_STARTED
        self.course_id: str | None = None
        self.current_question: Question | None = None
        self.current_difficulty: int | None = None
        self.exhausted = False

        self._bank: QuestionBank | None = None
        self._attempts: list[QuestionAttempt] = []
        self._presented: set[str] = set()
        self._result: DiagnosticResult | None = None

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def attempts(self) -> tuple[QuestionAttempt, ...]:
        return tuple(self._attempts)

    @property
    def result(self) -> DiagnosticResult | None:
        """Scored result, set once a diagnostic session completes."""
        return self._result

    @property
    def is_completed(self) -> bool:
        return self.state is SessionState.COMPLETED

    def summary(self) -> ScoreSummary | None:
        """Score the attempts so far, or None before the first attempt."""
        return score(self._attempts) if self._attempts else None

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def start(self, question_pool: QuestionBank, course_id: str) -> Question:
        """Begin the session and present the first question.

        Returns:
            First question, chosen nearest to the starting difficulty

        Raises:
            InvalidStateError: If the session was already started
            PoolExhaustedError: If the course has no questions at all
        """
        if self.state is not SessionState.NOT_STARTED:
            raise InvalidStateError("Session already started; sessions are single-use")
        if question_pool.course_id != course_id:
            raise ValueError(
                f"Question pool is for course '{question_pool.course_id}', not '{course_id}'"
            )

        self._bank = question_pool
        self.course_id = course_id
        self.state = SessionState.IN_PROGRESS

        difficulty = next_difficulty([], start=self.start_difficulty, window=self.window)
        question = question_pool.nearest(difficulty)
        if question is None:
            self.exhausted = True
            self.state = SessionState.COMPLETED
            logger.warning("Course %s has no questions; session ended at start", course_id)
            raise PoolExhaustedError(course_id)

        logger.info(
            "Started %s session for course %s (length=%s)", self.mode.value, course_id, self.length
        )
        self._present(question, difficulty)
        return question

    def submit_answer(self, attempt: QuestionAttempt) -> SubmissionOutcome:
        """Record an attempt at the current question.

        The recorded attempt always carries the presented question's difficulty
        and target time.

        Raises:
            InvalidStateError: If not in progress, or the attempt is for another question
        """
        question = self._require_current()
        if attempt.question_id != question.id:
            raise InvalidStateError(
                f"Attempt is for question {attempt.question_id}, "
                f"but {question.id} is being presented"
            )

        attempt = attempt.model_copy(
            update={"difficulty": question.difficulty, "target_time": question.target_time}
        )
        feedback = generate_feedback(attempt.correct, attempt.time_taken, question.target_time)
        return self._record(attempt, feedback)

    def answer(self, response: str, time_taken: float) -> SubmissionOutcome:
        """Check a typed response against the current question and record it."""
        question = self._require_current()
        attempt = QuestionAttempt.for_question(
            question,
            correct=check_answer(response, question.correct_answer),
            time_taken=time_taken,
        )
        return self.submit_answer(attempt)

    def timeout_current_question(self) -> SubmissionOutcome:
        """Record the current question as failed at its full target time."""
        question = self._require_current()
        attempt = QuestionAttempt.for_question(
            question, correct=False, time_taken=question.target_time
        )
        return self._record(attempt, TIMEOUT_FEEDBACK)

    def finish(self) -> None:
        """End a practice session early.

        Raises:
            InvalidStateError: For diagnostic sessions, or if not in progress
        """
        if self.mode is SessionMode.DIAGNOSTIC:
            raise InvalidStateError(
                f"Diagnostic sessions end after {self.length} questions; "
                "they cannot be finished early"
            )
        self._require_current()
        self._complete()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _require_current(self) -> Question:
        if self.state is not SessionState.IN_PROGRESS or self.current_question is None:
            raise InvalidStateError(f"Session is {self.state.value}, not in progress")
        return self.current_question

    def _present(self, question: Question, difficulty: int) -> None:
        self.current_question = question
        self.current_difficulty = difficulty
        self._presented.add(question.id)

    def _record(self, attempt: QuestionAttempt, feedback: str) -> SubmissionOutcome:
        self._attempts.append(attempt)
        try:
            self._advance()
        except Exception:
            self._attempts.pop()
            raise

        return SubmissionOutcome(
            attempt=attempt,
            feedback=feedback,
            next_question=self.current_question,
            completed=self.is_completed,
            result=self._result,
        )

    def _advance(self) -> None:
        if self.length is not None and len(self._attempts) >= self.length:
            self._complete()
            return

        assert self._bank is not None
        difficulty = next_difficulty(
            self._attempts, start=self.start_difficulty, window=self.window
        )
        question = self._bank.nearest(difficulty, self._presented)
        if question is None:
            logger.info(
                "Question pool for course %s exhausted after %d attempts",
                self.course_id,
                len(self._attempts),
            )
            self._complete()
            self.exhausted = True
        else:
            self._present(question, difficulty)

    def _complete(self) -> None:
        # Scored before any state change
        if self.mode is SessionMode.DIAGNOSTIC:
            assert self.course_id is not None
            self._result = DiagnosticResult.from_attempts(self.course_id, self._attempts)

        self.current_question = None
        self.current_difficulty = None
        self.state = SessionState.COMPLETED

        if self._result is not None:
            logger.info(
                "Completed diagnostic for course %s: skill %d, %d%% correct",
                self.course_id,
                self._result.skill_level,
                self._result.correct_percentage,
            )
        else:
            logger.info(
                "Completed practice for course %s after %d attempts",
                self.course_id,
                len(self._attempts),
            )
