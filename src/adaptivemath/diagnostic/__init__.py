"""
Diagnostic Module

Adaptive question delivery: difficulty selection, feedback, scoring,
session orchestration, and result storage.
"""

from .difficulty import next_difficulty
from .errors import (
    AdaptiveEngineError,
    EmptyHistoryError,
    InvalidStateError,
    PoolExhaustedError,
)
from .feedback import TIMEOUT_FEEDBACK, generate_feedback
from .question_bank import QuestionBank, load_question_bank
from .registry import SessionRegistry, TrackedSession
from .scoring import ScoreSummary, score
from .session import AdaptiveSession, SessionMode, SessionState, SubmissionOutcome
from .values import DiagnosticResult, Question, QuestionAttempt

__all__ = [
    # Engine
    "AdaptiveSession",
    "SessionMode",
    "SessionState",
    "SubmissionOutcome",
    "next_difficulty",
    "generate_feedback",
    "TIMEOUT_FEEDBACK",
    "score",
    "ScoreSummary",
    # Values
    "Question",
    "QuestionAttempt",
    "DiagnosticResult",
    # Collaborators
    "QuestionBank",
    "load_question_bank",
    "SessionRegistry",
    "TrackedSession",
    # Errors
    "AdaptiveEngineError",
    "EmptyHistoryError",
    "InvalidStateError",
    "PoolExhaustedError",
]
