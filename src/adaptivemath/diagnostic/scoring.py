"""
Diagnostic Scorer

Summarizes a completed attempt sequence into skill level, accuracy and
average response time.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, NamedTuple

from .errors import EmptyHistoryError
from .values import MAX_DIFFICULTY, MIN_DIFFICULTY

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .values import QuestionAttempt

# Share of skill level taken from the final difficulty; the rest comes from accuracy
DIFFICULTY_WEIGHT = 0.6


class ScoreSummary(NamedTuple):
    skill_level: int
    correct_percentage: int
    average_time: int


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positive values."""
    return math.floor(value + 0.5)


def skill_level(final_difficulty: int, correct_percentage: float) -> int:
    """Blend final difficulty (1-10) and accuracy (0-100) into a 1-10 level.

    Non-decreasing in both arguments.
    """
    accuracy_points = correct_percentage / 10
    blended = DIFFICULTY_WEIGHT * final_difficulty + (1 - DIFFICULTY_WEIGHT) * accuracy_points
    return max(MIN_DIFFICULTY, min(MAX_DIFFICULTY, round_half_up(blended)))


def score(attempts: Sequence[QuestionAttempt]) -> ScoreSummary:
    """Score a completed session.

    Args:
        attempts: Non-empty attempt sequence in presentation order

    Returns:
        ScoreSummary with skill_level, correct_percentage and average_time

    Raises:
        EmptyHistoryError: If ``attempts`` is empty
    """
    if not attempts:
        raise EmptyHistoryError("Cannot score a session with no attempts")

    total = len(attempts)
    correct = sum(1 for attempt in attempts if attempt.correct)
    percentage = 100 * correct / total

    return ScoreSummary(
        skill_level=skill_level(attempts[-1].difficulty, percentage),
        correct_percentage=round_half_up(percentage),
        average_time=round_half_up(sum(attempt.time_taken for attempt in attempts) / total),
    )
