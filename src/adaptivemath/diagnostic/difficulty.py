"""
Difficulty Selector

Chooses the next question difficulty from a student's recent attempts:
- Empty history: fixed starting difficulty
- Last attempt wrong or over target time: one step easier
- Full trailing window correct and on time: one step harder
- Otherwise: hold at the last attempt's difficulty
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .values import MAX_DIFFICULTY, MIN_DIFFICULTY

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .values import QuestionAttempt

logger = logging.getLogger(__name__)

STARTING_DIFFICULTY = 5
WINDOW_SIZE = 3


def next_difficulty(
    history: Sequence[QuestionAttempt],
    bounds: tuple[int, int] = (MIN_DIFFICULTY, MAX_DIFFICULTY),
    *,
    start: int = STARTING_DIFFICULTY,
    window: int = WINDOW_SIZE,
) -> int:
    """Compute the difficulty of the next question.

    Args:
        history: Attempts so far, in presentation order
        bounds: Inclusive (low, high) difficulty range, narrowed to 1-10
        start: Difficulty returned for an empty history
        window: Number of trailing attempts that must all be on target to step up

    Returns:
        Next difficulty within ``bounds``
    """
    low = max(MIN_DIFFICULTY, bounds[0])
    high = min(MAX_DIFFICULTY, bounds[1])
    if low > high:
        low, high = high, low

    if not history:
        return max(low, min(high, start))

    last = history[-1]
    recent = history[-window:]

    if not last.on_target:
        target = last.difficulty - 1
        reason = "last attempt missed"
    elif len(recent) >= window and all(attempt.on_target for attempt in recent):
        target = last.difficulty + 1
        reason = f"{window} on-target attempts"
    else:
        target = last.difficulty
        reason = "mixed results"

    chosen = max(low, min(high, target))
    logger.debug("Next difficulty %d (%s, last=%d)", chosen, reason, last.difficulty)
    return chosen
