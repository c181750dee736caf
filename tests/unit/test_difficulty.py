"""
Unit Tests for the Difficulty Selector
"""

import pytest

from adaptivemath.diagnostic.difficulty import STARTING_DIFFICULTY, next_difficulty
from helpers import make_attempt


def test_empty_history_returns_start():
    assert next_difficulty([]) == STARTING_DIFFICULTY == 5


def test_custom_start_is_clamped_to_bounds():
    assert next_difficulty([], start=12) == 10
    assert next_difficulty([], (3, 7), start=1) == 3


def test_three_on_target_attempts_step_up():
    history = [make_attempt(5), make_attempt(5), make_attempt(5)]
    assert next_difficulty(history) == 6


def test_step_up_capped_at_ten():
    history = [make_attempt(10)] * 3
    assert next_difficulty(history) == 10


def test_incorrect_last_attempt_steps_down():
    history = [make_attempt(4), make_attempt(5), make_attempt(6, correct=False)]
    assert next_difficulty(history) == 5


def test_slow_last_attempt_steps_down():
    history = [make_attempt(6), make_attempt(6), make_attempt(6, time_taken=45)]
    assert next_difficulty(history) == 5


def test_step_down_floored_at_one():
    assert next_difficulty([make_attempt(1, correct=False)]) == 1


def test_mixed_window_holds_last_difficulty():
    history = [make_attempt(5, correct=False), make_attempt(4), make_attempt(4)]
    assert next_difficulty(history) == 4


def test_partial_window_holds():
    """Fewer on-target attempts than the window never step up."""
    assert next_difficulty([make_attempt(5)]) == 5
    assert next_difficulty([make_attempt(5), make_attempt(5)]) == 5


def test_only_trailing_window_counts():
    history = [make_attempt(3, correct=False)] + [make_attempt(3)] * 3
    assert next_difficulty(history) == 4


def test_unknown_target_time_counts_correctness_only():
    history = [make_attempt(5, time_taken=500, target_time=None)] * 3
    assert next_difficulty(history) == 6


def test_window_size_is_configurable():
    history = [make_attempt(5), make_attempt(5)]
    assert next_difficulty(history, window=2) == 6


@pytest.mark.parametrize("level", range(1, 11))
@pytest.mark.parametrize("correct", [True, False])
def test_output_always_in_range(level, correct):
    history = [make_attempt(level, correct=correct)] * 3
    assert 1 <= next_difficulty(history) <= 10
