"""
Unit Tests for the Diagnostic Scorer
"""

import pytest

from adaptivemath.diagnostic import EmptyHistoryError, score
from adaptivemath.diagnostic.scoring import round_half_up, skill_level
from helpers import make_attempt


def test_empty_attempts_raise():
    with pytest.raises(EmptyHistoryError):
        score([])


def test_accuracy_and_average_time():
    attempts = [make_attempt(5, correct=i < 8, time_taken=10, target_time=10) for i in range(10)]

    summary = score(attempts)

    assert summary.correct_percentage == 80
    assert summary.average_time == 10


def test_percentage_and_time_round_half_up():
    attempts = [make_attempt(5, correct=i == 0, time_taken=t) for i, t in enumerate([1, 2])]
    summary = score(attempts)
    assert summary.correct_percentage == 50
    assert summary.average_time == 2  # 1.5 rounds up

    attempts = [make_attempt(5, correct=i == 0) for i in range(8)]
    assert score(attempts).correct_percentage == 13  # 12.5 rounds up


def test_all_correct_at_max_difficulty_is_advanced():
    attempts = [make_attempt(10)] * 8
    assert score(attempts).skill_level >= 9


def test_all_incorrect_at_min_difficulty_is_beginner():
    attempts = [make_attempt(1, correct=False)] * 8
    assert score(attempts).skill_level <= 2


def test_skill_level_monotonic_in_accuracy():
    levels = [skill_level(6, pct) for pct in range(0, 101, 5)]
    assert levels == sorted(levels)


def test_skill_level_monotonic_in_difficulty():
    levels = [skill_level(difficulty, 60) for difficulty in range(1, 11)]
    assert levels == sorted(levels)


@pytest.mark.parametrize("difficulty", [1, 10])
@pytest.mark.parametrize("pct", [0, 100])
def test_skill_level_in_range(difficulty, pct):
    assert 1 <= skill_level(difficulty, pct) <= 10


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2
