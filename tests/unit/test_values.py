"""
Unit Tests for Engine Value Objects
"""

import math

import pytest
from pydantic import ValidationError

from adaptivemath.diagnostic import DiagnosticResult, EmptyHistoryError, QuestionAttempt
from helpers import make_attempt, make_question


class TestQuestion:
    def test_difficulty_is_clamped(self):
        assert make_question(15).difficulty == 10
        assert make_question(-2).difficulty == 1

    def test_non_positive_target_time_rejected(self):
        with pytest.raises(ValidationError):
            make_question(3, target_time=0)

    def test_is_immutable(self):
        question = make_question(3)
        with pytest.raises(ValidationError):
            question.difficulty = 4


class TestQuestionAttempt:
    def test_negative_time_clamped_to_zero(self):
        assert make_attempt(5, time_taken=-3).time_taken == 0

    @pytest.mark.parametrize("time_taken", [math.inf, -math.inf, math.nan, 86_401])
    def test_unusable_time_rejected(self, time_taken):
        with pytest.raises(ValidationError):
            make_attempt(5, time_taken=time_taken)

    def test_infinite_target_time_rejected(self):
        with pytest.raises(ValidationError):
            make_question(3, target_time=math.inf)

    def test_on_target_needs_correct_and_in_time(self):
        assert make_attempt(5, time_taken=30).on_target
        assert not make_attempt(5, time_taken=31).on_target
        assert not make_attempt(5, correct=False).on_target

    def test_for_question_copies_difficulty_and_target(self):
        question = make_question(7, target_time=45)

        attempt = QuestionAttempt.for_question(question, correct=True, time_taken=12)

        assert attempt.question_id == "q7"
        assert attempt.difficulty == 7
        assert attempt.target_time == 45


class TestDiagnosticResult:
    def test_from_attempts_scores(self):
        attempts = [make_attempt(6), make_attempt(6, correct=False)]

        result = DiagnosticResult.from_attempts("arithmetic", attempts)

        assert result.course_id == "arithmetic"
        assert result.correct_percentage == 50
        assert result.average_time == 10
        assert result.attempts == tuple(attempts)

    def test_from_empty_attempts_raises(self):
        with pytest.raises(EmptyHistoryError):
            DiagnosticResult.from_attempts("arithmetic", [])

    def test_inconsistent_summary_rejected(self):
        """Summary fields must agree with the attempts they came from."""
        with pytest.raises(ValidationError):
            DiagnosticResult(
                course_id="arithmetic",
                skill_level=9,
                correct_percentage=100,
                average_time=10,
                attempts=(make_attempt(2, correct=False),),
            )
