"""
Unit tests for input validation functions.
"""

import re

import pytest

from adaptivemath.core.validation import (
    ValidationError,
    check_answer,
    generate_question_id,
    normalize_answer,
    slugify_course_name,
    validate_required_text,
)

# ============================================================================
# Answer Checking
# ============================================================================


class TestAnswerChecking:
    """Tests for typed answer comparison."""

    def test_exact_match(self):
        assert check_answer("42", "42")

    def test_ignores_case_and_surrounding_whitespace(self):
        """Should match regardless of case and outer spaces."""
        assert check_answer("  X = 4 ", "x = 4")

    def test_inner_spacing_matters(self):
        assert not check_answer("x=4", "x = 4")

    def test_empty_response_never_correct(self):
        assert not check_answer("", "")
        assert not check_answer(None, "4")
        assert not check_answer("   ", "4")

    def test_normalize_none(self):
        assert normalize_answer(None) == ""


# ============================================================================
# Identifiers
# ============================================================================


class TestCourseSlug:
    """Tests for course id derivation."""

    def test_lowercases_and_hyphenates(self):
        assert slugify_course_name("Linear Algebra") == "linear-algebra"

    def test_collapses_whitespace(self):
        assert slugify_course_name("  Pre   Calculus \t ") == "pre-calculus"

    def test_reject_empty(self):
        with pytest.raises(ValidationError, match="cannot be empty"):
            slugify_course_name("   ")


def test_generated_question_ids_are_unique():
    ids = {generate_question_id() for _ in range(50)}

    assert len(ids) == 50
    assert all(re.fullmatch(r"q-[0-9a-f]{12}", question_id) for question_id in ids)


# ============================================================================
# Free Text
# ============================================================================


class TestRequiredText:
    """Tests for required text fields."""

    def test_strips(self):
        assert validate_required_text("  Solve for x ", "Statement") == "Solve for x"

    def test_reject_empty(self):
        with pytest.raises(ValidationError, match="Statement cannot be empty"):
            validate_required_text("", "Statement")

    def test_reject_too_long(self):
        with pytest.raises(ValidationError, match="too long"):
            validate_required_text("x" * 11, "Answer", max_length=10)
