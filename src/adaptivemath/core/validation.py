"""
Input validation functions for AdaptiveMath.

All validation functions follow the pattern:
1. Accept raw user input (string, int, etc.)
2. Normalize/clean the input
3. Validate against business rules
4. Return cleaned value or raise ValidationError
"""

import re
from uuid import uuid4


class ValidationError(Exception):
    """Raised when user input fails validation."""

    pass


# ============================================================================
# Answer Checking
# ============================================================================


def normalize_answer(answer: str | None) -> str:
    """
    Normalize a typed answer for comparison.

    Strips surrounding whitespace and case-folds. Inner spacing is kept, so
    "x = 4, y = 1" and "x=4,y=1" are different answers.

    Args:
        answer: Raw answer text

    Returns:
        Normalized answer ("" for None)
    """
    if answer is None:
        return ""
    return answer.strip().casefold()


def check_answer(response: str | None, correct_answer: str) -> bool:
    """Return True when ``response`` matches ``correct_answer`` after normalization."""
    normalized = normalize_answer(response)
    return bool(normalized) and normalized == normalize_answer(correct_answer)


# ============================================================================
# Identifiers
# ============================================================================


def slugify_course_name(name: str | None) -> str:
    """
    Derive a course id from its display name.

    Examples:
        "Linear Algebra" -> "linear-algebra"
        "  Probability  " -> "probability"

    Raises:
        ValidationError: If the name is empty
    """
    if name is None or not name.strip():
        raise ValidationError("Course name cannot be empty")

    return re.sub(r"\s+", "-", name.strip().lower())


def generate_question_id() -> str:
    """Generate an id for a question created without one."""
    return f"q-{uuid4().hex[:12]}"


# ============================================================================
# Free Text
# ============================================================================


def validate_required_text(value: str | None, field: str, max_length: int = 2000) -> str:
    """
    Validate a required free-text field (statement, answer, description).

    Returns:
        Stripped text

    Raises:
        ValidationError: If empty or longer than max_length
    """
    if value is None or not value.strip():
        raise ValidationError(f"{field} cannot be empty")

    cleaned = value.strip()
    if len(cleaned) > max_length:
        raise ValidationError(f"{field} too long (maximum {max_length} characters)")

    return cleaned
