"""
Performance Summaries

Turns diagnostic results and attempt histories into the labels and chart
series the results and progress pages display.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .values import DiagnosticResult, QuestionAttempt

# (minimum skill level, label), highest first
SKILL_BANDS = [
    (9, "Advanced"),
    (7, "Proficient"),
    (5, "Intermediate"),
    (3, "Basic"),
]


def describe_skill_level(level: int) -> str:
    for minimum, label in SKILL_BANDS:
        if level >= minimum:
            return label
    return "Beginner"


def describe_accuracy(correct_percentage: int) -> str:
    if correct_percentage >= 80:
        return "Excellent understanding"
    if correct_percentage >= 60:
        return "Good grasp of concepts"
    return "Room for improvement"


def describe_speed(average_time: int) -> str:
    if average_time <= 30:
        return "Quick response time"
    if average_time <= 60:
        return "Average response time"
    return "Taking a bit longer than average"


def recommendation(result: DiagnosticResult) -> str:
    """Next-step advice shown under a diagnostic result."""
    strength = "strong" if result.correct_percentage >= 70 else "adequate"
    return (
        f"Start with level {result.skill_level} content and advance gradually. "
        f"You showed {strength} understanding of the concepts, "
        f"with an average response time of {result.average_time} seconds."
    )


def summarize_result(result: DiagnosticResult) -> dict[str, Any]:
    """Build the display summary for a diagnostic result."""
    return {
        "skill_level": result.skill_level,
        "skill_label": describe_skill_level(result.skill_level),
        "correct_percentage": result.correct_percentage,
        "accuracy_remark": describe_accuracy(result.correct_percentage),
        "average_time": result.average_time,
        "speed_remark": describe_speed(result.average_time),
        "recommendation": recommendation(result),
    }


def performance_series(attempts: Sequence[QuestionAttempt]) -> dict[str, list[Any]]:
    """Per-attempt chart data: difficulty, time taken and correctness (1/0)."""
    return {
        "labels": [f"Q{index}" for index in range(1, len(attempts) + 1)],
        "difficulty": [attempt.difficulty for attempt in attempts],
        "time_taken": [attempt.time_taken for attempt in attempts],
        "correct": [1 if attempt.correct else 0 for attempt in attempts],
    }
