"""Builders for engine value objects used across tests."""

from adaptivemath.diagnostic import Question, QuestionAttempt, QuestionBank


def make_question(
    level: int, course_id: str = "arithmetic", target_time: float = 30, suffix: str = ""
) -> Question:
    """Question whose answer is ``2 * level``."""
    return Question(
        id=f"q{level}{suffix}",
        course_id=course_id,
        statement=f"What is {level} + {level}?",
        correct_answer=str(level * 2),
        difficulty=level,
        target_time=target_time,
    )


def make_bank(per_level: int = 3, course_id: str = "arithmetic") -> QuestionBank:
    """Bank with ``per_level`` questions at each difficulty, suffixed a, b, c..."""
    return QuestionBank(
        course_id,
        [
            make_question(level, course_id, suffix="abcdefghij"[n])
            for level in range(1, 11)
            for n in range(per_level)
        ],
    )


def make_attempt(
    difficulty: int,
    correct: bool = True,
    time_taken: float = 10,
    target_time: float | None = 30,
) -> QuestionAttempt:
    return QuestionAttempt(
        question_id=f"q{difficulty}",
        correct=correct,
        time_taken=time_taken,
        difficulty=difficulty,
        target_time=target_time,
    )
