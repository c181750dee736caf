"""
Question Bank

In-memory view of one course's questions for a session, plus the database
loader that builds it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .values import Question

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable, Iterator

    from sqlalchemy.ext.asyncio import AsyncSession


class QuestionBank:
    """Ordered set of questions for a single course.

    Lookup by nearest difficulty skips questions already presented; ties go
    to the easier question, then to the one added first.
    """

    def __init__(self, course_id: str, questions: Iterable[Question] = ()):
        self.course_id = course_id
        self._questions: dict[str, Question] = {}
        for question in questions:
            self.add(question)

    def add(self, question: Question) -> None:
        """Add or replace (by id) a question of this course."""
        if question.course_id != self.course_id:
            raise ValueError(
                f"Question {question.id} belongs to course '{question.course_id}', "
                f"not '{self.course_id}'"
            )
        self._questions[question.id] = question

    def get(self, question_id: str) -> Question | None:
        return self._questions.get(question_id)

    def at_difficulty(self, difficulty: int) -> list[Question]:
        return [q for q in self._questions.values() if q.difficulty == difficulty]

    def nearest(self, difficulty: int, exclude: Collection[str] = ()) -> Question | None:
        """Get the question nearest to ``difficulty`` not in ``exclude``.

        Args:
            difficulty: Wanted difficulty
            exclude: Ids of questions already presented this session

        Returns:
            Closest available question, or None if every question is excluded
        """
        best: Question | None = None
        best_key: tuple[int, int] | None = None

        for question in self._questions.values():
            if question.id in exclude:
                continue
            key = (abs(question.difficulty - difficulty), question.difficulty)
            if best_key is None or key < best_key:
                best, best_key = question, key

        return best

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(self._questions.values())

    def __contains__(self, question_id: object) -> bool:
        return question_id in self._questions


async def load_question_bank(db: AsyncSession, course_id: str) -> QuestionBank:
    """Load a course's questions from the database, ordered by difficulty then id.

    Args:
        db: Database session
        course_id: Course slug

    Returns:
        QuestionBank (possibly empty)
    """
    from sqlalchemy import select

    from adaptivemath.core.models import BankQuestion

    result = await db.execute(
        select(BankQuestion)
        .where(BankQuestion.course_id == course_id)
        .order_by(BankQuestion.difficulty, BankQuestion.id)
    )
    return QuestionBank(
        course_id,
        (Question.model_validate(record) for record in result.scalars().all()),
    )
