"""
Seed Data Loader

Loads the initial course and question bank JSON into the database. Existing
rows with the same id are replaced, so loading is repeatable.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from adaptivemath.core.models import BankQuestion, Course
from adaptivemath.diagnostic.values import Question

logger = logging.getLogger(__name__)


def read_seed_file(path: Path) -> dict[str, Any]:
    """Read and minimally check a seed JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If "courses" or "questions" is missing
    """
    if not path.exists():
        raise FileNotFoundError(
            f"Seed data not found: {path}\nSet SEED_DATA_PATH or pass --path."
        )

    with open(path, encoding="utf-8") as f:
        data: dict[str, Any] = json.load(f)

    for key in ("courses", "questions"):
        if not isinstance(data.get(key), list):
            raise ValueError(f"Seed data missing '{key}' list: {path}")

    return data


async def load_seed_data(session: AsyncSession, data: dict[str, Any]) -> tuple[int, int]:
    """Upsert courses and questions.

    Questions are validated through the engine's Question value object, so
    difficulties are clamped to 1-10 and non-positive target times rejected.

    Returns:
        (courses loaded, questions loaded)
    """
    for course_data in data["courses"]:
        course = await session.get(Course, course_data["id"])
        if course is None:
            course = Course(id=course_data["id"])
            session.add(course)
        course.name = course_data["name"]
        course.description = course_data.get("description", "")
    await session.flush()

    known_courses = set((await session.execute(select(Course.id))).scalars().all())

    loaded = 0
    for question_data in data["questions"]:
        question = Question.model_validate(question_data)
        if question.course_id not in known_courses:
            logger.warning(
                "Skipping question %s: unknown course %s", question.id, question.course_id
            )
            continue

        row = await session.get(BankQuestion, question.id)
        if row is None:
            row = BankQuestion(id=question.id)
            session.add(row)
        row.course_id = question.course_id
        row.statement = question.statement
        row.correct_answer = question.correct_answer
        row.difficulty = question.difficulty
        row.target_time = question.target_time
        loaded += 1

    await session.commit()
    logger.info("Loaded %d courses and %d questions", len(data["courses"]), loaded)
    return len(data["courses"]), loaded
