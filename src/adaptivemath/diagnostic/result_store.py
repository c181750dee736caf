"""
Result Store

Persists completed diagnostic results and practice histories keyed by
(course, student), and retrieves them by course.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import desc, select

from adaptivemath.core.models import DiagnosticResultRecord, PracticeSession

if TYPE_CHECKING:
    from collections.abc import Sequence
    from uuid import UUID

    from sqlalchemy.ext.asyncio import AsyncSession

    from .values import DiagnosticResult, QuestionAttempt

logger = logging.getLogger(__name__)


async def save_diagnostic_result(
    db: AsyncSession, result: DiagnosticResult, student_id: UUID
) -> DiagnosticResultRecord:
    """Store a completed diagnostic result for a student.

    Args:
        db: Database session (committed here)
        result: Scored result from a completed session
        student_id: Owner of the result

    Returns:
        Persisted record
    """
    record = DiagnosticResultRecord(
        student_id=student_id,
        course_id=result.course_id,
        skill_level=result.skill_level,
        correct_percentage=result.correct_percentage,
        average_time=result.average_time,
        attempts=[attempt.model_dump(mode="json") for attempt in result.attempts],
        completed_at=datetime.now(UTC),
    )
    db.add(record)
    await db.commit()
    await db.refresh(record)

    logger.info(
        "Saved diagnostic result %s (student=%s course=%s skill=%d)",
        record.id,
        student_id,
        result.course_id,
        result.skill_level,
    )
    return record


async def list_diagnostic_results(
    db: AsyncSession, course_id: str | None = None, student_id: UUID | None = None
) -> list[DiagnosticResultRecord]:
    """List results, most recent first, optionally filtered by course and student."""
    query = select(DiagnosticResultRecord)

    if course_id is not None:
        query = query.where(DiagnosticResultRecord.course_id == course_id)

    if student_id is not None:
        query = query.where(DiagnosticResultRecord.student_id == student_id)

    query = query.order_by(desc(DiagnosticResultRecord.completed_at))

    result = await db.execute(query)
    return list(result.scalars().all())


async def latest_diagnostic_result(
    db: AsyncSession, course_id: str, student_id: UUID
) -> DiagnosticResultRecord | None:
    """Most recent result for a student in a course, if any."""
    records = await list_diagnostic_results(db, course_id=course_id, student_id=student_id)
    return records[0] if records else None


async def save_practice_session(
    db: AsyncSession,
    *,
    student_id: UUID,
    course_id: str,
    attempts: Sequence[QuestionAttempt],
    started_at: datetime,
) -> PracticeSession:
    """Store the attempts of a finished practice session."""
    record = PracticeSession(
        student_id=student_id,
        course_id=course_id,
        attempts=[attempt.model_dump(mode="json") for attempt in attempts],
        started_at=started_at,
        completed_at=datetime.now(UTC),
    )
    db.add(record)
    await db.commit()
    await db.refresh(record)

    logger.info(
        "Saved practice session %s (student=%s course=%s attempts=%d)",
        record.id,
        student_id,
        course_id,
        len(attempts),
    )
    return record


async def list_practice_sessions(
    db: AsyncSession, student_id: UUID, course_id: str | None = None
) -> list[PracticeSession]:
    """List a student's practice sessions, most recent first."""
    query = select(PracticeSession).where(PracticeSession.student_id == student_id)

    if course_id is not None:
        query = query.where(PracticeSession.course_id == course_id)

    result = await db.execute(query.order_by(desc(PracticeSession.completed_at)))
    return list(result.scalars().all())
