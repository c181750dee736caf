"""
Student API Endpoints

Profiles, stored diagnostic results, result reports, and practice history.
"""
# ruff: noqa: B008 - FastAPI Depends in function defaults is standard pattern

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from adaptivemath.core.database import get_db
from adaptivemath.core.models import DiagnosticResultRecord, PracticeSession, StudentProfile
from adaptivemath.core.schemas import (
    PracticeSessionSchema,
    ResultReportSchema,
    StoredResultSchema,
    StudentCreate,
    StudentSchema,
)
from adaptivemath.diagnostic.performance import performance_series, summarize_result
from adaptivemath.diagnostic.result_store import (
    latest_diagnostic_result,
    list_diagnostic_results,
    list_practice_sessions,
)

router = APIRouter()


async def _get_student_or_404(db: AsyncSession, student_id: UUID) -> StudentProfile:
    result = await db.execute(select(StudentProfile).where(StudentProfile.id == student_id))
    student = result.scalar_one_or_none()

    if not student:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Student not found with ID: {student_id}",
        )

    return student


@router.post("/", response_model=StudentSchema, status_code=status.HTTP_201_CREATED)
async def create_student(
    student_data: StudentCreate, db: AsyncSession = Depends(get_db)
) -> StudentProfile:
    """Create a student (or teacher) profile."""
    student = StudentProfile(name=student_data.name.strip(), is_teacher=student_data.is_teacher)
    db.add(student)
    await db.commit()
    await db.refresh(student)

    return student


@router.get("/{student_id}", response_model=StudentSchema)
async def get_student(student_id: UUID, db: AsyncSession = Depends(get_db)) -> StudentProfile:
    """Get a profile by ID."""
    return await _get_student_or_404(db, student_id)


@router.get("/{student_id}/results", response_model=list[StoredResultSchema])
async def list_student_results(
    student_id: UUID,
    course_id: str | None = Query(None, description="Filter by course"),
    db: AsyncSession = Depends(get_db),
) -> list[DiagnosticResultRecord]:
    """List a student's diagnostic results, most recent first."""
    await _get_student_or_404(db, student_id)
    return await list_diagnostic_results(db, course_id=course_id, student_id=student_id)


@router.get("/{student_id}/results/{course_id}/latest", response_model=ResultReportSchema)
async def get_latest_result_report(
    student_id: UUID, course_id: str, db: AsyncSession = Depends(get_db)
) -> dict[str, object]:
    """Latest diagnostic result in a course with display summary and chart series."""
    await _get_student_or_404(db, student_id)

    record = await latest_diagnostic_result(db, course_id, student_id)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No diagnostic result for student {student_id} in course {course_id}",
        )

    result = record.to_result()
    return {
        "result": StoredResultSchema.model_validate(record),
        "summary": summarize_result(result),
        "performance": performance_series(result.attempts),
    }


@router.get("/{student_id}/practice", response_model=list[PracticeSessionSchema])
async def list_student_practice(
    student_id: UUID,
    course_id: str | None = Query(None, description="Filter by course"),
    db: AsyncSession = Depends(get_db),
) -> list[PracticeSession]:
    """List a student's practice sessions, most recent first."""
    await _get_student_or_404(db, student_id)
    return await list_practice_sessions(db, student_id, course_id=course_id)
