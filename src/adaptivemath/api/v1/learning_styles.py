"""
Learning Style API Endpoints

VARK questionnaire statements and scoring.
"""
# ruff: noqa: B008 - FastAPI Depends in function defaults is standard pattern

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from adaptivemath.core.database import get_db
from adaptivemath.core.models import StudentProfile
from adaptivemath.core.schemas import (
    StyleProfileSchema,
    StyleRatingsSubmit,
    StyleStatementSchema,
)
from adaptivemath.core.validation import ValidationError
from adaptivemath.diagnostic.learning_style import STATEMENTS, score_learning_style

router = APIRouter()


@router.get("/questions", response_model=list[StyleStatementSchema])
async def list_statements() -> list[dict[str, str]]:
    """List questionnaire statements."""
    return [
        {"id": statement.id, "text": statement.text, "style": statement.style.value}
        for statement in STATEMENTS
    ]


@router.post("/score", response_model=StyleProfileSchema)
async def score_questionnaire(
    submission: StyleRatingsSubmit, db: AsyncSession = Depends(get_db)
) -> dict[str, object]:
    """Score ratings; when a student is given, store the dominant style on the profile."""
    try:
        profile = score_learning_style(submission.ratings)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    dominant = [style.value for style in profile.dominant]

    if submission.student_id is not None:
        result = await db.execute(
            select(StudentProfile).where(StudentProfile.id == submission.student_id)
        )
        student = result.scalar_one_or_none()
        if not student:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Student not found with ID: {submission.student_id}",
            )
        student.learning_style = ",".join(dominant)
        await db.commit()

    return {
        "scores": {style.value: points for style, points in profile.scores.items()},
        "dominant": dominant,
    }
