"""
Course API Endpoints

Teacher management of courses and their question banks.
"""
# ruff: noqa: B008 - FastAPI Depends in function defaults is standard pattern

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from adaptivemath.core.database import get_db
from adaptivemath.core.models import BankQuestion, Course
from adaptivemath.core.schemas import (
    CourseCreate,
    CourseSchema,
    CourseUpdate,
    QuestionCreate,
    QuestionSchema,
    QuestionUpdate,
)
from adaptivemath.core.validation import (
    ValidationError,
    generate_question_id,
    slugify_course_name,
    validate_required_text,
)

router = APIRouter()


async def _get_course_or_404(db: AsyncSession, course_id: str) -> Course:
    result = await db.execute(select(Course).where(Course.id == course_id))
    course = result.scalar_one_or_none()

    if not course:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Course not found with ID: {course_id}",
        )

    return course


async def _get_question_or_404(db: AsyncSession, question_id: str) -> BankQuestion:
    result = await db.execute(select(BankQuestion).where(BankQuestion.id == question_id))
    question = result.scalar_one_or_none()

    if not question:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Question not found with ID: {question_id}",
        )

    return question


# ============================================================================
# Courses
# ============================================================================


@router.get("/", response_model=list[CourseSchema])
async def list_courses(db: AsyncSession = Depends(get_db)) -> list[Course]:
    """List all courses."""
    result = await db.execute(select(Course).order_by(Course.name))
    return list(result.scalars().all())


@router.post("/", response_model=CourseSchema, status_code=status.HTTP_201_CREATED)
async def create_course(course_data: CourseCreate, db: AsyncSession = Depends(get_db)) -> Course:
    """Create a course. Without an explicit id, the id is a slug of the name."""
    try:
        course_id = course_data.id or slugify_course_name(course_data.name)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    result = await db.execute(select(Course).where(Course.id == course_id))
    if result.scalar_one_or_none():
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Course already exists with ID: {course_id}",
        )

    course = Course(
        id=course_id,
        name=course_data.name.strip(),
        description=course_data.description.strip(),
    )
    db.add(course)
    await db.commit()
    await db.refresh(course)

    return course


@router.get("/questions/{question_id}", response_model=QuestionSchema)
async def get_question(question_id: str, db: AsyncSession = Depends(get_db)) -> BankQuestion:
    """Get a question by ID."""
    return await _get_question_or_404(db, question_id)


@router.put("/questions/{question_id}", response_model=QuestionSchema)
async def update_question(
    question_id: str, question_update: QuestionUpdate, db: AsyncSession = Depends(get_db)
) -> BankQuestion:
    """Edit a question.

    Only updates fields that are explicitly provided (not None).
    """
    question = await _get_question_or_404(db, question_id)

    update_data = question_update.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in update_data.items():
        setattr(question, field, value)

    await db.commit()
    await db.refresh(question)

    return question


@router.delete("/questions/{question_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_question(question_id: str, db: AsyncSession = Depends(get_db)) -> None:
    """Delete a question from its course bank."""
    question = await _get_question_or_404(db, question_id)

    await db.delete(question)
    await db.commit()


@router.get("/{course_id}", response_model=CourseSchema)
async def get_course(course_id: str, db: AsyncSession = Depends(get_db)) -> Course:
    """Get a course by ID."""
    return await _get_course_or_404(db, course_id)


@router.put("/{course_id}", response_model=CourseSchema)
async def update_course(
    course_id: str, course_update: CourseUpdate, db: AsyncSession = Depends(get_db)
) -> Course:
    """Update a course's name or description. The id never changes."""
    course = await _get_course_or_404(db, course_id)

    update_data = course_update.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in update_data.items():
        setattr(course, field, value.strip())

    await db.commit()
    await db.refresh(course)

    return course


@router.delete("/{course_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_course(course_id: str, db: AsyncSession = Depends(get_db)) -> None:
    """Delete a course together with all of its questions."""
    course = await _get_course_or_404(db, course_id)

    await db.execute(delete(BankQuestion).where(BankQuestion.course_id == course_id))
    await db.delete(course)
    await db.commit()


# ============================================================================
# Questions
# ============================================================================


@router.get("/{course_id}/questions", response_model=list[QuestionSchema])
async def list_questions(
    course_id: str,
    difficulty: int | None = Query(None, ge=1, le=10, description="Filter by difficulty"),
    db: AsyncSession = Depends(get_db),
) -> list[BankQuestion]:
    """List a course's questions, easiest first, with optional difficulty filter."""
    await _get_course_or_404(db, course_id)

    query = select(BankQuestion).where(BankQuestion.course_id == course_id)

    if difficulty is not None:
        query = query.where(BankQuestion.difficulty == difficulty)

    query = query.order_by(BankQuestion.difficulty, BankQuestion.id)

    result = await db.execute(query)
    return list(result.scalars().all())


@router.post(
    "/{course_id}/questions", response_model=QuestionSchema, status_code=status.HTTP_201_CREATED
)
async def create_question(
    course_id: str, question_data: QuestionCreate, db: AsyncSession = Depends(get_db)
) -> BankQuestion:
    """Add a question to a course's bank."""
    await _get_course_or_404(db, course_id)

    try:
        statement = validate_required_text(question_data.statement, "Statement")
        correct_answer = validate_required_text(
            question_data.correct_answer, "Correct answer", max_length=255
        )
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    question_id = question_data.id or generate_question_id()

    result = await db.execute(select(BankQuestion).where(BankQuestion.id == question_id))
    if result.scalar_one_or_none():
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Question already exists with ID: {question_id}",
        )

    question = BankQuestion(
        id=question_id,
        course_id=course_id,
        statement=statement,
        correct_answer=correct_answer,
        difficulty=question_data.difficulty,
        target_time=question_data.target_time,
    )
    db.add(question)
    await db.commit()
    await db.refresh(question)

    return question
