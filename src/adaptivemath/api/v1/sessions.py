"""
Session API Endpoints

Start diagnostic and practice sessions, answer or time out questions, and
fetch the scored result.
"""
# ruff: noqa: B008 - FastAPI Depends in function defaults is standard pattern

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from adaptivemath.api.deps import get_registry
from adaptivemath.config import settings
from adaptivemath.core.database import get_db
from adaptivemath.core.models import Course, StudentProfile
from adaptivemath.core.schemas import (
    AnswerResponse,
    AnswerSubmit,
    DiagnosticResultSchema,
    PresentedQuestionSchema,
    SessionSchema,
    SessionStart,
)
from adaptivemath.diagnostic import (
    AdaptiveSession,
    DiagnosticResult,
    InvalidStateError,
    PoolExhaustedError,
    Question,
    SessionMode,
    SessionRegistry,
    SubmissionOutcome,
    TrackedSession,
    load_question_bank,
)
from adaptivemath.diagnostic.result_store import save_diagnostic_result, save_practice_session

router = APIRouter()


def _session_schema(tracked: TrackedSession) -> SessionSchema:
    session = tracked.session
    question = session.current_question
    return SessionSchema(
        id=tracked.id,
        student_id=tracked.student_id,
        course_id=session.course_id or "",
        mode=session.mode.value,
        state=session.state.value,
        question_number=len(session.attempts) + (1 if question else 0),
        total_questions=session.length,
        current_question=PresentedQuestionSchema.model_validate(question) if question else None,
        exhausted=session.exhausted,
    )


def _result_schema(result: DiagnosticResult) -> DiagnosticResultSchema:
    return DiagnosticResultSchema.model_validate(result.model_dump())


def _get_tracked(registry: SessionRegistry, session_id: UUID) -> TrackedSession:
    tracked = registry.get(session_id)
    if not tracked:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Session not found with ID: {session_id}",
        )
    return tracked


async def _persist_completion(tracked: TrackedSession, db: AsyncSession) -> None:
    """Store the outcome of a session that just completed."""
    session = tracked.session
    if session.result is not None:
        record = await save_diagnostic_result(db, session.result, tracked.student_id)
        tracked.result_id = record.id
    elif session.mode is SessionMode.PRACTICE and session.attempts:
        assert session.course_id is not None
        await save_practice_session(
            db,
            student_id=tracked.student_id,
            course_id=session.course_id,
            attempts=session.attempts,
            started_at=tracked.started_at,
        )


async def _answer_response(
    tracked: TrackedSession, outcome: SubmissionOutcome, db: AsyncSession, answered: Question
) -> AnswerResponse:
    if outcome.completed:
        await _persist_completion(tracked, db)
        message = (
            "Question pool exhausted. Session complete."
            if tracked.session.exhausted
            else "Session complete."
        )
    else:
        message = f"Question {len(tracked.session.attempts)} recorded."

    return AnswerResponse(
        correct=outcome.attempt.correct,
        feedback=outcome.feedback,
        correct_answer=answered.correct_answer,
        time_taken=outcome.attempt.time_taken,
        target_time=answered.target_time,
        next_question=(
            PresentedQuestionSchema.model_validate(outcome.next_question)
            if outcome.next_question
            else None
        ),
        session_completed=outcome.completed,
        result=_result_schema(outcome.result) if outcome.result else None,
        message=message,
    )


@router.post("/", response_model=SessionSchema, status_code=status.HTTP_201_CREATED)
async def start_session(
    session_data: SessionStart,
    db: AsyncSession = Depends(get_db),
    registry: SessionRegistry = Depends(get_registry),
) -> SessionSchema:
    """Start a diagnostic or practice session and present the first question."""
    result = await db.execute(
        select(StudentProfile).where(StudentProfile.id == session_data.student_id)
    )
    if not result.scalar_one_or_none():
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Student not found with ID: {session_data.student_id}",
        )

    result = await db.execute(select(Course).where(Course.id == session_data.course_id))
    if not result.scalar_one_or_none():
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Course not found with ID: {session_data.course_id}",
        )

    mode = SessionMode(session_data.mode)
    session = AdaptiveSession(
        mode,
        length=(
            settings.DIAGNOSTIC_LENGTH
            if mode is SessionMode.DIAGNOSTIC
            else settings.PRACTICE_MAX_QUESTIONS
        ),
        start_difficulty=settings.STARTING_DIFFICULTY,
        window=settings.DIFFICULTY_WINDOW,
    )

    bank = await load_question_bank(db, session_data.course_id)
    try:
        session.start(bank, session_data.course_id)
    except PoolExhaustedError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e

    tracked = registry.add(session, session_data.student_id)
    return _session_schema(tracked)


@router.get("/{session_id}", response_model=SessionSchema)
async def get_session(
    session_id: UUID, registry: SessionRegistry = Depends(get_registry)
) -> SessionSchema:
    """Get session state and the question currently presented."""
    return _session_schema(_get_tracked(registry, session_id))


@router.post("/{session_id}/answers", response_model=AnswerResponse)
async def submit_answer(
    session_id: UUID,
    answer_data: AnswerSubmit,
    db: AsyncSession = Depends(get_db),
    registry: SessionRegistry = Depends(get_registry),
) -> AnswerResponse:
    """Answer the presented question and receive feedback plus the next question."""
    tracked = _get_tracked(registry, session_id)

    async with tracked.lock:
        question = tracked.session.current_question
        if question is None:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Cannot submit answers to {tracked.session.state.value} session",
            )
        if answer_data.question_id != question.id:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Question {answer_data.question_id} is not the one being presented",
            )

        try:
            outcome = tracked.session.answer(answer_data.response, answer_data.time_taken)
        except InvalidStateError as e:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e

        return await _answer_response(tracked, outcome, db, question)


@router.post("/{session_id}/timeout", response_model=AnswerResponse)
async def timeout_question(
    session_id: UUID,
    db: AsyncSession = Depends(get_db),
    registry: SessionRegistry = Depends(get_registry),
) -> AnswerResponse:
    """Record the presented question as timed out."""
    tracked = _get_tracked(registry, session_id)

    async with tracked.lock:
        question = tracked.session.current_question
        try:
            outcome = tracked.session.timeout_current_question()
        except InvalidStateError as e:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e

        return await _answer_response(tracked, outcome, db, question)


@router.post("/{session_id}/finish", response_model=SessionSchema)
async def finish_session(
    session_id: UUID,
    db: AsyncSession = Depends(get_db),
    registry: SessionRegistry = Depends(get_registry),
) -> SessionSchema:
    """End a practice session and store its attempts."""
    tracked = _get_tracked(registry, session_id)

    async with tracked.lock:
        try:
            tracked.session.finish()
        except InvalidStateError as e:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e

        await _persist_completion(tracked, db)

    return _session_schema(tracked)


@router.get("/{session_id}/result", response_model=DiagnosticResultSchema)
async def get_session_result(
    session_id: UUID, registry: SessionRegistry = Depends(get_registry)
) -> DiagnosticResultSchema:
    """Get the scored result of a completed diagnostic session."""
    tracked = _get_tracked(registry, session_id)
    session = tracked.session

    if not session.is_completed:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Session is not completed yet (status: {session.state.value})",
        )

    if session.result is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No diagnostic result for {session.mode.value} session {session_id}",
        )

    return _result_schema(session.result)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def discard_session(
    session_id: UUID, registry: SessionRegistry = Depends(get_registry)
) -> None:
    """Discard a session. Unfinished attempts are not stored."""
    tracked = _get_tracked(registry, session_id)

    async with tracked.lock:
        registry.remove(session_id)
