"""
Adaptive Engine Errors

Raised by the scoring functions and the session orchestrator.
"""


class AdaptiveEngineError(Exception):
    """Base class for adaptive engine failures."""

    pass


class EmptyHistoryError(AdaptiveEngineError):
    """Raised when scoring is requested for a session with no attempts."""

    pass


class InvalidStateError(AdaptiveEngineError):
    """Raised when a session operation is called in the wrong state."""

    pass


class PoolExhaustedError(AdaptiveEngineError):
    """Raised when a course has no question to present at any difficulty.

    Running out of questions after the first attempt is not an error: the
    session completes with ``exhausted`` set and scores what it has.

    Attributes:
        course_id: Course whose question pool is empty
    """

    def __init__(self, course_id: str):
        self.course_id = course_id
        super().__init__(f"No questions available for course '{course_id}'")
