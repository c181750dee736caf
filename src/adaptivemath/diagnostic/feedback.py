"""
Feedback Messages

Immediate feedback shown after each answer. The presentation layer styles
messages starting with "Incorrect" (and the timeout message) as failures.
"""

INCORRECT_FEEDBACK = "Incorrect. Check the correct answer below and try the next one."
FAST_FEEDBACK = "Excellent! Correct and within the target time. Great speed!"
SLOW_FEEDBACK = "Correct! Well done, but you took longer than the target time."
TIMEOUT_FEEDBACK = "Time's up! Let's move on to the next question."


def generate_feedback(correct: bool, time_taken: float, target_time: float) -> str:
    """Return the feedback message for an answered question.

    Args:
        correct: Whether the answer was right
        time_taken: Seconds spent answering (>= 0)
        target_time: Expected seconds for the question (> 0)

    Returns:
        Message starting with "Incorrect" for wrong answers, otherwise praise
        that mentions speed relative to the target time
    """
    if not correct:
        return INCORRECT_FEEDBACK
    if time_taken <= target_time:
        return FAST_FEEDBACK
    return SLOW_FEEDBACK
