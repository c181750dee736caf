"""
Learning Style Questionnaire

VARK (visual, aural, read/write, kinesthetic) self-assessment taken before a
course. Students rate each statement from 1 (disagree) to 5 (agree); ratings
are summed per style and the highest-scoring style(s) reported.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple

from adaptivemath.core.validation import ValidationError

MIN_RATING = 1
MAX_RATING = 5


class LearningStyle(str, Enum):
    VISUAL = "visual"
    AURAL = "aural"
    READ = "read"
    KINESTHETIC = "kinesthetic"


class StyleStatement(NamedTuple):
    id: str
    text: str
    style: LearningStyle


STATEMENTS = [
    StyleStatement(
        "v1",
        "When I study a new math concept, I prefer to see a diagram or chart explaining it.",
        LearningStyle.VISUAL,
    ),
    StyleStatement(
        "a1",
        "I learn best when I can listen to someone explain the concept verbally or discuss it.",
        LearningStyle.AURAL,
    ),
    StyleStatement(
        "r1",
        "I prefer to read a textbook or write notes to understand a math idea.",
        LearningStyle.READ,
    ),
    StyleStatement(
        "k1",
        "I understand ideas better when I can solve hands-on problems or manipulate objects.",
        LearningStyle.KINESTHETIC,
    ),
    StyleStatement(
        "v2",
        "I find it helpful when mathematical relationships are shown through graphs "
        "or visualizations.",
        LearningStyle.VISUAL,
    ),
    StyleStatement(
        "a2",
        "I remember mathematical concepts better after participating in group discussions.",
        LearningStyle.AURAL,
    ),
]


class StyleProfile(NamedTuple):
    scores: dict[LearningStyle, int]
    dominant: list[LearningStyle]


def score_learning_style(ratings: dict[str, int]) -> StyleProfile:
    """Score questionnaire ratings keyed by statement id.

    Unanswered statements count as zero; ratings are clamped to 1-5.

    Raises:
        ValidationError: On an unknown statement id or when nothing was rated
    """
    by_id = {statement.id: statement for statement in STATEMENTS}
    unknown = sorted(set(ratings) - set(by_id))
    if unknown:
        raise ValidationError(f"Unknown questionnaire statements: {', '.join(unknown)}")
    if not ratings:
        raise ValidationError("No questionnaire statements were rated")

    scores = {style: 0 for style in LearningStyle}
    for statement_id, rating in ratings.items():
        style = by_id[statement_id].style
        scores[style] += max(MIN_RATING, min(MAX_RATING, rating))

    top = max(scores.values())
    dominant = [style for style in LearningStyle if scores[style] == top]
    return StyleProfile(scores=scores, dominant=dominant)
