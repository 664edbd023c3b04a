#!/usr/bin/env python3
"""
Preference Scorer - Likert answers against a fixed polarity table.

Agreement is desirable on every statement except one (a preference for
working alone), where disagreement is desirable.
"""

from enum import Enum
from typing import Dict, List, Tuple
import logging

from core.config_loader import ScoringConfig
from core.scorer.answers import AnswerSet
from core.scorer.models import Flag, Severity

logger = logging.getLogger(__name__)


class Polarity(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"


QUESTION_COUNT = 15
NEGATIVE_QUESTIONS = frozenset({7})

POLARITY: Dict[int, Polarity] = {
    q: (Polarity.NEGATIVE if q in NEGATIVE_QUESTIONS else Polarity.POSITIVE)
    for q in range(1, QUESTION_COUNT + 1)
}


def calculate_preference_score(
    answers: AnswerSet,
    config: ScoringConfig
) -> Tuple[float, List[Flag]]:
    """
    Deduct points for answers on the wrong side of each statement.

    Unanswered statements cost nothing.

    Returns: (score, flags)
    """
    score = config.section_maxima.preference
    flags: List[Flag] = []

    for question, polarity in POLARITY.items():
        response = answers.preference.get(question)
        if response is None:
            continue

        if polarity == Polarity.POSITIVE and response.is_disagreement:
            score -= config.preference_deduction
        elif polarity == Polarity.NEGATIVE and response.is_agreement:
            score -= config.preference_deduction
            flags.append(Flag(
                severity=Severity.WARNING,
                section='preference',
                question=question,
                description="May prefer working alone, could affect teamwork",
            ))

    score = max(0, score)
    logger.debug("Preference score %s (%d answers)", score, len(answers.preference))
    return score, flags
