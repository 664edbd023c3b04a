#!/usr/bin/env python3
"""
Aptitude Scorer - Self-rated technical knowledge to a weighted score.

Levels run 0..4 and map linearly to 0%, 25%, 50%, 75% and 100% of each
question's share of the section maximum.
"""

from typing import List, Tuple
import logging

from core.config_loader import ScoringConfig
from core.scorer.answers import AnswerSet
from core.scorer.models import Flag, Severity
from core.utils import round_half_up, clamp

logger = logging.getLogger(__name__)


def calculate_aptitude_score(
    answers: AnswerSet,
    config: ScoringConfig
) -> Tuple[float, List[Flag]]:
    """
    Sum per-question contributions and round to one decimal.

    per_question_max = section_max / aptitude_question_count (27 / 12 = 2.25)
    contribution     = per_question_max * level / max_level

    Returns: (score, flags)
    """
    per_question_max = config.section_maxima.aptitude / config.aptitude_question_count
    max_level = config.aptitude_max_level

    total = 0.0
    flags: List[Flag] = []

    for question in sorted(answers.aptitude):
        level = int(clamp(answers.aptitude[question], 0, max_level))
        total += per_question_max * (level / max_level)

        if level < config.aptitude_low_level:
            flags.append(Flag(
                severity=Severity.INFORMATIONAL,
                section='aptitude',
                question=question,
                description=f"Low technical knowledge in question {question}",
            ))

    # More answers than the instrument has questions must not overflow the section
    score = min(round_half_up(total, 1), config.section_maxima.aptitude)
    logger.debug("Aptitude score %.1f (%d answers)", score, len(answers.aptitude))
    return score, flags
