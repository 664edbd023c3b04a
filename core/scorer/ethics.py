#!/usr/bin/env python3
"""
Ethics Scorer - Integrity scenarios against a fixed answer key.
"""

from typing import Dict, List, Tuple
import logging

from core.config_loader import ScoringConfig
from core.scorer.answers import AnswerSet
from core.scorer.disqualification import ETHICS_DISQUALIFIERS
from core.scorer.models import Flag, Severity

logger = logging.getLogger(__name__)

CORRECT_ANSWERS: Dict[int, str] = {
    1: 'B',  # refuse work without an invoice
    2: 'B',  # report the damaged tool
    3: 'B',  # decline a personal loan from a client
    4: 'B',  # leave surplus material
    5: 'A',  # report the accident immediately
}


def calculate_ethics_score(
    answers: AnswerSet,
    config: ScoringConfig
) -> Tuple[float, List[Flag]]:
    """
    Deduct points for every scenario not answered with the correct option.

    A missing answer counts as a mismatch. Scenarios that are also
    disqualifiers already produced a critical flag, so they get no warning.

    Returns: (score, flags)
    """
    score = config.section_maxima.ethics
    flags: List[Flag] = []

    for question, correct in CORRECT_ANSWERS.items():
        if answers.ethics.get(question) == correct:
            continue

        score -= config.ethics_deduction
        if question not in ETHICS_DISQUALIFIERS:
            flags.append(Flag(
                severity=Severity.WARNING,
                section='ethics',
                question=question,
                description=f"Unethical answer in scenario {question}",
            ))

    score = max(0, score)
    logger.debug("Ethics score %s", score)
    return score, flags
