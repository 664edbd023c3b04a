#!/usr/bin/env python3
"""
Disqualification Check - Automatic-reject conditions.

Runs before every other stage and is the only stage with veto power: any
critical flag raised here ends the evaluation as a rejection.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple
import logging

from core.scorer.answers import AnswerSet
from core.scorer.models import Flag, Severity

logger = logging.getLogger(__name__)

# Ethics scenario -> (disqualifying option, description)
ETHICS_DISQUALIFIERS: Dict[int, Tuple[str, str]] = {
    1: ("A", "Accepts work without an invoice - tax evasion"),
    4: ("A", "Takes leftover material without permission - theft"),
}

# Preference statements where any disagreement disqualifies
PREFERENCE_DISQUALIFIERS: Dict[int, str] = {
    5: "Would not follow safety rules",
    11: "Would not help an injured coworker",
    13: "Would not return surplus material",
}


@dataclass(frozen=True)
class DisqualificationResult:
    disqualified: bool
    flags: Tuple[Flag, ...] = field(default_factory=tuple)


def check_disqualifiers(answers: AnswerSet) -> DisqualificationResult:
    """
    Scan ethics and preference answers for automatic-reject conditions.

    Returns: DisqualificationResult with one critical flag per condition hit.
    """
    flags: List[Flag] = []

    for question, (option, description) in ETHICS_DISQUALIFIERS.items():
        if answers.ethics.get(question) == option:
            flags.append(Flag(
                severity=Severity.CRITICAL,
                section='ethics',
                question=question,
                description=description,
            ))

    for question, description in PREFERENCE_DISQUALIFIERS.items():
        response = answers.preference.get(question)
        if response is not None and response.is_disagreement:
            flags.append(Flag(
                severity=Severity.CRITICAL,
                section='preference',
                question=question,
                description=description,
            ))

    if flags:
        logger.info(
            "Disqualified by %d critical flag(s): %s",
            len(flags), ", ".join(f"{f.section}#{f.question}" for f in flags)
        )

    return DisqualificationResult(disqualified=bool(flags), flags=tuple(flags))
