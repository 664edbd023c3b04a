#!/usr/bin/env python3
"""
Behavioral Profile - Forced-choice answers to a four-axis profile.

Each "most descriptive" selection is looked up in a hand-authored table
(selection group x question position -> axis) and counted. The profile is
then scored by its weighted distance from the ideal profile.
"""

from typing import Dict, List, Tuple
import logging

from core.config_loader import AXES, ScoringConfig
from core.scorer.answers import AnswerSet
from core.scorer.models import BehavioralProfile, Flag, Severity
from core.utils import round_to_int

logger = logging.getLogger(__name__)

# Selection group -> axis for question positions 1..10 (index 0..9)
SELECTION_TO_AXIS: Dict[str, Tuple[str, ...]] = {
    'A': ('S', 'S', 'S', 'C', 'C', 'S', 'C', 'C', 'C', 'S'),
    'B': ('D', 'D', 'I', 'I', 'I', 'I', 'I', 'S', 'I', 'C'),
    'C': ('I', 'S', 'D', 'D', 'D', 'D', 'D', 'I', 'D', 'D'),
    'D': ('C', 'C', 'C', 'C', 'S', 'S', 'S', 'D', 'S', 'I'),
}

# The table is authored on a base-10 scale
AXIS_SCALE = 10


def axis_for(letter: str, question: int):
    """Axis letter for a selection at a 1-based question position, or None."""
    row = SELECTION_TO_AXIS.get(letter)
    index = question - 1
    if row is None or not (0 <= index < len(row)):
        return None
    return row[index]


def calculate_profile(answers: AnswerSet) -> BehavioralProfile:
    """
    Count "most" selections per axis and normalize to 0-10.

    Normalization is round((count / 10) * 10): the counts are already on the
    table's base-10 scale, so this is a pass-through apart from rounding.
    """
    counts = {axis: 0 for axis in AXES}

    for question in sorted(answers.behavioral):
        selection = answers.behavioral[question]
        if selection.most is None:
            continue
        axis = axis_for(selection.most, question)
        if axis is not None:
            counts[axis] += 1

    normalized = {
        axis: round_to_int((count / AXIS_SCALE) * AXIS_SCALE)
        for axis, count in counts.items()
    }
    return BehavioralProfile(**normalized)


def calculate_behavioral_score(
    profile: BehavioralProfile,
    config: ScoringConfig
) -> Tuple[float, List[Flag]]:
    """
    Score a profile by weighted deviation from the ideal profile.

    Formula: max(0, section_max - sum(weight[axis] * |profile[axis] - ideal[axis]|))

    Returns: (score, flags)
    """
    weighted_deviation = sum(
        config.deviation_weights[axis] * abs(profile.get(axis) - config.ideal_profile[axis])
        for axis in AXES
    )
    score = max(0, config.section_maxima.behavioral - weighted_deviation)

    flags: List[Flag] = []
    if profile.D > config.dominance_warning_above:
        flags.append(Flag(
            severity=Severity.WARNING,
            section='behavioral',
            description="Highly dominant profile, may conflict with authority",
        ))
    if profile.S < config.steadiness_warning_below:
        flags.append(Flag(
            severity=Severity.WARNING,
            section='behavioral',
            description="Low stability, may struggle with routine",
        ))

    logger.debug(
        "Behavioral score %s (profile=%s, weighted_deviation=%s)",
        score, profile.to_dict(), weighted_deviation
    )
    return score, flags
