#!/usr/bin/env python3
"""
Aggregation - Totals, recommendation tier, insights and executive summary.

Key behavior:
- Percentage is the half-up rounded share of the configured maximum (122 by default).
- Any critical flag forces REJECT / HIGH regardless of the percentage.
- Otherwise tiers are matched in descending order; boundaries are inclusive.
- Insights are per-axis threshold statements, independent of the tier.
"""

from typing import Dict, Iterable, List, Optional, Tuple
import logging

from core.config_loader import RecommendationThresholds, ScoringConfig
from core.scorer.models import (
    BehavioralProfile,
    EvaluationState,
    ExecutiveSummary,
    Flag,
    Recommendation,
    RiskLevel,
    ScoringResult,
    SectionScores,
)
from core.utils import round_to_int

logger = logging.getLogger(__name__)

CRITICAL_MESSAGE = "Candidate shows critical unethical behavior"

TIER_MESSAGES: Dict[Recommendation, str] = {
    Recommendation.HIRE: "Excellent candidate, meets all criteria",
    Recommendation.HIRE_WITH_RESERVATIONS: "Good candidate, consider an extended probation period",
    Recommendation.SECOND_INTERVIEW: "Candidate requires further evaluation",
    Recommendation.REJECT: "Candidate does not meet the minimum requirements",
}

HIGH_AXIS_INSIGHTS: Dict[str, str] = {
    'D': "Tends to be dominant and direct",
    'I': "Good social and communication skills",
    'S': "Stable, reliable and team-oriented",
    'C': "Detail-oriented, precise and follows rules",
}

LOW_AXIS_INSIGHTS: Dict[str, str] = {
    'D': "May find it hard to make quick decisions",
    'I': "Prefers to work independently",
    'S': "May struggle with routine tasks",
    'C': "May be less detail-oriented or careless",
}

STRENGTH_TEXTS: Dict[str, str] = {
    'behavioral': "Behavioral profile well suited to the role",
    'preference': "Excellent work attitudes",
    'ethics': "High integrity and work ethic",
    'aptitude': "Good technical knowledge",
}

WEAKNESS_TEXTS: Dict[str, str] = {
    'behavioral': "Behavioral profile not aligned with the role",
    'preference': "Questionable work attitudes",
    'ethics': "Possible ethical issues",
    'aptitude': "Insufficient technical knowledge",
}


def calculate_percentage(total: float, max_total: float) -> int:
    if max_total <= 0:
        return 0
    return round_to_int(total / max_total * 100)


def classify(percentage: float, thresholds: RecommendationThresholds) -> Tuple[Recommendation, RiskLevel]:
    """Map a percentage to (recommendation, risk). Boundaries are inclusive."""
    if percentage >= thresholds.hire:
        return Recommendation.HIRE, RiskLevel.LOW
    if percentage >= thresholds.hire_with_reservations:
        return Recommendation.HIRE_WITH_RESERVATIONS, RiskLevel.MEDIUM_LOW
    if percentage >= thresholds.second_interview:
        return Recommendation.SECOND_INTERVIEW, RiskLevel.MEDIUM
    return Recommendation.REJECT, RiskLevel.HIGH


def profile_insights(profile: BehavioralProfile, config: ScoringConfig) -> List[str]:
    """Strength statements for high axes followed by concerns for low axes."""
    insights = [
        text for axis, text in HIGH_AXIS_INSIGHTS.items()
        if profile.get(axis) > config.insight_high_above
    ]
    insights.extend(
        text for axis, text in LOW_AXIS_INSIGHTS.items()
        if profile.get(axis) < config.insight_low_below
    )
    return insights


def build_details(
    scores: SectionScores,
    flags: Iterable[Flag],
    config: ScoringConfig
) -> Dict[str, object]:
    flags = list(flags)
    maxima = config.section_maxima
    return {
        'section_maxima': {
            'behavioral': maxima.behavioral,
            'preference': maxima.preference,
            'ethics': maxima.ethics,
            'aptitude': maxima.aptitude,
        },
        'max_total': maxima.total,
        'section_scores': scores.to_dict(),
        'flag_count': len(flags),
        'critical_flag_count': sum(1 for f in flags if f.is_critical),
    }


def aggregate(
    scores: SectionScores,
    profile: BehavioralProfile,
    flags: List[Flag],
    config: ScoringConfig,
    state: EvaluationState,
) -> ScoringResult:
    """
    Combine section scores into the final ScoringResult.

    The critical-flag check is repeated here even though disqualification
    normally ends the evaluation earlier.
    """
    max_total = config.section_maxima.total
    total = scores.total
    percentage = calculate_percentage(total, max_total)

    if any(f.is_critical for f in flags):
        recommendation, risk = Recommendation.REJECT, RiskLevel.HIGH
        message = CRITICAL_MESSAGE
    else:
        recommendation, risk = classify(percentage, config.thresholds)
        message = TIER_MESSAGES[recommendation]

    logger.info(
        "Scored %.1f/%.0f (%d%%) -> %s",
        total, max_total, percentage, recommendation.value
    )

    return ScoringResult(
        state=state,
        recommendation=recommendation,
        risk_level=risk,
        message=message,
        section_scores=scores,
        total_score=total,
        max_score=max_total,
        percentage=percentage,
        profile=profile,
        dominant_type=profile.dominant_type,
        flags=tuple(flags),
        insights=tuple(profile_insights(profile, config)),
        details=build_details(scores, flags, config),
    )


def _ratio(score: Optional[float], maximum: float) -> Optional[float]:
    if score is None or maximum <= 0:
        return None
    return score / maximum


def identify_strengths(result: ScoringResult, config: ScoringConfig) -> List[str]:
    strengths = []
    scores = result.section_scores.to_dict()
    maxima = config.section_maxima

    for section, text in STRENGTH_TEXTS.items():
        threshold = config.strength_ratios.get(section)
        ratio = _ratio(scores[section], getattr(maxima, section))
        if threshold is not None and ratio is not None and ratio > threshold:
            strengths.append(text)

    profile = result.profile
    if profile is not None:
        if profile.S > config.summary_high_above:
            strengths.append("High stability and reliability")
        if profile.C > config.summary_high_above:
            strengths.append("Oriented to quality and rules")

    return strengths


def identify_weaknesses(result: ScoringResult, config: ScoringConfig) -> List[str]:
    weaknesses = []
    scores = result.section_scores.to_dict()
    maxima = config.section_maxima

    for section, text in WEAKNESS_TEXTS.items():
        threshold = config.weakness_ratios.get(section)
        ratio = _ratio(scores[section], getattr(maxima, section))
        if threshold is not None and ratio is not None and ratio < threshold:
            weaknesses.append(text)

    profile = result.profile
    if profile is not None:
        if profile.D > config.summary_high_above:
            weaknesses.append("May conflict with authority")
        if profile.S < config.summary_low_below:
            weaknesses.append("Low tolerance for routine")

    weaknesses.extend(f.description for f in result.critical_flags)
    return weaknesses


def build_executive_summary(result: ScoringResult, config: ScoringConfig) -> ExecutiveSummary:
    """Derive the reviewer-facing summary from a finished ScoringResult."""
    return ExecutiveSummary(
        recommendation=result.recommendation,
        risk_level=result.risk_level,
        total_score=f"{result.total_score:g}/{config.section_maxima.total:g}",
        percentage=f"{result.percentage}%",
        dominant_type=result.dominant_type,
        flag_count=len(result.flags),
        strengths=tuple(identify_strengths(result, config)),
        weaknesses=tuple(identify_weaknesses(result, config)),
    )
