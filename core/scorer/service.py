#!/usr/bin/env python3
"""
Scoring Service - Psychometric evaluation of one answer set.

Every evaluation is a two-step state machine:

    PENDING -> DISQUALIFIED   (terminal, no section is scored)
    PENDING -> SCORED         (all four scorers ran and were aggregated)

The service holds no per-evaluation state, so one instance can evaluate
any number of submissions concurrently.
"""

from typing import Any, Dict, List, Optional
import logging

from core.config_loader import ScoringConfig
from core.scorer.answers import AnswerSet
from core.scorer.models import (
    EvaluationState,
    ExecutiveSummary,
    Flag,
    Recommendation,
    RiskLevel,
    ScoringResult,
    SectionScores,
)
from core.scorer import aggregate as aggregation
from core.scorer.aptitude import calculate_aptitude_score
from core.scorer.behavioral import calculate_behavioral_score, calculate_profile
from core.scorer.disqualification import check_disqualifiers
from core.scorer.ethics import calculate_ethics_score
from core.scorer.preference import calculate_preference_score

logger = logging.getLogger(__name__)

DISQUALIFIED_REASON = "disqualified by critical flags"

_TRANSITIONS = {
    EvaluationState.PENDING: {EvaluationState.DISQUALIFIED, EvaluationState.SCORED},
    EvaluationState.DISQUALIFIED: set(),
    EvaluationState.SCORED: set(),
}


class InvalidTransitionError(RuntimeError):
    """Raised when an evaluation leaves a terminal state."""


class _Evaluation:
    """Working state of a single evaluation run."""

    def __init__(self, answers: AnswerSet, config: ScoringConfig):
        self.answers = answers
        self.config = config
        self.state = EvaluationState.PENDING
        self.flags: List[Flag] = []

    def transition(self, target: EvaluationState) -> None:
        if target not in _TRANSITIONS[self.state]:
            raise InvalidTransitionError(f"Cannot move evaluation from {self.state.value} to {target.value}")
        self.state = target

    def disqualify(self) -> ScoringResult:
        self.transition(EvaluationState.DISQUALIFIED)
        scores = SectionScores()
        return ScoringResult(
            state=self.state,
            recommendation=Recommendation.REJECT,
            risk_level=RiskLevel.HIGH,
            message=aggregation.CRITICAL_MESSAGE,
            section_scores=scores,
            total_score=0,
            max_score=self.config.section_maxima.total,
            percentage=0,
            flags=tuple(self.flags),
            reason=DISQUALIFIED_REASON,
            details=aggregation.build_details(scores, self.flags, self.config),
        )

    def score(self) -> ScoringResult:
        profile = calculate_profile(self.answers)
        behavioral, flags = calculate_behavioral_score(profile, self.config)
        self.flags.extend(flags)

        preference, flags = calculate_preference_score(self.answers, self.config)
        self.flags.extend(flags)

        ethics, flags = calculate_ethics_score(self.answers, self.config)
        self.flags.extend(flags)

        aptitude, flags = calculate_aptitude_score(self.answers, self.config)
        self.flags.extend(flags)

        scores = SectionScores(
            behavioral=behavioral,
            preference=preference,
            ethics=ethics,
            aptitude=aptitude,
        )

        self.transition(EvaluationState.SCORED)
        return aggregation.aggregate(scores, profile, self.flags, self.config, self.state)


class ScoringService:
    """
    Deterministic scoring engine for psychometric submissions.

    Pure and synchronous: no I/O, no shared mutable state. The same answer
    set always produces the same ScoringResult.
    """

    def __init__(self, config: Optional[ScoringConfig] = None):
        self.config = config or ScoringConfig()

    def evaluate(self, answers: Any) -> ScoringResult:
        """Score one submission.

        Args:
            answers: AnswerSet or raw JSON-compatible mapping (may be partial)

        Returns:
            ScoringResult in state DISQUALIFIED or SCORED
        """
        answer_set = AnswerSet.from_raw(answers)
        evaluation = _Evaluation(answer_set, self.config)

        screening = check_disqualifiers(answer_set)
        evaluation.flags.extend(screening.flags)
        if screening.disqualified:
            return evaluation.disqualify()

        return evaluation.score()

    def evaluate_many(self, submissions: Dict[str, Any]) -> Dict[str, ScoringResult]:
        """Score several submissions keyed by candidate identity."""
        return {key: self.evaluate(answers) for key, answers in submissions.items()}

    def summarize(self, result: ScoringResult) -> ExecutiveSummary:
        return aggregation.build_executive_summary(result, self.config)
