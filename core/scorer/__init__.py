#!/usr/bin/env python3
"""
Scoring Module - Psychometric submission scoring.

Public API:
- ScoringService: Main scoring orchestrator
- AnswerSet: Validated input answers
- ScoringResult / ExecutiveSummary: Outputs

The engine is split into focused, single-responsibility modules:

- answers.py: Ingestion boundary (lenient coercion of raw submissions)
- models.py: Data structures (Flag, BehavioralProfile, ScoringResult, ...)
- disqualification.py: Automatic-reject conditions (runs first, veto power)
- behavioral.py: Forced-choice answers to a four-axis profile and its score
- preference.py: Likert answers against a polarity table
- ethics.py: Integrity scenarios against an answer key
- aptitude.py: Self-rated technical knowledge
- aggregate.py: Totals, recommendation tier, insights, executive summary
- service.py: ScoringService orchestrator (PENDING -> DISQUALIFIED | SCORED)
"""

from core.scorer.answers import AnswerSet, ResponseLevel
from core.scorer.models import (
    EvaluationState,
    ExecutiveSummary,
    Flag,
    Recommendation,
    RiskLevel,
    ScoringResult,
    Severity,
)
from core.scorer.service import ScoringService

__all__ = [
    'ScoringService',
    'AnswerSet',
    'ResponseLevel',
    'ScoringResult',
    'ExecutiveSummary',
    'EvaluationState',
    'Flag',
    'Severity',
    'Recommendation',
    'RiskLevel',
]
