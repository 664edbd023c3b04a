#!/usr/bin/env python3
"""
Scoring Models - Data structures for scoring results.

All records are immutable and JSON-serializable through ``to_dict()`` so a
result can be handed to the record store or returned over HTTP unchanged.
"""

from enum import Enum
from typing import List, Dict, Any, Optional, Tuple
from dataclasses import dataclass, field

from core.config_loader import AXES


class Severity(str, Enum):
    CRITICAL = "critical"
    WARNING = "warning"
    INFORMATIONAL = "informational"


class Recommendation(str, Enum):
    HIRE = "HIRE"
    HIRE_WITH_RESERVATIONS = "HIRE_WITH_RESERVATIONS"
    SECOND_INTERVIEW = "SECOND_INTERVIEW"
    REJECT = "REJECT"


class RiskLevel(str, Enum):
    LOW = "LOW"
    MEDIUM_LOW = "MEDIUM_LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class EvaluationState(str, Enum):
    """Lifecycle of one evaluation: PENDING -> DISQUALIFIED | SCORED."""
    PENDING = "pending"
    DISQUALIFIED = "disqualified"
    SCORED = "scored"


@dataclass(frozen=True)
class Flag:
    """A risk indicator raised while scoring. Flags are only ever appended."""
    severity: Severity
    section: str
    description: str
    question: Optional[int] = None

    @property
    def is_critical(self) -> bool:
        return self.severity == Severity.CRITICAL

    def to_dict(self) -> Dict[str, Any]:
        return {
            'severity': self.severity.value,
            'section': self.section,
            'question': self.question,
            'description': self.description,
        }


@dataclass(frozen=True)
class BehavioralProfile:
    """Four behavioral axes, each on a 0-10 scale."""
    D: int = 0
    I: int = 0
    S: int = 0
    C: int = 0

    def get(self, axis: str) -> int:
        return getattr(self, axis)

    def ranked(self) -> List[Tuple[str, int]]:
        # sorted() is stable, so ties keep the fixed D, I, S, C order
        return sorted(((axis, self.get(axis)) for axis in AXES), key=lambda item: -item[1])

    @property
    def dominant_type(self) -> str:
        return "".join(axis for axis, _ in self.ranked()[:2])

    def to_dict(self) -> Dict[str, int]:
        return {axis: self.get(axis) for axis in AXES}


@dataclass(frozen=True)
class SectionScores:
    """Per-section scores. ``None`` means the section was never scored."""
    behavioral: Optional[float] = None
    preference: Optional[float] = None
    ethics: Optional[float] = None
    aptitude: Optional[float] = None

    @property
    def total(self) -> float:
        return sum(score or 0 for score in (self.behavioral, self.preference, self.ethics, self.aptitude))

    def to_dict(self) -> Dict[str, Optional[float]]:
        return {
            'behavioral': self.behavioral,
            'preference': self.preference,
            'ethics': self.ethics,
            'aptitude': self.aptitude,
        }


@dataclass(frozen=True)
class ScoringResult:
    """Complete evaluation outcome for one AnswerSet."""
    state: EvaluationState
    recommendation: Recommendation
    risk_level: RiskLevel
    message: str

    section_scores: SectionScores = field(default_factory=SectionScores)
    total_score: float = 0
    max_score: float = 0
    percentage: int = 0

    profile: Optional[BehavioralProfile] = None
    dominant_type: str = ""
    flags: Tuple[Flag, ...] = ()
    insights: Tuple[str, ...] = ()
    reason: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def disqualified(self) -> bool:
        return self.state == EvaluationState.DISQUALIFIED

    @property
    def critical_flags(self) -> List[Flag]:
        return [f for f in self.flags if f.is_critical]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'state': self.state.value,
            'section_scores': self.section_scores.to_dict(),
            'total_score': self.total_score,
            'max_score': self.max_score,
            'percentage': self.percentage,
            'profile': self.profile.to_dict() if self.profile else None,
            'dominant_type': self.dominant_type,
            'flags': [f.to_dict() for f in self.flags],
            'recommendation': self.recommendation.value,
            'risk_level': self.risk_level.value,
            'message': self.message,
            'reason': self.reason,
            'insights': list(self.insights),
            'details': self.details,
        }


@dataclass(frozen=True)
class ExecutiveSummary:
    """Condensed view of a ScoringResult for reviewers."""
    recommendation: Recommendation
    risk_level: RiskLevel
    total_score: str
    percentage: str
    dominant_type: str
    flag_count: int
    strengths: Tuple[str, ...] = ()
    weaknesses: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'recommendation': self.recommendation.value,
            'risk_level': self.risk_level.value,
            'total_score': self.total_score,
            'percentage': self.percentage,
            'dominant_type': self.dominant_type,
            'flag_count': self.flag_count,
            'strengths': list(self.strengths),
            'weaknesses': list(self.weaknesses),
        }
