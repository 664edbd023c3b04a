import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, Text, Integer, Float, DateTime, ForeignKey, JSON, Index
from sqlalchemy.orm import relationship

from .base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EvaluationResult(Base):
    """
    Stored outcome of scoring a candidate's submission.

    The headline fields are denormalized for dashboard queries; the full
    ScoringResult and executive summary are kept as JSON documents.
    """
    __tablename__ = 'evaluation_results'

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    candidate_id = Column(String(36), ForeignKey('candidates.id', ondelete='CASCADE'), nullable=False, unique=True)

    total_score = Column(Float, nullable=False, default=0.0)
    percentage = Column(Integer, nullable=False, default=0)
    recommendation = Column(String(32), nullable=False)
    risk_level = Column(String(32), nullable=False)
    dominant_type = Column(String(4), nullable=False, default='')
    message = Column(Text)

    result = Column(JSON, nullable=False, default=dict)
    summary = Column(JSON, nullable=False, default=dict)

    calculated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    candidate = relationship("Candidate", back_populates="result")

    __table_args__ = (
        Index('idx_evaluation_results_recommendation', 'recommendation'),
    )


class ActivityLog(Base):
    """Audit trail of candidate-facing events."""
    __tablename__ = 'activity_log'

    id = Column(Integer, primary_key=True, autoincrement=True)
    event_type = Column(String(64), nullable=False)
    description = Column(Text)
    candidate_id = Column(String(36), ForeignKey('candidates.id', ondelete='SET NULL'))
    data = Column(JSON, nullable=False, default=dict)
    ip_address = Column(Text)
    user_agent = Column(Text)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
