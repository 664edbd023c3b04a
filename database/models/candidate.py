import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, Text, DateTime, ForeignKey, JSON, Index
from sqlalchemy.orm import relationship

from .base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _uuid() -> str:
    return str(uuid.uuid4())


class CandidateStatus:
    PENDING = 'pending'
    IN_PROGRESS = 'in_progress'
    COMPLETED = 'completed'

    ALL = (PENDING, IN_PROGRESS, COMPLETED)


class Candidate(Base):
    """
    A candidate invited to take the test, identified by an access token.
    """
    __tablename__ = 'candidates'

    id = Column(String(36), primary_key=True, default=_uuid)
    token = Column(String(128), nullable=False, unique=True)
    name = Column(Text, nullable=False)
    email = Column(Text)
    phone = Column(Text)
    position = Column(Text)

    status = Column(String(32), nullable=False, default=CandidateStatus.PENDING)
    expires_at = Column(DateTime(timezone=True))

    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    answers = relationship("CandidateAnswers", back_populates="candidate", uselist=False, cascade="all, delete-orphan")
    result = relationship("EvaluationResult", back_populates="candidate", uselist=False, cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_candidates_token', 'token'),
        Index('idx_candidates_status', 'status'),
    )


class CandidateAnswers(Base):
    """
    Latest (possibly partial) answer set of a candidate.

    Auto-save overwrites it; submission stamps submitted_at.
    """
    __tablename__ = 'candidate_answers'

    id = Column(String(36), primary_key=True, default=_uuid)
    candidate_id = Column(String(36), ForeignKey('candidates.id', ondelete='CASCADE'), nullable=False, unique=True)

    answers = Column(JSON, nullable=False, default=dict)
    submission_metadata = Column('metadata', JSON, nullable=False, default=dict)

    submitted_at = Column(DateTime(timezone=True))
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    candidate = relationship("Candidate", back_populates="answers")
