import logging
from typing import Optional, Dict, Any
from datetime import datetime, timezone

from sqlalchemy import select

from database.models import Candidate, CandidateAnswers, CandidateStatus, ActivityLog
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class CandidateRepository(BaseRepository):
    def get_by_token(self, token: str) -> Optional[Candidate]:
        stmt = select(Candidate).where(Candidate.token == token)
        return self._one_or_none(stmt)

    def get_by_id(self, candidate_id: str) -> Optional[Candidate]:
        return self.db.get(Candidate, candidate_id)

    def create(
        self,
        name: str,
        token: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        position: Optional[str] = None,
        expires_at: Optional[datetime] = None
    ) -> Candidate:
        """Register a candidate under a token issued by the caller."""
        candidate = Candidate(
            name=name,
            token=token,
            email=email,
            phone=phone,
            position=position,
            expires_at=expires_at,
            status=CandidateStatus.PENDING,
        )
        self.db.add(candidate)
        self.db.flush()
        return candidate

    def update_personal_data(self, candidate: Candidate, personal_data: Dict[str, Any]) -> Candidate:
        """Overwrite name/email/phone with any non-empty values provided."""
        for field in ('name', 'email', 'phone'):
            value = personal_data.get(field)
            if value:
                setattr(candidate, field, value)
        self.db.flush()
        return candidate

    def set_status(self, candidate: Candidate, status: str) -> Candidate:
        if status not in CandidateStatus.ALL:
            raise ValueError(f"Unknown candidate status: {status}")
        candidate.status = status
        self.db.flush()
        return candidate

    def get_answers(self, candidate_id: str) -> Optional[CandidateAnswers]:
        stmt = select(CandidateAnswers).where(CandidateAnswers.candidate_id == candidate_id)
        return self._one_or_none(stmt)

    def save_answers(
        self,
        candidate_id: str,
        answers: Dict[str, Any],
        metadata: Optional[Dict[str, Any]] = None,
        submitted: bool = False
    ) -> CandidateAnswers:
        existing = self.get_answers(candidate_id)

        if existing:
            existing.answers = answers
            existing.submission_metadata = metadata or {}
            record = existing
        else:
            record = CandidateAnswers(
                candidate_id=candidate_id,
                answers=answers,
                submission_metadata=metadata or {},
            )
            self.db.add(record)

        if submitted:
            record.submitted_at = datetime.now(timezone.utc)

        self.db.flush()
        return record

    def log_activity(
        self,
        event_type: str,
        description: str,
        candidate_id: Optional[str] = None,
        data: Optional[Dict[str, Any]] = None,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None
    ) -> ActivityLog:
        entry = ActivityLog(
            event_type=event_type,
            description=description,
            candidate_id=candidate_id,
            data=data or {},
            ip_address=ip_address,
            user_agent=user_agent,
        )
        self.db.add(entry)
        self.db.flush()
        return entry
