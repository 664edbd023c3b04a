#!/usr/bin/env python3
"""
Submission service - token lookup, auto-save and final submission.

Thin I/O wrapper around ScoringService: it loads and stores records
through the repository and never alters scoring semantics.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

from core.config_loader import ScoringConfig
from core.scorer import AnswerSet, ScoringResult, ScoringService
from database.models import Candidate, CandidateStatus
from database.repository import EvaluationRepository
from .settings_service import SettingsService
from ..exceptions import (
    CandidateNotFoundException,
    TestAlreadyCompletedException,
    TokenExpiredException,
)
from ..utils import as_utc

logger = logging.getLogger(__name__)

EVENT_TEST_COMPLETED = 'TEST_COMPLETED'


class SubmissionService:
    """Service for candidate-facing test operations."""

    def __init__(self, repo: EvaluationRepository, scoring_config: ScoringConfig):
        self.repo = repo
        self.settings = SettingsService(repo, scoring_config)

    def get_active_candidate(self, token: str, now: Optional[datetime] = None) -> Candidate:
        """
        Resolve a token to a candidate who may still take the test.

        Raises:
            CandidateNotFoundException: Unknown token.
            TestAlreadyCompletedException: Test already submitted.
            TokenExpiredException: Token past its expiry date.
        """
        candidate = self.repo.candidates.get_by_token(token)
        if candidate is None:
            raise CandidateNotFoundException("Invalid token")

        if candidate.status == CandidateStatus.COMPLETED:
            raise TestAlreadyCompletedException("This test has already been completed")

        now = now or datetime.now(timezone.utc)
        expires_at = as_utc(candidate.expires_at)
        if expires_at is not None and now > expires_at:
            raise TokenExpiredException("Token expired")

        return candidate

    def get_saved_answers(self, candidate: Candidate) -> Tuple[Dict[str, Any], Optional[datetime]]:
        record = self.repo.candidates.get_answers(candidate.id)
        if record is None:
            return {}, None
        return record.answers or {}, record.updated_at

    def auto_save(self, token: str, answers: Dict[str, Any], metadata: Dict[str, Any]) -> datetime:
        """Store in-progress answers and mark a pending candidate as in progress."""
        candidate = self.get_active_candidate(token)
        saved_at = datetime.now(timezone.utc)

        self.repo.candidates.save_answers(
            candidate.id,
            AnswerSet.from_raw(answers).to_dict(),
            metadata={**metadata, 'last_saved_at': saved_at.isoformat(), 'auto_saved': True},
        )

        if candidate.status == CandidateStatus.PENDING:
            self.repo.candidates.set_status(candidate, CandidateStatus.IN_PROGRESS)

        logger.debug(f"Auto-saved answers for candidate {candidate.id}")
        return saved_at

    def submit(
        self,
        token: str,
        answers: Dict[str, Any],
        metadata: Dict[str, Any],
        personal_data: Optional[Dict[str, Any]] = None,
        total_minutes: Optional[float] = None
    ) -> Tuple[Candidate, ScoringResult]:
        """
        Score a finished test and persist answers, result and audit entry.

        Returns: (candidate, scoring_result)
        """
        candidate = self.get_active_candidate(token)

        if personal_data:
            self.repo.candidates.update_personal_data(candidate, personal_data)

        answer_set = AnswerSet.from_raw(answers)
        self.repo.candidates.save_answers(
            candidate.id,
            answer_set.to_dict(),
            metadata={
                **metadata,
                'total_minutes': total_minutes,
                'submitted_at': datetime.now(timezone.utc).isoformat(),
            },
            submitted=True,
        )

        scoring = ScoringService(self.settings.get_effective_config())
        result = scoring.evaluate(answer_set)
        summary = scoring.summarize(result)

        self.repo.results.save_result(candidate.id, result, summary)
        self.repo.candidates.set_status(candidate, CandidateStatus.COMPLETED)
        self.repo.candidates.log_activity(
            EVENT_TEST_COMPLETED,
            f"Test completed by {candidate.name}",
            candidate_id=candidate.id,
            data={
                'total_score': result.total_score,
                'percentage': result.percentage,
                'recommendation': result.recommendation.value,
            },
            ip_address=metadata.get('ip'),
            user_agent=metadata.get('user_agent'),
        )

        logger.info(
            f"Candidate {candidate.id} submitted: {result.percentage}% -> {result.recommendation.value}"
        )
        return candidate, result
