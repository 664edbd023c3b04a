import logging
from typing import List, Optional, Dict, Tuple

from sqlalchemy import select, func, desc

from core.scorer.models import ScoringResult, ExecutiveSummary
from database.models import Candidate, EvaluationResult
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class ResultRepository(BaseRepository):
    def get_by_candidate(self, candidate_id: str) -> Optional[EvaluationResult]:
        stmt = select(EvaluationResult).where(EvaluationResult.candidate_id == candidate_id)
        return self._one_or_none(stmt)

    def save_result(
        self,
        candidate_id: str,
        result: ScoringResult,
        summary: ExecutiveSummary
    ) -> EvaluationResult:
        existing = self.get_by_candidate(candidate_id)
        record = existing or EvaluationResult(candidate_id=candidate_id)

        record.total_score = float(result.total_score)
        record.percentage = result.percentage
        record.recommendation = result.recommendation.value
        record.risk_level = result.risk_level.value
        record.dominant_type = result.dominant_type
        record.message = result.message
        record.result = result.to_dict()
        record.summary = summary.to_dict()

        if not existing:
            self.db.add(record)

        self.db.flush()
        return record

    def count_by_recommendation(self) -> Dict[str, int]:
        stmt = select(EvaluationResult.recommendation, func.count()).group_by(EvaluationResult.recommendation)
        return {recommendation: count for recommendation, count in self.db.execute(stmt).all()}

    def average_percentage(self) -> Optional[float]:
        value = self.db.execute(select(func.avg(EvaluationResult.percentage))).scalar()
        return float(value) if value is not None else None

    def recent(self, limit: int = 5) -> List[Tuple[Candidate, EvaluationResult]]:
        stmt = (
            select(Candidate, EvaluationResult)
            .join(EvaluationResult, EvaluationResult.candidate_id == Candidate.id)
            .order_by(desc(EvaluationResult.calculated_at))
            .limit(limit)
        )
        return [(candidate, result) for candidate, result in self.db.execute(stmt).all()]
