#!/usr/bin/env python3
"""
Stats endpoints - view evaluation statistics.
"""

from fastapi import APIRouter, Depends

from core.scorer import Recommendation
from database.models import CandidateStatus
from database.repository import EvaluationRepository
from ..dependencies import get_repository
from ..models.responses import RecentEvaluation, StatsResponse
from ..utils import safe_datetime_iso

router = APIRouter(prefix="/api/stats", tags=["stats"])

RECENT_LIMIT = 5


@router.get("", response_model=StatsResponse)
def get_stats(repo: EvaluationRepository = Depends(get_repository)):
    """
    Get overall statistics about candidates and evaluations.

    Returns candidate counts by status, the recommendation distribution and
    the most recent evaluations.
    """
    by_status = repo.count_candidates_by_status()
    by_recommendation = repo.results.count_by_recommendation()
    average = repo.results.average_percentage()

    recommendation_dist = {r.value: by_recommendation.get(r.value, 0) for r in Recommendation}
    completed = by_status.get(CandidateStatus.COMPLETED, 0)
    approved = (
        recommendation_dist[Recommendation.HIRE.value]
        + recommendation_dist[Recommendation.HIRE_WITH_RESERVATIONS.value]
    )
    approval_rate = round(approved / completed * 100, 1) if completed else 0.0

    recent = [
        RecentEvaluation(
            name=candidate.name,
            position=candidate.position,
            percentage=result.percentage,
            recommendation=result.recommendation,
            calculated_at=safe_datetime_iso(result.calculated_at),
        )
        for candidate, result in repo.results.recent(RECENT_LIMIT)
    ]

    return StatsResponse(
        success=True,
        stats={
            'total_candidates': sum(by_status.values()),
            'candidates_by_status': by_status,
            'completed': completed,
            'approval_rate': approval_rate,
            'total_evaluations': sum(by_recommendation.values()),
            'average_percentage': round(average, 1) if average is not None else None,
            'recommendation_distribution': recommendation_dist,
        },
        recent=recent,
    )
