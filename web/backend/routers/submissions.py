#!/usr/bin/env python3
"""
Submission endpoints - candidate-facing test lifecycle.
"""

from fastapi import APIRouter, Depends, Request

from core.config_loader import AppConfig
from database.repository import EvaluationRepository
from ..dependencies import get_app_config, get_repository
from ..models.requests import AutoSaveRequest, SubmitRequest
from ..models.responses import (
    AutoSaveResponse,
    CandidateInfo,
    SubmissionOutcome,
    SubmitResponse,
    TokenStatusResponse,
)
from ..services.submission_service import SubmissionService
from ..utils import client_metadata, safe_datetime_iso

router = APIRouter(prefix="/api/v1", tags=["submissions"])


def get_submission_service(
    repo: EvaluationRepository = Depends(get_repository),
    config: AppConfig = Depends(get_app_config)
) -> SubmissionService:
    return SubmissionService(repo, config.scoring)


@router.get("/candidates/{token}", response_model=TokenStatusResponse)
def validate_token(token: str, service: SubmissionService = Depends(get_submission_service)):
    """
    Validate a candidate token and return any saved progress.

    - 404 if the token is unknown
    - 403 if the test was already completed or the token expired
    """
    candidate = service.get_active_candidate(token)
    answers, saved_at = service.get_saved_answers(candidate)

    return TokenStatusResponse(
        candidate=CandidateInfo(name=candidate.name, position=candidate.position),
        status=candidate.status,
        expires_at=safe_datetime_iso(candidate.expires_at),
        answers=answers,
        last_saved_at=safe_datetime_iso(saved_at),
    )


@router.post("/auto-save", response_model=AutoSaveResponse)
def auto_save(
    payload: AutoSaveRequest,
    request: Request,
    service: SubmissionService = Depends(get_submission_service)
):
    """Persist in-progress answers without scoring them."""
    saved_at = service.auto_save(payload.token, payload.answers, client_metadata(request))
    return AutoSaveResponse(saved_at=saved_at.isoformat())


@router.post("/submissions", response_model=SubmitResponse)
def submit_test(
    payload: SubmitRequest,
    request: Request,
    service: SubmissionService = Depends(get_submission_service)
):
    """
    Submit a finished test.

    Answers are scored immediately; the result and executive summary are
    stored with the candidate and the candidate is marked completed.
    """
    personal_data = payload.personal_data.model_dump(exclude_none=True) if payload.personal_data else None

    candidate, result = service.submit(
        payload.token,
        payload.answers,
        client_metadata(request),
        personal_data=personal_data,
        total_minutes=payload.total_minutes,
    )

    return SubmitResponse(
        result=SubmissionOutcome(
            total_score=result.total_score,
            percentage=result.percentage,
            recommendation=result.recommendation.value,
            risk_level=result.risk_level.value,
            message=result.message,
        ),
        candidate=CandidateInfo(name=candidate.name, position=candidate.position),
    )
