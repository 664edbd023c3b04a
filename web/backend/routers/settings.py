#!/usr/bin/env python3
"""
Settings endpoints - administrative scoring thresholds and section maxima.
"""

from fastapi import APIRouter, Depends

from core.config_loader import AppConfig, ScoringConfig
from database.repository import EvaluationRepository
from ..dependencies import get_app_config, get_repository
from ..models.requests import ScoringSettingsUpdate
from ..models.responses import ScoringSettingsResponse
from ..services.settings_service import SettingsService

router = APIRouter(prefix="/api/v1/settings", tags=["settings"])


def get_settings_service(
    repo: EvaluationRepository = Depends(get_repository),
    config: AppConfig = Depends(get_app_config)
) -> SettingsService:
    return SettingsService(repo, config.scoring)


def _to_response(config: ScoringConfig, overridden: bool) -> ScoringSettingsResponse:
    return ScoringSettingsResponse(
        thresholds=config.thresholds.model_dump(),
        section_maxima=config.section_maxima.model_dump(),
        max_total=config.section_maxima.total,
        overridden=overridden,
    )


@router.get("/scoring", response_model=ScoringSettingsResponse)
def get_scoring_settings(service: SettingsService = Depends(get_settings_service)):
    """Get the effective scoring settings used for new submissions."""
    return _to_response(service.get_effective_config(), bool(service.get_overrides()))


@router.put("/scoring", response_model=ScoringSettingsResponse)
def update_scoring_settings(
    update: ScoringSettingsUpdate,
    service: SettingsService = Depends(get_settings_service)
):
    """
    Update scoring settings.

    - thresholds: hire >= hire_with_reservations >= second_interview
    - section_maxima: positive section maxima (their sum is the total maximum)

    Changes are stored in the database and apply to later submissions only.
    """
    config = service.update(update.model_dump(exclude_none=True))
    return _to_response(config, True)


@router.post("/scoring/reset", response_model=ScoringSettingsResponse)
def reset_scoring_settings(service: SettingsService = Depends(get_settings_service)):
    """Discard stored overrides and return to the file configuration."""
    return _to_response(service.reset(), False)
