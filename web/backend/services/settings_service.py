#!/usr/bin/env python3
"""
Settings service - administrative tuning of scoring settings.

Overrides are persisted as one JSON document and merged over the file
configuration each time a submission is scored.
"""

import copy
import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError

from core.config_loader import ScoringConfig
from database.repository import EvaluationRepository
from ..exceptions import InvalidSettingsException

logger = logging.getLogger(__name__)

SCORING_SETTINGS_KEY = 'scoring_config'


def _deep_merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class SettingsService:
    """Service for reading and updating scoring settings."""

    def __init__(self, repo: EvaluationRepository, base_config: ScoringConfig):
        self.repo = repo
        self.base_config = base_config

    def get_overrides(self) -> Optional[Dict[str, Any]]:
        return self.repo.settings.get_json(SCORING_SETTINGS_KEY)

    def get_effective_config(self) -> ScoringConfig:
        """
        File configuration merged with persisted overrides.

        Falls back to the file configuration if stored overrides no longer
        validate.
        """
        overrides = self.get_overrides()
        if not overrides:
            return self.base_config

        try:
            return ScoringConfig(**_deep_merge(self.base_config.model_dump(), overrides))
        except ValidationError as e:
            logger.warning(f"Ignoring invalid stored scoring overrides: {e}")
            return self.base_config

    def update(self, changes: Dict[str, Any]) -> ScoringConfig:
        """
        Merge changes into the stored overrides and persist them.

        Raises:
            InvalidSettingsException: If the resulting configuration is invalid.
        """
        overrides = _deep_merge(self.get_overrides() or {}, changes)

        try:
            config = ScoringConfig(**_deep_merge(self.base_config.model_dump(), overrides))
        except ValidationError as e:
            raise InvalidSettingsException(f"Invalid scoring settings: {e.errors()[0]['msg']}") from e

        self.repo.settings.set_json(SCORING_SETTINGS_KEY, overrides)
        logger.info(f"Scoring settings updated: {sorted(changes)}")
        return config

    def reset(self) -> ScoringConfig:
        """Drop all overrides and return to the file configuration."""
        if self.repo.settings.delete(SCORING_SETTINGS_KEY):
            logger.info("Scoring settings reset to file configuration")
        return self.base_config
