"""Business logic services."""

from .settings_service import SettingsService
from .submission_service import SubmissionService
