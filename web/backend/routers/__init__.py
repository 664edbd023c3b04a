"""API route handlers."""

from .submissions import router as submissions_router
from .settings import router as settings_router
from .stats import router as stats_router
