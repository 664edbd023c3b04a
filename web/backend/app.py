#!/usr/bin/env python3
"""
Evaluation API - FastAPI Application

Candidate-facing test endpoints plus administrative settings and stats,
with automatic API documentation.

Usage:
    python main.py serve

Then open:
    - http://localhost:8080/docs - API Documentation (Swagger UI)
    - http://localhost:8080/redoc - Alternative API Documentation
"""

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException

from core.config_loader import AppConfig, load_config
from database.database import Database
from .exceptions import (
    ServiceException,
    service_exception_handler,
    http_exception_handler,
    general_exception_handler
)
from .routers import (
    submissions_router,
    settings_router,
    stats_router
)

logger = logging.getLogger(__name__)


def create_app(config: Optional[AppConfig] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config: Application configuration; loaded from config.yaml if omitted.
        database: Database to use; built from config.database if omitted.
    """
    config = config or load_config()
    database = database or Database(config.database)
    database.create_all()

    app = FastAPI(
        title="Candidate Evaluation API",
        description="API for taking, scoring and reviewing psychometric tests",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc"
    )
    app.state.config = config
    app.state.database = database

    # Register exception handlers
    app.add_exception_handler(ServiceException, service_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    # Include routers
    app.include_router(submissions_router)
    app.include_router(settings_router)
    app.include_router(stats_router)

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "service": "evaluation-api"}

    return app


def main():
    """Run the web server."""
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    config = load_config()

    logger.info(f"Starting Evaluation API on {config.web.host}:{config.web.port}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")

    uvicorn.run(
        create_app(config),
        host=config.web.host,
        port=config.web.port,
        log_level="info"
    )


if __name__ == "__main__":
    main()
