#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.

The Database and AppConfig are created once by create_app() and stored on
app.state; nothing here reads module-level globals.
"""

from typing import Generator
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from core.config_loader import AppConfig
from database.database import Database
from database.repository import EvaluationRepository


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_app_config(request: Request) -> AppConfig:
    return request.app.state.config


def get_db(database: Database = Depends(get_database)) -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a transactional database session.

    Commits when the request handler returns, rolls back if it raises.
    
    Yields:
        Session: Database session that will be automatically closed.
    """
    with database.session_scope() as session:
        yield session


def get_repository(db: Session = Depends(get_db)) -> EvaluationRepository:
    return EvaluationRepository(db)
