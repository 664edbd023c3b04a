import contextlib
import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from core.config_loader import DatabaseConfig
from database.models import Base

logger = logging.getLogger(__name__)


class Database:
    """Engine and session factory built from an explicit DatabaseConfig."""

    def __init__(self, config: DatabaseConfig):
        self.config = config
        engine_kwargs = {}
        if config.url.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if config.url in ("sqlite://", "sqlite:///:memory:"):
                # A single shared connection keeps the in-memory database alive
                engine_kwargs["poolclass"] = StaticPool

        self.engine = create_engine(config.url, echo=config.echo, **engine_kwargs)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def create_all(self) -> None:
        Base.metadata.create_all(self.engine)
        logger.info("Database tables ensured")

    def get_session(self):
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    @contextlib.contextmanager
    def session_scope(self) -> Session:
        """Provide a transactional scope around a series of operations."""
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def dispose(self) -> None:
        self.engine.dispose()
