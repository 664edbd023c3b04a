import contextlib
import logging

from database.database import Database
from database.repository import EvaluationRepository

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def evaluation_uow(database: Database):
    """Per-unit-of-work transaction scope.

    Yields an EvaluationRepository bound to a fresh Session. Commits on success,
    rolls back on exception, always closes.

    Usage:
        with evaluation_uow(database) as repo:
            candidate = repo.candidates.get_by_token(token)
            # perform operations...
        # commit happens automatically on successful exit
    """
    session = database.SessionLocal()
    try:
        repo = EvaluationRepository(session)
        yield repo
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
