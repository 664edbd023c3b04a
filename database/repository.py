import logging
from typing import Dict

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from database.models import Candidate
from database.repositories import CandidateRepository, ResultRepository, SettingsRepository

logger = logging.getLogger(__name__)


class EvaluationRepository:
    """Facade over the per-table repositories sharing one Session."""

    def __init__(self, db: Session):
        self.db = db
        self.candidates = CandidateRepository(db)
        self.results = ResultRepository(db)
        self.settings = SettingsRepository(db)

    def count_candidates_by_status(self) -> Dict[str, int]:
        stmt = select(Candidate.status, func.count()).group_by(Candidate.status)
        return {status: count for status, count in self.db.execute(stmt).all()}

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
