from typing import Any, Optional

from sqlalchemy import Select
from sqlalchemy.orm import Session


class BaseRepository:
    """Per-table repository sharing the caller's Session; never commits on its own."""

    def __init__(self, db: Session):
        self.db = db

    def _one_or_none(self, stmt: Select) -> Optional[Any]:
        return self.db.execute(stmt).scalar_one_or_none()

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
