from database.repositories.base import BaseRepository
from database.repositories.candidate import CandidateRepository
from database.repositories.result import ResultRepository
from database.repositories.settings import SettingsRepository

__all__ = [
    'BaseRepository',
    'CandidateRepository',
    'ResultRepository',
    'SettingsRepository',
]
