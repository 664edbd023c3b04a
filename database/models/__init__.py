from .base import Base
from .candidate import Candidate, CandidateAnswers, CandidateStatus
from .evaluation import EvaluationResult, ActivityLog
from .settings import AppSettings

__all__ = [
    'Base',
    'Candidate',
    'CandidateAnswers',
    'CandidateStatus',
    'EvaluationResult',
    'ActivityLog',
    'AppSettings',
]
