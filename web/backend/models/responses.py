#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict, Any


class CandidateInfo(BaseModel):
    name: str
    position: Optional[str] = None


class TokenStatusResponse(BaseModel):
    """Token lookup result, including saved answers for resuming a test."""
    success: bool = True
    candidate: CandidateInfo
    status: str
    expires_at: Optional[str] = None
    answers: Dict[str, Any] = Field(default_factory=dict)
    last_saved_at: Optional[str] = None


class AutoSaveResponse(BaseModel):
    success: bool = True
    message: str = "Progress saved"
    saved_at: str


class SubmissionOutcome(BaseModel):
    """Headline of a scored submission."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "total_score": 101.0,
                "percentage": 83,
                "recommendation": "HIRE",
                "risk_level": "LOW",
                "message": "Excellent candidate, meets all criteria"
            }
        }
    )

    total_score: float = Field(ge=0)
    percentage: int = Field(ge=0, le=100)
    recommendation: str
    risk_level: str
    message: str


class SubmitResponse(BaseModel):
    success: bool = True
    message: str = "Test submitted successfully"
    result: SubmissionOutcome
    candidate: CandidateInfo


class ScoringSettingsResponse(BaseModel):
    """Effective scoring settings (file configuration merged with overrides)."""
    success: bool = True
    thresholds: Dict[str, float]
    section_maxima: Dict[str, float]
    max_total: float
    overridden: bool


class RecentEvaluation(BaseModel):
    name: str
    position: Optional[str]
    percentage: int
    recommendation: str
    calculated_at: Optional[str]


class StatsResponse(BaseModel):
    """Response containing overall statistics."""
    success: bool
    stats: Dict[str, Any]
    recent: List[RecentEvaluation] = Field(default_factory=list)
