#!/usr/bin/env python3
"""
Request models for API endpoints.

Answer payloads are accepted as free-form mappings here; they are coerced
by core.scorer.answers.AnswerSet, which never rejects a partial submission.
"""

from pydantic import BaseModel, Field
from typing import Any, Dict, Optional


class PersonalData(BaseModel):
    """Contact details the candidate may correct while taking the test."""
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class AutoSaveRequest(BaseModel):
    """Request to save in-progress answers."""
    token: str = Field(..., min_length=1, description="Candidate access token")
    answers: Dict[str, Any] = Field(..., description="Partial answer set")


class SubmitRequest(BaseModel):
    """Request to submit a finished test."""
    token: str = Field(..., min_length=1, description="Candidate access token")
    answers: Dict[str, Any] = Field(..., description="Answer set, sections may be missing")
    personal_data: Optional[PersonalData] = None
    total_minutes: Optional[float] = Field(None, ge=0, description="Time spent on the test")


class ThresholdsUpdate(BaseModel):
    hire: float = Field(ge=0, le=100)
    hire_with_reservations: float = Field(ge=0, le=100)
    second_interview: float = Field(ge=0, le=100)


class SectionMaximaUpdate(BaseModel):
    behavioral: float = Field(gt=0)
    preference: float = Field(gt=0)
    ethics: float = Field(gt=0)
    aptitude: float = Field(gt=0)


class ScoringSettingsUpdate(BaseModel):
    """Partial update of the administrative scoring settings."""
    thresholds: Optional[ThresholdsUpdate] = None
    section_maxima: Optional[SectionMaximaUpdate] = None
