#!/usr/bin/env python3
"""
Answer Set - Ingestion boundary for questionnaire submissions.

Raw submissions are JSON-compatible nested mappings and are frequently
partial (auto-saved progress) or slightly malformed. Everything is coerced
here, once, so the scoring stages only ever see clean, typed answers:

- non-mapping sections become empty
- question keys that are not integers are dropped
- unrecognized letters / response levels are dropped (treated as unanswered)
- aptitude levels that are not numeric become 0; all levels are clamped to 0..4
"""

from enum import Enum
import re
from typing import Any, Dict, Literal, Optional
import logging

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

logger = logging.getLogger(__name__)

Letter = Literal["A", "B", "C", "D"]
EthicsOption = Literal["A", "B"]

BEHAVIORAL_LETTERS = ("A", "B", "C", "D")
ETHICS_OPTIONS = ("A", "B")
MAX_APTITUDE_LEVEL = 4

SECTIONS = ("behavioral", "preference", "ethics", "aptitude")


class ResponseLevel(str, Enum):
    """Ordered Likert response levels."""
    STRONGLY_DISAGREE = "strongly_disagree"
    DISAGREE = "disagree"
    NEUTRAL = "neutral"
    AGREE = "agree"
    STRONGLY_AGREE = "strongly_agree"

    @property
    def is_disagreement(self) -> bool:
        return self in (ResponseLevel.STRONGLY_DISAGREE, ResponseLevel.DISAGREE)

    @property
    def is_agreement(self) -> bool:
        return self in (ResponseLevel.AGREE, ResponseLevel.STRONGLY_AGREE)


_RESPONSE_ALIASES: Dict[str, ResponseLevel] = {
    "sd": ResponseLevel.STRONGLY_DISAGREE,
    "td": ResponseLevel.STRONGLY_DISAGREE,
    "stronglydisagree": ResponseLevel.STRONGLY_DISAGREE,
    "d": ResponseLevel.DISAGREE,
    "n": ResponseLevel.NEUTRAL,
    "a": ResponseLevel.AGREE,
    "sa": ResponseLevel.STRONGLY_AGREE,
    "ta": ResponseLevel.STRONGLY_AGREE,
    "stronglyagree": ResponseLevel.STRONGLY_AGREE,
}

# Word boundary inside camelCase level names such as "StronglyDisagree"
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z])(?=[A-Z])")


def _question_number(key: Any) -> Optional[int]:
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key
    if isinstance(key, str) and key.strip().isdigit():
        return int(key.strip())
    return None


def _as_mapping(section: str, value: Any) -> Dict[Any, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        logger.debug("Section %s is not a mapping (%s); treating as empty", section, type(value).__name__)
        return {}
    return value


def _normalize_letter(value: Any, allowed) -> Optional[str]:
    if not isinstance(value, str):
        return None
    letter = value.strip().upper()
    return letter if letter in allowed else None


def normalize_response(value: Any) -> Optional[ResponseLevel]:
    """Map a raw Likert answer (enum value, camelCase name or short code) to a ResponseLevel."""
    if isinstance(value, ResponseLevel):
        return value
    if not isinstance(value, str):
        return None
    key = _CAMEL_BOUNDARY.sub("_", value.strip()).lower().replace("-", "_").replace(" ", "_")
    if key in _RESPONSE_ALIASES:
        return _RESPONSE_ALIASES[key]
    try:
        return ResponseLevel(key)
    except ValueError:
        return None


def coerce_level(value: Any, max_level: int = MAX_APTITUDE_LEVEL) -> int:
    """Coerce a self-rated level to an int within 0..max_level; garbage becomes 0."""
    if isinstance(value, bool):
        return 0
    try:
        level = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(0, min(max_level, level))


class BehavioralSelection(BaseModel):
    """The statement groups chosen as most and least descriptive."""
    model_config = ConfigDict(frozen=True)

    most: Optional[Letter] = None
    least: Optional[Letter] = None

    @field_validator("most", "least", mode="before")
    @classmethod
    def _letter(cls, value: Any) -> Optional[str]:
        return _normalize_letter(value, BEHAVIORAL_LETTERS)


class AnswerSet(BaseModel):
    """Immutable, validated questionnaire answers for one candidate."""
    model_config = ConfigDict(frozen=True)

    behavioral: Dict[int, BehavioralSelection] = Field(default_factory=dict)
    preference: Dict[int, ResponseLevel] = Field(default_factory=dict)
    ethics: Dict[int, EthicsOption] = Field(default_factory=dict)
    aptitude: Dict[int, int] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _sections(cls, data: Any) -> Any:
        if data is None:
            return {}
        if not isinstance(data, dict):
            logger.debug("Answer set is not a mapping (%s); treating as empty", type(data).__name__)
            return {}
        return {key: data[key] for key in SECTIONS if key in data}

    @field_validator("behavioral", mode="before")
    @classmethod
    def _behavioral(cls, value: Any) -> Dict[int, Any]:
        cleaned = {}
        for key, selection in _as_mapping("behavioral", value).items():
            number = _question_number(key)
            if number is None:
                continue
            if isinstance(selection, BehavioralSelection):
                cleaned[number] = selection
            elif isinstance(selection, dict):
                cleaned[number] = {
                    "most": selection.get("most"),
                    "least": selection.get("least"),
                }
        return cleaned

    @field_validator("preference", mode="before")
    @classmethod
    def _preference(cls, value: Any) -> Dict[int, ResponseLevel]:
        cleaned = {}
        for key, answer in _as_mapping("preference", value).items():
            number = _question_number(key)
            level = normalize_response(answer)
            if number is None or level is None:
                logger.debug("Dropping preference answer %r=%r", key, answer)
                continue
            cleaned[number] = level
        return cleaned

    @field_validator("ethics", mode="before")
    @classmethod
    def _ethics(cls, value: Any) -> Dict[int, str]:
        cleaned = {}
        for key, answer in _as_mapping("ethics", value).items():
            number = _question_number(key)
            option = _normalize_letter(answer, ETHICS_OPTIONS)
            if number is None or option is None:
                logger.debug("Dropping ethics answer %r=%r", key, answer)
                continue
            cleaned[number] = option
        return cleaned

    @field_validator("aptitude", mode="before")
    @classmethod
    def _aptitude(cls, value: Any) -> Dict[int, int]:
        cleaned = {}
        for key, level in _as_mapping("aptitude", value).items():
            number = _question_number(key)
            if number is None:
                continue
            cleaned[number] = coerce_level(level)
        return cleaned

    @classmethod
    def from_raw(cls, data: Any) -> "AnswerSet":
        """Build an AnswerSet from a raw JSON-compatible mapping (never raises)."""
        if isinstance(data, cls):
            return data
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")
