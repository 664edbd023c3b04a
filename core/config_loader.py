import yaml
import os
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field, model_validator

AXES = ("D", "I", "S", "C")
SECTIONS = ("behavioral", "preference", "ethics", "aptitude")


class DatabaseConfig(BaseModel):
    url: str = "sqlite:///./evaluations.db"
    echo: bool = False


class WebConfig(BaseModel):
    """Web server configuration."""
    host: str = "0.0.0.0"
    port: int = 8080


class SectionMaxima(BaseModel):
    """Upper bound of points obtainable in each instrument section."""
    behavioral: float = Field(default=40, gt=0)
    preference: float = Field(default=30, gt=0)
    ethics: float = Field(default=25, gt=0)
    aptitude: float = Field(default=27, gt=0)

    @property
    def total(self) -> float:
        return self.behavioral + self.preference + self.ethics + self.aptitude


class RecommendationThresholds(BaseModel):
    """
    Minimum percentage for each recommendation tier.

    Evaluated in descending order, first match wins; anything below
    second_interview is a rejection.
    """
    hire: float = Field(default=80, ge=0, le=100)
    hire_with_reservations: float = Field(default=65, ge=0, le=100)
    second_interview: float = Field(default=50, ge=0, le=100)

    @model_validator(mode="after")
    def _check_descending(self) -> "RecommendationThresholds":
        if not (self.hire >= self.hire_with_reservations >= self.second_interview):
            raise ValueError(
                "thresholds must satisfy hire >= hire_with_reservations >= second_interview"
            )
        return self


def _default_ideal_profile() -> Dict[str, int]:
    return {"D": 3, "I": 5, "S": 8, "C": 7}


def _default_deviation_weights() -> Dict[str, int]:
    return {"D": 3, "I": 1, "S": 2, "C": 2}


def _default_strength_ratios() -> Dict[str, float]:
    return {"behavioral": 0.8, "preference": 0.8, "ethics": 0.9, "aptitude": 0.7}


def _default_weakness_ratios() -> Dict[str, float]:
    return {"behavioral": 0.5, "preference": 0.5, "ethics": 0.6, "aptitude": 0.5}


class ScoringConfig(BaseModel):
    """
    Configuration for the ScoringService.

    Every constant the scoring rules depend on lives here so that
    administrators can tune it without code changes.
    """
    section_maxima: SectionMaxima = Field(default_factory=SectionMaxima)
    thresholds: RecommendationThresholds = Field(default_factory=RecommendationThresholds)

    # Behavioral profile: ideal axis targets and per-axis deviation weights
    ideal_profile: Dict[str, int] = Field(default_factory=_default_ideal_profile)
    deviation_weights: Dict[str, int] = Field(default_factory=_default_deviation_weights)
    dominance_warning_above: int = 6
    steadiness_warning_below: int = 4
    insight_high_above: int = 6
    insight_low_below: int = 4

    # Executive summary: section score / maximum above which a section is a
    # strength, below which it is a weakness; profile limits for axis statements
    strength_ratios: Dict[str, float] = Field(default_factory=_default_strength_ratios)
    weakness_ratios: Dict[str, float] = Field(default_factory=_default_weakness_ratios)
    summary_high_above: int = 7
    summary_low_below: int = 4

    # Per-answer deductions
    preference_deduction: float = Field(default=2, ge=0)
    ethics_deduction: float = Field(default=5, ge=0)

    # Aptitude: points are split evenly across the instrument's questions
    aptitude_question_count: int = Field(default=12, gt=0)
    aptitude_max_level: int = Field(default=4, gt=0)
    aptitude_low_level: int = 2

    @model_validator(mode="after")
    def _check_axes(self) -> "ScoringConfig":
        for name in ("ideal_profile", "deviation_weights"):
            mapping = getattr(self, name)
            missing = [axis for axis in AXES if axis not in mapping]
            if missing:
                raise ValueError(f"{name} is missing axes: {', '.join(missing)}")
            unknown = [key for key in mapping if key not in AXES]
            if unknown:
                raise ValueError(f"{name} has unknown axes: {', '.join(unknown)}")
        for name in ("strength_ratios", "weakness_ratios"):
            unknown = [key for key in getattr(self, name) if key not in SECTIONS]
            if unknown:
                raise ValueError(f"{name} has unknown sections: {', '.join(unknown)}")
        return self


class AppConfig(BaseModel):
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    web: WebConfig = Field(default_factory=WebConfig)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    """Apply environment variable overrides to raw configuration."""
    env_db_url = os.environ.get("DATABASE_URL")
    if env_db_url:
        if not data.get('database'):
            data['database'] = {}
        data['database']['url'] = env_db_url

    env_web_host = os.environ.get("WEB_HOST")
    if env_web_host:
        if not data.get('web'):
            data['web'] = {}
        data['web']['host'] = env_web_host

    env_web_port = os.environ.get("WEB_PORT")
    if env_web_port:
        if not data.get('web'):
            data['web'] = {}
        data['web']['port'] = int(env_web_port)

    return data


def load_config(config_path: Optional[str] = "config.yaml") -> AppConfig:
    """
    Load application configuration from YAML and apply environment overrides.

    A missing file is not an error: defaults are used, so the engine can be
    run without any configuration on disk.
    """
    data: Dict[str, Any] = {}

    if config_path and not os.path.exists(config_path):
        # Fallback for running from a different working directory
        base_dir = os.path.dirname(os.path.abspath(__file__))
        candidate = os.path.join(base_dir, "..", os.path.basename(config_path))
        config_path = candidate if os.path.exists(candidate) else None

    if config_path:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}

    data = _apply_env_overrides(data)

    return AppConfig(**data)
