from __future__ import annotations

"""Configuration loading and validation for shapequiz.

This module loads YAML configuration, applies section defaults, and
validates values into pydantic models consumed by the engine.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, model_validator


KNOWN_SECTIONS = ("session", "scoring", "generation", "difficulty")


class SessionSettings(BaseModel):
    """Per play-through constants.

    - total_questions: questions per session
    - timer_duration_s: countdown length per question
    - timer_warning_at_s / timer_critical_at_s: countdown phase thresholds;
      the warning notification fires when the critical threshold is reached
    - streak_celebrate_at: streak length that triggers the streak event
    """

    total_questions: int = Field(20, ge=1)
    timer_duration_s: int = Field(15, gt=0)
    timer_warning_at_s: int = Field(8, ge=0)
    timer_critical_at_s: int = Field(5, ge=0)
    streak_celebrate_at: int = Field(3, ge=1)

    @model_validator(mode="after")
    def _thresholds_ordered(self) -> "SessionSettings":
        if self.timer_critical_at_s > self.timer_warning_at_s:
            raise ValueError("timer_critical_at_s must be <= timer_warning_at_s")
        return self


class ScoringSettings(BaseModel):
    points_correct: int = Field(10, ge=0)
    points_time_bonus: int = Field(30, ge=0)
    points_streak: int = Field(5, ge=0)


class GenerationSettings(BaseModel):
    answer_options: int = Field(4, ge=2)
    min_combinations_before_repeat: int = Field(8, ge=0)
    max_generation_attempts: int = Field(20, ge=1)


class DifficultySettings(BaseModel):
    """Share of the session given to the easy and medium bands; the hard
    band takes the remainder."""

    easy_fraction: float = Field(0.35, ge=0, le=1)
    medium_fraction: float = Field(0.35, ge=0, le=1)

    @model_validator(mode="after")
    def _fractions_fit(self) -> "DifficultySettings":
        if self.easy_fraction + self.medium_fraction > 1:
            raise ValueError("easy_fraction + medium_fraction must not exceed 1")
        return self


class GameConfig(BaseModel):
    session: SessionSettings = Field(default_factory=SessionSettings)
    scoring: ScoringSettings = Field(default_factory=ScoringSettings)
    generation: GenerationSettings = Field(default_factory=GenerationSettings)
    difficulty: DifficultySettings = Field(default_factory=DifficultySettings)


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        print(f"ERROR: Config file not found: {path}", file=sys.stderr)
        sys.exit(1)


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML or defaults.

    Args:
        path: Optional path to a YAML config. If None, use package defaults.

    Returns:
        A dictionary with configuration values.
    """
    if path:
        return _load_yaml(Path(path))
    return _load_yaml(Path(__file__).with_name("defaults.yml"))


def validate_config(cfg: Dict[str, Any]) -> GameConfig:
    """Apply defaults and validate configuration values.

    Unknown top-level sections are reported and ignored. A config that is
    not a mapping of mappings is reported and exits. Out-of-range values
    raise pydantic.ValidationError.

    Args:
        cfg: The raw configuration dictionary.

    Returns:
        The validated GameConfig.
    """
    if not isinstance(cfg, dict):
        print(f"ERROR: Config must be a mapping of sections, got {type(cfg).__name__}", file=sys.stderr)
        sys.exit(1)
    for section in list(cfg.keys()):
        if section not in KNOWN_SECTIONS:
            print(f"WARNING: Unknown config section '{section}', ignoring.")
    # Shallow defaults for missing sections
    merged = {}
    for section in KNOWN_SECTIONS:
        values = cfg.get(section) or {}
        if not isinstance(values, dict):
            print(f"ERROR: Config section '{section}' must be a mapping, got {type(values).__name__}", file=sys.stderr)
            sys.exit(1)
        merged[section] = dict(values)
    return GameConfig.model_validate(merged)


def default_config() -> GameConfig:
    return validate_config(load_config())
