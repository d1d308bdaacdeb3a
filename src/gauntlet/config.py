from __future__ import annotations

import logging
from importlib.resources import files as resource_files
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError, IOFailure

logger = logging.getLogger(__name__)


class SimulationConfig(BaseModel):
    """Tuning constants for a run.

    Defaults reproduce the canonical gauntlet; overriding them is meant for
    balance experiments, not for changing the rules of the state machine.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    encounters_per_dungeon: int = Field(5, description="Encounters per dungeon; the last one is the boss")
    max_lives: int = Field(3, description="Capacity of the shared retry pool")
    exp_per_level: int = Field(100, description="Experience consumed by one level-up")
    exp_per_win: int = Field(12, description="Experience per level of difference on a win")
    boss_multiplier: float = Field(2.0, description="StatPattern multiplier for boss encounters")
    hp_coefficient: int = Field(20, description="Per-level HP coefficient")
    stat_coefficient: int = Field(5, description="Per-level coefficient for non-HP stats")
    hp_jitter: float = Field(5.0, description="Maximum absolute HP jitter at creation")
    stat_jitter: float = Field(2.0, description="Maximum absolute jitter for non-HP stats")
    hp_floor: int = Field(5, description="Minimum max HP of a created creature")
    stat_floor: int = Field(1, description="Minimum non-HP stat of a created creature")

    @field_validator(
        "encounters_per_dungeon",
        "max_lives",
        "exp_per_level",
        "exp_per_win",
        "hp_floor",
        "stat_floor",
    )
    @classmethod
    def ensure_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must be >= 1")
        return v

    @field_validator("boss_multiplier", "hp_jitter", "stat_jitter")
    @classmethod
    def ensure_non_negative(cls, v: float) -> float:
        if v < 0:
            raise ValueError("must be >= 0")
        return v

    @property
    def boss_index(self) -> int:
        return self.encounters_per_dungeon - 1


DEFAULT_CONFIG = SimulationConfig()


def load_config(path: Optional[str] = None) -> SimulationConfig:
    """Load simulation tuning from YAML.

    If path is None, loads the embedded default resource at
    gauntlet/data/defaults.yaml.
    """
    if path is None:
        data = resource_files("gauntlet.data").joinpath("defaults.yaml").read_text(encoding="utf-8")
        logger.debug("Loaded embedded default config resource")
    else:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = f.read()
        except OSError as exc:
            raise IOFailure(path, "Unable to read config file") from exc
        logger.debug("Loaded config from path: %s", path)

    try:
        raw = yaml.safe_load(data) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Malformed YAML in config: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError("Config document must be a mapping")

    try:
        cfg = SimulationConfig(**raw)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config values: {exc}") from exc
    logger.info(
        "Config: %d encounters/dungeon, %d lives, boss x%s",
        cfg.encounters_per_dungeon,
        cfg.max_lives,
        cfg.boss_multiplier,
    )
    return cfg
