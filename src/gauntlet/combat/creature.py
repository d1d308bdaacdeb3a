from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict

from ..config import DEFAULT_CONFIG, SimulationConfig
from ..core.random import RandomSource
from ..core.stats import STAT_ORDER, StatPattern

logger = logging.getLogger(__name__)

# Player archetype weights before per-seed jitter.
PLAYER_BASELINE = StatPattern(hp=1.5, attack=2.0, defense=1.5, magic=2.0, wisdom=1.5, speed=1.5)
PLAYER_PATTERN_JITTER = 0.5


@dataclass
class Creature:
    """A combatant, either the player or a spawned enemy.

    ``current_hp`` is allowed to drop below zero while a fight is resolved.
    ``pattern`` is kept so level-ups can grow stats along the same weighting.
    """

    name: str
    max_hp: int
    current_hp: int
    attack: int
    defense: int
    magic: int
    wisdom: int
    speed: int
    pattern: StatPattern
    exp: int = 0
    level: int = 1
    lives: int = 3

    @property
    def is_defeated(self) -> bool:
        return self.current_hp <= 0

    def full_heal(self) -> None:
        self.current_hp = self.max_hp

    def stat_block(self) -> Dict[str, int]:
        return {
            "max_hp": self.max_hp,
            "attack": self.attack,
            "defense": self.defense,
            "magic": self.magic,
            "wisdom": self.wisdom,
            "speed": self.speed,
        }


def create_creature(
    name: str,
    pattern: StatPattern,
    level: int,
    rng: RandomSource,
    boss: bool = False,
    config: SimulationConfig = DEFAULT_CONFIG,
) -> Creature:
    """Roll a creature's stat block.

    Each stat is ``coef * weight * level`` plus a fresh jitter draw, clamped to
    its floor. Draws happen in STAT_ORDER. ``level`` only scales the stats; the
    creature itself always starts at level 1.
    """
    if boss:
        pattern = pattern.scaled(config.boss_multiplier)
        name = f"Boss {name}"

    weights = pattern.as_dict()
    rolled: Dict[str, int] = {}
    for stat in STAT_ORDER:
        if stat == "hp":
            coef, jitter, floor = config.hp_coefficient, config.hp_jitter, config.hp_floor
        else:
            coef, jitter, floor = config.stat_coefficient, config.stat_jitter, config.stat_floor
        raw = coef * weights[stat] * level + jitter * rng.uniform(-1.0, 1.0)
        rolled[stat] = max(int(round(raw)), floor)

    creature = Creature(
        name=name,
        max_hp=rolled["hp"],
        current_hp=rolled["hp"],
        attack=rolled["attack"],
        defense=rolled["defense"],
        magic=rolled["magic"],
        wisdom=rolled["wisdom"],
        speed=rolled["speed"],
        pattern=pattern,
        lives=config.max_lives,
    )
    logger.debug("Created %s (scale lv. %d): %s", creature.name, level, creature.stat_block())
    return creature


def player_pattern(rng: RandomSource) -> StatPattern:
    """Jitter the player baseline so different seeds yield different builds."""
    base = PLAYER_BASELINE.as_dict()
    jittered = {
        stat: base[stat] + rng.uniform(-PLAYER_PATTERN_JITTER, PLAYER_PATTERN_JITTER) for stat in STAT_ORDER
    }
    return StatPattern(**jittered)


def create_player(name: str, rng: RandomSource, config: SimulationConfig = DEFAULT_CONFIG) -> Creature:
    pattern = player_pattern(rng)
    return create_creature(name, pattern, 1, rng, config=config)
