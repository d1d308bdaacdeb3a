from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List

from ..combat.creature import Creature
from ..config import DEFAULT_CONFIG, SimulationConfig
from ..core.stats import STAT_ORDER
from ..errors import InvalidArgument

logger = logging.getLogger(__name__)

# Creature attribute grown for each StatPattern weight.
_ATTRIBUTE_FOR_STAT = {
    "hp": "max_hp",
    "attack": "attack",
    "defense": "defense",
    "magic": "magic",
    "wisdom": "wisdom",
    "speed": "speed",
}


@dataclass
class LevelUpEvent:
    from_level: int
    to_level: int
    delta: Dict[str, int]


@dataclass
class LevelUpResult:
    exp_awarded: int
    levels_gained: int
    events: List[LevelUpEvent] = field(default_factory=list)


class LevelingSystem:
    """Handles experience accrual and stat growth for the player.

    - Each win awards ``max(enemy_level - (player_level - 1), 1) * exp_per_win``.
    - Every ``exp_per_level`` points buys a level: one life back (up to the cap),
      stat growth along the creature's StatPattern, and a full heal.
    """

    def __init__(self, config: SimulationConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    def exp_for_win(self, enemy_level: int, player_level: int) -> int:
        return max(enemy_level - (player_level - 1), 1) * self.config.exp_per_win

    def growth_delta(self, creature: Creature) -> Dict[str, int]:
        weights = creature.pattern.as_dict()
        delta: Dict[str, int] = {}
        for stat in STAT_ORDER:
            coef = self.config.hp_coefficient if stat == "hp" else self.config.stat_coefficient
            delta[_ATTRIBUTE_FOR_STAT[stat]] = int(round(coef * weights[stat]))
        return delta

    def award_win(self, creature: Creature, enemy_level: int) -> LevelUpResult:
        amount = self.exp_for_win(enemy_level, creature.level)
        return self.add_exp(creature, amount)

    def add_exp(self, creature: Creature, amount: int) -> LevelUpResult:
        if amount < 0:
            raise InvalidArgument("Experience amount cannot be negative")
        start_level = creature.level
        creature.exp += amount
        events: List[LevelUpEvent] = []

        while creature.exp >= self.config.exp_per_level:
            delta = self.growth_delta(creature)
            from_level = creature.level
            creature.level += 1
            creature.lives = min(creature.lives + 1, self.config.max_lives)
            creature.exp -= self.config.exp_per_level
            for attr, inc in delta.items():
                setattr(creature, attr, getattr(creature, attr) + inc)
            creature.full_heal()
            events.append(LevelUpEvent(from_level=from_level, to_level=creature.level, delta=delta))
            logger.debug(
                "Level up: %s from L%d to L%d, delta=%s, lives=%d",
                creature.name,
                from_level,
                creature.level,
                delta,
                creature.lives,
            )

        return LevelUpResult(exp_awarded=amount, levels_gained=creature.level - start_level, events=events)
