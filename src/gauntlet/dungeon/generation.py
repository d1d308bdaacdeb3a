from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from ..combat.bestiary import CREATURE_TYPES, pattern_for
from ..combat.creature import Creature, create_creature
from ..config import DEFAULT_CONFIG, SimulationConfig
from ..core.random import RandomSource
from .names import ElementAdjective, LocationType, Noun

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Dungeon:
    """A generated stage: a name triple plus the level its enemies scale to."""

    location: LocationType
    element: ElementAdjective
    noun: Noun
    level: int

    @classmethod
    def from_hash(cls, hash_value: int, level: int) -> "Dungeon":
        """Project three disjoint byte fields of a 64-bit hash onto the name vocabularies."""
        location_part = (hash_value & 0xFF) % LocationType.cardinality()
        element_part = ((hash_value & 0xFF00) >> 8) % ElementAdjective.cardinality()
        noun_part = ((hash_value & 0xFF0000) >> 16) % Noun.cardinality()
        return cls(
            location=LocationType.from_index(location_part),
            element=ElementAdjective.from_index(element_part),
            noun=Noun.from_index(noun_part),
            level=level,
        )

    @property
    def name(self) -> str:
        return f"{self.location.value} of {self.element.value} {self.noun.value}"

    def display_name(self) -> str:
        return f"{self.name} (lv. {self.level})"

    def spawn_enemy(
        self,
        encounter_index: int,
        rng: RandomSource,
        config: SimulationConfig = DEFAULT_CONFIG,
    ) -> Creature:
        creature_type = rng.choice(CREATURE_TYPES)
        boss = encounter_index == config.boss_index
        return create_creature(
            creature_type.value,
            pattern_for(creature_type),
            self.level,
            rng,
            boss=boss,
            config=config,
        )


def generate_dungeons(count: int, rng: RandomSource) -> List[Dungeon]:
    """Draw one hash per stage, levels 1..count."""
    dungeons: List[Dungeon] = []
    for level in range(1, count + 1):
        dungeon = Dungeon.from_hash(rng.next_u64(), level)
        logger.debug("Generated dungeon %s", dungeon.display_name())
        dungeons.append(dungeon)
    return dungeons
