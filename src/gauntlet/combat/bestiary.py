from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple

from ..core.stats import StatPattern


class CreatureType(str, Enum):
    BAT = "Bat"
    SLIME = "Slime"
    GOBLIN = "Goblin"
    SKELETON = "Skeleton"
    WISP = "Wisp"
    GOLEM = "Golem"
    CULTIST = "Cultist"
    WOLF = "Wolf"


# Regular archetypes run at roughly two thirds of the player baseline, so an
# enemy at the player's own level is beatable but a boss (twice the weights)
# usually needs a level or two of grinding. The Golem sits at the baseline:
# as a boss it is a wall that several levels of retries may not get past.
CREATURE_PATTERNS: Dict[CreatureType, StatPattern] = {
    CreatureType.BAT: StatPattern(hp=0.8, attack=1.4, defense=0.8, magic=0.4, wisdom=0.8, speed=2.0),
    CreatureType.SLIME: StatPattern(hp=1.6, attack=1.0, defense=1.0, magic=0.6, wisdom=1.0, speed=0.6),
    CreatureType.GOBLIN: StatPattern(hp=1.2, attack=1.6, defense=1.0, magic=0.4, wisdom=0.8, speed=1.4),
    CreatureType.SKELETON: StatPattern(hp=1.0, attack=1.4, defense=1.6, magic=0.2, wisdom=1.0, speed=1.0),
    CreatureType.WISP: StatPattern(hp=0.8, attack=0.4, defense=0.8, magic=1.8, wisdom=1.6, speed=1.6),
    CreatureType.GOLEM: StatPattern(hp=1.6, attack=2.0, defense=1.8, magic=0.2, wisdom=1.8, speed=0.4),
    CreatureType.CULTIST: StatPattern(hp=1.2, attack=0.6, defense=1.0, magic=1.6, wisdom=1.4, speed=1.2),
    CreatureType.WOLF: StatPattern(hp=1.2, attack=1.6, defense=1.0, magic=0.2, wisdom=0.8, speed=1.8),
}

# Ordered table used for uniform selection; order is part of the draw contract.
CREATURE_TYPES: Tuple[CreatureType, ...] = tuple(CreatureType)

if set(CREATURE_PATTERNS) != set(CREATURE_TYPES):
    raise RuntimeError("Every CreatureType needs a StatPattern")


def pattern_for(creature_type: CreatureType) -> StatPattern:
    return CREATURE_PATTERNS[creature_type]
