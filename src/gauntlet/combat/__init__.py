from .bestiary import CREATURE_PATTERNS, CREATURE_TYPES, CreatureType
from .creature import Creature, create_creature, create_player, player_pattern
from .engine import FightResult, fight

__all__ = [
    "Creature",
    "CreatureType",
    "CREATURE_PATTERNS",
    "CREATURE_TYPES",
    "FightResult",
    "create_creature",
    "create_player",
    "fight",
    "player_pattern",
]
