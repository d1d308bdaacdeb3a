from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Dict

from ..errors import InvalidArgument

# Order in which stats are generated; the jitter draws follow it.
STAT_ORDER = ("hp", "attack", "defense", "magic", "wisdom", "speed")


@dataclass(frozen=True)
class StatPattern:
    """Relative stat weighting of a creature archetype.

    Attributes:
        hp: Weight for maximum hit points.
        attack: Weight for physical attack.
        defense: Weight for physical defense.
        magic: Weight for magical attack.
        wisdom: Weight for magical defense.
        speed: Weight for speed (decides who strikes first).
    """

    hp: float
    attack: float
    defense: float
    magic: float
    wisdom: float
    speed: float

    def __post_init__(self) -> None:
        for f in fields(self):
            if getattr(self, f.name) < 0:
                raise InvalidArgument(f"StatPattern.{f.name} must be non-negative")

    def scaled(self, multiplier: float) -> "StatPattern":
        return StatPattern(
            hp=self.hp * multiplier,
            attack=self.attack * multiplier,
            defense=self.defense * multiplier,
            magic=self.magic * multiplier,
            wisdom=self.wisdom * multiplier,
            speed=self.speed * multiplier,
        )

    def as_dict(self) -> Dict[str, float]:
        return {name: getattr(self, name) for name in STAT_ORDER}
