from .generation import Dungeon, generate_dungeons
from .names import ElementAdjective, LocationType, Noun

__all__ = ["Dungeon", "ElementAdjective", "LocationType", "Noun", "generate_dungeons"]
