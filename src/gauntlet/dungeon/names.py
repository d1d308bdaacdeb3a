"""Closed vocabularies used to name generated dungeons."""
from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple, Type, TypeVar

from ..errors import InvalidArgument

E = TypeVar("E", bound="NameComponent")


class NameComponent(str, Enum):
    """Base for enumerations addressable by ordinal position."""

    @classmethod
    def from_index(cls: Type[E], index: int) -> E:
        table = _ORDINAL_TABLES[cls]
        if not 0 <= index < len(table):
            raise InvalidArgument(f"{cls.__name__} index {index} out of range 0..{len(table) - 1}")
        return table[index]

    @classmethod
    def cardinality(cls) -> int:
        return len(_ORDINAL_TABLES[cls])


class LocationType(NameComponent):
    # Earthen
    CAVE = "Cave"
    RAVINE = "Ravine"
    VALLEY = "Valley"
    LAND = "Land"
    PLAINS = "Plains"
    HILLS = "Hills"
    PATH = "Path"
    REALM = "Realm"
    MOUNTAINS = "Mountains"
    CANYON = "Canyon"
    DESERT = "Desert"
    JUNGLE = "Jungle"
    CLIFFS = "Cliffs"
    RIDGE = "Ridge"
    BADLANDS = "Badlands"
    MESA = "Mesa"
    DIVIDE = "Divide"
    CAVERN = "Cavern"
    TREE = "Tree"
    # Buildings
    CASTLE = "Castle"
    TEMPLE = "Temple"
    RUINS = "Ruins"
    MANSION = "Mansion"
    CEMETERY = "Cemetery"
    PRISON = "Prison"
    SHRINE = "Shrine"
    FACTORY = "Factory"
    LABORATORY = "Laboratory"
    ABATTOIR = "Abattoir"
    HALL = "Hall"
    BUNKER = "Bunker"
    ALTAR = "Altar"
    REMAINS = "Remains"
    # Water
    POND = "Pond"
    CANAL = "Canal"
    SEA = "Sea"
    LAKE = "Lake"
    GEYSER = "Geyser"
    MARSH = "Marsh"
    ISLAND = "Island"
    COVE = "Cove"
    ISTHMUS = "Isthmus"
    SHOAL = "Shoal"
    GLACIER = "Glacier"
    FJORD = "Fjord"
    # Wind
    SKIES = "Skies"
    VOID = "Void"
    # Fire
    VOLCANO = "Volcano"


class ElementAdjective(NameComponent):
    # None
    UNREMARKABLE = "Unremarkable"
    LUNAR = "Lunar"
    LINGERING = "Lingering"
    MYSTERIOUS = "Mysterious"
    FALSE = "False"
    ABYSSAL = "Abyssal"
    DUBIOUS = "Dubious"
    ELEGANT = "Elegant"
    MOONLIT = "Moonlit"
    SPATIAL = "Spatial"
    UNEARTHLY = "Unearthly"
    PHANTASMAGORICAL = "Phantasmagorical"
    CONFOUNDING = "Confounding"
    # Fire
    BURNING = "Burning"
    CONFLAGRANT = "Conflagrant"
    SCORCHING = "Scorching"
    BLAZING = "Blazing"
    PURIFYING = "Purifying"
    # Water
    FREEZING = "Freezing"
    BLIZZARDOUS = "Blizzardous"
    RAINY = "Rainy"
    DROWNING = "Drowning"
    # Wind
    VOLTAIC = "Voltaic"
    WUTHERING = "Wuthering"
    TEMPESTUOUS = "Tempestuous"
    HOWLING = "Howling"
    # Earth
    WORLDLY = "Worldly"
    TWILIGHT = "Twilight"
    GEOTIC = "Geotic"
    ABUNDANT = "Abundant"
    CRYSTALLINE = "Crystalline"


class Noun(NameComponent):
    HEAVEN = "Heaven"
    HELL = "Hell"
    WILLOWS = "Willows"
    LIGHT = "Light"
    DREAMS = "Dreams"
    TRUTH = "Truth"
    LIES = "Lies"
    HOPE = "Hope"
    BLOOD = "Blood"
    DOOM = "Doom"
    STORMS = "Storms"
    SERENITY = "Serenity"
    TRANQUILITY = "Tranquility"
    ENLIGHTENMENT = "Enlightenment"
    RAINS = "Rains"
    RAINBOWS = "Rainbows"
    PANDEMONIUM = "Pandemonium"
    FANTASIES = "Fantasies"
    MAGIC = "Magic"
    SECRETS = "Secrets"
    FLAMES = "Flames"
    PRIDE = "Pride"
    OBSCURITY = "Obscurity"
    RESOLVE = "Resolve"


# Declared sizes; adding or removing a member without updating these fails at import.
DECLARED_CARDINALITY: Dict[Type[NameComponent], int] = {
    LocationType: 48,
    ElementAdjective: 31,
    Noun: 24,
}

_ORDINAL_TABLES: Dict[type, Tuple[NameComponent, ...]] = {}
for _enum, _count in DECLARED_CARDINALITY.items():
    _members = tuple(_enum)
    if len(_members) != _count:
        raise RuntimeError(f"{_enum.__name__} declares {_count} members but defines {len(_members)}")
    _ORDINAL_TABLES[_enum] = _members


__all__ = ["NameComponent", "LocationType", "ElementAdjective", "Noun", "DECLARED_CARDINALITY"]
