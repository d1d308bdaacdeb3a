import dataclasses

import pytest

from gauntlet.core.random import RandomSource
from gauntlet.dungeon.generation import Dungeon, generate_dungeons
from gauntlet.dungeon.names import ElementAdjective, LocationType, Noun
from gauntlet.errors import InvalidArgument


def test_vocabulary_sizes():
    assert LocationType.cardinality() == len(list(LocationType)) == 48
    assert ElementAdjective.cardinality() == len(list(ElementAdjective)) == 31
    assert Noun.cardinality() == len(list(Noun)) == 24


def test_zero_hash_maps_to_first_members():
    d = Dungeon.from_hash(0, 1)
    assert (d.location, d.element, d.noun) == (LocationType.CAVE, ElementAdjective.UNREMARKABLE, Noun.HEAVEN)


def test_each_byte_field_is_reduced_modulo_its_vocabulary():
    d = Dungeon.from_hash(0x17052F, 2)
    assert d.location is LocationType.VOLCANO  # 0x2F == 47
    assert d.element is ElementAdjective.ABYSSAL  # 0x05 == 5
    assert d.noun is Noun.RESOLVE  # 0x17 == 23
    assert d.display_name() == "Volcano of Abyssal Resolve (lv. 2)"


def test_all_ones_hash():
    d = Dungeon.from_hash(0xFFFFFFFFFFFFFFFF, 3)
    assert d.location is LocationType.MESA  # 255 % 48 == 15
    assert d.element is ElementAdjective.ELEGANT  # 255 % 31 == 7
    assert d.noun is Noun.RAINBOWS  # 255 % 24 == 15


def test_bits_above_the_third_byte_are_ignored():
    base = Dungeon.from_hash(0x0A0B0C, 1)
    noisy = Dungeon.from_hash(0x0A0B0C | (0xDEADBEEF << 24), 1)
    assert base == noisy


def test_every_byte_value_yields_a_valid_name():
    for b in range(256):
        d = Dungeon.from_hash(b | (b << 8) | (b << 16), 1)
        assert isinstance(d.location, LocationType)
        assert isinstance(d.element, ElementAdjective)
        assert isinstance(d.noun, Noun)


def test_random_hashes_always_name_a_dungeon():
    rng = RandomSource(2024)
    for _ in range(1000):
        h = rng.next_u64()
        assert Dungeon.from_hash(h, 1) == Dungeon.from_hash(h, 1)


@pytest.mark.parametrize("index", [-1, 48, 1000])
def test_out_of_range_index_is_rejected(index):
    with pytest.raises(InvalidArgument):
        LocationType.from_index(index)


def test_dungeon_is_immutable():
    d = Dungeon.from_hash(1, 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        d.level = 5  # type: ignore[misc]


def test_generate_dungeons_levels_and_determinism():
    a = generate_dungeons(4, RandomSource(5))
    b = generate_dungeons(4, RandomSource(5))
    assert a == b
    assert [d.level for d in a] == [1, 2, 3, 4]
