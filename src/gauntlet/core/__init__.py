from .random import RandomSource
from .seed import resolve_seed, seed_from_name
from .stats import STAT_ORDER, StatPattern

__all__ = [
    "RandomSource",
    "StatPattern",
    "STAT_ORDER",
    "resolve_seed",
    "seed_from_name",
]
