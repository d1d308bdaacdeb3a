from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Sequence, TypeVar

from ..errors import InvalidArgument

logger = logging.getLogger(__name__)

T = TypeVar("T")

U64_MASK = 0xFFFFFFFFFFFFFFFF


@dataclass
class RandomSource:
    """
    The single stream every stochastic decision of a run is drawn from:
    - seeded from an unsigned 64-bit value
    - never touches the global ``random`` module state
    - draws are order dependent, so the same call sequence reproduces exactly
    """

    seed: int

    def __post_init__(self) -> None:
        self.seed = self.seed & U64_MASK
        self._rng = random.Random(self.seed)
        logger.debug("Initialized RandomSource with seed=%d", self.seed)

    def next_u64(self) -> int:
        return self._rng.getrandbits(64)

    def uniform(self, a: float, b: float) -> float:
        return self._rng.uniform(a, b)

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise InvalidArgument("RandomSource.choice() received an empty sequence")
        idx = self._rng.randrange(0, len(seq))
        return seq[idx]


__all__ = ["RandomSource", "U64_MASK"]
