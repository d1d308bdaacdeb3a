from __future__ import annotations

import hashlib
import logging
from typing import Union

from .random import U64_MASK

logger = logging.getLogger(__name__)


def seed_from_name(name: str) -> int:
    """Derive a 64-bit seed from a string using BLAKE2b.

    The digest is stable across interpreters and platforms, unlike ``hash()``,
    and sensitive to character order.
    """
    digest = hashlib.blake2b(name.encode("utf-8"), digest_size=8).digest()
    seed = int.from_bytes(digest, "big", signed=False)
    logger.debug("Derived seed for name=%r -> %d", name, seed)
    return seed


def resolve_seed(seed_or_name: Union[int, str]) -> int:
    """Accept a raw integer seed or any string and return a 64-bit seed."""
    if isinstance(seed_or_name, bool):
        raise TypeError("Unsupported seed type: bool")
    if isinstance(seed_or_name, int):
        return seed_or_name & U64_MASK
    if isinstance(seed_or_name, str):
        return seed_from_name(seed_or_name)
    raise TypeError("Unsupported seed type: %r" % (type(seed_or_name),))
