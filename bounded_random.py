"""Bounded random number source.

This module wraps a Mersenne Twister engine so callers can draw integers from
a fixed inclusive range. The engine is seeded once from the operating system
entropy pool unless an explicit seed is given, which keeps tests reproducible.
"""

from __future__ import annotations

import logging
from random import Random, SystemRandom
from typing import List, Optional

logger = logging.getLogger(__name__)

SEED_BITS = 64


class BoundedRandomSource:
    """Uniform integer generator over ``[minimum, maximum]`` inclusive.

    Args:
        minimum: Lowest value :meth:`next` may return.
        maximum: Highest value :meth:`next` may return.
        seed: Optional seed. When omitted a seed is drawn from the system
            entropy pool at construction time.

    Raises:
        ValueError: If ``minimum`` is greater than ``maximum``.
    """

    def __init__(self, minimum: int, maximum: int, seed: Optional[int] = None) -> None:
        if minimum > maximum:
            raise ValueError("minimum cannot be greater than maximum")
        if seed is None:
            seed = SystemRandom().getrandbits(SEED_BITS)
        self._minimum = minimum
        self._maximum = maximum
        self._seed = seed
        self._rng = Random(seed)
        logger.debug("random source [%d, %d] seeded with %d", minimum, maximum, seed)

    @property
    def minimum(self) -> int:
        return self._minimum

    @property
    def maximum(self) -> int:
        return self._maximum

    @property
    def seed(self) -> int:
        return self._seed

    def next(self) -> int:
        """Return one integer drawn uniformly from the range."""
        return self._rng.randint(self._minimum, self._maximum)


def fill_samples(count: int, source: BoundedRandomSource) -> List[int]:
    """Draw ``count`` integers from ``source`` in call order.

    Raises:
        ValueError: If ``count`` is negative.
    """

    if count < 0:
        raise ValueError("count must be non-negative")
    return [source.next() for _ in range(count)]

