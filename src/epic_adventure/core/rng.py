from __future__ import annotations

import logging
import random
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class RandomSource:
    """
    A thin wrapper around random.Random to:
    - centralize RNG handling
    - support optional deterministic seeding for tests
    - apply symmetric variance to fixed encounter constants
    """

    seed: int | None = None

    def __post_init__(self) -> None:
        if self.seed is not None:
            self._rng = random.Random(self.seed)
            logger.debug("Initialized RandomSource with deterministic seed=%s", self.seed)
        else:
            self._rng = random.Random()
            logger.debug("Initialized RandomSource with non-deterministic seed")

    def randint(self, a: int, b: int) -> int:
        return self._rng.randint(a, b)

    def vary(self, base: int, variance: int) -> int:
        """Return ``base`` shifted by up to +/- ``variance``, never below zero.

        With a variance of 0 no random number is drawn, so the fixed constants
        are reproduced exactly and the generator state is left untouched.
        """
        if variance <= 0:
            return base
        value = max(0, base + self._rng.randint(-variance, variance))
        logger.debug("Varied %s by +/-%s => %s", base, variance, value)
        return value
