"""Random number sources used by the generators."""

from abc import ABC, abstractmethod
from typing import Optional

import numpy as np


class RandomSource(ABC):
    """
    Source of uniform floats in [0, 1).

    Subclasses only need ``next_uniform``; ``uniform_array`` falls back to
    calling it once per value, in order.
    """

    @abstractmethod
    def next_uniform(self) -> float:
        """Return the next value."""

    def uniform_array(self, n: int) -> np.ndarray:
        """Draw ``n`` consecutive values as a float64 array."""
        return np.fromiter(
            (self.next_uniform() for _ in range(n)), dtype=np.float64, count=n
        )


class NumpyRandomSource(RandomSource):
    """Unseeded by default, so every generation differs."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = np.random.default_rng(seed)

    def next_uniform(self) -> float:
        return float(self._rng.random())

    def uniform_array(self, n: int) -> np.ndarray:
        return self._rng.random(n)
