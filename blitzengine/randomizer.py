"""Uniform random numbers for game logic."""

from __future__ import annotations

import random
from typing import Optional


class Randomizer:
    """A seedable source of uniform floats and inclusive integers."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._generator = random.Random(seed)

    def rand_float(self, low: float = 1.0, high: Optional[float] = None) -> float:
        """A float in ``[low, high)``; with one argument, in ``[0, low)``."""
        if high is None:
            low, high = 0.0, low
        return self._generator.uniform(low, high)

    def rand_int(self, low: int, high: Optional[int] = None) -> int:
        """An integer in ``[low, high]``; with one argument, in ``[0, low]``."""
        if high is None:
            low, high = 0, low
        return self._generator.randint(low, high)