"""Closed and open real intervals used for ray parameter ranges."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Interval:
    """A range of reals from ``min`` to ``max``; empty by default."""

    min: float = math.inf
    max: float = -math.inf

    def size(self) -> float:
        return self.max - self.min

    def contains(self, x: float) -> bool:
        return self.min <= x <= self.max

    def surrounds(self, x: float) -> bool:
        return self.min < x < self.max

    def clamp(self, x: float) -> float:
        """Clamp ``x`` into the interval; a NaN input clamps to ``min``."""
        low = self.min if math.isnan(x) or x < self.min else x
        return self.max if low > self.max else low

    @classmethod
    def empty(cls) -> Interval:
        return cls(math.inf, -math.inf)

    @classmethod
    def universe(cls) -> Interval:
        return cls(-math.inf, math.inf)