"""Closed real intervals."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Interval:
    """A closed interval [min, max]; empty by default."""

    min: float = math.inf
    max: float = -math.inf

    @classmethod
    def hull(cls, a: Interval, b: Interval) -> Interval:
        """The smallest interval enclosing both ``a`` and ``b``."""
        return cls(
            a.min if a.min <= b.min else b.min,
            a.max if a.max >= b.max else b.max,
        )

    def size(self) -> float:
        return self.max - self.min

    def contains(self, x: float) -> bool:
        return self.min <= x <= self.max

    def surrounds(self, x: float) -> bool:
        return self.min <= x <= self.max

    def clamp(self, x: float) -> float:
        return min(max(self.min, x), self.max)

    def expand(self, delta: float) -> Interval:
        """Grow the interval by ``delta`` in total, half on each side."""
        padding = delta / 2
        return Interval(self.min - padding, self.max + padding)


EMPTY = Interval(math.inf, -math.inf)
UNIVERSE = Interval(-math.inf, math.inf)