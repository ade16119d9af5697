"""
accel.py
========

Index lookup accelerator for repeated, nearby interpolation queries.

The accelerator remembers the interval of the last lookup. A query that falls
in the same interval is a hit and costs nothing; otherwise it is a miss and
the interval is found by bisection, restricted to the side of the cached
interval the query lies on.

It only affects speed: reset() forgets the cached interval and counters.
One accelerator must not be shared between concurrent query sequences.
"""

from __future__ import annotations

import numpy as np


class Accelerator:
    def __init__(self):
        self.cache = 0
        self.hits = 0
        self.misses = 0

    def find(self, xa: np.ndarray, x: float) -> int:
        """
        Return i such that xa[i] <= x < xa[i+1].

        x == xa[-1] maps to the last interval. x is assumed inside
        [xa[0], xa[-1]]; callers check the domain first.
        """
        n = xa.size
        i = self.cache
        if i > n - 2:
            i = 0

        if x < xa[i]:
            self.misses += 1
            i = _bisect(xa, x, 0, i)
        elif x >= xa[i + 1]:
            self.misses += 1
            i = _bisect(xa, x, i, n - 1)
        else:
            self.hits += 1

        self.cache = i
        return i

    def reset(self) -> None:
        self.cache = 0
        self.hits = 0
        self.misses = 0

    def __repr__(self) -> str:
        return f"Accelerator(hits={self.hits}, misses={self.misses})"


def _bisect(xa: np.ndarray, x: float, lo: int, hi: int) -> int:
    """Largest i in [lo, hi) with xa[i] <= x, clamped to the last interval."""
    i = int(np.searchsorted(xa[lo:hi + 1], x, side="right")) - 1 + lo
    return min(max(i, lo), xa.size - 2)
