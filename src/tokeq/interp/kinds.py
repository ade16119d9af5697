"""
kinds.py
========

Supported 1D interpolation kinds.

  LINEAR          piecewise linear.
  POLYNOMIAL      single interpolating polynomial through all points. Only
                  for a small number of points: large oscillations appear
                  even for well-behaved data.
  CUBIC           cubic spline, natural boundary conditions (zero second
                  derivative at both ends).
  CUBIC_PERIODIC  cubic spline, periodic boundary conditions. The last y
                  value must equal the first.
  AKIMA           non-rounded Akima spline, natural boundary conditions.
  AKIMA_PERIODIC  non-rounded Akima spline, periodic boundary conditions.
"""

from __future__ import annotations

from enum import Enum


class SplineKind(Enum):
    # value: (name, minimum number of samples, periodic)
    LINEAR = ("linear", 2, False)
    POLYNOMIAL = ("polynomial", 3, False)
    CUBIC = ("cubic", 3, False)
    CUBIC_PERIODIC = ("cubic_periodic", 2, True)
    AKIMA = ("akima", 5, False)
    AKIMA_PERIODIC = ("akima_periodic", 5, True)

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def min_size(self) -> int:
        return self.value[1]

    @property
    def periodic(self) -> bool:
        return self.value[2]

    @classmethod
    def from_name(cls, name: str) -> "SplineKind":
        """Case-insensitive lookup; accepts "cubic-periodic" and "cubic_periodic"."""
        key = str(name).strip().lower().replace("-", "_")
        for kind in cls:
            if kind.label == key:
                return kind
        known = ", ".join(k.label for k in cls)
        raise ValueError(f"Unknown spline kind {name!r}. Known: {known}")

    def __str__(self) -> str:
        return self.label
