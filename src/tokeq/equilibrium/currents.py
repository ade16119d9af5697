"""
currents.py
===========

Plasma currents as functions of ψ.

  g : poloidal current. Axis value = copy of its first sample.
  i : toroidal current. Axis value = 0 (no enclosed current at the axis).

Both are stored in the file one sample short of the axis-extended ψ and are
extended here so they line up with Coords.psi.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from tokeq.equilibrium.common import Span, fmt_span, span
from tokeq.io.config import VariableNames
from tokeq.io.extract import extract_1d_with_axis_value, extract_1d_with_first_axis_value
from tokeq.io.store import VariableStore


# Toroidal current enclosed by the magnetic axis
I_AXIS = 0.0


@dataclass(frozen=True, eq=False)
class Currents:
    i: np.ndarray
    g: np.ndarray
    i_len: int
    g_len: int
    i_span: Span
    g_span: Span

    @classmethod
    def build(cls, store: VariableStore, names: VariableNames = VariableNames()) -> "Currents":
        """Build g then I, both axis-extended."""
        g = extract_1d_with_first_axis_value(store, names.g)
        i = extract_1d_with_axis_value(store, names.i, I_AXIS)

        return cls(
            i=i,
            g=g,
            i_len=int(i.size),
            g_len=int(g.size),
            i_span=span(i),
            g_span=span(g),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Currents):
            return NotImplemented
        return np.array_equal(self.i, other.i) and np.array_equal(self.g, other.g)

    __hash__ = None

    def summary(self) -> str:
        return (
            "Currents:\n"
            f"\t{fmt_span('i', self.i_span, self.i_len)}\n"
            f"\t{fmt_span('g', self.g_span, self.g_len)}\n"
        )

    def __str__(self) -> str:
        return self.summary()
