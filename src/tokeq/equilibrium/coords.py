"""
coords.py
=========

The equilibrium's flux coordinates.

  psi   : radial flux coordinate ψ, with ψ = 0 prepended for the magnetic axis
  theta : Boozer poloidal angle θ

Lengths and spans are computed once in build() and never recomputed.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from tokeq.equilibrium.common import Span, fmt_span, span
from tokeq.io.config import VariableNames
from tokeq.io.extract import extract_1d, extract_1d_with_axis_value
from tokeq.io.store import VariableStore


# ψ value at the magnetic axis
PSI_AXIS = 0.0


@dataclass(frozen=True, eq=False)
class Coords:
    psi: np.ndarray
    theta: np.ndarray
    psi_len: int
    theta_len: int
    psi_span: Span
    theta_span: Span

    @classmethod
    def build(cls, store: VariableStore, names: VariableNames = VariableNames()) -> "Coords":
        """Build ψ (axis-extended) then θ."""
        psi = extract_1d_with_axis_value(store, names.psi, PSI_AXIS)
        theta = extract_1d(store, names.theta)

        return cls(
            psi=psi,
            theta=theta,
            psi_len=int(psi.size),
            theta_len=int(theta.size),
            psi_span=span(psi),
            theta_span=span(theta),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Coords):
            return NotImplemented
        return np.array_equal(self.psi, other.psi) and np.array_equal(self.theta, other.theta)

    __hash__ = None

    def summary(self) -> str:
        return (
            "Coords:\n"
            f"\t{fmt_span('theta', self.theta_span, self.theta_len)}\n"
            f"\t{fmt_span('  psi', self.psi_span, self.psi_len)}\n"
        )

    def __str__(self) -> str:
        return self.summary()
