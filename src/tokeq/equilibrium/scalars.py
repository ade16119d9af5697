"""
scalars.py
==========

Scalar values of a reconstructed equilibrium.

  baxis    : magnetic field strength on the axis [T]
  raxis    : major radius [m]
  psi_wall : ψ of the last closed flux surface [normalized]

psi_wall is the last sample of the raw ψ coordinate (before the axis value is
prepended). Extraction already rejects an empty ψ, so the last sample exists.
"""

from __future__ import annotations

from dataclasses import dataclass

from tokeq.io.config import VariableNames
from tokeq.io.extract import extract_1d, extract_scalar
from tokeq.io.store import VariableStore


@dataclass(frozen=True)
class Scalars:
    baxis: float
    raxis: float
    psi_wall: float

    @classmethod
    def build(cls, store: VariableStore, names: VariableNames = VariableNames()) -> "Scalars":
        """Build from the store in the order baxis, raxis, psi_wall."""
        baxis = float(extract_scalar(store, names.baxis))
        raxis = float(extract_scalar(store, names.raxis))
        psi = extract_1d(store, names.psi)

        return cls(baxis=baxis, raxis=raxis, psi_wall=float(psi[-1]))

    def summary(self) -> str:
        return (
            "Scalars:\n"
            f"\tbaxis = {self.baxis:.5f} [T],\n"
            f"\traxis = {self.raxis:.5f} [m],\n"
            f"\tpsi_wall = {self.psi_wall:.5f}\n"
        )

    def __str__(self) -> str:
        return self.summary()
