"""
bfield.py
=========

Normalized magnetic field strength B(ψ, θ).

Shape follows the file's dimension order: (n_psi, n_theta), axis 0 is ψ.
Bfield does not check itself against Coords; the aggregate does that.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from tokeq.equilibrium.common import Span
from tokeq.io.config import VariableNames
from tokeq.io.extract import extract_2d
from tokeq.io.store import VariableStore


@dataclass(frozen=True, eq=False)
class Bfield:
    b: np.ndarray

    @classmethod
    def build(cls, store: VariableStore, names: VariableNames = VariableNames()) -> "Bfield":
        return cls(b=extract_2d(store, names.b))

    @property
    def shape(self) -> Tuple[int, int]:
        return int(self.b.shape[0]), int(self.b.shape[1])

    @property
    def psi_len(self) -> int:
        return self.shape[0]

    @property
    def theta_len(self) -> int:
        return self.shape[1]

    @property
    def b_span(self) -> Span:
        return float(np.min(self.b)), float(np.max(self.b))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bfield):
            return NotImplemented
        return np.array_equal(self.b, other.b)

    __hash__ = None

    def summary(self) -> str:
        lo, hi = self.b_span
        return (
            "Bfield:\n"
            f"\tb = [{lo:.5f}, ..., {hi:.5f}], shape = {self.shape},\n"
        )

    def __str__(self) -> str:
        return self.summary()
