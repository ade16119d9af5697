"""
spline.py
=========

Interpolant: validated 1D interpolation over (x, y) samples.

Typical use is interpolating an equilibrium profile over ψ:

    eq = Equilibrium.open("eq.nc")
    g_of_psi = Interpolant.build(SplineKind.CUBIC, eq.coords.psi, eq.currents.g)
    g_of_psi.eval(0.3)

Validation (before the engine is touched)
-----------------------------------------
  x empty                       -> EmptyDataset("x")
  y empty                       -> EmptyDataset("y")
  not both 1D / lengths differ  -> DatasetMismatch
  x not non-decreasing          -> UnsortedDataset
Then engine allocation and initialization -> EngineInitFailed.

Ownership
---------
The interpolant keeps read-only copies of x and y (xdata, ydata) for its
whole life, and hands a second, engine-owned copy to the engine at init.

Accelerator
-----------
Scalar queries go through a per-interpolant Accelerator that caches the last
bracketing interval; the engine then evaluates only that interval's piece.
Array queries are handed to scipy in one vectorized call.
reset() clears the cache between unrelated query sequences.
It does not take part in equality. Give each thread its own Interpolant (or
serialize access) when evaluating concurrently.
"""

from __future__ import annotations

from typing import Tuple, Union

import numpy as np

from tokeq.interp import engine
from tokeq.interp.accel import Accelerator
from tokeq.interp.errors import DatasetMismatch, EmptyDataset, OutOfDomain, UnsortedDataset
from tokeq.interp.kinds import SplineKind


ArrayLike = Union[np.ndarray, list, tuple]


class Interpolant:
    """
    1D interpolant of a given SplineKind.

    Build with Interpolant.build(kind, x, y); the constructor is internal.

    Attributes
    ----------
    kind : SplineKind
    xdata, ydata : np.ndarray, shape (size,), read-only
    size : int
    xspan, yspan : (float, float)
        (first, last) samples.
    accel : Accelerator
    """

    def __init__(self, kind: SplineKind, xdata: np.ndarray, ydata: np.ndarray, state: engine.EngineState):
        self.kind = kind
        self.xdata = xdata
        self.ydata = ydata
        self.size = int(xdata.size)
        self.xspan: Tuple[float, float] = (float(xdata[0]), float(xdata[-1]))
        self.yspan: Tuple[float, float] = (float(ydata[0]), float(ydata[-1]))
        self.accel = Accelerator()
        self._state = state
        self._xa = np.array(xdata, dtype=float, copy=True)
        self._ya = np.array(ydata, dtype=float, copy=True)

    # ============================================================
    # CONSTRUCTION
    # ============================================================

    @classmethod
    def build(cls, kind: Union[SplineKind, str], x: ArrayLike, y: ArrayLike) -> "Interpolant":
        """
        Validate (x, y) and initialize the engine.

        Parameters
        ----------
        kind : SplineKind or str
            Interpolation kind (a name such as "cubic" is accepted).
        x : array_like, shape (N,)
            Sample positions, non-decreasing. The engine further requires
            strictly increasing values.
        y : array_like, shape (N,)
            Sample values.

        Raises
        ------
        EmptyDataset, DatasetMismatch, UnsortedDataset, EngineInitFailed
        """
        if not isinstance(kind, SplineKind):
            kind = SplineKind.from_name(kind)

        xdata = _as_samples(x, "x")
        ydata = _as_samples(y, "y")
        check_data(xdata, ydata)

        xdata.flags.writeable = False
        ydata.flags.writeable = False

        state = engine.allocate(kind, xdata.size)
        interp = cls(kind, xdata, ydata, state)
        engine.init(state, interp._xa, interp._ya)
        return interp

    # ============================================================
    # EVALUATION
    # ============================================================

    def locate(self, x: float) -> int:
        """Index i with xdata[i] <= x < xdata[i+1], via the accelerator."""
        x = float(x)
        self._check_domain(np.asarray(x))
        return self.accel.find(self._xa, x)

    def eval(self, x):
        """Interpolated value at x (scalar or array)."""
        return self._evaluate(x, 0)

    def eval_deriv(self, x):
        """First derivative at x."""
        return self._evaluate(x, 1)

    def eval_deriv2(self, x):
        """Second derivative at x."""
        return self._evaluate(x, 2)

    def eval_integ(self, a: float, b: float) -> float:
        """Definite integral over [a, b], a <= b, both inside xspan."""
        a, b = float(a), float(b)
        if a > b:
            raise ValueError(f"Integration limits must satisfy a <= b, got a={a}, b={b}")
        self._check_domain(np.asarray([a, b]))
        return self._state.integral(a, b)

    def reset(self) -> None:
        """Reset the accelerator. Does not change any result."""
        self.accel.reset()

    def _evaluate(self, x, nu: int):
        xq = np.asarray(x, dtype=float)
        self._check_domain(xq)
        if xq.ndim == 0:
            x = float(xq)
            i = self.accel.find(self._xa, x)
            return self._state.value_at(x, i, nu)
        return np.asarray(self._state.value(xq, nu), dtype=float)

    def _check_domain(self, xq: np.ndarray) -> None:
        lo, hi = self.xspan
        bad = ~((xq >= lo) & (xq <= hi))
        if np.any(bad):
            raise OutOfDomain(float(xq[bad].flat[0]) if xq.ndim else float(xq), self.xspan)

    # ============================================================
    # DUNDER
    # ============================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interpolant):
            return NotImplemented
        return (
            self.kind is other.kind
            and np.array_equal(self.xdata, other.xdata)
            and np.array_equal(self.ydata, other.ydata)
        )

    __hash__ = None

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return (
            f"Interpolant(kind={self.kind}, "
            f"xdata=[{self.xspan[0]:.5f}, .. {self.xspan[1]:.5f}], "
            f"ydata=[{self.yspan[0]:.5f}, .. {self.yspan[1]:.5f}], "
            f"size={self.size}, {self.accel!r})"
        )


def check_data(x: np.ndarray, y: np.ndarray) -> None:
    """Check that x and y are valid interpolation samples."""
    if x.size == 0:
        raise EmptyDataset("x")
    if y.size == 0:
        raise EmptyDataset("y")

    if x.ndim != 1 or y.ndim != 1:
        raise DatasetMismatch(f"x.ndim={x.ndim}, y.ndim={y.ndim}")
    if x.size != y.size:
        raise DatasetMismatch(f"len(x)={x.size}, len(y)={y.size}")

    if not np.all(x[1:] >= x[:-1]):
        raise UnsortedDataset()


def _as_samples(values: ArrayLike, which: str) -> np.ndarray:
    """Owned float64 copy of `values`; ragged or non-numeric input is a DatasetMismatch."""
    try:
        return np.array(values, dtype=float, copy=True)
    except (TypeError, ValueError) as e:
        raise DatasetMismatch(f"{which} is not a numeric array: {e}") from e
