"""
engine.py
=========

Interpolation engine backed by scipy.interpolate.

The engine follows an allocate / init / eval lifecycle:

    state = allocate(kind, size)     # size check only
    init(state, xa, ya)              # builds the scipy object
    state.value(x, nu=0)             # nu-th derivative at x (scalar or array)
    state.value_at(x, i, nu=0)       # same, in the known interval i
    state.integral(a, b)

Kind -> scipy object
--------------------
  LINEAR          PPoly with one linear piece per interval
  POLYNOMIAL      numpy Polynomial of degree n-1 through all n points
  CUBIC           CubicSpline(bc_type="natural")
  CUBIC_PERIODIC  CubicSpline(bc_type="periodic")
  AKIMA           Akima1DInterpolator
  AKIMA_PERIODIC  Akima1DInterpolator on samples padded with the wrapped
                  neighbours (_AKIMA_PAD samples on each side)

All piecewise kinds are scipy PPoly objects. value_at() evaluates the single
piece for interval i directly, so the interval search is done once by the
caller's Accelerator and not again by scipy. The polynomial kind has one
global piece and ignores i.

Every failure is reported as EngineInitFailed.
"""

from __future__ import annotations

from typing import Any, Optional

import numpy as np
from numpy.polynomial import Polynomial
from scipy.interpolate import Akima1DInterpolator, CubicSpline, PPoly

from tokeq.interp.errors import EngineInitFailed
from tokeq.interp.kinds import SplineKind


# Samples borrowed from each side when padding periodic Akima data
_AKIMA_PAD = 3


class EngineState:
    """Allocated engine slot for one interpolant."""

    def __init__(self, kind: SplineKind, size: int):
        self.kind = kind
        self.size = size
        self._impl: Optional[Any] = None
        # breakpoint index of sample interval 0 inside the PPoly
        self._offset = 0

    @property
    def initialized(self) -> bool:
        return self._impl is not None

    def _require(self):
        if self._impl is None:
            raise RuntimeError("Engine used before init().")
        return self._impl

    def value(self, x, nu: int = 0):
        return self._require()(x, nu)

    def value_at(self, x: float, i: int, nu: int = 0) -> float:
        """nu-th derivative at x, where xa[i] <= x <= xa[i+1]."""
        impl = self._require()
        if not isinstance(impl, PPoly):
            return float(impl(x, nu))

        j = i + self._offset
        coeffs = impl.c[:, j]
        if nu:
            coeffs = np.polyder(coeffs, nu)
        return float(np.polyval(coeffs, x - impl.x[j]))

    def integral(self, a: float, b: float) -> float:
        return float(self._require().integrate(a, b))


def allocate(kind: SplineKind, size: int) -> EngineState:
    """Reserve an engine slot for `size` samples of `kind`."""
    if size < kind.min_size:
        raise EngineInitFailed(
            f"{kind} interpolation needs at least {kind.min_size} points, got {size}"
        )
    return EngineState(kind, size)


def init(state: EngineState, xa: np.ndarray, ya: np.ndarray) -> None:
    """
    Compute the engine's internal state from the samples.

    xa must be strictly increasing; equal neighbouring x values are rejected
    here even though they pass the wrapper's sortedness check.
    """
    if xa.size != state.size or ya.size != state.size:
        raise EngineInitFailed(f"engine allocated for {state.size} points, got {xa.size}")
    if np.any(np.diff(xa) <= 0):
        raise EngineInitFailed("x values must be strictly increasing")

    try:
        state._impl = _build(state.kind, xa, ya)
    except ValueError as e:
        raise EngineInitFailed(str(e)) from e
    state._offset = _AKIMA_PAD if state.kind is SplineKind.AKIMA_PERIODIC else 0


def _build(kind: SplineKind, xa: np.ndarray, ya: np.ndarray):
    if kind is SplineKind.LINEAR:
        slopes = np.diff(ya) / np.diff(xa)
        return PPoly(np.vstack([slopes, ya[:-1]]), xa)

    if kind is SplineKind.POLYNOMIAL:
        return _PolynomialInterp(xa, ya)

    if kind is SplineKind.CUBIC:
        return CubicSpline(xa, ya, bc_type="natural")

    if kind is SplineKind.CUBIC_PERIODIC:
        return CubicSpline(xa, ya, bc_type="periodic")

    if kind is SplineKind.AKIMA:
        return Akima1DInterpolator(xa, ya)

    if kind is SplineKind.AKIMA_PERIODIC:
        period = xa[-1] - xa[0]
        xp = np.concatenate([xa[-1 - _AKIMA_PAD:-1] - period, xa, xa[1:1 + _AKIMA_PAD] + period])
        yp = np.concatenate([ya[-1 - _AKIMA_PAD:-1], ya, ya[1:1 + _AKIMA_PAD]])
        return Akima1DInterpolator(xp, yp)

    raise EngineInitFailed(f"unsupported interpolation kind {kind!r}")


class _PolynomialInterp:
    """Interpolating polynomial with the call / integrate interface of scipy splines."""

    def __init__(self, xa: np.ndarray, ya: np.ndarray):
        # degree n-1 through n points: the least-squares fit is exact
        self._p = Polynomial.fit(xa, ya, deg=xa.size - 1)

    def __call__(self, x, nu: int = 0):
        p = self._p.deriv(nu) if nu else self._p
        return p(x)

    def integrate(self, a: float, b: float) -> float:
        P = self._p.integ()
        return P(b) - P(a)
