"""
errors.py
=========

Exceptions raised while building or evaluating an Interpolant.

Validation failures (EmptyDataset, DatasetMismatch, UnsortedDataset) are
detected before the engine is touched; EngineInitFailed means validation
passed but the engine itself refused the data.
"""

from __future__ import annotations

from typing import Tuple


class InterpolationError(Exception):
    """Base class for interpolant errors."""


class EmptyDataset(InterpolationError):
    """One of the supplied datasets is empty. `which` is "x" or "y"."""

    def __init__(self, which: str):
        self.which = which
        super().__init__(f"Supplied `{which}` dataset is empty.")


class UnsortedDataset(InterpolationError):
    def __init__(self):
        super().__init__("Supplied x dataset must be sorted.")


class DatasetMismatch(InterpolationError):
    def __init__(self, detail: str = ""):
        self.detail = detail
        msg = "Supplied datasets must be 1D and of equal length."
        if detail:
            msg += f" ({detail})"
        super().__init__(msg)


class EngineInitFailed(InterpolationError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Interpolation engine initialization failed: {reason}")


class OutOfDomain(InterpolationError):
    """Query point outside the interpolation range."""

    def __init__(self, x: float, span: Tuple[float, float]):
        self.x = x
        self.span = span
        super().__init__(f"x = {x!r} is outside the interpolation range [{span[0]!r}, {span[1]!r}].")
