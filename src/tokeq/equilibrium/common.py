"""
Small helpers shared by the equilibrium entities.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np


Span = Tuple[float, float]


def span(arr: np.ndarray) -> Span:
    """
    (first, last) of a non-empty 1D array.

    Only meaningful as (min, max) when the array is sorted, which holds for
    the coordinates and is assumed for the currents.
    """
    assert arr.ndim == 1 and arr.size > 0, "span of an empty array"
    return float(arr[0]), float(arr[-1])


def fmt_span(name: str, s: Span, n: int) -> str:
    return f"{name} = [{s[0]:.5f}, ..., {s[1]:.5f}], len = {n},"
