"""
extract.py
==========

Typed extraction of scalar / 1D / 2D variables from a VariableStore, plus the
magnetic-axis extrapolation applied to radial profiles.

Check order
-----------
Every extractor performs, in this order:
  1) existence          -> VariableNotFound
  2) non-emptiness      -> EmptyVariable
  3) rank               -> NotScalar / Not1D / Not2D
  4) one bulk read      -> GetValuesError
so the reported error is always the first structural problem.

Axis extrapolation
------------------
ψ, I and g are tabulated outside the magnetic axis only. Consumers need a
value *at* the axis (ψ = 0), so the loader prepends one:
  - with_given_axis_value(arr, v)  -> [v, arr...]
  - with_first_axis_value(arr)     -> [arr[0], arr...]

Returned arrays are owned, C-contiguous and read-only.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from tokeq.io.errors import (
    EmptyVariable,
    GetValuesError,
    Not1D,
    Not2D,
    NotScalar,
    StoreReadError,
    VariableNotFound,
)
from tokeq.io.store import VariableStore


logger = logging.getLogger(__name__)

DEFAULT_DTYPE = np.float64


# ============================================================
# HELPERS
# ============================================================

def _numeric_dtype(dtype: Any) -> np.dtype:
    """
    Resolve `dtype` and require a fixed-width numeric element type.

    Passing anything else is a programming error, not a data error.
    """
    dt = np.dtype(dtype)
    if dt.kind not in "iufc":
        raise TypeError(f"Extraction requires a fixed-width numeric dtype, got {dt}.")
    return dt


def _checked_variable(store: VariableStore, name: str, rank: int, rank_error):
    var = store.lookup(name)
    if var is None:
        raise VariableNotFound(name)
    if store.length(var) == 0:
        raise EmptyVariable(name)
    if store.rank(var) != rank:
        raise rank_error(name)
    return var


def _read(store: VariableStore, var, name: str, buffer: np.ndarray) -> np.ndarray:
    try:
        store.read_into(var, buffer)
    except StoreReadError as e:
        raise GetValuesError(name) from e
    buffer.flags.writeable = False
    return buffer


# ============================================================
# PUBLIC: EXTRACTION
# ============================================================

def extract_scalar(store: VariableStore, name: str, dtype: Any = DEFAULT_DTYPE) -> np.generic:
    """
    Extract a 0-d variable's value.

    Returns
    -------
    value : numpy scalar of `dtype`
    """
    dt = _numeric_dtype(dtype)
    var = _checked_variable(store, name, 0, NotScalar)

    buf = _read(store, var, name, np.zeros((), dtype=dt))
    logger.debug("Extracted scalar '%s' = %r", name, buf[()])
    return buf[()]


def extract_1d(store: VariableStore, name: str, dtype: Any = DEFAULT_DTYPE) -> np.ndarray:
    """
    Extract a 1D variable.

    Returns
    -------
    arr : np.ndarray, shape (N,), N >= 1
    """
    dt = _numeric_dtype(dtype)
    var = _checked_variable(store, name, 1, Not1D)

    n = store.length(var)
    arr = _read(store, var, name, np.zeros((n,), dtype=dt))
    logger.debug("Extracted 1D '%s', len=%d", name, n)
    return arr


def extract_2d(store: VariableStore, name: str, dtype: Any = DEFAULT_DTYPE) -> np.ndarray:
    """
    Extract a 2D variable.

    Shape follows the file's dimension declaration order, which is (ψ, θ)
    for equilibrium fields.

    Returns
    -------
    arr : np.ndarray, shape (N0, N1)
    """
    dt = _numeric_dtype(dtype)
    var = _checked_variable(store, name, 2, Not2D)

    shape = store.shape(var)
    arr = _read(store, var, name, np.zeros(shape, dtype=dt))
    logger.debug("Extracted 2D '%s', shape=%s", name, shape)
    return arr


# ============================================================
# PUBLIC: AXIS EXTRAPOLATION
# ============================================================

def with_given_axis_value(arr: np.ndarray, value: float) -> np.ndarray:
    """Return a new array with `value` prepended at index 0."""
    arr = np.asarray(arr)
    assert arr.ndim == 1 and arr.size > 0, "axis extrapolation needs a non-empty 1D array"

    out = np.empty(arr.size + 1, dtype=arr.dtype)
    out[0] = value
    out[1:] = arr
    out.flags.writeable = False
    return out


def with_first_axis_value(arr: np.ndarray) -> np.ndarray:
    """Return a new array with a copy of arr[0] prepended at index 0."""
    arr = np.asarray(arr)
    assert arr.ndim == 1 and arr.size > 0, "axis extrapolation needs a non-empty 1D array"
    return with_given_axis_value(arr, arr[0])


def extract_1d_with_axis_value(
    store: VariableStore,
    name: str,
    value: float,
    dtype: Any = DEFAULT_DTYPE,
) -> np.ndarray:
    """Extract a 1D variable and prepend `value` as its magnetic-axis sample."""
    return with_given_axis_value(extract_1d(store, name, dtype), value)


def extract_1d_with_first_axis_value(
    store: VariableStore,
    name: str,
    dtype: Any = DEFAULT_DTYPE,
) -> np.ndarray:
    """Extract a 1D variable and repeat its first sample at the magnetic axis."""
    return with_first_axis_value(extract_1d(store, name, dtype))
