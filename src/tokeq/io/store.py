"""
store.py
========

Read-only variable store over an equilibrium array file.

Equilibrium files are HDF5 containers (NetCDF-4 files are HDF5 files), read
through h5py. This module is the only place that touches h5py objects; the
extraction layer only ever asks the questions below.

Capability
----------
• lookup(name)        -> dataset handle or None
• length(var)         -> total element count (0 for empty / null dataspace)
• rank(var)           -> number of dimensions (0 for scalars)
• shape(var)          -> per-dimension extents
• read_into(var, buf) -> typed bulk copy, StoreReadError on failure

Design notes
------------
• The store is borrowed by a build and closed by whoever opened it.
• Nothing here knows tokamak physics, only how to read named arrays.

Dependencies
------------
• h5py
• numpy
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple, Union

import h5py
import numpy as np

from tokeq.io.errors import FileNotFound, LibraryError, StoreReadError


PathLike = Union[str, Path]


# ============================================================
# STORE
# ============================================================

class VariableStore:
    """
    Thin wrapper around an open h5py.File exposing named-variable access.

    Parameters
    ----------
    h5 : h5py.File
        Open file handle. The store takes ownership and closes it in close().
    path : Path
        Path the handle was opened from (kept for messages).
    """

    def __init__(self, h5: h5py.File, path: Path):
        self._h5 = h5
        self.path = path

    # --------------------------------------------------------
    # Lifecycle
    # --------------------------------------------------------

    def close(self) -> None:
        if self._h5 is not None:
            self._h5.close()
            self._h5 = None

    @property
    def closed(self) -> bool:
        return self._h5 is None

    def __enter__(self) -> "VariableStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # --------------------------------------------------------
    # Queries
    # --------------------------------------------------------

    def lookup(self, name: str) -> Optional[h5py.Dataset]:
        """Return the dataset called `name`, or None. Groups count as absent."""
        if self._h5 is None:
            raise ValueError(f"Store for {self.path} is closed.")
        obj = self._h5.get(name)
        if isinstance(obj, h5py.Dataset):
            return obj
        return None

    @staticmethod
    def shape(var: h5py.Dataset) -> Tuple[int, ...]:
        # h5py reports a null dataspace (h5py.Empty) as shape None
        if var.shape is None:
            return (0,)
        return tuple(int(n) for n in var.shape)

    @staticmethod
    def rank(var: h5py.Dataset) -> int:
        if var.shape is None:
            return 0
        return len(var.shape)

    @staticmethod
    def length(var: h5py.Dataset) -> int:
        if var.shape is None:
            return 0
        return int(np.prod(var.shape, dtype=np.int64))

    @staticmethod
    def read_into(var: h5py.Dataset, buffer: np.ndarray) -> None:
        """
        Copy the whole variable into `buffer`, converting to buffer.dtype.

        Values are read in the file's own type and converted here. Float to
        integer conversion truncates toward zero.

        Raises
        ------
        StoreReadError
            If the element conversion is not available (e.g. strings to
            float), a value is out of range for buffer.dtype, or the
            variable does not fit the buffer's shape.
        """
        try:
            data = np.asarray(var[()])
            _check_representable(data, buffer.dtype)
            np.copyto(buffer, data.astype(buffer.dtype), casting="no")
        except (TypeError, ValueError, OSError) as e:
            raise StoreReadError(var.name, str(e)) from e

    def variables(self) -> List[str]:
        """All dataset paths in the file, without the leading slash."""
        if self._h5 is None:
            raise ValueError(f"Store for {self.path} is closed.")
        names: List[str] = []

        def _visit(name, obj):
            if isinstance(obj, h5py.Dataset):
                names.append(name)

        self._h5.visititems(_visit)
        return sorted(names)


# ============================================================
# FILE OPEN
# ============================================================

def open_store(path: PathLike) -> VariableStore:
    """
    Open an equilibrium file read-only.

    Raises
    ------
    FileNotFound
        If `path` is not an existing file.
    LibraryError
        If h5py cannot open the file (not HDF5 / NetCDF-4, corrupt, no access).
    """
    p = Path(path).expanduser()
    if not p.is_file():
        raise FileNotFound(p)

    try:
        h5 = h5py.File(p.resolve(), "r")
    except OSError as e:
        raise LibraryError(e, "Error opening equilibrium file") from e

    return VariableStore(h5, p)


# ============================================================
# INTERNAL HELPERS
# ============================================================

def _check_representable(data: np.ndarray, dtype: np.dtype) -> None:
    """Raise if `data` cannot be converted to `dtype` without going out of range."""
    if data.dtype.kind not in "biufc":
        raise TypeError(f"cannot convert {data.dtype} values to {dtype}")
    if data.dtype.kind == "c" and dtype.kind != "c":
        raise TypeError(f"cannot convert complex values to {dtype}")
    if data.size == 0 or dtype.kind == "c":
        return

    if dtype.kind in "iu":
        if data.dtype.kind == "f":
            if not np.all(np.isfinite(data)):
                raise ValueError(f"non-finite value cannot be converted to {dtype}")
            data = np.trunc(data)
        info = np.iinfo(dtype)
        lo, hi = int(data.min()), int(data.max())
        if lo < info.min or hi > info.max:
            raise ValueError(
                f"value out of range for {dtype}: [{lo}, {hi}] not in [{info.min}, {info.max}]"
            )
        return

    if dtype.kind == "f" and data.dtype.kind == "f":
        finite = np.abs(data[np.isfinite(data)])
        limit = float(np.finfo(dtype).max)
        if finite.size and float(finite.max()) > limit:
            raise ValueError(f"value out of range for {dtype}: magnitude above {limit:g}")
