"""
tokeq.interp
============

Validated 1D interpolants over extracted arrays.
"""

from tokeq.interp.errors import (
    DatasetMismatch,
    EmptyDataset,
    EngineInitFailed,
    InterpolationError,
    OutOfDomain,
    UnsortedDataset,
)
from tokeq.interp.kinds import SplineKind
from tokeq.interp.spline import Interpolant

__all__ = [
    "DatasetMismatch",
    "EmptyDataset",
    "EngineInitFailed",
    "Interpolant",
    "InterpolationError",
    "OutOfDomain",
    "SplineKind",
    "UnsortedDataset",
]
