"""
aggregate.py
============

Equilibrium: everything read from one reconstructed-equilibrium file.

Build sequence
--------------
    path check   -> FileNotFound
    open store   -> LibraryError
    Scalars      -> first extraction error, unchanged
    Coords
    Currents
    Bfield
    shape check  -> ShapeMismatch (optional, on by default)

The first failure propagates; no partially built Equilibrium is ever
returned. The store is closed before open() returns, and the Equilibrium only
holds its own copies of the data.

Shape contract
--------------
b_field_norm is declared on the file's own (psi, boozer_theta) dimensions, so
its first extent equals the ψ count *before* the axis value is prepended:

    Bfield.shape == (Coords.psi_len - 1, Coords.theta_len)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from tokeq.equilibrium.bfield import Bfield
from tokeq.equilibrium.coords import Coords
from tokeq.equilibrium.currents import Currents
from tokeq.equilibrium.scalars import Scalars
from tokeq.io.config import LoaderConfig
from tokeq.io.errors import ShapeMismatch
from tokeq.io.store import open_store


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True, eq=False)
class Equilibrium:
    """
    Immutable snapshot of an equilibrium file.

    Attributes
    ----------
    path : Path
        File the data was read from.
    scalars, coords, currents, bfield
        Entities, built in that order.
    """
    path: Path
    scalars: Scalars
    coords: Coords
    currents: Currents
    bfield: Bfield

    @classmethod
    def open(cls, path: PathLike, config: Optional[LoaderConfig] = None) -> "Equilibrium":
        """
        Read and validate an equilibrium file.

        Parameters
        ----------
        path : str or Path
            NetCDF-4 / HDF5 equilibrium file.
        config : LoaderConfig or None
            Variable names and checks. None -> defaults.

        Raises
        ------
        EquilibriumError
            The first failure met while building (see module docstring).
        """
        config = config or LoaderConfig()
        names = config.names
        path = Path(path)

        logger.debug("Opening equilibrium file: %s", path)
        with open_store(path) as store:
            scalars = Scalars.build(store, names)
            logger.debug("Built scalars")
            coords = Coords.build(store, names)
            logger.debug("Built coords (psi_len=%d, theta_len=%d)", coords.psi_len, coords.theta_len)
            currents = Currents.build(store, names)
            logger.debug("Built currents")
            bfield = Bfield.build(store, names)
            logger.debug("Built bfield %s", bfield.shape)

        if config.shape_consistency:
            _check_bfield_shape(bfield, coords, names.b)

        eq = cls(path=path, scalars=scalars, coords=coords, currents=currents, bfield=bfield)
        logger.info("Loaded equilibrium: %s", path)
        return eq

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Equilibrium):
            return NotImplemented
        return (
            self.scalars == other.scalars
            and self.coords == other.coords
            and self.currents == other.currents
            and self.bfield == other.bfield
        )

    __hash__ = None

    def summary(self) -> str:
        return (
            f"Equilibrium: {self.path}\n"
            + self.scalars.summary()
            + self.coords.summary()
            + self.currents.summary()
            + self.bfield.summary()
        )

    def __str__(self) -> str:
        return self.summary()


def _check_bfield_shape(bfield: Bfield, coords: Coords, name: str) -> None:
    expected = (coords.psi_len - 1, coords.theta_len)
    if bfield.shape != expected:
        raise ShapeMismatch(name, expected, bfield.shape)


def open_equilibrium(path: PathLike, config: Optional[LoaderConfig] = None) -> Equilibrium:
    """Module-level alias for Equilibrium.open()."""
    return Equilibrium.open(path, config)
