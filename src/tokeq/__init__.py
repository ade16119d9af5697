"""
tokeq
=====

Validated loading of reconstructed tokamak equilibria and 1D interpolants.

    from tokeq import Equilibrium, Interpolant, SplineKind

    eq = Equilibrium.open("equilibrium.nc")
    g = Interpolant.build(SplineKind.CUBIC, eq.coords.psi, eq.currents.g)
"""

from tokeq.equilibrium import Bfield, Coords, Currents, Equilibrium, Scalars, open_equilibrium
from tokeq.interp import Interpolant, SplineKind
from tokeq.io.config import LoaderConfig, VariableNames

__all__ = [
    "Bfield",
    "Coords",
    "Currents",
    "Equilibrium",
    "Interpolant",
    "LoaderConfig",
    "Scalars",
    "SplineKind",
    "VariableNames",
    "open_equilibrium",
]
