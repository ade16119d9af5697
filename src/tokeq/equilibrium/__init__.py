"""
tokeq.equilibrium
=================

Domain entities built from an equilibrium file, and the Equilibrium aggregate.
"""

from tokeq.equilibrium.aggregate import Equilibrium, open_equilibrium
from tokeq.equilibrium.bfield import Bfield
from tokeq.equilibrium.coords import Coords
from tokeq.equilibrium.currents import Currents
from tokeq.equilibrium.scalars import Scalars

__all__ = ["Bfield", "Coords", "Currents", "Equilibrium", "Scalars", "open_equilibrium"]
