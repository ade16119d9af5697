"""
schema.py
=========

Preflight structure check for equilibrium files.

Purpose
-------
Equilibrium.open() stops at the first broken variable. Before a long analysis
it is more useful to see *every* problem in a file at once, so this module
walks all required variables and reports each one that is missing, empty or
of the wrong rank.

Design principles
-----------------
• Conservative: checks existence, emptiness and rank (not physics correctness)
• Produces clear, actionable error messages
• Uses the same VariableStore queries as the extraction layer

Usage
-----
    validate_equilibrium_file("eq.nc")           # raises RuntimeError
    problems = list_structure_problems(store)    # list[str]
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Union

from tokeq.io.config import VariableNames
from tokeq.io.store import VariableStore, open_store


PathLike = Union[str, Path]


# ============================================================
# SCHEMA DEFINITION
# ============================================================

# logical role -> required rank
REQUIRED_VARIABLES: Dict[str, int] = {
    "baxis": 0,
    "raxis": 0,
    "psi": 1,
    "theta": 1,
    "i": 1,
    "g": 1,
    "b": 2,
}

_RANK_WORDS = {0: "scalar", 1: "1-dimensional", 2: "2-dimensional"}


# ============================================================
# PUBLIC API
# ============================================================

def list_structure_problems(
    store: VariableStore,
    names: Optional[VariableNames] = None,
) -> List[str]:
    """
    Return one line per structural problem, in REQUIRED_VARIABLES order.

    An empty list means every required variable exists, has data and has the
    expected rank.
    """
    names = names or VariableNames()
    problems: List[str] = []

    for role, rank in REQUIRED_VARIABLES.items():
        name = getattr(names, role)
        var = store.lookup(name)
        if var is None:
            problems.append(f"'{name}' ({role}): missing")
            continue
        if store.length(var) == 0:
            problems.append(f"'{name}' ({role}): empty")
            continue
        found = store.rank(var)
        if found != rank:
            problems.append(
                f"'{name}' ({role}): expected {_RANK_WORDS[rank]}, found rank {found}"
            )

    return problems


def validate_equilibrium_file(path: PathLike, names: Optional[VariableNames] = None) -> None:
    """
    Validate that an equilibrium file has every required variable.

    Raises
    ------
    FileNotFound, LibraryError
        As Equilibrium.open() does.
    RuntimeError
        If any required variable is missing, empty or of the wrong rank.
    """
    with open_store(path) as store:
        problems = list_structure_problems(store, names)
        if problems:
            raise RuntimeError(_format_problems_message(store.path, problems))


# ============================================================
# INTERNAL HELPERS
# ============================================================

def _format_problems_message(path: Path, problems: List[str]) -> str:
    lines = [
        "Equilibrium file structure check failed.",
        f"  file: {path}",
        "",
        "Problems:",
    ]
    lines.extend([f"  - {p}" for p in problems])
    lines.append("")
    lines.append("Hint:")
    lines.append(
        "Variable names can be remapped in the loader config under 'variables:'."
    )
    return "\n".join(lines)
