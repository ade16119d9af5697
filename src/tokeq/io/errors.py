"""
errors.py
=========

Exception taxonomy for loading equilibrium files.

Every failure a caller can see while opening a file or building an entity is a
subclass of EquilibriumError. Each extraction step raises the error for the
*first* structural problem it finds, so the exception always names the
variable that is actually broken:

    exists?        -> VariableNotFound
    has data?      -> EmptyVariable
    right rank?    -> NotScalar / Not1D / Not2D
    bulk read ok?  -> GetValuesError

StoreReadError is the adapter-level read failure. extract.py converts it into
GetValuesError, so it never escapes to callers of the extraction functions.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple, Union


# ============================================================
# BASE
# ============================================================

class EquilibriumError(Exception):
    """Base class for every recoverable error raised while loading an equilibrium."""


# ============================================================
# FILE LEVEL
# ============================================================

class FileNotFound(EquilibriumError):
    """Given path does not reference an existing file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"'{self.path}': File not found.")


class LibraryError(EquilibriumError):
    """The array-file library rejected the file. Wraps the underlying error."""

    def __init__(self, source: BaseException, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Wrapped library error: {reason} ({source}).")


# ============================================================
# VARIABLE LEVEL
# ============================================================

class VariableError(EquilibriumError):
    """Base for errors tied to one named variable."""

    _template = "'{name}' variable error."

    def __init__(self, name: str):
        self.name = name
        super().__init__(self._template.format(name=name))


class VariableNotFound(VariableError):
    _template = "'{name}' variable not found."


class EmptyVariable(VariableError):
    _template = "'{name}' variable is empty."


class NotScalar(VariableError):
    _template = "'{name}' variable is not scalar."


class Not1D(VariableError):
    _template = "'{name}' variable is not 1-dimensional."


class Not2D(VariableError):
    _template = "'{name}' variable is not 2-dimensional."


class GetValuesError(VariableError):
    """
    Bulk typed read failed after every shape check passed.

    Should be unreachable for well-formed files; the underlying cause is
    available as __cause__.
    """

    _template = "Error extracting values from '{name}' variable."


class ShapeMismatch(VariableError):
    """A variable's shape disagrees with the coordinate lengths it is indexed by."""

    def __init__(self, name: str, expected: Tuple[int, ...], found: Tuple[int, ...]):
        self.expected = tuple(expected)
        self.found = tuple(found)
        EquilibriumError.__init__(
            self,
            f"'{name}' variable has shape {self.found}, expected {self.expected}.",
        )
        self.name = name


# ============================================================
# ADAPTER LEVEL
# ============================================================

class StoreReadError(Exception):
    """Raised by VariableStore.read_into when the typed copy fails."""

    def __init__(self, name: str, reason: Optional[str] = None):
        self.name = name
        self.reason = reason
        msg = f"Cannot read '{name}'"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
