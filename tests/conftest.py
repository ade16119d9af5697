"""Pytest fixtures: small equilibrium files written with h5py."""
from pathlib import Path

import h5py
import numpy as np
import pytest


# raw file contents, before axis extrapolation
PSI = np.array([0.1, 0.2, 0.3, 0.4])
THETA = np.linspace(0.0, 2.0 * np.pi, 5)
I_NORM = np.array([0.01, 0.03, 0.06, 0.1])
G_NORM = np.array([1.2, 1.1, 1.05, 1.0])
B_FIELD = np.arange(20, dtype=float).reshape(4, 5) / 20.0 + 0.9
BAXIS = 1.0
RAXIS = 1.65

_DROP = object()


def _default_variables():
    return {
        "Baxis": np.float64(BAXIS),
        "raxis": np.float64(RAXIS),
        "psi": PSI,
        "boozer_theta": THETA,
        "I_norm": I_NORM,
        "g_norm": G_NORM,
        "b_field_norm": B_FIELD,
    }


def write_equilibrium(path: Path, **overrides) -> Path:
    """
    Write an equilibrium file. Keyword overrides replace a variable's data;
    pass DROP to leave a variable out.
    """
    variables = _default_variables()
    variables.update(overrides)

    with h5py.File(path, "w") as h5:
        for name, data in variables.items():
            if data is _DROP:
                continue
            h5.create_dataset(name, data=data)
    return path


@pytest.fixture
def DROP():
    return _DROP


@pytest.fixture
def eq_path(tmp_path):
    """A valid equilibrium file."""
    return write_equilibrium(tmp_path / "phony.nc")


@pytest.fixture
def make_eq(tmp_path):
    """Factory writing an equilibrium file with overridden variables."""
    counter = {"n": 0}

    def _make(**overrides) -> Path:
        counter["n"] += 1
        return write_equilibrium(tmp_path / f"variant_{counter['n']}.nc", **overrides)

    return _make
