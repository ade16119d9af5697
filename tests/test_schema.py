import numpy as np
import pytest

from tokeq.io.config import VariableNames
from tokeq.io.errors import FileNotFound
from tokeq.io.schema import REQUIRED_VARIABLES, list_structure_problems, validate_equilibrium_file
from tokeq.io.store import open_store


def test_valid_file_has_no_problems(eq_path):
    with open_store(eq_path) as store:
        assert list_structure_problems(store) == []
    validate_equilibrium_file(eq_path)


def test_every_problem_is_reported(make_eq, DROP):
    path = make_eq(Baxis=DROP, psi=np.array([]), b_field_norm=np.ones(3))
    with open_store(path) as store:
        problems = list_structure_problems(store)

    assert len(problems) == 3
    assert problems[0].startswith("'Baxis' (baxis): missing")
    assert problems[1] == "'psi' (psi): empty"
    assert "expected 2-dimensional, found rank 1" in problems[2]


def test_validate_raises_with_full_report(make_eq, DROP):
    path = make_eq(raxis=DROP, g_norm=DROP)
    with pytest.raises(RuntimeError) as exc:
        validate_equilibrium_file(path)
    msg = str(exc.value)
    assert "'raxis'" in msg and "'g_norm'" in msg
    assert str(path) in msg


def test_validate_uses_custom_names(make_eq, DROP):
    path = make_eq(psi=DROP, flux=np.array([0.1, 0.2, 0.3, 0.4]))
    validate_equilibrium_file(path, VariableNames(psi="flux"))


def test_validate_missing_file(tmp_path):
    with pytest.raises(FileNotFound):
        validate_equilibrium_file(tmp_path / "missing.nc")


def test_required_roles_match_variable_names():
    names = VariableNames()
    for role in REQUIRED_VARIABLES:
        assert hasattr(names, role)
