import numpy as np
import pytest

from conftest import B_FIELD, G_NORM, I_NORM, PSI, THETA
from tokeq.equilibrium import Bfield, Coords, Currents, Scalars
from tokeq.io.config import VariableNames
from tokeq.io.errors import Not1D, VariableNotFound
from tokeq.io.store import open_store


def test_scalars(eq_path):
    with open_store(eq_path) as store:
        s = Scalars.build(store)
    assert s.baxis == 1.0
    assert s.raxis == 1.65
    assert s.psi_wall == PSI[-1]


def test_scalars_build_twice_is_bit_identical(eq_path):
    with open_store(eq_path) as store:
        a = Scalars.build(store)
    with open_store(eq_path) as store:
        b = Scalars.build(store)
    assert a == b
    assert np.float64(a.raxis).tobytes() == np.float64(b.raxis).tobytes()


def test_scalars_order_reports_baxis_first(make_eq, DROP):
    path = make_eq(Baxis=DROP, raxis=DROP)
    with open_store(path) as store:
        with pytest.raises(VariableNotFound) as exc:
            Scalars.build(store)
    assert exc.value.name == "Baxis"


def test_scalars_psi_wall_requires_1d_psi(make_eq):
    path = make_eq(psi=np.ones((2, 2)))
    with open_store(path) as store:
        with pytest.raises(Not1D):
            Scalars.build(store)


def test_coords(eq_path):
    with open_store(eq_path) as store:
        c = Coords.build(store)

    assert c.psi_len == PSI.size + 1
    assert c.psi[0] == 0.0
    np.testing.assert_array_equal(c.psi[1:], PSI)
    np.testing.assert_array_equal(c.theta, THETA)
    assert c.theta_len == THETA.size
    assert c.psi_span == (0.0, PSI[-1])
    assert c.theta_span == (THETA[0], THETA[-1])


def test_coords_arrays_are_read_only(eq_path):
    with open_store(eq_path) as store:
        c = Coords.build(store)
    with pytest.raises(ValueError):
        c.psi[0] = 1.0


def test_currents(eq_path):
    with open_store(eq_path) as store:
        cur = Currents.build(store)

    assert cur.g[0] == cur.g[1] == G_NORM[0]
    assert cur.i[0] == 0.0
    np.testing.assert_array_equal(cur.i[1:], I_NORM)
    assert cur.i_len == cur.g_len == I_NORM.size + 1
    assert cur.g_span == (G_NORM[0], G_NORM[-1])
    assert cur.i_span == (0.0, I_NORM[-1])


def test_currents_build_g_before_i(make_eq, DROP):
    path = make_eq(g_norm=DROP, I_norm=DROP)
    with open_store(path) as store:
        with pytest.raises(VariableNotFound) as exc:
            Currents.build(store)
    assert exc.value.name == "g_norm"


def test_bfield(eq_path):
    with open_store(eq_path) as store:
        b = Bfield.build(store)
    assert b.shape == (4, 5)
    assert b.psi_len == 4 and b.theta_len == 5
    np.testing.assert_array_equal(b.b, B_FIELD)
    assert b.b_span == (B_FIELD.min(), B_FIELD.max())


def test_custom_variable_names(make_eq, DROP):
    path = make_eq(psi=DROP, flux=PSI)
    names = VariableNames(psi="flux")
    with open_store(path) as store:
        c = Coords.build(store, names)
    assert c.psi_len == PSI.size + 1


def test_entity_equality_compares_contents(eq_path):
    with open_store(eq_path) as store:
        a = Coords.build(store)
        b = Coords.build(store)
    assert a == b
    assert a is not b


def test_summaries_show_spans_and_lengths(eq_path):
    with open_store(eq_path) as store:
        text = str(Coords.build(store)) + str(Currents.build(store)) + str(Scalars.build(store))
    assert "Coords:" in text
    assert "len = 5" in text
    assert "baxis = 1.00000 [T]" in text
    assert "g = [1.20000, ..., 1.00000]" in text
