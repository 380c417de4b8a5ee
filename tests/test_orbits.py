"""Tests for the mean orbital elements and the Kepler solver."""

import jax
import jax.numpy as jnp
import pytest

from ephemjax.bodies import PLANETS, SolarSystemObjectIndex
from ephemjax.orbits import anomaly_eccentric_to_mean, kepler, planetary_orbit

_KEPLER_RESIDUAL_DEG_TOL = 1e-4


def _wrapped_difference(a, b):
    return (a - b + 180.0) % 360.0 - 180.0


class TestKepler:
    def test_meeus_example(self):
        # Meeus example 30.a: M = 5 deg, e = 0.1
        E = kepler(5.0, 0.1)
        assert float(E) == pytest.approx(5.554589, abs=1e-6)

    def test_circular_orbit(self):
        assert float(kepler(123.0, 0.0)) == pytest.approx(123.0, abs=1e-9)

    @pytest.mark.parametrize("e", [0.0, 0.1, 0.5, 0.9])
    @pytest.mark.parametrize("M", [0.0, 30.0, 90.0, 135.0, 180.0, 225.0, 270.0, 330.0])
    def test_residual(self, e, M):
        E = kepler(M, e)
        M_back = anomaly_eccentric_to_mean(E, e)
        assert jnp.abs(_wrapped_difference(M_back, M)) < _KEPLER_RESIDUAL_DEG_TOL

    def test_vectorized(self):
        M = jnp.array([10.0, 100.0, 200.0])
        E = kepler(M, 0.3)
        assert E.shape == (3,)
        assert jnp.all(jnp.abs(_wrapped_difference(anomaly_eccentric_to_mean(E, 0.3), M)) < 1e-6)

    def test_jit_and_vmap(self):
        M = jnp.linspace(0.0, 350.0, 8)
        E = jax.jit(jax.vmap(kepler, in_axes=(0, None)))(M, 0.2)
        assert jnp.all(jnp.isfinite(E))

    def test_eccentric_to_mean_radians(self):
        M = anomaly_eccentric_to_mean(jnp.pi / 2, 0.1, use_degrees=False)
        assert float(M) == pytest.approx(jnp.pi / 2 - 0.1, abs=1e-12)


class TestPlanetaryOrbit:
    def test_earth_special_case(self):
        elements = planetary_orbit(SolarSystemObjectIndex.EARTH, 0.0)
        assert float(elements.i) == 0.0
        assert jnp.isnan(elements.omega)
        assert jnp.isnan(elements.w)
        assert bool(elements.is_valid())

    def test_earth_j2000_values(self):
        elements = planetary_orbit(SolarSystemObjectIndex.EARTH, 0.0)
        assert float(elements.L) == pytest.approx(100.466457, abs=1e-6)
        assert float(elements.a) == pytest.approx(1.000001018, abs=1e-9)
        assert float(elements.e) == pytest.approx(0.01670863, abs=1e-9)
        assert float(elements.pi) == pytest.approx(102.937348, abs=1e-6)
        assert float(elements.M) == pytest.approx(357.529109, abs=1e-6)

    def test_mercury_j2000_values(self):
        elements = planetary_orbit(SolarSystemObjectIndex.MERCURY, 0.0)
        assert float(elements.L) == pytest.approx(252.250906, abs=1e-6)
        assert float(elements.a) == pytest.approx(0.387098310, abs=1e-9)
        assert float(elements.i) == pytest.approx(7.004986, abs=1e-6)

    @pytest.mark.parametrize("body", [SolarSystemObjectIndex.SUN, 42])
    def test_unsupported_body(self, body):
        elements = planetary_orbit(body, 0.1)
        assert all(bool(jnp.isnan(field)) for field in elements)
        assert not bool(elements.is_valid())

    @pytest.mark.parametrize("body", [b for b in PLANETS if b != SolarSystemObjectIndex.EARTH])
    def test_angles_normalized(self, body):
        T = jnp.linspace(-2.0, 2.0, 9)
        elements = planetary_orbit(body, T)
        for angle in (elements.L, elements.i, elements.omega, elements.pi, elements.M, elements.w):
            assert jnp.all((angle >= 0.0) & (angle < 360.0))
        assert jnp.all((elements.e >= 0.0) & (elements.e < 1.0))

    def test_integer_body_identifier(self):
        by_enum = planetary_orbit(SolarSystemObjectIndex.MARS, 0.2)
        by_int = planetary_orbit(4, 0.2)
        assert jnp.allclose(jnp.array(by_enum[:6]), jnp.array(by_int[:6]))
