"""Tests for the VSOP87 series evaluator and heliocentric positions."""

import logging

import jax
import jax.numpy as jnp
import pytest

from ephemjax.bodies import PLANETS, SolarSystemObjectIndex
from ephemjax.ephemerides import (
    VSOP87_SERIES,
    evaluate_vsop87,
    heliocentric_coordinates,
    sum_vsop87_coefs,
)

# 1992-12-20 0h TD, Meeus example 32.a
_T_32A = (2448976.5 - 2451545.0) / 36525.0

# Number of order tables (L, B, R) per planet
_ORDERS = {
    SolarSystemObjectIndex.MERCURY: (6, 5, 4),
    SolarSystemObjectIndex.VENUS: (6, 5, 5),
    SolarSystemObjectIndex.EARTH: (6, 2, 5),
    SolarSystemObjectIndex.MARS: (6, 5, 5),
    SolarSystemObjectIndex.JUPITER: (6, 6, 6),
    SolarSystemObjectIndex.SATURN: (6, 6, 6),
    SolarSystemObjectIndex.URANUS: (5, 5, 5),
    SolarSystemObjectIndex.NEPTUNE: (5, 5, 4),
}


class TestSeriesEvaluator:
    def test_empty_table(self):
        assert float(sum_vsop87_coefs((), 0.3)) == 0.0

    def test_constant_term(self):
        assert float(sum_vsop87_coefs(((2.0, 0.0, 0.0),), 0.7)) == pytest.approx(2.0)

    def test_periodic_term(self):
        table = ((1.0, 0.0, 1.0), (0.5, jnp.pi / 2, 0.0))
        assert float(sum_vsop87_coefs(table, jnp.pi)) == pytest.approx(-1.0, abs=1e-12)

    def test_vectorized(self):
        T = jnp.array([0.0, 1.0, 2.0])
        value = sum_vsop87_coefs(((3.0, 0.0, 0.0),), T)
        assert value.shape == (3,)
        assert jnp.allclose(value, 3.0)

    def test_polynomial_combination(self):
        tables = (((1e8, 0.0, 0.0),), ((1e8, 0.0, 0.0),), ((1e8, 0.0, 0.0),))
        # 1 + T + T^2 at T = 2
        assert float(evaluate_vsop87(tables, 2.0)) == pytest.approx(7.0)

    @pytest.mark.parametrize("body", PLANETS)
    def test_table_orders(self, body):
        series = VSOP87_SERIES[body]
        assert (len(series.L), len(series.B), len(series.R)) == _ORDERS[body]

    @pytest.mark.parametrize("body", PLANETS)
    def test_terms_are_triples(self, body):
        series = VSOP87_SERIES[body]
        for tables in series:
            for table in tables:
                assert len(table) > 0
                assert all(len(term) == 3 for term in table)


class TestHeliocentricCoordinates:
    def test_venus_meeus_example(self):
        hc = heliocentric_coordinates(SolarSystemObjectIndex.VENUS, _T_32A)
        assert float(hc.longitude) == pytest.approx(26.11428, abs=1e-2)
        assert float(hc.latitude) == pytest.approx(-2.62070, abs=1e-2)
        assert float(hc.radius) == pytest.approx(0.724603, abs=1e-4)

    def test_earth_meeus_example(self):
        # Earth at the epoch of Meeus example 33.a
        hc = heliocentric_coordinates(SolarSystemObjectIndex.EARTH, _T_32A)
        assert float(hc.longitude) == pytest.approx(88.35704, abs=1e-2)
        assert float(hc.latitude) == pytest.approx(0.00014, abs=1e-3)
        assert float(hc.radius) == pytest.approx(0.983824, abs=1e-4)

    def test_earth_j2000(self):
        # Perihelion season: the radius is close to 1 - e
        hc = heliocentric_coordinates(SolarSystemObjectIndex.EARTH, 0.0)
        assert float(hc.radius) == pytest.approx(0.98333, abs=1e-3)
        assert float(hc.longitude) == pytest.approx(100.38, abs=2e-2)

    def test_sun_at_origin(self):
        hc = heliocentric_coordinates(SolarSystemObjectIndex.SUN, 0.1)
        assert float(hc.longitude) == 0.0
        assert float(hc.latitude) == 0.0
        assert float(hc.radius) == 0.0

    def test_unsupported_body(self, caplog):
        with caplog.at_level(logging.WARNING, logger="ephemjax.bodies"):
            hc = heliocentric_coordinates(99, 0.1)
        assert jnp.isnan(hc.longitude)
        assert jnp.isnan(hc.latitude)
        assert jnp.isnan(hc.radius)
        assert not bool(hc.is_valid())
        assert "Unsupported" in caplog.text

    @pytest.mark.parametrize(
        "body, r_min, r_max",
        [
            (SolarSystemObjectIndex.MERCURY, 0.30, 0.47),
            (SolarSystemObjectIndex.VENUS, 0.71, 0.73),
            (SolarSystemObjectIndex.EARTH, 0.98, 1.02),
            (SolarSystemObjectIndex.MARS, 1.37, 1.67),
            (SolarSystemObjectIndex.JUPITER, 4.9, 5.5),
            (SolarSystemObjectIndex.SATURN, 8.9, 10.2),
            (SolarSystemObjectIndex.URANUS, 18.2, 20.2),
            (SolarSystemObjectIndex.NEPTUNE, 29.7, 30.4),
        ],
    )
    def test_ranges(self, body, r_min, r_max):
        T = jnp.linspace(-1.0, 1.0, 41)
        hc = heliocentric_coordinates(body, T)
        assert jnp.all((hc.longitude >= 0.0) & (hc.longitude < 360.0))
        assert jnp.all(jnp.abs(hc.latitude) < 8.0)
        assert jnp.all((hc.radius > r_min) & (hc.radius < r_max))
        assert jnp.all(hc.is_valid())

    def test_jit_static_body(self):
        fn = jax.jit(heliocentric_coordinates, static_argnums=0)
        hc_jit = fn(SolarSystemObjectIndex.MARS, 0.15)
        hc = heliocentric_coordinates(SolarSystemObjectIndex.MARS, 0.15)
        assert jnp.allclose(hc_jit.longitude, hc.longitude)
        assert jnp.allclose(hc_jit.radius, hc.radius)

    def test_vmap(self):
        T = jnp.linspace(0.0, 0.5, 6)
        batched = jax.vmap(lambda t: heliocentric_coordinates(SolarSystemObjectIndex.JUPITER, t))(T)
        direct = heliocentric_coordinates(SolarSystemObjectIndex.JUPITER, T)
        assert jnp.allclose(batched.longitude, direct.longitude)
