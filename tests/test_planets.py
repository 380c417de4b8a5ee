"""Tests for apparent geocentric planet positions."""

import jax
import jax.numpy as jnp
import pytest

from ephemjax.bodies import PLANETS, SolarSystemObjectIndex
from ephemjax.config import set_dtype
from ephemjax.constants import LIGHT_TIME_MAX_ITERATIONS
from ephemjax.coordinates import heliocentric_to_rectangular, rectangular_to_geocentric
from ephemjax.ephemerides import (
    equatorial_coordinates_for_planet,
    geocentric_coordinates_for_planet,
    heliocentric_coordinates,
)
from ephemjax.time import julian_centuries, julian_day

_OBSERVED_PLANETS = [body for body in PLANETS if body != SolarSystemObjectIndex.EARTH]


class TestGeocentricCoordinatesForPlanet:
    def test_venus_meeus_example(self):
        # Meeus example 33.a, 1992-12-20 0h
        position = geocentric_coordinates_for_planet(SolarSystemObjectIndex.VENUS, julian_day(1992, 12, 20))
        assert float(position.ecliptic.longitude) == pytest.approx(313.08102, abs=1e-2)
        assert float(position.ecliptic.latitude) == pytest.approx(-2.08474, abs=1e-2)
        assert float(position.distance) == pytest.approx(0.910845, abs=1e-3)

    def test_light_time_iterations(self):
        position = geocentric_coordinates_for_planet(SolarSystemObjectIndex.SATURN, julian_day(2010, 5, 1))
        assert 1 <= int(position.iterations) <= LIGHT_TIME_MAX_ITERATIONS

    def test_unsupported_body(self):
        position = geocentric_coordinates_for_planet(99, julian_day(2010, 5, 1))
        assert jnp.isnan(position.ecliptic.longitude)
        assert jnp.isnan(position.ecliptic.latitude)
        assert jnp.isnan(position.distance)
        assert int(position.iterations) == 1


class TestEquatorialCoordinatesForPlanet:
    def test_venus_meeus_example(self):
        eq, distance = equatorial_coordinates_for_planet(SolarSystemObjectIndex.VENUS, julian_day(1992, 12, 20))
        # 21h 04m 41.454s, -18 53' 16.84"
        assert float(eq.right_ascension) == pytest.approx(21.078182, abs=2e-3)
        assert float(eq.declination) == pytest.approx(-18.88801, abs=2e-2)
        assert float(distance) == pytest.approx(0.910845, abs=1e-3)

    def test_unsupported_body(self):
        eq, distance = equatorial_coordinates_for_planet(99, julian_day(2000, 1, 1))
        assert not bool(eq.is_valid())
        assert jnp.isnan(distance)

    @pytest.mark.parametrize(
        "body, d_min, d_max",
        [
            (SolarSystemObjectIndex.MERCURY, 0.5, 1.5),
            (SolarSystemObjectIndex.VENUS, 0.25, 1.75),
            (SolarSystemObjectIndex.MARS, 0.35, 2.7),
            (SolarSystemObjectIndex.JUPITER, 3.9, 6.5),
            (SolarSystemObjectIndex.SATURN, 7.9, 11.1),
            (SolarSystemObjectIndex.URANUS, 17.2, 21.2),
            (SolarSystemObjectIndex.NEPTUNE, 28.7, 31.4),
        ],
    )
    def test_ranges(self, body, d_min, d_max):
        jd = julian_day(2024, 1, jnp.arange(1, 366, 7))
        eq, distance = equatorial_coordinates_for_planet(body, jd)
        assert jnp.all((eq.right_ascension >= 0.0) & (eq.right_ascension < 24.0))
        # Every planet stays within a few degrees of the ecliptic
        assert jnp.all(jnp.abs(eq.declination) < 30.0)
        assert jnp.all((distance > d_min) & (distance < d_max))

    @pytest.mark.parametrize("body", _OBSERVED_PLANETS)
    def test_jit_static_body(self, body):
        fn = jax.jit(equatorial_coordinates_for_planet, static_argnums=0)
        jd = julian_day(2015, 7, 14, 11, 49, 0)
        eq_jit, distance_jit = fn(body, jd)
        eq, distance = equatorial_coordinates_for_planet(body, jd)
        assert jnp.allclose(eq_jit.right_ascension, eq.right_ascension, atol=1e-9)
        assert jnp.allclose(eq_jit.declination, eq.declination, atol=1e-9)
        assert jnp.allclose(distance_jit, distance, atol=1e-12)

    def test_vmap_over_dates(self):
        days = jnp.arange(1, 11)
        jd = julian_day(2020, 2, days)
        batched = jax.vmap(lambda j: equatorial_coordinates_for_planet(SolarSystemObjectIndex.MARS, j))(jd)
        direct = equatorial_coordinates_for_planet(SolarSystemObjectIndex.MARS, jd)
        assert jnp.allclose(batched[0].right_ascension, direct[0].right_ascension, atol=1e-9)
        assert jnp.allclose(batched[1], direct[1], atol=1e-12)

    def test_float32(self):
        set_dtype(jnp.float32)
        eq, distance = equatorial_coordinates_for_planet(SolarSystemObjectIndex.VENUS, julian_day(1992, 12, 20))
        assert eq.right_ascension.dtype == jnp.float32
        assert jnp.abs(eq.right_ascension - 21.078182) < 5e-3
        assert jnp.abs(distance - 0.910845) < 2e-3


def _geometric_distance(body, jd):
    T0 = julian_centuries(jd)
    rect = heliocentric_to_rectangular(
        heliocentric_coordinates(body, T0),
        heliocentric_coordinates(SolarSystemObjectIndex.EARTH, T0),
    )
    return rectangular_to_geocentric(rect)[1]


class TestLightTime:
    """Venus on 1992-12-20 is closing in on the Earth; light-time moves its distance by ~4e-5 AU."""

    def test_correction_applied(self):
        position = geocentric_coordinates_for_planet(SolarSystemObjectIndex.VENUS, julian_day(1992, 12, 20))
        geometric = _geometric_distance(SolarSystemObjectIndex.VENUS, julian_day(1992, 12, 20))
        assert int(position.iterations) > 1
        assert float(jnp.abs(position.distance - geometric)) > 2e-5

    def test_correction_applied_float32(self):
        reference = geocentric_coordinates_for_planet(SolarSystemObjectIndex.VENUS, julian_day(1992, 12, 20))

        set_dtype(jnp.float32)
        position = geocentric_coordinates_for_planet(SolarSystemObjectIndex.VENUS, julian_day(1992, 12, 20))
        geometric = _geometric_distance(SolarSystemObjectIndex.VENUS, julian_day(1992, 12, 20))
        assert position.distance.dtype == jnp.float32
        assert int(position.iterations) > 1
        assert float(jnp.abs(position.distance - geometric)) > 2e-5
        assert float(position.distance) == pytest.approx(float(reference.distance), abs=1.5e-5)

    @pytest.mark.parametrize("dtype", [jnp.float32, jnp.float64])
    def test_inner_planets_iterate(self, dtype):
        set_dtype(dtype)
        jd = julian_day(2024, 1, jnp.arange(1, 366, 30))
        for body in (SolarSystemObjectIndex.MERCURY, SolarSystemObjectIndex.MARS):
            position = geocentric_coordinates_for_planet(body, jd)
            assert 1 < int(position.iterations) <= LIGHT_TIME_MAX_ITERATIONS
