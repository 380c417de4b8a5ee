"""Tests for the combined solar system object query."""

import logging

import jax
import jax.numpy as jnp
import pytest

from ephemjax.bodies import SolarSystemObjectIndex
from ephemjax.ephemerides import equatorial_coordinates_for_planet
from ephemjax.observer import observer_location, set_location_on_earth
from ephemjax.solar_system import solar_system_object_at_date_and_time, solar_system_object_at_jd
from ephemjax.time import julian_day

_J2000 = julian_day(2000, 1, 1, 12, 0, 0)
# Longitude is positive west
_PARIS = (48.8566, -2.3522)


class TestSolarSystemObjectAtJd:
    def test_sun_without_observer(self):
        sun = solar_system_object_at_jd(SolarSystemObjectIndex.SUN, _J2000)
        assert bool(sun.is_valid())
        assert not bool(sun.has_horizontal())
        assert jnp.isnan(sun.horizontal.azimuth)
        assert jnp.isnan(sun.horizontal.altitude)
        assert float(sun.equatorial.right_ascension) == pytest.approx(18.75, abs=2e-2)

    def test_sun_diameter(self):
        sun = solar_system_object_at_jd(SolarSystemObjectIndex.SUN, _J2000)
        # Near perihelion the Sun spans about 32.5 arc-minutes
        assert float(sun.diameter) == pytest.approx(32.53, abs=2e-2)
        assert float(sun.distance) == pytest.approx(0.9833, abs=1e-3)

    def test_sun_with_default_observer(self):
        set_location_on_earth(*_PARIS)
        sun = solar_system_object_at_jd(SolarSystemObjectIndex.SUN, _J2000)
        assert bool(sun.has_horizontal())
        # Winter noon in Paris: low in the south
        assert float(sun.horizontal.altitude) == pytest.approx(90.0 - 48.8566 - 23.03, abs=1.0)
        assert 170.0 < float(sun.horizontal.azimuth) < 190.0

    def test_explicit_observer_overrides_default(self):
        set_location_on_earth(-33.87, -151.21)
        paris = observer_location(*_PARIS)
        sun = solar_system_object_at_jd(SolarSystemObjectIndex.SUN, _J2000, observer=paris)
        assert float(sun.horizontal.altitude) == pytest.approx(18.1, abs=1.0)

    def test_venus_meeus_example(self):
        venus = solar_system_object_at_jd(SolarSystemObjectIndex.VENUS, julian_day(1992, 12, 20))
        eq, distance = equatorial_coordinates_for_planet(SolarSystemObjectIndex.VENUS, julian_day(1992, 12, 20))
        assert float(venus.equatorial.right_ascension) == pytest.approx(float(eq.right_ascension), abs=1e-12)
        assert float(venus.distance) == pytest.approx(float(distance), abs=1e-12)
        assert float(venus.diameter) == pytest.approx(16.688 / 0.910845 / 60.0, abs=1e-3)

    def test_earth_diameter_undefined(self):
        earth = solar_system_object_at_jd(SolarSystemObjectIndex.EARTH, _J2000)
        assert jnp.isnan(earth.diameter)

    def test_unsupported_body(self, caplog):
        with caplog.at_level(logging.WARNING, logger="ephemjax.bodies"):
            result = solar_system_object_at_jd(99, _J2000, observer=observer_location(*_PARIS))
        assert not bool(result.is_valid())
        assert jnp.isnan(result.diameter)
        assert jnp.isnan(result.distance)
        assert not bool(result.has_horizontal())
        assert "Unsupported" in caplog.text

    def test_unsupported_body_warns_once(self, caplog):
        with caplog.at_level(logging.WARNING, logger="ephemjax"):
            solar_system_object_at_jd(42, julian_day(2000, 1, jnp.arange(1, 4)))
        warnings = [r for r in caplog.records if "Unsupported" in r.getMessage()]
        assert len(warnings) == 1

    def test_unsupported_body_shape(self):
        result = solar_system_object_at_jd(42, julian_day(2000, 1, jnp.arange(1, 4)))
        assert result.distance.shape == (3,)
        assert result.equatorial.right_ascension.shape == (3,)
        assert not bool(jnp.any(result.is_valid()))

    def test_integer_body(self):
        by_enum = solar_system_object_at_jd(SolarSystemObjectIndex.JUPITER, _J2000)
        by_int = solar_system_object_at_jd(5, _J2000)
        assert float(by_int.equatorial.declination) == pytest.approx(float(by_enum.equatorial.declination))

    def test_jit_static_body(self):
        paris = observer_location(*_PARIS)
        fn = jax.jit(solar_system_object_at_jd, static_argnums=0)
        result = fn(SolarSystemObjectIndex.MARS, _J2000, paris)
        direct = solar_system_object_at_jd(SolarSystemObjectIndex.MARS, _J2000, paris)
        assert jnp.allclose(result.horizontal.altitude, direct.horizontal.altitude, atol=1e-9)
        assert jnp.allclose(result.diameter, direct.diameter, atol=1e-12)


class TestSolarSystemObjectAtDateAndTime:
    def test_matches_jd_variant(self):
        paris = observer_location(*_PARIS)
        by_date = solar_system_object_at_date_and_time(
            SolarSystemObjectIndex.SATURN, 2021, 8, 2, 22, 30, 0, observer=paris
        )
        by_jd = solar_system_object_at_jd(SolarSystemObjectIndex.SATURN, julian_day(2021, 8, 2, 22, 30, 0), paris)
        assert float(by_date.equatorial.right_ascension) == pytest.approx(float(by_jd.equatorial.right_ascension))
        assert float(by_date.horizontal.azimuth) == pytest.approx(float(by_jd.horizontal.azimuth))
        assert float(by_date.distance) == pytest.approx(float(by_jd.distance))

    def test_equinox_noon_overhead(self):
        # At the March equinox the Sun culminates near the zenith on the equator
        sun = solar_system_object_at_date_and_time(
            SolarSystemObjectIndex.SUN, 2000, 3, 20, 12, 0, 0, observer=observer_location(0.0, 0.0)
        )
        assert float(sun.horizontal.altitude) > 85.0

    def test_logs_query(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="ephemjax.solar_system"):
            solar_system_object_at_date_and_time(SolarSystemObjectIndex.SUN, 2000, 1, 1)
        assert "Solar system query" in caplog.text
