"""Tests for the ecliptic, equatorial and horizontal frame transforms."""

import jax
import jax.numpy as jnp
import pytest

from ephemjax.coordinates import EquatorialCoordinates, HeliocentricCoordinates
from ephemjax.coordinates import heliocentric_to_rectangular, rectangular_to_geocentric
from ephemjax.frames import (
    ecliptic_to_equatorial,
    equatorial_to_horizontal,
    equatorial_to_horizontal_for_observer,
)
from ephemjax.observer import UNKNOWN_LOCATION, observer_location, set_location_on_earth

# Meeus example 13.b: Venus from the US Naval Observatory, 1987-04-10 19:21 UT
_VENUS_13B = EquatorialCoordinates(right_ascension=23.1546225, declination=-6.7198917)
_APPARENT_SIDEREAL_13B = 8.5824592
# Longitude is positive west
_USNO = (38.9213889, 77.0655556)


class TestEclipticToEquatorial:
    def test_meeus_pollux(self):
        # Meeus example 13.a
        eq = ecliptic_to_equatorial(113.215630, 6.684170, 23.4392911)
        assert float(eq.right_ascension) == pytest.approx(7.7552628, abs=1e-6)
        assert float(eq.declination) == pytest.approx(28.026183, abs=1e-5)

    def test_equinox(self):
        eq = ecliptic_to_equatorial(0.0, 0.0, 23.44)
        assert float(eq.right_ascension) == pytest.approx(0.0, abs=1e-12)
        assert float(eq.declination) == pytest.approx(0.0, abs=1e-12)

    def test_solstice(self):
        eq = ecliptic_to_equatorial(90.0, 0.0, 23.44)
        assert float(eq.right_ascension) == pytest.approx(6.0, abs=1e-9)
        assert float(eq.declination) == pytest.approx(23.44, abs=1e-9)

    def test_ranges(self):
        lon = jnp.linspace(0.0, 359.0, 360)
        eq = ecliptic_to_equatorial(lon, 5.0, 23.44)
        assert jnp.all((eq.right_ascension >= 0.0) & (eq.right_ascension < 24.0))
        assert jnp.all(jnp.abs(eq.declination) <= 90.0)


class TestEquatorialToHorizontal:
    def test_meeus_example(self):
        # Meeus example 13.b, H = 64.352133 deg
        hz = equatorial_to_horizontal(64.352133, _VENUS_13B.declination, _USNO[0])
        # Meeus gives A = 68.0337 deg measured from the south
        assert float(hz.azimuth) == pytest.approx(248.0337, abs=1e-3)
        assert float(hz.altitude) == pytest.approx(15.1249, abs=1e-3)

    def test_upper_culmination(self):
        # On the meridian the altitude is 90 - |lat - dec|
        hz = equatorial_to_horizontal(0.0, 30.0, 40.0)
        assert float(hz.altitude) == pytest.approx(80.0, abs=1e-9)
        assert float(hz.azimuth) == pytest.approx(180.0, abs=1e-9)

    def test_meridian_south(self):
        hz = equatorial_to_horizontal(0.0, 0.0, 45.0)
        assert float(hz.azimuth) == pytest.approx(180.0, abs=1e-9)
        assert float(hz.altitude) == pytest.approx(45.0, abs=1e-9)

    def test_azimuth_range(self):
        H = jnp.linspace(-180.0, 180.0, 73)
        hz = equatorial_to_horizontal(H, 20.0, 50.0)
        assert jnp.all((hz.azimuth >= 0.0) & (hz.azimuth < 360.0))
        assert jnp.all(jnp.abs(hz.altitude) <= 90.0)

    def test_for_observer_meeus_example(self):
        observer = observer_location(*_USNO)
        hz = equatorial_to_horizontal_for_observer(_VENUS_13B, _APPARENT_SIDEREAL_13B, observer)
        assert float(hz.azimuth) == pytest.approx(248.0337, abs=2e-3)
        assert float(hz.altitude) == pytest.approx(15.1249, abs=2e-3)

    def test_for_observer_west_longitude(self):
        # A target on the Greenwich meridian has not yet culminated 15 deg west
        target = EquatorialCoordinates(right_ascension=10.0, declination=0.0)
        hz = equatorial_to_horizontal_for_observer(target, 10.0, observer_location(0.0, 15.0))
        expected = equatorial_to_horizontal(-15.0, 0.0, 0.0)
        assert float(hz.azimuth) == pytest.approx(float(expected.azimuth), abs=1e-9)
        assert float(hz.altitude) == pytest.approx(75.0, abs=1e-9)
        assert 0.0 < float(hz.azimuth) < 180.0

    def test_for_observer_east_longitude(self):
        target = EquatorialCoordinates(right_ascension=10.0, declination=0.0)
        hz = equatorial_to_horizontal_for_observer(target, 10.0, observer_location(0.0, -15.0))
        assert float(hz.altitude) == pytest.approx(75.0, abs=1e-9)
        assert 180.0 < float(hz.azimuth) < 360.0

    def test_for_observer_unknown(self):
        hz = equatorial_to_horizontal_for_observer(_VENUS_13B, _APPARENT_SIDEREAL_13B, UNKNOWN_LOCATION)
        assert jnp.isnan(hz.azimuth)
        assert jnp.isnan(hz.altitude)
        assert not bool(hz.is_valid())

    def test_for_observer_uses_default_location(self):
        hz = equatorial_to_horizontal_for_observer(_VENUS_13B, _APPARENT_SIDEREAL_13B)
        assert not bool(hz.is_valid())

        set_location_on_earth(*_USNO)
        hz = equatorial_to_horizontal_for_observer(_VENUS_13B, _APPARENT_SIDEREAL_13B)
        assert bool(hz.is_valid())
        assert float(hz.altitude) == pytest.approx(15.1249, abs=2e-3)

    def test_for_observer_jit(self):
        observer = observer_location(*_USNO)
        hz = jax.jit(equatorial_to_horizontal_for_observer)(_VENUS_13B, _APPARENT_SIDEREAL_13B, observer)
        assert float(hz.altitude) == pytest.approx(15.1249, abs=2e-3)


class TestRectangular:
    def test_difference_along_axis(self):
        target = HeliocentricCoordinates(0.0, 0.0, 5.0)
        earth = HeliocentricCoordinates(0.0, 0.0, 1.0)
        rect = heliocentric_to_rectangular(target, earth)
        assert float(rect.x) == pytest.approx(4.0)
        assert float(rect.y) == pytest.approx(0.0, abs=1e-12)
        assert float(rect.z) == pytest.approx(0.0, abs=1e-12)

    def test_opposite_sides(self):
        target = HeliocentricCoordinates(90.0, 0.0, 2.0)
        earth = HeliocentricCoordinates(270.0, 0.0, 1.0)
        geo, distance = rectangular_to_geocentric(heliocentric_to_rectangular(target, earth))
        assert float(distance) == pytest.approx(3.0, abs=1e-12)
        assert float(geo.longitude) == pytest.approx(90.0, abs=1e-9)

    def test_latitude_above_ecliptic(self):
        target = HeliocentricCoordinates(0.0, 90.0, 1.0)
        earth = HeliocentricCoordinates(180.0, 0.0, 1.0)
        geo, distance = rectangular_to_geocentric(heliocentric_to_rectangular(target, earth))
        assert float(distance) == pytest.approx(2.0**0.5, abs=1e-12)
        assert float(geo.latitude) == pytest.approx(45.0, abs=1e-9)

    def test_longitude_normalized(self):
        target = HeliocentricCoordinates(0.0, 0.0, 1.0)
        earth = HeliocentricCoordinates(80.0, 0.0, 1.0)
        geo, _ = rectangular_to_geocentric(heliocentric_to_rectangular(target, earth))
        assert 0.0 <= float(geo.longitude) < 360.0
