"""Tests for Greenwich sidereal time."""

import jax
import jax.numpy as jnp
import pytest

from ephemjax.config import set_dtype
from ephemjax.frames import (
    apparent_greenwich_sidereal_time,
    apparent_sidereal_time_at_date_and_time,
    mean_greenwich_sidereal_time,
    mean_greenwich_sidereal_time_at_date_and_time,
)
from ephemjax.time import julian_day


class TestMeanSiderealTime:
    def test_meeus_midnight(self):
        # Meeus example 12.a: 13h 10m 46.3668s
        gmst = mean_greenwich_sidereal_time(julian_day(1987, 4, 10))
        assert float(gmst) == pytest.approx(13.1795463, abs=1e-5)

    def test_meeus_evening(self):
        # Meeus example 12.b: 8h 34m 57.0896s
        gmst = mean_greenwich_sidereal_time(julian_day(1987, 4, 10, 19, 21, 0))
        assert float(gmst) == pytest.approx(8.5825249, abs=1e-5)

    def test_morning_before_noon(self):
        # Before noon UT the Julian day began on the previous civil date
        midnight = mean_greenwich_sidereal_time(julian_day(1987, 4, 10))
        morning = mean_greenwich_sidereal_time(julian_day(1987, 4, 10, 6, 0, 0))
        expected = (float(midnight) + 6.0 * 1.00273790935) % 24.0
        assert float(morning) == pytest.approx(expected, abs=1e-6)

    def test_date_and_time_variant(self):
        direct = mean_greenwich_sidereal_time(julian_day(1987, 4, 10, 19, 21, 0))
        by_date = mean_greenwich_sidereal_time_at_date_and_time(1987, 4, 10, 19, 21, 0)
        assert float(by_date) == pytest.approx(float(direct), abs=1e-12)

    def test_hourly_advance(self):
        hours = jnp.arange(0, 24)
        gmst = mean_greenwich_sidereal_time(julian_day(2024, 3, 1, hours))
        step = (jnp.diff(gmst) + 24.0) % 24.0
        assert jnp.allclose(step, 1.00273790935, atol=1e-6)

    def test_range(self):
        hours = jnp.arange(0, 24)
        gmst = mean_greenwich_sidereal_time(julian_day(1995, 11, 30, hours, 17, 3.5))
        assert jnp.all((gmst >= 0.0) & (gmst < 24.0))

    def test_jit(self):
        gmst = jax.jit(mean_greenwich_sidereal_time)(julian_day(1987, 4, 10, 19, 21, 0))
        assert float(gmst) == pytest.approx(8.5825249, abs=1e-5)

    def test_float32(self):
        set_dtype(jnp.float32)
        gmst = mean_greenwich_sidereal_time(julian_day(1987, 4, 10, 19, 21, 0))
        assert gmst.dtype == jnp.float32
        assert jnp.abs(gmst - 8.5825249) < 2e-4


class TestApparentSiderealTime:
    def test_meeus_midnight(self):
        # Meeus example 12.a: 13h 10m 46.1351s
        gast = apparent_greenwich_sidereal_time(julian_day(1987, 4, 10))
        assert float(gast) == pytest.approx(13.1794820, abs=1e-5)

    def test_meeus_evening(self):
        gast = apparent_sidereal_time_at_date_and_time(1987, 4, 10, 19, 21, 0)
        assert float(gast) == pytest.approx(8.5824592, abs=1e-5)

    def test_monotone_over_a_day(self):
        minutes = jnp.arange(0, 24 * 60, 10)
        gast = apparent_greenwich_sidereal_time(julian_day(2022, 9, 23, 0, minutes))
        unwrapped = jnp.unwrap(gast, period=24.0)
        assert jnp.all(jnp.diff(unwrapped) > 0.0)

    def test_equation_of_equinoxes_bounded(self):
        jd = julian_day(2010, 1, jnp.arange(1, 29))
        difference = apparent_greenwich_sidereal_time(jd) - mean_greenwich_sidereal_time(jd)
        difference = (difference + 12.0) % 24.0 - 12.0
        # Never more than about 1.2 seconds of time
        assert jnp.all(jnp.abs(difference) < 1.5 / 3600.0)
