import jax
import jax.numpy as jnp
import pytest

import ephemjax
from ephemjax.time import JulianDay, julian_centuries, julian_day, julian_day_from_jd


def test_julian_day_j2000():
    jd = julian_day(2000, 1, 1, 12, 0, 0)
    assert int(jd.day) == 2451545
    assert float(jd.time) == pytest.approx(0.0, abs=1e-12)


def test_julian_day_midnight():
    jd = julian_day(2000, 1, 1)
    assert int(jd.day) == 2451544
    assert float(jd.time) == pytest.approx(0.5, abs=1e-12)


def test_julian_day_evening():
    # 1987-04-10 19:21 UT is JD 2446896.30625
    jd = julian_day(1987, 4, 10, 19, 21, 0)
    assert int(jd.day) == 2446896
    assert float(jd.time) == pytest.approx(0.30625, abs=1e-12)


def test_julian_day_january_february():
    # 1992-02-28 0h is JD 2448680.5
    jd = julian_day(1992, 2, 28)
    assert int(jd.day) + float(jd.time) == pytest.approx(2448680.5, abs=1e-9)


def test_julian_day_leap_day():
    jd_feb29 = julian_day(2024, 2, 29)
    jd_mar1 = julian_day(2024, 3, 1)
    assert int(jd_mar1.day) - int(jd_feb29.day) == 1


def test_julian_day_time_in_range():
    jd = julian_day(2024, 3, 15, 23, 59, 59.0)
    assert 0.0 <= float(jd.time) < 1.0


def test_julian_day_day_is_integer():
    jd = julian_day(2024, 3, 15, 6, 0, 0)
    assert jnp.issubdtype(jd.day.dtype, jnp.integer)


def test_julian_day_vectorized():
    jd = julian_day(jnp.array([2000, 2001]), 1, 1, 12)
    assert jd.day.shape == (2,)
    assert int(jd.day[1] - jd.day[0]) == 366


def test_julian_day_from_jd():
    jd = julian_day_from_jd(2451545.25)
    assert int(jd.day) == 2451545
    assert float(jd.time) == pytest.approx(0.25, abs=1e-9)


def test_julian_centuries_j2000():
    assert float(julian_centuries(JulianDay(2451545, 0.0))) == pytest.approx(0.0, abs=1e-15)


def test_julian_centuries_one_century():
    assert float(julian_centuries(JulianDay(2488070, 0.0))) == pytest.approx(1.0, abs=1e-12)


def test_julian_centuries_meeus_example():
    # 1987-04-10 0h, Meeus example 12.a
    T = julian_centuries(julian_day(1987, 4, 10))
    assert float(T) == pytest.approx(-0.127296372348, abs=1e-12)


def test_julian_centuries_jit():
    T = jax.jit(julian_centuries)(JulianDay(jnp.int32(2488070), jnp.float64(0.0)))
    assert float(T) == pytest.approx(1.0, abs=1e-12)


def test_epoch_constants_exported():
    assert ephemjax.JD_J2000 == 2451545
    assert ephemjax.DAYS_PER_JULIAN_CENTURY == 36525.0
    assert not hasattr(ephemjax, "JD_MJD_OFFSET")
