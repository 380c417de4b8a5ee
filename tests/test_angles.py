"""Tests for angle normalization and sexagesimal conversions."""

import jax
import jax.numpy as jnp
import pytest

from ephemjax.utils import (
    degrees_to_hours,
    dms_to_floating_degrees,
    floating_degrees_to_dms,
    floating_hours_to_hms,
    from_radians,
    hms_to_floating_hours,
    hours_to_degrees,
    normalize_degrees,
    normalize_hours,
    to_radians,
)


class TestNormalization:
    @pytest.mark.parametrize(
        "angle, expected",
        [(0.0, 0.0), (359.5, 359.5), (360.0, 0.0), (-30.0, 330.0), (725.0, 5.0), (-720.0, 0.0)],
    )
    def test_normalize_degrees(self, angle, expected):
        assert float(normalize_degrees(angle)) == pytest.approx(expected, abs=1e-9)

    @pytest.mark.parametrize(
        "hours, expected",
        [(0.0, 0.0), (23.5, 23.5), (24.0, 0.0), (25.0, 1.0), (-1.0, 23.0), (-48.25, 23.75)],
    )
    def test_normalize_hours(self, hours, expected):
        assert float(normalize_hours(hours)) == pytest.approx(expected, abs=1e-9)

    def test_tiny_negative_stays_in_range(self):
        value = normalize_degrees(-1e-20)
        assert 0.0 <= float(value) < 360.0

    def test_vectorized_range(self):
        angles = jnp.linspace(-2000.0, 2000.0, 401)
        wrapped = normalize_degrees(angles)
        assert jnp.all((wrapped >= 0.0) & (wrapped < 360.0))

    def test_nan_propagates(self):
        assert jnp.isnan(normalize_degrees(jnp.nan))


class TestUnitConversions:
    def test_to_radians(self):
        assert float(to_radians(180.0, True)) == pytest.approx(jnp.pi)
        assert float(to_radians(1.0, False)) == pytest.approx(1.0)

    def test_from_radians(self):
        assert float(from_radians(jnp.pi, True)) == pytest.approx(180.0)

    def test_degrees_hours(self):
        assert float(degrees_to_hours(180.0)) == pytest.approx(12.0)
        assert float(hours_to_degrees(6.0)) == pytest.approx(90.0)


class TestSexagesimal:
    def test_dms_negative(self):
        d, m, s = floating_degrees_to_dms(-18.888011)
        assert float(d) == -18.0
        assert float(m) == 53.0
        assert float(s) == pytest.approx(16.8396, abs=1e-3)

    def test_dms_positive(self):
        d, m, s = floating_degrees_to_dms(48.836389)
        assert float(d) == 48.0
        assert float(m) == 50.0
        assert float(s) == pytest.approx(11.0, abs=1e-3)

    def test_dms_small_negative_keeps_sign(self):
        d, m, s = floating_degrees_to_dms(-0.5)
        assert float(d) == 0.0
        assert bool(jnp.signbit(d))
        assert float(m) == 30.0
        assert float(dms_to_floating_degrees(d, m, s)) == pytest.approx(-0.5, abs=1e-12)

    def test_dms_negative_zero_input(self):
        assert float(dms_to_floating_degrees(-0.0, 30.0, 0.0)) == pytest.approx(-0.5)

    def test_hms(self):
        h, m, s = floating_hours_to_hms(21.078182)
        assert float(h) == 21.0
        assert float(m) == 4.0
        assert float(s) == pytest.approx(41.4552, abs=1e-3)

    @pytest.mark.parametrize("value", [0.0, 0.25, 12.3456789, 179.999, -0.01, -7.78507, -89.5])
    def test_degrees_roundtrip(self, value):
        back = dms_to_floating_degrees(*floating_degrees_to_dms(value))
        assert float(back) == pytest.approx(value, abs=1e-9)

    @pytest.mark.parametrize("value", [0.0, 0.5, 13.225389, 23.999, -0.2, -5.5])
    def test_hours_roundtrip(self, value):
        back = hms_to_floating_hours(*floating_hours_to_hms(value))
        assert float(back) == pytest.approx(value, abs=1e-9)

    def test_minutes_and_seconds_non_negative(self):
        values = jnp.linspace(-50.0, 50.0, 101)
        _, m, s = floating_degrees_to_dms(values)
        assert jnp.all((m >= 0.0) & (m < 60.0))
        assert jnp.all((s >= 0.0) & (s < 60.0))

    def test_jit(self):
        d, m, s = jax.jit(floating_degrees_to_dms)(-18.888011)
        assert float(d) == -18.0
