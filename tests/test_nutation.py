"""Tests for nutation and the obliquity of the ecliptic."""

import jax
import jax.numpy as jnp
import pytest

from ephemjax.nutation import mean_obliquity, obliquity_and_nutation

# 1987-04-10 0h TD, Meeus example 22.a
_T_22A = (2446895.5 - 2451545.0) / 36525.0


class TestObliquityAndNutation:
    def test_meeus_nutation(self):
        result = obliquity_and_nutation(_T_22A)
        assert float(result.delta_psi) == pytest.approx(-3.788, abs=0.05)
        assert float(result.delta_epsilon) == pytest.approx(9.443, abs=0.05)

    def test_meeus_true_obliquity(self):
        # 23 deg 26' 36.850"
        result = obliquity_and_nutation(_T_22A)
        assert float(result.obliquity) == pytest.approx(23.4435694, abs=5e-5)

    def test_true_is_mean_plus_nutation(self):
        result = obliquity_and_nutation(_T_22A)
        expected = mean_obliquity(_T_22A) + result.delta_epsilon / 3600.0
        assert float(result.obliquity) == pytest.approx(float(expected), abs=1e-12)

    def test_nutation_bounded(self):
        T = jnp.linspace(-1.0, 1.0, 201)
        result = obliquity_and_nutation(T)
        assert jnp.all(jnp.abs(result.delta_psi) < 20.0)
        assert jnp.all(jnp.abs(result.delta_epsilon) < 10.5)

    def test_jit(self):
        result = jax.jit(obliquity_and_nutation)(_T_22A)
        assert float(result.delta_psi) == pytest.approx(-3.788, abs=0.05)


class TestMeanObliquity:
    def test_j2000(self):
        # 84381.448 arcsec
        assert float(mean_obliquity(0.0)) == pytest.approx(23.4392911, abs=1e-7)

    def test_meeus_example(self):
        # 23 deg 26' 27.407"
        assert float(mean_obliquity(_T_22A)) == pytest.approx(23.4409464, abs=1e-6)

    def test_decreasing(self):
        values = mean_obliquity(jnp.linspace(-1.0, 1.0, 11))
        assert jnp.all(jnp.diff(values) < 0.0)
