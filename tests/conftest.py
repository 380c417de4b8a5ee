import jax.numpy as jnp
import pytest

from ephemjax.config import set_dtype
from ephemjax.observer import reset_location_on_earth


@pytest.fixture(autouse=True)
def _ensure_float64():
    """Set float64 precision before every test.

    Each test process starts with the default float32.  This fixture makes
    all tests run in float64 unless they explicitly override it (e.g.
    test_config.py has its own autouse fixture that sets float32).
    """
    set_dtype(jnp.float64)


@pytest.fixture(autouse=True)
def _reset_default_observer():
    """Start and finish every test with an unknown default observer location."""
    reset_location_on_earth()
    yield
    reset_location_on_earth()
