"""Keplerian orbit helpers.

This sub-module provides:

- **Mean orbital elements**: low-precision cubic element polynomials for
  the eight major planets.
- **Kepler's equation**: the forward mean anomaly relation and a
  JAX-traceable Newton solver for the eccentric anomaly.
"""

from .elements import OrbitalElements, planetary_orbit
from .keplerian import anomaly_eccentric_to_mean, kepler

__all__ = [
    "OrbitalElements",
    "anomaly_eccentric_to_mean",
    "kepler",
    "planetary_orbit",
]
