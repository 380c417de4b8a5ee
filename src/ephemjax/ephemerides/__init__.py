"""Solar system ephemerides.

This sub-module provides:

- **VSOP87 series**: evaluation of truncated VSOP87 coefficient tables and
  heliocentric ecliptic coordinates of the eight major planets.
- **Planets**: apparent geocentric ecliptic and equatorial positions with
  light-time, aberration and nutation corrections.
- **Sun**: a low-precision apparent position of the Sun.
"""

from .heliocentric import VSOP87_SERIES, heliocentric_coordinates
from .planets import (
    GeocentricPosition,
    equatorial_coordinates_for_planet,
    geocentric_coordinates_for_planet,
)
from .series import SeriesTable, VSOP87Series, evaluate_vsop87, sum_vsop87_coefs
from .sun import equatorial_coordinates_for_sun, sun_true_longitude

__all__ = [
    # VSOP87 series
    "SeriesTable",
    "VSOP87Series",
    "VSOP87_SERIES",
    "evaluate_vsop87",
    "heliocentric_coordinates",
    "sum_vsop87_coefs",
    # Planets
    "GeocentricPosition",
    "equatorial_coordinates_for_planet",
    "geocentric_coordinates_for_planet",
    # Sun
    "equatorial_coordinates_for_sun",
    "sun_true_longitude",
]
