"""Coordinate records and conversions.

This sub-module provides:

- **Coordinate records**: heliocentric, rectangular, geocentric,
  equatorial and horizontal coordinate types, each with an ``is_valid()``
  predicate.
- **Geocentric conversion**: differencing heliocentric positions into a
  geocentric Cartesian vector and converting it to ecliptic longitude and
  latitude.
"""

from ._types import (
    EquatorialCoordinates,
    GeocentricCoordinates,
    HeliocentricCoordinates,
    HorizontalCoordinates,
    RectangularCoordinates,
)
from .rectangular import heliocentric_to_rectangular, rectangular_to_geocentric

__all__ = [
    # Records
    "EquatorialCoordinates",
    "GeocentricCoordinates",
    "HeliocentricCoordinates",
    "HorizontalCoordinates",
    "RectangularCoordinates",
    # Conversions
    "heliocentric_to_rectangular",
    "rectangular_to_geocentric",
]
