"""Coordinate record types.

Every record is a :class:`~typing.NamedTuple`, so JAX treats it as a pytree
and it passes through ``jax.jit``, ``jax.vmap`` and ``jax.lax`` control
flow unchanged.  Fields are arrays that broadcast together.

Failed or unsupported computations are reported by NaN fields rather than
exceptions.  Each record exposes ``is_valid()``, which is ``True`` where
every field is finite.
"""

from __future__ import annotations

from typing import NamedTuple

import jax.numpy as jnp
from jax import Array


def _all_finite(*fields) -> Array:
    valid = jnp.isfinite(fields[0])
    for field in fields[1:]:
        valid = valid & jnp.isfinite(field)
    return valid


class HeliocentricCoordinates(NamedTuple):
    """Sun-centered ecliptic spherical coordinates of date.

    Attributes:
        longitude: Heliocentric ecliptic longitude on [0, 360). Units: *deg*
        latitude: Heliocentric ecliptic latitude. Units: *deg*
        radius: Distance from the Sun. Units: *AU*
    """

    longitude: Array
    latitude: Array
    radius: Array

    def is_valid(self) -> Array:
        return _all_finite(self.longitude, self.latitude, self.radius)


class RectangularCoordinates(NamedTuple):
    """Earth-centered ecliptic Cartesian position.

    Attributes:
        x: Component toward the vernal equinox. Units: *AU*
        y: Component 90 deg east along the ecliptic. Units: *AU*
        z: Component toward the north ecliptic pole. Units: *AU*
    """

    x: Array
    y: Array
    z: Array

    def is_valid(self) -> Array:
        return _all_finite(self.x, self.y, self.z)


class GeocentricCoordinates(NamedTuple):
    """Earth-centered ecliptic longitude and latitude.

    Attributes:
        longitude: Geocentric ecliptic longitude on [0, 360). Units: *deg*
        latitude: Geocentric ecliptic latitude. Units: *deg*
    """

    longitude: Array
    latitude: Array

    def is_valid(self) -> Array:
        return _all_finite(self.longitude, self.latitude)


class EquatorialCoordinates(NamedTuple):
    """Right ascension and declination.

    Attributes:
        right_ascension: Right ascension on [0, 24). Units: *h*
        declination: Declination on [-90, 90]. Units: *deg*
    """

    right_ascension: Array
    declination: Array

    def is_valid(self) -> Array:
        return _all_finite(self.right_ascension, self.declination)


class HorizontalCoordinates(NamedTuple):
    """Local horizon coordinates of an observer.

    Azimuth is measured from north through east.

    Attributes:
        azimuth: Azimuth on [0, 360). Units: *deg*
        altitude: Altitude above the horizon. Units: *deg*
    """

    azimuth: Array
    altitude: Array

    def is_valid(self) -> Array:
        return _all_finite(self.azimuth, self.altitude)
