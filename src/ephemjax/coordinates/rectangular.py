"""Heliocentric to geocentric ecliptic conversions.

The geocentric position of a planet is the difference of two heliocentric
positions, the planet's and the Earth's, taken in ecliptic Cartesian
coordinates.  The difference is then expressed as ecliptic longitude and
latitude seen from the Earth.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array

from ephemjax.coordinates._types import (
    GeocentricCoordinates,
    HeliocentricCoordinates,
    RectangularCoordinates,
)
from ephemjax.utils import normalize_degrees


def _to_cartesian(hc: HeliocentricCoordinates) -> tuple[Array, Array, Array]:
    lon = jnp.deg2rad(hc.longitude)
    lat = jnp.deg2rad(hc.latitude)
    cos_lat = jnp.cos(lat)
    return (
        hc.radius * cos_lat * jnp.cos(lon),
        hc.radius * cos_lat * jnp.sin(lon),
        hc.radius * jnp.sin(lat),
    )


def heliocentric_to_rectangular(
    target: HeliocentricCoordinates,
    earth: HeliocentricCoordinates,
) -> RectangularCoordinates:
    """Compute the geocentric ecliptic Cartesian position of a target.

    Both inputs are heliocentric spherical coordinates; the result is the
    target's position minus the Earth's, axis by axis.

    Args:
        target: Heliocentric coordinates of the observed body.
        earth: Heliocentric coordinates of the Earth at the same epoch.

    Returns:
        RectangularCoordinates: Geocentric ``(x, y, z)``. Units: *AU*

    References:
        J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, eq. 33.1.

    Examples:
        ```python
        from ephemjax.coordinates import HeliocentricCoordinates, heliocentric_to_rectangular
        venus = HeliocentricCoordinates(26.11428, -2.62070, 0.724603)
        earth = HeliocentricCoordinates(88.35704, 0.00014, 0.983824)
        rect = heliocentric_to_rectangular(venus, earth)
        ```
    """
    x_t, y_t, z_t = _to_cartesian(target)
    x_e, y_e, z_e = _to_cartesian(earth)
    return RectangularCoordinates(x=x_t - x_e, y=y_t - y_e, z=z_t - z_e)


def rectangular_to_geocentric(rect: RectangularCoordinates) -> tuple[GeocentricCoordinates, Array]:
    """Convert a geocentric Cartesian position to ecliptic longitude and latitude.

    Latitude is computed as ``atan2(z, sqrt(x^2 + y^2))``, which stays
    well defined close to the ecliptic poles.

    Args:
        rect: Geocentric ecliptic Cartesian position. Units: *AU*

    Returns:
        tuple: ``(GeocentricCoordinates, distance)`` with longitude
            normalized to [0, 360) degrees and distance in AU.
    """
    rho = jnp.sqrt(rect.x * rect.x + rect.y * rect.y)
    distance = jnp.sqrt(rho * rho + rect.z * rect.z)

    longitude = normalize_degrees(jnp.rad2deg(jnp.arctan2(rect.y, rect.x)))
    latitude = jnp.rad2deg(jnp.arctan2(rect.z, rho))

    return GeocentricCoordinates(longitude=longitude, latitude=latitude), distance
