"""Ecliptic to equatorial frame transformation.

The equatorial frame of date is the ecliptic frame of date rotated about
the equinox direction by the obliquity of the ecliptic.  Only the
spherical form is provided: ecliptic longitude and latitude map to right
ascension and declination.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax.typing import ArrayLike

from ephemjax.config import get_dtype
from ephemjax.coordinates import EquatorialCoordinates
from ephemjax.utils import normalize_hours


def ecliptic_to_equatorial(
    longitude: ArrayLike,
    latitude: ArrayLike,
    obliquity: ArrayLike,
) -> EquatorialCoordinates:
    """Convert ecliptic longitude and latitude to equatorial coordinates.

    Args:
        longitude: Ecliptic longitude. Units: *deg*
        latitude: Ecliptic latitude. Units: *deg*
        obliquity: Obliquity of the ecliptic. Units: *deg*

    Returns:
        EquatorialCoordinates: Right ascension on [0, 24) hours and
            declination in degrees.

    References:
        J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, eqs. 13.3 and 13.4.

    Examples:
        ```python
        from ephemjax.frames import ecliptic_to_equatorial

        # Meeus example 13.a, Pollux
        eq = ecliptic_to_equatorial(113.215630, 6.684170, 23.4392911)
        # eq.right_ascension ~ 7.7552628 h, eq.declination ~ 28.026183 deg
        ```
    """
    _float = get_dtype()
    lam = jnp.deg2rad(jnp.asarray(longitude, dtype=_float))
    beta = jnp.deg2rad(jnp.asarray(latitude, dtype=_float))
    eps = jnp.deg2rad(jnp.asarray(obliquity, dtype=_float))

    sin_eps = jnp.sin(eps)
    cos_eps = jnp.cos(eps)

    ra = jnp.arctan2(jnp.sin(lam) * cos_eps - jnp.tan(beta) * sin_eps, jnp.cos(lam))
    dec = jnp.arcsin(jnp.sin(beta) * cos_eps + jnp.cos(beta) * sin_eps * jnp.sin(lam))

    return EquatorialCoordinates(
        right_ascension=normalize_hours(jnp.rad2deg(ra) / 15.0),
        declination=jnp.rad2deg(dec),
    )
