"""Equatorial to horizontal frame transformation.

Horizontal coordinates are measured in the observer's local horizon
frame: azimuth from north through east, altitude above the horizon.  They
require the local hour angle of the target, which follows from the
Greenwich sidereal time, the observer's longitude and the target's right
ascension.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax.typing import ArrayLike

from ephemjax.config import get_dtype
from ephemjax.coordinates import EquatorialCoordinates, HorizontalCoordinates
from ephemjax.observer import ObserverLocation, get_location_on_earth
from ephemjax.utils import normalize_degrees


def equatorial_to_horizontal(
    hour_angle: ArrayLike,
    declination: ArrayLike,
    latitude: ArrayLike,
) -> HorizontalCoordinates:
    """Convert a local hour angle and declination to azimuth and altitude.

    Args:
        hour_angle: Local hour angle, positive west. Units: *deg*
        declination: Declination. Units: *deg*
        latitude: Observer latitude. Units: *deg*

    Returns:
        HorizontalCoordinates: Azimuth from north on [0, 360) degrees and
            altitude in degrees.

    References:
        J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, eqs. 13.5 and 13.6.
    """
    _float = get_dtype()
    H = jnp.deg2rad(jnp.asarray(hour_angle, dtype=_float))
    delta = jnp.deg2rad(jnp.asarray(declination, dtype=_float))
    phi = jnp.deg2rad(jnp.asarray(latitude, dtype=_float))

    # atan2 gives the azimuth from south; shift to north-based
    azimuth = jnp.arctan2(
        jnp.sin(H), jnp.cos(H) * jnp.sin(phi) - jnp.tan(delta) * jnp.cos(phi)
    )
    altitude = jnp.arcsin(
        jnp.sin(phi) * jnp.sin(delta) + jnp.cos(phi) * jnp.cos(delta) * jnp.cos(H)
    )

    return HorizontalCoordinates(
        azimuth=normalize_degrees(jnp.rad2deg(azimuth) + 180.0),
        altitude=jnp.rad2deg(altitude),
    )


def equatorial_to_horizontal_for_observer(
    equatorial: EquatorialCoordinates,
    sidereal_time: ArrayLike,
    observer: ObserverLocation | None = None,
) -> HorizontalCoordinates:
    """Compute horizontal coordinates of a target for an observer.

    The local hour angle is ``H = (theta - lon / 15 - ra) * 15`` degrees
    with west-positive longitude.

    Args:
        equatorial: Right ascension and declination of the target.
        sidereal_time: Greenwich sidereal time. Units: *h*
        observer: Observer location.  Defaults to the location returned
            by :func:`~ephemjax.observer.get_location_on_earth`.

    Returns:
        HorizontalCoordinates: Azimuth and altitude in degrees, NaN when
            the observer location is unknown.
    """
    if observer is None:
        observer = get_location_on_earth()

    _float = get_dtype()
    latitude = jnp.asarray(observer.latitude, dtype=_float)
    longitude = jnp.asarray(observer.longitude, dtype=_float)
    theta = jnp.asarray(sidereal_time, dtype=_float)

    H = (theta - longitude / 15.0 - equatorial.right_ascension) * 15.0
    horizontal = equatorial_to_horizontal(H, equatorial.declination, latitude)

    known = observer.is_known()
    return HorizontalCoordinates(
        azimuth=jnp.where(known, horizontal.azimuth, jnp.nan),
        altitude=jnp.where(known, horizontal.altitude, jnp.nan),
    )
