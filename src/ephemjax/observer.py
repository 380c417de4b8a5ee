"""Observer location on the Earth.

Horizontal coordinates depend on where the observer stands.  Functions
that need a location take an explicit :class:`ObserverLocation`; when
none is passed they fall back to a module-level *default location*, which
starts out unknown and is managed with :func:`set_location_on_earth`,
:func:`set_location_on_earth_dms`, :func:`get_location_on_earth` and
:func:`reset_location_on_earth`.

The default location is plain module state.  It is read when a function
is traced, so under ``jax.jit`` the location in effect at trace time is
baked into the compiled program; pass the location explicitly to vary it
between calls.  Mutating it from several threads requires external
synchronization.

Longitude is positive west of Greenwich, as in Meeus.
"""

from __future__ import annotations

import logging
import math
from typing import NamedTuple

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from ephemjax.config import get_dtype
from ephemjax.utils import dms_to_floating_degrees

logger = logging.getLogger(__name__)


class ObserverLocation(NamedTuple):
    """Geographic position of an observer.

    Attributes:
        latitude: Geographic latitude, positive north. Units: *deg*
        longitude: Geographic longitude, positive west. Units: *deg*
    """

    latitude: ArrayLike
    longitude: ArrayLike

    def is_known(self) -> Array:
        """Return whether both latitude and longitude are defined."""
        return jnp.isfinite(self.latitude) & jnp.isfinite(self.longitude)


"""
Location sentinel used before any location has been set.
"""
UNKNOWN_LOCATION = ObserverLocation(latitude=math.nan, longitude=math.nan)

_default_location: ObserverLocation = UNKNOWN_LOCATION


def observer_location(latitude: ArrayLike, longitude: ArrayLike) -> ObserverLocation:
    """Build an observer location from decimal degrees.

    Args:
        latitude: Latitude, positive north. Units: *deg*
        longitude: Longitude, positive west. Units: *deg*

    Returns:
        ObserverLocation: The location.
    """
    _float = get_dtype()
    return ObserverLocation(
        latitude=jnp.asarray(latitude, dtype=_float),
        longitude=jnp.asarray(longitude, dtype=_float),
    )


def observer_location_dms(
    lat_degrees: ArrayLike,
    lat_minutes: ArrayLike,
    lat_seconds: ArrayLike,
    lon_degrees: ArrayLike,
    lon_minutes: ArrayLike,
    lon_seconds: ArrayLike,
) -> ObserverLocation:
    """Build an observer location from degrees, minutes and seconds.

    The sign of each coordinate is taken from its degrees component
    (``-0.0`` counts as negative).

    Examples:
        ```python
        from ephemjax.observer import observer_location_dms

        # Paris Observatory, 48 50' 11" N, 2 20' 14" E
        paris = observer_location_dms(48, 50, 11, -2, 20, 14)
        ```
    """
    return observer_location(
        dms_to_floating_degrees(lat_degrees, lat_minutes, lat_seconds),
        dms_to_floating_degrees(lon_degrees, lon_minutes, lon_seconds),
    )


def set_location_on_earth(latitude: ArrayLike, longitude: ArrayLike) -> None:
    """Set the default observer location from decimal degrees.

    Args:
        latitude: Latitude, positive north. Units: *deg*
        longitude: Longitude, positive west. Units: *deg*
    """
    global _default_location
    _default_location = observer_location(latitude, longitude)
    logger.info(
        "Default observer location set to lat=%s lon=%s",
        _default_location.latitude,
        _default_location.longitude,
    )


def set_location_on_earth_dms(
    lat_degrees: ArrayLike,
    lat_minutes: ArrayLike,
    lat_seconds: ArrayLike,
    lon_degrees: ArrayLike,
    lon_minutes: ArrayLike,
    lon_seconds: ArrayLike,
) -> None:
    """Set the default observer location from degrees, minutes and seconds."""
    location = observer_location_dms(
        lat_degrees, lat_minutes, lat_seconds, lon_degrees, lon_minutes, lon_seconds
    )
    set_location_on_earth(location.latitude, location.longitude)


def get_location_on_earth() -> ObserverLocation:
    """Return the default observer location.

    Returns:
        ObserverLocation: The current default, :data:`UNKNOWN_LOCATION` if
            no location has been set.
    """
    return _default_location


def reset_location_on_earth() -> None:
    """Forget the default observer location."""
    global _default_location
    _default_location = UNKNOWN_LOCATION
    logger.debug("Default observer location reset")
