"""Apparent position of a Sun or planet seen from the Earth.

Combines the Sun and planet ephemerides, apparent sidereal time and the
observer location into one query returning right ascension, declination,
horizontal coordinates, apparent diameter and distance.

Horizontal coordinates need an observer location.  Without one (explicit
argument or default location from :mod:`ephemjax.observer`) they are NaN,
while every other field is still computed.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

import jax
import jax.numpy as jnp
from jax.typing import ArrayLike

from ephemjax.bodies import DIAMETER_AT_1AU, SolarSystemObjectIndex, resolve_body
from ephemjax.config import get_dtype
from ephemjax.coordinates import EquatorialCoordinates, HorizontalCoordinates
from ephemjax.ephemerides import equatorial_coordinates_for_planet, equatorial_coordinates_for_sun
from ephemjax.frames import apparent_greenwich_sidereal_time, equatorial_to_horizontal_for_observer
from ephemjax.observer import ObserverLocation, get_location_on_earth
from ephemjax.time import JulianDay, julian_day

logger = logging.getLogger(__name__)


class SolarSystemObject(NamedTuple):
    """Apparent position of a solar system body.

    Attributes:
        equatorial: Apparent right ascension (h) and declination (deg).
        horizontal: Azimuth and altitude (deg), NaN without an observer.
        diameter: Apparent angular diameter. Units: *arcmin*
        distance: Distance from the Earth. Units: *AU*
    """

    equatorial: EquatorialCoordinates
    horizontal: HorizontalCoordinates
    diameter: jax.Array
    distance: jax.Array

    def is_valid(self) -> jax.Array:
        """Return whether the equatorial position and distance are defined."""
        return self.equatorial.is_valid() & jnp.isfinite(self.distance)

    def has_horizontal(self) -> jax.Array:
        """Return whether horizontal coordinates were computed."""
        return self.horizontal.is_valid()


def _undefined_object(jd: JulianDay) -> SolarSystemObject:
    nan = jnp.full(jnp.shape(jd.time), jnp.nan, dtype=get_dtype())
    return SolarSystemObject(
        equatorial=EquatorialCoordinates(right_ascension=nan, declination=nan),
        horizontal=HorizontalCoordinates(azimuth=nan, altitude=nan),
        diameter=nan,
        distance=nan,
    )


def solar_system_object_at_jd(
    body,
    jd: JulianDay,
    observer: ObserverLocation | None = None,
) -> SolarSystemObject:
    """Compute the apparent position of a body at an instant.

    Args:
        body: Body identifier (:class:`~ephemjax.bodies.SolarSystemObjectIndex`
            or its integer value).  Static under ``jax.jit``.
        jd: Instant as a :class:`~ephemjax.time.JulianDay` (UT).
        observer: Observer location.  Defaults to
            :func:`~ephemjax.observer.get_location_on_earth`.

    Returns:
        SolarSystemObject: The apparent position.  All fields are NaN for
            an unsupported body; the diameter is NaN for the Earth.
    """
    if observer is None:
        observer = get_location_on_earth()

    resolved = resolve_body(body)
    if resolved is None:
        return _undefined_object(jd)
    if resolved == SolarSystemObjectIndex.SUN:
        equatorial, distance = equatorial_coordinates_for_sun(jd)
    else:
        equatorial, distance = equatorial_coordinates_for_planet(resolved, jd)

    diameter = DIAMETER_AT_1AU[resolved] / distance / 60.0

    sidereal_time = apparent_greenwich_sidereal_time(jd)
    horizontal = equatorial_to_horizontal_for_observer(equatorial, sidereal_time, observer)

    return SolarSystemObject(
        equatorial=equatorial,
        horizontal=horizontal,
        diameter=diameter,
        distance=distance,
    )


def solar_system_object_at_date_and_time(
    body,
    year: ArrayLike,
    month: ArrayLike,
    day: ArrayLike,
    hour: ArrayLike = 0,
    minute: ArrayLike = 0,
    second: ArrayLike = 0.0,
    observer: ObserverLocation | None = None,
) -> SolarSystemObject:
    """Compute the apparent position of a body at a civil date and UT.

    Examples:
        ```python
        from ephemjax import SolarSystemObjectIndex, observer_location
        from ephemjax import solar_system_object_at_date_and_time

        # Longitude is positive west, so Paris is negative
        paris = observer_location(48.8566, -2.3522)
        sun = solar_system_object_at_date_and_time(
            SolarSystemObjectIndex.SUN, 2000, 1, 1, 12, 0, 0, observer=paris
        )
        ```
    """
    jd = julian_day(year, month, day, hour, minute, second)
    logger.debug("Solar system query for body %r at JD %s + %s", body, jd.day, jd.time)
    return solar_system_object_at_jd(body, jd, observer)
