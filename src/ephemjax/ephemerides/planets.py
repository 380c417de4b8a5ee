"""Apparent geocentric positions of the planets.

The geocentric position of a planet is computed from the heliocentric
VSOP87 positions of the planet and of the Earth:

1. The planet is evaluated at the epoch the observed light left it.  The
   light-time ``tau = distance * 0.0057755183`` days is found by
   fixed-point iteration, starting from ``tau = 0``.  Iteration stops when
   successive light-times agree to within
   :func:`~ephemjax.config.get_light_time_tolerance` (days), after
   ``LIGHT_TIME_MAX_ITERATIONS`` steps, or as soon as the position is
   undefined.
2. The geocentric Cartesian vector gives ecliptic longitude, latitude and
   distance.
3. The annual aberration terms (Meeus eq. 23.2) are subtracted from
   longitude and latitude.
4. Nutation in longitude is added before rotating to the equator by the
   true obliquity.

The light-time loop is a ``jax.lax.while_loop``; the body identifier must
be a static Python value under ``jax.jit``.
"""

from __future__ import annotations

from typing import NamedTuple

import jax
import jax.numpy as jnp

from ephemjax.bodies import SolarSystemObjectIndex
from ephemjax.config import get_dtype, get_light_time_tolerance
from ephemjax.constants import (
    ABERRATION_CONSTANT,
    AS2DEG,
    DAYS_PER_JULIAN_CENTURY,
    LIGHT_TIME_MAX_ITERATIONS,
    LIGHT_TIME_PER_AU,
)
from ephemjax.coordinates import (
    EquatorialCoordinates,
    GeocentricCoordinates,
    RectangularCoordinates,
    heliocentric_to_rectangular,
    rectangular_to_geocentric,
)
from ephemjax.ephemerides.heliocentric import heliocentric_coordinates
from ephemjax.ephemerides.sun import sun_true_longitude
from ephemjax.frames import ecliptic_to_equatorial
from ephemjax.nutation import obliquity_and_nutation
from ephemjax.orbits import planetary_orbit
from ephemjax.time import JulianDay, julian_centuries
from ephemjax.utils import normalize_degrees


class GeocentricPosition(NamedTuple):
    """Geocentric ecliptic position of a body, corrected for light-time and aberration.

    Attributes:
        ecliptic: Ecliptic longitude and latitude referred to the mean
            equinox of date (nutation not applied). Units: *deg*
        obliquity: True obliquity of the ecliptic. Units: *deg*
        delta_psi: Nutation in longitude. Units: *arcsec*
        distance: Distance from the Earth at the light-time corrected
            epoch. Units: *AU*
        iterations: Number of light-time iterations performed.
    """

    ecliptic: GeocentricCoordinates
    obliquity: jax.Array
    delta_psi: jax.Array
    distance: jax.Array
    iterations: jax.Array


def _light_time_corrected(body, T0: jax.Array):
    """Iterate the light-time of *body* as seen from the Earth at *T0*."""
    tol = get_light_time_tolerance()

    def geocentric_rectangular(T):
        target = heliocentric_coordinates(body, T)
        earth = heliocentric_coordinates(SolarSystemObjectIndex.EARTH, T)
        return heliocentric_to_rectangular(target, earth)

    def cond(state):
        tau, tau_prev, i, _ = state
        # NaN light-times compare False, which stops the loop for undefined targets
        changed = jnp.abs(tau - tau_prev) > tol
        return jnp.any(changed) & (i < LIGHT_TIME_MAX_ITERATIONS)

    def step(state):
        tau, _, i, _ = state
        rect = geocentric_rectangular(T0 - tau / DAYS_PER_JULIAN_CENTURY)
        distance = jnp.sqrt(rect.x * rect.x + rect.y * rect.y + rect.z * rect.z)
        return (distance * LIGHT_TIME_PER_AU, tau, i + 1, rect)

    zero = jnp.zeros_like(T0)
    init_rect = RectangularCoordinates(zero, zero, zero)
    # An infinite previous light-time forces the first iteration
    init_state = (zero, jnp.full_like(T0, jnp.inf), jnp.int32(0), init_rect)
    _, _, iterations, rect = jax.lax.while_loop(cond, step, init_state)
    return rect, iterations


def geocentric_coordinates_for_planet(body, jd: JulianDay) -> GeocentricPosition:
    """Compute the geocentric ecliptic position of a planet.

    Args:
        body: Body identifier (:class:`~ephemjax.bodies.SolarSystemObjectIndex`
            or its integer value).  Static under ``jax.jit``.
        jd: Instant as a :class:`~ephemjax.time.JulianDay`.

    Returns:
        GeocentricPosition: Ecliptic coordinates, obliquity, nutation in
            longitude, distance and iteration count.  Every coordinate and
            the distance are NaN for an unsupported body.

    References:
        J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, chs. 23 and 33.
    """
    T0 = jnp.asarray(julian_centuries(jd), dtype=get_dtype())

    rect, iterations = _light_time_corrected(body, T0)
    ecliptic, distance = rectangular_to_geocentric(rect)

    lam = jnp.deg2rad(ecliptic.longitude)
    beta = jnp.deg2rad(ecliptic.latitude)

    # Annual aberration
    sun_longitude = jnp.deg2rad(sun_true_longitude(T0))
    earth_orbit = planetary_orbit(SolarSystemObjectIndex.EARTH, T0)
    e = earth_orbit.e
    perihelion = jnp.deg2rad(earth_orbit.pi)
    k = ABERRATION_CONSTANT * AS2DEG

    delta_lambda = (
        -k * jnp.cos(sun_longitude - lam) + e * k * jnp.cos(perihelion - lam)
    ) / jnp.cos(beta)
    delta_beta = -k * jnp.sin(beta) * (
        jnp.sin(sun_longitude - lam) - e * jnp.sin(perihelion - lam)
    )

    corrected = GeocentricCoordinates(
        longitude=normalize_degrees(ecliptic.longitude - delta_lambda),
        latitude=ecliptic.latitude - delta_beta,
    )

    obliquity, delta_psi, _ = obliquity_and_nutation(T0)

    return GeocentricPosition(
        ecliptic=corrected,
        obliquity=obliquity,
        delta_psi=delta_psi,
        distance=distance,
        iterations=iterations,
    )


def equatorial_coordinates_for_planet(body, jd: JulianDay) -> tuple[EquatorialCoordinates, jax.Array]:
    """Compute the apparent right ascension, declination and distance of a planet.

    Args:
        body: Body identifier.  Static under ``jax.jit``.
        jd: Instant as a :class:`~ephemjax.time.JulianDay`.

    Returns:
        tuple: ``(EquatorialCoordinates, distance)`` with right ascension
            on [0, 24) hours, declination in degrees and distance in AU.
            NaN for an unsupported body.

    Examples:
        ```python
        from ephemjax.bodies import SolarSystemObjectIndex
        from ephemjax.ephemerides import equatorial_coordinates_for_planet
        from ephemjax.time import julian_day

        # Meeus example 33.a, 1992-12-20 0h
        eq, delta = equatorial_coordinates_for_planet(
            SolarSystemObjectIndex.VENUS, julian_day(1992, 12, 20)
        )
        # eq.right_ascension ~ 21.07818 h, eq.declination ~ -18.888 deg
        ```
    """
    position = geocentric_coordinates_for_planet(body, jd)
    longitude = position.ecliptic.longitude + position.delta_psi * AS2DEG
    equatorial = ecliptic_to_equatorial(longitude, position.ecliptic.latitude, position.obliquity)
    return equatorial, position.distance
