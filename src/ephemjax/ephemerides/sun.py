"""Low-precision apparent position of the Sun.

Uses the geometric solar theory of Meeus (ch. 25): mean longitude, mean
anomaly and the equation of the center, refined by five small periodic
terms driven by Venus, Mars, Jupiter and the Moon.  The result is
accurate to about 0.01 degrees, without evaluating the VSOP87 series of
the Earth.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp
from jax.typing import ArrayLike

from ephemjax.config import get_dtype
from ephemjax.coordinates import EquatorialCoordinates
from ephemjax.nutation import mean_obliquity
from ephemjax.time import JulianDay, julian_centuries
from ephemjax.utils import normalize_degrees, normalize_hours


def _sun_anomaly_and_center(T: jax.Array) -> tuple[jax.Array, jax.Array, jax.Array]:
    T2 = T * T
    L0 = normalize_degrees(280.46646 + T * 36000.76983 + T2 * 0.0003032)
    M = normalize_degrees(357.52911 + T * 35999.05029 - T2 * 0.0001537)
    M_rad = jnp.deg2rad(M)
    C = (
        (1.914602 - T * 0.004817 - T2 * 0.000014) * jnp.sin(M_rad)
        + (0.019993 - T * 0.000101) * jnp.sin(2 * M_rad)
        + 0.000289 * jnp.sin(3 * M_rad)
    )
    return L0, M, C


def sun_true_longitude(T: ArrayLike) -> jax.Array:
    """Compute the geometric true longitude of the Sun.

    Mean longitude plus the equation of the center, referred to the mean
    equinox of date.

    Args:
        T: Julian centuries since J2000.0.

    Returns:
        True longitude on [0, 360). Units: *deg*

    References:
        J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, ch. 25.
    """
    T = jnp.asarray(T, dtype=get_dtype())
    L0, _, C = _sun_anomaly_and_center(T)
    return normalize_degrees(L0 + C)


def equatorial_coordinates_for_sun(jd: JulianDay) -> tuple[EquatorialCoordinates, jax.Array]:
    """Compute the apparent right ascension, declination and distance of the Sun.

    Args:
        jd: Instant as a :class:`~ephemjax.time.JulianDay`.

    Returns:
        tuple: ``(EquatorialCoordinates, distance)`` with right ascension
            on [0, 24) hours, declination in degrees and the Earth-Sun
            distance in AU.

    References:
        J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, ch. 25.

    Examples:
        ```python
        from ephemjax.ephemerides import equatorial_coordinates_for_sun
        from ephemjax.time import julian_day

        # Meeus example 25.a, 1992-10-13 0h
        eq, R = equatorial_coordinates_for_sun(julian_day(1992, 10, 13))
        # eq.right_ascension ~ 13.22539 h, eq.declination ~ -7.7851 deg, R ~ 0.99766 AU
        ```
    """
    T = julian_centuries(jd)
    T2 = T * T

    L0, M, C = _sun_anomaly_and_center(T)
    e = 0.016708634 - T * 0.000042037 - T2 * 0.0000001267

    true_longitude = L0 + C
    true_anomaly = M + C

    # Perturbations by Venus, Mars, Jupiter and the Moon
    A = jnp.deg2rad(351.52 + 22518.4428 * T)
    B = jnp.deg2rad(253.14 + 45036.8857 * T)
    Cj = jnp.deg2rad(157.23 + 32964.4673 * T)
    D = jnp.deg2rad(297.85 + 445267.1117 * T)
    E = jnp.deg2rad(252.08 + 20.19 * T)
    true_longitude = true_longitude + (
        0.00134 * jnp.cos(A)
        + 0.00153 * jnp.cos(B)
        + 0.00200 * jnp.cos(Cj)
        + 0.00180 * jnp.sin(D)
        + 0.00196 * jnp.sin(E)
    )

    distance = 1.000001018 * (1.0 - e * e) / (1.0 + e * jnp.cos(jnp.deg2rad(true_anomaly)))

    omega = jnp.deg2rad(125.04 - 1934.136 * T)
    apparent_longitude = jnp.deg2rad(true_longitude - 0.00569 - 0.00478 * jnp.sin(omega))
    obliquity = jnp.deg2rad(mean_obliquity(T) + 0.00256 * jnp.cos(omega))

    ra = jnp.arctan2(jnp.cos(obliquity) * jnp.sin(apparent_longitude), jnp.cos(apparent_longitude))
    dec = jnp.arcsin(jnp.sin(obliquity) * jnp.sin(apparent_longitude))

    equatorial = EquatorialCoordinates(
        right_ascension=normalize_hours(jnp.rad2deg(ra) / 15.0),
        declination=jnp.rad2deg(dec),
    )
    return equatorial, distance
