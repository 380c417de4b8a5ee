"""Greenwich sidereal time.

The mean sidereal time at 0h UT of the civil date is a cubic polynomial in
Julian centuries; the time elapsed since midnight is added at the sidereal
rate.  Apparent sidereal time adds the equation of the equinoxes,
``delta_psi * cos(eps)``.

Splitting the instant into its 0h UT date and the time of day keeps the
large polynomial term free of the fast daily rotation, which keeps the
result accurate to a fraction of a second of time in ``float32``.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from ephemjax.config import get_dtype
from ephemjax.constants import DAYS_PER_JULIAN_CENTURY, JD_J2000, SIDEREAL_RATE
from ephemjax.nutation import obliquity_and_nutation
from ephemjax.time import JulianDay, julian_centuries, julian_day
from ephemjax.utils import normalize_degrees, normalize_hours


def mean_greenwich_sidereal_time(jd: JulianDay) -> Array:
    """Compute the mean Greenwich sidereal time of an instant.

    Args:
        jd: Instant as a :class:`~ephemjax.time.JulianDay` (UT).

    Returns:
        Mean sidereal time on [0, 24). Units: *h*

    References:
        J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, eqs. 12.3 and 12.4.

    Examples:
        ```python
        from ephemjax.time import julian_day
        from ephemjax.frames import mean_greenwich_sidereal_time

        # Meeus example 12.b
        gmst = mean_greenwich_sidereal_time(julian_day(1987, 4, 10, 19, 21, 0))
        # ~ 8.5825249 h (8h 34m 57.09s)
        ```
    """
    _float = get_dtype()
    time = jnp.asarray(jd.time, dtype=_float)

    # Julian days start at noon: the preceding civil midnight is half a day
    # before the day number when time < 0.5 and half a day after otherwise
    before_midnight = time < 0.5
    midnight_offset = jnp.where(before_midnight, -0.5, 0.5)
    ut_hours = jnp.where(before_midnight, time * 24.0 + 12.0, time * 24.0 - 12.0)

    days = jnp.asarray(jnp.asarray(jd.day) - JD_J2000, dtype=_float) + midnight_offset
    T0 = days / _float(DAYS_PER_JULIAN_CENTURY)

    theta0 = normalize_degrees(
        100.46061837 + T0 * (36000.770053608 + T0 * (0.000387933 - T0 / 38710000.0))
    )
    return normalize_hours(theta0 / 15.0 + SIDEREAL_RATE * ut_hours)


def apparent_greenwich_sidereal_time(jd: JulianDay) -> Array:
    """Compute the apparent Greenwich sidereal time of an instant.

    Args:
        jd: Instant as a :class:`~ephemjax.time.JulianDay` (UT).

    Returns:
        Apparent sidereal time on [0, 24). Units: *h*

    References:
        J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, ch. 12.
    """
    mean = mean_greenwich_sidereal_time(jd)
    obliquity, delta_psi, _ = obliquity_and_nutation(julian_centuries(jd))

    # delta_psi / 15 is in seconds of time
    equation_of_equinoxes = delta_psi * jnp.cos(jnp.deg2rad(obliquity)) / 15.0 / 3600.0
    return normalize_hours(mean + equation_of_equinoxes)


def mean_greenwich_sidereal_time_at_date_and_time(
    year: ArrayLike,
    month: ArrayLike,
    day: ArrayLike,
    hour: ArrayLike = 0,
    minute: ArrayLike = 0,
    second: ArrayLike = 0.0,
) -> Array:
    """Compute the mean Greenwich sidereal time at a civil date and UT.

    Returns:
        Mean sidereal time on [0, 24). Units: *h*

    Examples:
        ```python
        from ephemjax.frames import mean_greenwich_sidereal_time_at_date_and_time

        # Meeus example 12.a
        gmst = mean_greenwich_sidereal_time_at_date_and_time(1987, 4, 10)
        # ~ 13.1795463 h (13h 10m 46.37s)
        ```
    """
    return mean_greenwich_sidereal_time(julian_day(year, month, day, hour, minute, second))


def apparent_sidereal_time_at_date_and_time(
    year: ArrayLike,
    month: ArrayLike,
    day: ArrayLike,
    hour: ArrayLike = 0,
    minute: ArrayLike = 0,
    second: ArrayLike = 0.0,
) -> Array:
    """Compute the apparent Greenwich sidereal time at a civil date and UT.

    Returns:
        Apparent sidereal time on [0, 24). Units: *h*
    """
    return apparent_greenwich_sidereal_time(julian_day(year, month, day, hour, minute, second))
