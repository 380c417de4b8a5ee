"""Julian Day timescale used by every ephemeris model.

A :class:`JulianDay` keeps the integer Julian Day Number and the fraction
of the day elapsed since noon in separate fields.  Differencing the integer
part against J2000.0 before any float arithmetic keeps Julian centuries
accurate to well under a second even in ``float32``, where a single float
Julian Date would only resolve about a quarter of a day.
"""

from __future__ import annotations

from typing import NamedTuple

import jax
import jax.numpy as jnp
from jax.typing import ArrayLike

from .config import get_dtype
from .constants import DAYS_PER_JULIAN_CENTURY, JD_J2000


class JulianDay(NamedTuple):
    """Two-field Julian Day value.

    Attributes:
        day: Integer Julian Day Number. Each Julian day starts at noon.
        time: Fraction of the day elapsed since ``day`` began, on [0, 1).
    """

    day: jax.Array
    time: jax.Array


def julian_day(
    year: ArrayLike,
    month: ArrayLike,
    day: ArrayLike,
    hour: ArrayLike = 0,
    minute: ArrayLike = 0,
    second: ArrayLike = 0.0,
) -> JulianDay:
    """Convert a Gregorian calendar date and time to a :class:`JulianDay`.

    Algorithm is only valid from year 1583 onward.  All date arithmetic is
    done in integers, so the day count is exact.

    Args:
        year (ArrayLike): Year of the calendar date.
        month (ArrayLike): Month of the calendar date.
        day (ArrayLike): Day of the calendar date.
        hour (ArrayLike): Hour of the day. Default: ``0``
        minute (ArrayLike): Minute of the hour. Default: ``0``
        second (ArrayLike): Second of the minute. Default: ``0.0``

    Returns:
        JulianDay: Day number and fraction of day since noon.

    References:

        1. Montenbruck, O., & Gill, E. (2012). *Satellite Orbits: Models, Methods and Applications*. Springer Science & Business Media.

    Examples:
        ```python
        jd = julian_day(2000, 1, 1, 12, 0, 0)
        # JulianDay(day=2451545, time=0.0)
        ```
    """
    _float = get_dtype()
    year = jnp.asarray(year, dtype=jnp.int32)
    month = jnp.asarray(month, dtype=jnp.int32)
    day = jnp.asarray(day, dtype=jnp.int32)

    is_jan_or_feb = month <= 2
    year = jnp.where(is_jan_or_feb, year - 1, year)
    month = jnp.where(is_jan_or_feb, month + 12, month)

    B = year // 400 - year // 100 + year // 4

    # Scaled integer form of floor(30.6001 * (month + 1))
    mjd = 365 * year - 679004 + B + (306001 * (month + 1)) // 10000 + day

    hours = (
        jnp.asarray(hour, dtype=_float)
        + (jnp.asarray(minute, dtype=_float) + jnp.asarray(second, dtype=_float) / 60.0)
        / 60.0
    )
    # Julian days start at noon, half a day after the civil date starts.
    frac = 0.5 + hours / 24.0
    carry = jnp.floor(frac)

    return JulianDay(
        day=mjd + 2400000 + carry.astype(jnp.int32),
        time=frac - carry,
    )


def julian_day_from_jd(jd: ArrayLike) -> JulianDay:
    """Split a single floating-point Julian Date into a :class:`JulianDay`.

    The result is only as precise as *jd* itself; prefer :func:`julian_day`
    when the calendar date is known.

    Args:
        jd (ArrayLike): Julian Date.

    Returns:
        JulianDay: Day number and fraction of day since noon.
    """
    jd = jnp.asarray(jd)
    day = jnp.floor(jd)
    return JulianDay(day=day.astype(jnp.int32), time=jnp.asarray(jd - day, dtype=get_dtype()))


def julian_centuries(jd: JulianDay) -> jax.Array:
    """Return Julian centuries elapsed since J2000.0.

    Args:
        jd (JulianDay): Timescale value.

    Returns:
        Julian centuries ``T`` since 2000-01-01 12:00:00.

    Examples:
        ```python
        julian_centuries(JulianDay(2451545, 0.0))   # 0.0
        julian_centuries(JulianDay(2488070, 0.0))   # 1.0
        ```
    """
    _float = get_dtype()
    days = jnp.asarray(jnp.asarray(jd.day) - JD_J2000, dtype=_float)
    return (days + jnp.asarray(jd.time, dtype=_float)) / _float(DAYS_PER_JULIAN_CENTURY)
