"""Angle and unit conversion helpers.

These helpers wrap the ``use_degrees`` convention, range normalization and
the sexagesimal (degrees/minutes/seconds, hours/minutes/seconds) forms used
for right ascension, declination and observer coordinates.  All functions
are JAX-traceable and broadcast over array inputs.

Sexagesimal decompositions truncate toward zero and carry the sign on the
leading component only.  When the magnitude is below one degree (or hour)
the leading component is a signed zero (``-0.0``), so the sign survives the
round trip through :func:`dms_to_floating_degrees` and
:func:`hms_to_floating_hours`.
"""

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from ephemjax.config import get_dtype


def to_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle to radians if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle value.
        use_degrees (bool): If ``True``, treat ``angle`` as degrees and convert.

    Returns:
        Angle in radians.
    """
    return jnp.where(use_degrees, jnp.deg2rad(angle), angle)


def from_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle from radians to degrees if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle in radians.
        use_degrees (bool): If ``True``, convert to degrees.

    Returns:
        Angle in radians or degrees.
    """
    return jnp.where(use_degrees, jnp.rad2deg(angle), angle)


def _wrap(value: ArrayLike, period: float) -> Array:
    value = jnp.asarray(value, dtype=get_dtype())
    wrapped = jnp.mod(value, period)
    # mod of a tiny negative number rounds up to exactly ``period``
    return jnp.where(wrapped >= period, wrapped - period, wrapped)


def normalize_degrees(angle: ArrayLike) -> Array:
    """Wrap an angle in degrees to the range [0, 360).

    Non-finite inputs propagate unchanged as NaN.

    Args:
        angle (ArrayLike): Angle in degrees.

    Returns:
        Angle in degrees on [0, 360).
    """
    return _wrap(angle, 360.0)


def normalize_hours(hours: ArrayLike) -> Array:
    """Wrap a time or right ascension in hours to the range [0, 24).

    Args:
        hours (ArrayLike): Value in hours.

    Returns:
        Value in hours on [0, 24).
    """
    return _wrap(hours, 24.0)


def degrees_to_hours(angle: ArrayLike) -> Array:
    """Convert degrees to hours of arc (15 degrees per hour)."""
    return jnp.asarray(angle, dtype=get_dtype()) / 15.0


def hours_to_degrees(hours: ArrayLike) -> Array:
    """Convert hours of arc to degrees (15 degrees per hour)."""
    return jnp.asarray(hours, dtype=get_dtype()) * 15.0


def _split_sexagesimal(value: ArrayLike) -> tuple[Array, Array, Array]:
    value = jnp.asarray(value, dtype=get_dtype())
    magnitude = jnp.abs(value)
    whole = jnp.trunc(magnitude)
    minutes_float = (magnitude - whole) * 60.0
    minutes = jnp.trunc(minutes_float)
    seconds = (minutes_float - minutes) * 60.0
    return jnp.copysign(whole, value), minutes, seconds


def _join_sexagesimal(whole: ArrayLike, minutes: ArrayLike, seconds: ArrayLike) -> Array:
    _float = get_dtype()
    whole = jnp.asarray(whole, dtype=_float)
    minutes = jnp.asarray(minutes, dtype=_float)
    seconds = jnp.asarray(seconds, dtype=_float)
    magnitude = jnp.abs(whole) + minutes / 60.0 + seconds / 3600.0
    return jnp.where(jnp.signbit(whole), -magnitude, magnitude)


def floating_degrees_to_dms(angle: ArrayLike) -> tuple[Array, Array, Array]:
    """Split decimal degrees into degrees, arc-minutes and arc-seconds.

    Args:
        angle (ArrayLike): Angle in decimal degrees.

    Returns:
        tuple[Array, Array, Array]: ``(degrees, minutes, seconds)``.
            ``degrees`` is integral-valued and carries the sign (``-0.0``
            for negative angles smaller than one degree); ``minutes`` is an
            integral value on [0, 60) and ``seconds`` is on [0, 60).

    Examples:
        ```python
        d, m, s = floating_degrees_to_dms(-18.888011)
        # d = -18.0, m = 53.0, s ~ 16.84
        ```
    """
    return _split_sexagesimal(angle)


def dms_to_floating_degrees(
    degrees: ArrayLike, minutes: ArrayLike, seconds: ArrayLike
) -> Array:
    """Join degrees, arc-minutes and arc-seconds into decimal degrees.

    The sign is taken from ``degrees`` alone (a negative zero counts as
    negative); ``minutes`` and ``seconds`` are magnitudes.

    Args:
        degrees (ArrayLike): Signed whole degrees.
        minutes (ArrayLike): Arc-minutes.
        seconds (ArrayLike): Arc-seconds.

    Returns:
        Angle in decimal degrees.
    """
    return _join_sexagesimal(degrees, minutes, seconds)


def floating_hours_to_hms(hours: ArrayLike) -> tuple[Array, Array, Array]:
    """Split decimal hours into hours, minutes and seconds.

    Same conventions as :func:`floating_degrees_to_dms`.

    Args:
        hours (ArrayLike): Value in decimal hours.

    Returns:
        tuple[Array, Array, Array]: ``(hours, minutes, seconds)``.
    """
    return _split_sexagesimal(hours)


def hms_to_floating_hours(
    hours: ArrayLike, minutes: ArrayLike, seconds: ArrayLike
) -> Array:
    """Join hours, minutes and seconds into decimal hours.

    Args:
        hours (ArrayLike): Signed whole hours.
        minutes (ArrayLike): Minutes.
        seconds (ArrayLike): Seconds.

    Returns:
        Value in decimal hours.
    """
    return _join_sexagesimal(hours, minutes, seconds)
