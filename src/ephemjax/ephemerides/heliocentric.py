"""Heliocentric planet positions from the truncated VSOP87 series.

Positions are referred to the mean ecliptic and equinox of date.  The
series are evaluated in Julian millennia, ``T' = T / 10``.  The Sun sits at
the origin of the frame; any body outside the supported set yields NaN
coordinates.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax.typing import ArrayLike

from ephemjax.bodies import SolarSystemObjectIndex, resolve_body
from ephemjax.config import get_dtype
from ephemjax.coordinates import HeliocentricCoordinates
from ephemjax.ephemerides._vsop87_earth import EARTH
from ephemjax.ephemerides._vsop87_jupiter import JUPITER
from ephemjax.ephemerides._vsop87_mars import MARS
from ephemjax.ephemerides._vsop87_mercury import MERCURY
from ephemjax.ephemerides._vsop87_neptune import NEPTUNE
from ephemjax.ephemerides._vsop87_saturn import SATURN
from ephemjax.ephemerides._vsop87_uranus import URANUS
from ephemjax.ephemerides._vsop87_venus import VENUS
from ephemjax.ephemerides.series import VSOP87Series, evaluate_vsop87
from ephemjax.utils import normalize_degrees

"""
VSOP87 coefficient tables of every planet.
"""
VSOP87_SERIES: dict[SolarSystemObjectIndex, VSOP87Series] = {
    SolarSystemObjectIndex.MERCURY: MERCURY,
    SolarSystemObjectIndex.VENUS: VENUS,
    SolarSystemObjectIndex.EARTH: EARTH,
    SolarSystemObjectIndex.MARS: MARS,
    SolarSystemObjectIndex.JUPITER: JUPITER,
    SolarSystemObjectIndex.SATURN: SATURN,
    SolarSystemObjectIndex.URANUS: URANUS,
    SolarSystemObjectIndex.NEPTUNE: NEPTUNE,
}


def heliocentric_coordinates(body, T: ArrayLike) -> HeliocentricCoordinates:
    """Compute the heliocentric ecliptic coordinates of a body.

    Args:
        body: Body identifier (:class:`~ephemjax.bodies.SolarSystemObjectIndex`
            or its integer value).  Must be a static Python value under
            ``jax.jit``.
        T: Julian centuries since J2000.0.

    Returns:
        HeliocentricCoordinates: Longitude on [0, 360) degrees, latitude in
            degrees and radius in AU.  Zero for the Sun, NaN for an
            unsupported body.

    References:
        J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, ch. 32.

    Examples:
        ```python
        from ephemjax.bodies import SolarSystemObjectIndex
        from ephemjax.ephemerides import heliocentric_coordinates

        # Meeus example 32.a, 1992-12-20 0h TD
        T = (2448976.5 - 2451545.0) / 36525.0
        hc = heliocentric_coordinates(SolarSystemObjectIndex.VENUS, T)
        # hc.longitude ~ 26.11428, hc.latitude ~ -2.62070, hc.radius ~ 0.724603
        ```
    """
    _float = get_dtype()
    T = jnp.asarray(T, dtype=_float)

    resolved = resolve_body(body)
    if resolved == SolarSystemObjectIndex.SUN:
        zero = jnp.zeros_like(T)
        return HeliocentricCoordinates(zero, zero, zero)
    if resolved is None:
        nan = jnp.full(T.shape, jnp.nan, dtype=_float)
        return HeliocentricCoordinates(nan, nan, nan)

    series = VSOP87_SERIES[resolved]
    tau = T / 10.0

    longitude = normalize_degrees(jnp.rad2deg(evaluate_vsop87(series.L, tau)))
    latitude = jnp.rad2deg(evaluate_vsop87(series.B, tau))
    radius = evaluate_vsop87(series.R, tau)

    return HeliocentricCoordinates(longitude=longitude, latitude=latitude, radius=radius)
