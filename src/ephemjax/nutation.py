"""Nutation and the obliquity of the ecliptic.

Nutation in longitude and in obliquity are evaluated from a truncated
trigonometric series in five fundamental arguments: the mean longitudes of
the Sun and the Moon, their mean anomalies and the longitude of the Moon's
ascending node.  The truncation keeps terms down to about 0.01 arcsec.

The mean obliquity uses the IAU cubic polynomial in Julian centuries.
"""

from __future__ import annotations

from typing import NamedTuple

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from ephemjax.config import get_dtype
from ephemjax.constants import AS2DEG
from ephemjax.utils import normalize_degrees


class ObliquityNutation(NamedTuple):
    """Obliquity of the ecliptic and nutation components.

    Attributes:
        obliquity: True obliquity ``eps0 + delta_epsilon``. Units: *deg*
        delta_psi: Nutation in longitude. Units: *arcsec*
        delta_epsilon: Nutation in obliquity. Units: *arcsec*
    """

    obliquity: Array
    delta_psi: Array
    delta_epsilon: Array


def _mean_obliquity_arcsec(T: Array) -> Array:
    # 84381.448 arcsec is 23 deg 26' 21.448"
    return 84381.448 + T * (-46.8150 + T * (-0.00059 + T * 0.001813))


def mean_obliquity(T: ArrayLike) -> Array:
    """Compute the mean obliquity of the ecliptic.

    Args:
        T: Julian centuries since J2000.0.

    Returns:
        Mean obliquity ``eps0``. Units: *deg*

    References:
        J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, eq. 22.2.
    """
    T = jnp.asarray(T, dtype=get_dtype())
    return _mean_obliquity_arcsec(T) * AS2DEG


def obliquity_and_nutation(T: ArrayLike) -> ObliquityNutation:
    """Compute the true obliquity and the nutation in longitude and obliquity.

    Args:
        T: Julian centuries since J2000.0.

    Returns:
        ObliquityNutation: True obliquity in degrees and the nutation
            components in arcseconds.

    References:
        J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, ch. 22.

    Examples:
        ```python
        from ephemjax.nutation import obliquity_and_nutation

        # Meeus example 22.a, 1987-04-10 0h TD
        T = (2446895.5 - 2451545.0) / 36525.0
        result = obliquity_and_nutation(T)
        # delta_psi ~ -3.788", delta_epsilon ~ +9.443", obliquity ~ 23.44357 deg
        ```
    """
    T = jnp.asarray(T, dtype=get_dtype())
    T2 = T * T

    Ls = jnp.deg2rad(normalize_degrees(280.4665 + T * 36000.7698 + T2 * 0.000303))
    Lm = jnp.deg2rad(normalize_degrees(218.3165 + T * 481267.8813 - T2 * 0.001599))
    Ms = jnp.deg2rad(normalize_degrees(357.52772 + T * 35999.050340 - T2 * 0.0001603))
    Mm = jnp.deg2rad(normalize_degrees(134.96298 + T * 477198.867398 + T2 * 0.0086972))
    omega = jnp.deg2rad(normalize_degrees(125.04452 - T * 1934.136261 + T2 * 0.0020708))

    delta_psi = (
        -(17.1996 + 0.01742 * T) * jnp.sin(omega)
        - (1.3187 + 0.00016 * T) * jnp.sin(2 * Ls)
        - 0.2274 * jnp.sin(2 * Lm)
        + 0.2062 * jnp.sin(2 * omega)
        + (0.1426 - 0.00034 * T) * jnp.sin(Ms)
        + 0.0712 * jnp.sin(Mm)
        - (0.0517 - 0.00012 * T) * jnp.sin(2 * Ls + Ms)
        - 0.0386 * jnp.sin(2 * Lm - omega)
        - 0.0301 * jnp.sin(2 * Lm + Mm)
        + 0.0217 * jnp.sin(2 * Ls - Ms)
        - 0.0158 * jnp.sin(2 * Ls - 2 * Lm + Mm)
        + 0.0129 * jnp.sin(2 * Ls - omega)
        + 0.0123 * jnp.sin(2 * Lm - Mm)
    )

    delta_epsilon = (
        (9.2025 + 0.00089 * T) * jnp.cos(omega)
        + (0.5736 - 0.00031 * T) * jnp.cos(2 * Ls)
        + 0.0977 * jnp.cos(2 * Lm)
        - 0.0895 * jnp.cos(2 * omega)
        + 0.0224 * jnp.cos(2 * Ls + Ms)
        + 0.0200 * jnp.cos(2 * Lm - omega)
        + 0.0129 * jnp.cos(2 * Lm + Mm)
        - 0.0095 * jnp.cos(2 * Ls - Ms)
        - 0.0070 * jnp.cos(2 * Ls - omega)
    )

    obliquity = (_mean_obliquity_arcsec(T) + delta_epsilon) * AS2DEG

    return ObliquityNutation(
        obliquity=obliquity,
        delta_psi=delta_psi,
        delta_epsilon=delta_epsilon,
    )
