"""Low-precision mean orbital elements of the major planets.

Evaluates the cubic element polynomials of
:mod:`ephemjax.orbits._element_coefficients` for a planet at a given epoch.
These elements feed the aberration correction (Earth's eccentricity and
longitude of perihelion) and are exposed for callers that need a quick
Keplerian description of a planet's orbit.  Precise planet positions come
from the VSOP87 series in :mod:`ephemjax.ephemerides` instead.
"""

from __future__ import annotations

from typing import NamedTuple

import jax
import jax.numpy as jnp
from jax.typing import ArrayLike

from ephemjax.bodies import resolve_body
from ephemjax.config import get_dtype
from ephemjax.orbits._element_coefficients import ELEMENT_COEFFICIENTS
from ephemjax.utils import normalize_degrees


class OrbitalElements(NamedTuple):
    """Mean orbital elements of a planet, angles in degrees on [0, 360).

    Attributes:
        L: Mean longitude. Units: *deg*
        a: Semi-major axis. Units: *AU*
        e: Eccentricity. Dimensionless.
        i: Inclination to the ecliptic. Units: *deg*
        omega: Longitude of the ascending node. Units: *deg*
        pi: Longitude of perihelion. Units: *deg*
        M: Mean anomaly, ``L - pi``. Units: *deg*
        w: Argument of perihelion, ``pi - omega``. Units: *deg*
    """

    L: jax.Array
    a: jax.Array
    e: jax.Array
    i: jax.Array
    omega: jax.Array
    pi: jax.Array
    M: jax.Array
    w: jax.Array

    def is_valid(self) -> jax.Array:
        """Return whether the elements describe a supported body.

        Only the in-plane elements are checked: Earth has a well-defined
        orbit but an undefined ascending node.
        """
        return jnp.isfinite(self.L) & jnp.isfinite(self.a) & jnp.isfinite(self.e) & jnp.isfinite(self.pi)


def planetary_orbit(body, T: ArrayLike) -> OrbitalElements:
    """Compute the mean orbital elements of a planet.

    Args:
        body: Planet identifier (:class:`~ephemjax.bodies.SolarSystemObjectIndex`
            or its integer value).  Must be a static Python value under
            ``jax.jit``.
        T: Julian centuries since J2000.0.

    Returns:
        OrbitalElements: Elements at *T*.  For Earth ``i`` is zero and
            ``omega`` and ``w`` are NaN.  For the Sun or an unsupported
            identifier every field is NaN.

    References:
        J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, Table 31.A.

    Examples:
        ```python
        from ephemjax.orbits import planetary_orbit
        from ephemjax.bodies import SolarSystemObjectIndex

        earth = planetary_orbit(SolarSystemObjectIndex.EARTH, 0.0)
        # earth.e ~ 0.01670863
        ```
    """
    _float = get_dtype()
    T = jnp.asarray(T, dtype=_float)

    resolved = resolve_body(body)
    if resolved not in ELEMENT_COEFFICIENTS:
        nan = jnp.full(T.shape, jnp.nan, dtype=_float)
        return OrbitalElements(nan, nan, nan, nan, nan, nan, nan, nan)

    coefficients = jnp.asarray(ELEMENT_COEFFICIENTS[resolved], dtype=_float)
    powers = jnp.stack([jnp.ones_like(T), T, T * T, T * T * T], axis=-1)
    values = powers @ coefficients.T

    L = normalize_degrees(values[..., 0])
    i = normalize_degrees(values[..., 3])
    omega = normalize_degrees(values[..., 4])
    pi = normalize_degrees(values[..., 5])

    return OrbitalElements(
        L=L,
        a=values[..., 1],
        e=values[..., 2],
        i=i,
        omega=omega,
        pi=pi,
        M=normalize_degrees(L - pi),
        w=normalize_degrees(pi - omega),
    )
