"""Kepler's equation.

Provides the forward relation ``M = E - e sin(E)`` and an iterative
Newton solver for the eccentric anomaly.  The solver is implemented with
``jax.lax.while_loop`` so it can be traced by ``jax.jit`` and mapped with
``jax.vmap``.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from ephemjax.config import get_convergence_tolerance, get_dtype
from ephemjax.constants import KEPLER_MAX_ITERATIONS
from ephemjax.utils import from_radians, to_radians


def anomaly_eccentric_to_mean(anm_ecc: ArrayLike, e: ArrayLike, use_degrees: bool = True) -> Array:
    """Convert eccentric anomaly to mean anomaly.

    Applies Kepler's equation: ``M = E - e * sin(E)``.

    Args:
        anm_ecc: Eccentric anomaly. Units: *deg* or *rad*
        e: Eccentricity. Dimensionless.
        use_degrees: If ``True`` (default), input and output are in degrees.

    Returns:
        Mean anomaly. Units: *deg* or *rad*

    References:
        O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and
        Applications*, 2012. Eq. 2.65.

    Examples:
        ```python
        from ephemjax.orbits import anomaly_eccentric_to_mean
        M = anomaly_eccentric_to_mean(90.0, 0.1)
        ```
    """
    anm_ecc = jnp.asarray(anm_ecc, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())

    E = to_radians(anm_ecc, use_degrees)
    M = E - e * jnp.sin(E)
    return from_radians(M, use_degrees)


def kepler(anm_mean: ArrayLike, e: ArrayLike) -> Array:
    """Solve Kepler's equation for the eccentric anomaly.

    Newton iteration starting from ``E0 = M``::

        E <- E + (M + e sin(E) - E) / (1 - e cos(E))

    Iteration stops once the correction falls below
    :func:`~ephemjax.config.get_convergence_tolerance` (radians) or after
    ``KEPLER_MAX_ITERATIONS`` steps, whichever comes first.  When the cap
    is reached the latest estimate is returned.

    Args:
        anm_mean: Mean anomaly. Units: *deg*
        e: Eccentricity, ``0 <= e < 1``. Dimensionless.

    Returns:
        Eccentric anomaly. Units: *deg*

    References:
        J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, ch. 30.

    Examples:
        ```python
        from ephemjax.orbits import kepler
        E = kepler(5.0, 0.1)   # ~5.554589 deg
        ```
    """
    M = jnp.deg2rad(jnp.asarray(anm_mean, dtype=get_dtype()))
    e = jnp.asarray(e, dtype=get_dtype())
    eps = get_convergence_tolerance()

    def cond(state):
        E, E_prev, i = state
        return jnp.any(jnp.abs(E - E_prev) > eps) & (i < KEPLER_MAX_ITERATIONS)

    def body(state):
        E, _, i = state
        E_new = E + (M + e * jnp.sin(E) - E) / (1.0 - e * jnp.cos(E))
        return (E_new, E, i + 1)

    E0 = jnp.broadcast_to(M, jnp.broadcast_shapes(M.shape, e.shape))
    # Force the first iteration by starting the previous estimate far away
    init_state = (E0, E0 + 1.0, jnp.int32(0))
    E, _, _ = jax.lax.while_loop(cond, body, init_state)

    return jnp.rad2deg(E)
