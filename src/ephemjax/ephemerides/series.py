"""Truncated VSOP87 periodic series.

A VSOP87 coordinate (heliocentric longitude, latitude or radius) is a
polynomial in time whose coefficients are themselves sums of periodic
terms:

    value(T') = sum_k [ sum_j A_j cos(B_j + C_j T') ] T'**k / 1e8

with ``T'`` in Julian millennia from J2000.0.  Each inner sum is one
coefficient *table*; a body carries up to six tables (orders 0 to 5) per
coordinate.  Tables are immutable nested tuples of ``(A, B, C)`` triples
and are only converted to JAX arrays, in the configured dtype, at
evaluation time.

References:
    1. P. Bretagnon and G. Francou, "Planetary theories in rectangular
       and spherical variables. VSOP87 solutions", *Astronomy and
       Astrophysics* 202, 309-315, 1988.
    2. J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, ch. 32.
"""

from __future__ import annotations

from typing import NamedTuple

import jax
import jax.numpy as jnp
from jax.typing import ArrayLike

from ephemjax.config import get_dtype
from ephemjax.constants import VSOP87_SCALE

SeriesTable = tuple[tuple[float, float, float], ...]
"""One table of ``(amplitude, phase, frequency)`` terms."""


class VSOP87Series(NamedTuple):
    """Coefficient tables of one body.

    Attributes:
        L: Heliocentric longitude tables, orders 0 upward.
        B: Heliocentric latitude tables, orders 0 upward.
        R: Radius vector tables, orders 0 upward.
    """

    L: tuple[SeriesTable, ...]
    B: tuple[SeriesTable, ...]
    R: tuple[SeriesTable, ...]


def sum_vsop87_coefs(table: SeriesTable, T: ArrayLike) -> jax.Array:
    """Sum the periodic terms of one coefficient table.

    Computes ``sum A * cos(B + C * T)`` over every term.  An empty table
    sums to zero.

    Args:
        table: Sequence of ``(A, B, C)`` terms.
        T: Time argument of the series (Julian millennia for VSOP87).

    Returns:
        Table value with the shape of *T*.
    """
    _float = get_dtype()
    T = jnp.asarray(T, dtype=_float)
    if len(table) == 0:
        return jnp.zeros_like(T)

    terms = jnp.asarray(table, dtype=_float)
    A = terms[:, 0]
    B = terms[:, 1]
    C = terms[:, 2]
    return jnp.sum(A * jnp.cos(B + C * T[..., None]), axis=-1)


def evaluate_vsop87(tables: tuple[SeriesTable, ...], T: ArrayLike) -> jax.Array:
    """Evaluate a full VSOP87 coordinate from its order tables.

    Combines the table sums as a polynomial in *T* (Horner form) and
    removes the ``1e8`` scaling of the tabulated amplitudes.

    Args:
        tables: Tables of orders 0, 1, ... for one coordinate.
        T: Julian millennia since J2000.0.

    Returns:
        Coordinate value in radians (longitude, latitude) or AU (radius).
    """
    _float = get_dtype()
    T = jnp.asarray(T, dtype=_float)

    value = jnp.zeros_like(T)
    for table in reversed(tables):
        value = value * T + sum_vsop87_coefs(table, T)
    return value / _float(VSOP87_SCALE)
