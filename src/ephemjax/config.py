"""Module-wide floating-point precision configuration.

Provides ``set_dtype`` and ``get_dtype`` to control the float dtype used
throughout ephemjax.  The default is ``jnp.float32``, which keeps every
series evaluation and iteration within single precision.  Switching to
``jnp.float64`` automatically enables JAX's 64-bit mode
(``jax_enable_x64``).

Call ``set_dtype`` **before** any JIT compilation, just like JAX's own
``jax.config.update("jax_enable_x64", True)``.  Under JIT, ``get_dtype()``
runs during tracing and its result is baked into the compiled program.

Integer components (e.g. the ``day`` field of
:class:`~ephemjax.time.JulianDay`) are always integers regardless of this
setting.
"""

from __future__ import annotations

import logging

import jax
import jax.numpy as jnp

logger = logging.getLogger(__name__)

_VALID_DTYPES = (jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64)

_dtype = jnp.float32


def set_dtype(dtype) -> None:
    """Set the module-wide float dtype for ephemjax.

    Must be called **before** any ``jax.jit`` compilation.  In eager mode
    the change takes effect immediately.

    If *dtype* is ``jnp.float64``, JAX's 64-bit mode is automatically
    enabled via ``jax.config.update("jax_enable_x64", True)``.

    Args:
        dtype: One of ``jnp.float16``, ``jnp.bfloat16``, ``jnp.float32``,
            or ``jnp.float64``.

    Raises:
        ValueError: If *dtype* is not a supported float type.
    """
    global _dtype
    if dtype not in _VALID_DTYPES:
        raise ValueError(
            f"Unsupported dtype {dtype}. Must be one of: "
            f"jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64"
        )
    if dtype == jnp.float64:
        jax.config.update("jax_enable_x64", True)
    _dtype = dtype
    logger.debug("ephemjax float dtype set to %s", jnp.dtype(dtype).name)


def get_dtype():
    """Return the current module-wide float dtype.

    Returns:
        The active float dtype (default ``jnp.float32``).
    """
    return _dtype


def get_convergence_tolerance() -> float:
    """Return the dtype-adaptive tolerance for the Kepler solver.

    The solver stops once successive eccentric anomalies (radians) differ
    by less than this value.  The tolerance scales with the precision of
    the configured float dtype:

    - ``float64``:  1e-12
    - ``float32``:  1e-6
    - ``float16``:  1e-3
    - ``bfloat16``: 1e-3

    Returns:
        float: Absolute tolerance between successive iterates.
    """
    if _dtype == jnp.float64:
        return 1e-12
    if _dtype == jnp.float32:
        return 1e-6
    # float16 and bfloat16
    return 1e-3


def get_light_time_tolerance() -> float:
    """Return the dtype-adaptive tolerance for the light-time iteration.

    The iteration stops once successive light-time estimates differ by
    less than this value, in days:

    - ``float64``:  1e-10 (about 10 microseconds)
    - ``float32``:  1e-6 (about 0.1 seconds)
    - ``float16``:  1e-3
    - ``bfloat16``: 1e-3

    Returns:
        float: Absolute tolerance between successive light-times. Units: *days*
    """
    if _dtype == jnp.float64:
        return 1e-10
    if _dtype == jnp.float32:
        return 1e-6
    # float16 and bfloat16
    return 1e-3
