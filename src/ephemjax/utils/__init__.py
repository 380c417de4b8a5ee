"""Shared utility functions for ephemjax.

Provides angle conversion, range normalization and sexagesimal helpers.
"""

from ephemjax.utils._angle import (
    degrees_to_hours,
    dms_to_floating_degrees,
    floating_degrees_to_dms,
    floating_hours_to_hms,
    from_radians,
    hms_to_floating_hours,
    hours_to_degrees,
    normalize_degrees,
    normalize_hours,
    to_radians,
)

__all__ = [
    "degrees_to_hours",
    "dms_to_floating_degrees",
    "floating_degrees_to_dms",
    "floating_hours_to_hms",
    "from_radians",
    "hms_to_floating_hours",
    "hours_to_degrees",
    "normalize_degrees",
    "normalize_hours",
    "to_radians",
]
