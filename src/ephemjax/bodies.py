"""Solar system body identifiers and per-body physical data.

Bodies are identified by :class:`SolarSystemObjectIndex`.  Plain integers
are accepted wherever a body is expected; any value outside the
enumeration is treated as an unsupported body and yields NaN results
rather than an exception.
"""

from __future__ import annotations

import enum
import logging
import math

logger = logging.getLogger(__name__)


class SolarSystemObjectIndex(enum.IntEnum):
    """Bodies supported by the ephemeris engine.

    The Moon and minor bodies are not modeled.
    """

    SUN = 0
    MERCURY = 1
    VENUS = 2
    EARTH = 3
    MARS = 4
    JUPITER = 5
    SATURN = 6
    URANUS = 7
    NEPTUNE = 8


"""
The eight major planets, Mercury through Neptune.
"""
PLANETS: tuple[SolarSystemObjectIndex, ...] = tuple(
    body for body in SolarSystemObjectIndex if body != SolarSystemObjectIndex.SUN
)

"""
Apparent angular diameter of each body seen from a distance of 1 AU. Earth
is undefined because it is never observed from outside. Units: *arcsec*

References:

1. J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, ch. 55
"""
DIAMETER_AT_1AU: dict[SolarSystemObjectIndex, float] = {
    SolarSystemObjectIndex.SUN: 1919.26,
    SolarSystemObjectIndex.MERCURY: 6.728,
    SolarSystemObjectIndex.VENUS: 16.688,
    SolarSystemObjectIndex.EARTH: math.nan,
    SolarSystemObjectIndex.MARS: 9.364,
    SolarSystemObjectIndex.JUPITER: 197.146,
    SolarSystemObjectIndex.SATURN: 166.197,
    SolarSystemObjectIndex.URANUS: 70.476,
    SolarSystemObjectIndex.NEPTUNE: 68.285,
}


def resolve_body(body) -> SolarSystemObjectIndex | None:
    """Map a body identifier to its enumeration member.

    Args:
        body: A :class:`SolarSystemObjectIndex` or its integer value.

    Returns:
        The enumeration member, or ``None`` if *body* is not supported.
    """
    try:
        return SolarSystemObjectIndex(body)
    except ValueError:
        logger.warning("Unsupported solar system body %r; results will be NaN", body)
        return None
