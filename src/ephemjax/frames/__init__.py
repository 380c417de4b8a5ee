"""Frame transformations and sidereal time.

This sub-module provides:

- **Ecliptic to equatorial**: rotation of ecliptic longitude and latitude
  by the obliquity of the ecliptic.
- **Equatorial to horizontal**: azimuth and altitude from an hour angle,
  or from sidereal time and an observer location.
- **Sidereal time**: mean and apparent Greenwich sidereal time of an
  instant or of a civil date and time.
"""

from .ecliptic import ecliptic_to_equatorial
from .horizontal import equatorial_to_horizontal, equatorial_to_horizontal_for_observer
from .sidereal import (
    apparent_greenwich_sidereal_time,
    apparent_sidereal_time_at_date_and_time,
    mean_greenwich_sidereal_time,
    mean_greenwich_sidereal_time_at_date_and_time,
)

__all__ = [
    # Ecliptic / equatorial
    "ecliptic_to_equatorial",
    # Horizontal
    "equatorial_to_horizontal",
    "equatorial_to_horizontal_for_observer",
    # Sidereal time
    "apparent_greenwich_sidereal_time",
    "apparent_sidereal_time_at_date_and_time",
    "mean_greenwich_sidereal_time",
    "mean_greenwich_sidereal_time_at_date_and_time",
]
