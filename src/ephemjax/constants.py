"""
The `constants` module defines the mathematical, time and physical constants used by the ephemeris models.
"""

from jax.numpy import pi as PI

# Mathematical Constants
"""
Constant to convert degrees to radians. Equal to 2pi/360. Units: *rad/deg*
"""
DEG2RAD = 2.0 * PI / 360.0

"""
Constant to convert radians to degrees. Equal to 360/2pi. Units: *deg/rad*
"""
RAD2DEG = 360.0 / (PI * 2.0)

"""
Constant to convert arcseconds to degrees. Units: *deg/as*
"""
AS2DEG = 1.0 / 3600.0

# Time Constants

"""
Julian Day Number of the J2000.0 epoch (2000-01-01 12:00:00). Units: *days*
"""
JD_J2000 = 2451545

"""
Number of days in a Julian century. Units: *days*
"""
DAYS_PER_JULIAN_CENTURY = 36525.0

"""
Ratio of the sidereal to the mean solar rate of Earth rotation. Units: *dimensionless*

References:

1. J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, eq. 12.4
"""
SIDEREAL_RATE = 1.00273790935

# Physical Constants

"""
Light travel time across one Astronomical Unit. Units: *days/AU*

References:

1. J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, eq. 33.3
"""
LIGHT_TIME_PER_AU = 0.0057755183

"""
Constant of annual aberration. Units: *arcsec*

References:

1. J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, ch. 23
"""
ABERRATION_CONSTANT = 20.49552

"""
Normalization of the tabulated VSOP87 series (radians and AU are stored times 1e8). Units: *dimensionless*
"""
VSOP87_SCALE = 1.0e8

# Solver Limits

"""
Maximum number of Newton iterations of the Kepler equation solver.
"""
KEPLER_MAX_ITERATIONS = 10

"""
Maximum number of light-time fixed-point iterations of the geocentric pipeline.
"""
LIGHT_TIME_MAX_ITERATIONS = 10
