"""
ephemjax computes apparent positions of the Sun and the major planets from closed-form series, implemented in JAX.
"""

from .constants import (
    DEG2RAD,
    RAD2DEG,
    AS2DEG,
    JD_J2000,
    DAYS_PER_JULIAN_CENTURY,
    LIGHT_TIME_PER_AU,
    ABERRATION_CONSTANT,
)

from .config import set_dtype, get_dtype, get_convergence_tolerance, get_light_time_tolerance

from .time import JulianDay, julian_day, julian_day_from_jd, julian_centuries

from .bodies import SolarSystemObjectIndex, PLANETS, DIAMETER_AT_1AU

from .coordinates import (
    HeliocentricCoordinates,
    RectangularCoordinates,
    GeocentricCoordinates,
    EquatorialCoordinates,
    HorizontalCoordinates,
    heliocentric_to_rectangular,
    rectangular_to_geocentric,
)

from .orbits import OrbitalElements, planetary_orbit, kepler, anomaly_eccentric_to_mean

from .nutation import ObliquityNutation, obliquity_and_nutation, mean_obliquity

from .frames import (
    ecliptic_to_equatorial,
    equatorial_to_horizontal,
    equatorial_to_horizontal_for_observer,
    mean_greenwich_sidereal_time,
    apparent_greenwich_sidereal_time,
    mean_greenwich_sidereal_time_at_date_and_time,
    apparent_sidereal_time_at_date_and_time,
)

from .ephemerides import (
    sum_vsop87_coefs,
    evaluate_vsop87,
    heliocentric_coordinates,
    GeocentricPosition,
    geocentric_coordinates_for_planet,
    equatorial_coordinates_for_planet,
    equatorial_coordinates_for_sun,
    sun_true_longitude,
)

from .observer import (
    ObserverLocation,
    UNKNOWN_LOCATION,
    observer_location,
    observer_location_dms,
    set_location_on_earth,
    set_location_on_earth_dms,
    get_location_on_earth,
    reset_location_on_earth,
)

from .solar_system import (
    SolarSystemObject,
    solar_system_object_at_jd,
    solar_system_object_at_date_and_time,
)

from .utils import (
    to_radians,
    from_radians,
    normalize_degrees,
    normalize_hours,
    degrees_to_hours,
    hours_to_degrees,
    floating_degrees_to_dms,
    dms_to_floating_degrees,
    floating_hours_to_hms,
    hms_to_floating_hours,
)
