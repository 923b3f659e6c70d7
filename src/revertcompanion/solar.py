"""Low-precision solar ephemeris: declination, equation of time, and sun event hours.

Accuracy is about one minute between 1950 and 2050, which is enough for
prayer timetables.
"""

import math
from datetime import date

from revertcompanion.models import SolarPosition

J2000 = 2451545.0
SUNRISE_ELEVATION = -0.833  # Refraction plus solar disk radius


def julian_day(day: date) -> float:
    """Return the Julian Day Number of a Gregorian calendar date (noon)."""
    a = (14 - day.month) // 12
    y = day.year + 4800 - a
    m = day.month + 12 * a - 3
    jdn = (
        day.day
        + (153 * m + 2) // 5
        + 365 * y
        + y // 4
        - y // 100
        + y // 400
        - 32045
    )
    return float(jdn)


def hour_angle(declination_radians: float, latitude: float, elevation: float) -> float:
    """Hour angle (degrees) at which the sun crosses the given elevation.

    Args:
        declination_radians: Solar declination.
        latitude: Observer latitude in degrees.
        elevation: Solar elevation in degrees (negative = below the horizon).

    Returns:
        The hour angle in degrees, or NaN when the sun never reaches that
        elevation on this date (polar day or night).
    """
    lat = math.radians(latitude)
    cos_h = (
        math.sin(math.radians(elevation))
        - math.sin(declination_radians) * math.sin(lat)
    ) / (math.cos(declination_radians) * math.cos(lat))
    if not -1.0 <= cos_h <= 1.0:
        return math.nan
    return math.degrees(math.acos(cos_h))


def compute_solar_position(
    day: date,
    longitude: float,
    latitude: float,
    utc_offset_hours: float | None = None,
) -> SolarPosition:
    """Compute solar noon, sunrise, sunset, and declination for one date.

    Args:
        day: Calendar date. Only the day matters.
        longitude: Observer longitude in degrees, east positive.
        latitude: Observer latitude in degrees.
        utc_offset_hours: Clock offset from UTC. None means local mean time
            of the observer's meridian (longitude / 15).

    Returns:
        SolarPosition with unnormalized fractional hours.
    """
    d = julian_day(day) - J2000
    g = (357.529 + 0.98560028 * d) % 360
    q = (280.459 + 0.98564736 * d) % 360
    ecliptic_lng = (
        q + 1.915 * math.sin(math.radians(g)) + 0.020 * math.sin(math.radians(2 * g))
    ) % 360
    obliquity = math.radians(23.439 - 0.00000036 * d)
    sin_l = math.sin(math.radians(ecliptic_lng))

    declination = math.asin(math.sin(obliquity) * sin_l)
    ra_hours = (
        math.degrees(
            math.atan2(math.cos(obliquity) * sin_l, math.cos(math.radians(ecliptic_lng)))
        )
        / 15
    ) % 24
    # q and RA can sit on opposite sides of the 0h wrap
    eq_time = (q / 15 - ra_hours + 12) % 24 - 12

    zone = longitude / 15 if utc_offset_hours is None else utc_offset_hours
    noon = 12 + zone - longitude / 15 - eq_time
    half_day = hour_angle(declination, latitude, SUNRISE_ELEVATION) / 15

    return SolarPosition(
        sunrise_hour=noon - half_day,
        solar_noon_hour=noon,
        sunset_hour=noon + half_day,
        declination_radians=declination,
        equation_of_time_hours=eq_time,
    )
