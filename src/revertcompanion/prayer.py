"""Prayer time calculation from the solar position."""

import math
from datetime import date, time

from revertcompanion.conventions import (
    CONVENTION_ANGLES,
    CalculationConvention,
    Madhab,
)
from revertcompanion.models import NextPrayer, ObserverLocation, PrayerHours, PrayerTimes
from revertcompanion.solar import compute_solar_position, hour_angle

UNDEFINED_TIME = "--:--"

# The five obligatory prayers, in day order. Sunrise is a time, not a prayer.
PRAYERS: tuple[str, ...] = ("fajr", "dhuhr", "asr", "maghrib", "isha")


def _asr_elevation(latitude: float, declination_radians: float, shadow_ratio: int) -> float:
    """Sun elevation (degrees) when an object's shadow is ratio × its length plus the noon shadow."""
    zenith_at_noon = abs(math.radians(latitude) - declination_radians)
    return math.degrees(math.atan(1 / (shadow_ratio + math.tan(zenith_at_noon))))


def calculate_prayer_hours(
    day: date,
    location: ObserverLocation,
    convention: CalculationConvention | str = CalculationConvention.MUSLIM_WORLD_LEAGUE,
    madhab: Madhab | str = Madhab.SHAFI,
    utc_offset_hours: float | None = None,
) -> PrayerHours:
    """Compute the six daily times as fractional hours.

    Args:
        day: Calendar date.
        location: Observer coordinate.
        convention: Calculation convention or its persisted string value.
        madhab: Asr school or its persisted string value.
        utc_offset_hours: Clock offset from UTC. None = local mean time.

    Returns:
        PrayerHours, unnormalized. Times the sun never reaches are NaN.
    """
    angles = CONVENTION_ANGLES[CalculationConvention(convention)]
    shadow_ratio = Madhab(madhab).shadow_ratio
    sun = compute_solar_position(
        day, location.longitude, location.latitude, utc_offset_hours
    )
    decl = sun.declination_radians
    lat = location.latitude
    noon = sun.solar_noon_hour

    fajr = noon - hour_angle(decl, lat, -angles.fajr_angle) / 15
    asr = noon + hour_angle(decl, lat, _asr_elevation(lat, decl, shadow_ratio)) / 15
    if angles.isha_interval_minutes is not None:
        isha = sun.sunset_hour + angles.isha_interval_minutes / 60
    else:
        assert angles.isha_angle is not None
        isha = noon + hour_angle(decl, lat, -angles.isha_angle) / 15

    return PrayerHours(
        fajr=fajr,
        sunrise=sun.sunrise_hour,
        dhuhr=noon,
        asr=asr,
        maghrib=sun.sunset_hour,
        isha=isha,
    )


def format_time(hours: float) -> str:
    """Format fractional hours as 24-hour "HH:MM", reduced modulo 24 hours.

    Minutes are rounded half up, carrying into the hour. Non-finite input
    gives "--:--".
    """
    if not math.isfinite(hours):
        return UNDEFINED_TIME
    total_minutes = math.floor(hours * 60 + 0.5) % (24 * 60)
    hour, minute = divmod(total_minutes, 60)
    return f"{hour:02d}:{minute:02d}"


def calculate_prayer_times(
    day: date,
    location: ObserverLocation,
    convention: CalculationConvention | str = CalculationConvention.MUSLIM_WORLD_LEAGUE,
    madhab: Madhab | str = Madhab.SHAFI,
    utc_offset_hours: float | None = None,
) -> PrayerTimes:
    """Compute the six daily times as "HH:MM" strings.

    Each time is reduced modulo 24 hours on its own; no ordering between
    times is enforced.
    """
    hours = calculate_prayer_hours(day, location, convention, madhab, utc_offset_hours)
    return PrayerTimes(**{name: format_time(value) for name, value in hours.items()})


def _minutes(value: str) -> int:
    hour, minute = (int(part) for part in value.split(":"))
    return hour * 60 + minute


def next_prayer(times: PrayerTimes, now: time) -> NextPrayer:
    """Return the first prayer strictly after now, else tomorrow's Fajr.

    Asr, Maghrib and Isha that fall earlier on the clock than Dhuhr have
    wrapped past midnight and count as late evening. Undefined times are
    skipped.
    """
    current = now.hour * 60 + now.minute
    dhuhr = None if times.dhuhr == UNDEFINED_TIME else _minutes(times.dhuhr)
    for name in PRAYERS:
        value = getattr(times, name)
        if value == UNDEFINED_TIME:
            continue
        minutes = _minutes(value)
        if name in ("asr", "maghrib", "isha") and dhuhr is not None and minutes < dhuhr:
            minutes += 24 * 60
        if minutes > current:
            return NextPrayer(name=name, time=value, tomorrow=False)
    return NextPrayer(name="fajr", time=times.fajr, tomorrow=True)


def reminder_times(times: PrayerTimes, before_minutes: int) -> dict[str, str]:
    """Clock time before_minutes ahead of each prayer, wrapped past midnight."""
    reminders: dict[str, str] = {}
    for name in PRAYERS:
        value = getattr(times, name)
        if value == UNDEFINED_TIME:
            reminders[name] = UNDEFINED_TIME
            continue
        reminders[name] = format_time((_minutes(value) - before_minutes) / 60)
    return reminders
