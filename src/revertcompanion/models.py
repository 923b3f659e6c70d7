"""Data model definitions with explicit boundaries between location, solar, and prayer layers."""

from collections.abc import Iterator
from dataclasses import astuple, dataclass, field, fields
from datetime import date

from revertcompanion.conventions import CalculationConvention, Madhab


@dataclass(frozen=True)
class ObserverLocation:
    """Geographic coordinate supplied fresh to every calculation."""

    latitude: float  # Decimal degrees, north positive
    longitude: float  # Decimal degrees, east positive
    label: str | None = None  # Display name returned by the geocoder


@dataclass(frozen=True)
class SolarPosition:
    """Sun timings for one calendar date at one observer. Hours are not normalized."""

    sunrise_hour: float
    solar_noon_hour: float
    sunset_hour: float
    declination_radians: float
    equation_of_time_hours: float


@dataclass(frozen=True)
class PrayerHours:
    """The six daily times as fractional hours. NaN where the sun never reaches the angle."""

    fajr: float
    sunrise: float
    dhuhr: float
    asr: float
    maghrib: float
    isha: float

    def items(self) -> Iterator[tuple[str, float]]:
        """Yield (name, hours) pairs in day order."""
        for f, value in zip(fields(self), astuple(self)):
            yield f.name, value


@dataclass(frozen=True)
class PrayerTimes:
    """The six daily times as "HH:MM" strings ("--:--" when undefined)."""

    fajr: str
    sunrise: str
    dhuhr: str
    asr: str
    maghrib: str
    isha: str

    def items(self) -> Iterator[tuple[str, str]]:
        """Yield (name, "HH:MM") pairs in day order."""
        for f, value in zip(fields(self), astuple(self)):
            yield f.name, value


@dataclass(frozen=True)
class NextPrayer:
    """The upcoming prayer relative to a wall-clock time."""

    name: str  # "fajr", "dhuhr", ...
    time: str  # "HH:MM"
    tomorrow: bool  # True when every prayer today has passed


@dataclass(frozen=True)
class Preferences:
    """User settings that feed the calculator at each call site."""

    convention: CalculationConvention
    madhab: Madhab
    language: str  # "en" or "ar"
    notify_before_minutes: int
    fallback_location: ObserverLocation


@dataclass(frozen=True)
class DayRecord:
    """Which of the five prayers were prayed on one calendar day."""

    fajr: bool = False
    dhuhr: bool = False
    asr: bool = False
    maghrib: bool = False
    isha: bool = False

    @property
    def prayed_count(self) -> int:
        return sum(astuple(self))

    @property
    def complete(self) -> bool:
        return all(astuple(self))


@dataclass(frozen=True)
class Progress:
    """Prayer and learning progress. Updated by returning new values, never in place."""

    daily_prayers: dict[date, DayRecord] = field(default_factory=dict)
    lessons_completed: tuple[str, ...] = ()
    streak: int = 0  # Days on which all five prayers were recorded on the day itself
    total_points: int = 0


@dataclass(frozen=True)
class Achievement:
    """A progress milestone, unlocked or still to reach."""

    id: str
    title: str
    description: str
    unlocked: bool
