"""Calculation conventions and madhab settings as static lookup tables."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class CalculationConvention(str, Enum):
    """Regional authority defining the Fajr/Isha twilight parameters.

    Values are the strings persisted in user preferences.
    """

    MUSLIM_WORLD_LEAGUE = "MWL"
    ISNA = "ISNA"
    EGYPTIAN = "Egypt"
    UMM_AL_QURA = "Makkah"
    KARACHI = "Karachi"
    TEHRAN = "Tehran"
    JAFARI = "Jafari"


class Madhab(str, Enum):
    """Jurisprudence school. Selects the Asr shadow-length ratio."""

    SHAFI = "shafi"
    HANAFI = "hanafi"

    @property
    def shadow_ratio(self) -> int:
        return 2 if self is Madhab.HANAFI else 1


@dataclass(frozen=True)
class ConventionAngles:
    """Sun depression angles (degrees below the horizon) for one convention.

    Exactly one of isha_angle / isha_interval_minutes is set.
    """

    fajr_angle: float
    isha_angle: float | None = None
    isha_interval_minutes: float | None = None  # Fixed offset after sunset


CONVENTION_ANGLES: MappingProxyType[CalculationConvention, ConventionAngles] = (
    MappingProxyType(
        {
            CalculationConvention.MUSLIM_WORLD_LEAGUE: ConventionAngles(18, 17),
            CalculationConvention.ISNA: ConventionAngles(15, 15),
            CalculationConvention.EGYPTIAN: ConventionAngles(19.5, 17.5),
            CalculationConvention.UMM_AL_QURA: ConventionAngles(
                18.5, isha_interval_minutes=90
            ),
            CalculationConvention.KARACHI: ConventionAngles(18, 18),
            CalculationConvention.TEHRAN: ConventionAngles(17.7, 14),
            CalculationConvention.JAFARI: ConventionAngles(16, 14),
        }
    )
)
