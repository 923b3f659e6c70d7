"""User preferences read from the environment (.env files loaded by the entry point)."""

import logging
import os
from collections.abc import Mapping

from revertcompanion.conventions import CalculationConvention, Madhab
from revertcompanion.models import ObserverLocation, Preferences
from revertcompanion.qibla import KAABA

logger = logging.getLogger(__name__)

LANGUAGES = ("en", "ar")

DEFAULT_PREFERENCES = Preferences(
    convention=CalculationConvention.MUSLIM_WORLD_LEAGUE,
    madhab=Madhab.SHAFI,
    language="en",
    notify_before_minutes=15,
    fallback_location=KAABA,
)


def _fallback_location(env: Mapping[str, str]) -> ObserverLocation:
    lat = env.get("REVERT_LATITUDE")
    lng = env.get("REVERT_LONGITUDE")
    if lat is None or lng is None:
        return DEFAULT_PREFERENCES.fallback_location
    try:
        location = ObserverLocation(latitude=float(lat), longitude=float(lng))
    except ValueError:
        logger.warning("Ignoring stored location %r, %r: not a number", lat, lng)
        return DEFAULT_PREFERENCES.fallback_location
    if not (-90 <= location.latitude <= 90 and -180 <= location.longitude <= 180):
        logger.warning("Ignoring stored location %r, %r: out of range", lat, lng)
        return DEFAULT_PREFERENCES.fallback_location
    return location


def load_preferences(environ: Mapping[str, str] | None = None) -> Preferences:
    """Read preferences from environment variables.

    Malformed values are logged and replaced with defaults, so the calculator
    always receives a usable convention and location.

    Args:
        environ: Variable mapping. Defaults to os.environ.

    Returns:
        Preferences with every field populated.
    """
    env = os.environ if environ is None else environ
    defaults = DEFAULT_PREFERENCES

    convention = defaults.convention
    raw = env.get("REVERT_CALCULATION_METHOD")
    if raw:
        try:
            convention = CalculationConvention(raw)
        except ValueError:
            logger.warning("Unknown calculation method %r, using %s", raw, convention.value)

    madhab = defaults.madhab
    raw = env.get("REVERT_MADHAB")
    if raw:
        try:
            madhab = Madhab(raw.lower())
        except ValueError:
            logger.warning("Unknown madhab %r, using %s", raw, madhab.value)

    language = defaults.language
    raw = env.get("REVERT_LANGUAGE")
    if raw:
        if raw.lower() in LANGUAGES:
            language = raw.lower()
        else:
            logger.warning("Unsupported language %r, using %s", raw, language)

    before = defaults.notify_before_minutes
    raw = env.get("REVERT_NOTIFY_BEFORE_MINUTES")
    if raw:
        try:
            before = max(0, int(raw))
        except ValueError:
            logger.warning("Invalid reminder lead time %r, using %d", raw, before)

    return Preferences(
        convention=convention,
        madhab=madhab,
        language=language,
        notify_before_minutes=before,
        fallback_location=_fallback_location(env),
    )
