"""Location provider: geocoding, time zone lookup, and the Kaaba fallback."""

import logging
from datetime import date, datetime

import httpx
from pytz import timezone
from timezonefinder import TimezoneFinder

from revertcompanion.models import ObserverLocation
from revertcompanion.qibla import KAABA

logger = logging.getLogger(__name__)

_NOMINATIM_URL = "https://nominatim.openstreetmap.org/search"
_USER_AGENT = "RevertCompanion/1.0 (prayer times)"
_tf = TimezoneFinder()


class LocationError(Exception):
    """Geocoder call failure."""


def geocode_address(address: str) -> ObserverLocation:
    """Resolve an address string to a coordinate through Nominatim (OpenStreetMap).

    Args:
        address: Free-form address in any language.

    Returns:
        ObserverLocation with the geocoder's display name as label.

    Raises:
        LocationError: On HTTP failure or when the address cannot be found.
    """
    params = {"q": address, "format": "json", "limit": 1}
    try:
        resp = httpx.get(
            _NOMINATIM_URL,
            params=params,
            headers={"User-Agent": _USER_AGENT},
            timeout=10,
        )
        resp.raise_for_status()
        results = resp.json()
    except (httpx.HTTPError, ValueError) as e:
        raise LocationError(f"Geocoder request failed: {e}") from e
    if not results:
        raise LocationError(f"Address not found: {address}")
    try:
        r = results[0]
        return ObserverLocation(
            latitude=float(r["lat"]), longitude=float(r["lon"]), label=r["display_name"]
        )
    except (KeyError, TypeError, IndexError, ValueError) as e:
        raise LocationError(f"Unexpected geocoder response: {results!r}") from e


def resolve_location(
    address: str | None = None,
    fallback: ObserverLocation | None = None,
) -> ObserverLocation:
    """Best-effort location for the calculator. Never raises.

    Geocodes address when given; otherwise, or when geocoding fails, returns
    fallback (the Kaaba when no fallback is stored).
    """
    fallback = fallback or KAABA
    if not address:
        return fallback
    try:
        return geocode_address(address)
    except LocationError as e:
        logger.warning("Falling back to %s: %s", fallback.label or "stored location", e)
        return fallback


def zone_offset_hours(location: ObserverLocation, day: date) -> float | None:
    """UTC offset in hours of the location's civil time zone at noon on day.

    Returns None when the coordinate has no time zone (open sea).
    """
    tz_str = _tf.timezone_at(lat=location.latitude, lng=location.longitude)
    if tz_str is None:
        logger.info(
            "No time zone at lat=%s, lng=%s", location.latitude, location.longitude
        )
        return None
    local_noon = timezone(tz_str).localize(datetime(day.year, day.month, day.day, 12))
    offset = local_noon.utcoffset()
    assert offset is not None
    return offset.total_seconds() / 3600
