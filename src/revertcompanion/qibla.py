"""Qibla direction and distance to the Kaaba on a spherical Earth."""

import math

from revertcompanion.models import ObserverLocation

KAABA = ObserverLocation(latitude=21.4225, longitude=39.8262, label="Kaaba, Makkah")
EARTH_RADIUS_KM = 6371.0


def qibla_bearing(location: ObserverLocation) -> float:
    """Initial great-circle bearing toward the Kaaba.

    Args:
        location: Observer coordinate.

    Returns:
        Degrees clockwise from true north in [0, 360). At the Kaaba itself
        the bearing is undefined and 0.0 is returned.
    """
    lat1 = math.radians(location.latitude)
    lat2 = math.radians(KAABA.latitude)
    d_lng = math.radians(KAABA.longitude - location.longitude)

    x = math.sin(d_lng) * math.cos(lat2)
    y = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(d_lng)
    return (math.degrees(math.atan2(x, y)) + 360) % 360


def distance_to_kaaba(location: ObserverLocation) -> float:
    """Haversine great-circle distance to the Kaaba in kilometers."""
    lat1 = math.radians(location.latitude)
    lat2 = math.radians(KAABA.latitude)
    d_lat = lat2 - lat1
    d_lng = math.radians(KAABA.longitude - location.longitude)

    a = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lng / 2) ** 2
    return EARTH_RADIUS_KM * 2 * math.asin(min(1.0, math.sqrt(a)))
