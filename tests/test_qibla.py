import math

import pytest

from revertcompanion.models import ObserverLocation
from revertcompanion.qibla import KAABA, distance_to_kaaba, qibla_bearing


def test_due_south_of_kaaba_faces_north():
    assert qibla_bearing(ObserverLocation(0.0, KAABA.longitude)) == pytest.approx(0.0, abs=1e-9)


def test_due_north_of_kaaba_faces_south():
    assert qibla_bearing(ObserverLocation(50.0, KAABA.longitude)) == pytest.approx(180.0)


def test_bearing_at_kaaba_is_finite():
    bearing = qibla_bearing(KAABA)
    assert math.isfinite(bearing)
    assert bearing == 0.0


@pytest.mark.parametrize(
    ("location", "expected"),
    [
        (ObserverLocation(40.0, -74.0), 58.5),  # New York
        (ObserverLocation(51.5074, -0.1278), 119.0),  # London
        (ObserverLocation(-6.2088, 106.8456), 295.0),  # Jakarta
        (ObserverLocation(-33.8688, 151.2093), 277.5),  # Sydney
    ],
)
def test_bearing_for_known_cities(location, expected):
    assert qibla_bearing(location) == pytest.approx(expected, abs=1.5)


@pytest.mark.parametrize("latitude", [-89.0, -45.0, 0.0, 45.0, 89.0])
@pytest.mark.parametrize("longitude", [-180.0, -90.0, 0.0, 90.0, 180.0])
def test_bearing_is_normalized(latitude, longitude):
    bearing = qibla_bearing(ObserverLocation(latitude, longitude))
    assert 0.0 <= bearing < 360.0


def test_distance_from_new_york():
    assert 10_000 <= distance_to_kaaba(ObserverLocation(40.0, -74.0)) <= 10_500


def test_distance_at_kaaba_is_zero():
    assert distance_to_kaaba(KAABA) == pytest.approx(0.0)


def test_distance_to_antipode_is_half_circumference():
    antipode = ObserverLocation(-KAABA.latitude, KAABA.longitude - 180.0)
    assert distance_to_kaaba(antipode) == pytest.approx(math.pi * 6371.0, rel=1e-6)
