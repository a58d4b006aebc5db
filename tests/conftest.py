"""
Shared fixtures: Vincenty (1975) published test lines.

Direct and Inverse Solutions of Geodesics on the Ellipsoid with Applications
of Nested Equations, T. Vincenty, Survey Review XXII/176, April 1975.
Line (a) is on the Bessel ellipsoid, lines (b) to (e) on the International
(Hayford) ellipsoid. Lines (d) and (e) are nearly antipodal but still converge.
"""

import math
import os
import sys
from dataclasses import dataclass

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from survey_geodesy.core.models.ellipsoid import Ellipsoid, BESSEL, HAYFORD
from survey_geodesy.core.models.latlng import LatLng
from survey_geodesy.core.units import DMS, plus_minus_value


@dataclass(frozen=True)
class ReferenceLine:
    """One published test line."""
    label: str
    ellipsoid: Ellipsoid
    start: LatLng
    end: LatLng
    distance: float           # meters
    azimuth: DMS              # forward azimuth at start
    reverse_azimuth: DMS      # azimuth at end

    @property
    def azimuth_rad(self) -> float:
        return self.azimuth.to_radians().value

    @property
    def reverse_azimuth_rad(self) -> float:
        return self.reverse_azimuth.to_radians().value


VINCENTY_1975 = [
    ReferenceLine(
        label="a",
        ellipsoid=BESSEL,
        start=LatLng.from_dms(DMS(55, 45, 0.0), DMS(0, 0, 0.0)),
        end=LatLng.from_dms(DMS(-33, 26, 0.0), DMS(108, 13, 0.0)),
        distance=14110526.170,
        azimuth=DMS(96, 36, 8.79960),
        reverse_azimuth=DMS(137, 52, 22.01454),
    ),
    ReferenceLine(
        label="b",
        ellipsoid=HAYFORD,
        start=LatLng.from_dms(DMS(37, 19, 54.95367), DMS(0, 0, 0.0)),
        end=LatLng.from_dms(DMS(26, 7, 42.83946), DMS(41, 28, 35.50729)),
        distance=4085966.703,
        azimuth=DMS(95, 27, 59.63089),
        reverse_azimuth=DMS(118, 5, 58.96161),
    ),
    ReferenceLine(
        label="c",
        ellipsoid=HAYFORD,
        start=LatLng.from_dms(DMS(35, 16, 11.24862), DMS(0, 0, 0.0)),
        end=LatLng.from_dms(DMS(67, 22, 14.77638), DMS(137, 47, 28.31435)),
        distance=8084823.839,
        azimuth=DMS(15, 44, 23.74850),
        reverse_azimuth=DMS(144, 55, 39.92147),
    ),
    ReferenceLine(
        label="d",
        ellipsoid=HAYFORD,
        start=LatLng.from_dms(DMS(1, 0, 0.0), DMS(0, 0, 0.0)),
        end=LatLng.from_dms(DMS(0, -59, 53.83076), DMS(179, 17, 48.02997)),
        distance=19960000.000,
        azimuth=DMS(89, 0, 0.0),
        reverse_azimuth=DMS(91, 0, 6.11733),
    ),
    ReferenceLine(
        label="e",
        ellipsoid=HAYFORD,
        start=LatLng.from_dms(DMS(1, 0, 0.0), DMS(0, 0, 0.0)),
        end=LatLng.from_dms(DMS(1, 1, 15.18952), DMS(179, 46, 17.84244)),
        distance=19780006.558,
        azimuth=DMS(4, 59, 59.99995),
        reverse_azimuth=DMS(174, 59, 59.88481),
    ),
]


def position_error(ellipsoid: Ellipsoid, p: LatLng, q: LatLng) -> float:
    """Approximate separation of two nearby points in meters."""
    d_lat = q.lat - p.lat
    d_lng = plus_minus_value(q.lng - p.lng, math.pi)
    a = ellipsoid.equatorial_radius
    return math.hypot(d_lat * a, d_lng * a * math.cos(p.lat))


@pytest.fixture
def boston():
    return LatLng.from_degrees(42.3541165, -71.0693514)


@pytest.fixture
def newyork():
    return LatLng.from_degrees(40.7791472, -73.9680804)
