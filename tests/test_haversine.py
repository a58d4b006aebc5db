"""Tests for the spherical (haversine) solvers."""

import math
import pytest

from survey_geodesy.core.models import (
    LatLng,
    Azimuth,
    Distance,
    DirectProblem,
    InverseProblem,
    EARTH_RADIUS,
    WGS84,
)
from survey_geodesy.core.solver.haversine import (
    haversine,
    haversine_distance,
    haversine_inverse,
    haversine_direct,
    initial_bearing,
    final_bearing,
)
from survey_geodesy.core.solver import trig
from survey_geodesy.core.solver.vincenty_inverse import distance


class TestHaversine:
    """Tests for the haversine function and great-circle distance."""

    def test_haversine(self):
        assert haversine(0.0) == 0.0
        assert haversine(math.pi) == pytest.approx(1.0)
        assert haversine(math.pi / 2.0) == pytest.approx(0.5)

    def test_one_degree(self):
        d = haversine_distance(LatLng.from_degrees(0.0, 0.0), LatLng.from_degrees(0.0, 1.0))
        assert d.meters == pytest.approx(EARTH_RADIUS * math.radians(1.0), rel=1e-12)

    def test_antipodes(self):
        """The sphere has no antipodal failure: half the circumference."""
        d = haversine_distance(LatLng.from_degrees(0.0, 0.0), LatLng.from_degrees(0.0, 180.0))
        assert d.meters == pytest.approx(math.pi * EARTH_RADIUS, rel=1e-12)

    def test_custom_radius(self):
        d = haversine_distance(LatLng(0.0, 0.0), LatLng(0.0, 1.0), radius=1.0)
        assert d.meters == pytest.approx(1.0, rel=1e-12)

    def test_close_to_vincenty(self, boston, newyork):
        """Spherical and ellipsoidal distances agree to within 0.5%."""
        spherical = haversine_distance(boston, newyork).meters
        ellipsoidal = distance(WGS84, boston, newyork).meters
        assert abs(spherical - ellipsoidal) / ellipsoidal < 0.005

    def test_nan_propagates(self):
        """A NaN latitude gives a NaN distance, not half the circumference."""
        d = haversine_distance(LatLng(math.nan, 0.0), LatLng(0.1, 0.2))
        assert math.isnan(d.meters)

    def test_infinite_input_propagates(self):
        d = haversine_distance(LatLng(math.inf, 0.0), LatLng(0.1, 0.2))
        assert math.isnan(d.meters)


class TestTrig:
    """Trigonometric functions return NaN for non-finite arguments."""

    @pytest.mark.parametrize("fn", [trig.sin, trig.cos, trig.tan], ids=lambda fn: fn.__name__)
    @pytest.mark.parametrize("x", [math.inf, -math.inf, math.nan])
    def test_non_finite(self, fn, x):
        assert math.isnan(fn(x))

    def test_finite_matches_math(self):
        for x in (0.0, 0.5, -1.25, 3.0):
            assert trig.sin(x) == math.sin(x)
            assert trig.cos(x) == math.cos(x)
            assert trig.tan(x) == math.tan(x)


class TestBearings:
    """Tests for initial and final bearings."""

    def test_due_east_on_equator(self):
        x = LatLng.from_degrees(0.0, 0.0)
        y = LatLng.from_degrees(0.0, 10.0)
        assert initial_bearing(x, y).radians == pytest.approx(math.pi / 2.0)
        assert final_bearing(x, y).radians == pytest.approx(math.pi / 2.0)

    def test_due_north(self):
        x = LatLng.from_degrees(10.0, 20.0)
        y = LatLng.from_degrees(30.0, 20.0)
        assert initial_bearing(x, y).radians == pytest.approx(0.0, abs=1e-15)

    def test_final_bearing_normalized(self):
        x = LatLng.from_degrees(40.0, -70.0)
        y = LatLng.from_degrees(50.0, 0.0)
        az = final_bearing(x, y).radians
        assert 0.0 <= az < 2.0 * math.pi


class TestSphericalProblems:
    """Tests for haversine_inverse and haversine_direct."""

    def test_inverse(self):
        solution = haversine_inverse(InverseProblem(LatLng.from_degrees(0.0, 0.0), LatLng.from_degrees(0.0, 1.0)))
        assert solution.distance.meters == pytest.approx(EARTH_RADIUS * math.radians(1.0), rel=1e-12)
        assert solution.azimuth.radians == pytest.approx(math.pi / 2.0)
        assert solution.reverse_azimuth.radians == pytest.approx(math.pi / 2.0)

    def test_direct(self):
        problem = DirectProblem(
            LatLng.from_degrees(0.0, 0.0),
            Azimuth.from_degrees(90.0),
            Distance(EARTH_RADIUS * math.radians(1.0)),
        )
        solution = haversine_direct(problem)
        assert solution.end.lat == pytest.approx(0.0, abs=1e-12)
        assert solution.end.lng_degrees == pytest.approx(1.0, rel=1e-12)
        assert solution.azimuth.radians == pytest.approx(math.pi / 2.0)

    def test_direct_inverse_consistency(self):
        x = LatLng.from_degrees(48.85, 2.35)
        y = LatLng.from_degrees(40.71, -74.0)
        inv = haversine_inverse(InverseProblem(x, y))
        end = haversine_direct(DirectProblem(x, inv.azimuth, inv.distance)).end
        assert end.lat == pytest.approx(y.lat, abs=1e-10)
        assert end.lng == pytest.approx(y.lng, abs=1e-10)
