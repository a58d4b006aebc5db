"""Tests for the NumPy array front-ends."""

import math

import numpy as np
import pytest

from survey_geodesy.core.models import LatLng, SolverOptions, WGS84, HAYFORD
from survey_geodesy.core.solver.batch import inverse_many, direct_many
from survey_geodesy.core.solver.vincenty_inverse import inverse


class TestInverseMany:
    """Tests for inverse_many."""

    def test_matches_scalar_solver(self):
        out = inverse_many(WGS84, [42.3541165, 0.0], [-71.0693514, 0.0], [40.7791472, 0.0], [-73.9680804, 1.0])
        assert out.distance.shape == (2,)
        assert out.solved.all()

        scalar = inverse(
            WGS84,
            LatLng.from_degrees(42.3541165, -71.0693514),
            LatLng.from_degrees(40.7791472, -73.9680804),
        )
        assert out.distance[0] == pytest.approx(scalar.distance.meters, rel=1e-15)
        assert out.azimuth[0] == pytest.approx(scalar.azimuth.normalized().degrees, rel=1e-15)
        assert out.distance[1] == pytest.approx(111319.491, abs=0.001)
        assert out.azimuth[1] == pytest.approx(90.0)

    def test_broadcasting(self):
        """A scalar start point broadcasts against an array of end points."""
        out = inverse_many("WGS84", 0.0, 0.0, 0.0, np.array([[1.0, 2.0], [3.0, 4.0]]))
        assert out.distance.shape == (2, 2)
        assert out.distance[0, 1] > out.distance[0, 0]
        assert out.solved.all()

    def test_antipodal_element_is_nan(self):
        out = inverse_many(WGS84, [0.0, 0.0], [0.0, 0.0], [0.0, 0.0], [180.0, 1.0])
        assert list(out.solved) == [False, True]
        assert math.isnan(out.distance[0])
        assert math.isnan(out.azimuth[0])
        assert math.isnan(out.reverse_azimuth[0])
        assert not math.isnan(out.distance[1])

    def test_azimuths_normalized(self):
        """A westward line reports 270°, not -90°."""
        out = inverse_many(WGS84, 0.0, 1.0, 0.0, 0.0)
        assert float(out.azimuth) == pytest.approx(270.0)

    def test_options_ellipsoid(self):
        by_options = inverse_many(None, 10.0, 10.0, 20.0, 20.0, SolverOptions(ellipsoid="HAYFORD"))
        explicit = inverse_many(HAYFORD, 10.0, 10.0, 20.0, 20.0)
        assert float(by_options.distance) == float(explicit.distance)


class TestDirectMany:
    """Tests for direct_many."""

    def test_fan_of_azimuths(self):
        out = direct_many(WGS84, 0.0, 0.0, [0.0, 90.0], 111319.491)
        assert out.solved.all()
        assert out.lat[1] == pytest.approx(0.0, abs=1e-9)
        assert out.lng[1] == pytest.approx(1.0, abs=1e-7)
        assert out.azimuth[0] == pytest.approx(0.0, abs=1e-12)
        assert out.azimuth[1] == pytest.approx(90.0)

    def test_out_of_range_element_is_nan(self):
        out = direct_many(WGS84, [91.0, 10.0], 0.0, 45.0, 1000.0)
        assert list(out.solved) == [False, True]
        assert math.isnan(out.lat[0])
        assert math.isnan(out.lng[0])
        assert not math.isnan(out.lat[1])
