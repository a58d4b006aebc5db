"""Tests for Vincenty's direct solution."""

import math
import pytest

from survey_geodesy.core.errors import LatitudeOutOfRangeError, NonConvergenceError
from survey_geodesy.core.models import (
    LatLng,
    Azimuth,
    Distance,
    DirectProblem,
    InverseProblem,
    SolverOptions,
    WGS84,
)
from survey_geodesy.core.results import SolutionStatus
from survey_geodesy.core.solver.vincenty_direct import (
    solve_direct,
    solve_direct_unchecked,
    check_direct_problem,
    destination,
)
from survey_geodesy.core.solver.vincenty_inverse import solve_inverse
from survey_geodesy.core.units import Radian, arcseconds_to_radians

from conftest import VINCENTY_1975, position_error


TOL = 1e-12
AZIMUTH_TOL = arcseconds_to_radians(1.0 / 60.0)


def angle_error(a: float, b: float) -> float:
    return Radian(a).abs_diff(Radian(b)).value


class TestReferenceLines:
    """Vincenty (1975) lines (a) to (e), including the near-antipodal ones."""

    @pytest.mark.parametrize("line", VINCENTY_1975, ids=lambda line: line.label)
    def test_end_point(self, line):
        problem = DirectProblem(line.start, Azimuth(line.azimuth_rad), Distance(line.distance))
        result = solve_direct(line.ellipsoid, TOL, problem)
        assert result.success
        assert position_error(line.ellipsoid, line.end, result.solution.end) < 0.005

    @pytest.mark.parametrize("line", VINCENTY_1975, ids=lambda line: line.label)
    def test_end_azimuth(self, line):
        problem = DirectProblem(line.start, Azimuth(line.azimuth_rad), Distance(line.distance))
        solution = solve_direct(line.ellipsoid, TOL, problem).solution
        assert angle_error(solution.azimuth.radians, line.reverse_azimuth_rad) < AZIMUTH_TOL


class TestConsistencyWithInverse:
    """direct(x, inverse(x, y)) lands on y."""

    @pytest.mark.parametrize("pair", [
        ((42.3541165, -71.0693514), (40.7791472, -73.9680804)),
        ((-33.0, 151.0), (51.5, -0.1)),
        ((0.0, 179.5), (0.0, -179.5)),
        ((60.0, 10.0), (-45.0, 100.0)),
        ((0.0, 0.0), (1.0, 0.0)),
    ])
    def test_round_trip(self, pair):
        x = LatLng.from_degrees(*pair[0])
        y = LatLng.from_degrees(*pair[1])
        inv = solve_inverse(WGS84, TOL, InverseProblem(x, y)).solution
        end = solve_direct(WGS84, TOL, DirectProblem(x, inv.azimuth, inv.distance)).solution.end
        assert position_error(WGS84, y, end) < 0.005


class TestChecks:
    """Start point folding and latitude rejection."""

    def test_latitude_out_of_range(self):
        problem = DirectProblem(LatLng.from_degrees(91.0, 0.0), Azimuth(0.0), Distance(1000.0))
        result = solve_direct(WGS84, TOL, problem)
        assert result.status is SolutionStatus.OUT_OF_RANGE
        assert result.offending_value == pytest.approx(91.0)
        assert result.error_message.startswith("latitude outside range")
        assert result.solution is None

    def test_negative_latitude_out_of_range(self):
        problem = DirectProblem(LatLng.from_degrees(-91.0, 0.0), Azimuth(0.0), Distance(1000.0))
        result = solve_direct(WGS84, TOL, problem)
        assert result.status is SolutionStatus.OUT_OF_RANGE
        assert result.offending_value == pytest.approx(-91.0)

    def test_latitude_wraps_before_check(self):
        """405° folds to 45° and is accepted."""
        problem = DirectProblem(LatLng.from_degrees(405.0, 0.0), Azimuth(0.0), Distance(1000.0))
        result = solve_direct(WGS84, TOL, problem)
        assert result.success
        assert result.solution.end.lat_degrees == pytest.approx(45.009, abs=1e-3)

    def test_check_folds_longitude_and_azimuth(self):
        problem = DirectProblem(LatLng.from_degrees(10.0, 190.0), Azimuth(-math.pi / 2.0), Distance(1.0))
        checked = check_direct_problem(problem)
        assert checked.start.lng_degrees == pytest.approx(-170.0)
        assert checked.azimuth.radians == pytest.approx(1.5 * math.pi)
        assert checked.distance == problem.distance

    def test_check_raises(self):
        problem = DirectProblem(LatLng.from_degrees(100.0, 0.0), Azimuth(0.0), Distance(1.0))
        with pytest.raises(LatitudeOutOfRangeError) as exc_info:
            check_direct_problem(problem)
        assert exc_info.value.degrees == pytest.approx(100.0)

    def test_longitude_folding_does_not_change_result(self):
        a = destination(WGS84, LatLng.from_degrees(10.0, 190.0), Azimuth.from_degrees(45.0), Distance(1000.0))
        b = destination(WGS84, LatLng.from_degrees(10.0, -170.0), Azimuth.from_degrees(45.0), Distance(1000.0))
        assert a.end.lat == pytest.approx(b.end.lat, abs=1e-12)
        assert a.end.lng == pytest.approx(b.end.lng, abs=1e-12)


class TestSpecialCases:
    """Zero distance, meridians, the iteration cap."""

    def test_zero_distance(self):
        start = LatLng.from_degrees(30.0, 40.0)
        result = solve_direct(WGS84, TOL, DirectProblem(start, Azimuth.from_degrees(30.0), Distance(0.0)))
        assert result.success
        assert position_error(WGS84, start, result.solution.end) < 1e-6
        assert result.solution.azimuth.radians == pytest.approx(math.radians(30.0), abs=1e-12)

    def test_due_north(self):
        """Heading north keeps the longitude and the azimuth."""
        start = LatLng.from_degrees(0.0, 0.0)
        solution = destination(WGS84, start, Azimuth(0.0), Distance(110574.389))
        assert solution.end.lat_degrees == pytest.approx(1.0, abs=1e-7)
        assert solution.end.lng == 0.0
        assert solution.azimuth.radians == 0.0

    def test_unchecked_skips_folding(self):
        """The unchecked solver keeps the raw start longitude."""
        start = LatLng.from_degrees(0.0, 370.0)
        result = solve_direct_unchecked(WGS84, TOL, DirectProblem(start, Azimuth(0.0), Distance(1.0)))
        assert result.solution.end.lng == start.lng

    def test_iteration_cap(self):
        """A zero tolerance never converges."""
        problem = DirectProblem(LatLng.from_degrees(10.0, 10.0), Azimuth(1.0), Distance(1e6))
        result = solve_direct(WGS84, 0.0, problem, max_iterations=25)
        assert result.status is SolutionStatus.NON_CONVERGENT
        assert result.iterations == 25

    def test_infinite_distance_propagates(self):
        """An infinite distance surfaces as a NaN end point, not ABNORMAL."""
        problem = DirectProblem(LatLng.from_degrees(10.0, 10.0), Azimuth(1.0), Distance(math.inf))
        result = solve_direct(WGS84, TOL, problem)
        assert result.status is SolutionStatus.SOLVED
        assert math.isnan(result.solution.end.lat)
        assert math.isnan(result.solution.end.lng)


class TestDestination:
    """Tests for the raising wrapper."""

    def test_returns_solution(self):
        solution = destination("WGS84", LatLng.from_degrees(0.0, 0.0), Azimuth.from_degrees(90.0), Distance(111319.491))
        assert solution.end.lng_degrees == pytest.approx(1.0, abs=1e-7)
        assert solution.end.lat == pytest.approx(0.0, abs=1e-12)

    def test_out_of_range_raises(self):
        with pytest.raises(LatitudeOutOfRangeError):
            destination(WGS84, LatLng.from_degrees(95.0, 0.0), Azimuth(0.0), Distance(1.0))

    def test_out_of_range_is_value_error(self):
        with pytest.raises(ValueError):
            destination(WGS84, LatLng.from_degrees(95.0, 0.0), Azimuth(0.0), Distance(1.0))

    def test_non_convergence_raises(self):
        opts = SolverOptions(tolerance=0.0, max_iterations=10)
        with pytest.raises(NonConvergenceError) as exc_info:
            destination(WGS84, LatLng.from_degrees(10.0, 10.0), Azimuth(1.0), Distance(1e6), opts)
        assert exc_info.value.iterations == 10
