"""survey_geodesy.core.solver.vincenty_direct

Vincenty's direct solution: end point and end azimuth of a geodesic given
its start point, start azimuth and length (T. Vincenty, 1975).

The start point is checked before the core algorithm runs:
  - latitude folded into (-180°, 180°] must land in [-90°, 90°]; otherwise
    the result is OUT_OF_RANGE (latitudes are rejected, never wrapped)
  - longitude is folded into (-180°, 180°]
  - azimuth is normalized into [0, 2π)

``solve_direct_unchecked`` skips these checks.

NaN and infinite input surfaces as a NaN end point rather than a failure.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Union

from ..errors import LatitudeOutOfRangeError
from ..models.ellipsoid import Ellipsoid, flattening, polar_radius
from ..models.latlng import LatLng
from ..models.options import SolverOptions, resolve_ellipsoid
from ..models.problems import Azimuth, Distance, DirectProblem, DirectSolution
from ..results.geodetic_result import DirectResult, SolutionStatus
from ..units import Radian, radians_to_degrees
from . import trig
from .vincenty_inverse import DEFAULT_MAX_ITERATIONS


logger = logging.getLogger(__name__)


def check_direct_problem(problem: DirectProblem) -> DirectProblem:
    """Fold the start point and azimuth of ``problem`` into canonical ranges.

    Raises:
        LatitudeOutOfRangeError: If the latitude does not fold into [-90°, 90°]
    """
    lat = Radian(problem.start.lat).plus_minus_half_pi()
    if lat is None:
        raise LatitudeOutOfRangeError(radians_to_degrees(problem.start.lat))
    lng = Radian(problem.start.lng).plus_minus_pi()
    return DirectProblem(
        start=LatLng(lat.value, lng.value),
        azimuth=problem.azimuth.normalized(),
        distance=problem.distance,
    )


def _delta_sigma(big_b: float, sigma: float, cos2_sigma_m: float) -> float:
    sin_sigma = trig.sin(sigma)
    cos2_2_sigma_m = cos2_sigma_m * cos2_sigma_m
    return big_b * sin_sigma * (
        cos2_sigma_m
        + big_b / 4.0 * (
            trig.cos(sigma) * (-1.0 + 2.0 * cos2_2_sigma_m)
            - big_b / 6.0 * cos2_sigma_m * (-3.0 + 4.0 * sin_sigma * sin_sigma) * (-3.0 + 4.0 * cos2_2_sigma_m)
        )
    )


def solve_direct_unchecked(
    ellipsoid: Ellipsoid,
    tolerance: float,
    problem: DirectProblem,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> DirectResult:
    """Vincenty's direct method without any precondition checks."""
    a = ellipsoid.equatorial_radius
    b = polar_radius(ellipsoid)
    f = flattening(ellipsoid)

    lat1 = problem.start.lat
    lng1 = problem.start.lng
    az1 = problem.azimuth.radians
    s = problem.distance.meters

    try:
        sin_az1 = trig.sin(az1)
        cos_az1 = trig.cos(az1)

        tan_u1 = (1.0 - f) * trig.tan(lat1)
        cos_u1 = 1.0 / math.sqrt(1.0 + tan_u1 * tan_u1)
        sin_u1 = tan_u1 * cos_u1

        sigma1 = math.atan2(tan_u1, cos_az1)
        sin_alpha = cos_u1 * sin_az1
        cos2_alpha = 1.0 - sin_alpha * sin_alpha
        u2 = cos2_alpha * (a * a - b * b) / (b * b)

        big_a = 1.0 + u2 / 16384.0 * (4096.0 + u2 * (-768.0 + u2 * (320.0 - 175.0 * u2)))
        big_b = u2 / 1024.0 * (256.0 + u2 * (-128.0 + u2 * (74.0 - 47.0 * u2)))

        sigma_0 = s / (b * big_a)
        sigma = sigma_0
        iterations = 0
        converged = False
        for iterations in range(1, max_iterations + 1):
            sigma_prime = sigma_0 + _delta_sigma(big_b, sigma, trig.cos(2.0 * sigma1 + sigma))
            if abs(sigma - sigma_prime) >= tolerance:
                sigma = sigma_prime
                continue
            sigma = sigma_prime
            converged = True
            break

        if not converged:
            logger.debug("Direct did not converge within %d iterations", max_iterations)
            return DirectResult.failure(
                SolutionStatus.NON_CONVERGENT,
                f"No convergence within {max_iterations} iterations",
                iterations=max_iterations,
            )

        sin_sigma = trig.sin(sigma)
        cos_sigma = trig.cos(sigma)
        cos2_sigma_m = trig.cos(2.0 * sigma1 + sigma)

        # j' of the end azimuth: cosU1 cosσ cosα1 - sinU1 sinσ
        j_prime = cos_u1 * cos_sigma * cos_az1 - sin_u1 * sin_sigma
        lat2 = math.atan2(
            sin_u1 * cos_sigma + cos_u1 * sin_sigma * cos_az1,
            (1.0 - f) * math.hypot(sin_alpha, j_prime),
        )
        lam = math.atan2(sin_sigma * sin_az1, cos_u1 * cos_sigma - sin_u1 * sin_sigma * cos_az1)
        c = f / 16.0 * cos2_alpha * (4.0 + f * (4.0 - 3.0 * cos2_alpha))
        big_l = lam - (1.0 - c) * f * sin_alpha * (
            sigma + c * sin_sigma * (cos2_sigma_m + c * cos_sigma * (-1.0 + 2.0 * cos2_sigma_m * cos2_sigma_m))
        )

        az2: Optional[Azimuth] = None
        if not (sin_alpha == 0.0 and j_prime == 0.0):
            az2 = Azimuth(math.atan2(sin_alpha, j_prime))

    except (ArithmeticError, ValueError) as exc:
        return DirectResult.failure(SolutionStatus.ABNORMAL, f"Numerical failure: {exc}")

    logger.debug("Direct converged in %d iterations", iterations)
    return DirectResult.solved(
        DirectSolution(end=LatLng(lat2, lng1 + big_l), azimuth=az2),
        iterations=iterations,
    )


def solve_direct(
    ellipsoid: Ellipsoid,
    tolerance: float,
    problem: DirectProblem,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> DirectResult:
    """Solve the direct problem with Vincenty's method.

    Args:
        ellipsoid: Reference ellipsoid
        tolerance: Convergence criterion on the angular distance (radians)
        problem: Start point, start azimuth and distance
        max_iterations: Iteration cap; reaching it counts as non-convergence

    Returns:
        DirectResult; OUT_OF_RANGE when the start latitude is invalid
    """
    try:
        checked = check_direct_problem(problem)
    except LatitudeOutOfRangeError as exc:
        return DirectResult.failure(
            SolutionStatus.OUT_OF_RANGE,
            str(exc),
            offending_value=exc.degrees,
        )
    return solve_direct_unchecked(ellipsoid, tolerance, checked, max_iterations=max_iterations)


def destination(
    ellipsoid: Union[Ellipsoid, str, None],
    start: LatLng,
    azimuth: Azimuth,
    distance: Distance,
    options: Optional[SolverOptions] = None,
) -> DirectSolution:
    """Solve the direct problem, raising on failure.

    Raises:
        LatitudeOutOfRangeError: Start latitude outside [-90°, 90°]
        NonConvergenceError: The angular distance did not converge
        GeodesyError: Any other failure
    """
    options = options or SolverOptions.default()
    result = solve_direct(
        resolve_ellipsoid(ellipsoid, options),
        options.tolerance,
        DirectProblem(start=start, azimuth=azimuth, distance=distance),
        max_iterations=options.max_iterations,
    )
    return result.unwrap()
