"""survey_geodesy.core.solver.vincenty_inverse

Vincenty's inverse solution: distance and azimuths between two points on
an ellipsoid of revolution (T. Vincenty, Survey Review XXII/176, 1975).

Conventions:
  - Latitude / longitude: radians
  - Azimuth: North = 0, clockwise positive, returned raw from ``atan2``
  - Distance: units of the ellipsoid radius (meters)

Terminal states:
  - SOLVED: the longitude on the auxiliary sphere converged
  - ANTIPODAL: the auxiliary longitude left [-π, π] or the iteration cap
    was reached; the method does not converge for near-antipodal points
  - ABNORMAL: any other numerical failure with finite input

NaN and infinite input is not rejected: it propagates and surfaces as a NaN
solution.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Union

from ..errors import DistanceCalculationError
from ..models.ellipsoid import Ellipsoid, flattening, polar_radius
from ..models.latlng import LatLng
from ..models.options import SolverOptions, resolve_ellipsoid
from ..models.problems import Azimuth, Distance, InverseProblem, InverseSolution
from ..results.geodetic_result import InverseResult, SolutionStatus
from ..units import normalize_value, plus_minus_value
from . import trig


logger = logging.getLogger(__name__)

TAU = 2.0 * math.pi

DEFAULT_TOLERANCE = 1e-12
DEFAULT_MAX_ITERATIONS = 200


@dataclass(frozen=True)
class _InverseTerms:
    """Quantities fixed for the whole iteration."""
    a: float
    b: float
    f: float
    L: float
    sin_u1: float
    cos_u1: float
    sin_u2: float
    cos_u2: float

    @property
    def sin_u1_sin_u2(self) -> float:
        return self.sin_u1 * self.sin_u2

    @property
    def cos_u1_cos_u2(self) -> float:
        return self.cos_u1 * self.cos_u2


@dataclass(frozen=True)
class _InverseStep:
    """One evaluation of the series at a trial auxiliary longitude."""
    lambda_prime: float
    s: float
    alpha1: float
    alpha2: Optional[float]


def reduced_latitude(lat: float, f: float) -> float:
    """Latitude on the auxiliary sphere, ``atan((1 - f) tan φ)``."""
    return math.atan((1.0 - f) * trig.tan(lat))


def longitude_difference(lng1: float, lng2: float) -> float:
    """Longitude difference ``lng2 - lng1`` across the antimeridian.

    When the raw difference exceeds π both longitudes are first folded
    into [0, 2π); anything still beyond π is folded into (-π, π].
    """
    dl = lng2 - lng1
    if abs(dl) <= math.pi:
        return dl
    dl = normalize_value(lng2, TAU) - normalize_value(lng1, TAU)
    if abs(dl) <= math.pi:
        return dl
    return plus_minus_value(dl, math.pi)


def _terms(ellipsoid: Ellipsoid, problem: InverseProblem) -> _InverseTerms:
    f = flattening(ellipsoid)
    u1 = reduced_latitude(problem.start.lat, f)
    u2 = reduced_latitude(problem.end.lat, f)
    return _InverseTerms(
        a=ellipsoid.equatorial_radius,
        b=polar_radius(ellipsoid),
        f=f,
        L=longitude_difference(problem.start.lng, problem.end.lng),
        sin_u1=trig.sin(u1),
        cos_u1=trig.cos(u1),
        sin_u2=trig.sin(u2),
        cos_u2=trig.cos(u2),
    )


def _step(t: _InverseTerms, lam: float) -> Optional[_InverseStep]:
    """Evaluate the series at ``lam``; None when the points coincide on the sphere."""
    sin_lambda = trig.sin(lam)
    cos_lambda = trig.cos(lam)

    # Forward azimuth at point 1 is atan2(i, j), at point 2 atan2(i', j').
    i = t.cos_u2 * sin_lambda
    j = t.cos_u1 * t.sin_u2 - t.sin_u1 * t.cos_u2 * cos_lambda
    i_prime = t.cos_u1 * sin_lambda
    j_prime = -t.sin_u1 * t.cos_u2 + t.cos_u1 * t.sin_u2 * cos_lambda

    sin2_sigma = i * i + j * j
    sin_sigma = math.sqrt(sin2_sigma)
    if sin_sigma == 0.0:
        return None
    cos_sigma = t.sin_u1_sin_u2 + t.cos_u1_cos_u2 * cos_lambda
    sigma = math.atan2(sin_sigma, cos_sigma)

    sin_alpha = t.cos_u1_cos_u2 * sin_lambda / sin_sigma
    cos2_alpha = 1.0 - sin_alpha * sin_alpha
    c = t.f / 16.0 * cos2_alpha * (4.0 + t.f * (4.0 - 3.0 * cos2_alpha))
    u2 = cos2_alpha * (t.a * t.a - t.b * t.b) / (t.b * t.b)

    # Equatorial line: cos²α = 0
    if cos2_alpha == 0.0:
        cos2_sigma_m = 0.0
    else:
        cos2_sigma_m = cos_sigma - 2.0 * t.sin_u1_sin_u2 / cos2_alpha
    cos2_2_sigma_m = cos2_sigma_m * cos2_sigma_m

    big_a = 1.0 + u2 / 16384.0 * (4096.0 + u2 * (-768.0 + u2 * (320.0 - 175.0 * u2)))
    big_b = u2 / 1024.0 * (256.0 + u2 * (-128.0 + u2 * (74.0 - 47.0 * u2)))

    y = (
        cos_sigma * (-1.0 + 2.0 * cos2_2_sigma_m)
        - big_b / 6.0 * cos2_sigma_m * (-3.0 + 4.0 * sin2_sigma) * (-3.0 + 4.0 * cos2_2_sigma_m)
    )
    delta_sigma = big_b * sin_sigma * (cos2_sigma_m + big_b / 4.0 * y)

    x = cos2_sigma_m + c * cos_sigma * (-1.0 + 2.0 * cos2_2_sigma_m)
    lambda_prime = t.L + (1.0 - c) * t.f * sin_alpha * (sigma + c * sin_sigma * x)

    alpha2 = None if (i_prime == 0.0 and j_prime == 0.0) else math.atan2(i_prime, j_prime)
    return _InverseStep(
        lambda_prime=lambda_prime,
        s=t.b * big_a * (sigma - delta_sigma),
        alpha1=math.atan2(i, j),
        alpha2=alpha2,
    )


def _is_finite_problem(problem: InverseProblem) -> bool:
    return all(
        math.isfinite(v)
        for v in (problem.start.lat, problem.start.lng, problem.end.lat, problem.end.lng)
    )


def _solution(step: _InverseStep) -> InverseSolution:
    return InverseSolution(
        distance=Distance(step.s),
        azimuth=Azimuth(step.alpha1),
        reverse_azimuth=Azimuth(step.alpha2) if step.alpha2 is not None else None,
    )


def solve_inverse(
    ellipsoid: Ellipsoid,
    tolerance: float,
    problem: InverseProblem,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> InverseResult:
    """Solve the inverse problem with Vincenty's method.

    Args:
        ellipsoid: Reference ellipsoid
        tolerance: Convergence criterion on the auxiliary longitude (radians)
        problem: Start and end point
        max_iterations: Iteration cap; reaching it counts as non-convergence

    Returns:
        InverseResult in one of the SOLVED, ANTIPODAL or ABNORMAL states
    """
    if problem.start == problem.end:
        return InverseResult.solved(
            InverseSolution(
                distance=Distance(0.0),
                azimuth=Azimuth(0.0),
                reverse_azimuth=Azimuth(math.pi),
            ),
            iterations=0,
        )

    try:
        terms = _terms(ellipsoid, problem)
        lam = terms.L
        for iteration in range(1, max_iterations + 1):
            if abs(lam) > math.pi:
                logger.debug("Inverse diverged after %d iterations (|λ| > π)", iteration - 1)
                return InverseResult.failure(
                    SolutionStatus.ANTIPODAL,
                    "Points are near-antipodal; iteration diverged",
                    iterations=iteration - 1,
                )

            step = _step(terms, lam)
            if step is None:
                # Distinct coordinates, same place (e.g. longitudes 2π apart).
                return InverseResult.solved(
                    InverseSolution(
                        distance=Distance(0.0),
                        azimuth=Azimuth(0.0),
                        reverse_azimuth=None,
                    ),
                    iterations=iteration,
                )

            if abs(lam - step.lambda_prime) >= tolerance:
                lam = step.lambda_prime
                continue

            if not math.isfinite(step.s) and _is_finite_problem(problem):
                return InverseResult.failure(
                    SolutionStatus.ABNORMAL,
                    f"Non-finite distance {step.s} for finite input",
                    iterations=iteration,
                )
            logger.debug("Inverse converged in %d iterations", iteration)
            return InverseResult.solved(_solution(step), iterations=iteration)

    except (ArithmeticError, ValueError) as exc:
        # e.g. division by a zero polar radius
        return InverseResult.failure(SolutionStatus.ABNORMAL, f"Numerical failure: {exc}")

    logger.debug("Inverse did not converge within %d iterations", max_iterations)
    return InverseResult.failure(
        SolutionStatus.ANTIPODAL,
        f"No convergence within {max_iterations} iterations",
        iterations=max_iterations,
    )


def inverse(
    ellipsoid: Union[Ellipsoid, str, None],
    start: LatLng,
    end: LatLng,
    options: Optional[SolverOptions] = None,
) -> InverseSolution:
    """Solve the inverse problem, raising on failure.

    Args:
        ellipsoid: Ellipsoid instance or registry name; None uses ``options``
        start: First point
        end: Second point
        options: Tolerance and iteration cap (defaults if None)

    Raises:
        NonConvergenceError: Antipodal / non-convergent geometry
        GeodesyError: Any other failure
    """
    options = options or SolverOptions.default()
    result = solve_inverse(
        resolve_ellipsoid(ellipsoid, options),
        options.tolerance,
        InverseProblem(start=start, end=end),
        max_iterations=options.max_iterations,
    )
    return result.unwrap()


def distance(
    ellipsoid: Union[Ellipsoid, str],
    x: LatLng,
    y: LatLng,
    tolerance: float = DEFAULT_TOLERANCE,
) -> Distance:
    """Geodesic distance between two points.

    Every failure state collapses into :class:`DistanceCalculationError`;
    use :func:`solve_inverse` to tell antipodal failure from other failures.
    """
    result = solve_inverse(resolve_ellipsoid(ellipsoid), tolerance, InverseProblem(start=x, end=y))
    if not result.success:
        raise DistanceCalculationError(status=result.status)
    return result.solution.distance
