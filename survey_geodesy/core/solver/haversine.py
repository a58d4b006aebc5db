"""survey_geodesy.core.solver.haversine

Spherical approximation of the direct and inverse problems on a sphere of
radius :data:`~survey_geodesy.core.models.ellipsoid.EARTH_RADIUS`.

Shares the problem / solution records of the Vincenty solvers. Closed
form, no iteration, no failure states.
"""

from __future__ import annotations

import math

from ..models.ellipsoid import EARTH_RADIUS
from ..models.latlng import LatLng
from ..models.problems import (
    Azimuth,
    Distance,
    DirectProblem,
    DirectSolution,
    InverseProblem,
    InverseSolution,
)
from ..units import Radian
from . import trig


def haversine(angle: float) -> float:
    """hav(θ) = sin²(θ/2)."""
    y = trig.sin(angle / 2.0)
    return y * y


def _central_haversine(x: LatLng, y: LatLng) -> float:
    return haversine(y.lat - x.lat) + trig.cos(x.lat) * trig.cos(y.lat) * haversine(y.lng - x.lng)


def haversine_distance(x: LatLng, y: LatLng, radius: float = EARTH_RADIUS) -> Distance:
    """Great-circle distance between two points."""
    h = min(_central_haversine(x, y), 1.0)
    return Distance(2.0 * radius * math.asin(math.sqrt(h)))


def initial_bearing(x: LatLng, y: LatLng) -> Azimuth:
    """Forward azimuth of the great circle from ``x`` to ``y``."""
    d_lng = y.lng - x.lng
    east = trig.sin(d_lng) * trig.cos(y.lat)
    north = trig.cos(x.lat) * trig.sin(y.lat) - trig.sin(x.lat) * trig.cos(y.lat) * trig.cos(d_lng)
    return Azimuth(math.atan2(east, north))


def final_bearing(x: LatLng, y: LatLng) -> Azimuth:
    """Azimuth at ``y`` of the great circle from ``x``: the bearing back, turned by π."""
    back = initial_bearing(y, x)
    return Azimuth(Radian(back.radians).rotate(Radian(math.pi)).value)


def haversine_inverse(problem: InverseProblem, radius: float = EARTH_RADIUS) -> InverseSolution:
    """Solve the inverse problem on the sphere."""
    return InverseSolution(
        distance=haversine_distance(problem.start, problem.end, radius),
        azimuth=initial_bearing(problem.start, problem.end),
        reverse_azimuth=final_bearing(problem.start, problem.end),
    )


def haversine_direct(problem: DirectProblem, radius: float = EARTH_RADIUS) -> DirectSolution:
    """Solve the direct problem on the sphere."""
    lat1 = problem.start.lat
    lng1 = problem.start.lng
    az1 = problem.azimuth.radians
    delta = problem.distance.meters / radius

    lat2 = math.asin(
        trig.sin(lat1) * trig.cos(delta) + trig.cos(lat1) * trig.sin(delta) * trig.cos(az1)
    )
    lng2 = lng1 + math.atan2(
        trig.sin(az1) * trig.sin(delta) * trig.cos(lat1),
        trig.cos(delta) - trig.sin(lat1) * trig.sin(lat2),
    )
    end = LatLng(lat2, lng2)
    return DirectSolution(end=end, azimuth=final_bearing(problem.start, end))
