"""survey_geodesy.core.solver.batch

Array front-ends over the scalar Vincenty solvers.

Inputs are degree array-likes broadcast against each other; outputs are
NumPy float arrays in degrees / meters. A pair that does not solve yields
NaN in every output slot for that element, and the boolean ``solved`` mask
says which elements did.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

from ..models.ellipsoid import Ellipsoid
from ..models.latlng import LatLng
from ..models.options import SolverOptions, resolve_ellipsoid
from ..models.problems import Azimuth, Distance, DirectProblem, InverseProblem
from .vincenty_direct import solve_direct
from .vincenty_inverse import solve_inverse


@dataclass
class InverseArrays:
    """Vectorised inverse solutions."""
    distance: np.ndarray             # meters
    azimuth: np.ndarray              # degrees, [0, 360)
    reverse_azimuth: np.ndarray      # degrees, [0, 360)
    solved: np.ndarray               # bool


@dataclass
class DirectArrays:
    """Vectorised direct solutions."""
    lat: np.ndarray                  # degrees
    lng: np.ndarray                  # degrees
    azimuth: np.ndarray              # degrees, [0, 360)
    solved: np.ndarray               # bool


def _azimuth_degrees(azimuth: Optional[Azimuth]) -> float:
    if azimuth is None:
        return math.nan
    return azimuth.normalized().degrees


def inverse_many(
    ellipsoid: Union[Ellipsoid, str, None],
    lat1,
    lng1,
    lat2,
    lng2,
    options: Optional[SolverOptions] = None,
) -> InverseArrays:
    """Solve inverse problems element-wise.

    Args:
        ellipsoid: Ellipsoid instance or registry name; None uses ``options``
        lat1, lng1, lat2, lng2: Degree array-likes, broadcast together
        options: Tolerance and iteration cap (defaults if None)

    Returns:
        InverseArrays shaped like the broadcast inputs
    """
    options = options or SolverOptions.default()
    e = resolve_ellipsoid(ellipsoid, options)
    b1, b2, b3, b4 = np.broadcast_arrays(
        *(np.asarray(v, dtype=float) for v in (lat1, lng1, lat2, lng2))
    )

    shape = b1.shape
    distance = np.full(shape, np.nan)
    azimuth = np.full(shape, np.nan)
    reverse_azimuth = np.full(shape, np.nan)
    solved = np.zeros(shape, dtype=bool)

    for idx in np.ndindex(shape):
        problem = InverseProblem(
            start=LatLng.from_degrees(b1[idx], b2[idx]),
            end=LatLng.from_degrees(b3[idx], b4[idx]),
        )
        result = solve_inverse(e, options.tolerance, problem, max_iterations=options.max_iterations)
        if not result.success:
            continue
        solution = result.solution
        distance[idx] = solution.distance.meters
        azimuth[idx] = _azimuth_degrees(solution.azimuth)
        reverse_azimuth[idx] = _azimuth_degrees(solution.reverse_azimuth)
        solved[idx] = True

    return InverseArrays(distance, azimuth, reverse_azimuth, solved)


def direct_many(
    ellipsoid: Union[Ellipsoid, str, None],
    lat,
    lng,
    azimuth,
    distance,
    options: Optional[SolverOptions] = None,
) -> DirectArrays:
    """Solve direct problems element-wise.

    Args:
        ellipsoid: Ellipsoid instance or registry name; None uses ``options``
        lat, lng: Start point in degrees
        azimuth: Start azimuth in degrees
        distance: Geodesic length in meters
        options: Tolerance and iteration cap (defaults if None)

    Returns:
        DirectArrays shaped like the broadcast inputs
    """
    options = options or SolverOptions.default()
    e = resolve_ellipsoid(ellipsoid, options)
    b_lat, b_lng, b_az, b_s = np.broadcast_arrays(
        *(np.asarray(v, dtype=float) for v in (lat, lng, azimuth, distance))
    )

    shape = b_lat.shape
    out_lat = np.full(shape, np.nan)
    out_lng = np.full(shape, np.nan)
    out_az = np.full(shape, np.nan)
    solved = np.zeros(shape, dtype=bool)

    for idx in np.ndindex(shape):
        problem = DirectProblem(
            start=LatLng.from_degrees(b_lat[idx], b_lng[idx]),
            azimuth=Azimuth.from_degrees(b_az[idx]),
            distance=Distance(float(b_s[idx])),
        )
        result = solve_direct(e, options.tolerance, problem, max_iterations=options.max_iterations)
        if not result.success:
            continue
        end = result.solution.end
        out_lat[idx] = end.lat_degrees
        out_lng[idx] = end.lng_degrees
        out_az[idx] = _azimuth_degrees(result.solution.azimuth)
        solved[idx] = True

    return DirectArrays(out_lat, out_lng, out_az, solved)
