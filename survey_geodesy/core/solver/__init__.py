"""survey_geodesy.core.solver

Direct and inverse solvers (Vincenty, haversine) and array front-ends.
"""

from .vincenty_inverse import (
    solve_inverse,
    inverse,
    distance,
    reduced_latitude,
    longitude_difference,
    DEFAULT_TOLERANCE,
    DEFAULT_MAX_ITERATIONS,
)
from .vincenty_direct import (
    solve_direct,
    solve_direct_unchecked,
    check_direct_problem,
    destination,
)
from .haversine import (
    haversine,
    haversine_distance,
    haversine_inverse,
    haversine_direct,
    initial_bearing,
    final_bearing,
)
from .batch import inverse_many, direct_many, InverseArrays, DirectArrays

__all__ = [
    # Vincenty inverse
    "solve_inverse",
    "inverse",
    "distance",
    "reduced_latitude",
    "longitude_difference",
    "DEFAULT_TOLERANCE",
    "DEFAULT_MAX_ITERATIONS",

    # Vincenty direct
    "solve_direct",
    "solve_direct_unchecked",
    "check_direct_problem",
    "destination",

    # Haversine
    "haversine",
    "haversine_distance",
    "haversine_inverse",
    "haversine_direct",
    "initial_bearing",
    "final_bearing",

    # Batch
    "inverse_many",
    "direct_many",
    "InverseArrays",
    "DirectArrays",
]
