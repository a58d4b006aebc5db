"""
Core module for geodetic computations.

Pure Python models and solvers; NumPy is only needed by the array
front-ends in :mod:`survey_geodesy.core.solver.batch`.
"""

from .errors import (
    GeodesyError,
    LatitudeOutOfRangeError,
    NonConvergenceError,
    DistanceCalculationError,
    UnknownEllipsoidError,
)

from .units import Radian, Degree, DMS

from .models import (
    Ellipsoid,
    get_ellipsoid,
    ELLIPSOIDS,
    WGS84,
    NAD83,
    BESSEL,
    HAYFORD,
    CLARKE,
    BEDFORD_CLARKE,
    LatLng,
    Distance,
    Azimuth,
    DirectProblem,
    InverseProblem,
    DirectSolution,
    InverseSolution,
    SolverOptions,
)

from .results import SolutionStatus, InverseResult, DirectResult

from .solver import (
    solve_inverse,
    solve_direct,
    inverse,
    destination,
    distance,
    haversine_inverse,
    haversine_direct,
    inverse_many,
    direct_many,
)

from .reports import format_result

__all__ = [
    # Errors
    "GeodesyError",
    "LatitudeOutOfRangeError",
    "NonConvergenceError",
    "DistanceCalculationError",
    "UnknownEllipsoidError",

    # Units
    "Radian",
    "Degree",
    "DMS",

    # Models
    "Ellipsoid",
    "get_ellipsoid",
    "ELLIPSOIDS",
    "WGS84",
    "NAD83",
    "BESSEL",
    "HAYFORD",
    "CLARKE",
    "BEDFORD_CLARKE",
    "LatLng",
    "Distance",
    "Azimuth",
    "DirectProblem",
    "InverseProblem",
    "DirectSolution",
    "InverseSolution",
    "SolverOptions",

    # Results
    "SolutionStatus",
    "InverseResult",
    "DirectResult",

    # Solvers
    "solve_inverse",
    "solve_direct",
    "inverse",
    "destination",
    "distance",
    "haversine_inverse",
    "haversine_direct",
    "inverse_many",
    "direct_many",

    # Reports
    "format_result",
]
