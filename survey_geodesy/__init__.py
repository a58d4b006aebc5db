"""
Survey Geodesy - direct and inverse geodetic problems

Distances and azimuths between points on a reference ellipsoid (inverse
problem) and end points of geodesics (direct problem), with Vincenty's
iterative method and the spherical haversine approximation.

Conventions:
- Angles: Radians internally, converted from/to degrees or DMS at I/O boundary
- Azimuth: North = 0, clockwise positive
- Latitude: [-90°, 90°]; longitude unconstrained until folded by a solver
- Distance: Meters (unit of the ellipsoid radius)
- Tolerance: Radians, supplied by the caller
"""

import logging

__version__ = "1.0.0"
__author__ = "Survey Geodesy"

from .core.errors import (
    GeodesyError,
    LatitudeOutOfRangeError,
    NonConvergenceError,
    DistanceCalculationError,
    UnknownEllipsoidError,
)
from .core.units import Radian, Degree, DMS
from .core.models import (
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
from .core.results import SolutionStatus, InverseResult, DirectResult
from .core.solver import (
    solve_inverse,
    solve_direct,
    inverse,
    destination,
    distance,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",

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
]
