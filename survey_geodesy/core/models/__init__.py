"""
Data models for geodetic problems.

This module provides the core data structures:
- Ellipsoid: Reference ellipsoid and the named constants
- LatLng: Geographic point
- Problem / solution records for the direct and inverse problems
- SolverOptions: Configuration for the solvers
"""

from .ellipsoid import (
    Ellipsoid,
    flattening,
    polar_radius,
    get_ellipsoid,
    ELLIPSOIDS,
    EARTH_RADIUS,
    WGS84,
    NAD83,
    BESSEL,
    HAYFORD,
    CLARKE,
    BEDFORD_CLARKE,
)
from .latlng import LatLng
from .problems import (
    Distance,
    Azimuth,
    DirectProblem,
    InverseProblem,
    DirectSolution,
    InverseSolution,
)
from .options import SolverOptions, resolve_ellipsoid

__all__ = [
    # Ellipsoids
    "Ellipsoid",
    "flattening",
    "polar_radius",
    "get_ellipsoid",
    "ELLIPSOIDS",
    "EARTH_RADIUS",
    "WGS84",
    "NAD83",
    "BESSEL",
    "HAYFORD",
    "CLARKE",
    "BEDFORD_CLARKE",

    # Points
    "LatLng",

    # Problems / solutions
    "Distance",
    "Azimuth",
    "DirectProblem",
    "InverseProblem",
    "DirectSolution",
    "InverseSolution",

    # Options
    "SolverOptions",
    "resolve_ellipsoid",
]
