"""
Exception hierarchy for geodetic computations.

Solvers report failures through result objects
(:mod:`survey_geodesy.core.results`); these exceptions are raised by the
convenience wrappers that unwrap a result, and by configuration lookups.
"""

from typing import Optional


class GeodesyError(Exception):
    """Base class for all geodesy errors."""


class LatitudeOutOfRangeError(GeodesyError, ValueError):
    """
    A latitude does not fold into [-90°, 90°].

    Attributes:
        degrees: The offending latitude in degrees
    """

    def __init__(self, degrees: float):
        self.degrees = degrees
        super().__init__(f"latitude outside range: {degrees}°")


class NonConvergenceError(GeodesyError):
    """An iterative solution did not converge (typically near-antipodal points)."""

    def __init__(self, message: str = "Iteration did not converge", iterations: Optional[int] = None):
        self.iterations = iterations
        super().__init__(message)


class DistanceCalculationError(GeodesyError):
    """
    Collapsed failure of the inverse problem.

    Attributes:
        status: Status of the underlying result, for callers that need to
            tell antipodal failure from other failures
    """

    def __init__(self, status=None, message: str = "Distance calculation failed"):
        self.status = status
        super().__init__(message)


class UnknownEllipsoidError(GeodesyError, KeyError):
    """No reference ellipsoid is registered under the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown ellipsoid: {self.name!r}"
