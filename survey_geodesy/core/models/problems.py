"""
Problem and solution records exchanged between callers and solvers.

Problems:
- DirectProblem: start point, start azimuth, distance
- InverseProblem: start point, end point

Solutions:
- DirectSolution: end point, end azimuth (None when degenerate)
- InverseSolution: distance, start azimuth, end azimuth (None when degenerate)

Conventions:
- Azimuth: North = 0, clockwise positive, raw radians as produced by the
  solver; call ``normalized()`` before comparing bearings
- Distance: Meters (the unit of the ellipsoid's radius)
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..units import Radian, normalize_value, degrees_to_radians, radians_to_degrees
from .latlng import LatLng


@dataclass(frozen=True)
class Distance:
    """Geodesic distance in meters."""

    meters: float

    @property
    def kilometers(self) -> float:
        return self.meters / 1000.0

    def __float__(self) -> float:
        return float(self.meters)

    def __str__(self) -> str:
        return f"{self.meters:.3f} m"


@dataclass(frozen=True)
class Azimuth:
    """
    Compass bearing of a geodesic at a point.

    Attributes:
        radians: Raw bearing in radians, not normalized
    """

    radians: float

    @classmethod
    def from_degrees(cls, degrees: float) -> 'Azimuth':
        return cls(degrees_to_radians(degrees))

    @property
    def degrees(self) -> float:
        """Raw bearing in degrees."""
        return radians_to_degrees(self.radians)

    def normalized(self) -> 'Azimuth':
        """Bearing folded into [0, 2π)."""
        return Azimuth(normalize_value(self.radians, 2.0 * math.pi))

    def to_radian(self) -> Radian:
        return Radian(self.radians)

    def __float__(self) -> float:
        return float(self.radians)

    def __str__(self) -> str:
        return f"{self.degrees:.2f}°"


@dataclass(frozen=True)
class DirectProblem:
    """Find the end of a geodesic of given length and start azimuth."""

    start: LatLng
    azimuth: Azimuth
    distance: Distance

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start": self.start.to_dict(),
            "azimuth_rad": self.azimuth.radians,
            "azimuth_deg": self.azimuth.degrees,
            "distance_m": self.distance.meters,
        }


@dataclass(frozen=True)
class InverseProblem:
    """Find the geodesic joining two points."""

    start: LatLng
    end: LatLng

    def reversed(self) -> 'InverseProblem':
        """The same problem solved from ``end`` back to ``start``."""
        return InverseProblem(start=self.end, end=self.start)

    def to_dict(self) -> Dict[str, Any]:
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}


def _azimuth_dict(azimuth: Optional[Azimuth], key: str) -> Dict[str, Any]:
    if azimuth is None:
        return {f"{key}_rad": None, f"{key}_deg": None}
    return {f"{key}_rad": azimuth.radians, f"{key}_deg": azimuth.degrees}


@dataclass(frozen=True)
class DirectSolution:
    """
    Solution of a direct problem.

    Attributes:
        end: Destination point
        azimuth: Forward azimuth of the geodesic at the destination
    """

    end: LatLng
    azimuth: Optional[Azimuth]

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"end": self.end.to_dict()}
        data.update(_azimuth_dict(self.azimuth, "azimuth"))
        return data


@dataclass(frozen=True)
class InverseSolution:
    """
    Solution of an inverse problem.

    Attributes:
        distance: Length of the geodesic
        azimuth: Forward azimuth at the start point
        reverse_azimuth: Azimuth of the geodesic at the end point
    """

    distance: Distance
    azimuth: Azimuth
    reverse_azimuth: Optional[Azimuth]

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"distance_m": self.distance.meters}
        data.update(_azimuth_dict(self.azimuth, "azimuth"))
        data.update(_azimuth_dict(self.reverse_azimuth, "reverse_azimuth"))
        return data
