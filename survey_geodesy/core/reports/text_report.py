"""Plain-text reports of geodetic solutions.

Formatting rules:
  - Distance: 3 decimals, meters
  - Azimuth: degrees, 2 decimals (or DMS with ``dms=True``)
  - Points: decimal degrees (or DMS with ``dms=True``)
  - A failed result prints its status and error message
"""

from __future__ import annotations

from typing import Optional, Union

from ..models.latlng import LatLng
from ..models.problems import Azimuth, DirectSolution, InverseSolution
from ..results.geodetic_result import DirectResult, InverseResult
from ..units import DMS


def format_azimuth(azimuth: Optional[Azimuth], dms: bool = False, precision: int = 5) -> str:
    """Normalized azimuth as ``"123.45°"`` or DMS; ``"n/a"`` when absent."""
    if azimuth is None:
        return "n/a"
    az = azimuth.normalized()
    if dms:
        return format(DMS.from_degrees(az.degrees), f".{precision}")
    return str(az)


def format_point(point: LatLng, dms: bool = False, precision: int = 5) -> str:
    """Point as ``"(lat°, lng°)"``, optionally in DMS."""
    if not dms:
        return str(point)
    lat, lng = point.to_dms()
    return f"({lat:.{precision}}, {lng:.{precision}})"


def format_inverse_solution(solution: InverseSolution, dms: bool = False) -> str:
    lines = [
        f"Distance:        {solution.distance}",
        f"Azimuth:         {format_azimuth(solution.azimuth, dms)}",
        f"Reverse azimuth: {format_azimuth(solution.reverse_azimuth, dms)}",
    ]
    return "\n".join(lines)


def format_direct_solution(solution: DirectSolution, dms: bool = False) -> str:
    lines = [
        f"End point:       {format_point(solution.end, dms)}",
        f"End azimuth:     {format_azimuth(solution.azimuth, dms)}",
    ]
    return "\n".join(lines)


def format_result(
    result: Union[InverseResult, DirectResult],
    title: Optional[str] = None,
    dms: bool = False,
) -> str:
    """Render a solver result, solved or failed, as a text block."""
    parts: list[str] = []
    if title:
        parts.append(title)
        parts.append("-" * len(title))

    if not result.success:
        parts.append(f"Status:          {result.status.value}")
        parts.append(f"Error:           {result.error_message}")
        return "\n".join(parts)

    if isinstance(result, InverseResult):
        parts.append(format_inverse_solution(result.solution, dms))
    else:
        parts.append(format_direct_solution(result.solution, dms))
    parts.append(f"Iterations:      {result.iterations}")
    return "\n".join(parts)
