"""
Angle units and conversions.

This module provides:
- Radian, Degree, DMS: interchangeable angle representations
- normalize / plus_minus_pi / plus_minus_half_pi / rotate / diff / abs_diff
- Scalar conversion helpers between degrees, minutes, seconds and radians
"""

from .angle import (
    Angle,
    AngleLike,
    Radian,
    Degree,
    DMS,
    normalize,
    plus_minus_pi,
    plus_minus_half_pi,
    rotate,
    diff,
    abs_diff,
    normalize_value,
    plus_minus_value,
    plus_minus_half_value,
)
from .convert import (
    degrees_to_radians,
    radians_to_degrees,
    minutes_to_seconds,
    degrees_to_seconds,
    degrees_to_minutes,
    minutes_to_degrees,
    seconds_to_degrees,
    arcseconds_to_radians,
    radians_to_arcseconds,
)

__all__ = [
    # Angle types
    "Angle",
    "AngleLike",
    "Radian",
    "Degree",
    "DMS",

    # Folding
    "normalize",
    "plus_minus_pi",
    "plus_minus_half_pi",
    "rotate",
    "diff",
    "abs_diff",
    "normalize_value",
    "plus_minus_value",
    "plus_minus_half_value",

    # Conversions
    "degrees_to_radians",
    "radians_to_degrees",
    "minutes_to_seconds",
    "degrees_to_seconds",
    "degrees_to_minutes",
    "minutes_to_degrees",
    "seconds_to_degrees",
    "arcseconds_to_radians",
    "radians_to_arcseconds",
]
