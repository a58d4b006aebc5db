"""
Scalar angle conversions.

Conventions:
- Angles: Radians internally, degrees at the I/O boundary
- Minutes and seconds are arc-minutes and arc-seconds
- No intermediate rounding: every helper is a single multiplication or
  division so that conversions round-trip to floating point precision
"""

import math


def degrees_to_radians(degrees: float) -> float:
    """Convert degrees to radians."""
    return math.radians(degrees)


def radians_to_degrees(radians: float) -> float:
    """Convert radians to degrees."""
    return math.degrees(radians)


def minutes_to_seconds(minutes: float) -> float:
    """Convert arc-minutes to arc-seconds."""
    return minutes * 60.0


def degrees_to_seconds(degrees: float) -> float:
    """Convert degrees to arc-seconds."""
    return degrees * 3600.0


def degrees_to_minutes(degrees: float) -> float:
    """Convert degrees to arc-minutes."""
    return degrees * 60.0


def minutes_to_degrees(minutes: float) -> float:
    """Convert arc-minutes to degrees."""
    return minutes / 60.0


def seconds_to_degrees(seconds: float) -> float:
    """Convert arc-seconds to degrees."""
    return seconds / 3600.0


def arcseconds_to_radians(arcseconds: float) -> float:
    """Convert arc-seconds to radians."""
    return arcseconds * math.pi / (180.0 * 3600.0)


def radians_to_arcseconds(radians: float) -> float:
    """Convert radians to arc-seconds."""
    return radians * (180.0 * 3600.0) / math.pi
