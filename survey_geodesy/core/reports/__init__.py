"""Text reports for geodetic results."""

from .text_report import (
    format_azimuth,
    format_point,
    format_inverse_solution,
    format_direct_solution,
    format_result,
)

__all__ = [
    "format_azimuth",
    "format_point",
    "format_inverse_solution",
    "format_direct_solution",
    "format_result",
]
