"""
Result data structures for geodetic solvers.

This module provides:
- SolutionStatus: Terminal state of a solver call
- InverseResult / DirectResult: Status plus optional solution
"""

from .geodetic_result import SolutionStatus, InverseResult, DirectResult

__all__ = [
    "SolutionStatus",
    "InverseResult",
    "DirectResult",
]
