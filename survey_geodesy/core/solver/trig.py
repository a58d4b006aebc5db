"""survey_geodesy.core.solver.trig

Trigonometric functions with IEEE semantics for non-finite arguments.

``math.sin``, ``math.cos`` and ``math.tan`` raise ``ValueError`` for an
infinite argument; these return NaN instead, so that non-finite input
propagates through the solvers and surfaces as a NaN solution.
"""

import math


def sin(x: float) -> float:
    return math.sin(x) if math.isfinite(x) else math.nan


def cos(x: float) -> float:
    return math.cos(x) if math.isfinite(x) else math.nan


def tan(x: float) -> float:
    return math.tan(x) if math.isfinite(x) else math.nan
