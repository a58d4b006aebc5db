"""
Result classes for geodetic solvers.

A solver never raises for numeric input; it returns a result carrying a
status and, when solved, the solution record. ``unwrap()`` converts a
failed result into the matching exception for callers that prefer them.
"""

import json
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from ..errors import (
    GeodesyError,
    LatitudeOutOfRangeError,
    NonConvergenceError,
)
from ..models.problems import DirectSolution, InverseSolution


class SolutionStatus(Enum):
    """
    Terminal state of a solver call.

    - SOLVED: Solution available
    - NON_CONVERGENT: Iteration did not converge; for the inverse problem
      this is the antipodal case (ANTIPODAL is an alias)
    - ABNORMAL: Any other numerical failure
    - OUT_OF_RANGE: Input rejected by a precondition
    """
    SOLVED = "solved"
    NON_CONVERGENT = "non_convergent"
    ANTIPODAL = "non_convergent"
    ABNORMAL = "abnormal"
    OUT_OF_RANGE = "out_of_range"


def _json_safe_value(value: Any) -> Any:
    """Convert non-JSON-safe floats (nan/inf) to None, recursing into containers."""
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        return value
    if isinstance(value, dict):
        return {k: _json_safe_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe_value(v) for v in value]
    return value


@dataclass(frozen=True)
class _GeodeticResult:
    """
    Fields shared by direct and inverse results.

    Attributes:
        status: Terminal state of the solver
        iterations: Number of refinement iterations performed
        error_message: Error description if not solved
        offending_value: Value that failed a precondition (degrees), if any
    """

    status: SolutionStatus
    iterations: int = 0
    error_message: Optional[str] = None
    offending_value: Optional[float] = None

    @property
    def success(self) -> bool:
        """True if the solver produced a solution."""
        return self.status is SolutionStatus.SOLVED

    def _raise_failure(self) -> None:
        if self.status is SolutionStatus.OUT_OF_RANGE and self.offending_value is not None:
            raise LatitudeOutOfRangeError(self.offending_value)
        if self.status is SolutionStatus.NON_CONVERGENT:
            raise NonConvergenceError(
                self.error_message or "Iteration did not converge",
                iterations=self.iterations,
            )
        raise GeodesyError(self.error_message or f"Solver failed: {self.status.value}")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the status fields; subclasses add their solution."""
        return {
            "status": self.status.value,
            "success": self.success,
            "iterations": self.iterations,
            "error_message": self.error_message,
        }

    def to_json(self, indent: int = 2) -> str:
        """
        Serialize result to JSON string.

        Args:
            indent: JSON indentation level

        Returns:
            JSON string with NaN/inf replaced by null
        """
        return json.dumps(_json_safe_value(self.to_dict()), indent=indent)


@dataclass(frozen=True)
class InverseResult(_GeodeticResult):
    """Outcome of an inverse-problem solver."""

    solution: Optional[InverseSolution] = None

    @classmethod
    def solved(cls, solution: InverseSolution, iterations: int = 0) -> 'InverseResult':
        return cls(status=SolutionStatus.SOLVED, iterations=iterations, solution=solution)

    @classmethod
    def failure(
        cls,
        status: SolutionStatus,
        error_message: str,
        iterations: int = 0,
    ) -> 'InverseResult':
        """
        Create a failed result.

        Args:
            status: Failure state (anything but SOLVED)
            error_message: Description of the failure
            iterations: Iterations performed before giving up

        Returns:
            InverseResult without a solution
        """
        return cls(status=status, iterations=iterations, error_message=error_message)

    def unwrap(self) -> InverseSolution:
        """Return the solution or raise the matching :class:`GeodesyError`."""
        if self.success and self.solution is not None:
            return self.solution
        self._raise_failure()

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["solution"] = self.solution.to_dict() if self.solution else None
        return data

    def __repr__(self) -> str:
        if self.success:
            return f"InverseResult(solved, s={self.solution.distance}, iter={self.iterations})"
        return f"InverseResult({self.status.value}: {self.error_message})"


@dataclass(frozen=True)
class DirectResult(_GeodeticResult):
    """Outcome of a direct-problem solver."""

    solution: Optional[DirectSolution] = None

    @classmethod
    def solved(cls, solution: DirectSolution, iterations: int = 0) -> 'DirectResult':
        return cls(status=SolutionStatus.SOLVED, iterations=iterations, solution=solution)

    @classmethod
    def failure(
        cls,
        status: SolutionStatus,
        error_message: str,
        iterations: int = 0,
        offending_value: Optional[float] = None,
    ) -> 'DirectResult':
        """
        Create a failed result.

        Args:
            status: Failure state (anything but SOLVED)
            error_message: Description of the failure
            iterations: Iterations performed before giving up
            offending_value: Rejected input value in degrees, for OUT_OF_RANGE

        Returns:
            DirectResult without a solution
        """
        return cls(
            status=status,
            iterations=iterations,
            error_message=error_message,
            offending_value=offending_value,
        )

    def unwrap(self) -> DirectSolution:
        """Return the solution or raise the matching :class:`GeodesyError`."""
        if self.success and self.solution is not None:
            return self.solution
        self._raise_failure()

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["offending_value"] = self.offending_value
        data["solution"] = self.solution.to_dict() if self.solution else None
        return data

    def __repr__(self) -> str:
        if self.success:
            return f"DirectResult(solved, end={self.solution.end}, iter={self.iterations})"
        return f"DirectResult({self.status.value}: {self.error_message})"
