"""
Solver options for geodetic computations.

This module defines the configuration passed to the solvers: convergence
tolerance, iteration cap and the reference ellipsoid.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..errors import UnknownEllipsoidError
from .ellipsoid import Ellipsoid, get_ellipsoid


@dataclass
class SolverOptions:
    """
    Configuration options for the iterative solvers.

    Attributes:
        tolerance: Convergence criterion in radians (default: 1e-12). Zero
            is accepted; the iteration cap then bounds the loop
        max_iterations: Iteration cap for each refinement loop (default: 200)
        ellipsoid: Name of a registered reference ellipsoid (default: "WGS84")
    """

    tolerance: float = 1e-12  # radians
    max_iterations: int = 200
    ellipsoid: str = "WGS84"

    def __post_init__(self):
        """Validate options after initialization."""
        if self.tolerance < 0:
            raise ValueError("tolerance cannot be negative")

        if self.max_iterations < 1:
            raise ValueError("max_iterations must be at least 1")

        try:
            get_ellipsoid(self.ellipsoid)
        except UnknownEllipsoidError as exc:
            raise ValueError(str(exc)) from None

    def resolve_ellipsoid(self) -> Ellipsoid:
        """Return the configured reference ellipsoid."""
        return get_ellipsoid(self.ellipsoid)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize options to dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {
            "tolerance": self.tolerance,
            "max_iterations": self.max_iterations,
            "ellipsoid": self.ellipsoid,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SolverOptions':
        """
        Create SolverOptions from a dictionary.

        Args:
            data: Dictionary with option values; missing keys take defaults

        Returns:
            New SolverOptions instance
        """
        return cls(
            tolerance=float(data.get("tolerance", 1e-12)),
            max_iterations=int(data.get("max_iterations", 200)),
            ellipsoid=str(data.get("ellipsoid", "WGS84")),
        )

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> 'SolverOptions':
        """Load options from a JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_dict(json.load(f))

    @classmethod
    def default(cls) -> 'SolverOptions':
        """
        Create options with default values.

        Returns:
            SolverOptions with default settings
        """
        return cls()

    @classmethod
    def high_precision(cls) -> 'SolverOptions':
        """
        Create options for high-precision work.

        Returns:
            SolverOptions with a tighter tolerance and a larger iteration cap
        """
        return cls(tolerance=1e-14, max_iterations=500)

    def __repr__(self) -> str:
        return (
            f"SolverOptions("
            f"tol={self.tolerance}, "
            f"max_iter={self.max_iterations}, "
            f"ellipsoid={self.ellipsoid})"
        )


def resolve_ellipsoid(
    ellipsoid: Union[Ellipsoid, str, None],
    options: Optional[SolverOptions] = None,
) -> Ellipsoid:
    """
    Pick the ellipsoid for a solver call.

    An explicit ellipsoid (instance or registry name) wins; otherwise the
    one named by ``options`` (or the default options) is used.
    """
    if isinstance(ellipsoid, Ellipsoid):
        return ellipsoid
    if isinstance(ellipsoid, str):
        return get_ellipsoid(ellipsoid)
    return (options or SolverOptions.default()).resolve_ellipsoid()
