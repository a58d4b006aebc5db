"""
Angle representations for geodetic computations.

Three interchangeable representations are provided:
- Radian: raw radians, used internally by the solvers
- Degree: raw decimal degrees, used for display and configuration
- DMS: degrees / minutes / seconds with the sign carried by the most
  significant non-zero field (``-0°1'0"`` is a valid, negative value)

All representations share the same folding operations:
- normalize: fold into [0, 360) degrees / [0, 2π) radians
- plus_minus_pi: fold into (-180, 180] degrees
- plus_minus_half_pi: fold with plus_minus_pi, then keep only [-90, 90]
- rotate: add another angle and normalize

Degree and Radian fold their raw value directly with their own period.
DMS converts through Degree, folds there, and converts back.

None of these operations raise for finite input. NaN and infinities
propagate through the arithmetic (DMS excepted: its integer fields cannot
hold a non-finite value).
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from .convert import (
    degrees_to_radians,
    radians_to_degrees,
    minutes_to_degrees,
    seconds_to_degrees,
)


Number = Union[int, float]


# =============================================================================
# Scalar folding
# =============================================================================

def normalize_value(value: float, period: float) -> float:
    """Fold ``value`` into [0, period).

    Exact multiples of the period fold to 0, never to ``period``.
    """
    x = value % period
    if x < 0:
        x += period
    # A tiny negative input can round up to exactly one period.
    if x == 0.0 or x >= period:
        return 0.0
    return x


def plus_minus_value(value: float, half_period: float) -> float:
    """Fold ``value`` into (-half_period, half_period].

    ``|value|`` is cut into bands of width ``half_period``; odd bands are
    shifted down by one band, then the sign of ``value`` is restored.
    """
    band, remainder = divmod(abs(value), half_period)
    if band % 2.0 == 1.0:
        remainder -= half_period
    folded = -remainder if value < 0 else remainder
    if folded == -half_period:
        return half_period
    return folded


def plus_minus_half_value(value: float, half_period: float) -> Optional[float]:
    """Fold with :func:`plus_minus_value`, None unless within a quarter period."""
    folded = plus_minus_value(value, half_period)
    quarter = half_period / 2.0
    if math.isnan(folded) or -quarter <= folded <= quarter:
        return folded
    return None


def _precision(format_spec: str) -> Optional[int]:
    """Read a fixed precision from ``".N"`` or ``".Nf"``; None when absent."""
    spec = format_spec.strip()
    if spec.endswith("f"):
        spec = spec[:-1]
    if spec.startswith(".") and spec[1:].isdigit():
        return int(spec[1:])
    return None


# =============================================================================
# Angle types
# =============================================================================

class Angle(ABC):
    """
    Common interface of all angle representations.

    Subclasses convert to and from :class:`Degree`; the default folding
    implementations pivot through Degree and convert back into the
    subclass' own representation.
    """

    __slots__ = ()

    @abstractmethod
    def to_degrees(self) -> "Degree":
        """Return this angle as decimal degrees."""

    @abstractmethod
    def to_radians(self) -> "Radian":
        """Return this angle as radians."""

    @classmethod
    @abstractmethod
    def from_degree(cls, degree: "Degree") -> "Angle":
        """Build this representation from a :class:`Degree`."""

    def normalize(self) -> "Angle":
        """Fold into [0, 360) degrees."""
        return self.from_degree(self.to_degrees().normalize())

    def plus_minus_pi(self) -> "Angle":
        """Fold into (-180, 180] degrees."""
        return self.from_degree(self.to_degrees().plus_minus_pi())

    def plus_minus_half_pi(self) -> Optional["Angle"]:
        """Fold into (-180, 180], then None if outside [-90, 90] degrees."""
        folded = self.to_degrees().plus_minus_half_pi()
        if folded is None:
            return None
        return self.from_degree(folded)

    def rotate(self, by: "Angle") -> "Angle":
        """Add ``by`` and normalize."""
        return self.from_degree(self.to_degrees().rotate(by))

    def diff(self, other: "Angle") -> "Angle":
        """Normalized ``other - self``."""
        return self.from_degree(self.to_degrees().diff(other))

    def abs_diff(self, other: "Angle") -> "Angle":
        """Smaller separation between ``self`` and ``other``, in [0, 180] degrees."""
        return self.from_degree(self.to_degrees().abs_diff(other))


class _ScalarAngle(Angle):
    """An angle held as a single raw float with a fixed full-turn period."""

    __slots__ = ()

    PERIOD: ClassVar[float]
    SYMBOL: ClassVar[str] = ""

    value: float

    @classmethod
    @abstractmethod
    def _coerce(cls, other: Angle) -> float:
        """Raw value of ``other`` expressed in this representation."""

    def normalize(self):
        return type(self)(normalize_value(self.value, self.PERIOD))

    def plus_minus_pi(self):
        return type(self)(plus_minus_value(self.value, self.PERIOD / 2.0))

    def plus_minus_half_pi(self):
        folded = plus_minus_half_value(self.value, self.PERIOD / 2.0)
        if folded is None:
            return None
        return type(self)(folded)

    def rotate(self, by: Angle):
        return type(self)(normalize_value(self.value + self._coerce(by), self.PERIOD))

    def diff(self, other: Angle):
        return type(self)(normalize_value(self._coerce(other) - self.value, self.PERIOD))

    def abs_diff(self, other: Angle):
        d = normalize_value(self._coerce(other) - self.value, self.PERIOD)
        if d > self.PERIOD / 2.0:
            d = self.PERIOD - d
        return type(self)(d)

    def __float__(self) -> float:
        return float(self.value)

    def __neg__(self):
        return type(self)(-self.value)

    def __add__(self, other: Angle):
        if not isinstance(other, Angle):
            return NotImplemented
        return type(self)(self.value + self._coerce(other))

    def __sub__(self, other: Angle):
        if not isinstance(other, Angle):
            return NotImplemented
        return type(self)(self.value - self._coerce(other))

    def __str__(self) -> str:
        return f"{self.value}{self.SYMBOL}"

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        precision = _precision(format_spec)
        if precision is not None:
            return f"{self.value:.{precision}f}{self.SYMBOL}"
        return f"{format(self.value, format_spec)}{self.SYMBOL}"


@dataclass(frozen=True)
class Radian(_ScalarAngle):
    """
    Angle in radians.

    Folding operations work directly on the raw value with a period of 2π.
    """

    value: float

    PERIOD: ClassVar[float] = 2.0 * math.pi
    SYMBOL: ClassVar[str] = " rad"

    @classmethod
    def _coerce(cls, other: Angle) -> float:
        return other.to_radians().value

    @classmethod
    def from_degree(cls, degree: "Degree") -> "Radian":
        return degree.to_radians()

    @classmethod
    def from_degrees(cls, degrees: Number) -> "Radian":
        """Convert raw decimal degrees to radians."""
        return cls(degrees_to_radians(degrees))

    def to_degrees(self) -> "Degree":
        return Degree(radians_to_degrees(self.value))

    def to_radians(self) -> "Radian":
        return self


@dataclass(frozen=True)
class Degree(_ScalarAngle):
    """
    Angle in decimal degrees.

    Prints as ``"<value>°"``; a fixed precision may be requested with a
    format spec, e.g. ``f"{Degree(1 / 60):.4}"`` gives ``"0.0167°"``.
    """

    value: float

    PERIOD: ClassVar[float] = 360.0
    SYMBOL: ClassVar[str] = "°"

    @classmethod
    def _coerce(cls, other: Angle) -> float:
        return other.to_degrees().value

    @classmethod
    def from_degree(cls, degree: "Degree") -> "Degree":
        return degree

    @classmethod
    def from_radians(cls, radians: Number) -> "Degree":
        """Convert raw radians to decimal degrees."""
        return cls(radians_to_degrees(radians))

    def to_degrees(self) -> "Degree":
        return self

    def to_radians(self) -> Radian:
        return Radian(degrees_to_radians(self.value))


@dataclass(frozen=True)
class DMS(Angle):
    """
    Angle as degrees, minutes and seconds.

    The sign lives on the most significant non-zero field only:
    ``DMS(-1, 30, 0.0)`` is -1.5°, ``DMS(0, -30, 0.0)`` is -0.5° and
    ``DMS(0, 0, -30.0)`` is -30". A value whose three fields are all zero
    is 0° whatever the sign of a zero second.

    Attributes:
        degrees: Whole degrees
        minutes: Whole arc-minutes
        seconds: Arc-seconds, fractional
    """

    degrees: int
    minutes: int
    seconds: float

    @classmethod
    def from_degree(cls, degree: Degree) -> "DMS":
        return cls.from_degrees(degree.value)

    @classmethod
    def from_degrees(cls, degrees: Union[Number, Degree]) -> "DMS":
        """
        Decompose decimal degrees.

        Args:
            degrees: Decimal degrees, raw or as :class:`Degree`

        Returns:
            DMS with the sign attached to the most significant non-zero field

        Raises:
            ValueError: If ``degrees`` is NaN or infinite
        """
        if isinstance(degrees, Degree):
            degrees = degrees.value
        if not math.isfinite(degrees):
            raise ValueError(f"Cannot express {degrees} as degrees, minutes and seconds")

        d_abs = abs(degrees)
        dd = math.floor(d_abs)
        d_frac = d_abs - dd
        mm, m_frac = divmod(d_frac * 60.0, 1.0)
        mm = int(mm)
        ss = m_frac * 60.0

        if degrees >= 0:
            return cls(dd, mm, ss)
        if dd != 0:
            return cls(-dd, mm, ss)
        if mm != 0:
            return cls(0, -mm, ss)
        return cls(0, 0, -ss)

    @property
    def is_negative(self) -> bool:
        """True if any field carries a minus sign."""
        return self.degrees < 0 or self.minutes < 0 or self.seconds < 0

    def to_degrees(self) -> Degree:
        if self.degrees == 0 and self.minutes == 0 and self.seconds == 0:
            return Degree(0.0)
        magnitude = (
            abs(self.degrees)
            + minutes_to_degrees(abs(self.minutes))
            + seconds_to_degrees(abs(self.seconds))
        )
        return Degree(-magnitude if self.is_negative else magnitude)

    def to_radians(self) -> Radian:
        return self.to_degrees().to_radians()

    def _render(self, precision: Optional[int]) -> str:
        sign = "-" if self.is_negative else ""
        d = abs(self.degrees)
        m = abs(self.minutes)
        if self.seconds == 0:
            return f"{sign}{d}°{m}'0\""
        s = abs(self.seconds)
        if precision is not None:
            return f"{sign}{d}°{m}'{s:.{precision}f}\""
        return f"{sign}{d}°{m}'{s}\""

    def __str__(self) -> str:
        return self._render(None)

    def __format__(self, format_spec: str) -> str:
        return self._render(_precision(format_spec))


AngleLike = Union[Radian, Degree, DMS]


# =============================================================================
# Functional forms
# =============================================================================

def normalize(angle: Angle) -> Angle:
    """Fold ``angle`` into [0, 360) degrees / [0, 2π) radians."""
    return angle.normalize()


def plus_minus_pi(angle: Angle) -> Angle:
    """Fold ``angle`` into (-180, 180] degrees / (-π, π] radians."""
    return angle.plus_minus_pi()


def plus_minus_half_pi(angle: Angle) -> Optional[Angle]:
    """Fold ``angle`` with :func:`plus_minus_pi`; None outside [-90, 90] degrees."""
    return angle.plus_minus_half_pi()


def rotate(angle: Angle, by: Angle) -> Angle:
    """Add ``by`` to ``angle`` and normalize."""
    return angle.rotate(by)


def diff(x: Angle, y: Angle) -> Angle:
    """Normalized ``y - x`` in the representation of ``x``."""
    return x.diff(y)


def abs_diff(x: Angle, y: Angle) -> Angle:
    """Smaller angular separation between two bearings, in [0, 180] degrees."""
    return x.abs_diff(y)
