"""
Reference ellipsoids.

An ellipsoid is defined by its equatorial radius and inverse flattening.
Flattening and polar radius are derived on demand, never stored.

Conventions:
- Radii: Meters
- Ellipsoids derived from another one (NAD83 from WGS84, Bedford-Clarke
  from Clarke) are copies with one field overridden via
  ``dataclasses.replace``
"""

from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Any, Dict, Mapping

from ..errors import UnknownEllipsoidError


# Mean Earth radius for the spherical (haversine) method
EARTH_RADIUS = 6371000.0


@dataclass(frozen=True)
class Ellipsoid:
    """
    Reference ellipsoid of revolution.

    No validation is performed: an inverse flattening of zero yields an
    infinite flattening rather than an error.

    Attributes:
        name: Registry name
        equatorial_radius: Semi-major axis a, in meters
        inverse_flattening: 1/f
    """

    name: str
    equatorial_radius: float
    inverse_flattening: float

    @property
    def flattening(self) -> float:
        """Flattening f = 1 / (1/f)."""
        return flattening(self)

    @property
    def polar_radius(self) -> float:
        """Semi-minor axis b = a (1 - f), in meters."""
        return polar_radius(self)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize ellipsoid to dictionary."""
        return {
            "name": self.name,
            "equatorial_radius": self.equatorial_radius,
            "inverse_flattening": self.inverse_flattening,
            "flattening": self.flattening,
            "polar_radius": self.polar_radius,
        }

    def __str__(self) -> str:
        return f"R={self.equatorial_radius}, 1/ƒ={self.inverse_flattening}"


def flattening(e: Ellipsoid) -> float:
    """Flattening of ``e``; infinite when the inverse flattening is zero."""
    if e.inverse_flattening == 0:
        return float("inf")
    return 1.0 / e.inverse_flattening


def polar_radius(e: Ellipsoid) -> float:
    """Polar radius of ``e`` in meters."""
    return e.equatorial_radius * (1.0 - flattening(e))


# WGS84 as defined by the World Geodetic System 1984.
WGS84 = Ellipsoid(
    name="WGS84",
    equatorial_radius=6378137.0,
    inverse_flattening=298.257223563,
)

# GRS80 / WGS84 (NAD83) as used by the NGS inverse/forward tools.
NAD83 = replace(WGS84, name="NAD83", inverse_flattening=298.25722210088)

# Bessel ellipsoid with the flattening used in Vincenty (1975), not the
# 299.1528153513233 of later tabulations.
BESSEL = Ellipsoid(
    name="BESSEL",
    equatorial_radius=6377397.155,
    inverse_flattening=299.1528128,
)

# International ellipsoid 1924.
HAYFORD = Ellipsoid(
    name="HAYFORD",
    equatorial_radius=6378388.0,
    inverse_flattening=297.0,
)

# Clarke 1866, approximated in meters.
CLARKE = Ellipsoid(
    name="CLARKE",
    equatorial_radius=6378206.4,
    inverse_flattening=294.978698214,
)

# Clarke 1866 as used by the Bedford Institute of Oceanography evaluation
# of direct and inverse algorithms (Delorme, 1978).
BEDFORD_CLARKE = replace(CLARKE, name="BEDFORD_CLARKE", inverse_flattening=294.9786986)


ELLIPSOIDS: Mapping[str, Ellipsoid] = MappingProxyType({
    e.name: e for e in (WGS84, NAD83, BESSEL, HAYFORD, CLARKE, BEDFORD_CLARKE)
})

_ALIASES = {
    "GRS80": "NAD83",
    "INTERNATIONAL": "HAYFORD",
    "INTERNATIONAL1924": "HAYFORD",
    "CLARKE1866": "CLARKE",
}


def _registry_key(name: str) -> str:
    key = name.strip().upper()
    for ch in ("-", " "):
        key = key.replace(ch, "_")
    compact = key.replace("_", "")
    if compact in _ALIASES:
        return _ALIASES[compact]
    if compact == "BEDFORDCLARKE":
        return "BEDFORD_CLARKE"
    return key


def get_ellipsoid(name: str) -> Ellipsoid:
    """
    Look up a reference ellipsoid by name.

    Matching ignores case and treats ``-``, ``_`` and spaces alike, so
    ``"bedford-clarke"`` finds ``BEDFORD_CLARKE``.

    Raises:
        UnknownEllipsoidError: If no ellipsoid is registered under ``name``
    """
    try:
        return ELLIPSOIDS[_registry_key(name)]
    except KeyError:
        raise UnknownEllipsoidError(name) from None
