"""
Geographic point for geodetic problems.

Conventions:
- Latitude / longitude: Radians internally, degrees or DMS at I/O boundary
- Latitude is expected in [-90°, 90°]; it is not validated here, the direct
  solver rejects out-of-range latitudes
- Longitude is unconstrained until a solver folds it
"""

from dataclasses import dataclass
from typing import Any, Dict

from ..units import DMS, Degree, degrees_to_radians, radians_to_degrees


@dataclass(frozen=True)
class LatLng:
    """
    Latitude / longitude pair.

    Attributes:
        lat: Latitude in radians
        lng: Longitude in radians
    """

    lat: float
    lng: float

    @classmethod
    def from_degrees(cls, lat: float, lng: float) -> 'LatLng':
        """Create a point from decimal degrees."""
        return cls(degrees_to_radians(lat), degrees_to_radians(lng))

    @classmethod
    def from_dms(cls, lat: DMS, lng: DMS) -> 'LatLng':
        """Create a point from a pair of DMS values."""
        return cls(lat.to_radians().value, lng.to_radians().value)

    @property
    def lat_degrees(self) -> float:
        """Latitude in decimal degrees."""
        return radians_to_degrees(self.lat)

    @property
    def lng_degrees(self) -> float:
        """Longitude in decimal degrees."""
        return radians_to_degrees(self.lng)

    def to_dms(self) -> tuple:
        """Return (latitude, longitude) as DMS values."""
        return (DMS.from_degrees(self.lat_degrees), DMS.from_degrees(self.lng_degrees))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize point to dictionary."""
        return {
            "lat_rad": self.lat,
            "lng_rad": self.lng,
            "lat_deg": self.lat_degrees,
            "lng_deg": self.lng_degrees,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LatLng':
        """
        Create a LatLng from a dictionary.

        Degree keys (``lat_deg``/``lng_deg`` or ``lat``/``lng``) take
        precedence over radian keys (``lat_rad``/``lng_rad``).
        """
        if "lat_deg" in data or "lat" in data:
            return cls.from_degrees(
                float(data.get("lat_deg", data.get("lat"))),
                float(data.get("lng_deg", data.get("lng", data.get("lon")))),
            )
        return cls(float(data["lat_rad"]), float(data["lng_rad"]))

    def __str__(self) -> str:
        return f"({Degree(self.lat_degrees)}, {Degree(self.lng_degrees)})"
