from dataclasses import dataclass
from typing import Tuple

from ..coords import ecf2geo, geo2ecf


@dataclass(frozen=True)
class GroundPosition:
    """
    Station position, kept as WGS84 ECEF coordinates in meters whatever
    the input form.
    """

    x: float
    y: float
    z: float

    @classmethod
    def from_ecef_wgs84(cls, xyz: Tuple[float, float, float]) -> "GroundPosition":
        x, y, z = xyz
        return cls(float(x), float(y), float(z))

    @classmethod
    def from_geodetic(cls, lat_lon_height: Tuple[float, float, float]) -> "GroundPosition":
        """
        Inputs:
            lat_lon_height: latitude and longitude in degrees, height in meters
                above the WGS84 ellipsoid
        """
        lat, lon, height = lat_lon_height
        x, y, z = geo2ecf((lon, lat, height))[0]
        return cls(float(x), float(y), float(z))

    def to_ecef_wgs84(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_geodetic(self) -> Tuple[float, float, float]:
        """Returns (latitude [deg], longitude [deg], height [m])."""
        lon, lat, height = ecf2geo(self.to_ecef_wgs84())[0]
        return (float(lat), float(lon), float(height))

    def format_xyz(self) -> str:
        return f"{self.x:14.4f}{self.y:14.4f}{self.z:14.4f}"
