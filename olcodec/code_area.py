"""Code area and location objects."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

from olcodec._constants import LATITUDE_MAX, LONGITUDE_MAX

if TYPE_CHECKING:  # pragma: no cover
    from shapely.geometry import Polygon

__all__ = ["CodeArea", "LatLon"]


class LatLon(NamedTuple):
    """Location in degrees."""

    lat: float
    lon: float


@dataclass(frozen=True)
class CodeArea:
    """
    Bounding box of a decoded code.

    Lower bounds are inclusive and upper bounds are exclusive.

    Attributes:
        lo (LatLon): South-west corner of the area.
        hi (LatLon): North-east corner of the area.
        length (int): Number of significant digits of the decoded code.
    """

    lo: LatLon
    hi: LatLon
    length: int

    @property
    def latitude_lo(self) -> float:
        return self.lo.lat

    @property
    def longitude_lo(self) -> float:
        return self.lo.lon

    @property
    def latitude_hi(self) -> float:
        return self.hi.lat

    @property
    def longitude_hi(self) -> float:
        return self.hi.lon

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """Bounds in the (minx, miny, maxx, maxy) order."""
        return self.lo.lon, self.lo.lat, self.hi.lon, self.hi.lat

    def center(self) -> LatLon:
        """
        Get the center of the area.

        The last cell next to the north pole and the antimeridian is half-open, so the center
        is clamped to 90 degrees of latitude and 180 degrees of longitude.

        Returns:
            LatLon: Center of the area.
        """
        lat = min(self.lo.lat + (self.hi.lat - self.lo.lat) / 2, LATITUDE_MAX)
        lon = min(self.lo.lon + (self.hi.lon - self.lo.lon) / 2, LONGITUDE_MAX)
        return LatLon(lat, lon)

    def to_geometry(self) -> "Polygon":
        """Get the area as a shapely polygon."""
        from shapely.geometry import box

        return box(*self.bounds)
