"""
Functions.

This module contains helper functions for working with codes as geometries.
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING

from olcodec._constants import DEFAULT_CODE_LENGTH, WGS84_CRS
from olcodec.codec import decode, encode, is_full

if TYPE_CHECKING:  # pragma: no cover
    import geopandas as gpd
    from shapely.geometry import Polygon
    from shapely.geometry.base import BaseGeometry

__all__ = [
    "code_to_geometry",
    "convert_codes_to_geodataframe",
    "encode_geometry_centroid",
]


def code_to_geometry(code: str) -> "Polygon":
    """
    Get the area of a code as a polygon.

    Args:
        code (str): Code to decode.

    Raises:
        InvalidCodeError: If the code is not valid.

    Returns:
        Polygon: Area of the code in WGS84 coordinates.

    Examples:
        >>> from olcodec.functions import code_to_geometry
        >>> code_to_geometry("7FG40000+").bounds
        (2.0, 20.0, 3.0, 21.0)
    """
    return decode(code).to_geometry()


def encode_geometry_centroid(
    geometry: "BaseGeometry", code_length: int = DEFAULT_CODE_LENGTH
) -> str:
    """
    Encode the centroid of a geometry into a code.

    Args:
        geometry (BaseGeometry): Geometry in WGS84 coordinates.
        code_length (int, optional): Number of significant digits. Defaults to 10.

    Returns:
        str: Code of the geometry centroid.
    """
    centroid = geometry.centroid
    return encode(centroid.y, centroid.x, code_length=code_length)


def convert_codes_to_geodataframe(codes: Iterable[str]) -> "gpd.GeoDataFrame":
    """
    Convert codes into a GeoDataFrame with their areas.

    Args:
        codes (Iterable[str]): Codes to convert. Short codes are decoded as if their digits
            were the leading digits of a code.

    Raises:
        InvalidCodeError: If any of the codes is not valid.

    Returns:
        gpd.GeoDataFrame: Codes with `length` and `is_full` columns and their areas
            as geometries, indexed by the code.
    """
    import geopandas as gpd

    codes = list(codes)
    areas = [decode(code) for code in codes]
    return gpd.GeoDataFrame(
        data={
            "code": codes,
            "length": [area.length for area in areas],
            "is_full": [is_full(code) for code in codes],
        },
        geometry=[area.to_geometry() for area in areas],
        crs=WGS84_CRS,
    ).set_index("code")
