"""Decoding of validated codes into areas."""

from olcodec._constants import LATITUDE_MAX, LONGITUDE_MAX, MAX_DIGIT_COUNT, PAIR_CODE_LENGTH
from olcodec._grid_codec import decode_grid
from olcodec._pair_codec import decode_pairs
from olcodec._sanitizer import SanitizedCode
from olcodec.code_area import CodeArea, LatLon

__all__ = ["decode_sanitized"]


def decode_sanitized(sanitized: SanitizedCode) -> CodeArea:
    """Decode significant digits of a validated code, pairs first and then the grid."""
    digits = sanitized.digits[:MAX_DIGIT_COUNT]

    latitude, longitude, latitude_resolution, longitude_resolution = decode_pairs(
        digits[:PAIR_CODE_LENGTH]
    )
    if len(digits) > PAIR_CODE_LENGTH:
        latitude, longitude, latitude_resolution, longitude_resolution = decode_grid(
            digits[PAIR_CODE_LENGTH:],
            latitude,
            longitude,
            latitude_resolution,
            longitude_resolution,
        )

    return CodeArea(
        lo=LatLon(latitude - LATITUDE_MAX, longitude - LONGITUDE_MAX),
        hi=LatLon(
            latitude + latitude_resolution - LATITUDE_MAX,
            longitude + longitude_resolution - LONGITUDE_MAX,
        ),
        length=len(digits),
    )
