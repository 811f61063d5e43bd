"""
Codec.

This module contains functions for encoding locations into codes, decoding codes into areas
and classifying code strings.
"""

import math
import warnings
from typing import Optional

from olcodec._constants import (
    DEFAULT_CODE_LENGTH,
    ENCODING_BASE,
    GRID_ROWS,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    MAX_DIGIT_COUNT,
    PAIR_CODE_LENGTH,
)
from olcodec._decoder import decode_sanitized
from olcodec._exceptions import CodeLengthClampedWarning, InvalidCodeError, InvalidCodeLengthError
from olcodec._grid_codec import encode_grid
from olcodec._output import fit_output
from olcodec._pair_codec import encode_pairs
from olcodec._sanitizer import SanitizedCode, sanitize
from olcodec.code_area import CodeArea, LatLon

__all__ = [
    "code_length",
    "decode",
    "encode",
    "encode_default",
    "encode_location",
    "is_full",
    "is_short",
    "is_valid",
]


def encode(
    latitude: float,
    longitude: float,
    code_length: int = DEFAULT_CODE_LENGTH,
    max_length: Optional[int] = None,
) -> str:
    """
    Encode a location into a code.

    Latitude is clamped to the [-90, 90] range and longitude is wrapped into the [-180, 180)
    range. Produced code always decodes to an area containing the (adjusted) location.

    Args:
        latitude (float): Latitude in degrees.
        longitude (float): Longitude in degrees.
        code_length (int, optional): Number of significant digits. Lengths below 10 must be
            even. Lengths above 32 are clamped to 32. Defaults to 10.
        max_length (Optional[int], optional): Output capacity, including one slot reserved
            for a terminator. Defaults to `None` (no limit).

    Raises:
        InvalidCodeLengthError: If the code length cannot be represented by a code.
        BufferTooSmallError: If the code doesn't fit into `max_length`.
        ValueError: If coordinates are not finite numbers.

    Returns:
        str: Encoded code.

    Examples:
        >>> from olcodec import encode
        >>> encode(47.0000625, 8.0000625)
        '8FVC2222+22'
        >>> encode(47.0000625, 8.0000625, code_length=16)
        '8FVC2222+22GCCCCC'
        >>> encode(47.0000625, 8.0000625, code_length=4)
        '8FVC0000+'
    """
    if code_length < 2 or (code_length < PAIR_CODE_LENGTH and code_length % 2 == 1):
        raise InvalidCodeLengthError(
            f"Invalid code length: {code_length}. Lengths below {PAIR_CODE_LENGTH}"
            " must be even and at least 2."
        )
    if code_length > MAX_DIGIT_COUNT:
        warnings.warn(
            f"Code length {code_length} exceeds the maximum of {MAX_DIGIT_COUNT} digits"
            " and will be clamped.",
            CodeLengthClampedWarning,
            stacklevel=2,
        )
        code_length = MAX_DIGIT_COUNT

    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        raise ValueError(f"Coordinates must be finite numbers, got: ({latitude}, {longitude})")

    # Shift into positive ranges, strictly below 180 and 360. Close to the edges the shift
    # can round up to the edge itself, as the pole adjustment of long codes is that small.
    latitude = adjust_latitude(latitude, code_length) + LATITUDE_MAX
    latitude = min(latitude, math.nextafter(2 * LATITUDE_MAX, 0))
    longitude = normalize_longitude(longitude) + LONGITUDE_MAX
    longitude = min(longitude, math.nextafter(2 * LONGITUDE_MAX, 0))

    code = encode_pairs(latitude, longitude, min(code_length, PAIR_CODE_LENGTH))
    if code_length > PAIR_CODE_LENGTH:
        code += encode_grid(latitude, longitude, code_length - PAIR_CODE_LENGTH)

    return fit_output(code, max_length)


def encode_location(
    location: LatLon,
    code_length: int = DEFAULT_CODE_LENGTH,
    max_length: Optional[int] = None,
) -> str:
    """Encode a `LatLon` location into a code. Look at `encode` for details."""
    return encode(location.lat, location.lon, code_length=code_length, max_length=max_length)


def encode_default(latitude: float, longitude: float, max_length: Optional[int] = None) -> str:
    """Encode a location into a code with the default length of 10 digits."""
    return encode(latitude, longitude, code_length=DEFAULT_CODE_LENGTH, max_length=max_length)


def decode(code: str) -> CodeArea:
    """
    Decode a code into the area it represents.

    Short codes are decoded as if their digits were the leading digits of a code.
    Input string is never modified.

    Args:
        code (str): Code to decode.

    Raises:
        InvalidCodeError: If the code is not valid.

    Returns:
        CodeArea: Bounding box of the code with the number of significant digits.

    Examples:
        >>> from olcodec import decode
        >>> area = decode("7FG49Q00+")
        >>> area.length
        6
        >>> [round(value, 6) for value in area.bounds]
        [2.75, 20.35, 2.8, 20.4]
    """
    return decode_sanitized(sanitize(code))


def code_length(code: str) -> int:
    """
    Get the number of significant digits of a code.

    Separator and padding characters are not counted.

    Raises:
        InvalidCodeError: If the code is not valid.
    """
    return sanitize(code).length


def is_valid(code: str) -> bool:
    """Check if a string is a valid short or full code."""
    return _sanitize_or_none(code) is not None


def is_short(code: str) -> bool:
    """Check if a string is a valid short code (missing some of the leading digits)."""
    sanitized = _sanitize_or_none(code)
    return sanitized is not None and sanitized.is_short


def is_full(code: str) -> bool:
    """
    Check if a string is a valid full code.

    Full code has all of the leading digits and its first latitude and longitude digits must
    not point beyond 90 degrees of latitude and 180 degrees of longitude.
    """
    sanitized = _sanitize_or_none(code)
    return sanitized is not None and sanitized.is_full


def compute_precision_for_length(code_length: int) -> float:
    """
    Get the latitude precision (cell height in degrees) of a code with a given length.

    Codes up to 10 digits have the same precision for latitude and longitude. Longer codes
    have different precisions, because the grid has fewer columns than rows.
    """
    if code_length <= PAIR_CODE_LENGTH:
        return math.pow(ENCODING_BASE, 2 - code_length // 2)

    return math.pow(ENCODING_BASE, -3) / math.pow(GRID_ROWS, code_length - PAIR_CODE_LENGTH)


def adjust_latitude(latitude: float, code_length: int) -> float:
    """
    Clamp latitude to the [-90, 90] range.

    Latitude of exactly 90 degrees is lowered by half of the code precision, so the location
    falls into a legal cell (cells don't include their northern edge).
    """
    latitude = min(max(latitude, -LATITUDE_MAX), LATITUDE_MAX)
    if latitude < LATITUDE_MAX:
        return latitude
    return latitude - compute_precision_for_length(code_length) / 2


def normalize_longitude(longitude: float) -> float:
    """Wrap longitude into the [-180, 180) range."""
    longitude = math.fmod(longitude, 2 * LONGITUDE_MAX)
    while longitude < -LONGITUDE_MAX:
        longitude += 2 * LONGITUDE_MAX
    while longitude >= LONGITUDE_MAX:
        longitude -= 2 * LONGITUDE_MAX
    return longitude


def _sanitize_or_none(code: str) -> Optional[SanitizedCode]:
    try:
        return sanitize(code)
    except InvalidCodeError:
        return None
