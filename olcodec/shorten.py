"""
Short codes.

This module contains functions for shortening full codes relative to a reference location
and for recovering full codes from short ones.
"""

import math
from typing import Optional

from olcodec._constants import (
    ENCODING_BASE,
    LATITUDE_MAX,
    SEPARATOR_POSITION,
    SHORTEN_REMOVAL_LENGTHS,
    SHORTEN_SAFETY_FACTOR,
)
from olcodec._decoder import decode_sanitized
from olcodec._exceptions import InvalidCodeError
from olcodec._output import fit_output
from olcodec._sanitizer import sanitize
from olcodec.codec import (
    adjust_latitude,
    compute_precision_for_length,
    encode,
    normalize_longitude,
)

__all__ = ["recover_nearest", "shorten"]


def shorten(
    code: str, latitude: float, longitude: float, max_length: Optional[int] = None
) -> str:
    """
    Remove leading digits from a full code if a reference location is close enough.

    Up to 8 leading digits can be removed. Reference location has to be well within the area
    of the removed digits (less than 0.3 of the cell size from the code center), so the code
    can be safely recovered with a location that is a bit further away.

    At least one digit is always kept before the separator, so an 8 digit code is shortened
    by 6 digits at most (`+` alone is not a valid code).

    Args:
        code (str): Full code without padding.
        latitude (float): Reference latitude in degrees.
        longitude (float): Reference longitude in degrees.
        max_length (Optional[int], optional): Output capacity, including one slot reserved
            for a terminator. Defaults to `None` (no limit).

    Raises:
        InvalidCodeError: If the code is not a valid full code or it's padded.
        BufferTooSmallError: If the result doesn't fit into `max_length`.

    Returns:
        str: Shortened code or the unchanged code if the reference is too far away.

    Examples:
        >>> from olcodec import shorten
        >>> shorten("9C3W9QCJ+2VX", 51.3708675, -1.217765625)
        'CJ+2VX'
    """
    sanitized = sanitize(code)
    if not sanitized.is_full:
        raise InvalidCodeError("Only full codes can be shortened", code)
    if sanitized.is_padded:
        raise InvalidCodeError("Padded codes cannot be shortened", code)

    center = decode_sanitized(sanitized).center()

    reference_latitude = adjust_latitude(latitude, sanitized.length)
    reference_longitude = normalize_longitude(longitude)
    distance = max(
        abs(center.lat - reference_latitude), abs(center.lon - reference_longitude)
    )

    for removal_length in SHORTEN_REMOVAL_LENGTHS:
        # Keep at least one digit.
        if removal_length >= sanitized.length:
            continue
        area_edge = compute_precision_for_length(removal_length) * SHORTEN_SAFETY_FACTOR
        if distance < area_edge:
            return fit_output(code[removal_length:], max_length)

    return fit_output(code, max_length)


def recover_nearest(
    short_code: str, latitude: float, longitude: float, max_length: Optional[int] = None
) -> str:
    """
    Recover the full code nearest to a reference location from a short code.

    Missing leading digits are taken from the reference location. If the resulting cell is
    more than half of its size away from the reference, the neighbouring cell is used instead.

    Args:
        short_code (str): Short code.
        latitude (float): Reference latitude in degrees.
        longitude (float): Reference longitude in degrees.
        max_length (Optional[int], optional): Output capacity, including one slot reserved
            for a terminator. Defaults to `None` (no limit).

    Raises:
        InvalidCodeError: If the code is not a valid short code.
        BufferTooSmallError: If the result doesn't fit into `max_length`.

    Returns:
        str: Recovered full code.

    Examples:
        >>> from olcodec import recover_nearest
        >>> recover_nearest("CJ+2VX", 51.3708675, -1.217765625)
        '9C3W9QCJ+2VX'
    """
    sanitized = sanitize(short_code)
    if not sanitized.is_short:
        raise InvalidCodeError("Only short codes can be recovered", short_code)

    padding_length = SEPARATOR_POSITION - sanitized.separator_index

    reference_latitude = adjust_latitude(latitude, sanitized.length)
    reference_longitude = normalize_longitude(longitude)

    # Size of the area covered by the missing digits.
    resolution = math.pow(ENCODING_BASE, 2 - padding_length / 2)
    half_resolution = resolution / 2

    prefix = encode(reference_latitude, reference_longitude)[:padding_length]
    candidate = sanitize(prefix + short_code)
    center_latitude, center_longitude = decode_sanitized(candidate).center()

    # Move the cell north or south, but keep it within the [-90, 90] range.
    if (
        reference_latitude + half_resolution < center_latitude
        and center_latitude - resolution > -LATITUDE_MAX
    ):
        center_latitude -= resolution
    elif (
        reference_latitude - half_resolution > center_latitude
        and center_latitude + resolution < LATITUDE_MAX
    ):
        center_latitude += resolution

    # Longitude is wrapped during encoding, so the shift can cross the antimeridian.
    if reference_longitude + half_resolution < center_longitude:
        center_longitude -= resolution
    elif reference_longitude - half_resolution > center_longitude:
        center_longitude += resolution

    return encode(
        center_latitude,
        center_longitude,
        code_length=sanitized.length + padding_length,
        max_length=max_length,
    )
