"""
Pair digits encoding and decoding.

The first ten digits of a code are latitude and longitude pairs (in that order). Each pair
represents a step in a 20x20 grid, so every pair has 1/400th of the area of the previous one.
"""

import math

from olcodec._alphabet import digit_to_symbol, symbol_to_digit
from olcodec._constants import (
    ENCODING_BASE,
    INITIAL_RESOLUTION,
    PADDING_CHARACTER,
    SEPARATOR,
    SEPARATOR_POSITION,
)

__all__ = ["decode_pairs", "encode_pairs"]


def encode_pairs(latitude: float, longitude: float, code_length: int) -> str:
    """
    Encode positive range latitude and longitude into pair digits.

    Codes shorter than the separator position are padded and always end with the separator.

    Args:
        latitude (float): Latitude shifted into the [0, 180] range.
        longitude (float): Longitude shifted into the [0, 360) range.
        code_length (int): Number of pair digits to produce. Up to 10.

    Returns:
        str: Pair digits with the separator and optional padding.
    """
    characters: list[str] = []
    resolution = INITIAL_RESOLUTION
    digit_count = 0
    while digit_count < code_length:
        digit_value = math.floor(latitude / resolution)
        latitude -= digit_value * resolution
        characters.append(digit_to_symbol(digit_value))

        digit_value = math.floor(longitude / resolution)
        longitude -= digit_value * resolution
        characters.append(digit_to_symbol(digit_value))

        digit_count += 2
        if len(characters) == SEPARATOR_POSITION and digit_count < code_length:
            characters.append(SEPARATOR)
        resolution /= ENCODING_BASE

    if len(characters) < SEPARATOR_POSITION:
        characters.extend(PADDING_CHARACTER * (SEPARATOR_POSITION - len(characters)))
    if len(characters) == SEPARATOR_POSITION:
        characters.append(SEPARATOR)

    return "".join(characters)


def decode_pairs(digits: str) -> tuple[float, float, float, float]:
    """
    Decode pair digits into the positive range south-west corner of the cell.

    Args:
        digits (str): Up to 10 significant digits, without the separator and padding.

    Returns:
        tuple[float, float, float, float]: Latitude, longitude and the latitude and
            longitude resolution (cell height and width) in degrees.
    """
    latitude = longitude = 0.0
    latitude_resolution = longitude_resolution = resolution = INITIAL_RESOLUTION
    for index in range(0, len(digits), 2):
        latitude += symbol_to_digit(digits[index]) * resolution
        latitude_resolution = resolution

        if index + 1 < len(digits):
            longitude += symbol_to_digit(digits[index + 1]) * resolution
            longitude_resolution = resolution

        resolution /= ENCODING_BASE

    return latitude, longitude, latitude_resolution, longitude_resolution
