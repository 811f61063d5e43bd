"""
Grid digits encoding and decoding.

Digits after the tenth one split the last pair cell into a grid of 4 columns and 5 rows.
The grid squares are numbered with the alphabet like this:

    R V W X
    J M P Q
    C F G H
    6 7 8 9
    2 3 4 5

This allows refining a default length code with just a single character.
"""

import math

from olcodec._alphabet import digit_to_symbol, symbol_to_digit
from olcodec._constants import GRID_COLUMNS, GRID_ROWS, GRID_SIZE_DEGREES

__all__ = ["decode_grid", "encode_grid"]


def encode_grid(latitude: float, longitude: float, code_length: int) -> str:
    """
    Encode positive range latitude and longitude into grid digits.

    Args:
        latitude (float): Latitude shifted into the [0, 180] range.
        longitude (float): Longitude shifted into the [0, 360) range.
        code_length (int): Number of grid digits to produce.

    Returns:
        str: Grid digits.
    """
    latitude_grid_size = longitude_grid_size = GRID_SIZE_DEGREES

    # Get rid of the whole degrees first to avoid floating point errors.
    latitude = math.fmod(math.fmod(latitude, 1), latitude_grid_size)
    longitude = math.fmod(math.fmod(longitude, 1), longitude_grid_size)

    characters = []
    for _ in range(code_length):
        row = min(math.floor(latitude / (latitude_grid_size / GRID_ROWS)), GRID_ROWS - 1)
        column = min(math.floor(longitude / (longitude_grid_size / GRID_COLUMNS)), GRID_COLUMNS - 1)
        latitude_grid_size /= GRID_ROWS
        longitude_grid_size /= GRID_COLUMNS
        latitude -= row * latitude_grid_size
        longitude -= column * longitude_grid_size
        characters.append(digit_to_symbol(row * GRID_COLUMNS + column))

    return "".join(characters)


def decode_grid(
    digits: str,
    latitude: float,
    longitude: float,
    latitude_resolution: float,
    longitude_resolution: float,
) -> tuple[float, float, float, float]:
    """
    Refine a pair cell with grid digits.

    Latitude and longitude resolutions diverge here, since the grid has more rows than columns.

    Args:
        digits (str): Grid digits.
        latitude (float): Positive range latitude of the pair cell corner.
        longitude (float): Positive range longitude of the pair cell corner.
        latitude_resolution (float): Height of the pair cell.
        longitude_resolution (float): Width of the pair cell.

    Returns:
        tuple[float, float, float, float]: Refined latitude, longitude and the latitude and
            longitude resolution in degrees.
    """
    for symbol in digits:
        row, column = divmod(symbol_to_digit(symbol), GRID_COLUMNS)
        latitude_resolution /= GRID_ROWS
        longitude_resolution /= GRID_COLUMNS
        latitude += row * latitude_resolution
        longitude += column * longitude_resolution

    return latitude, longitude, latitude_resolution, longitude_resolution
