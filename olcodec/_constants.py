"""Constants used across the project."""

import math

WGS84_CRS = "EPSG:4326"

SEPARATOR = "+"
SEPARATOR_POSITION = 8
PADDING_CHARACTER = "0"
ALPHABET = "23456789CFGHJMPQRVWX"

ENCODING_BASE = len(ALPHABET)
MAX_DIGIT_COUNT = 32
PAIR_CODE_LENGTH = 10
DEFAULT_CODE_LENGTH = PAIR_CODE_LENGTH
GRID_COLUMNS = 4
GRID_ROWS = ENCODING_BASE // GRID_COLUMNS

# Latitude is shifted from [-90, 90] to [0, 180] and longitude from [-180, 180) to [0, 360).
LATITUDE_MAX = 90.0
LONGITUDE_MAX = 180.0

# Exponent of the encoding base needed to cover 360 degrees with a single digit.
INITIAL_EXPONENT = math.floor(math.log(2 * LONGITUDE_MAX) / math.log(ENCODING_BASE))
INITIAL_RESOLUTION = float(ENCODING_BASE**INITIAL_EXPONENT)

# Size of the last pair cell, split further by the grid digits.
GRID_SIZE_DEGREES = 1 / ENCODING_BASE ** (PAIR_CODE_LENGTH // 2 - (INITIAL_EXPONENT + 1))

SHORTEN_REMOVAL_LENGTHS = (8, 6, 4)
SHORTEN_SAFETY_FACTOR = 0.3

__all__ = [
    "ALPHABET",
    "DEFAULT_CODE_LENGTH",
    "ENCODING_BASE",
    "GRID_COLUMNS",
    "GRID_ROWS",
    "GRID_SIZE_DEGREES",
    "INITIAL_EXPONENT",
    "INITIAL_RESOLUTION",
    "LATITUDE_MAX",
    "LONGITUDE_MAX",
    "MAX_DIGIT_COUNT",
    "PADDING_CHARACTER",
    "PAIR_CODE_LENGTH",
    "SEPARATOR",
    "SEPARATOR_POSITION",
    "SHORTEN_REMOVAL_LENGTHS",
    "SHORTEN_SAFETY_FACTOR",
    "WGS84_CRS",
]
