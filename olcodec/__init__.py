"""
OLCodec.

OLCodec is a Python library used for encoding locations into Open Location Codes (plus codes),
decoding them into areas, and shortening and recovering codes relative to a reference location.
"""

from olcodec._exceptions import (
    BufferTooSmallError,
    CodeLengthClampedWarning,
    InvalidCodeError,
    InvalidCodeLengthError,
)
from olcodec.code_area import CodeArea, LatLon
from olcodec.codec import (
    code_length,
    decode,
    encode,
    encode_default,
    encode_location,
    is_full,
    is_short,
    is_valid,
)
from olcodec.shorten import recover_nearest, shorten

__app_name__ = "OLCodec"
__version__ = "0.1.0"

__all__ = [
    "BufferTooSmallError",
    "CodeArea",
    "CodeLengthClampedWarning",
    "InvalidCodeError",
    "InvalidCodeLengthError",
    "LatLon",
    "code_length",
    "decode",
    "encode",
    "encode_default",
    "encode_location",
    "is_full",
    "is_short",
    "is_valid",
    "recover_nearest",
    "shorten",
]
