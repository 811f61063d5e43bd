"""
Code string validation.

Checks if a string is a structurally legal code and extracts the position of the separator
and the padding. Decoding, code length calculation and classifiers all work on
the `SanitizedCode` object returned from here.
"""

from dataclasses import dataclass
from typing import Optional

from olcodec._alphabet import is_alphabet_symbol, symbol_to_digit
from olcodec._constants import (
    ENCODING_BASE,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    MAX_DIGIT_COUNT,
    PADDING_CHARACTER,
    SEPARATOR,
    SEPARATOR_POSITION,
)
from olcodec._exceptions import InvalidCodeError

__all__ = ["SanitizedCode", "sanitize"]


@dataclass(frozen=True)
class SanitizedCode:
    """
    Validated code with the layout metadata.

    Attributes:
        code (str): Validated code, unchanged.
        separator_index (int): Index of the separator character in the code.
        padding_index (Optional[int]): Index of the first padding character
            or `None` if the code isn't padded.
    """

    code: str
    separator_index: int
    padding_index: Optional[int] = None

    @property
    def digits(self) -> str:
        """Significant digits of the code, without the separator and padding."""
        if self.padding_index is not None:
            return self.code[: self.padding_index]
        return self.code[: self.separator_index] + self.code[self.separator_index + 1 :]

    @property
    def length(self) -> int:
        """Number of significant digits."""
        if self.padding_index is not None:
            return self.padding_index
        return len(self.code) - 1

    @property
    def is_short(self) -> bool:
        """Whether the code misses some of its leading digits."""
        return self.separator_index < SEPARATOR_POSITION

    @property
    def is_padded(self) -> bool:
        """Whether the code contains padding characters."""
        return self.padding_index is not None

    @property
    def is_full(self) -> bool:
        """
        Whether the code has all of its leading digits.

        First latitude and longitude digits must not point beyond 90 degrees of latitude
        and 180 degrees of longitude.
        """
        if self.is_short:
            return False

        first_latitude_value = symbol_to_digit(self.code[0]) * ENCODING_BASE
        if first_latitude_value >= 2 * LATITUDE_MAX:
            return False

        first_longitude_value = symbol_to_digit(self.code[1]) * ENCODING_BASE
        return first_longitude_value < 2 * LONGITUDE_MAX


def sanitize(code: str) -> SanitizedCode:
    """
    Validate the code and extract its layout.

    Args:
        code (str): Code to validate. Case of the alphabet symbols doesn't matter.

    Raises:
        InvalidCodeError: If the code is not a structurally legal code.

    Returns:
        SanitizedCode: Validated code with separator and padding positions.
    """
    if not isinstance(code, str):
        raise InvalidCodeError("Code must be a string", code)

    separator_first = separator_last = -1
    padding_first = padding_last = -1
    for index, character in enumerate(code):
        if character == PADDING_CHARACTER:
            if padding_first < 0:
                padding_first = index
            padding_last = index
        elif character == SEPARATOR:
            if separator_first < 0:
                separator_first = index
            separator_last = index
        elif not is_alphabet_symbol(character):
            raise InvalidCodeError(f"Illegal character {character!r} at index {index}", code)

    if not code:
        raise InvalidCodeError("Code cannot be empty", code)
    if separator_first < 0:
        raise InvalidCodeError(f"Code must contain the separator ({SEPARATOR})", code)
    if separator_last != separator_first:
        raise InvalidCodeError("Code can contain only one separator", code)
    if len(code) == 1:
        raise InvalidCodeError("Code cannot consist only of the separator", code)

    # Separator can only be placed at a pair boundary within the first ten characters.
    if separator_first > SEPARATOR_POSITION or separator_first % 2 == 1:
        raise InvalidCodeError(f"Illegal separator position: {separator_first}", code)

    if padding_first >= 0:
        if padding_first == 0 or padding_first % 2 == 1:
            raise InvalidCodeError(f"Illegal padding position: {padding_first}", code)
        if len(code) > separator_first + 1:
            raise InvalidCodeError("Padded codes cannot have digits after the separator", code)
        if padding_last != separator_first - 1:
            raise InvalidCodeError("Padding must end right before the separator", code)

    digits_after_separator = len(code) - separator_first - 1
    if digits_after_separator == 1:
        raise InvalidCodeError("Code cannot have a single digit after the separator", code)

    if len(code) - 1 > MAX_DIGIT_COUNT:
        raise InvalidCodeError(f"Code cannot have more than {MAX_DIGIT_COUNT} digits", code)
    if digits_after_separator > MAX_DIGIT_COUNT - SEPARATOR_POSITION:
        raise InvalidCodeError(
            "Code cannot have more than"
            f" {MAX_DIGIT_COUNT - SEPARATOR_POSITION} digits after the separator",
            code,
        )

    return SanitizedCode(
        code=code,
        separator_index=separator_first,
        padding_index=padding_first if padding_first >= 0 else None,
    )
