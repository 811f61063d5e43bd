"""
Mapping between the code alphabet and base 20 digit values.

Alphabet skips vowels and characters that are easy to confuse with each other
(like `0`, `O`, `1`, `I`), so a digit value is just the index of a symbol in it.
"""

from olcodec._constants import ALPHABET

_SYMBOL_VALUES = {symbol: value for value, symbol in enumerate(ALPHABET)}


def digit_to_symbol(value: int) -> str:
    """Return alphabet symbol for a digit value in range 0-19."""
    return ALPHABET[value]


def symbol_to_digit(symbol: str) -> int:
    """
    Return digit value of a single alphabet symbol.

    Comparison is case insensitive.

    Raises:
        ValueError: If the symbol is not a part of the alphabet.
    """
    try:
        return _SYMBOL_VALUES[symbol.upper()]
    except KeyError:
        raise ValueError(f"Symbol {symbol!r} is not a part of the code alphabet") from None


def is_alphabet_symbol(symbol: str) -> bool:
    """Check if a single character belongs to the alphabet (case insensitive)."""
    return symbol.upper() in _SYMBOL_VALUES
