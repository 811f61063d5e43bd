"""Tests for code classification."""

import random

import pytest
from parametrization import Parametrization as P

from olcodec import InvalidCodeError, code_length, encode, is_full, is_short, is_valid
from olcodec._sanitizer import sanitize


@P.parameters("code", "valid", "short", "full")  # type: ignore
@P.case("Full code", "8FVC2222+22", True, False, True)  # type: ignore
@P.case("Full code with grid", "8FVC2222+22GCCCCC", True, False, True)  # type: ignore
@P.case("Padded full code", "8FVC0000+", True, False, True)  # type: ignore
@P.case("Short code", "CJ+2VX", True, True, False)  # type: ignore
@P.case("Short code without suffix", "9QCJ+", True, True, False)  # type: ignore
@P.case("Padded short code", "WC2300+", True, True, False)  # type: ignore
@P.case("Digits inside padding", "8F00C200+", True, False, True)  # type: ignore
@P.case("Digits after padding", "8F0000C2+", False, False, False)  # type: ignore
@P.case("Latitude out of range", "X2222222+", True, False, False)  # type: ignore
@P.case("Longitude out of range", "CX222222+", True, False, False)  # type: ignore
@P.case("Highest latitude digit", "CFX3X2X2+X2", True, False, True)  # type: ignore
@P.case("Two separators", "8FVC2222+22+", False, False, False)  # type: ignore
@P.case("Separator at index 1", "8+FVC2222", False, False, False)  # type: ignore
@P.case("Lone padding", "0+", False, False, False)  # type: ignore
@P.case("Illegal character", "8FVC2222+2I", False, False, False)  # type: ignore
@P.case("Empty", "", False, False, False)  # type: ignore
@P.case("None", None, False, False, False)  # type: ignore
def test_classifiers(code: str, valid: bool, short: bool, full: bool) -> None:
    """Test if codes are properly classified."""
    assert is_valid(code) == valid
    assert is_short(code) == short
    assert is_full(code) == full


@pytest.mark.parametrize(
    "code,length",
    [
        ("8FVC2222+22", 10),
        ("8FVC2222+22GCCCCC", 16),
        ("8FVC2222+", 8),
        ("8FVC0000+", 4),
        ("8F000000+", 2),
        ("8F00C200+", 2),
        ("CJ+2VX", 5),
        ("WC2300+", 4),
        ("+2VX", 3),
    ],
)  # type: ignore
def test_code_length(code: str, length: int) -> None:
    """Test if only significant digits are counted."""
    assert code_length(code) == length


def test_code_length_invalid() -> None:
    """Test if code length of a malformed code is rejected."""
    with pytest.raises(InvalidCodeError):
        code_length("8FVC2222+22+")


def test_classification_consistency() -> None:
    """Test if the classifiers agree with each other for encoded and shortened codes."""
    rng = random.Random(42)
    for _ in range(500):
        code = encode(
            rng.uniform(-90, 90),
            rng.uniform(-180, 180),
            code_length=rng.choice([2, 4, 6, 8, 10, 11, 12, 15]),
        )
        for candidate in (code, code[rng.choice([2, 4, 6]) :]):
            if not is_valid(candidate):
                continue
            separator_index = sanitize(candidate).separator_index
            assert is_short(candidate) == (separator_index < 8)
            assert is_full(candidate) == (not is_short(candidate))
            assert is_valid(candidate) == (is_short(candidate) or is_full(candidate))
