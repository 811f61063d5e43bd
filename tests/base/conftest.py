"""Common components for tests."""

from pathlib import Path

import pandas as pd

__all__ = [
    "encoding_test_cases",
    "short_code_test_cases",
    "get_test_file_path",
    "validity_test_cases",
]


def get_test_file_path(file_name: str) -> Path:
    """Path of a file in the test files directory."""
    return Path(__file__).parent.parent / "test_files" / file_name


def _read_test_file(file_name: str, columns: list[str]) -> pd.DataFrame:
    return pd.read_csv(
        get_test_file_path(file_name),
        comment="#",
        header=None,
        names=columns,
        dtype=str,
        keep_default_na=False,
        encoding="utf-8",
    )


def _to_boolean(value: str) -> bool:
    return value.strip().lower() not in ("", "false", "f", "no", "n", ".f.")


def encoding_test_cases() -> list[tuple[str, float, float, float, float, float, float]]:
    """Rows of the encoding test file: code, location and the expected bounds."""
    df = _read_test_file(
        "encoding_tests.csv", ["code", "lat", "lng", "lat_lo", "lng_lo", "lat_hi", "lng_hi"]
    )
    return [
        (
            row.code,
            float(row.lat),
            float(row.lng),
            float(row.lat_lo),
            float(row.lng_lo),
            float(row.lat_hi),
            float(row.lng_hi),
        )
        for row in df.itertuples(index=False)
    ]


def short_code_test_cases() -> list[tuple[str, float, float, str, str]]:
    """Rows of the short code test file: full code, reference, short code and test type."""
    df = _read_test_file("short_code_tests.csv", ["full_code", "lat", "lng", "short_code", "type"])
    return [
        (row.full_code, float(row.lat), float(row.lng), row.short_code, row.type)
        for row in df.itertuples(index=False)
    ]


def validity_test_cases() -> list[tuple[str, bool, bool, bool]]:
    """Rows of the validity test file: code and expected classifications."""
    df = _read_test_file("validity_tests.csv", ["code", "is_valid", "is_short", "is_full"])
    return [
        (row.code, _to_boolean(row.is_valid), _to_boolean(row.is_short), _to_boolean(row.is_full))
        for row in df.itertuples(index=False)
    ]
