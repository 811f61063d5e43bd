"""Bounded output for the produced codes."""

from typing import Optional

from olcodec._exceptions import BufferTooSmallError

__all__ = ["fit_output"]


def fit_output(code: str, max_length: Optional[int]) -> str:
    """
    Check if the produced code fits into the caller's output capacity.

    Capacity keeps one slot reserved for a terminator, so a code with `n` characters
    requires `max_length` of at least `n + 1`.

    Args:
        code (str): Produced code.
        max_length (Optional[int]): Output capacity. `None` means no limit.

    Raises:
        BufferTooSmallError: If the code doesn't fit.

    Returns:
        str: Unchanged code.
    """
    if max_length is None:
        return code

    required_length = len(code) + 1
    if required_length > max_length:
        raise BufferTooSmallError(
            f"Output capacity ({max_length}) is too small, required: {required_length}",
            required_length=required_length,
            max_length=max_length,
        )
    return code
