"""printf-style number formatting for every emitted value."""

from __future__ import annotations

import math

DEFAULT_FORMAT = "%g"


def validate_format(fmt: str) -> str:
    """Return ``fmt`` if it formats exactly one float, else raise ValueError."""
    try:
        fmt % 1.0
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid number format {fmt!r}: {e}") from e
    return fmt


def format_number(value: float, fmt: str = DEFAULT_FORMAT) -> str:
    """Format ``value`` with ``fmt``.

    Integer formats such as ``%d`` cannot hold NaN or infinity; those fall
    back to ``%g``.
    """
    if not math.isfinite(value):
        try:
            return fmt % value
        except (ValueError, OverflowError):
            return DEFAULT_FORMAT % value
    return fmt % value


def format_pair(first: float, second: float, fmt: str = DEFAULT_FORMAT) -> str:
    return f"{format_number(first, fmt)} {format_number(second, fmt)}"
