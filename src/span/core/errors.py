"""Exception hierarchy shared by the interval core and the renderer."""

from __future__ import annotations


class SpanError(Exception):
    """Base class; the CLI reports these as ``Error:`` and exits 1."""


class NonFiniteInputError(SpanError, ValueError):
    """NaN or infinity where the operation cannot tolerate it."""


class DegenerateIntervalError(SpanError, ValueError):
    """Zero-width interval the given value does not sit on."""


class InvalidStepCountError(SpanError, ValueError):
    """Grid step count that is negative, or zero where segments are needed."""


class InvalidCountError(SpanError, ValueError):
    """Negative number of random samples."""


class NoDataError(SpanError):
    """Input held no usable numbers."""


class StreamReadError(SpanError):
    """The input stream could not be read or decoded."""
