"""Interval arithmetic: interpolation, remapping, clamping, snapping and subdivision.

An interval is a plain ``(a, b)`` pair. ``a > b`` is a valid, reversed
interval, not an error. ``interpolate`` and ``clamp`` are permissive and
let NaN through so they can run inline in rendering loops; everything
else rejects non-finite input with NonFiniteInputError.
"""

from __future__ import annotations

import logging
import math
import random as _random
import time
from typing import Iterable, Protocol

from span.core.errors import (
    DegenerateIntervalError, InvalidCountError, InvalidStepCountError,
    NoDataError, NonFiniteInputError,
)
from span.core.reader import iter_numbers

logger = logging.getLogger(__name__)

TOLERANCE = 1e-15


class UniformSource(Protocol):
    def random(self) -> float: ...


def _require_finite(action: str, *values: float) -> None:
    for v in values:
        if math.isnan(v):
            raise NonFiniteInputError(f"cannot {action}: NaN values are not supported")
        if math.isinf(v):
            raise NonFiniteInputError(f"cannot {action}: infinite values are not supported")


def round_half_up(x: float) -> int:
    """Round to the nearest integer, .5 going up (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(x + 0.5)


def check_steps(steps: int, allow_zero: bool = False) -> None:
    """Validate a grid step count before any value is processed."""
    if steps < 0:
        raise InvalidStepCountError("steps cannot be negative")
    if steps == 0 and not allow_zero:
        raise InvalidStepCountError("steps must be a positive integer")


def interpolate(t: float, a: float, b: float) -> float:
    """Evaluate parameter ``t`` within ``[a, b]``; t=0 is a, t=1 is b."""
    if math.isnan(t) or math.isnan(a) or math.isnan(b):
        return math.nan
    return a + (b - a) * t


def deinterpolate(value: float, a: float, b: float) -> float:
    """Return the parameter ``t`` of ``value`` relative to ``[a, b]``.

    A zero-width interval is only accepted when ``value`` sits on it, in
    which case ``t`` is 0.
    """
    _require_finite("de-evaluate", value, a, b)
    delta = b - a
    if abs(delta) < TOLERANCE:
        if abs(value - a) < TOLERANCE:
            return 0.0
        raise DegenerateIntervalError(
            "cannot de-evaluate in an interval with near-zero delta")
    return (value - a) / delta


def remap(value: float, src_a: float, src_b: float,
          dst_a: float, dst_b: float) -> float:
    """Translate ``value`` from ``[src_a, src_b]`` into ``[dst_a, dst_b]``."""
    _require_finite("remap", value, src_a, src_b, dst_a, dst_b)
    try:
        t = deinterpolate(value, src_a, src_b)
    except DegenerateIntervalError as e:
        raise DegenerateIntervalError(
            "cannot remap from a source interval with zero delta") from e
    return interpolate(t, dst_a, dst_b)


def clamp(value: float, lo: float, hi: float) -> float:
    """Restrict ``value`` to the interval; bound order does not matter."""
    if math.isnan(value) or math.isnan(lo) or math.isnan(hi):
        return math.nan
    if lo > hi:
        lo, hi = hi, lo
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def snap(value: float, steps: int, a: float, b: float) -> float:
    """Snap ``value`` to the nearest of ``steps + 1`` grid points on ``[a, b]``.

    Half-way values round up, towards ``b``.
    """
    _require_finite("snap", value, a, b)
    check_steps(steps)

    lo, hi = (a, b) if a <= b else (b, a)
    if value <= lo:
        return lo
    if value >= hi:
        return hi
    if abs(b - a) < TOLERANCE:
        return a

    t = deinterpolate(value, a, b)
    index = round_half_up(t * steps)
    return interpolate(index / steps, a, b)


def _boundaries(steps: int, a: float, b: float) -> list[float]:
    """``steps + 1`` evenly spaced points, first exactly ``a``, last exactly ``b``."""
    if a == b:
        return [a] * (steps + 1)
    step_size = (b - a) / steps
    return [a + i * step_size for i in range(steps)] + [b]


def divide(steps: int, a: float, b: float) -> list[float]:
    """Start point of each of ``steps`` equal segments; ``b`` is excluded."""
    _require_finite("divide", a, b)
    check_steps(steps, allow_zero=True)
    if steps == 0:
        return []
    return _boundaries(steps, a, b)[:-1]


def subintervals(steps: int, a: float, b: float) -> list[tuple[float, float]]:
    """``(start, end)`` of each of ``steps`` contiguous equal segments."""
    _require_finite("create subintervals", a, b)
    check_steps(steps, allow_zero=True)
    if steps == 0:
        return []
    points = _boundaries(steps, a, b)
    return list(zip(points[:-1], points[1:]))


def default_rng() -> _random.Random:
    return _random.Random(time.time_ns())


def random_sample(count: int, a: float, b: float,
                  rng: UniformSource | None = None) -> list[float]:
    """Draw ``count`` values uniformly from the interval.

    ``rng`` is anything with a ``random()`` method returning a float in
    ``[0, 1)``; a seeded ``random.Random`` gives reproducible draws.
    """
    _require_finite("generate random values", a, b)
    if count < 0:
        raise InvalidCountError("count cannot be negative")
    if count == 0:
        return []
    if rng is None:
        rng = default_rng()
    lo, hi = (a, b) if a <= b else (b, a)
    return [interpolate(rng.random(), lo, hi) for _ in range(count)]


def encompass(stream: Iterable[str]) -> tuple[float, float]:
    """Return ``(min, max)`` over every number in a text stream."""
    lo = math.inf
    hi = -math.inf
    seen = 0
    for value in iter_numbers(stream):
        _require_finite("encompass", value)
        if value < lo:
            lo = value
        if value > hi:
            hi = value
        seen += 1

    if not seen:
        raise NoDataError("no numbers found in input")
    logger.debug("encompass: %d values in [%g, %g]", seen, lo, hi)
    return lo, hi
