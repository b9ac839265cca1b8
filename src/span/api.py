"""Public Python API — returns ibis tables for programmatic use.

Usage:
    import span.api as sp

    # Batch results, one ibis.Table each
    sp.divide(4, 0, 1).to_polars()
    sp.subintervals(4, 0, 1).to_pandas()
    sp.random(10, -1, 1, seed=42).to_polars()

    with open("samples.txt") as fh:
        sp.encompass(fh).to_polars()

    # Sparkline string, scaled to the data unless bounds are given
    sp.spark([1, 5, 22, 13, 5, 17, 9])
"""

from __future__ import annotations

import random as _random
from typing import Iterable

import ibis

from span.core import interval
from span.display.charts import sparkline


def divide(steps: int, a: float, b: float) -> ibis.Table:
    """Segment start points of [a, b] (b excluded)."""
    from span.frames import sequence_frames
    return sequence_frames("divide", interval.divide(steps, a, b))["divide"]


def subintervals(steps: int, a: float, b: float) -> ibis.Table:
    """Contiguous (start, end) segments of [a, b]."""
    from span.frames import subintervals_frames
    return subintervals_frames(interval.subintervals(steps, a, b))["subintervals"]


def random(count: int, a: float, b: float, seed: int | None = None) -> ibis.Table:
    """Uniform random values within [a, b]."""
    rng = _random.Random(seed) if seed is not None else None
    from span.frames import sequence_frames
    return sequence_frames("random", interval.random_sample(count, a, b, rng))["random"]


def encompass(lines: Iterable[str]) -> ibis.Table:
    """Min, max and width of every number in a text stream."""
    from span.frames import encompass_frames
    return encompass_frames(*interval.encompass(lines))["summary"]


def spark(values: Iterable[float], lower: float | None = None,
          upper: float | None = None) -> str:
    """Sparkline string for ``values``."""
    return sparkline(values, lower, upper)
