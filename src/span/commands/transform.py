"""Per-value stream operations: eval, deval, remap, limit, snap."""

from __future__ import annotations

import logging
import sys
from typing import Callable

import click

from span.cli import SpanContext
from span.core.errors import SpanError
from span.core.interval import (
    check_steps, clamp, deinterpolate, interpolate, remap, snap,
)
from span.core.reader import iter_numbers
from span.display.numbers import format_number

logger = logging.getLogger(__name__)

ProcessFunc = Callable[[float], float]


def process_stream(ctx: SpanContext, proc: ProcessFunc) -> int:
    """Apply ``proc`` to every number on stdin and print each result.

    A value the operation rejects is logged and skipped; the stream keeps
    going. Returns the number of values printed.
    """
    emitted = 0
    for value in iter_numbers(sys.stdin):
        try:
            result = proc(value)
        except SpanError as e:
            logger.warning("could not process value %g, skipping: %s", value, e)
            continue
        click.echo(format_number(result, ctx.number_format))
        emitted += 1
    logger.debug("processed %d values", emitted)
    return emitted


def run_eval(ctx: SpanContext, a: float, b: float) -> None:
    process_stream(ctx, lambda t: interpolate(t, a, b))


def run_deval(ctx: SpanContext, a: float, b: float) -> None:
    process_stream(ctx, lambda v: deinterpolate(v, a, b))


def run_remap(ctx: SpanContext, src_a: float, src_b: float,
              dst_a: float, dst_b: float) -> None:
    process_stream(ctx, lambda v: remap(v, src_a, src_b, dst_a, dst_b))


def run_limit(ctx: SpanContext, lo: float, hi: float) -> None:
    process_stream(ctx, lambda v: clamp(v, lo, hi))


def run_snap(ctx: SpanContext, steps: int, a: float, b: float) -> None:
    # A bad step count fails every value; refuse before reading any
    check_steps(steps)
    process_stream(ctx, lambda v: snap(v, steps, a, b))
