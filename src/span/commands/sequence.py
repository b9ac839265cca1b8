"""Batch generators: divide, subintervals, random."""

from __future__ import annotations

import logging
import random

import click

from span.cli import SpanContext
from span.core.interval import default_rng, divide, random_sample, subintervals
from span.display.json_out import print_json
from span.display.numbers import format_number, format_pair
from span.display.tables import display_sequence, display_subintervals

logger = logging.getLogger(__name__)


def _emit_values(ctx: SpanContext, name: str, title: str, values: list[float]) -> None:
    if ctx.json_output:
        print_json(values)
    elif ctx.fmt == "rich":
        display_sequence(title, values, ctx.number_format)
    elif ctx.fmt == "polars":
        from span.frames import display_polars, sequence_frames
        display_polars(sequence_frames(name, values))
    elif ctx.fmt == "csv":
        from span.frames import export_tables, sequence_frames
        export_tables(sequence_frames(name, values))
    else:
        for v in values:
            click.echo(format_number(v, ctx.number_format))


def run_divide(ctx: SpanContext, steps: int, a: float, b: float) -> None:
    values = divide(steps, a, b)
    _emit_values(ctx, "divide", f"[{a:g}, {b:g}] in {steps} steps", values)


def run_random(ctx: SpanContext, count: int, a: float, b: float,
               seed: int | None = None) -> None:
    rng = random.Random(seed) if seed is not None else default_rng()
    values = random_sample(count, a, b, rng)
    logger.debug("drew %d values (seed=%s)", len(values), seed)
    _emit_values(ctx, "random", f"{count} random values in [{a:g}, {b:g}]", values)


def run_subintervals(ctx: SpanContext, steps: int, a: float, b: float) -> None:
    pairs = subintervals(steps, a, b)

    if ctx.json_output:
        print_json([{"start": s, "end": e} for s, e in pairs])
    elif ctx.fmt == "rich":
        display_subintervals(f"[{a:g}, {b:g}] in {steps} subintervals", pairs,
                             ctx.number_format)
    elif ctx.fmt == "polars":
        from span.frames import display_polars, subintervals_frames
        display_polars(subintervals_frames(pairs))
    elif ctx.fmt == "csv":
        from span.frames import export_tables, subintervals_frames
        export_tables(subintervals_frames(pairs))
    else:
        for start, end in pairs:
            click.echo(format_pair(start, end, ctx.number_format))
