"""Range discovery over the whole input."""

from __future__ import annotations

import sys

import click

from span.cli import SpanContext
from span.core.interval import encompass
from span.display.json_out import print_json
from span.display.numbers import format_pair
from span.display.tables import display_range


def run_encompass(ctx: SpanContext) -> None:
    lo, hi = encompass(sys.stdin)

    if ctx.json_output:
        print_json({"min": lo, "max": hi})
    elif ctx.fmt == "rich":
        display_range(lo, hi, ctx.number_format)
    elif ctx.fmt == "polars":
        from span.frames import display_polars, encompass_frames
        display_polars(encompass_frames(lo, hi))
    elif ctx.fmt == "csv":
        from span.frames import encompass_frames, export_tables
        export_tables(encompass_frames(lo, hi))
    else:
        click.echo(format_pair(lo, hi, ctx.number_format))
