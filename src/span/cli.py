"""CLI entry point — click group with per-command options and subcommand routing."""

from __future__ import annotations

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from span.core.errors import SpanError
from span.core.models import SparkColor
from span.display.numbers import DEFAULT_FORMAT, validate_format

console = Console(stderr=True)

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

# Lets negative numbers such as "-1.5" through as positional values
NUMERIC_ARGS = {"ignore_unknown_options": True}

TABLE_FORMATS = ["plain", "rich", "polars", "csv"]


class SpanContext:
    """Shared context passed to all commands."""

    def __init__(self, number_format: str = DEFAULT_FORMAT, json_output: bool = False,
                 fmt: str = "plain", verbose: bool = False):
        self.number_format = number_format
        self.json_output = json_output
        self.fmt = fmt
        self.verbose = verbose


class SpanGroup(click.Group):
    """Custom group that treats `data | span [MIN MAX]` as `data | span spark ...`."""

    def parse_args(self, ctx, args):
        piped = sys.stdin is not None and not sys.stdin.isatty()
        if piped and (not args or (args[0] not in self.commands
                                   and args[0] not in ("-h", "--help", "--version"))):
            args = ["spark"] + args
        return super().parse_args(ctx, args)


def _validate_format(ctx, param, value):
    try:
        return validate_format(value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


def _format_option(f):
    return click.option(
        "--format", "-f", "number_format", default=DEFAULT_FORMAT, show_default=True,
        envvar="SPAN_FORMAT", callback=_validate_format,
        help='printf-style format for every number (e.g. "%.3f")',
    )(f)


def _verbose_option(f):
    return click.option("--verbose", "-v", is_flag=True, help="Verbose output")(f)


def _table_options(f):
    """Output options for commands that produce a whole result set."""
    f = click.option("--json", "json_output", is_flag=True, help="Output as JSON")(f)
    f = click.option("--fmt", type=click.Choice(TABLE_FORMATS), default="plain",
                     show_default=True, help="Result layout")(f)
    return f


def _setup_logging(verbose: bool) -> None:
    handler = RichHandler(console=Console(stderr=True), show_time=False,
                          show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    log = logging.getLogger("span")
    for h in list(log.handlers):
        if isinstance(h, RichHandler):
            log.removeHandler(h)
    log.addHandler(handler)
    log.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _make_context(number_format=DEFAULT_FORMAT, json_output=False, fmt="plain",
                  verbose=False) -> SpanContext:
    _setup_logging(verbose)
    return SpanContext(number_format, json_output, fmt, verbose)


def _run(fn, *args) -> None:
    """Run a command body; library errors become `Error: ...` and exit 1."""
    try:
        fn(*args)
    except SpanError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        sys.exit(1)


@click.group(cls=SpanGroup, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="span-cli", prog_name="span")
def main():
    """Interval manipulation for numbers on stdin.

    \b
    Usage:
      span eval <a> <b>                   t -> value inside [a, b]
      span deval <a> <b>                  value -> t relative to [a, b]
      span remap <sa> <sb> <da> <db>      value from one interval to another
      span limit <min> <max>              clamp values into the interval
      span snap <steps> <a> <b>           snap values onto a grid
      span divide <steps> <a> <b>         segment start points
      span subintervals <steps> <a> <b>   segment (start, end) pairs
      span random <count> <a> <b>         uniform random values
      span encompass                      min and max of the input
      span spark [<min> <max>]            sparkline (default for piped input)
    """
    pass


# --- per-value stream operations ---

@main.command("eval", context_settings=NUMERIC_ARGS)
@click.argument("a", type=float)
@click.argument("b", type=float)
@_format_option
@_verbose_option
def eval_cmd(a, b, number_format, verbose):
    """Evaluate each input parameter t within [A, B]."""
    ctx = _make_context(number_format, verbose=verbose)
    from span.commands.transform import run_eval
    _run(run_eval, ctx, a, b)


@main.command("deval", context_settings=NUMERIC_ARGS)
@click.argument("a", type=float)
@click.argument("b", type=float)
@_format_option
@_verbose_option
def deval_cmd(a, b, number_format, verbose):
    """De-evaluate each input value to its parameter t in [A, B]."""
    ctx = _make_context(number_format, verbose=verbose)
    from span.commands.transform import run_deval
    _run(run_deval, ctx, a, b)


@main.command("remap", context_settings=NUMERIC_ARGS)
@click.argument("src_a", type=float)
@click.argument("src_b", type=float)
@click.argument("dst_a", type=float)
@click.argument("dst_b", type=float)
@_format_option
@_verbose_option
def remap_cmd(src_a, src_b, dst_a, dst_b, number_format, verbose):
    """Remap values from [SRC_A, SRC_B] to [DST_A, DST_B]."""
    ctx = _make_context(number_format, verbose=verbose)
    from span.commands.transform import run_remap
    _run(run_remap, ctx, src_a, src_b, dst_a, dst_b)


@main.command("limit", context_settings=NUMERIC_ARGS)
@click.argument("lo", metavar="MIN", type=float)
@click.argument("hi", metavar="MAX", type=float)
@_format_option
@_verbose_option
def limit_cmd(lo, hi, number_format, verbose):
    """Clamp values into [MIN, MAX]; bound order does not matter."""
    ctx = _make_context(number_format, verbose=verbose)
    from span.commands.transform import run_limit
    _run(run_limit, ctx, lo, hi)


@main.command("snap", context_settings=NUMERIC_ARGS)
@click.argument("steps", type=int)
@click.argument("a", type=float)
@click.argument("b", type=float)
@_format_option
@_verbose_option
def snap_cmd(steps, a, b, number_format, verbose):
    """Snap values to the nearest of STEPS+1 grid points on [A, B]."""
    ctx = _make_context(number_format, verbose=verbose)
    from span.commands.transform import run_snap
    _run(run_snap, ctx, steps, a, b)


# --- batch operations ---

@main.command("divide", context_settings=NUMERIC_ARGS)
@click.argument("steps", type=int)
@click.argument("a", type=float)
@click.argument("b", type=float)
@_format_option
@_table_options
@_verbose_option
def divide_cmd(steps, a, b, number_format, json_output, fmt, verbose):
    """Start points of STEPS equal segments of [A, B] (B excluded)."""
    ctx = _make_context(number_format, json_output, fmt, verbose)
    from span.commands.sequence import run_divide
    _run(run_divide, ctx, steps, a, b)


@main.command("subintervals", context_settings=NUMERIC_ARGS)
@click.argument("steps", type=int)
@click.argument("a", type=float)
@click.argument("b", type=float)
@_format_option
@_table_options
@_verbose_option
def subintervals_cmd(steps, a, b, number_format, json_output, fmt, verbose):
    """Split [A, B] into STEPS contiguous (start, end) pairs."""
    ctx = _make_context(number_format, json_output, fmt, verbose)
    from span.commands.sequence import run_subintervals
    _run(run_subintervals, ctx, steps, a, b)


@main.command("random", context_settings=NUMERIC_ARGS)
@click.argument("count", type=int)
@click.argument("a", type=float)
@click.argument("b", type=float)
@click.option("--seed", type=int, default=None, help="Seed for reproducible output")
@_format_option
@_table_options
@_verbose_option
def random_cmd(count, a, b, seed, number_format, json_output, fmt, verbose):
    """COUNT uniform random values within [A, B]."""
    ctx = _make_context(number_format, json_output, fmt, verbose)
    from span.commands.sequence import run_random
    _run(run_random, ctx, count, a, b, seed)


@main.command("encompass")
@_format_option
@_table_options
@_verbose_option
def encompass_cmd(number_format, json_output, fmt, verbose):
    """Minimum and maximum of the input numbers."""
    ctx = _make_context(number_format, json_output, fmt, verbose)
    from span.commands.encompass import run_encompass
    _run(run_encompass, ctx)


# --- visualization ---

@main.command("spark", context_settings=NUMERIC_ARGS)
@click.argument("bounds", nargs=-1, type=float)
@click.option("--min", "lower", type=float, default=None, help="Fixed lower bound")
@click.option("--max", "upper", type=float, default=None, help="Fixed upper bound")
@click.option("--width", "-w", type=int, default=None,
              help="Fixed-width sliding window, redrawn in place")
@click.option("--color", "-c", type=click.Choice(SparkColor.names(), case_sensitive=False),
              default=None, help="Sparkline color")
@_verbose_option
def spark_cmd(bounds, lower, upper, width, color, verbose):
    """Sparkline of the input; optional fixed [MIN MAX] scale."""
    if len(bounds) not in (0, 2):
        raise click.UsageError("spark requires 0 or 2 arguments: [MIN MAX]")
    if bounds:
        lower, upper = bounds
    ctx = _make_context(verbose=verbose)
    from span.commands.spark import run_spark
    _run(run_spark, ctx, lower, upper, width, SparkColor.from_name(color))
