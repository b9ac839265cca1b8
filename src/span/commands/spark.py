"""Sparkline rendering of stdin."""

from __future__ import annotations

import logging
import sys

from span.cli import SpanContext
from span.core.models import SparkColor, SparkConfig, SparkMode
from span.core.reader import iter_numbers
from span.display.charts import SparkRenderer

logger = logging.getLogger(__name__)


def run_spark(ctx: SpanContext, lower: float | None, upper: float | None,
              width: int | None, color: SparkColor) -> None:
    config = SparkConfig(lower=lower, upper=upper, width=width, color=color)
    out = sys.stdout
    count = SparkRenderer(config).render(iter_numbers(sys.stdin), out)
    logger.debug("rendered %d samples", count)

    # The sliding window owns the line it redraws
    if config.mode is not SparkMode.WINDOW:
        out.write("\n")
    out.flush()
