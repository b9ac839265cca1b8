"""Character sparklines for a stream of numbers.

Three strategies, picked from the SparkConfig:

    BUFFERED   no width, some bound unknown: read everything, then scale
    STREAMING  both bounds fixed, no width: one glyph per sample, appended
    WINDOW     fixed width: last N samples, redrawn in place behind '\\r'
"""

from __future__ import annotations

import io
import logging
import math
from typing import Iterable, Iterator, TextIO

from span.core.history import HistoryBuffer
from span.core.interval import TOLERANCE, clamp, remap, round_half_up
from span.core.models import ANSI_RESET, SparkColor, SparkConfig, SparkMode

logger = logging.getLogger(__name__)

SPARK_CHARS = " ▂▃▄▅▆▇█"


def glyph_index(sample: float, lo: float, hi: float, levels: int) -> int:
    """Ramp index of ``sample`` on the scale ``[lo, hi]``.

    A zero-width scale maps everything to index 0. So does a NaN
    position, which a scale wider than the largest float can produce.
    """
    top = levels - 1
    if abs(hi - lo) < TOLERANCE:
        return 0
    position = remap(sample, lo, hi, 0, top)
    if math.isnan(position):
        return 0
    # clamp first: remap overflows to inf for samples far outside [lo, hi]
    return round_half_up(clamp(position, 0, top))


def render_line(values: Iterable[float], lo: float, hi: float,
                ramp: str = SPARK_CHARS) -> str:
    return "".join(ramp[glyph_index(v, lo, hi, len(ramp))] for v in values)


def _finite(values: Iterable[float]) -> Iterator[float]:
    for v in values:
        if not math.isfinite(v):
            logger.warning("could not render value %s, skipping", v)
            continue
        yield v


class SparkRenderer:
    """Render a sequence of samples to a text stream."""

    def __init__(self, config: SparkConfig, ramp: str = SPARK_CHARS):
        self.config = config
        self.ramp = ramp

    def render(self, values: Iterable[float], out: TextIO) -> int:
        """Write the sparkline for ``values`` to ``out``; returns samples drawn."""
        mode = self.config.mode
        logger.debug("sparkline mode: %s", mode.value)
        if mode is SparkMode.WINDOW:
            return self._render_window(values, out)
        if mode is SparkMode.STREAMING:
            return self._render_streaming(values, out)
        return self._render_buffered(values, out)

    def _render_buffered(self, values: Iterable[float], out: TextIO) -> int:
        samples = list(_finite(values))
        if not samples:
            return 0
        lo, hi = self.config.scale(min(samples), max(samples))
        out.write(self.config.color.wrap(render_line(samples, lo, hi, self.ramp)))
        return len(samples)

    def _render_streaming(self, values: Iterable[float], out: TextIO) -> int:
        lo, hi = self.config.lower, self.config.upper
        color = self.config.color
        count = 0
        try:
            for v in _finite(values):
                if count == 0 and color is not SparkColor.NONE:
                    out.write(color.value)
                out.write(self.ramp[glyph_index(v, lo, hi, len(self.ramp))])
                out.flush()
                count += 1
        finally:
            if count and color is not SparkColor.NONE:
                out.write(ANSI_RESET)
        return count

    def _render_window(self, values: Iterable[float], out: TextIO) -> int:
        history = HistoryBuffer(self.config.width)
        count = 0
        for v in _finite(values):
            history.append(v)
            lo, hi = self.config.scale(*history.bounds())
            line = render_line(history.snapshot(), lo, hi, self.ramp)
            out.write("\r" + self.config.color.wrap(line))
            out.flush()
            count += 1
        return count


def sparkline(values: Iterable[float], lower: float | None = None,
              upper: float | None = None, ramp: str = SPARK_CHARS) -> str:
    """Render a sparkline string from a list of numbers."""
    buf = io.StringIO()
    SparkRenderer(SparkConfig(lower=lower, upper=upper), ramp).render(values, buf)
    return buf.getvalue()
