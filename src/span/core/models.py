"""Data models as dataclasses."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from span.core.errors import NonFiniteInputError

ANSI_RESET = "\033[0m"


class SparkColor(Enum):
    NONE = ""
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"

    @classmethod
    def from_name(cls, name: str | None) -> SparkColor:
        """Resolve a color name case-insensitively; empty means no color."""
        if not name:
            return cls.NONE
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"unknown color: {name}") from None

    @classmethod
    def names(cls) -> list[str]:
        return [c.name.lower() for c in cls if c is not cls.NONE]

    def wrap(self, text: str) -> str:
        if self is SparkColor.NONE:
            return text
        return f"{self.value}{text}{ANSI_RESET}"


class SparkMode(Enum):
    BUFFERED = "buffered"    # auto-scaled, whole input read first
    STREAMING = "streaming"  # fixed interval, one glyph per sample
    WINDOW = "window"        # fixed width, redrawn in place


@dataclass(frozen=True)
class SparkConfig:
    lower: float | None = None
    upper: float | None = None
    width: int | None = None  # None -> growing output
    color: SparkColor = SparkColor.NONE

    def __post_init__(self) -> None:
        for bound in (self.lower, self.upper):
            if bound is not None and not math.isfinite(bound):
                raise NonFiniteInputError(
                    "sparkline bounds must be finite numbers")

    @property
    def mode(self) -> SparkMode:
        if self.width is not None:
            return SparkMode.WINDOW
        if self.lower is not None and self.upper is not None:
            return SparkMode.STREAMING
        return SparkMode.BUFFERED

    def scale(self, observed_lo: float, observed_hi: float) -> tuple[float, float]:
        """Active scale: configured bounds win over observed ones."""
        lo = self.lower if self.lower is not None else observed_lo
        hi = self.upper if self.upper is not None else observed_hi
        return lo, hi
