"""Tokenize a text stream into floats, skipping what does not parse."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from span.core.errors import StreamReadError

logger = logging.getLogger(__name__)


def iter_tokens(stream: Iterable[str]) -> Iterator[str]:
    """Yield whitespace-separated tokens, one line at a time.

    Lines are pulled lazily so an interactive producer is processed as it
    writes. Failures of the underlying source surface as StreamReadError.
    """
    lines = iter(stream)
    while True:
        try:
            line = next(lines)
        except StopIteration:
            return
        except (OSError, UnicodeDecodeError) as e:
            raise StreamReadError(f"error reading from input: {e}") from e
        yield from line.split()


def iter_numbers(stream: Iterable[str]) -> Iterator[float]:
    """Yield every token of the stream that parses as a float."""
    for token in iter_tokens(stream):
        try:
            value = float(token)
        except ValueError:
            logger.warning("could not parse input value %r, skipping", token)
            continue
        yield value
