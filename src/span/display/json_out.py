"""JSON serialization for --json flag."""

from __future__ import annotations

import dataclasses
import json
import math
from typing import Any

from rich.console import Console

console = Console()


class _Encoder(json.JSONEncoder):
    def default(self, obj: Any) -> Any:
        if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
            return dataclasses.asdict(obj)
        return super().default(obj)


def _finite_or_none(obj: Any) -> Any:
    # JSON has no NaN/Infinity literals
    if isinstance(obj, float) and not math.isfinite(obj):
        return None
    if isinstance(obj, (list, tuple)):
        return [_finite_or_none(o) for o in obj]
    if isinstance(obj, dict):
        return {k: _finite_or_none(v) for k, v in obj.items()}
    return obj


def to_json(data: Any) -> str:
    return json.dumps(_finite_or_none(data), cls=_Encoder, indent=2)


def print_json(data: Any) -> None:
    """Print data as formatted JSON to stdout."""
    console.print_json(to_json(data))
