"""Convert batch results to ibis memtables and render output.

Per-operation functions return dict[str, ibis.Table].
Tables can be materialized to any backend:

    tables["divide"].to_polars()
    tables["subintervals"].to_pandas()
"""

from __future__ import annotations

import sys

import ibis


def _mt(rows: list[dict], schema: dict[str, str]) -> ibis.Table:
    """Create a memtable from rows; an empty result keeps its columns."""
    if not rows:
        return ibis.memtable({name: [] for name in schema}, schema=schema)
    return ibis.memtable(rows)


def sequence_frames(name: str, values: list[float]) -> dict[str, ibis.Table]:
    """One ``index``/``value`` table for divide or random output."""
    rows = [{"index": i, "value": v} for i, v in enumerate(values)]
    return {name: _mt(rows, {"index": "int64", "value": "float64"})}


def subintervals_frames(pairs: list[tuple[float, float]]) -> dict[str, ibis.Table]:
    rows = [
        {"index": i, "start": start, "end": end, "width": end - start}
        for i, (start, end) in enumerate(pairs)
    ]
    return {"subintervals": _mt(rows, {
        "index": "int64", "start": "float64", "end": "float64", "width": "float64",
    })}


def encompass_frames(lo: float, hi: float) -> dict[str, ibis.Table]:
    return {"summary": ibis.memtable([{"min": lo, "max": hi, "width": hi - lo}])}


def display_polars(tables: dict[str, ibis.Table]) -> None:
    """Print each table as a polars DataFrame under a title line.

    The one-row ``summary`` table is printed long, one statistic per row.
    """
    for name, table in tables.items():
        df = table.to_polars()
        print(f"\n{name}")
        print(df.unpivot(variable_name="stat") if name == "summary" else df)


def export_tables(tables: dict[str, ibis.Table]) -> None:
    """Write every table to stdout as csv, each after a ``# name`` line."""
    for name, table in tables.items():
        sys.stdout.write(f"# {name}\n")
        table.to_pandas().to_csv(sys.stdout, index=False)
        sys.stdout.write("\n")
