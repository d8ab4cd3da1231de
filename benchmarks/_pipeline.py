"""Benchmarks for seqchain developments."""

import statistics
from typing import NamedTuple

import cytoolz as cz
from rich.table import Table

import seqchain as sc

from ._registery import BENCHMARKS, Row, collect_raw_timings


class Stat(NamedTuple):
    """Median timing of one benchmark variant."""

    category: str
    name: str
    size: int
    runs: int
    median: float


def run_pipeline() -> sc.Result[list[Stat], str]:
    """Run every registered benchmark and aggregate the timings."""
    if not BENCHMARKS:
        return sc.Err("No benchmarks registered!")
    return sc.Ok(collect_raw_timings(BENCHMARKS)).map(_compute_all_stats)


def _compute_all_stats(raw_rows: list[Row]) -> list[Stat]:
    groups = cz.itertoolz.groupby(lambda r: (r.category, r.name, r.size), raw_rows)
    return (
        sc.sorted2(groups)
        .map(
            lambda key, rows: Stat(
                *key, len(rows), statistics.median(r.time for r in rows)
            )
        )
        .values()
        .collect()
    )


def to_table(stats: list[Stat]) -> Table:
    """Render the stats as a rich table, one row per variant."""
    table = Table(title="seqchain benchmarks")
    for column in ("category", "name", "size", "runs", "median (ms)"):
        table.add_column(column)
    for stat in stats:
        table.add_row(
            stat.category,
            stat.name,
            str(stat.size),
            str(stat.runs),
            f"{stat.median * 1_000:.4f}",
        )
    return table
