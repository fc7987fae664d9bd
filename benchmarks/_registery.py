import statistics
import timeit
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial
from typing import Any, Final, NamedTuple, Self

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeRemainingColumn,
)
from rich.table import Table

import pyolazy as pl

type BenchFn = Callable[[], object]


WARMUP_RUNS: Final = 3
CALLS_BY_RUN: Final = 10
TARGET_BENCH_SEC: Final = 0.5
MIN_RUNS: Final = 10
SIZES: Final = (256, 1024, 4096)

CONSOLE: Final = Console()


class Variant(NamedTuple):
    """A specific benchmark variant size."""

    size: int
    n_runs: int
    fn: BenchFn

    @classmethod
    def from_fn(cls, fn: BenchFn, size: int) -> Self:
        """Estimate number of runs needed for benchmark variant."""
        warmup_time = timeit.timeit(fn, number=WARMUP_RUNS) / WARMUP_RUNS
        est = int(TARGET_BENCH_SEC / 2 / max(warmup_time, 1e-9) / CALLS_BY_RUN)
        return cls(size, max(MIN_RUNS, est), fn)


class Benchmark(NamedTuple):
    """A benchmark with multiple data sizes."""

    category: str
    name: str
    variants: list[Variant]


@dataclass(slots=True)
class Row:
    """Median timing of one benchmark variant."""

    category: str
    name: str
    size: int
    runs: int
    median: float


BENCHMARKS: list[Benchmark] = []


def bench(func: Callable[[list[int]], object]) -> Callable[[list[int]], object]:
    """Decorator to register benchmarks with multiple data sizes."""
    variants = (
        pl.Enumerator(SIZES)
        .map(lambda size, _: Variant.from_fn(partial(func, list(range(size))), size))
        .collect()
    )
    BENCHMARKS.append(Benchmark(func.__qualname__.split(".")[0], func.__name__, variants))
    return func


def run_benchmarks(benchmarks: list[Benchmark]) -> list[Row]:
    """Time every variant of every benchmark."""
    total_runs = (
        pl.Enumerator(benchmarks)
        .map(lambda b, _: sum(v.n_runs for v in b.variants))
        .reduce(lambda acc, n, _: acc + n, pl.Some(0))
        .unwrap()
    )
    CONSOLE.print(
        f"Found {len(benchmarks)} benchmarks, {total_runs} total runs",
        style="bold white",
    )

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeRemainingColumn(),
        console=CONSOLE,
    ) as progress:
        task = progress.add_task("[cyan]Running benchmarks...", total=total_runs)
        f = partial(_run_variant, progress, task)
        return (
            pl.Enumerator(benchmarks)
            .map(lambda b, _: pl.Enumerator(b.variants).map(lambda v, _: f(v, b)))
            .flatten()
            .collect()
        )


def _run_variant(
    progress: Progress,
    task: Any,  # noqa: ANN401
    variant: Variant,
    bench: Benchmark,
) -> Row:
    progress.update(
        task,
        description=f"[cyan]{bench.category}: {bench.name} @ {variant.size}",
    )
    timings: list[float] = []
    for _ in range(variant.n_runs):
        timings.append(timeit.timeit(variant.fn, number=CALLS_BY_RUN) / CALLS_BY_RUN)
        progress.advance(task)
    return Row(
        bench.category,
        bench.name,
        variant.size,
        variant.n_runs,
        statistics.median(timings),
    )


def render(rows: list[Row]) -> Table:
    """Render timings as a rich table, one line per benchmark variant."""
    table = Table(title="pyolazy benchmarks")
    for column in ("category", "name", "size", "runs"):
        table.add_column(column)
    table.add_column("median (µs)", justify="right")
    for row in rows:
        table.add_row(
            row.category,
            row.name,
            str(row.size),
            str(row.runs),
            f"{row.median * 1e6:.2f}",
        )
    return table
