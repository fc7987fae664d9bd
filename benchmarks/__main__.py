"""Entry point for benchmarks CLI."""

from typing import Annotated

import typer

from . import benchs  # pyright: ignore[reportUnusedImport] # noqa: F401
from ._registery import BENCHMARKS, CONSOLE, render, run_benchmarks

app = typer.Typer(help="Benchmarks for pyolazy developments.")


@app.command(name="list")
def list_() -> None:
    """List registered benchmarks."""
    for benchmark in BENCHMARKS:
        CONSOLE.print(f"{benchmark.category}.{benchmark.name}")


@app.command()
def run(
    *,
    category: Annotated[
        str | None, typer.Option("--category", help="Only run this category.")
    ] = None,
) -> None:
    """Run benchmarks and print median timings."""
    selected = [b for b in BENCHMARKS if category is None or b.category == category]
    if not selected:
        CONSOLE.print(f"✗ No benchmark in category {category!r}", style="bold red")
        raise typer.Exit(code=1)
    CONSOLE.print("Running benchmarks...", style="bold blue")
    CONSOLE.print(render(run_benchmarks(selected)))


if __name__ == "__main__":
    app()
