"""Entry point for benchmarks CLI."""

from typing import Annotated

import typer

from . import benchs  # pyright: ignore[reportUnusedImport] # noqa: F401
from ._pipeline import run_pipeline, to_table
from ._registery import BENCHMARKS, CONSOLE

app = typer.Typer(help="Benchmarks for seqchain developments.")


@app.command(name="list")
def list_() -> None:
    """List the registered benchmarks."""
    for bench in BENCHMARKS:
        CONSOLE.print(f"{bench.category}: {bench.name}")


@app.command()
def run(
    *,
    category: Annotated[
        str | None, typer.Option("--category", help="Only run this category.")
    ] = None,
) -> None:
    """Run benchmarks and print the median timings."""
    if category is not None:
        BENCHMARKS[:] = [b for b in BENCHMARKS if b.category == category]
    CONSOLE.print("Running benchmarks...", style="bold blue")
    result = run_pipeline()
    if result.is_err():
        CONSOLE.print(f"✗ {result.unwrap_err()}", style="bold red")
        raise typer.Exit(code=1)
    CONSOLE.print(to_table(result.unwrap()))


if __name__ == "__main__":
    app()
