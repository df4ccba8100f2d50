"""Typer CLI application."""

from typing import Optional

import typer

from randkit.config.logging import setup_logging
from randkit.engines.base import Engine
from randkit.engines.default import make_engine
from randkit.ir.distributions import Exponential, Normal
from randkit.generation.arrays import draw_array
from randkit.generation.distinct import draw_collection
from randkit.generation.strings import draw_string

app = typer.Typer(help="randkit: draw random values from the command line")

KINDS = {
    "float": float,
    "int": int,
    "bool": bool,
    "normal": Normal(),
    "exponential": Exponential(),
}


def _engine(kind: str, seed: Optional[int]) -> Engine:
    try:
        return make_engine(kind, seed)
    except KeyError as e:
        typer.echo(f"Error: {e.args[0]}", err=True)
        raise typer.Exit(1)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


def _check_count(count: int) -> None:
    if count < 0:
        typer.echo(f"Error: --count must be non-negative, got {count}", err=True)
        raise typer.Exit(1)


@app.command()
def draw(
    kind: str = typer.Option("float", help="float, int, bool, normal or exponential"),
    count: int = typer.Option(1, help="Number of values"),
    seed: Optional[int] = typer.Option(None, help="Engine seed"),
    engine: str = typer.Option("mersenne", help="mersenne, pcg64 or device"),
):
    """Print random values of one kind, one per line."""
    setup_logging()
    if kind not in KINDS:
        typer.echo(f"Error: unknown kind {kind!r}; choose from {', '.join(KINDS)}", err=True)
        raise typer.Exit(1)
    _check_count(count)
    rng = _engine(engine, seed)
    for value in draw_array(KINDS[kind], count, rng=rng):
        typer.echo(value)


@app.command()
def string(
    length: int = typer.Option(8, help="String length"),
    count: int = typer.Option(1, help="Number of strings"),
    seed: Optional[int] = typer.Option(None, help="Engine seed"),
):
    """Print random alphanumeric strings."""
    setup_logging()
    _check_count(count)
    if length < 0:
        typer.echo(f"Error: --length must be non-negative, got {length}", err=True)
        raise typer.Exit(1)
    rng = _engine("mersenne", seed)
    for _ in range(count):
        typer.echo(draw_string(length, rng=rng))


@app.command()
def distinct(
    low: int = typer.Option(1, help="Smallest value"),
    high: int = typer.Option(100, help="Largest value"),
    count: int = typer.Option(10, help="Number of distinct values"),
    seed: Optional[int] = typer.Option(None, help="Engine seed"),
):
    """Print distinct random integers in [low, high], sorted."""
    setup_logging()
    _check_count(count)
    if count > high - low + 1:
        typer.echo(f"Error: only {high - low + 1} values in [{low}, {high}]", err=True)
        raise typer.Exit(1)
    rng = _engine("mersenne", seed)
    for value in sorted(draw_collection(range(low, high + 1), set, count, rng=rng)):
        typer.echo(value)


if __name__ == "__main__":
    app()
