#!/usr/bin/env python3
"""Sliding Block Puzzle Solver.

Usage::

    python main.py                          # classic Forget-me-not, Rich output
    python main.py ../fixtures/nook.txt     # solve a puzzle file
    python main.py -f vanilla --stock nook  # plain terminal, small stock puzzle
    python main.py --animate -o out.json    # replay the moves, save them as JSON
    python main.py --play --stock nook      # slide the pieces yourself
"""

import importlib
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend import config  # noqa: E402
from backend.engine.gamegenerator import GameGenerator  # noqa: E402
from backend.engine.gamesolver import Strategy  # noqa: E402
from backend.io import PuzzleFormatError, load_puzzle  # noqa: E402
from frontend.cli.logs import configure_logging  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


class Stock(StrEnum):
    classic = "classic"
    klotski = "klotski"
    corner = "corner"
    nook = "nook"


class LogLevel(StrEnum):
    debug = "debug"
    info = "info"
    warning = "warning"
    error = "error"
    critical = "critical"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    puzzle: Optional[Path] = typer.Argument(
        None,
        exists=True, dir_okay=False, readable=True,
        help="Puzzle definition file. Omit to use a stock puzzle.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="How to display the board and solution.",
    ),
    stock: Stock = typer.Option(
        config.STOCK_PUZZLE, "--stock",
        envvar="KLOTSKI_STOCK_PUZZLE", case_sensitive=False,
        help="Stock puzzle to solve when no file is given.",
    ),
    scramble: int = typer.Option(
        60, "--scramble",
        min=0,
        help="Random slides applied to the klotski stock puzzle.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for the klotski scramble.",
    ),
    strategy: Strategy = typer.Option(
        config.STRATEGY, "--strategy",
        envvar="KLOTSKI_STRATEGY", case_sensitive=False,
        help="Breadth-first driver: iterative loop or recursion.",
    ),
    animate: bool = typer.Option(
        False, "--animate/--no-animate",
        help="Replay the solution on screen.",
    ),
    step: bool = typer.Option(
        False, "--step",
        help="Step through the solution one keypress at a time.",
    ),
    play: bool = typer.Option(
        False, "--play",
        help="Move the pieces yourself, with solver hints on request.",
    ),
    delay: float = typer.Option(
        config.ANIMATION_DELAY, "--delay",
        min=0.0, envvar="KLOTSKI_ANIMATION_DELAY",
        help="Seconds between animated moves.",
    ),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output",
        help="Write the solution to this JSON file.",
    ),
    log_level: LogLevel = typer.Option(
        config.LOG_LEVEL.lower(), "--log-level",
        envvar="KLOTSKI_LOG_LEVEL", case_sensitive=False,
        help="Verbosity of solver logging (stderr).",
    ),
) -> None:
    """Sliding Block Puzzle Solver."""
    configure_logging(log_level.value)

    if puzzle is not None:
        try:
            board = load_puzzle(puzzle)
        except PuzzleFormatError as exc:
            typer.echo(f"Invalid puzzle file {puzzle}: {exc}", err=True)
            raise typer.Exit(code=2)
    else:
        board = GameGenerator.stock(stock.value, moves=scramble, seed=seed)

    mod = importlib.import_module(_RUNNERS[frontend])
    code = mod.run(
        board,
        strategy=strategy,
        animate=animate,
        step=step,
        delay=delay,
        output=output,
        play=play,
    )
    raise typer.Exit(code=code)


if __name__ == "__main__":
    app()
