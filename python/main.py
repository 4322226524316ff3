#!/usr/bin/env python3
"""Sliding Block Puzzle Solver.

Usage::

    python main.py solve                       # Square Root puzzle, Rich output
    python main.py solve -p warm-up -f vanilla # plain text, another puzzle
    python main.py solve --no-boards           # move list only
    python main.py list                        # built-in puzzles
    python main.py show -p square-root         # draw a starting board
"""

import importlib
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from blockslide.config import ENV_PREFIX, SearchConfig  # noqa: E402
from blockslide.engine.puzzles import Puzzle, get_puzzle, puzzle_names  # noqa: E402
from blockslide.logs import configure_logging  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "blockslide.frontend.cli.vanilla.app",
    Frontend.rich: "blockslide.frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _load_puzzle(name: str) -> Puzzle:
    try:
        return get_puzzle(name)
    except KeyError as exc:
        typer.echo(f"Error: {exc.args[0]}", err=True)
        raise typer.Exit(code=2)


def _config(max_states: Optional[int], verbose: int) -> SearchConfig:
    try:
        config = SearchConfig.from_env()
    except ValidationError as exc:
        for error in exc.errors():
            name = ENV_PREFIX + "_".join(str(part) for part in error["loc"]).upper()
            typer.echo(f"Error: {name}: {error['msg']}", err=True)
        raise typer.Exit(code=2)
    level = config.log_level
    if verbose == 1:
        level = "INFO"
    elif verbose > 1:
        level = "DEBUG"
    update: dict[str, object] = {"log_level": level}
    if max_states is not None:
        update["max_states"] = max_states
    return config.model_copy(update=update)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, help="Shortest-path sliding block puzzle solver.")


@app.command()
def solve(
    puzzle: str = typer.Option(
        "square-root", "-p", "--puzzle",
        help="Built-in puzzle to solve (see 'list').",
    ),
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="How to present the result.",
    ),
    boards: bool = typer.Option(
        True, "--boards/--no-boards",
        help="Draw the board after every move.",
    ),
    max_states: Optional[int] = typer.Option(
        None, "--max-states",
        min=1,
        help="Give up after this many distinct configurations.",
    ),
    verbose: int = typer.Option(
        0, "-v", "--verbose",
        count=True,
        help="Log search progress (-v info, -vv debug).",
    ),
) -> None:
    """Find the shortest move sequence for a puzzle."""
    chosen = _load_puzzle(puzzle)
    config = _config(max_states, verbose)
    configure_logging(config.log_level, rich=frontend is Frontend.rich)

    mod = importlib.import_module(_RUNNERS[frontend])
    solution = mod.run(chosen, config, boards=boards)
    if not solution.solved:
        raise typer.Exit(code=1)


@app.command("list")
def list_puzzles() -> None:
    """List the built-in puzzles."""
    for name in puzzle_names():
        p = get_puzzle(name)
        typer.echo(f"{name:<14} {p.board.width}×{p.board.height}  {p.title}")


@app.command()
def show(
    puzzle: str = typer.Option(
        "square-root", "-p", "--puzzle",
        help="Built-in puzzle to draw.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="How to draw the board.",
    ),
) -> None:
    """Draw a puzzle's starting board."""
    chosen = _load_puzzle(puzzle)
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.show_puzzle(chosen)


if __name__ == "__main__":
    app()
