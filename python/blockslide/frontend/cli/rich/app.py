"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
solver and replay backend as the vanilla CLI.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from blockslide.config import SearchConfig
from blockslide.engine.puzzles import Puzzle
from blockslide.engine.replay import replay
from blockslide.engine.solver import SearchStatus, Solution, Solver
from blockslide.models.board import Board
from blockslide.models.geometry import Cell

console = Console()

# Cycled through piece ids in sorted order.
_PIECE_STYLES = (
    "bold white on red",
    "bold black on yellow",
    "bold white on blue",
    "bold black on green",
    "bold white on magenta",
    "bold black on cyan",
    "bold white on dark_orange3",
    "bold white on purple4",
)


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, title: str = "") -> Table:
    """Return a Rich Table representing the puzzle grid."""
    styles = {
        piece.id: _PIECE_STYLES[i % len(_PIECE_STYLES)]
        for i, piece in enumerate(board.pieces)
    }
    occupancy = board.occupancy()

    table = Table(
        title=title or None,
        show_header=False,
        show_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 0),
    )
    for _ in range(board.width):
        table.add_column(width=3, justify="center")

    for y in range(board.height):
        cells: list[Text] = []
        for x in range(board.width):
            pid = occupancy.get(Cell(x, y))
            if pid is None:
                cells.append(Text(" · ", style="dim"))
            else:
                cells.append(Text(f" {pid[0]} ", style=styles[pid]))
        table.add_row(*cells)
    return table


def _render_stats(solution: Solution) -> Table:
    stats = solution.stats
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="dim")
    table.add_column(style="bold yellow", justify="right")
    table.add_row("Moves", str(solution.length))
    table.add_row("Configurations", f"{stats.configurations:,}")
    table.add_row("Skipped", f"{stats.skipped:,}")
    table.add_row("Expanded", f"{stats.expanded:,}")
    table.add_row("Peak frontier", f"{stats.max_frontier:,}")
    table.add_row("Time", f"{stats.elapsed:.2f}s")
    return table


# -- screens ------------------------------------------------------------------


def show_puzzle(puzzle: Puzzle) -> None:
    board = puzzle.board
    body = Group(
        Align.center(_render_board(board)),
        Text(""),
        Text(puzzle.description, style="dim", justify="center"),
    )
    panel = Panel(
        body,
        title=f"[bold cyan]{puzzle.title}  {board.width}×{board.height}[/bold cyan]",
        border_style="cyan",
        padding=(1, 2),
    )
    console.print(Align.center(panel))


def print_solution(puzzle: Puzzle, solution: Solution, *, boards: bool = True) -> None:
    if solution.status is SearchStatus.EXHAUSTED:
        console.print(
            Panel(_render_stats(solution), title="[bold red]Couldn't find solution[/bold red]",
                  border_style="red")
        )
        return
    if solution.status is SearchStatus.ABORTED:
        console.print(
            Panel(_render_stats(solution), title="[bold yellow]Search stopped[/bold yellow]",
                  border_style="yellow")
        )
        return

    if boards:
        states = replay(puzzle.board, solution.moves)
        steps = [_render_board(states[0], "start")]
        steps.extend(
            _render_board(board, f"{i}: {move}")
            for i, (move, board) in enumerate(zip(solution.moves, states[1:]), 1)
        )
        console.print(Columns(steps, padding=(1, 2)))
    else:
        moves = Table(box=rich.box.SIMPLE, show_header=True, header_style="bold cyan")
        moves.add_column("#", justify="right", style="dim")
        moves.add_column("Piece", justify="center", style="bold")
        moves.add_column("Direction")
        for i, move in enumerate(solution.moves, 1):
            moves.add_row(str(i), move.piece_id, move.direction.value)
        console.print(moves)

    console.print(
        Panel(_render_stats(solution),
              title=f"[bold green]Found solution ({solution.length} moves)[/bold green]",
              border_style="green")
    )


# -- public entry point -------------------------------------------------------


def run(
    puzzle: Puzzle,
    config: SearchConfig | None = None,
    *,
    boards: bool = True,
    color: bool | None = None,
) -> Solution:
    """Solve *puzzle* and present the result with Rich."""
    previous = console.no_color
    if color is False:
        console.no_color = True
    try:
        show_puzzle(puzzle)
        with console.status("[cyan]Searching…[/cyan]"):
            solution = Solver.solve(puzzle.board, puzzle.goal, config=config)
        print_solution(puzzle, solution, boards=boards)
    finally:
        console.no_color = previous
    return solution
