"""Terminal report of a board and a search result, rendered with Rich."""

from __future__ import annotations

import rich.box
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from npuzzle.engine.gameplay import path_to_directions
from npuzzle.engine.goal import construct_goal
from npuzzle.engine.search import SearchResult
from npuzzle.models.board import Board, Direction, Position

# The tile that slides moves against the blank.
_SLIDES: dict[Direction, str] = {
    Direction.UP: "Slide down!",
    Direction.DOWN: "Slide up!",
    Direction.LEFT: "Slide right!",
    Direction.RIGHT: "Slide left!",
}


# -- board rendering ----------------------------------------------------------


def render_board(board: Board, goal: Board | None = None) -> Table:
    """Return a Rich Table of the grid, tiles already in place in green."""
    if goal is None:
        goal = construct_goal(board.size)
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for row, goal_row in zip(board.tiles, goal.tiles):
        cells: list[str] = []
        for val, expected in zip(row, goal_row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif val == expected:
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


# -- result rendering ---------------------------------------------------------


def render_result(result: SearchResult) -> Table:
    """Return the search statistics as a two-column table."""
    table = Table(show_header=False, box=rich.box.SIMPLE, padding=(0, 1))
    table.add_column(style="dim")
    table.add_column(style="bold yellow", justify="right")

    mode = "greedy" if result.greedy else "A*"
    table.add_row("search", f"{mode} / {result.heuristic.value}")
    if not result.solved:
        table.add_row("status", "[red]insoluble[/red]")
        return table
    table.add_row("space", str(result.space))
    table.add_row("time", str(result.time))
    table.add_row("steps", str(result.moves))
    table.add_row("dist", str(result.dist))
    table.add_row("elapsed", f"{result.elapsed:.3f}s")
    return table


def slide_instructions(path: list[Position]) -> list[str]:
    """Describe each move of *path* from the sliding tile's point of view."""
    return [_SLIDES[d] for d in path_to_directions(path)]


def print_solution(
    result: SearchResult,
    board: Board | None = None,
    console: Console | None = None,
) -> None:
    """Print the statistics, the starting board and the slide list."""
    console = console or Console()
    parts: list = [render_result(result)]
    if board is not None:
        parts.append(render_board(board))
    if result.solved and result.moves:
        steps = Text()
        for i, line in enumerate(slide_instructions(result.path), 1):
            steps.append(f"{i:>4}. ", style="dim")
            steps.append(line + "\n")
        parts.append(steps)
    elif not result.solved:
        parts.append(Text("Unstackable cups!", style="bold red"))

    console.print(
        Panel(
            Group(*parts),
            title="[bold cyan]N-Puzzle[/bold cyan]",
            border_style="cyan",
            padding=(1, 2),
        )
    )
