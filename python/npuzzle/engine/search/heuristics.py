"""Distance-to-goal estimates for the best-first search.

Every evaluator takes the current board and the goal and returns an
integer ``h``. Hamming, Manhattan and out-of-line count the blank like
any other tile. Nilsson and custom trade admissibility for a stronger
pull towards the goal.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Callable

from npuzzle.models.board import Board


class Heuristic(StrEnum):
    HAMMING = "hamming"
    MANHATTAN = "manhattan"
    OUT_OF_LINE = "ool"
    NILSSON = "nilsson"
    CUSTOM = "custom"


def hamming(board: Board, goal: Board) -> int:
    """Number of cells whose value differs from the goal."""
    return sum(
        1
        for row, goal_row in zip(board.tiles, goal.tiles)
        for v, g in zip(row, goal_row)
        if v != g
    )


def manhattan(board: Board, goal: Board) -> int:
    """Sum of row and column distances of every label to its goal cell."""
    here = board.positions()
    there = goal.positions()
    return sum(
        abs(r - gr) + abs(c - gc) for (r, c), (gr, gc) in zip(here, there)
    )


def out_of_line(board: Board, goal: Board) -> int:
    """Per label: 0 in place, 1 with one matching axis, 2 with none."""
    here = board.positions()
    there = goal.positions()
    return sum(
        (r != gr) + (c != gc) for (r, c), (gr, gc) in zip(here, there)
    )


def nilsson(board: Board, goal: Board) -> int:
    """Manhattan distance plus Nilsson's sequence score.

    Walking each ring clockwise, a tile adds 6 when the next cell does
    not hold its successor. The blank and the largest label have no
    successor and are skipped. The left edge is only scored on the
    innermost ring of even boards; elsewhere it wraps into the next
    ring's numbering. A centre that does not hold the blank adds 3.
    """
    h = manhattan(board, goal)
    t = board.tiles
    n = board.size
    last = n * n - 1

    def out_of_sequence(value: int, successor: int) -> bool:
        return value != 0 and value != last and value + 1 != successor

    for i in range(n // 2):
        for j in range(i, n - i - 1):
            if out_of_sequence(t[i][j], t[i][j + 1]):
                h += 6
            if out_of_sequence(t[j][n - i - 1], t[j + 1][n - i - 1]):
                h += 6
            if out_of_sequence(t[n - i - 1][n - j - 1], t[n - i - 1][n - j - 2]):
                h += 6
            if i == (n - 1) // 2 and out_of_sequence(
                t[n - j - 1][i], t[n - j - 2][i]
            ):
                h += 6

    if t[n // 2][(n - 1) // 2] != 0:
        h += 3
    return h


def custom(board: Board, goal: Board) -> int:
    """Manhattan distance scaled by 10."""
    return 10 * manhattan(board, goal)


EVALUATORS: dict[Heuristic, Callable[[Board, Board], int]] = {
    Heuristic.HAMMING: hamming,
    Heuristic.MANHATTAN: manhattan,
    Heuristic.OUT_OF_LINE: out_of_line,
    Heuristic.NILSSON: nilsson,
    Heuristic.CUSTOM: custom,
}
