"""Builds the canonical spiral goal board."""

from __future__ import annotations

from functools import lru_cache

from npuzzle.models.board import Board, BoardKey


def construct_goal(size: int) -> Board:
    """Return the goal board for a *size*×*size* puzzle.

    Tiles are numbered clockwise ring by ring starting from 1, and the
    blank sits at the centre ``(size // 2, (size - 1) // 2)``::

        1 2 3
        8 0 4
        7 6 5

    The numbering only depends on *size*, so it is computed once; every
    call hands back a fresh board that the caller may mutate.
    """
    if size < 2:
        raise ValueError(f"Puzzle size must be at least 2, got {size}.")
    return Board.from_rows([list(row) for row in _spiral(size)])


@lru_cache(maxsize=None)
def _spiral(n: int) -> BoardKey:
    goal = [[0] * n for _ in range(n)]
    base = 0
    for i in range(n // 2):
        diff = n - 2 * i - 1
        for j in range(i, n - i - 1):
            common = base + j - i + 1
            goal[i][j] = common
            goal[j][n - i - 1] = common + diff
            goal[n - i - 1][n - j - 1] = common + 2 * diff
            goal[n - j - 1][i] = common + 3 * diff
        base += diff * 4
    # On even sizes the innermost ring writes n*n into the centre cell.
    goal[n // 2][(n - 1) // 2] = 0
    return tuple(tuple(row) for row in goal)
