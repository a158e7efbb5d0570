"""Permutation-parity solvability test."""

from __future__ import annotations

import logging

from npuzzle.engine.goal import construct_goal
from npuzzle.models.board import Board

logger = logging.getLogger(__name__)


def is_insoluble(board: Board, goal: Board | None = None) -> bool:
    """Return True if *board* cannot be slid into *goal*.

    *goal* defaults to the spiral goal for the board's size. Both boards
    are reduced to their inversion count and blank row; the row term only
    counts on even sizes, where every vertical blank move flips the
    inversion parity.
    """
    if goal is None:
        goal = construct_goal(board.size)
    if goal.size != board.size:
        raise ValueError(
            f"Cannot compare a {board.size}×{board.size} board with a "
            f"{goal.size}×{goal.size} goal."
        )

    inv_board, blank_row_board = _inversions(board)
    inv_goal, blank_row_goal = _inversions(goal)
    check = (
        inv_board
        + inv_goal
        + ((blank_row_board + blank_row_goal) % 2) * ((board.size + 1) % 2)
    ) % 2

    logger.debug(
        "parity check: inversions %d/%d, blank rows %d/%d -> %d",
        inv_board, inv_goal, blank_row_board, blank_row_goal, check,
    )
    return check != 0


def is_solvable(board: Board, goal: Board | None = None) -> bool:
    """Return True if *board* can reach *goal* (spiral goal by default)."""
    return not is_insoluble(board, goal)


def _inversions(board: Board) -> tuple[int, int]:
    """Count inversions in row-major order and locate the blank row.

    ``weights[v]`` holds how many labels greater than ``v`` have been
    seen so far; the blank never adds weight.
    """
    weights = [0] * (board.size * board.size)
    inversions = 0
    blank_row = 0
    for r, row in enumerate(board.tiles):
        for value in row:
            inversions += weights[value]
            if value == 0:
                blank_row = r
            for k in range(1, value):
                weights[k] += 1
    return inversions, blank_row
