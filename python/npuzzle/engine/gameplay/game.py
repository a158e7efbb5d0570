"""Replays blank moves against a goal board."""

from __future__ import annotations

from npuzzle.engine.gamegenerator import GameGenerator
from npuzzle.engine.goal import construct_goal
from npuzzle.models.board import Board, Direction, Position


class GamePlay:
    """Applies moves to one board and tracks whether it reached the goal."""

    def __init__(self, size: int) -> None:
        """Start a session on a freshly generated solvable board."""
        self.size = size
        self.goal = construct_goal(size)
        self.board = GameGenerator.generate(size)
        self.moves = 0

    @classmethod
    def from_board(cls, board: Board, goal: Board | None = None) -> "GamePlay":
        """Start a session from a copy of *board* (spiral goal by default)."""
        obj = object.__new__(cls)
        obj.size = board.size
        obj.goal = goal.copy() if goal is not None else construct_goal(board.size)
        obj.board = board.copy()
        obj.moves = 0
        return obj

    # -- movement (direction = where the *blank* moves) -----------------------

    def move(self, direction: Direction) -> bool:
        """Move the blank one cell in *direction*.

        Returns False, leaving the board unchanged, if that would leave
        the grid.
        """
        br, bc = self.board.blank_pos
        dr, dc = direction.offset
        target = (br + dr, bc + dc)

        if not self.board.in_bounds(*target):
            return False

        self.board.swap_blank(target)
        self.moves += 1
        return True

    def follow(self, path: list[Position]) -> bool:
        """Walk the blank along *path*, a solution route from the search.

        The first position must be the current blank. Returns False as
        soon as a step is not a legal move.
        """
        if not path or path[0] != self.board.blank_pos:
            return False
        for direction in path_to_directions(path):
            if not self.move(direction):
                return False
        return True

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.board.tiles == self.goal.tiles


def path_to_directions(path: list[Position]) -> list[Direction]:
    """Convert consecutive blank positions into blank moves."""
    by_offset = {d.offset: d for d in Direction}
    moves: list[Direction] = []
    for (r0, c0), (r1, c1) in zip(path, path[1:]):
        direction = by_offset.get((r1 - r0, c1 - c0))
        if direction is None:
            raise ValueError(
                f"Blank cannot jump from {(r0, c0)} to {(r1, c1)}."
            )
        moves.append(direction)
    return moves
