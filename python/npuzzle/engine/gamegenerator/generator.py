"""Generates solvable N-puzzle boards."""

from __future__ import annotations

import logging
import random

from npuzzle.engine.goal import construct_goal
from npuzzle.engine.solvability import is_solvable
from npuzzle.models.board import Board, Position

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 1000


class GameGenerator:
    """Creates random boards that can reach the spiral goal."""

    @staticmethod
    def generate(
        size: int,
        rng: random.Random | None = None,
        max_attempts: int = MAX_ATTEMPTS,
    ) -> Board:
        """Return a uniformly shuffled board that passes the parity check.

        Half of all permutations are insoluble, so a few attempts are
        usually enough; ``RuntimeError`` is raised after *max_attempts*.
        """
        rng = rng or random.Random()
        goal = construct_goal(size)
        labels = list(range(size * size))

        for attempt in range(1, max_attempts + 1):
            rng.shuffle(labels)
            board = Board.from_flat(size, labels)
            if is_solvable(board, goal):
                if attempt > 10:
                    logger.warning(
                        "needed %d shuffles for a solvable %d×%d board",
                        attempt, size, size,
                    )
                return board

        raise RuntimeError(
            f"No solvable {size}×{size} board after {max_attempts} shuffles."
        )

    @staticmethod
    def scrambled(
        size: int,
        moves: int,
        rng: random.Random | None = None,
    ) -> Board:
        """Return the goal after *moves* random blank moves.

        The walk never immediately undoes its previous move, so the
        result stays solvable and is at most *moves* away from the goal.
        """
        rng = rng or random.Random()
        board = construct_goal(size)
        prev_pos: Position | None = None

        for _ in range(moves):
            neighbors = GameGenerator._get_neighbors(board)
            if prev_pos in neighbors and len(neighbors) > 1:
                neighbors.remove(prev_pos)
            target = rng.choice(neighbors)
            prev_pos = board.blank_pos
            board.swap_blank(target)

        return board

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _get_neighbors(board: Board) -> list[Position]:
        br, bc = board.blank_pos
        neighbors: list[Position] = []
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nr, nc = br + dr, bc + dc
            if board.in_bounds(nr, nc):
                neighbors.append((nr, nc))
        return neighbors
