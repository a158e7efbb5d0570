"""Best-first search over board states."""

from __future__ import annotations

import heapq
import itertools
import logging

from npuzzle.engine.goal import construct_goal
from npuzzle.engine.search.heuristics import Heuristic
from npuzzle.engine.search.node import Node
from npuzzle.engine.solvability import is_insoluble
from npuzzle.models.board import Board, BoardKey, Direction

logger = logging.getLogger(__name__)

DEFAULT_HEURISTIC = Heuristic.MANHATTAN


class Quest:
    """Owns the frontier and the visited set of one search.

    Call :meth:`step` until it returns a node (the solution) or
    :meth:`continues` turns False (frontier exhausted)::

        quest = Quest(board)
        while quest.continues():
            node = quest.step()
            if node is not None:
                break
    """

    def __init__(
        self,
        board: Board,
        heuristic: Heuristic = DEFAULT_HEURISTIC,
        greedy: bool = False,
        goal: Board | None = None,
    ) -> None:
        if goal is None:
            goal = construct_goal(board.size)
        if goal.size != board.size:
            raise ValueError(
                f"Goal is {goal.size}×{goal.size} but the board is "
                f"{board.size}×{board.size}."
            )
        self._goal = goal.copy()
        self._start = board.copy()
        self.heuristic = heuristic
        self.greedy = greedy

        self._open: list[tuple[int, int, int, Node]] = []
        self._closed: set[BoardKey] = set()
        self._counter = itertools.count()
        self._max_space = 1
        self._push(Node(board.copy(), heuristic, greedy, self._goal))

        logger.debug(
            "quest ready: %d×%d, heuristic=%s, greedy=%s",
            board.size, board.size, heuristic.value, greedy,
        )

    # -- search ---------------------------------------------------------------

    def step(self) -> Node | None:
        """Expand the most promising node.

        Returns the popped node if it has reached the goal, otherwise
        ``None`` (including when the node had already been expanded, or
        the frontier is empty).
        """
        if not self._open:
            return None

        node = heapq.heappop(self._open)[-1]
        key = node.board.key()
        if key in self._closed:
            return None
        if node.dist == 0:
            return node

        last = self._goal.size - 1
        row, col = node.blank
        if col > 0:
            self._push_unvisited(node.shift(Direction.LEFT))
        if col < last:
            self._push_unvisited(node.shift(Direction.RIGHT))
        if row > 0:
            self._push_unvisited(node.shift(Direction.UP))
        if row < last:
            self._push_unvisited(node.shift(Direction.DOWN))

        self._closed.add(key)
        if len(self._open) > self._max_space:
            self._max_space = len(self._open)
        return None

    def continues(self) -> bool:
        return bool(self._open)

    def insoluble(self) -> bool:
        """Return True if the starting board cannot reach the goal."""
        return is_insoluble(self._start, self._goal)

    # -- queries --------------------------------------------------------------

    @property
    def goal(self) -> Board:
        return self._goal.copy()

    @property
    def space(self) -> int:
        """Largest frontier size seen so far."""
        return self._max_space

    @property
    def time(self) -> int:
        """Number of boards expanded so far."""
        return len(self._closed)

    # -- helpers --------------------------------------------------------------

    def _push(self, node: Node) -> None:
        # heapq pops the smallest entry, so the (f, g) priority is negated.
        heapq.heappush(
            self._open, (-node.f, -node.g, next(self._counter), node)
        )

    def _push_unvisited(self, node: Node) -> None:
        if node.board.key() not in self._closed:
            self._push(node)
