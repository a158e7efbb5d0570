"""Search state: a board snapshot with its path, cost and estimate."""

from __future__ import annotations

from npuzzle.engine.search.heuristics import EVALUATORS, Heuristic
from npuzzle.models.board import Board, Direction, Position


class Node:
    """One state of the search.

    ``g`` counts the moves taken, ``h`` is the heuristic estimate and
    ``f`` the priority: ``-(g + h)``, or ``-h`` in greedy mode. A higher
    ``f`` is expanded first and ties go to the deeper node.

    Nodes are ordered by ``(f, g)`` alone. Two nodes can therefore be
    neither smaller nor greater than each other while holding different
    boards; equality is left as identity and deduplication is done on
    board contents by the ``Quest``.
    """

    __slots__ = ("board", "path", "g", "h", "f", "heuristic", "greedy", "goal")

    def __init__(
        self,
        board: Board,
        heuristic: Heuristic,
        greedy: bool,
        goal: Board,
    ) -> None:
        self.board = board
        board.blank_pos = board.find(0)
        self.path: list[Position] = [board.blank_pos]
        self.g = 0
        self.h = 0
        self.f = 0
        self.heuristic = heuristic
        self.greedy = greedy
        self.goal = goal
        self.evaluate()

    # -- search operations ----------------------------------------------------

    def shift(self, direction: Direction) -> Node:
        """Return the successor reached by moving the blank in *direction*.

        The caller checks the grid bounds; moving off the board raises
        ``IndexError``. This node is left untouched.
        """
        br, bc = self.path[-1]
        dr, dc = direction.offset
        target = (br + dr, bc + dc)
        if not self.board.in_bounds(*target):
            raise IndexError(
                f"Cannot move the blank {direction.value} from {(br, bc)}."
            )

        out = self._clone()
        out.board.swap_blank(target)
        out.path.append(target)
        out.g += 1
        out.evaluate()
        return out

    def evaluate(self) -> None:
        """Recompute ``h`` with the node's heuristic, then ``f``."""
        self.h = EVALUATORS[self.heuristic](self.board, self.goal)
        self.f = -self.h if self.greedy else -(self.g + self.h)

    # -- queries --------------------------------------------------------------

    @property
    def dist(self) -> int:
        return self.h

    @property
    def blank(self) -> Position:
        return self.path[-1]

    @property
    def moves(self) -> int:
        return len(self.path) - 1

    @property
    def priority(self) -> tuple[int, int]:
        return (self.f, self.g)

    def steps(self) -> list[Position]:
        return self.path[:]

    # -- ordering -------------------------------------------------------------

    def __lt__(self, other: Node) -> bool:
        return self.priority < other.priority

    def __le__(self, other: Node) -> bool:
        return self.priority <= other.priority

    def __gt__(self, other: Node) -> bool:
        return self.priority > other.priority

    def __ge__(self, other: Node) -> bool:
        return self.priority >= other.priority

    def __repr__(self) -> str:
        return (
            f"Node(f={self.f}, g={self.g}, h={self.h}, "
            f"blank={self.blank}, tiles={self.board.tiles})"
        )

    # -- helpers --------------------------------------------------------------

    def _clone(self) -> Node:
        out = object.__new__(Node)
        out.board = self.board.copy()
        out.path = self.path[:]
        out.g = self.g
        out.h = self.h
        out.f = self.f
        out.heuristic = self.heuristic
        out.greedy = self.greedy
        out.goal = self.goal
        return out
