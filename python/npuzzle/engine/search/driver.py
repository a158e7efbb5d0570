"""Runs a ``Quest`` to completion and collects its statistics."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from time import perf_counter

from npuzzle.engine.search.heuristics import Heuristic
from npuzzle.engine.search.quest import DEFAULT_HEURISTIC, Quest
from npuzzle.models.board import Board, Position

logger = logging.getLogger(__name__)


class SearchExhaustedError(RuntimeError):
    """The frontier emptied before a goal state was popped.

    Solvable boards always reach the goal, so this points at a
    solvability check that disagrees with the goal in use.
    """


class SearchAbortedError(RuntimeError):
    """The search expanded more boards than the caller allowed."""


@dataclass
class SearchResult:
    """Outcome of :func:`solve`.

    ``space`` is the largest frontier size and ``time`` the number of
    boards expanded. An insoluble board is reported with
    ``solved=False`` and an empty path, without searching.
    """

    solved: bool
    heuristic: Heuristic
    greedy: bool
    path: list[Position] = field(default_factory=list)
    dist: int = 0
    space: int = 0
    time: int = 0
    elapsed: float = 0.0

    @property
    def moves(self) -> int:
        return max(len(self.path) - 1, 0)


def solve(
    board: Board,
    heuristic: Heuristic = DEFAULT_HEURISTIC,
    greedy: bool = False,
    goal: Board | None = None,
    max_expansions: int | None = None,
) -> SearchResult:
    """Search for a blank path that turns *board* into *goal*.

    *goal* defaults to the spiral goal. With *max_expansions* set, the
    search raises ``SearchAbortedError`` once that many boards have been
    expanded without reaching the goal.
    """
    quest = Quest(board, heuristic=heuristic, greedy=greedy, goal=goal)
    if quest.insoluble():
        logger.debug("board is insoluble, skipping search")
        return SearchResult(solved=False, heuristic=heuristic, greedy=greedy)

    t0 = perf_counter()
    while quest.continues():
        node = quest.step()
        if node is not None:
            result = SearchResult(
                solved=True,
                heuristic=heuristic,
                greedy=greedy,
                path=node.steps(),
                dist=node.dist,
                space=quest.space,
                time=quest.time,
                elapsed=perf_counter() - t0,
            )
            logger.info(
                "solved in %d moves (space=%d, time=%d, %.3fs)",
                result.moves, result.space, result.time, result.elapsed,
            )
            return result
        if max_expansions is not None and quest.time > max_expansions:
            logger.warning(
                "search aborted after %d expansions (frontier %d)",
                quest.time, quest.space,
            )
            raise SearchAbortedError(
                f"Search aborted: expanded {quest.time} boards, "
                f"limit is {max_expansions}."
            )

    raise SearchExhaustedError(
        f"Frontier exhausted after {quest.time} expansions with no solution "
        f"(heuristic={heuristic.value}, greedy={greedy})."
    )
