"""Search test suite: fixture boards solved end to end.

Boards are JSON fixtures under ``<project_root>/fixtures/``. Every test is
hard-killed by ``pytest-timeout`` (configured in ``pyproject.toml``). A
returned path is replayed through ``GamePlay`` to verify it really reaches
the goal.
"""

from __future__ import annotations

import json
import random
from collections import deque
from pathlib import Path

import pytest

from npuzzle.engine.gamegenerator import GameGenerator
from npuzzle.engine.gameplay import GamePlay
from npuzzle.engine.goal import construct_goal
from npuzzle.engine.search import (
    Heuristic,
    Node,
    Quest,
    SearchAbortedError,
    SearchExhaustedError,
    solve,
)
from npuzzle.models.board import Board, BoardKey, Direction

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"


# -- fixture loaders ----------------------------------------------------------


def _load(name: str) -> list[dict]:
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


def _ids(board_data: dict) -> str:
    return board_data["id"]


_ALL = _load("2x2.json") + _load("3x3.json") + _load("4x4.json")
_SOLVABLE = [b for b in _ALL if b["solvable"]]
_INSOLUBLE = [b for b in _ALL if not b["solvable"]]
_SHORT_3x3 = [b for b in _load("3x3.json") if b["solvable"] and b["moves"] <= 2]


# -- helpers ------------------------------------------------------------------


def _board_from_data(data: dict) -> Board:
    return Board.from_rows(data["tiles"])


def _assert_replays(board: Board, path: list[tuple[int, int]]) -> None:
    for (r0, c0), (r1, c1) in zip(path, path[1:]):
        assert abs(r0 - r1) + abs(c0 - c1) == 1, f"{(r0, c0)} -> {(r1, c1)}"
    game = GamePlay.from_board(board)
    assert game.follow(path)
    assert game.is_won


def _bfs_moves(board: Board) -> int:
    """Fewest blank moves to the spiral goal, by breadth-first search."""
    goal = construct_goal(board.size).key()
    n = board.size
    start = board.key()
    seen: set[BoardKey] = {start}
    queue: deque[tuple[BoardKey, int]] = deque([(start, 0)])
    while queue:
        state, depth = queue.popleft()
        if state == goal:
            return depth
        tiles = [list(row) for row in state]
        br, bc = next(
            (r, c) for r in range(n) for c in range(n) if tiles[r][c] == 0
        )
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nr, nc = br + dr, bc + dc
            if not (0 <= nr < n and 0 <= nc < n):
                continue
            nxt = [row[:] for row in tiles]
            nxt[br][bc], nxt[nr][nc] = nxt[nr][nc], 0
            key = tuple(tuple(row) for row in nxt)
            if key not in seen:
                seen.add(key)
                queue.append((key, depth + 1))
    raise AssertionError("BFS did not reach the goal")


# -- Quest --------------------------------------------------------------------


def test_quest_one_move_from_goal() -> None:
    board = Board.from_rows([[1, 2, 3], [0, 8, 4], [7, 6, 5]])
    quest = Quest(board, Heuristic.MANHATTAN, greedy=False)

    node = None
    while quest.continues() and node is None:
        node = quest.step()

    assert node is not None
    assert node.h == 0
    assert len(node.path) - 1 == 1
    assert node.path == [(1, 0), (1, 1)]
    assert quest.time == 1
    assert quest.space >= 1


def test_quest_step_returns_goal_without_expanding() -> None:
    quest = Quest(construct_goal(3))
    node = quest.step()
    assert node is not None
    assert node.moves == 0
    assert quest.time == 0


def test_quest_first_step_expands_start() -> None:
    board = Board.from_rows([[0, 1, 3], [8, 2, 4], [7, 6, 5]])
    quest = Quest(board)

    assert quest.step() is None
    assert quest.time == 1
    # Blank in a corner: two successors.
    assert quest.space == 2


def test_quest_goal_is_a_copy() -> None:
    quest = Quest(construct_goal(3))
    goal = quest.goal
    goal.tiles[0][0] = 99
    assert quest.goal.tiles[0][0] == 1


def test_quest_rejects_mismatched_goal() -> None:
    with pytest.raises(ValueError):
        Quest(construct_goal(3), goal=construct_goal(4))


def test_quest_insoluble_uses_own_goal() -> None:
    board = Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 0]])
    assert Quest(board).insoluble()
    assert not Quest(board, goal=board).insoluble()


def test_quest_custom_goal() -> None:
    goal = Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 0]])
    board = Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 0, 8]])
    result = solve(board, goal=goal)
    assert result.solved
    assert result.path == [(2, 1), (2, 2)]


def test_quest_exhausts_on_insoluble_board() -> None:
    # 2×2 keeps the reachable half of the state space tiny.
    quest = Quest(Board.from_rows([[2, 1], [0, 3]]))
    steps = 0
    while quest.continues():
        assert quest.step() is None
        steps += 1
    assert steps > 0
    # 4!/2 boards share the start's parity class.
    assert quest.time == 12


def test_quest_equal_priority_pops_deeper_node_first() -> None:
    # Greedy at the goal: f == 0 for both, only g differs.
    goal = construct_goal(3)
    quest = Quest(goal, Heuristic.MANHATTAN, greedy=True)
    root = Node(goal.copy(), Heuristic.MANHATTAN, True, quest.goal)
    deep = root.shift(Direction.UP).shift(Direction.DOWN)
    assert deep.f == root.f == 0
    quest._push(deep)

    node = quest.step()

    assert node is not None
    assert node.g == 2
    assert node.path == [(1, 1), (0, 1), (1, 1)]


# -- solve() ------------------------------------------------------------------


@pytest.mark.parametrize("heuristic", list(Heuristic), ids=str)
@pytest.mark.parametrize("board_data", _SOLVABLE, ids=_ids)
def test_solve_fixture(board_data: dict, heuristic: Heuristic) -> None:
    board = _board_from_data(board_data)
    result = solve(board, heuristic)

    assert result.solved
    assert result.dist == 0
    assert result.path[0] == board.find(0)
    _assert_replays(board, result.path)


@pytest.mark.parametrize("board_data", _SOLVABLE, ids=_ids)
def test_solve_greedy_fixture(board_data: dict) -> None:
    board = _board_from_data(board_data)
    result = solve(board, Heuristic.MANHATTAN, greedy=True)

    assert result.solved
    assert result.greedy
    _assert_replays(board, result.path)


@pytest.mark.parametrize("board_data", _INSOLUBLE, ids=_ids)
def test_solve_insoluble_skips_search(board_data: dict) -> None:
    result = solve(_board_from_data(board_data))
    assert not result.solved
    assert result.path == []
    assert result.moves == 0
    assert result.time == 0


@pytest.mark.parametrize("board_data", _SHORT_3x3, ids=_ids)
def test_manhattan_no_longer_than_bfs(board_data: dict) -> None:
    board = _board_from_data(board_data)
    result = solve(board, Heuristic.MANHATTAN)
    assert result.moves <= _bfs_moves(board)
    assert result.moves == board_data["moves"]


@pytest.mark.parametrize("seed", range(5))
def test_solve_scrambled_3x3(seed: int) -> None:
    board = GameGenerator.scrambled(3, 20, random.Random(seed))
    result = solve(board)
    assert result.solved
    _assert_replays(board, result.path)


@pytest.mark.parametrize("seed", range(3))
def test_solve_generated_3x3(seed: int) -> None:
    board = GameGenerator.generate(3, random.Random(seed))
    result = solve(board, Heuristic.MANHATTAN)
    assert result.solved
    _assert_replays(board, result.path)


def test_solve_statistics() -> None:
    board = Board.from_rows([[2, 8, 3], [1, 0, 5], [7, 4, 6]])
    result = solve(board)
    assert result.space >= 1
    assert result.time >= result.moves
    assert result.elapsed >= 0.0
    assert result.heuristic is Heuristic.MANHATTAN


def test_solve_does_not_touch_input() -> None:
    board = Board.from_rows([[2, 8, 3], [1, 0, 5], [7, 4, 6]])
    before = board.copy()
    solve(board)
    assert board == before


def test_solve_aborts_past_expansion_limit() -> None:
    board = Board.from_rows([[2, 8, 3], [1, 0, 5], [7, 4, 6]])
    with pytest.raises(SearchAbortedError):
        solve(board, Heuristic.HAMMING, max_expansions=0)


def test_solve_raises_when_frontier_exhausted(monkeypatch: pytest.MonkeyPatch) -> None:
    board = Board.from_rows([[2, 1], [0, 3]])
    monkeypatch.setattr(Quest, "insoluble", lambda self: False)
    with pytest.raises(SearchExhaustedError):
        solve(board)
