from npuzzle.engine.search.driver import (
    SearchAbortedError,
    SearchExhaustedError,
    SearchResult,
    solve,
)
from npuzzle.engine.search.heuristics import Heuristic
from npuzzle.engine.search.node import Node
from npuzzle.engine.search.quest import DEFAULT_HEURISTIC, Quest

__all__ = [
    "DEFAULT_HEURISTIC",
    "Heuristic",
    "Node",
    "Quest",
    "SearchAbortedError",
    "SearchExhaustedError",
    "SearchResult",
    "solve",
]
