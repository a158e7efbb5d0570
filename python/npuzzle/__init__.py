"""Best-first search solver for the N×N sliding-tile puzzle."""

from npuzzle.models import Board, Direction, PuzzleFormatError, load_puzzle, parse_puzzle
from npuzzle.engine.goal import construct_goal
from npuzzle.engine.solvability import is_insoluble, is_solvable
from npuzzle.engine.search import (
    Heuristic,
    Node,
    Quest,
    SearchAbortedError,
    SearchExhaustedError,
    SearchResult,
    solve,
)
from npuzzle.engine.gamegenerator import GameGenerator
from npuzzle.engine.gameplay import GamePlay, path_to_directions

__all__ = [
    "Board",
    "Direction",
    "GameGenerator",
    "GamePlay",
    "Heuristic",
    "Node",
    "PuzzleFormatError",
    "Quest",
    "SearchAbortedError",
    "SearchExhaustedError",
    "SearchResult",
    "construct_goal",
    "is_insoluble",
    "is_solvable",
    "load_puzzle",
    "parse_puzzle",
    "path_to_directions",
    "solve",
]
