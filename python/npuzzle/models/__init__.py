from npuzzle.models.board import Board, BoardKey, Direction, Position
from npuzzle.models.puzzle_file import PuzzleFormatError, load_puzzle, parse_puzzle

__all__ = [
    "Board",
    "BoardKey",
    "Direction",
    "Position",
    "PuzzleFormatError",
    "load_puzzle",
    "parse_puzzle",
]
