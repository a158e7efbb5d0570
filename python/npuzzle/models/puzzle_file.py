"""Puzzle file parsing and validation."""

from __future__ import annotations

from pathlib import Path

from npuzzle.models.board import Board


class PuzzleFormatError(ValueError):
    """Raised when puzzle text does not describe a valid square board."""


def parse_puzzle(text: str) -> Board:
    """Parse whitespace-separated rows of tile labels into a ``Board``.

    A word starting with ``#`` comments out the rest of its line, and
    lines left without any tile are ignored::

        # a 3x3 puzzle
        1 2 3
        8 0 4   # blank in the middle
        7 6 5
    """
    rows: list[list[int]] = []
    for line in text.splitlines():
        row: list[int] = []
        for word in line.split():
            if word.startswith("#"):
                break
            if not (word.isascii() and word.isdigit()):
                raise PuzzleFormatError("invalid value")
            row.append(int(word))
        if row:
            rows.append(row)

    if not rows:
        raise PuzzleFormatError("no input")

    width = len(rows[0])
    seen: set[int] = set()
    for row in rows:
        if len(row) != width:
            raise PuzzleFormatError("not a square")
        for value in row:
            if value in seen:
                raise PuzzleFormatError("duplicate value")
            seen.add(value)
    if len(rows) != width:
        raise PuzzleFormatError("not a square")

    if any(label not in seen for label in range(width * width)):
        raise PuzzleFormatError("invalid value")

    return Board.from_rows(rows)


def load_puzzle(path: Path | str) -> Board:
    """Read and parse the puzzle stored at *path*."""
    return parse_puzzle(Path(path).read_text())
