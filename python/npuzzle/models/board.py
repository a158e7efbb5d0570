"""Board model for the N-puzzle search engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

Position = tuple[int, int]
BoardKey = tuple[tuple[int, ...], ...]


class Direction(StrEnum):
    """Direction the *blank* moves in.

    The tile that slides travels the opposite way: ``Direction.UP`` swaps
    the blank with the tile above it, which therefore slides down.
    """

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def offset(self) -> Position:
        return _OFFSETS[self]


_OFFSETS: dict[Direction, Position] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


@dataclass
class Board:
    """Represents an N×N sliding puzzle board.

    Tiles are stored as a 2D list of ints holding every label
    ``0 .. size*size - 1`` exactly once. 0 represents the blank.
    """

    size: int
    tiles: list[list[int]]
    blank_pos: Position

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> Board:
        """Create a board from a list of rows, copying them.

        Example::

            Board.from_rows([[1, 2, 3], [8, 0, 4], [7, 6, 5]])
        """
        tiles = [list(row) for row in rows]
        size = len(tiles)
        if any(len(row) != size for row in tiles):
            raise ValueError(f"Board rows must all have {size} tiles.")
        board = cls(size=size, tiles=tiles, blank_pos=(0, 0))
        board.blank_pos = board.find(0)
        return board

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 8, 0, 4, 7, 6, 5])
        """
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        return cls.from_rows(
            [flat[r * size : (r + 1) * size] for r in range(size)]
        )

    # -- queries --------------------------------------------------------------

    def find(self, value: int) -> Position:
        """Return the position of *value* using a row-major scan."""
        for r, row in enumerate(self.tiles):
            for c, v in enumerate(row):
                if v == value:
                    return (r, c)
        if value == 0:
            raise ValueError("Board has no blank tile.")
        raise ValueError(f"Tile {value} is not on the board.")

    def positions(self) -> list[Position]:
        """Return the position of every label, indexed by label."""
        where: list[Position] = [(0, 0)] * (self.size * self.size)
        for r, row in enumerate(self.tiles):
            for c, v in enumerate(row):
                where[v] = (r, c)
        return where

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def key(self) -> BoardKey:
        """Hashable snapshot of the tiles, used for visited-set lookups."""
        return tuple(tuple(row) for row in self.tiles)

    def copy(self) -> Board:
        return Board(
            size=self.size,
            tiles=[row[:] for row in self.tiles],
            blank_pos=self.blank_pos,
        )

    # -- mutation -------------------------------------------------------------

    def swap_blank(self, target: Position) -> None:
        """Swap the blank with the tile at *target*."""
        br, bc = self.blank_pos
        tr, tc = target
        self.tiles[br][bc], self.tiles[tr][tc] = (
            self.tiles[tr][tc],
            self.tiles[br][bc],
        )
        self.blank_pos = (tr, tc)
