"""Board model for the sliding puzzle game."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from backend.models.tile import EMPTY, Empty, Numbered, Tile

logger = logging.getLogger(__name__)

GRID_SIZE = 4
SHUFFLE_STEPS = 100

# (row, col) offsets of the four neighbours: up, down, left, right.
_NEIGHBOR_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))


class BoardInvariantError(RuntimeError):
    """The board lost its single empty cell."""


def _solved_tiles(size: int) -> list[list[Tile]]:
    tiles: list[list[Tile]] = []
    num = 1
    for r in range(size):
        row: list[Tile] = []
        for c in range(size):
            if r == size - 1 and c == size - 1:
                row.append(EMPTY)
            else:
                row.append(Numbered(num))
                num += 1
        tiles.append(row)
    return tiles


@dataclass
class Board:
    """Represents the sliding puzzle board.

    Tiles are stored as a 2D list of :data:`Tile` values with exactly one
    :class:`Empty`.  ``moves`` counts successful swaps since the last
    shuffle or reset.
    """

    size: int = GRID_SIZE
    tiles: list[list[Tile]] = field(default_factory=list)
    moves: int = 0

    def __post_init__(self) -> None:
        if self.size < 2:
            raise ValueError(f"Board size must be at least 2, got {self.size}.")
        if not self.tiles:
            self.tiles = _solved_tiles(self.size)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major list, ``0`` being the blank.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        if sorted(flat) != list(range(size * size)):
            raise ValueError(
                f"Tiles must be a permutation of 0..{size * size - 1}."
            )
        tiles: list[list[Tile]] = []
        for r in range(size):
            row = flat[r * size : (r + 1) * size]
            tiles.append([Numbered(v) if v else EMPTY for v in row])
        return cls(size=size, tiles=tiles)

    def reset(self) -> None:
        """Restore the solved layout and zero the move counter."""
        self.tiles = _solved_tiles(self.size)
        self.moves = 0

    # -- queries --------------------------------------------------------------

    def get_tile(self, row: int, col: int) -> Tile:
        self._check_coords(row, col)
        return self.tiles[row][col]

    def values(self) -> list[int]:
        """Row-major tile numbers with ``0`` for the blank."""
        return [
            0 if isinstance(t, Empty) else t.value
            for row in self.tiles
            for t in row
        ]

    def find_empty(self) -> tuple[int, int] | None:
        """Return the position of the blank, scanning row-major."""
        for r, row in enumerate(self.tiles):
            for c, tile in enumerate(row):
                if isinstance(tile, Empty):
                    return r, c
        return None

    def is_adjacent_to_empty(self, row: int, col: int) -> bool:
        """True if (row, col) is directly above, below, left or right of the blank."""
        self._check_coords(row, col)
        empty = self.find_empty()
        if empty is None:
            return False
        er, ec = empty
        return (row == er and abs(col - ec) == 1) or (
            col == ec and abs(row - er) == 1
        )

    def empty_neighbors(self) -> list[tuple[int, int]]:
        """Positions that can currently slide into the blank."""
        empty = self.find_empty()
        if empty is None:
            return []
        er, ec = empty
        neighbors: list[tuple[int, int]] = []
        for dr, dc in _NEIGHBOR_OFFSETS:
            nr, nc = er + dr, ec + dc
            if 0 <= nr < self.size and 0 <= nc < self.size:
                neighbors.append((nr, nc))
        return neighbors

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        expected = 1
        for r in range(self.size):
            for c in range(self.size):
                tile = self.tiles[r][c]
                if r == self.size - 1 and c == self.size - 1:
                    return isinstance(tile, Empty)
                if tile != Numbered(expected):
                    return False
                expected += 1
        return True

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        tile = self.get_tile(row, col)
        if isinstance(tile, Empty):
            return row == self.size - 1 and col == self.size - 1
        expected_row = (tile.value - 1) // self.size
        expected_col = (tile.value - 1) % self.size
        return row == expected_row and col == expected_col

    # -- mutations ------------------------------------------------------------

    def move_tile(self, row: int, col: int) -> bool:
        """Slide the tile at (row, col) into the blank.

        Returns True if the tile was adjacent to the blank and the move
        was applied; otherwise the board is left untouched.
        """
        if not self.is_adjacent_to_empty(row, col):
            return False
        er, ec = self.find_empty()  # type: ignore[misc]
        self.tiles[er][ec], self.tiles[row][col] = (
            self.tiles[row][col],
            self.tiles[er][ec],
        )
        self.moves += 1
        return True

    def shuffle(
        self,
        rng: random.Random | None = None,
        steps: int = SHUFFLE_STEPS,
    ) -> None:
        """Reset to solved, then make *steps* random legal moves.

        The walk only ever uses legal moves, so the result is always
        solvable.  The swaps made here are not counted as player moves.
        """
        if rng is None:
            rng = random.Random()
        self.reset()
        for _ in range(steps):
            neighbors = self.empty_neighbors()
            if not neighbors:
                raise BoardInvariantError("Board has no empty cell to shuffle.")
            self.move_tile(*rng.choice(neighbors))
        self.moves = 0
        logger.debug("Shuffled %dx%d board with %d steps", self.size, self.size, steps)

    def copy(self) -> Board:
        return Board(
            size=self.size,
            tiles=[row[:] for row in self.tiles],
            moves=self.moves,
        )

    # -- helpers --------------------------------------------------------------

    def _check_coords(self, row: int, col: int) -> None:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(
                f"({row}, {col}) is outside the {self.size}×{self.size} board."
            )
