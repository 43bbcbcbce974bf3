from backend.models.board import GRID_SIZE, SHUFFLE_STEPS, Board, BoardInvariantError
from backend.models.tile import EMPTY, Empty, Numbered, Tile

__all__ = [
    "Board",
    "BoardInvariantError",
    "EMPTY",
    "Empty",
    "GRID_SIZE",
    "Numbered",
    "SHUFFLE_STEPS",
    "Tile",
]
