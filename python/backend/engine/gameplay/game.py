"""Core gameplay logic: routes UI events into the board."""

from __future__ import annotations

import logging
import random

from backend.engine.gameplay.events import Event, ShuffleRequested, TilePressed
from backend.models.board import GRID_SIZE, Board

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single game session.

    The session owns its :class:`Board` exclusively.  Runtimes feed events
    through :meth:`update` and read ``board`` back to render it.
    """

    def __init__(self, size: int = GRID_SIZE, rng: random.Random | None = None) -> None:
        self.board = Board(size)
        self._rng = rng

    @classmethod
    def from_board(cls, board: Board, rng: random.Random | None = None) -> "GamePlay":
        """Create a game session around an existing board."""
        obj = object.__new__(cls)
        obj.board = board
        obj._rng = rng
        return obj

    @property
    def size(self) -> int:
        return self.board.size

    # -- events ---------------------------------------------------------------

    def update(self, event: Event) -> None:
        """Apply *event* to the board.

        Illegal tile presses are ignored; the next render shows the
        unchanged board.
        """
        logger.debug("Handling %r", event)
        if isinstance(event, TilePressed):
            self.board.move_tile(event.row, event.col)
        elif isinstance(event, ShuffleRequested):
            self.board.shuffle(self._rng)
        else:
            raise TypeError(f"Unknown event: {event!r}")

        if self.board.is_solved() and self.board.moves:
            logger.info("Puzzle solved in %d moves", self.board.moves)

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.board.is_solved()
