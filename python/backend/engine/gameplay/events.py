"""Events the UI delivers to the game controller."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TilePressed:
    """The tile drawn at (row, col) was clicked."""

    row: int
    col: int


@dataclass(frozen=True)
class ShuffleRequested:
    pass


Event = TilePressed | ShuffleRequested
