"""Tile values for the sliding puzzle board.

A tile is either :class:`Numbered` or :class:`Empty`.  Tiles are immutable;
a move replaces them wholesale instead of editing them.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Numbered:
    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError(f"Tile numbers start at 1, got {self.value}.")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class Empty:
    """The blank cell a neighbouring tile can slide into."""

    def __str__(self) -> str:
        return ""


EMPTY = Empty()

Tile = Numbered | Empty
