"""Declarative view of a game session.

:func:`render` turns a :class:`Board` into a small immutable tree of
elements.  Every frontend walks the same tree; buttons carry the event the
runtime hands back to :meth:`GamePlay.update` when they are pressed.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum

from backend.engine.gameplay.events import Event, ShuffleRequested, TilePressed
from backend.models.board import Board
from backend.models.tile import Empty

SOLVED_MESSAGE = "Puzzle Solved! \U0001f389"


class ButtonStyle(StrEnum):
    TILE = "tile"
    TILE_HOME = "tile_home"  # numbered tile already on its solved cell
    BLANK = "blank"
    ACTION = "action"


@dataclass(frozen=True)
class Text:
    content: str
    size: int = 16


@dataclass(frozen=True)
class Button:
    label: str
    on_press: Event | None = None
    style: ButtonStyle = ButtonStyle.ACTION


@dataclass(frozen=True)
class Row:
    children: tuple[Element, ...]
    spacing: int = 0


@dataclass(frozen=True)
class Column:
    children: tuple[Element, ...]
    spacing: int = 0


Element = Text | Button | Row | Column


# -- rendering ----------------------------------------------------------------


def _tile_button(board: Board, r: int, c: int) -> Button:
    tile = board.tiles[r][c]
    if isinstance(tile, Empty):
        return Button("", None, ButtonStyle.BLANK)
    style = ButtonStyle.TILE_HOME if board.is_tile_correct(r, c) else ButtonStyle.TILE
    return Button(str(tile), TilePressed(r, c), style)


def status_text(board: Board) -> Text:
    if board.is_solved():
        return Text(SOLVED_MESSAGE, 24)
    return Text(f"Moves: {board.moves}", 20)


def render(board: Board) -> Column:
    """Return the element tree for *board*.  Does not modify the board."""
    grid = Column(
        tuple(
            Row(tuple(_tile_button(board, r, c) for c in range(board.size)), spacing=5)
            for r in range(board.size)
        ),
        spacing=5,
    )
    return Column(
        (
            Text(f"{board.size * board.size - 1} Puzzle", 32),
            status_text(board),
            grid,
            Button("Shuffle", ShuffleRequested()),
        ),
        spacing=20,
    )


def iter_buttons(element: Element) -> Iterator[Button]:
    """Yield every button in *element*, depth first."""
    if isinstance(element, Button):
        yield element
    elif isinstance(element, (Row, Column)):
        for child in element.children:
            yield from iter_buttons(child)
