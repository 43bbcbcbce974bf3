"""Rich terminal frontend.

Draws the element tree from :func:`frontend.view.render` with the ``rich``
library.  A terminal has no pointer, so buttons are arranged into focus
rows: arrow keys move the focus and Enter presses the focused button.
"""

from __future__ import annotations

import logging

import rich.box
from rich.align import Align
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text as RichText

from backend.engine.gameplay import GamePlay
from frontend.cli.input_handler import get_key
from frontend.view import Button, ButtonStyle, Column, Element, Row, Text, render

logger = logging.getLogger(__name__)

console = Console()

_BUTTON_STYLES: dict[ButtonStyle, str] = {
    ButtonStyle.TILE: "bold white",
    ButtonStyle.TILE_HOME: "bold green",
    ButtonStyle.BLANK: "dim",
    ButtonStyle.ACTION: "bold magenta",
}


# -- focus --------------------------------------------------------------------


def focus_rows(element: Element) -> list[list[Button]]:
    """Group the buttons of *element* into rows for keyboard navigation.

    Every :class:`Row` becomes one focus row; a button outside any row
    gets a row of its own.
    """
    if isinstance(element, Button):
        return [[element]]
    if isinstance(element, Row):
        buttons: list[Button] = []
        for child in element.children:
            for row in focus_rows(child):
                buttons.extend(row)
        return [buttons] if buttons else []
    if isinstance(element, Column):
        rows: list[list[Button]] = []
        for child in element.children:
            rows.extend(focus_rows(child))
        return rows
    return []


def move_focus(
    rows: list[list[Button]], pos: tuple[int, int], key: str
) -> tuple[int, int]:
    """Return the focus position after pressing *key*, clamped to *rows*."""
    r, c = pos
    if key == "up":
        r -= 1
    elif key == "down":
        r += 1
    elif key == "left":
        c -= 1
    elif key == "right":
        c += 1
    r = max(0, min(r, len(rows) - 1))
    c = max(0, min(c, len(rows[r]) - 1))
    return r, c


# -- rendering ----------------------------------------------------------------


def _button_cell(btn: Button, focused: bool) -> RichText:
    label = btn.label or "·"
    style = _BUTTON_STYLES[btn.style]
    if focused:
        style += " reverse"
    if btn.style == ButtonStyle.ACTION:
        return RichText(f"[ {label} ]", style=style)
    return RichText(f" {label:>2} ", style=style)


def _grid_table(rows: tuple[Row, ...], focused: Button | None) -> Table:
    width = max(len(r.children) for r in rows)
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(width):
        table.add_column(justify="center")
    for row in rows:
        cells: list[RenderableType] = []
        for child in row.children:
            if isinstance(child, Button):
                cells.append(_button_cell(child, child is focused))
            else:
                cells.append(_to_renderable(child, focused))
        table.add_row(*cells)
    return table


def _to_renderable(element: Element, focused: Button | None) -> RenderableType:
    if isinstance(element, Text):
        style = "bold cyan" if element.size >= 28 else "bold yellow"
        return RichText(element.content, style=style)
    if isinstance(element, Button):
        return _button_cell(element, element is focused)
    if isinstance(element, Row):
        return _grid_table((element,), focused)
    if element.children and all(isinstance(c, Row) for c in element.children):
        return _grid_table(element.children, focused)  # type: ignore[arg-type]
    parts: list[RenderableType] = []
    for child in element.children:
        parts.append(Align.center(_to_renderable(child, focused)))
        parts.append(RichText(""))
    return Group(*parts[:-1])


# -- app ----------------------------------------------------------------------


class RichApp:
    """Keeps the focus position between keypresses."""

    def __init__(self, game: GamePlay) -> None:
        self.game = game
        self.focus: tuple[int, int] = (0, 0)

    def focused_button(self, tree: Column) -> Button:
        rows = focus_rows(tree)
        r, c = move_focus(rows, self.focus, "")
        return rows[r][c]

    def handle_key(self, key: str) -> bool:
        """Apply one keypress.  Returns False when the user quits."""
        if key == "quit":
            return False
        tree = render(self.game.board)
        if key == "enter":
            event = self.focused_button(tree).on_press
            if event is not None:
                self.game.update(event)
        else:
            self.focus = move_focus(focus_rows(tree), self.focus, key)
        return True

    def draw(self) -> None:
        console.clear()
        tree = render(self.game.board)
        panel = Panel(
            _to_renderable(tree, self.focused_button(tree)),
            border_style="bright_blue",
            padding=(1, 4),
        )
        controls = RichText()
        controls.append("  ↑↓←→", style="bold cyan")
        controls.append(" / ", style="dim")
        controls.append("WASD", style="bold cyan")
        controls.append("  focus   ", style="dim")
        controls.append("Enter", style="bold cyan")
        controls.append("  press   ", style="dim")
        controls.append("Q", style="bold cyan")
        controls.append("  quit", style="dim")

        console.print()
        console.print(Align.center(panel))
        console.print(Align.center(controls))

    def run_loop(self) -> None:
        while True:
            self.draw()
            if not self.handle_key(get_key()):
                break
        console.clear()
        console.print(Align.center(RichText("\nGoodbye!\n", style="bold cyan")))


# -- public entry point -------------------------------------------------------


def run(game: GamePlay | None = None) -> None:
    """Launch the Rich terminal frontend on a solved board."""
    logger.info("Rich terminal frontend started")
    RichApp(game or GamePlay()).run_loop()
