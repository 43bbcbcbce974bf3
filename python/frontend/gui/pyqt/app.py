"""PyQt6 GUI frontend.

Builds Qt widgets straight from the element tree returned by
:func:`frontend.view.render` and rebuilds them after every event.
"""

from __future__ import annotations

import logging
import sys

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont, QKeyEvent
from PyQt6.QtWidgets import (
    QApplication,
    QBoxLayout,
    QHBoxLayout,
    QLabel,
    QLayout,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from backend.engine.gameplay import Event, GamePlay
from frontend.view import Button, ButtonStyle, Column, Element, Row, Text, render

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Catppuccin Mocha CSS colours
# ---------------------------------------------------------------------------
_BASE = "#1e1e2e"
_MANTLE = "#181825"
_SURFACE0 = "#313244"
_SURFACE1 = "#45475a"
_TEXT = "#cdd6f4"
_BLUE = "#89b4fa"
_BLUE_H = "#a4c4fc"
_GREEN = "#a6e3a1"
_GREEN_H = "#b8ecb4"
_PINK = "#f5c2e7"
_LAVENDER = "#b4befe"

_GLOBAL_CSS = f"""
    QMainWindow, QWidget#page {{ background: {_BASE}; }}
    QLabel {{ color: {_TEXT}; }}
"""

_TILE_PX = 84

# style -> (background, hover, foreground)
_BUTTON_COLOURS: dict[ButtonStyle, tuple[str, str, str]] = {
    ButtonStyle.TILE: (_BLUE, _BLUE_H, _BASE),
    ButtonStyle.TILE_HOME: (_GREEN, _GREEN_H, _BASE),
    ButtonStyle.BLANK: (_MANTLE, _MANTLE, _TEXT),
    ButtonStyle.ACTION: (_PINK, _LAVENDER, _BASE),
}


def _styled_btn(button: Button) -> QPushButton:
    btn = QPushButton(button.label)
    bg, hover, fg = _BUTTON_COLOURS[button.style]
    btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
    if button.style == ButtonStyle.ACTION:
        btn.setFont(QFont("Helvetica", 14, QFont.Weight.Bold))
        btn.setMinimumSize(160, 44)
    else:
        btn.setFont(QFont("Helvetica", 24, QFont.Weight.Bold))
        btn.setFixedSize(_TILE_PX, _TILE_PX)
    if button.on_press is None:
        btn.setEnabled(False)
    else:
        btn.setCursor(Qt.CursorShape.PointingHandCursor)
    btn.setStyleSheet(
        f"QPushButton {{ background:{bg}; color:{fg};"
        f" border:none; border-radius:8px; padding:6px 18px; }}"
        f" QPushButton:hover {{ background:{hover}; }}"
    )
    return btn


# ═══════════════════════════════════════════════════════════════════════════
# Main window
# ═══════════════════════════════════════════════════════════════════════════


class _MainWindow(QMainWindow):
    def __init__(self, game: GamePlay) -> None:
        super().__init__()
        self._game = game

        self.setWindowTitle(f"{game.size * game.size - 1} Puzzle")
        self.setStyleSheet(_GLOBAL_CSS)
        self.setMinimumSize(480, 620)

        self._refresh()

    # -- tree -> widgets ---

    def _build(self, element: Element, parent: QBoxLayout) -> None:
        if isinstance(element, Text):
            lbl = QLabel(element.content)
            lbl.setFont(QFont("Helvetica", element.size, QFont.Weight.Bold))
            lbl.setAlignment(Qt.AlignmentFlag.AlignCenter)
            parent.addWidget(lbl)
        elif isinstance(element, Button):
            btn = _styled_btn(element)
            if element.on_press is not None:
                btn.clicked.connect(lambda _, ev=element.on_press: self._dispatch(ev))
            parent.addWidget(btn, alignment=Qt.AlignmentFlag.AlignCenter)
        else:
            parent.addLayout(self._layout_for(element))

    def _layout_for(self, element: Row | Column) -> QLayout:
        box: QBoxLayout = QHBoxLayout() if isinstance(element, Row) else QVBoxLayout()
        box.setSpacing(element.spacing)
        box.setAlignment(Qt.AlignmentFlag.AlignCenter)
        for child in element.children:
            self._build(child, box)
        return box

    # -- update / view ---

    def _dispatch(self, event: Event) -> None:
        self._game.update(event)
        self._refresh()

    def _refresh(self) -> None:
        page = QWidget()
        page.setObjectName("page")
        root = QVBoxLayout(page)
        root.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.setContentsMargins(30, 30, 30, 30)
        root.addLayout(self._layout_for(render(self._game.board)))

        old = self.takeCentralWidget()
        self.setCentralWidget(page)
        if old is not None:
            old.deleteLater()

    # -- keyboard ---

    def keyPressEvent(self, event: QKeyEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        if event.key() in (Qt.Key.Key_Q, Qt.Key.Key_Escape):
            self.close()
        else:
            super().keyPressEvent(event)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(game: GamePlay | None = None) -> None:
    """Launch the PyQt6 GUI on a solved board."""
    qapp = QApplication.instance() or QApplication(sys.argv)
    window = _MainWindow(game or GamePlay())
    window.show()
    logger.info("PyQt window opened")
    qapp.exec()
    logger.info("PyQt window closed")
