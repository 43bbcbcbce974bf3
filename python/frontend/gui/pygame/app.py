"""Pygame GUI frontend.

Each frame the element tree from :func:`frontend.view.render` is measured,
laid out top-down and drawn.  The rects of enabled buttons are kept so a
left click can be mapped back to the button's event.
"""

from __future__ import annotations

import logging

import pygame

from backend.engine.gameplay import Event, GamePlay
from frontend.view import Button, ButtonStyle, Column, Element, Row, Text, render

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_MANTLE = (24, 24, 37)
COL_TEXT = (205, 214, 244)
COL_BLUE = (137, 180, 250)
COL_LAVENDER = (180, 190, 254)
COL_GREEN = (166, 227, 161)
COL_PINK = (245, 194, 231)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 500, 640
TILE_PX = 96
ACTION_W, ACTION_H = 160, 44

# style -> (background, hover, foreground)
_BUTTON_COLOURS: dict[ButtonStyle, tuple[tuple, tuple, tuple]] = {
    ButtonStyle.TILE: (COL_BLUE, COL_LAVENDER, COL_BASE),
    ButtonStyle.TILE_HOME: (COL_GREEN, (190, 240, 190), COL_BASE),
    ButtonStyle.BLANK: (COL_MANTLE, COL_MANTLE, COL_TEXT),
    ButtonStyle.ACTION: (COL_PINK, (245, 210, 227), COL_BASE),
}


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    def __init__(self, game: GamePlay) -> None:
        self._game = game

        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption(f"{game.size * game.size - 1} Puzzle")
        self._clock = pygame.time.Clock()

        self._fonts: dict[int, pygame.font.Font] = {}
        self._hits: list[tuple[pygame.Rect, Event]] = []
        self._mouse: tuple[int, int] = (0, 0)

    # ── helpers ─────────────────────────────────────────────────────────────

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            self._fonts[size] = pygame.font.SysFont("Helvetica", size, bold=True)
        return self._fonts[size]

    def _measure(self, el: Element) -> tuple[int, int]:
        if isinstance(el, Text):
            return self._font(el.size).size(el.content)
        if isinstance(el, Button):
            if el.style == ButtonStyle.ACTION:
                return ACTION_W, ACTION_H
            return TILE_PX, TILE_PX
        sizes = [self._measure(child) for child in el.children]
        gaps = el.spacing * max(0, len(sizes) - 1)
        if isinstance(el, Row):
            return sum(w for w, _ in sizes) + gaps, max((h for _, h in sizes), default=0)
        return max((w for w, _ in sizes), default=0), sum(h for _, h in sizes) + gaps

    # ── drawing ─────────────────────────────────────────────────────────────

    def _place(self, el: Element, x: int, y: int) -> None:
        """Draw *el* with its top-left corner at (x, y)."""
        if isinstance(el, Text):
            lbl = self._font(el.size).render(el.content, True, COL_TEXT)
            self._surf.blit(lbl, (x, y))
        elif isinstance(el, Button):
            self._draw_button(el, pygame.Rect((x, y), self._measure(el)))
        elif isinstance(el, Row):
            for child in el.children:
                self._place(child, x, y)
                x += self._measure(child)[0] + el.spacing
        elif isinstance(el, Column):
            width, _ = self._measure(el)
            for child in el.children:
                cw, ch = self._measure(child)
                self._place(child, x + (width - cw) // 2, y)
                y += ch + el.spacing

    def _draw_button(self, btn: Button, rect: pygame.Rect) -> None:
        bg, hover, fg = _BUTTON_COLOURS[btn.style]
        hot = btn.on_press is not None and rect.collidepoint(self._mouse)
        pygame.draw.rect(self._surf, hover if hot else bg, rect, border_radius=8)
        if btn.label:
            size = 17 if btn.style == ButtonStyle.ACTION else TILE_PX // 3
            lbl = self._font(size).render(btn.label, True, fg)
            self._surf.blit(
                lbl,
                (
                    rect.centerx - lbl.get_width() // 2,
                    rect.centery - lbl.get_height() // 2,
                ),
            )
        if btn.on_press is not None:
            self._hits.append((rect, btn.on_press))

    def _draw(self) -> None:
        self._surf.fill(COL_BASE)
        self._hits = []
        tree = render(self._game.board)
        w, h = self._measure(tree)
        self._place(tree, (WIN_W - w) // 2, max(0, (WIN_H - h) // 2))

    # ── event handling ──────────────────────────────────────────────────────

    def _click(self, pos: tuple[int, int]) -> None:
        for rect, event in self._hits:
            if rect.collidepoint(pos):
                self._game.update(event)
                return

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        logger.info("Pygame window opened")
        self._draw()
        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT:
                    running = False
                    break
                if ev.type == pygame.MOUSEMOTION:
                    self._mouse = ev.pos
                elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
                    self._click(ev.pos)
                elif ev.type == pygame.KEYDOWN and ev.key in (pygame.K_q, pygame.K_ESCAPE):
                    running = False
                    break

            self._draw()
            pygame.display.flip()
            self._clock.tick(30)

        pygame.quit()
        logger.info("Pygame window closed")


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(game: GamePlay | None = None) -> None:
    """Launch the Pygame GUI on a solved board."""
    app = PygameApp(game or GamePlay())
    app.run_loop()
