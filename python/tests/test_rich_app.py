"""Terminal frontend tests: focus handling and key dispatch."""

from __future__ import annotations

import pytest

from backend.engine.gameplay import GamePlay, ShuffleRequested
from frontend.cli.input_handler import resolve
from frontend.cli.rich.app import RichApp, focus_rows, move_focus
from frontend.view import render


def _press(app: RichApp, *keys: str) -> None:
    for key in keys:
        assert app.handle_key(key)


def test_focus_rows_follow_grid() -> None:
    rows = focus_rows(render(GamePlay().board))
    assert [len(r) for r in rows] == [4, 4, 4, 4, 1]
    assert rows[0][0].label == "1"
    assert rows[4][0].on_press == ShuffleRequested()


@pytest.mark.parametrize(
    ("pos", "key", "expected"),
    [
        ((0, 0), "up", (0, 0)),
        ((0, 0), "left", (0, 0)),
        ((0, 3), "right", (0, 3)),
        ((2, 1), "down", (3, 1)),
        ((3, 3), "down", (4, 0)),  # onto the single Shuffle button
        ((4, 0), "up", (3, 0)),
    ],
)
def test_move_focus_clamps(pos: tuple[int, int], key: str, expected: tuple[int, int]) -> None:
    rows = focus_rows(render(GamePlay().board))
    assert move_focus(rows, pos, key) == expected


def test_enter_presses_focused_tile() -> None:
    app = RichApp(GamePlay())
    _press(app, "down", "down", "down", "right", "right", "enter")
    assert app.game.board.find_empty() == (3, 2)
    assert app.game.board.moves == 1


def test_enter_on_blank_does_nothing() -> None:
    app = RichApp(GamePlay())
    _press(app, "down", "down", "down", "right", "right", "right", "enter")
    assert app.game.board.is_solved()
    assert app.game.board.moves == 0


def test_enter_on_shuffle_button() -> None:
    app = RichApp(GamePlay())
    _press(app, "down", "down", "down", "right", "right", "enter")
    _press(app, "down", "enter")
    assert app.focus == (4, 0)
    assert app.game.board.moves == 0


def test_quit_stops_loop() -> None:
    assert RichApp(GamePlay()).handle_key("quit") is False


@pytest.mark.parametrize(
    ("ch", "action"),
    [("w", "up"), ("D", "right"), ("\r", "enter"), (" ", "enter"), ("q", "quit"), ("x", "")],
)
def test_resolve_keys(ch: str, action: str) -> None:
    assert resolve(ch) == action
