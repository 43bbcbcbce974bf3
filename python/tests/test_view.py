"""Render tests for the element tree produced from a board."""

from __future__ import annotations

from backend.engine.gameplay import GamePlay, ShuffleRequested, TilePressed
from backend.models.board import Board
from frontend.view import (
    SOLVED_MESSAGE,
    Button,
    ButtonStyle,
    Column,
    Row,
    Text,
    iter_buttons,
    render,
)


# -- helpers ------------------------------------------------------------------


def _grid(tree: Column) -> Column:
    grid = tree.children[2]
    assert isinstance(grid, Column)
    return grid


def _cell(tree: Column, r: int, c: int) -> Button:
    row = _grid(tree).children[r]
    assert isinstance(row, Row)
    button = row.children[c]
    assert isinstance(button, Button)
    return button


# -- tests --------------------------------------------------------------------


def test_layout_of_solved_board() -> None:
    tree = render(Board())
    title, status, grid, shuffle = tree.children
    assert title == Text("15 Puzzle", 32)
    assert status == Text(SOLVED_MESSAGE, 24)
    assert isinstance(grid, Column) and len(grid.children) == 4
    assert all(isinstance(r, Row) and len(r.children) == 4 for r in grid.children)
    assert shuffle == Button("Shuffle", ShuffleRequested(), ButtonStyle.ACTION)


def test_status_shows_move_count() -> None:
    board = Board()
    board.move_tile(3, 2)
    assert render(board).children[1] == Text("Moves: 1", 20)


def test_tile_buttons_carry_their_coordinates() -> None:
    board = Board.from_flat(4, [5, 1, 2, 3, 0, 6, 7, 4, 9, 10, 11, 8, 13, 14, 15, 12])
    tree = render(board)
    for r in range(4):
        for c in range(4):
            button = _cell(tree, r, c)
            if (r, c) == (1, 0):
                assert button == Button("", None, ButtonStyle.BLANK)
            else:
                assert button.label == str(board.get_tile(r, c))
                assert button.on_press == TilePressed(r, c)


def test_home_tiles_are_marked() -> None:
    board = Board()
    board.move_tile(3, 2)
    tree = render(board)
    assert _cell(tree, 0, 0).style == ButtonStyle.TILE_HOME
    assert _cell(tree, 3, 3).style == ButtonStyle.TILE
    assert _cell(tree, 3, 2).style == ButtonStyle.BLANK


def test_render_does_not_touch_board() -> None:
    board = Board()
    board.move_tile(3, 2)
    before = (board.values(), board.moves)
    render(board)
    render(board)
    assert (board.values(), board.moves) == before


def test_stale_tree_keeps_render_time_coordinates() -> None:
    game = GamePlay()
    tree = render(game.board)
    pressed = _cell(tree, 3, 2).on_press
    game.update(TilePressed(2, 3))  # board changes before the click lands
    assert pressed == TilePressed(3, 2)
    assert _cell(tree, 3, 2).label == "15"


def test_iter_buttons() -> None:
    buttons = list(iter_buttons(render(Board(3))))
    assert len(buttons) == 10
    assert buttons[-1].label == "Shuffle"
    assert sum(b.on_press is None for b in buttons) == 1


def test_title_follows_board_size() -> None:
    assert render(Board(3)).children[0] == Text("8 Puzzle", 32)
