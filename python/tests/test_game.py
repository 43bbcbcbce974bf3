"""Controller tests: events in, board changes out."""

from __future__ import annotations

import random

import pytest

from backend.engine.gameplay import GamePlay, ShuffleRequested, TilePressed
from backend.models.board import Board


def test_new_session_starts_solved() -> None:
    game = GamePlay()
    assert game.size == 4
    assert game.is_won
    assert game.board.moves == 0


def test_tile_press_moves_tile() -> None:
    game = GamePlay()
    game.update(TilePressed(3, 2))
    assert game.board.find_empty() == (3, 2)
    assert game.board.moves == 1
    assert not game.is_won


def test_illegal_tile_press_is_ignored() -> None:
    game = GamePlay()
    game.update(TilePressed(0, 0))
    assert game.board.is_solved()
    assert game.board.moves == 0


def test_shuffle_uses_injected_rng() -> None:
    game = GamePlay(rng=random.Random(5))
    game.update(TilePressed(3, 2))
    game.update(ShuffleRequested())

    expected = Board()
    expected.shuffle(random.Random(5))
    assert game.board.values() == expected.values()
    assert game.board.moves == 0


def test_solved_board_still_accepts_events() -> None:
    game = GamePlay()
    game.update(TilePressed(3, 2))
    game.update(TilePressed(3, 3))
    assert game.is_won
    game.update(TilePressed(2, 3))
    assert not game.is_won
    assert game.board.moves == 3


def test_from_board() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
    game = GamePlay.from_board(board)
    assert game.size == 3
    game.update(TilePressed(2, 2))
    assert game.is_won
    assert game.board is board


def test_unknown_event_rejected() -> None:
    game = GamePlay()
    with pytest.raises(TypeError):
        game.update("shuffle")  # type: ignore[arg-type]
