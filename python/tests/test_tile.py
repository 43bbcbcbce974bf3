"""Tile value tests."""

from __future__ import annotations

import dataclasses

import pytest

from backend.models.tile import EMPTY, Empty, Numbered


def test_numbered_label() -> None:
    assert str(Numbered(7)) == "7"


def test_empty_label_is_blank() -> None:
    assert str(EMPTY) == ""


@pytest.mark.parametrize("value", [0, -3])
def test_numbered_rejects_non_positive(value: int) -> None:
    with pytest.raises(ValueError):
        Numbered(value)


def test_tiles_compare_by_value() -> None:
    assert Numbered(3) == Numbered(3)
    assert Numbered(3) != Numbered(4)
    assert Empty() == EMPTY
    assert Numbered(1) != EMPTY


def test_tiles_are_immutable() -> None:
    tile = Numbered(5)
    with pytest.raises(dataclasses.FrozenInstanceError):
        tile.value = 6  # type: ignore[misc]
