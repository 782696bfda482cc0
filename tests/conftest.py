"""Fixtures partagées par les tests du moteur et de la GUI."""

from __future__ import annotations

from typing import Callable, List, Sequence

import pytest

from marble.engine.board import CellStatus, is_forbidden
from marble.engine.state import MarbleModel

_LAYOUT_SYMBOLS = {
    "O": CellStatus.OCCUPIED,
    "_": CellStatus.EMPTY,
    " ": CellStatus.FORBIDDEN,
}


def build_model_from_layout(layout: Sequence[str]) -> MarbleModel:
    """Construit un moteur dont la grille suit `layout` (un caractère par case).

    Les cases interdites du layout doivent correspondre à la géométrie de la
    taille de bras déduite; le score est recalculé à partir des billes.
    """

    board_size = len(layout)
    arm_size = (board_size - 1) // 2
    model = MarbleModel(arm_size)

    grid: List[List[CellStatus]] = []
    for row, line in enumerate(layout):
        assert len(line) == board_size, f"ligne {row} de longueur {len(line)}"
        cells = []
        for col, char in enumerate(line):
            status = _LAYOUT_SYMBOLS[char]
            assert (status == CellStatus.FORBIDDEN) == is_forbidden(row, col, arm_size)
            cells.append(status)
        grid.append(cells)

    model._board = grid
    model._score = sum(line.count("O") for line in layout)
    return model


@pytest.fixture
def model_from_layout() -> Callable[[Sequence[str]], MarbleModel]:
    """Fabrique de moteurs à partir d'un plateau dessiné."""

    return build_model_from_layout
