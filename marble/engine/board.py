"""Géométrie du plateau en croix.

Le plateau est une grille carrée de côté `2 * arm_size + 1` dont les quatre
coins carrés de côté `forbid_size = (board_size - arm_size) / 2` sont
interdits. Les fonctions de ce module sont pures: elles ne dépendent que de
la taille de bras.
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple

from marble.engine.errors import InvalidConfiguration
from marble.engine.rules import MIN_ARM_SIZE


class CellStatus(Enum):
    """État d'une case du plateau."""

    FORBIDDEN = "FORBIDDEN"
    OCCUPIED = "OCCUPIED"
    EMPTY = "EMPTY"


# Pas unitaires (drow, dcol): nord, sud, ouest, est
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, 0),
    (1, 0),
    (0, -1),
    (0, 1),
)


def validate_arm_size(arm_size: int) -> None:
    """Lève `InvalidConfiguration` si la taille de bras n'est pas un impair >= 3."""

    if isinstance(arm_size, bool) or not isinstance(arm_size, int):
        raise InvalidConfiguration(f"Taille de bras non entière: {arm_size!r}")
    if arm_size < MIN_ARM_SIZE or arm_size % 2 == 0:
        raise InvalidConfiguration(
            f"La taille de bras doit être un entier impair >= {MIN_ARM_SIZE} (reçu {arm_size})"
        )


def board_size_for(arm_size: int) -> int:
    return 2 * arm_size + 1


def forbid_size_for(arm_size: int) -> int:
    return (board_size_for(arm_size) - arm_size) // 2


def in_bounds(row: int, col: int, board_size: int) -> bool:
    return 0 <= row < board_size and 0 <= col < board_size


def is_forbidden(row: int, col: int, arm_size: int) -> bool:
    """Indique si la case appartient à l'un des quatre coins interdits.

    La case doit être dans les bornes du plateau.
    """

    forbid_size = forbid_size_for(arm_size)
    far_edge = forbid_size + arm_size
    row_outside = row < forbid_size or row >= far_edge
    col_outside = col < forbid_size or col >= far_edge
    return row_outside and col_outside


def initial_score(arm_size: int) -> int:
    """Nombre de billes au départ: toutes les cases jouables sauf une."""

    board_size = board_size_for(arm_size)
    forbid_size = forbid_size_for(arm_size)
    return board_size * board_size - 4 * forbid_size * forbid_size - 1


__all__ = [
    "CellStatus",
    "DIRECTIONS",
    "validate_arm_size",
    "board_size_for",
    "forbid_size_for",
    "in_bounds",
    "is_forbidden",
    "initial_score",
]
