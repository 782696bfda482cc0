"""Erreurs levées par le moteur Marble Solitaire.

Toutes les erreurs signalent un mauvais usage de l'appelant, jamais une
faute interne: elles dérivent donc de `ValueError`.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from marble.engine.actions import Move


class MoveRejection(Enum):
    """Raisons de refus d'un coup."""

    SOURCE_NOT_OCCUPIED = "SOURCE_NOT_OCCUPIED"
    DESTINATION_NOT_EMPTY = "DESTINATION_NOT_EMPTY"
    BAD_DISPLACEMENT = "BAD_DISPLACEMENT"
    NO_MARBLE_TO_JUMP = "NO_MARBLE_TO_JUMP"


class MarbleError(ValueError):
    """Base de toutes les erreurs du moteur."""


class InvalidConfiguration(MarbleError):
    """Paramètres de construction invalides (taille de bras, case vide)."""


class InvalidPosition(MarbleError):
    """Coordonnées hors du plateau."""

    def __init__(self, row: int, col: int, board_size: int) -> None:
        super().__init__(
            f"Position invalide ({row}, {col}) pour un plateau {board_size}x{board_size}"
        )
        self.row = row
        self.col = col
        self.board_size = board_size


class InvalidMove(MarbleError):
    """Coup illégal; `reason` indique la précondition violée."""

    _MESSAGES = {
        MoveRejection.SOURCE_NOT_OCCUPIED: "la case de départ ne contient pas de bille",
        MoveRejection.DESTINATION_NOT_EMPTY: "la case d'arrivée n'est pas vide",
        MoveRejection.BAD_DISPLACEMENT: (
            "le saut doit être horizontal ou vertical, exactement deux cases"
        ),
        MoveRejection.NO_MARBLE_TO_JUMP: "aucune bille à sauter entre départ et arrivée",
    }

    def __init__(self, move: "Move", reason: MoveRejection) -> None:
        super().__init__(f"Coup illégal {move}: {self._MESSAGES[reason]}")
        self.move = move
        self.reason = reason


__all__ = [
    "MoveRejection",
    "MarbleError",
    "InvalidConfiguration",
    "InvalidPosition",
    "InvalidMove",
]
