"""Moteur de règles Marble Solitaire (plateau, coups, score, fin de partie)."""

from . import rules  # re-export for convenience
from .actions import Move
from .board import CellStatus
from .errors import (
    InvalidConfiguration,
    InvalidMove,
    InvalidPosition,
    MarbleError,
    MoveRejection,
)
from .state import MarbleModel

__all__ = [
    "rules",
    "Move",
    "CellStatus",
    "MarbleModel",
    "MarbleError",
    "InvalidConfiguration",
    "InvalidPosition",
    "InvalidMove",
    "MoveRejection",
]
