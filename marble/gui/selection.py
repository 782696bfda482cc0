"""Routeur de clics: associe deux clics successifs en un saut.

Le premier clic choisit la bille à déplacer, le second la case d'arrivée.
Un second clic refusé par le moteur annule simplement la sélection: le
joueur recommence avec un nouveau premier clic.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from marble.app.game_service import GameService
from marble.engine.actions import Move
from marble.engine.errors import InvalidMove

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NoSelection:
    """Aucune bille sélectionnée."""


@dataclass(frozen=True)
class PendingDestination:
    """Bille sélectionnée, en attente de la case d'arrivée."""

    row: int
    col: int


Selection = Union[NoSelection, PendingDestination]


class ClickRouter:
    """Convertit les clics sur le plateau en appels `GameService.dispatch`."""

    def __init__(self, game_service: GameService) -> None:
        self.game_service = game_service
        self._selection: Selection = NoSelection()

    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def has_pending_source(self) -> bool:
        return isinstance(self._selection, PendingDestination)

    def cancel(self) -> None:
        """Abandonne la sélection en cours."""
        self._selection = NoSelection()

    def handle_cell_click(self, row: int, col: int) -> bool:
        """Traite un clic sur la case (row, col).

        Returns:
            True si un saut a été appliqué, False sinon
        """
        selection = self._selection
        if isinstance(selection, NoSelection):
            self._selection = PendingDestination(row, col)
            return False

        self._selection = NoSelection()
        move = Move(selection.row, selection.col, row, col)
        try:
            self.game_service.dispatch(move)
        except InvalidMove as exc:
            logger.debug("Sélection annulée: %s", exc)
            return False
        return True


__all__ = ["ClickRouter", "NoSelection", "PendingDestination", "Selection"]
