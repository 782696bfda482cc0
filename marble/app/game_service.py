"""Service d'orchestration pour une partie de Marble Solitaire."""

from __future__ import annotations

import logging
from typing import List, Optional

from marble.app.event_bus import EventBus
from marble.app.events import GameEndedEvent, GameStartedEvent, MoveAppliedEvent
from marble.engine.actions import Move
from marble.engine.errors import InvalidMove
from marble.engine.rules import STANDARD_ARM_SIZE
from marble.engine.state import MarbleModel

logger = logging.getLogger(__name__)


class GameService:
    """Wrappe `MarbleModel` et publie les évènements nécessaires à la GUI."""

    def __init__(self, *, event_bus: EventBus | None = None) -> None:
        self._event_bus = event_bus if event_bus is not None else EventBus()
        self._model: MarbleModel | None = None

    @property
    def event_bus(self) -> EventBus:
        """Retourne le bus d'évènements utilisé par le service."""

        return self._event_bus

    @property
    def model(self) -> MarbleModel:
        """Moteur de la partie courante (erreur si aucune partie lancée)."""

        if self._model is None:
            raise RuntimeError("Aucune partie initialisée. Utiliser start_new_game().")
        return self._model

    @property
    def has_game(self) -> bool:
        return self._model is not None

    def start_new_game(
        self,
        arm_size: int = STANDARD_ARM_SIZE,
        empty_row: Optional[int] = None,
        empty_col: Optional[int] = None,
    ) -> MarbleModel:
        """Initialise une nouvelle partie et publie l'évènement associé."""

        model = MarbleModel(arm_size, empty_row, empty_col)
        self._model = model
        logger.info(
            "Nouvelle partie: bras %d, plateau %dx%d, %d billes",
            model.arm_size,
            model.board_size,
            model.board_size,
            model.score,
        )
        self._event_bus.publish(GameStartedEvent(model=model))
        return model

    def legal_moves(self) -> List[Move]:
        """Retourne les sauts légaux pour l'état courant."""

        return self.model.legal_moves()

    def dispatch(self, move: Move) -> Move:
        """Applique un saut puis notifie les observateurs.

        Raises:
            InvalidMove: si le saut est illégal (le plateau est inchangé)
        """

        model = self.model
        try:
            applied = model.move(move.from_row, move.from_col, move.to_row, move.to_col)
        except InvalidMove as exc:
            logger.debug("Coup refusé %s: %s", move, exc.reason.value)
            raise

        logger.debug("Coup appliqué %s, score %d", applied, model.score)
        self._event_bus.publish(MoveAppliedEvent(move=applied, score=model.score))

        if model.is_game_over():
            logger.info("Partie terminée, score %d", model.score)
            self._event_bus.publish(GameEndedEvent(score=model.score))

        return applied

    def is_game_over(self) -> bool:
        return self.model.is_game_over()

    def score(self) -> int:
        return self.model.score
