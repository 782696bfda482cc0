"""Évènements publiés par la couche application (`marble.app`)."""

from __future__ import annotations

from dataclasses import dataclass

from marble.engine.actions import Move
from marble.engine.state import MarbleModel


@dataclass(frozen=True)
class GameStartedEvent:
    """Émis lorsqu'une nouvelle partie est initialisée."""

    model: MarbleModel


@dataclass(frozen=True)
class MoveAppliedEvent:
    """Émis après qu'un saut légal a été appliqué.

    `changed_cells` liste les trois cases modifiées: départ, case sautée,
    arrivée.
    """

    move: Move
    score: int

    @property
    def changed_cells(self) -> tuple[tuple[int, int], ...]:
        return (self.move.source, self.move.midpoint, self.move.destination)


@dataclass(frozen=True)
class GameEndedEvent:
    """Émis quand plus aucun saut n'est possible."""

    score: int
