"""Contrôleur HUD pour la GUI Marble Solitaire.

Fournit le texte d'état (score courant ou message de fin de partie). La
logique reste headless: aucun rendu pygame, uniquement des données prêtes à
consommer par la couche de présentation.
"""

from __future__ import annotations

from marble.app.game_service import GameService


class HUDController:
    """Contrôleur fournissant les données du HUD GUI."""

    def __init__(self, game_service: GameService) -> None:
        self.game_service = game_service

    @property
    def marbles_left(self) -> int:
        return self.game_service.score()

    def is_game_over(self) -> bool:
        return self.game_service.is_game_over()

    def status_message(self) -> str:
        """Retourne le texte de la barre d'état."""

        if self.is_game_over():
            return f"Game over. Your score is {self.marbles_left}"
        return f"score: {self.marbles_left}"


__all__ = ["HUDController"]
