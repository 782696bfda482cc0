"""Orchestrateur principal de la GUI Marble Solitaire.

Ce module regroupe le routeur de clics, le HUD et le renderer, et fournit un
modèle testable indépendant de la boucle pygame. Il expose:
- un objet `MarbleApp` coordonnant GameService et contrôleurs,
- un état d'interface (`UIState`) synthétisant le mode courant, la bille
  sélectionnée et les cases à surligner.

Le rendu et la boucle d'évènements vivent dans `play_gui.py`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple

import pygame

from marble.app.events import GameEndedEvent, GameStartedEvent, MoveAppliedEvent
from marble.app.game_service import GameService
from marble.engine.rules import STANDARD_ARM_SIZE
from marble.engine.state import Grid, MarbleModel
from marble.gui.geometry import BoardGeometry
from marble.gui.hud_controller import HUDController
from marble.gui.renderer import (
    BOARD_MARGIN,
    COLOR_BG,
    DEFAULT_CELL_SIZE,
    BoardRenderer,
    window_size,
)
from marble.gui.selection import ClickRouter, PendingDestination

__all__ = ["UIState", "MarbleApp"]

MODE_SELECT_SOURCE = "select_source"
MODE_SELECT_DESTINATION = "select_destination"
MODE_GAME_OVER = "game_over"


@dataclass(frozen=True)
class UIState:
    """Données agrégées pour la couche de présentation GUI."""

    mode: str
    cells: Grid
    selected: Optional[Tuple[int, int]]
    highlight_cells: FrozenSet[Tuple[int, int]]
    last_move_cells: Tuple[Tuple[int, int], ...]
    instructions: str
    status: str
    score: int
    is_game_over: bool


class MarbleApp:
    """Orchestrateur principal de la GUI.

    Cette classe ne gère pas la boucle pygame directement mais fournit
    les opérations nécessaires à l'UI:
    - démarrer ou relancer une partie,
    - traduire un clic écran en case puis en sélection/saut,
    - exposer un état synthétique prêt à rendre.
    """

    def __init__(
        self,
        *,
        game_service: Optional[GameService] = None,
        screen: Optional[pygame.Surface] = None,
        cell_size: int = DEFAULT_CELL_SIZE,
    ) -> None:
        self.game_service = game_service if game_service is not None else GameService()
        self.screen = screen
        self.cell_size = cell_size

        self.geometry: Optional[BoardGeometry] = None
        self.click_router: Optional[ClickRouter] = None
        self.hud_controller: Optional[HUDController] = None
        self._board_renderer: Optional[BoardRenderer] = None

        self._arm_size = STANDARD_ARM_SIZE
        self._empty_cell: Tuple[Optional[int], Optional[int]] = (None, None)

        # Dernier saut et fin de partie, alimentés par le bus d'évènements
        self._last_move_cells: Tuple[Tuple[int, int], ...] = ()
        self._game_ended = False
        bus = self.game_service.event_bus
        bus.subscribe(self._on_game_started, GameStartedEvent)
        bus.subscribe(self._on_move_applied, MoveAppliedEvent)
        bus.subscribe(self._on_game_ended, GameEndedEvent)

    def _on_game_started(self, event: object) -> None:
        self._last_move_cells = ()
        self._game_ended = False

    def _on_move_applied(self, event: object) -> None:
        assert isinstance(event, MoveAppliedEvent)
        self._last_move_cells = event.changed_cells

    def _on_game_ended(self, event: object) -> None:
        self._game_ended = True

    # ------------------------------------------------------------------
    # Initialisation
    # ------------------------------------------------------------------

    def start_new_game(
        self,
        arm_size: int = STANDARD_ARM_SIZE,
        empty_row: Optional[int] = None,
        empty_col: Optional[int] = None,
    ) -> None:
        """Initialise une nouvelle partie et (ré)instancie les contrôleurs."""

        model = self.game_service.start_new_game(arm_size, empty_row, empty_col)
        self._arm_size = arm_size
        self._empty_cell = (empty_row, empty_col)

        self.geometry = BoardGeometry(model.board_size, self.cell_size, BOARD_MARGIN)
        if self.screen is None:
            # Crée une surface si non fournie (utile hors tests)
            self.screen = pygame.display.set_mode(window_size(self.geometry))

        self._board_renderer = BoardRenderer(self.screen, self.geometry)
        self.click_router = ClickRouter(self.game_service)
        self.hud_controller = HUDController(self.game_service)

    def restart(self) -> None:
        """Relance une partie avec la même configuration."""

        empty_row, empty_col = self._empty_cell
        self.start_new_game(self._arm_size, empty_row, empty_col)

    @property
    def model(self) -> MarbleModel:
        """Accès direct au moteur de la partie courante."""

        return self.game_service.model

    @property
    def renderer(self) -> BoardRenderer:
        """Retourne le renderer pygame associé (initialisé après start)."""

        if self._board_renderer is None:
            raise RuntimeError("BoardRenderer indisponible tant que la partie n'est pas démarrée")
        return self._board_renderer

    def _require_router(self) -> ClickRouter:
        if self.click_router is None:
            raise RuntimeError("App non initialisée")
        return self.click_router

    # ------------------------------------------------------------------
    # Clics plateau
    # ------------------------------------------------------------------

    def handle_cell_click(self, row: int, col: int) -> bool:
        """Transmet un clic sur une case au routeur.

        Returns:
            True si un saut a été appliqué
        """
        router = self._require_router()
        if self._game_ended:
            return False
        return router.handle_cell_click(row, col)

    def handle_board_click(self, pos: Tuple[int, int]) -> bool:
        """Traduit une position écran en case puis la traite.

        Un clic hors de la grille annule la sélection en cours.
        """
        router = self._require_router()
        assert self.geometry is not None
        cell = self.geometry.cell_at_position(*pos)
        if cell is None:
            router.cancel()
            return False
        return self.handle_cell_click(*cell)

    def cancel(self) -> None:
        self._require_router().cancel()

    # ------------------------------------------------------------------
    # État d'interface
    # ------------------------------------------------------------------

    def get_ui_state(self) -> UIState:
        router = self._require_router()
        assert self.hud_controller is not None

        model = self.model
        is_over = model.is_game_over()

        selected: Optional[Tuple[int, int]] = None
        highlight: FrozenSet[Tuple[int, int]] = frozenset()

        selection = router.selection
        if is_over:
            mode = MODE_GAME_OVER
        elif isinstance(selection, PendingDestination):
            mode = MODE_SELECT_DESTINATION
            selected = (selection.row, selection.col)
            highlight = frozenset(
                move.destination for move in model.legal_moves() if move.source == selected
            )
        else:
            mode = MODE_SELECT_SOURCE

        return UIState(
            mode=mode,
            cells=model.cells(),
            selected=selected,
            highlight_cells=highlight,
            last_move_cells=self._last_move_cells,
            instructions=self._build_instructions(mode),
            status=self.hud_controller.status_message(),
            score=model.score,
            is_game_over=is_over,
        )

    @staticmethod
    def _build_instructions(mode: str) -> str:
        if mode == MODE_GAME_OVER:
            return "Plus aucun saut possible. [N] nouvelle partie"
        if mode == MODE_SELECT_DESTINATION:
            return "Cliquez sur la case d'arrivée (ESC pour annuler)"
        return "Cliquez sur une bille à déplacer"

    def render(self, ui_state: Optional[UIState] = None) -> None:
        """Dessine le plateau et la barre d'état sur l'écran."""

        ui_state = ui_state or self.get_ui_state()
        renderer = self.renderer
        renderer.screen.fill(COLOR_BG)
        renderer.render_board(ui_state.cells)
        if ui_state.last_move_cells:
            renderer.render_last_move(ui_state.last_move_cells)
        if ui_state.highlight_cells:
            renderer.render_highlighted_cells(ui_state.highlight_cells)
        if ui_state.selected is not None:
            renderer.render_selected_cell(*ui_state.selected)
        renderer.render_status(f"{ui_state.status} | {ui_state.instructions}")
