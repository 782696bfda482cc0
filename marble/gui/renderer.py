"""BoardRenderer — rendu pygame du plateau et des billes.

Responsabilités:
- Dessiner le fond du plateau en croix
- Dessiner trous vides et billes depuis la grille du moteur
- Gérer les surbrillances contextuelles (bille sélectionnée, arrivées légales)

Conventions visuelles:
- une case = un carré de `cell_size` pixels
- trou = petit cercle sombre, bille = grand cercle plein
- les cases interdites ne sont pas dessinées
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

import pygame

from marble.engine.board import CellStatus
from marble.engine.state import Grid
from marble.gui.geometry import BoardGeometry

# Constantes écran
DEFAULT_CELL_SIZE = 64
BOARD_MARGIN = 24
STATUS_BAR_HEIGHT = 48

# Couleurs (palette sobre)
COLOR_BG = (30, 60, 90)
COLOR_BOARD = (170, 120, 70)
COLOR_BOARD_BORDER = (90, 60, 30)
COLOR_HOLE = (70, 45, 25)
COLOR_MARBLE = (40, 90, 200)
COLOR_MARBLE_OUTLINE = (15, 30, 80)
COLOR_TEXT = (255, 255, 255)

# Couleurs pour la surbrillance
COLOR_HIGHLIGHT_SELECTED = (255, 220, 80)
COLOR_HIGHLIGHT_TARGET = (100, 255, 100, 140)  # Vert semi-transparent
COLOR_LAST_MOVE = (230, 90, 60)

# Tailles relatives à la case
HOLE_RADIUS_RATIO = 0.18
MARBLE_RADIUS_RATIO = 0.36


def window_size(geometry: BoardGeometry) -> Tuple[int, int]:
    """Taille de fenêtre: plateau + barre d'état."""
    width, height = geometry.surface_size
    return (int(width), int(height) + STATUS_BAR_HEIGHT)


class BoardRenderer:
    """Rendu du plateau et des billes."""

    def __init__(self, screen: pygame.Surface, geometry: BoardGeometry) -> None:
        """Initialize renderer with pygame surface and board geometry.

        Args:
            screen: pygame surface to draw on
            geometry: cell <-> pixel mapping
        """
        self.screen = screen
        self.geometry = geometry

        # Font for the status bar (lazy init on first render)
        self._font: Optional[pygame.font.Font] = None

    def _ensure_font(self) -> pygame.font.Font:
        """Lazy init font."""
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.SysFont("Arial", 20, bold=True)
        return self._font

    def _cell_rect(self, row: int, col: int) -> pygame.Rect:
        left, top, width, height = self.geometry.cell_rect(row, col)
        return pygame.Rect(int(left), int(top), int(width), int(height))

    def _cell_center(self, row: int, col: int) -> Tuple[int, int]:
        x, y = self.geometry.cell_center(row, col)
        return (int(x), int(y))

    def render_board(self, cells: Grid) -> None:
        """Render playable cells: board background, holes and marbles."""
        cell_size = self.geometry.cell_size
        hole_radius = max(2, int(cell_size * HOLE_RADIUS_RATIO))
        marble_radius = max(3, int(cell_size * MARBLE_RADIUS_RATIO))

        for row, statuses in enumerate(cells):
            for col, status in enumerate(statuses):
                if status == CellStatus.FORBIDDEN:
                    continue
                rect = self._cell_rect(row, col)
                pygame.draw.rect(self.screen, COLOR_BOARD, rect)
                pygame.draw.rect(self.screen, COLOR_BOARD_BORDER, rect, width=1)

                center = self._cell_center(row, col)
                if status == CellStatus.OCCUPIED:
                    pygame.draw.circle(self.screen, COLOR_MARBLE, center, marble_radius)
                    pygame.draw.circle(
                        self.screen, COLOR_MARBLE_OUTLINE, center, marble_radius, width=2
                    )
                else:
                    pygame.draw.circle(self.screen, COLOR_HOLE, center, hole_radius)

    def render_selected_cell(self, row: int, col: int) -> None:
        """Entoure la bille sélectionnée."""
        radius = int(self.geometry.cell_size * MARBLE_RADIUS_RATIO) + 4
        pygame.draw.circle(
            self.screen, COLOR_HIGHLIGHT_SELECTED, self._cell_center(row, col), radius, width=4
        )

    def render_last_move(self, cells: Iterable[Tuple[int, int]]) -> None:
        """Encadre les cases modifiées par le dernier saut."""
        for row, col in cells:
            pygame.draw.rect(self.screen, COLOR_LAST_MOVE, self._cell_rect(row, col), width=3)

    def render_highlighted_cells(self, cells: Iterable[Tuple[int, int]]) -> None:
        """Surligne les cases d'arrivée légales (calque semi-transparent)."""
        size = int(self.geometry.cell_size)
        overlay = pygame.Surface((size, size), pygame.SRCALPHA)
        overlay.fill(COLOR_HIGHLIGHT_TARGET)
        for row, col in cells:
            rect = self._cell_rect(row, col)
            self.screen.blit(overlay, rect.topleft)

    def render_status(self, text: str) -> None:
        """Affiche le texte d'état sous le plateau."""
        font = self._ensure_font()
        _, board_height = self.geometry.surface_size
        surf = font.render(text, True, COLOR_TEXT)
        self.screen.blit(surf, (BOARD_MARGIN, int(board_height) + 10))


__all__ = [
    "BoardRenderer",
    "window_size",
    "DEFAULT_CELL_SIZE",
    "BOARD_MARGIN",
    "STATUS_BAR_HEIGHT",
    "COLOR_BG",
]
