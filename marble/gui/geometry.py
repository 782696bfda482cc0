"""Geometry utilities for board rendering.

Ce module fournit la classe BoardGeometry qui calcule les coordonnées écran
des cases du plateau et l'opération inverse (pixel -> case) utilisée pour
interpréter les clics. Elle expose aussi l'indexation linéaire des cases
(un bouton par case, ligne par ligne).
"""

from __future__ import annotations

from typing import Optional, Tuple


class BoardGeometry:
    """Compute screen coordinates from logical board positions.

    La case (0, 0) a son coin supérieur gauche en (margin, margin); chaque
    case est un carré de `cell_size` pixels.
    """

    def __init__(self, board_size: int, cell_size: float, margin: float) -> None:
        """Initialize geometry calculator.

        Args:
            board_size: Number of cells per side
            cell_size: Side of a cell in pixels
            margin: Margin around the board in pixels
        """
        if board_size <= 0:
            raise ValueError(f"board_size must be positive, got {board_size}")
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        self.board_size = board_size
        self.cell_size = cell_size
        self.margin = margin

    def cell_rect(self, row: int, col: int) -> Tuple[float, float, float, float]:
        """Get the (left, top, width, height) rectangle of a cell."""
        left = self.margin + col * self.cell_size
        top = self.margin + row * self.cell_size
        return (left, top, self.cell_size, self.cell_size)

    def cell_center(self, row: int, col: int) -> Tuple[float, float]:
        """Get screen position of the center of a cell."""
        left, top, width, height = self.cell_rect(row, col)
        return (left + width / 2, top + height / 2)

    def cell_at_position(self, x: float, y: float) -> Optional[Tuple[int, int]]:
        """Get the (row, col) under a screen position, or None outside the grid."""
        col = int((x - self.margin) // self.cell_size)
        row = int((y - self.margin) // self.cell_size)
        if 0 <= row < self.board_size and 0 <= col < self.board_size:
            return (row, col)
        return None

    # -- Indexation linéaire (un bouton par case) --
    def button_index(self, row: int, col: int) -> int:
        return row * self.board_size + col

    def row_of(self, index: int) -> int:
        return index // self.board_size

    def col_of(self, index: int) -> int:
        return index % self.board_size

    @property
    def surface_size(self) -> Tuple[float, float]:
        """Get the required surface size to contain the board.

        Returns:
            (width, height) in pixels
        """
        side = self.board_size * self.cell_size + 2 * self.margin
        return (side, side)


__all__ = ["BoardGeometry"]
