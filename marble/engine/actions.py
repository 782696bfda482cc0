"""Actions du jeu.

Un seul type d'action existe: le saut d'une bille par-dessus une voisine.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Move:
    """Saut d'une bille de (from_row, from_col) vers (to_row, to_col).

    Args:
        from_row: ligne de la bille à déplacer
        from_col: colonne de la bille à déplacer
        to_row: ligne de la case d'arrivée
        to_col: colonne de la case d'arrivée
    """

    from_row: int
    from_col: int
    to_row: int
    to_col: int

    @property
    def source(self) -> Tuple[int, int]:
        return (self.from_row, self.from_col)

    @property
    def destination(self) -> Tuple[int, int]:
        return (self.to_row, self.to_col)

    @property
    def displacement(self) -> Tuple[int, int]:
        return (self.to_row - self.from_row, self.to_col - self.from_col)

    @property
    def midpoint(self) -> Tuple[int, int]:
        """Case sautée (n'a de sens que pour un saut de deux cases en ligne)."""
        return ((self.from_row + self.to_row) // 2, (self.from_col + self.to_col) // 2)

    def __str__(self) -> str:
        return f"({self.from_row}, {self.from_col}) -> ({self.to_row}, {self.to_col})"


__all__ = ["Move"]
