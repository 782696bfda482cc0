"""État d'une partie et logique de transition.

`MarbleModel` possède la grille, le score et l'unique mutateur `move`. Un
coup refusé laisse la grille et le score intacts: toutes les préconditions
sont vérifiées avant la moindre écriture.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from marble.engine.actions import Move
from marble.engine.board import (
    DIRECTIONS,
    CellStatus,
    board_size_for,
    in_bounds,
    initial_score,
    is_forbidden,
    validate_arm_size,
)
from marble.engine.errors import (
    InvalidConfiguration,
    InvalidMove,
    InvalidPosition,
    MoveRejection,
)
from marble.engine.rules import (
    CELL_SEPARATOR,
    JUMP_DISTANCE,
    STANDARD_ARM_SIZE,
    SYMBOL_EMPTY,
    SYMBOL_FORBIDDEN,
    SYMBOL_OCCUPIED,
)

logger = logging.getLogger(__name__)

Grid = Tuple[Tuple[CellStatus, ...], ...]

_SYMBOLS = {
    CellStatus.OCCUPIED: SYMBOL_OCCUPIED,
    CellStatus.EMPTY: SYMBOL_EMPTY,
    CellStatus.FORBIDDEN: SYMBOL_FORBIDDEN,
}


class MarbleModel:
    """Moteur de règles du Marble Solitaire.

    Args:
        arm_size: épaisseur des bras de la croix (impair, >= 3)
        empty_row: ligne de la case vide initiale (centre par défaut)
        empty_col: colonne de la case vide initiale (centre par défaut)

    Raises:
        InvalidConfiguration: taille de bras invalide, ou case vide hors du
            plateau ou dans un coin interdit
    """

    def __init__(
        self,
        arm_size: int = STANDARD_ARM_SIZE,
        empty_row: Optional[int] = None,
        empty_col: Optional[int] = None,
    ) -> None:
        validate_arm_size(arm_size)

        self._arm_size = arm_size
        self._board_size = board_size_for(arm_size)

        if empty_row is None and empty_col is None:
            empty_row = empty_col = arm_size
        elif empty_row is None or empty_col is None:
            raise InvalidConfiguration("La case vide doit préciser ligne et colonne")

        self._board: List[List[CellStatus]] = self._create_board(empty_row, empty_col)
        self._score = initial_score(arm_size)

        logger.debug(
            "Plateau %dx%d créé, case vide (%d, %d), %d billes",
            self._board_size,
            self._board_size,
            empty_row,
            empty_col,
            self._score,
        )

    def _create_board(self, empty_row: int, empty_col: int) -> List[List[CellStatus]]:
        if not in_bounds(empty_row, empty_col, self._board_size) or is_forbidden(
            empty_row, empty_col, self._arm_size
        ):
            raise InvalidConfiguration(
                f"Position invalide pour la case vide: ({empty_row}, {empty_col})"
            )

        board: List[List[CellStatus]] = []
        for row in range(self._board_size):
            cells: List[CellStatus] = []
            for col in range(self._board_size):
                if is_forbidden(row, col, self._arm_size):
                    cells.append(CellStatus.FORBIDDEN)
                elif (row, col) == (empty_row, empty_col):
                    cells.append(CellStatus.EMPTY)
                else:
                    cells.append(CellStatus.OCCUPIED)
            board.append(cells)
        return board

    # -- Accesseurs --
    @property
    def arm_size(self) -> int:
        return self._arm_size

    @property
    def board_size(self) -> int:
        return self._board_size

    @property
    def score(self) -> int:
        """Nombre de billes restant sur le plateau."""
        return self._score

    def cell_status(self, row: int, col: int) -> CellStatus:
        """Retourne l'état de la case (row, col).

        Raises:
            InvalidPosition: si la case est hors du plateau
        """
        if not in_bounds(row, col, self._board_size):
            raise InvalidPosition(row, col, self._board_size)
        return self._board[row][col]

    def cells(self) -> Grid:
        """Copie immuable de la grille complète."""
        return tuple(tuple(row) for row in self._board)

    # -- Coups --
    def move(self, from_row: int, from_col: int, to_row: int, to_col: int) -> Move:
        """Fait sauter la bille de (from_row, from_col) vers (to_row, to_col).

        La bille saute exactement une bille voisine et atterrit deux cases
        plus loin, horizontalement ou verticalement. En cas de succès, la
        case de départ et la case sautée se vident, la case d'arrivée se
        remplit et le score diminue de 1.

        Returns:
            Le coup appliqué

        Raises:
            InvalidMove: si une précondition du saut n'est pas respectée (une
                case hors du plateau compte comme ni bille ni trou vide)
        """
        move = Move(from_row, from_col, to_row, to_col)
        self._check_move(move)

        mid_row, mid_col = move.midpoint
        self._board[from_row][from_col] = CellStatus.EMPTY
        self._board[mid_row][mid_col] = CellStatus.EMPTY
        self._board[to_row][to_col] = CellStatus.OCCUPIED
        self._score -= 1
        return move

    def _check_move(self, move: Move) -> None:
        # Une case hors plateau n'est ni une bille ni un trou vide.
        if not in_bounds(*move.source, self._board_size) or (
            self._board[move.from_row][move.from_col] != CellStatus.OCCUPIED
        ):
            raise InvalidMove(move, MoveRejection.SOURCE_NOT_OCCUPIED)

        if not in_bounds(*move.destination, self._board_size) or (
            self._board[move.to_row][move.to_col] != CellStatus.EMPTY
        ):
            raise InvalidMove(move, MoveRejection.DESTINATION_NOT_EMPTY)

        d_row, d_col = move.displacement
        if (abs(d_row), abs(d_col)) not in ((JUMP_DISTANCE, 0), (0, JUMP_DISTANCE)):
            raise InvalidMove(move, MoveRejection.BAD_DISPLACEMENT)

        mid_row, mid_col = move.midpoint
        if self._board[mid_row][mid_col] != CellStatus.OCCUPIED:
            raise InvalidMove(move, MoveRejection.NO_MARBLE_TO_JUMP)

    def _can_jump(self, row: int, col: int, d_row: int, d_col: int) -> bool:
        # Chaque direction est bornée individuellement: une bille en bord de
        # plateau a simplement moins de directions candidates.
        to_row = row + JUMP_DISTANCE * d_row
        to_col = col + JUMP_DISTANCE * d_col
        if not in_bounds(to_row, to_col, self._board_size):
            return False
        return (
            self._board[row + d_row][col + d_col] == CellStatus.OCCUPIED
            and self._board[to_row][to_col] == CellStatus.EMPTY
        )

    def legal_moves(self) -> List[Move]:
        """Liste des sauts légaux, sources en ordre ligne par ligne."""

        moves: List[Move] = []
        for row in range(self._board_size):
            for col in range(self._board_size):
                if self._board[row][col] != CellStatus.OCCUPIED:
                    continue
                for d_row, d_col in DIRECTIONS:
                    if self._can_jump(row, col, d_row, d_col):
                        moves.append(
                            Move(
                                row,
                                col,
                                row + JUMP_DISTANCE * d_row,
                                col + JUMP_DISTANCE * d_col,
                            )
                        )
        return moves

    def has_legal_move(self, row: int, col: int) -> bool:
        """Indique si la bille en (row, col) peut sauter dans une direction."""

        if self.cell_status(row, col) != CellStatus.OCCUPIED:
            return False
        return any(self._can_jump(row, col, d_row, d_col) for d_row, d_col in DIRECTIONS)

    def is_game_over(self) -> bool:
        """La partie est finie quand aucune bille ne peut plus sauter."""

        for row in range(self._board_size):
            for col in range(self._board_size):
                if self.has_legal_move(row, col):
                    return False
        return True

    # -- Rendu --
    def render_text(self) -> str:
        """Une ligne par rangée, cases séparées par un espace.

        `O` pour une bille, `_` pour un trou vide, espace pour une case
        interdite.
        """
        return "\n".join(
            CELL_SEPARATOR.join(_SYMBOLS[status] for status in row) for row in self._board
        )

    def __str__(self) -> str:
        return self.render_text()


__all__ = ["MarbleModel", "Grid"]
