#!/usr/bin/env python3
"""Lance la GUI Marble Solitaire (pygame).

Ce script fournit une boucle d'évènements minimale permettant de jouer
en s'appuyant sur `marble.gui.app.MarbleApp`.

Commandes:
- clic gauche : sélectionner une bille, puis sa case d'arrivée
- ESC         : annuler la sélection, ou quitter si aucune sélection
- N           : nouvelle partie avec la même configuration
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import pygame

from marble.app.game_service import GameService
from marble.engine.errors import InvalidConfiguration
from marble.engine.rules import STANDARD_ARM_SIZE
from marble.gui.app import MarbleApp
from marble.gui.renderer import DEFAULT_CELL_SIZE

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Marble Solitaire (pygame)")
    parser.add_argument(
        "--arm-size",
        type=int,
        default=STANDARD_ARM_SIZE,
        help="Épaisseur des bras de la croix (impair, >= 3)",
    )
    parser.add_argument(
        "--empty",
        type=int,
        nargs=2,
        metavar=("ROW", "COL"),
        default=None,
        help="Case vide initiale (centre par défaut)",
    )
    parser.add_argument(
        "--cell-size",
        type=int,
        default=DEFAULT_CELL_SIZE,
        help="Taille d'une case en pixels",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Niveau de log",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    empty_row, empty_col = args.empty if args.empty else (None, None)

    pygame.init()
    pygame.display.set_caption("Marble Solitaire")

    app = MarbleApp(game_service=GameService(), cell_size=args.cell_size)
    try:
        app.start_new_game(args.arm_size, empty_row, empty_col)
    except InvalidConfiguration as exc:
        pygame.quit()
        print(f"Configuration invalide: {exc}", file=sys.stderr)
        return 2

    clock = pygame.time.Clock()
    running = True
    ui_state = app.get_ui_state()

    while running:
        ui_state_changed = False

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    if ui_state.selected is not None:
                        app.cancel()
                        ui_state_changed = True
                    else:
                        running = False
                elif event.key == pygame.K_n:
                    logger.info("Nouvelle partie demandée")
                    app.restart()
                    ui_state_changed = True
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                app.handle_board_click(event.pos)
                ui_state_changed = True

        if ui_state_changed:
            ui_state = app.get_ui_state()

        app.render(ui_state)
        pygame.display.flip()
        clock.tick(30)

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
