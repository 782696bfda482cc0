#!/usr/bin/env python3
"""Partie de Marble Solitaire en console.

Affiche le plateau (`MarbleModel.render_text`) et lit un coup par ligne sous
la forme `fromRow fromCol toRow toCol`. `q` quitte la partie.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List, Optional, TextIO

from marble.app.events import MoveAppliedEvent
from marble.app.game_service import GameService
from marble.engine.actions import Move
from marble.engine.errors import InvalidConfiguration, MarbleError
from marble.engine.rules import STANDARD_ARM_SIZE

QUIT_COMMANDS = {"q", "quit", "exit"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Marble Solitaire (console)")
    parser.add_argument("--arm-size", type=int, default=STANDARD_ARM_SIZE)
    parser.add_argument(
        "--empty", type=int, nargs=2, metavar=("ROW", "COL"), default=None
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def parse_move(line: str) -> Move:
    """Convertit `"r1 c1 r2 c2"` en `Move`.

    Raises:
        ValueError: si la ligne ne contient pas quatre entiers
    """
    parts = line.replace(",", " ").split()
    if len(parts) != 4:
        raise ValueError("Entrez quatre entiers: fromRow fromCol toRow toCol")
    from_row, from_col, to_row, to_col = (int(part) for part in parts)
    return Move(from_row, from_col, to_row, to_col)


def play(
    service: GameService,
    read_line: Callable[[str], str] = input,
    out: TextIO = sys.stdout,
) -> int:
    """Boucle de jeu; retourne le score final (ou courant si abandon)."""

    def announce(event: object) -> None:
        assert isinstance(event, MoveAppliedEvent)
        print(f"Saut {event.move}, billes: {event.score}", file=out)

    unsubscribe = service.event_bus.subscribe(announce, MoveAppliedEvent)
    try:
        return _run(service, read_line, out)
    finally:
        unsubscribe()


def _run(service: GameService, read_line: Callable[[str], str], out: TextIO) -> int:
    model = service.model
    while not model.is_game_over():
        print(model.render_text(), file=out)
        print(f"score: {model.score}", file=out)
        try:
            line = read_line("Coup> ").strip()
        except EOFError:
            break
        if line.lower() in QUIT_COMMANDS:
            break
        if not line:
            continue
        try:
            service.dispatch(parse_move(line))
        except MarbleError as exc:
            print(f"Coup refusé: {exc}", file=out)
        except ValueError as exc:
            print(f"Saisie invalide: {exc}", file=out)

    print(model.render_text(), file=out)
    if model.is_game_over():
        print(f"Game over. Your score is {model.score}", file=out)
    else:
        print(f"score: {model.score}", file=out)
    return model.score


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    empty_row, empty_col = args.empty if args.empty else (None, None)
    service = GameService()
    try:
        service.start_new_game(args.arm_size, empty_row, empty_col)
    except InvalidConfiguration as exc:
        print(f"Configuration invalide: {exc}", file=sys.stderr)
        return 2

    play(service)
    return 0


if __name__ == "__main__":
    sys.exit(main())
