"""Tests du harnais console `play_text.py`."""

import io

import pytest

from marble.app.game_service import GameService
from marble.engine.actions import Move
from play_text import main, parse_move, play


def _scripted(lines):
    iterator = iter(lines)

    def read_line(prompt: str) -> str:
        try:
            return next(iterator)
        except StopIteration:
            raise EOFError
    return read_line


def test_parse_move():
    assert parse_move("3 1 3 3") == Move(3, 1, 3, 3)
    assert parse_move(" 1,3, 3,3 ") == Move(1, 3, 3, 3)


@pytest.mark.parametrize("line", ["3 1 3", "a b c d", "1 2 3 4 5"])
def test_parse_move_rejects_garbage(line):
    with pytest.raises(ValueError):
        parse_move(line)


def test_play_applies_moves_and_reports_errors():
    service = GameService()
    service.start_new_game()
    out = io.StringIO()

    score = play(service, _scripted(["3 1 3 3", "0 0 0 2", "oops", "", "q"]), out)

    text = out.getvalue()
    assert score == 31
    assert "O _ _ O O O O" in text
    assert "Coup refusé" in text
    assert "Saisie invalide" in text
    assert text.rstrip().endswith("score: 31")


def test_play_announces_each_applied_jump():
    service = GameService()
    service.start_new_game()
    subscribers = service.event_bus.subscriber_count()
    out = io.StringIO()

    play(service, _scripted(["3 1 3 3", "0 0 0 2", "q"]), out)

    lines = [line for line in out.getvalue().splitlines() if line.startswith("Saut")]
    assert lines == ["Saut (3, 1) -> (3, 3), billes: 31"]
    assert service.event_bus.subscriber_count() == subscribers


def test_play_stops_at_end_of_input():
    service = GameService()
    service.start_new_game()
    out = io.StringIO()

    assert play(service, _scripted([]), out) == 32


def test_play_announces_game_over(model_from_layout, monkeypatch):
    service = GameService()
    service.start_new_game()
    monkeypatch.setattr(
        service,
        "_model",
        model_from_layout(
            [
                "  ___  ",
                "  ___  ",
                "_______",
                "___OO__",
                "_______",
                "  ___  ",
                "  ___  ",
            ]
        ),
    )
    out = io.StringIO()

    assert play(service, _scripted(["3 3 3 5"]), out) == 1
    assert "Game over. Your score is 1" in out.getvalue()


def test_main_rejects_bad_configuration(capsys):
    assert main(["--arm-size", "4"]) == 2
    assert "Configuration invalide" in capsys.readouterr().err
