"""Tests du routeur de clics (sélection bille puis arrivée)."""

import pytest

from marble.app.event_bus import EventBus
from marble.app.events import MoveAppliedEvent
from marble.app.game_service import GameService
from marble.engine.board import CellStatus
from marble.gui.selection import ClickRouter, NoSelection, PendingDestination


@pytest.fixture
def game_service():
    """Partie standard, centre vide."""
    service = GameService()
    service.start_new_game()
    return service


@pytest.fixture
def router(game_service):
    return ClickRouter(game_service)


def test_starts_without_selection(router):
    assert router.selection == NoSelection()
    assert not router.has_pending_source


def test_first_click_selects_source_without_engine_call(router, game_service):
    before = game_service.model.cells()

    assert router.handle_cell_click(3, 1) is False

    assert router.selection == PendingDestination(3, 1)
    assert router.has_pending_source
    assert game_service.model.cells() == before


def test_second_click_applies_move(router, game_service):
    router.handle_cell_click(3, 1)
    assert router.handle_cell_click(3, 3) is True

    model = game_service.model
    assert model.cell_status(3, 1) == CellStatus.EMPTY
    assert model.cell_status(3, 2) == CellStatus.EMPTY
    assert model.cell_status(3, 3) == CellStatus.OCCUPIED
    assert model.score == 31
    assert router.selection == NoSelection()


def test_invalid_second_click_resets_selection(router, game_service):
    before = game_service.model.cells()

    router.handle_cell_click(3, 1)
    assert router.handle_cell_click(3, 2) is False

    assert router.selection == NoSelection()
    assert game_service.model.cells() == before
    assert game_service.model.score == 32


def test_off_board_destination_resets_selection(router, game_service):
    before = game_service.model.cells()

    router.handle_cell_click(3, 5)
    assert router.handle_cell_click(3, 7) is False

    assert router.selection == NoSelection()
    assert game_service.model.cells() == before
    assert game_service.model.score == 32


def test_recovers_after_invalid_pair(router, game_service):
    router.handle_cell_click(0, 0)
    router.handle_cell_click(0, 2)

    router.handle_cell_click(5, 3)
    assert router.handle_cell_click(3, 3) is True
    assert game_service.model.cell_status(3, 3) == CellStatus.OCCUPIED


def test_cancel_clears_pending_source(router):
    router.handle_cell_click(1, 3)
    router.cancel()
    assert router.selection == NoSelection()


def test_dispatch_goes_through_service_events():
    bus = EventBus()
    events = []
    service = GameService(event_bus=bus)
    service.start_new_game()
    bus.subscribe(events.append)
    router = ClickRouter(service)

    router.handle_cell_click(1, 3)
    router.handle_cell_click(3, 3)

    assert len(events) == 1
    assert isinstance(events[0], MoveAppliedEvent)
