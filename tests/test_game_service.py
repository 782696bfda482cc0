import logging

import pytest

from marble.app.event_bus import EventBus
from marble.app.events import GameEndedEvent, GameStartedEvent, MoveAppliedEvent
from marble.app.game_service import GameService
from marble.engine.actions import Move
from marble.engine.board import CellStatus
from marble.engine.errors import InvalidConfiguration, InvalidMove


def test_event_bus_publish_and_unsubscribe() -> None:
    bus = EventBus()
    received: list[tuple[str, object]] = []

    unsubscribe_a = bus.subscribe(lambda event: received.append(("a", event)))
    unsubscribe_b = bus.subscribe(lambda event: received.append(("b", event)))
    assert bus.subscriber_count() == 2

    bus.publish("hello")
    assert received == [("a", "hello"), ("b", "hello")]

    received.clear()
    unsubscribe_a()
    unsubscribe_a()
    bus.publish("world")
    assert received == [("b", "world")]

    received.clear()
    unsubscribe_b()
    bus.publish("ignored")
    assert received == []


def test_event_bus_propagates_subscriber_errors() -> None:
    bus = EventBus()

    def boom(event: object) -> None:
        raise RuntimeError("boom")

    bus.subscribe(boom)
    with pytest.raises(RuntimeError):
        bus.publish("x")


def test_model_requires_started_game() -> None:
    service = GameService()
    assert not service.has_game
    with pytest.raises(RuntimeError):
        _ = service.model


def test_start_new_game_publishes_event() -> None:
    bus = EventBus()
    events: list[object] = []
    bus.subscribe(events.append)

    service = GameService(event_bus=bus)
    model = service.start_new_game(5, 5, 0)

    assert service.event_bus is bus
    assert len(events) == 1
    assert isinstance(events[0], GameStartedEvent)
    assert events[0].model is model
    assert model.arm_size == 5
    assert model.cell_status(5, 0) == CellStatus.EMPTY


def test_start_new_game_rejects_bad_configuration() -> None:
    bus = EventBus()
    events: list[object] = []
    bus.subscribe(events.append)
    service = GameService(event_bus=bus)

    with pytest.raises(InvalidConfiguration):
        service.start_new_game(4)

    assert events == []
    assert not service.has_game


def test_dispatch_emits_move_applied_event() -> None:
    bus = EventBus()
    events: list[object] = []
    service = GameService(event_bus=bus)
    service.start_new_game()
    bus.subscribe(events.append)

    applied = service.dispatch(Move(3, 1, 3, 3))

    assert applied == Move(3, 1, 3, 3)
    assert len(events) == 1
    event = events[0]
    assert isinstance(event, MoveAppliedEvent)
    assert event.move == applied
    assert event.score == 31
    assert event.changed_cells == ((3, 1), (3, 2), (3, 3))
    assert service.score() == 31


def test_dispatch_rejects_illegal_move_without_events() -> None:
    bus = EventBus()
    events: list[object] = []
    service = GameService(event_bus=bus)
    service.start_new_game()
    bus.subscribe(events.append)
    before = service.model.cells()

    with pytest.raises(InvalidMove):
        service.dispatch(Move(0, 0, 0, 2))

    assert events == []
    assert service.model.cells() == before
    assert service.score() == 32


def test_dispatch_emits_game_ended_event(
    model_from_layout, monkeypatch: pytest.MonkeyPatch
) -> None:
    bus = EventBus()
    events: list[object] = []
    service = GameService(event_bus=bus)
    service.start_new_game()
    monkeypatch.setattr(
        service,
        "_model",
        model_from_layout(
            [
                "  ___  ",
                "  ___  ",
                "_______",
                "_OO____",
                "_______",
                "  ___  ",
                "  ___  ",
            ]
        ),
    )
    bus.subscribe(events.append)

    service.dispatch(Move(3, 1, 3, 3))

    assert len(events) == 2
    assert isinstance(events[0], MoveAppliedEvent)
    assert events[0].score == 1
    assert isinstance(events[-1], GameEndedEvent)
    assert events[-1].score == 1
    assert service.is_game_over()


def test_legal_moves_passthrough() -> None:
    service = GameService()
    service.start_new_game()
    assert service.legal_moves() == service.model.legal_moves()
    assert not service.is_game_over()


def test_dispatch_logs_moves(caplog: pytest.LogCaptureFixture) -> None:
    service = GameService()
    with caplog.at_level(logging.DEBUG, logger="marble.app.game_service"):
        service.start_new_game()
        service.dispatch(Move(1, 3, 3, 3))
        with pytest.raises(InvalidMove):
            service.dispatch(Move(1, 3, 3, 3))

    messages = [record.getMessage() for record in caplog.records]
    assert any("Nouvelle partie" in message for message in messages)
    assert any("Coup appliqué" in message for message in messages)
    assert any("SOURCE_NOT_OCCUPIED" in message for message in messages)


def test_service_keeps_the_given_empty_bus() -> None:
    bus = EventBus()
    assert bus.subscriber_count() == 0

    service = GameService(event_bus=bus)
    assert service.event_bus is bus

    events: list[object] = []
    bus.subscribe(events.append)
    service.start_new_game()
    service.dispatch(Move(3, 1, 3, 3))

    assert [type(event) for event in events] == [GameStartedEvent, MoveAppliedEvent]


def test_event_bus_filters_by_event_type() -> None:
    bus = EventBus()
    ended: list[object] = []
    everything: list[object] = []
    bus.subscribe(ended.append, GameEndedEvent)
    bus.subscribe(everything.append)

    bus.publish(MoveAppliedEvent(Move(3, 1, 3, 3), 31))
    bus.publish(GameEndedEvent(1))

    assert ended == [GameEndedEvent(1)]
    assert len(everything) == 2
