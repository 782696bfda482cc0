"""Bus d'évènements synchrone pour la couche application."""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple, Type

Subscriber = Callable[[object], None]


class EventBus:
    """Publie des évènements aux observateurs enregistrés.

    Un abonné peut filtrer par type d'évènement (`event_type`); sans filtre il
    reçoit tout. La diffusion suit l'ordre d'enregistrement et une exception
    levée par un abonné remonte à l'émetteur.
    """

    __slots__ = ("_subscriptions",)

    def __init__(self) -> None:
        self._subscriptions: List[Tuple[Optional[Type[object]], Subscriber]] = []

    def subscribe(
        self,
        callback: Subscriber,
        event_type: Optional[Type[object]] = None,
    ) -> Callable[[], None]:
        """Enregistre un abonné et retourne une fonction d'unsubscribe idempotente."""

        subscription = (event_type, callback)
        self._subscriptions.append(subscription)

        def unsubscribe() -> None:
            if subscription in self._subscriptions:
                self._subscriptions.remove(subscription)

        return unsubscribe

    def publish(self, event: object) -> None:
        """Diffuse l'évènement aux abonnés dont le filtre correspond."""

        for event_type, callback in tuple(self._subscriptions):
            if event_type is None or isinstance(event, event_type):
                callback(event)

    def subscriber_count(self) -> int:
        return len(self._subscriptions)
