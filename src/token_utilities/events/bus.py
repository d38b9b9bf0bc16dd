"""Per-type dispatch of build events."""

from __future__ import annotations

from collections import defaultdict
from typing import Callable, TypeVar

from token_utilities.events.types import BuildEvent

E = TypeVar("E", bound=BuildEvent)


class EventBus:
    """Routes each event to the callbacks subscribed to its exact type.

    Callbacks run synchronously on the emitting thread, in subscription
    order.  The engine emits only from the thread that called ``build``,
    never from its scan workers.
    """

    def __init__(self) -> None:
        self._listeners: defaultdict[type[BuildEvent], list[Callable]] = defaultdict(list)

    def subscribe(self, event_type: type[E], callback: Callable[[E], None]) -> None:
        self._listeners[event_type].append(callback)

    def emit(self, event: BuildEvent) -> None:
        for callback in self._listeners.get(type(event), ()):
            callback(event)
