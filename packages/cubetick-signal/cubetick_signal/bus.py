"""In-memory pub/sub event bus with per-tick flush semantics."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from cubetick import System, TickContext, World

_Handler = Callable[[str, dict[str, Any]], None]


class SignalBus:
    """Queue of named signals delivered to subscribers on ``flush()``.

    Handlers registered with ``subscribe_all`` see every signal, after the
    handlers subscribed to that signal by name.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {}
        self._wildcard: list[_Handler] = []
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: _Handler) -> None:
        self._subscribers.setdefault(signal_name, []).append(handler)

    def subscribe_all(self, handler: _Handler) -> None:
        self._wildcard.append(handler)

    def unsubscribe(self, signal_name: str, handler: _Handler) -> None:
        handlers = self._subscribers.get(signal_name)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def unsubscribe_all(self, handler: _Handler) -> None:
        if handler in self._wildcard:
            self._wildcard.remove(handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    @property
    def pending(self) -> int:
        return len(self._queue)

    def flush(self) -> None:
        # Signals published by handlers wait for the next flush.
        snapshot = self._queue
        self._queue = []
        for signal_name, data in snapshot:
            for handler in list(self._subscribers.get(signal_name, ())):
                handler(signal_name, data)
            for handler in list(self._wildcard):
                handler(signal_name, data)

    def clear(self) -> None:
        self._queue.clear()


def make_signal_system(bus: SignalBus) -> System:
    """Return a system that delivers everything published so far this tick.

    Wire it last so every other system's signals go out in the same step.
    """

    def signal_system(world: World, ctx: TickContext) -> None:
        bus.flush()

    return signal_system
