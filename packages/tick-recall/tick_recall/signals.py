"""In-process status bus and per-tile observer channels."""
from __future__ import annotations

from collections import deque
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")

_Handler = Callable[[str, dict[str, Any]], None]


class SignalBus:
    """Named pub/sub. Handlers run synchronously inside ``publish``.

    The most recent signals are kept in ``history`` so a sink attached late
    can render the current status.
    """

    def __init__(self, history_size: int = 32) -> None:
        self._subscribers: dict[str, list[_Handler]] = {}
        self._history: deque[tuple[str, dict[str, Any]]] = deque(maxlen=history_size)

    def subscribe(self, signal_name: str, handler: _Handler) -> None:
        self._subscribers.setdefault(signal_name, []).append(handler)

    def subscribe_all(self, signal_names: tuple[str, ...], handler: _Handler) -> None:
        for name in signal_names:
            self.subscribe(name, handler)

    def unsubscribe(self, signal_name: str, handler: _Handler) -> None:
        handlers = self._subscribers.get(signal_name)
        if handlers is None:
            return
        try:
            handlers.remove(handler)
        except ValueError:
            pass

    def publish(self, signal_name: str, **data: Any) -> None:
        self._history.append((signal_name, data))
        for handler in list(self._subscribers.get(signal_name, [])):
            handler(signal_name, data)

    @property
    def history(self) -> list[tuple[str, dict[str, Any]]]:
        return list(self._history)

    def last(self) -> tuple[str, dict[str, Any]] | None:
        return self._history[-1] if self._history else None

    def clear(self) -> None:
        self._history.clear()


class Channel(Generic[T]):
    """Single-signal observer list. A handler is connected at most once."""

    def __init__(self) -> None:
        self._handlers: list[Callable[[T], None]] = []

    def connect(self, handler: Callable[[T], None]) -> None:
        if handler not in self._handlers:
            self._handlers.append(handler)

    def disconnect(self, handler: Callable[[T], None]) -> None:
        try:
            self._handlers.remove(handler)
        except ValueError:
            pass

    def emit(self, value: T) -> None:
        for handler in list(self._handlers):
            handler(value)

    def __len__(self) -> int:
        return len(self._handlers)
