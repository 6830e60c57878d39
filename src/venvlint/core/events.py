"""Event subscription primitives.

Listeners register on an ``EventEmitter`` and receive a ``Disposable``
handle; disposing the handle removes the listener. Owners collect their
handles and dispose them deterministically on teardown.
"""

from __future__ import annotations

from typing import Callable, Generic, List, Optional, TypeVar

from venvlint.core.logging import get_logger

LOGGER = get_logger(__name__)

T = TypeVar("T")


class Disposable:
    """Handle that runs a release callback at most once."""

    def __init__(self, on_dispose: Optional[Callable[[], None]] = None):
        self._on_dispose = on_dispose

    @property
    def disposed(self) -> bool:
        return self._on_dispose is None

    def dispose(self) -> None:
        callback, self._on_dispose = self._on_dispose, None
        if callback is not None:
            callback()


class EventEmitter(Generic[T]):
    """Synchronous fan-out of events to registered listeners."""

    def __init__(self) -> None:
        self._listeners: List[Callable[[T], None]] = []

    def __len__(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: Callable[[T], None]) -> Disposable:
        """Register a listener.

        Args:
            listener: Callable invoked with each fired event.

        Returns:
            Disposable that unregisters the listener.
        """
        self._listeners.append(listener)

        def _remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return Disposable(_remove)

    def fire(self, event: T) -> None:
        """Deliver an event to every listener.

        A failing listener is logged and does not prevent delivery to the
        remaining ones.
        """
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception as e:
                LOGGER.error(f"Event listener error: {e}")
