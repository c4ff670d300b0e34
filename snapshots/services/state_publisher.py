"""
Single-writer, multi-reader holder for the current ``UiState``.

The orchestrator is the only writer. Presentation gets a ``StateView`` and can
read the current value, register listeners, or iterate over updates. Every
publish replaces the previous value as a whole, and listeners see publishes
in the order they happened.
"""
from typing import AsyncIterator, Callable, List, Optional
from snapshots.schemas.content import Initial, UiState
import asyncio
import threading
import logging

logger = logging.getLogger(__name__)

Listener = Callable[[UiState], None]


class StatePublisher:

    def __init__(self, initial: Optional[UiState] = None):
        self._value: UiState = initial if initial is not None else Initial()
        self._listeners: List[Listener] = []
        self._lock = threading.RLock()

    @property
    def value(self) -> UiState:
        return self._value

    def publish(self, state: UiState) -> None:
        with self._lock:
            self._value = state
            listeners = list(self._listeners)
            # Notify under the lock so concurrent writers cannot reorder deliveries
            for listener in listeners:
                try:
                    listener(state)
                except Exception:
                    logger.error(f"[PUBLISH] Listener failed for state '{state.status}'", exc_info=True)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener for future publishes. Returns an unsubscribe callable."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    async def stream(self) -> AsyncIterator[UiState]:
        """Yield the current state, then every later publish, in order."""
        loop = asyncio.get_running_loop()
        queue: asyncio.Queue = asyncio.Queue()

        with self._lock:
            queue.put_nowait(self._value)
            unsubscribe = self.subscribe(
                lambda state: loop.call_soon_threadsafe(queue.put_nowait, state)
            )
        try:
            while True:
                yield await queue.get()
        finally:
            unsubscribe()

    def view(self) -> "StateView":
        return StateView(self)


class StateView:
    """Read-only face of a StatePublisher handed to observers."""

    def __init__(self, publisher: StatePublisher):
        self._publisher = publisher

    @property
    def value(self) -> UiState:
        return self._publisher.value

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        return self._publisher.subscribe(listener)

    def stream(self) -> AsyncIterator[UiState]:
        return self._publisher.stream()
