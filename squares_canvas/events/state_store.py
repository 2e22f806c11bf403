"""
StateStore - Holds the latest drawing snapshot and broadcasts updates

Pattern: Observer/Publisher-Subscriber with replay-last
"""

import logging
from dataclasses import dataclass, field
from itertools import count
from typing import Any, Callable, Dict, Optional

from PyQt6.QtCore import QObject, pyqtSignal

logger = logging.getLogger(__name__)

_handle_ids = count(1)


@dataclass(frozen=True)
class SubscriptionHandle:
    """Returned by subscribe(); pass it back to unsubscribe()."""

    observer: Callable
    handle_id: int = field(default_factory=lambda: next(_handle_ids))


class StateStore(QObject):
    """
    Single cell holding the most recent snapshot.

    Every publish() replaces the held value and synchronously calls all
    observers in the order they subscribed. A new observer is handed the held
    value immediately, so it never misses the current state.

    Observers are plain callables invoked in-line: an exception raised by one
    stops the rest of that dispatch and propagates to whoever published. The
    held snapshot has already been replaced by then.

    Usage:
        store = StateStore(initial_state)
        handle = store.subscribe(renderer.apply_state)
        store.publish(next_state)
        store.unsubscribe(handle)
    """

    # Qt-side notification, emitted after every observer has run
    state_changed = pyqtSignal(object)

    def __init__(self, initial: Any, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._current = initial
        self._handles: Dict[int, SubscriptionHandle] = {}

    def current(self) -> Any:
        """Get the held snapshot without subscribing"""
        return self._current

    def publish(self, snapshot: Any):
        """
        Replace the held snapshot and notify observers

        Args:
            snapshot: New immutable snapshot
        """
        self._current = snapshot

        # Copy so an observer may unsubscribe itself mid-dispatch
        for handle in list(self._handles.values()):
            handle.observer(snapshot)

        self.state_changed.emit(snapshot)

    def subscribe(self, observer: Callable[[Any], None]) -> SubscriptionHandle:
        """
        Register an observer and replay the held snapshot to it

        If the replay raises, the observer is not left registered.

        Args:
            observer: Callable taking one snapshot

        Returns:
            Handle for unsubscribe()
        """
        if not callable(observer):
            raise TypeError(f"Observer must be callable, got {observer!r}")

        handle = SubscriptionHandle(observer=observer)
        self._handles[handle.handle_id] = handle

        try:
            observer(self._current)
        except Exception:
            self._handles.pop(handle.handle_id, None)
            logger.warning(f"Observer {observer!r} failed on replay, not registered")
            raise

        return handle

    def unsubscribe(self, handle: SubscriptionHandle) -> bool:
        """
        Stop delivering snapshots to an observer

        Args:
            handle: Handle returned by subscribe()

        Returns:
            True if the observer was registered, False if it was already removed
        """
        if self._handles.pop(handle.handle_id, None) is None:
            logger.debug(f"Unsubscribe of unknown handle {handle.handle_id} ignored")
            return False
        return True

    def observer_count(self) -> int:
        """Number of currently registered observers"""
        return len(self._handles)


__all__ = ['StateStore', 'SubscriptionHandle']
