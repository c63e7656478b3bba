"""
Portal Store

Owns the current snapshot and is the only object that feeds actions to the
reducer. Consumers receive the store explicitly; there is no module-level
instance.
"""

import logging
import threading
from collections.abc import Callable, Iterable

from healthplus.domain import Action, Snapshot, reduce

logger = logging.getLogger(__name__)

Listener = Callable[[Snapshot, Snapshot], None]
Reducer = Callable[[Snapshot, Action], Snapshot]


class Store:
    """
    Serial action dispatcher around a single snapshot.

    Every call to :meth:`dispatch_all` applies its actions one after another
    while holding an exclusive lock, so no other action can interleave with a
    burst and observers only ever see the snapshot before or after it.
    Listeners run once per burst, after the last action, with
    ``(previous, current)``.
    """

    def __init__(self, initial: Snapshot, reducer: Reducer = reduce):
        self._snapshot = initial
        self._reducer = reducer
        self._lock = threading.RLock()
        self._listeners: list[Listener] = []

    @property
    def snapshot(self) -> Snapshot:
        return self._snapshot

    def dispatch(self, action: Action) -> Snapshot:
        """Apply one action."""
        return self.dispatch_all((action,))

    def dispatch_all(self, actions: Iterable[Action]) -> Snapshot:
        """
        Apply a burst of actions atomically.

        Args:
            actions: Actions applied in order

        Returns:
            The snapshot after the whole burst
        """
        with self._lock:
            previous = current = self._snapshot
            for action in actions:
                logger.debug(f"Dispatching {action.type.value}")
                current = self._reducer(current, action)
            self._snapshot = current

            if current is not previous:
                for listener in list(self._listeners):
                    listener(previous, current)
            return current

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener. Returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
