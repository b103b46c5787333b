"""Module: observable.py

Date: 2026-10-19

Observable value backed by a Qt signal.

Subscribers attach with ``subscribe`` and immediately receive the current
value, then every later value in publication order. Delivery uses direct
signal connections, so it is synchronous on the publishing thread and
nothing is coalesced or dropped. Values published from inside a
subscriber are delivered after the current one, so every subscriber sees
the same order. A subscriber that raises is logged and does not keep the
others from being notified.
"""

from collections import deque
from collections.abc import Callable
from typing import Any

from selectlist.core.pyqt_imports import QObject, Qt, pyqtSignal
from selectlist.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

Subscriber = Callable[[Any], None]


class ObservableValue(QObject):
    """Holds one immutable snapshot and notifies subscribers on change.

    Signals:
        changed: Emitted with the new snapshot on every publish
    """

    changed = pyqtSignal(object)

    def __init__(self, initial: Any, name: str = "value", parent: QObject | None = None):
        super().__init__(parent)
        self._value = initial
        self._name = name
        # subscriber -> connected dispatch wrapper
        self._subscribers: dict[Subscriber, Subscriber] = {}
        # values published while a delivery is in progress
        self._pending: deque[Any] = deque()
        self._delivering = False

    def value(self) -> Any:
        """Current snapshot."""
        return self._value

    def subscribe(self, callback: Subscriber) -> Subscriber:
        """Attach ``callback`` and deliver the current snapshot to it right away.

        Subscribing the same callback twice is a no-op apart from the
        immediate delivery. Returns the callback so it can be passed to
        ``unsubscribe`` later.
        """
        if callback not in self._subscribers:
            wrapper = self._make_dispatcher(callback)
            self.changed.connect(wrapper, type=Qt.DirectConnection)
            self._subscribers[callback] = wrapper
            logger.debug(
                "[ObservableValue:%s] Subscriber attached (%d total)",
                self._name,
                len(self._subscribers),
                extra={"dev_only": True},
            )
        self._subscribers[callback](self._value)
        return callback

    def unsubscribe(self, callback: Subscriber) -> bool:
        """Detach ``callback``. Returns False if it was not subscribed."""
        wrapper = self._subscribers.pop(callback, None)
        if wrapper is None:
            return False
        self.changed.disconnect(wrapper)
        return True

    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def publish(self, value: Any) -> None:
        """Replace the snapshot and notify every subscriber.

        A value published by a subscriber while an earlier value is still
        being delivered is queued, and goes out only after every subscriber
        has received the earlier one.
        """
        self._value = value
        self._pending.append(value)
        if self._delivering:
            return

        self._delivering = True
        try:
            while self._pending:
                self.changed.emit(self._pending.popleft())
        finally:
            self._delivering = False
            self._pending.clear()

    def clear_subscribers(self) -> None:
        for callback in list(self._subscribers):
            self.unsubscribe(callback)

    def _make_dispatcher(self, callback: Subscriber) -> Subscriber:
        name = getattr(callback, "__qualname__", repr(callback))

        def dispatch(value: Any) -> None:
            try:
                callback(value)
            except Exception:
                logger.exception("[ObservableValue:%s] Subscriber '%s' failed", self._name, name)

        return dispatch
