"""
Topic-based event notifier

Synchronous fan-out of published payloads to subscribed listeners.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, List
import logging
import threading

_logger = logging.getLogger(__name__)

Listener = Callable[[Any], Any]


class EventNotifier:
    """
    Minimal publish/subscribe hub keyed by topic.

    Listeners are called in registration order on the publishing thread.
    A listener that raises does not prevent the remaining listeners from
    being notified.

    Example:
        notifier = EventNotifier()
        notifier.subscribe("log", print)
        notifier.publish("log", event)
    """

    def __init__(self):
        self._listeners: Dict[str, List[Listener]] = {}
        self._lock = threading.Lock()
        self._metrics = {"published": 0, "delivered": 0, "listener_errors": 0}

    def subscribe(self, topic: str, listener: Listener) -> None:
        """
        Register a listener for a topic.

        Args:
            topic: Topic name
            listener: Callable receiving the published payload

        Raises:
            TypeError: If listener is not callable
        """
        if not callable(listener):
            raise TypeError("listener must be callable")

        with self._lock:
            self._listeners.setdefault(topic, []).append(listener)

    def unsubscribe(self, topic: str, listener: Listener) -> bool:
        """
        Remove one registration of a listener.

        Returns:
            True if the listener was registered, False otherwise
        """
        with self._lock:
            listeners = self._listeners.get(topic)
            if not listeners or listener not in listeners:
                return False
            listeners.remove(listener)
            if not listeners:
                del self._listeners[topic]
            return True

    def listeners(self, topic: str) -> List[Listener]:
        """Return a snapshot of the listeners of a topic."""
        with self._lock:
            return list(self._listeners.get(topic, ()))

    def publish(self, topic: str, payload: Any) -> int:
        """
        Deliver a payload to every listener of a topic.

        Args:
            topic: Topic name
            payload: Value passed to each listener

        Returns:
            Number of listeners that returned without raising
        """
        delivered = 0
        errors = 0
        for listener in self.listeners(topic):
            try:
                listener(payload)
                delivered += 1
            except Exception:
                errors += 1
                _logger.exception("Listener %r failed on topic %r", listener, topic)

        with self._lock:
            self._metrics["published"] += 1
            self._metrics["delivered"] += delivered
            self._metrics["listener_errors"] += errors
        return delivered

    def get_metrics(self) -> dict:
        """Get publish metrics."""
        with self._lock:
            return self._metrics.copy()
