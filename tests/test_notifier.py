"""Tests for the topic-based event notifier"""

import logging
import threading
from unittest.mock import Mock

import pytest

from log_facade import EventNotifier, LOG_TOPIC


class TestEventNotifier:
    """Test EventNotifier class."""

    def test_create_notifier(self):
        notifier = EventNotifier()
        assert notifier.listeners(LOG_TOPIC) == []
        assert notifier.get_metrics() == {"published": 0, "delivered": 0, "listener_errors": 0}

    def test_publish_to_topic(self):
        notifier = EventNotifier()
        listener = Mock()
        notifier.subscribe("log", listener)

        assert notifier.publish("log", "payload") == 1
        listener.assert_called_once_with("payload")

    def test_topics_are_separate(self):
        notifier = EventNotifier()
        listener = Mock()
        notifier.subscribe("other", listener)

        assert notifier.publish("log", "payload") == 0
        listener.assert_not_called()

    def test_registration_order(self):
        notifier = EventNotifier()
        calls = []
        for name in ("a", "b", "c"):
            notifier.subscribe("log", lambda payload, name=name: calls.append(name))

        notifier.publish("log", None)
        assert calls == ["a", "b", "c"]

    def test_duplicate_registration(self):
        notifier = EventNotifier()
        listener = Mock()
        notifier.subscribe("log", listener)
        notifier.subscribe("log", listener)

        notifier.publish("log", 1)
        assert listener.call_count == 2

        assert notifier.unsubscribe("log", listener) is True
        notifier.publish("log", 2)
        assert listener.call_count == 3

    def test_unsubscribe_unknown(self):
        notifier = EventNotifier()
        assert notifier.unsubscribe("log", Mock()) is False

    def test_non_callable_rejected(self):
        with pytest.raises(TypeError):
            EventNotifier().subscribe("log", 42)

    def test_listeners_snapshot(self):
        notifier = EventNotifier()
        listener = Mock()
        notifier.subscribe("log", listener)

        snapshot = notifier.listeners("log")
        snapshot.clear()
        assert notifier.listeners("log") == [listener]

    def test_failing_listener_isolated(self, caplog):
        notifier = EventNotifier()
        before = Mock()
        after = Mock()
        notifier.subscribe("log", before)
        notifier.subscribe("log", Mock(side_effect=ValueError("boom")))
        notifier.subscribe("log", after)

        with caplog.at_level(logging.ERROR, logger="log_facade.core.notifier"):
            assert notifier.publish("log", "payload") == 2

        before.assert_called_once_with("payload")
        after.assert_called_once_with("payload")
        assert "failed on topic 'log'" in caplog.text
        assert notifier.get_metrics() == {"published": 1, "delivered": 2, "listener_errors": 1}

    def test_listener_subscribing_during_publish(self):
        notifier = EventNotifier()
        late = Mock()

        def subscriber(payload):
            notifier.subscribe("log", late)

        notifier.subscribe("log", subscriber)
        notifier.publish("log", 1)
        late.assert_not_called()

        notifier.publish("log", 2)
        late.assert_called_once_with(2)

    def test_metrics_consistent_across_threads(self):
        notifier = EventNotifier()
        notifier.subscribe("log", Mock())
        notifier.subscribe("log", Mock(side_effect=RuntimeError("boom")))
        logging.getLogger("log_facade.core.notifier").disabled = True

        def publish_many():
            for i in range(200):
                notifier.publish("log", i)

        threads = [threading.Thread(target=publish_many) for _ in range(8)]
        try:
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()
        finally:
            logging.getLogger("log_facade.core.notifier").disabled = False

        assert notifier.get_metrics() == {
            "published": 1600,
            "delivered": 1600,
            "listener_errors": 1600,
        }
