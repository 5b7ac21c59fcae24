import logging

import pytest

from surfkit.core.events import Event


def test_fire_calls_all_listeners():
    event = Event()
    calls: list[str] = []
    event.subscribe(lambda: calls.append("a"))
    event.subscribe(lambda: calls.append("b"))

    event.fire()

    assert sorted(calls) == ["a", "b"]
    assert len(event) == 2


def test_closed_subscription_is_not_called():
    event = Event()
    calls: list[int] = []
    sub = event.subscribe(lambda: calls.append(1))

    sub.close()
    sub.close()
    event.fire()

    assert calls == []
    assert sub.active is False
    assert len(event) == 0


def test_subscription_as_context_manager():
    event = Event()
    calls: list[int] = []

    with event.subscribe(lambda: calls.append(1)):
        event.fire()
    event.fire()

    assert calls == [1]


def test_unsubscribe_during_fire_skips_pending_listener():
    event = Event()
    calls: list[str] = []
    second = None

    def first() -> None:
        calls.append("first")
        assert second is not None
        second.close()

    event.subscribe(first)
    second = event.subscribe(lambda: calls.append("second"))

    event.fire()

    assert calls == ["first"]


def test_listener_exception_is_logged_and_delivery_continues(caplog: pytest.LogCaptureFixture):
    event = Event("node.values_changed")
    calls: list[int] = []

    def broken() -> None:
        raise RuntimeError("boom")

    event.subscribe(broken)
    event.subscribe(lambda: calls.append(1))

    with caplog.at_level(logging.ERROR, logger="surfkit.core.events"):
        event.fire()

    assert calls == [1]
    assert "node.values_changed" in caplog.text


def test_subscribe_rejects_non_callable():
    with pytest.raises(TypeError):
        Event().subscribe(123)  # type: ignore[arg-type]
