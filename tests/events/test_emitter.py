import pytest

from doclifecycle.events import EventEmitter


def test_emit_calls_listeners_in_registration_order():
    emitter = EventEmitter()
    calls = []
    emitter.on("ping", lambda value: calls.append(("first", value)))
    emitter.on("ping", lambda value: calls.append(("second", value)))

    assert emitter.emit("ping", 1) is True
    assert calls == [("first", 1), ("second", 1)]


def test_emit_without_listeners_returns_false():
    emitter = EventEmitter()
    assert emitter.emit("nothing") is False


def test_on_used_as_decorator_returns_function():
    emitter = EventEmitter()
    seen = []

    @emitter.on("ready")
    def handler(value):
        seen.append(value)

    emitter.emit("ready", "go")
    assert seen == ["go"]
    assert emitter.listeners("ready") == [handler]


def test_once_listener_runs_a_single_time():
    emitter = EventEmitter()
    seen = []
    emitter.once("tick", seen.append)

    emitter.emit("tick", 1)
    emitter.emit("tick", 2)

    assert seen == [1]
    assert emitter.listener_count("tick") == 0


def test_off_removes_latest_registration_only():
    emitter = EventEmitter()
    seen = []
    emitter.on("tick", seen.append)
    emitter.on("tick", seen.append)

    emitter.off("tick", seen.append)
    emitter.emit("tick", "x")

    assert seen == ["x"]
    emitter.off("tick", seen.append)
    assert emitter.event_names() == []


def test_off_unknown_listener_is_ignored():
    emitter = EventEmitter()
    emitter.off("missing", print)
    assert emitter.listener_count("missing") == 0


def test_listener_added_during_emit_waits_for_next_emit():
    emitter = EventEmitter()
    seen = []

    def add_late(value):
        seen.append(("outer", value))
        emitter.on("evt", lambda v: seen.append(("late", v)))

    emitter.on("evt", add_late)
    emitter.emit("evt", 1)
    assert seen == [("outer", 1)]


def test_listener_exception_propagates_and_stops_delivery():
    emitter = EventEmitter()
    seen = []

    def boom(_):
        raise RuntimeError("listener failed")

    emitter.on("evt", boom)
    emitter.on("evt", seen.append)

    with pytest.raises(RuntimeError, match="listener failed"):
        emitter.emit("evt", 1)
    assert seen == []


def test_remove_all_listeners_for_event_and_globally():
    emitter = EventEmitter()
    emitter.on("a", print).on("b", print)

    emitter.remove_all_listeners("a")
    assert emitter.event_names() == ["b"]

    emitter.remove_all_listeners()
    assert emitter.event_names() == []


def test_non_callable_listener_rejected():
    emitter = EventEmitter()
    with pytest.raises(TypeError):
        emitter.on("evt", "not callable")


def test_emit_forwards_keyword_arguments():
    emitter = EventEmitter()
    captured = {}
    emitter.on("evt", lambda *args, **kwargs: captured.update(args=args, kwargs=kwargs))

    emitter.emit("evt", 1, flag=True)
    assert captured == {"args": (1,), "kwargs": {"flag": True}}
