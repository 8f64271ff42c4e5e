"""
Event emitter coordinating synchronous listener delivery.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional


Listener = Callable[..., Any]


@dataclass(eq=False)
class _Registration:
    listener: Listener
    once: bool = False


class EventEmitter:
    """
    Maintains listeners per event name and delivers events synchronously.

    Listeners run in registration order. An exception raised by a listener
    propagates to the caller of :meth:`emit` and the remaining listeners for
    that emission are skipped.
    """

    def __init__(self) -> None:
        self._registrations: Dict[str, List[_Registration]] = defaultdict(list)

    def on(self, event: str, listener: Optional[Listener] = None):
        """
        Register ``listener`` for ``event``.

        Without a listener, returns a decorator registering the decorated
        function and handing it back unchanged.
        """

        if listener is None:
            def decorator(func: Listener) -> Listener:
                self._add(event, func, once=False)
                return func

            return decorator
        self._add(event, listener, once=False)
        return self

    def once(self, event: str, listener: Optional[Listener] = None):
        if listener is None:
            def decorator(func: Listener) -> Listener:
                self._add(event, func, once=True)
                return func

            return decorator
        self._add(event, listener, once=True)
        return self

    def off(self, event: str, listener: Listener) -> "EventEmitter":
        registrations = self._registrations.get(event)
        if not registrations:
            return self
        for index in range(len(registrations) - 1, -1, -1):
            if registrations[index].listener == listener:
                del registrations[index]
                break
        if not registrations:
            del self._registrations[event]
        return self

    def emit(self, event: str, *args: Any, **kwargs: Any) -> bool:
        registrations = list(self._registrations.get(event, []))
        if not registrations:
            return False
        for registration in registrations:
            if registration.once:
                self._discard(event, registration)
            registration.listener(*args, **kwargs)
        return True

    def listeners(self, event: str) -> List[Listener]:
        return [registration.listener for registration in self._registrations.get(event, [])]

    def listener_count(self, event: str) -> int:
        return len(self._registrations.get(event, []))

    def event_names(self) -> List[str]:
        return [name for name, registrations in self._registrations.items() if registrations]

    def remove_all_listeners(self, event: Optional[str] = None) -> "EventEmitter":
        if event is None:
            self._registrations.clear()
        else:
            self._registrations.pop(event, None)
        return self

    def _add(self, event: str, listener: Listener, *, once: bool) -> None:
        if not callable(listener):
            raise TypeError(f"Listener for '{event}' must be callable, got {listener!r}")
        self._registrations[event].append(_Registration(listener, once=once))

    def _discard(self, event: str, registration: _Registration) -> None:
        registrations = self._registrations.get(event)
        if not registrations:
            return
        for index, candidate in enumerate(registrations):
            if candidate is registration:
                del registrations[index]
                break
        if not registrations:
            del self._registrations[event]
