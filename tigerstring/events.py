"""
Event plumbing for tiger strings.

A TigerString reports what it does to its storage (appends, reallocations,
release) by firing named events; callers observe them by attaching listeners.
"""

from typing import Any, Callable, Dict, List, Optional, Tuple


class EventSource:
    """Fires a fixed set of named events to attached listeners

    Subclasses list the names they fire in EVENTS. Attaching to or firing any
    other name raises ValueError, so a misspelt event fails loudly instead of
    never being delivered.
    """

    EVENTS: Tuple[str, ...] = ()

    def __init__(self):
        # the None slot holds catch-all listeners
        self._listeners: Dict[Optional[str], List[Callable]] = {event: [] for event in self.EVENTS}
        self._listeners[None] = []

    def add_listener(self, event: str, listener: Callable) -> None:
        """Call ``listener(*args)`` whenever ``event`` fires"""
        self._check_event(event)
        self._attach(event, listener)

    def add_catch_all_listener(self, listener: Callable) -> None:
        """Call ``listener(event, *args)`` for every event fired"""
        self._attach(None, listener)

    def remove_listener(self, listener: Callable) -> None:
        """Detach ``listener`` everywhere, catch-all registration included"""
        for listeners in self._listeners.values():
            if listener in listeners:
                listeners.remove(listener)

    def auto_listen(self, observer: Any, prefix: str = "_on_") -> None:
        """Attach ``observer.<prefix><event>`` for each supported event it defines"""
        for event in self.EVENTS:
            listener = getattr(observer, prefix + event, None)
            if callable(listener):
                self._attach(event, listener)

    def fire(self, event: str, *args: Any) -> None:
        self._check_event(event)
        for listener in self._listeners[event]:
            listener(*args)
        for listener in self._listeners[None]:
            listener(event, *args)

    def _attach(self, key: Optional[str], listener: Callable) -> None:
        if listener not in self._listeners[key]:
            self._listeners[key].append(listener)

    def _check_event(self, event: str) -> None:
        if event not in self.EVENTS:
            raise ValueError(f"{type(self).__name__} has no {event!r} event, expected one of {self.EVENTS}")
