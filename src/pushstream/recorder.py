# /src/pushstream/recorder.py
# In-memory Observer that records every event it receives

from typing import Any, List, Optional

from .errors import StreamError
from .events.event import Event


class EventRecorder:
    """Observer that keeps the events it is given, in arrival order.

    Pass an instance straight to ``subscribe``. Useful for tests and for
    consumers that want to inspect a finished sequence.
    """

    def __init__(self):
        self._events: List[Event[Any]] = []

    def __call__(self, event: Event[Any]) -> None:
        self._events.append(event)

    @property
    def events(self) -> List[Event[Any]]:
        """All recorded events (a copy)."""
        return list(self._events)

    @property
    def values(self) -> List[Any]:
        """Payloads of the recorded ``next`` events."""
        return [e.value for e in self._events if e.is_next]

    @property
    def terminal_event(self) -> Optional[Event[Any]]:
        """The first ``completed`` or ``error`` event, if any."""
        for event in self._events:
            if event.is_terminal:
                return event
        return None

    @property
    def is_terminated(self) -> bool:
        return self.terminal_event is not None

    def count(self) -> int:
        """Get total event count."""
        return len(self._events)

    def raise_for_error(self) -> None:
        """Raise StreamError if the recorded sequence ended in an error."""
        terminal = self.terminal_event
        if terminal is not None and terminal.is_error:
            raise StreamError(terminal.message)

    def clear(self) -> None:
        """Clear all events (for reuse across subscriptions)."""
        self._events.clear()
