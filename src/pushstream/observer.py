# /src/pushstream/observer.py
# Observer contract and the per-session terminal-event guard

import logging
from typing import Any, Callable, Generic, TypeVar

from .events.event import Event

T = TypeVar("T")

# Type alias for anything that consumes events
Observer = Callable[[Event[Any]], None]

logger = logging.getLogger(__name__)


class SessionObserver(Generic[T]):
    """Wraps a caller's Observer for the lifetime of one subscription session.

    The guard enforces the terminal-event contract:
    - Events are forwarded in the order they are delivered
    - The first ``completed`` or ``error`` ends the session
    - Anything delivered after that is dropped

    One instance per ``subscribe`` call. Never shared between sessions.
    """

    def __init__(self, observer: Observer):
        self._observer = observer
        self._stopped = False

    @property
    def stopped(self) -> bool:
        """True once a terminal event has been forwarded."""
        return self._stopped

    def __call__(self, event: Event[T]) -> None:
        if self._stopped:
            logger.debug(f"Dropped {event} delivered after terminal event")
            return

        if event.is_terminal:
            self._stopped = True

        self._observer(event)
