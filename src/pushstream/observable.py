# /src/pushstream/observable.py
# Observable - a lazy, re-runnable source of events

import logging
from typing import Any, Callable, Generic, Iterable, TypeVar

from .errors import describe_failure
from .events.event import Event
from .observer import Observer, SessionObserver

T = TypeVar("T")
U = TypeVar("U")

# Type alias for the routine an Observable runs on every subscribe
SubscribeRoutine = Callable[[Observer], None]

logger = logging.getLogger(__name__)


class Observable(Generic[T]):
    """A cold source of events.

    An Observable holds a single subscription routine and nothing else.
    Every ``subscribe`` call runs that routine from scratch with the
    caller's Observer, so two subscriptions never share produced events.

    Failures are reported through the event channel: ``subscribe`` turns
    an exception raised by the routine into an ``error`` event.
    """

    __slots__ = ("_routine",)

    def __init__(self, routine: SubscribeRoutine):
        self._routine = routine

    # ========== Construction ==========

    @classmethod
    def from_handler(cls, routine: SubscribeRoutine) -> "Observable[T]":
        """Build an Observable from a subscription routine.

        The routine receives an Observer and may call it now, later, or
        never. No validation is performed.
        """
        return cls(routine)

    @classmethod
    def from_sequence(cls, items: Iterable[T]) -> "Observable[T]":
        """Emit each item as ``next(item)`` in order, then ``completed``.

        The items are captured once here so every subscription sees the
        same sequence, even when ``items`` is a one-shot iterator.
        """
        values = tuple(items)

        def emit_all(observer: Observer) -> None:
            for value in values:
                observer(Event.next(value))
            observer(Event.completed())

        return cls(emit_all)

    @classmethod
    def empty(cls) -> "Observable[Any]":
        """An Observable that completes immediately."""
        return cls.from_sequence(())

    @classmethod
    def failed(cls, message: str) -> "Observable[Any]":
        """An Observable that fails immediately with ``message``."""
        event = Event.error(message)

        def fail(observer: Observer) -> None:
            observer(event)

        return cls(fail)

    # ========== Subscription ==========

    def subscribe(self, observer: Observer) -> None:
        """Run the subscription routine with ``observer``.

        Synchronous routines deliver every event before this returns;
        asynchronous ones deliver later from their own context.
        """
        session: SessionObserver[T] = SessionObserver(observer)
        logger.debug(f"New subscription to {self!r}")

        try:
            self._routine(session)
        except Exception as e:
            if session.stopped:
                logger.error(f"Subscription routine failed after termination: {e}")
                return
            session(Event.error(describe_failure(e)))

    # ========== Operators ==========

    def map(self, transform: Callable[[T], U]) -> "Observable[U]":
        """Shorthand for ``operators.map(self, transform)``."""
        from . import operators
        return operators.map(self, transform)

    def filter(self, predicate: Callable[[T], bool]) -> "Observable[T]":
        """Shorthand for ``operators.filter(self, predicate)``."""
        from . import operators
        return operators.filter(self, predicate)

    def __repr__(self) -> str:
        name = getattr(self._routine, "__qualname__", type(self._routine).__name__)
        return f"Observable({name})"
