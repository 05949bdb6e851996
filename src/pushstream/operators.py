# /src/pushstream/operators.py
# Transformation operators - map and filter over an Observable

from typing import Callable, TypeVar

from .errors import describe_failure
from .events.event import Event
from .observable import Observable
from .observer import SessionObserver

T = TypeVar("T")
U = TypeVar("U")


def map(source: Observable[T], transform: Callable[[T], U]) -> Observable[U]:
    """Derive an Observable that applies ``transform`` to every value.

    ``completed`` and ``error`` pass through unchanged. If ``transform``
    raises, the downstream observer receives a single ``error`` event and
    the remaining upstream events of that session are ignored.
    """

    def subscribe_mapped(downstream: SessionObserver[U]) -> None:
        def forward(event: Event[T]) -> None:
            if downstream.stopped:
                return
            if not event.is_next:
                downstream(event)
                return

            try:
                mapped = transform(event.value)
            except Exception as e:
                downstream(Event.error(describe_failure(e)))
                return
            downstream(Event.next(mapped))

        source.subscribe(forward)

    return Observable.from_handler(subscribe_mapped)


def filter(source: Observable[T], predicate: Callable[[T], bool]) -> Observable[T]:
    """Derive an Observable that keeps only values satisfying ``predicate``.

    Values are never altered and their order is kept. Terminal events and
    predicate failures are handled as in ``map``.
    """

    def subscribe_filtered(downstream: SessionObserver[T]) -> None:
        def forward(event: Event[T]) -> None:
            if downstream.stopped:
                return
            if not event.is_next:
                downstream(event)
                return

            try:
                keep = predicate(event.value)
            except Exception as e:
                downstream(Event.error(describe_failure(e)))
                return
            if keep:
                downstream(event)

        source.subscribe(forward)

    return Observable.from_handler(subscribe_filtered)
