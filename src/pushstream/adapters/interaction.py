# /src/pushstream/adapters/interaction.py
# UI interaction adapter - an unbounded stream of "something happened" signals

import logging
import uuid
from typing import Dict

from .base import SourceAdapter
from ..errors import describe_failure
from ..events.event import Event
from ..observable import Observable
from ..observer import SessionObserver

logger = logging.getLogger(__name__)


class InteractionSource(SourceAdapter):
    """Bridges a widget callback (a tap, a click) into an Observable.

    Wire ``emit`` (or ``tap``) to the toolkit's callback. Every
    subscription registers its observer, and each interaction delivers
    ``next(None)`` to all of them. The source never completes or fails;
    only a listener that raises is ended, with an error event of its own.
    """

    def __init__(self, name: str = "interaction"):
        self._name = name
        self._listeners: Dict[str, SessionObserver] = {}

    @property
    def name(self) -> str:
        return self._name

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def observable(self) -> Observable[None]:
        return Observable.from_handler(self._register)

    def _register(self, observer: SessionObserver) -> None:
        listener_id = str(uuid.uuid4())
        self._listeners[listener_id] = observer
        logger.debug(f"{self._name}: new listener {listener_id}")

    def emit(self) -> int:
        """Signal one interaction to every listener.

        Listeners whose session has ended are dropped first.

        Returns:
            Number of listeners notified
        """
        self._prune()
        listeners = list(self._listeners.items())
        for listener_id, observer in listeners:
            self._safe_deliver(listener_id, observer)
        return len(listeners)

    tap = emit

    def _prune(self) -> None:
        for listener_id, observer in list(self._listeners.items()):
            if observer.stopped:
                del self._listeners[listener_id]
                logger.debug(f"{self._name}: dropped finished listener {listener_id}")

    def _safe_deliver(self, listener_id: str, observer: SessionObserver) -> None:
        """Deliver to one listener without letting it break the others.

        A listener that raises gets one error event, which ends its session.
        """
        try:
            observer(Event.next(None))
        except Exception as e:
            logger.error(f"{self._name}: listener {listener_id} failed: {e}")
            try:
                observer(Event.error(describe_failure(e)))
            except Exception as inner:
                logger.error(f"{self._name}: listener {listener_id} failed on error event: {inner}")
