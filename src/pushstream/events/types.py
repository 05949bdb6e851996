# /src/pushstream/events/types.py
# Event kind definitions for push-based streams

from enum import Enum


class EventKind(str, Enum):
    """The three shapes an Event can take.

    NEXT carries a value and may occur any number of times.
    COMPLETED and ERROR are terminal: at most one of them ends a
    subscription session, and nothing follows it.
    """

    NEXT = "next"
    COMPLETED = "completed"
    ERROR = "error"

    @property
    def is_terminal(self) -> bool:
        return self is not EventKind.NEXT
