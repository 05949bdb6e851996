# /src/pushstream/events/__init__.py
# Event primitives for push-based streams

from .types import EventKind
from .event import Event

__all__ = [
    "EventKind",
    "Event",
]
