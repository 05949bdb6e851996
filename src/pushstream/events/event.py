# /src/pushstream/events/event.py
# Event - the unit of communication between a source and its observers

import json
from dataclasses import dataclass
from typing import Any, Dict, Generic, Mapping, Optional, TypeVar

from .types import EventKind

T = TypeVar("T")


@dataclass(frozen=True)
class Event(Generic[T]):
    """A single signal delivered to an Observer.

    Exactly one of three shapes, discriminated by ``kind``:
    - ``next(value)``: a value arrived
    - ``completed``: the sequence ended successfully
    - ``error(message)``: the sequence failed with a description

    Use the ``next`` / ``completed`` / ``error`` constructors rather than
    building instances by hand; they keep the unused fields empty.
    """
    kind: EventKind
    value: Optional[T] = None
    message: Optional[str] = None

    @classmethod
    def next(cls, value: T) -> "Event[T]":
        """A value-carrying event."""
        return cls(kind=EventKind.NEXT, value=value)

    @classmethod
    def completed(cls) -> "Event[Any]":
        """The successful terminal event."""
        return cls(kind=EventKind.COMPLETED)

    @classmethod
    def error(cls, message: str) -> "Event[Any]":
        """The failing terminal event."""
        if not isinstance(message, str):
            raise TypeError(f"error message must be a str, got {type(message).__name__}")
        return cls(kind=EventKind.ERROR, message=message)

    # ========== Inspection ==========

    @property
    def is_next(self) -> bool:
        return self.kind is EventKind.NEXT

    @property
    def is_completed(self) -> bool:
        return self.kind is EventKind.COMPLETED

    @property
    def is_error(self) -> bool:
        return self.kind is EventKind.ERROR

    @property
    def is_terminal(self) -> bool:
        """True for ``completed`` and ``error``."""
        return self.kind.is_terminal

    # ========== Rendering ==========

    def __str__(self) -> str:
        if self.kind is EventKind.NEXT:
            return f"next({_render(self.value)})"
        if self.kind is EventKind.ERROR:
            return f"error({_render(self.message)})"
        return "completed"

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dictionary."""
        if self.kind is EventKind.NEXT:
            return {"kind": self.kind.value, "value": self.value}
        if self.kind is EventKind.ERROR:
            return {"kind": self.kind.value, "message": self.message}
        return {"kind": self.kind.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Event[Any]":
        """Deserialize from dictionary.

        Raises:
            ValueError: If ``data`` is not a mapping describing an event
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"Not an event: {data!r}")
        try:
            kind = EventKind(data["kind"])
        except (KeyError, ValueError) as e:
            raise ValueError(f"Not an event: {data!r}") from e

        if kind is EventKind.NEXT:
            return cls.next(data.get("value"))
        if kind is EventKind.ERROR:
            message = data.get("message", "")
            if not isinstance(message, str):
                raise ValueError(f"Error event message must be a str: {data!r}")
            return cls.error(message)
        return cls.completed()


def _render(payload: Any) -> str:
    # Strings are quoted so next("1") and next(1) stay distinguishable
    if isinstance(payload, str):
        return json.dumps(payload, ensure_ascii=False)
    return repr(payload)
