# /src/pushstream/projections/transcript.py
# TranscriptProjection - renders an event sequence as readable text

from typing import Any, List

from .base import Projection
from ..events.event import Event


class TranscriptProjection(Projection[str]):
    """Project events into a readable transcript, one event per line.

    Lines use the event rendering: ``next(1)``, ``completed``,
    ``error("message")``.
    """

    def __init__(self, numbered: bool = False, header: bool = False):
        """Initialize the projection.

        Args:
            numbered: Prefix each line with its position in the sequence
            header: Start with a summary line counting values and terminal state
        """
        self.numbered = numbered
        self.header = header

    def project(self, events: List[Event[Any]]) -> str:
        """Project events into a transcript string."""
        lines = []

        if self.header:
            lines.append(self._summary(events))

        for index, event in enumerate(events, start=1):
            if self.numbered:
                lines.append(f"{index:>3}: {event}")
            else:
                lines.append(str(event))

        return "\n".join(lines)

    def _summary(self, events: List[Event[Any]]) -> str:
        values = sum(1 for e in events if e.is_next)
        terminal = next((e for e in events if e.is_terminal), None)
        state = terminal.kind.value if terminal is not None else "open"
        return f"=== {values} value(s), {state} ==="
