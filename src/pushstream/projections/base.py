# /src/pushstream/projections/base.py
# Abstract Projection base class

from abc import ABC, abstractmethod
from typing import Any, Generic, List, TypeVar

from ..events.event import Event

T = TypeVar("T")


class Projection(ABC, Generic[T]):
    """Abstract base class for event projections.

    Projections derive views from a recorded event sequence. They are
    pure functions: the events are not modified.
    """

    @abstractmethod
    def project(self, events: List[Event[Any]]) -> T:
        """Project events into the target format.

        Args:
            events: Events in delivery order

        Returns:
            The projected output
        """
        pass

    def __call__(self, events: List[Event[Any]]) -> T:
        """Allow calling projection as a function."""
        return self.project(events)
