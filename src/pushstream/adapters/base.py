# /src/pushstream/adapters/base.py
# Abstract SourceAdapter base class

from abc import ABC, abstractmethod
from typing import Any

from ..observable import Observable


class SourceAdapter(ABC):
    """Abstract base class for adapters that bridge a callback-driven
    producer (network call, UI interaction, ...) into an Observable.

    Adapters only use ``Observable.from_handler``; they never reach into
    the core. Each adapter decides when its routine calls the Observer
    and whether it ever terminates.
    """

    @abstractmethod
    def observable(self) -> Observable[Any]:
        """Build the Observable for this producer."""
        pass

    def __call__(self) -> Observable[Any]:
        """Allow calling the adapter as a function."""
        return self.observable()
