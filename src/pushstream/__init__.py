# /src/pushstream/__init__.py
# pushstream - push-based reactive streams with map/filter operators

from .observable import Observable
from .observer import Observer, SessionObserver
from .errors import StreamError, describe_failure
from .recorder import EventRecorder
from .config import HttpSettings

# Events
from .events import (
    Event,
    EventKind,
)

# Operators
from . import operators

# Adapters
from .adapters import (
    SourceAdapter,
    HttpResponseAdapter,
    InteractionSource,
)

# Projections
from .projections import (
    Projection,
    TranscriptProjection,
)

__version__ = "1.0.0"

__all__ = [
    # Core
    "Observable",
    "Observer",
    "SessionObserver",
    "operators",
    # Events
    "Event",
    "EventKind",
    # Errors
    "StreamError",
    "describe_failure",
    # Consumers
    "EventRecorder",
    # Config
    "HttpSettings",
    # Adapters
    "SourceAdapter",
    "HttpResponseAdapter",
    "InteractionSource",
    # Projections
    "Projection",
    "TranscriptProjection",
]
