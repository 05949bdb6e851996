# /src/pushstream/adapters/__init__.py
# Adapters bridging callback-driven producers into Observables

from .base import SourceAdapter
from .http import HttpResponseAdapter
from .interaction import InteractionSource

__all__ = [
    "SourceAdapter",
    "HttpResponseAdapter",
    "InteractionSource",
]
