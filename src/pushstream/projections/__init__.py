# /src/pushstream/projections/__init__.py
# Projections derive views from recorded event sequences

from .base import Projection
from .transcript import TranscriptProjection

__all__ = [
    "Projection",
    "TranscriptProjection",
]
