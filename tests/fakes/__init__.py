"""Exports for test fakes."""

from .cache import RecordingSimilarityCache
from .clock import FakeClock
from .filesystem import InMemoryFileSystem
from .graph import FailingConnectionGraph

__all__ = [
    "FailingConnectionGraph",
    "FakeClock",
    "InMemoryFileSystem",
    "RecordingSimilarityCache",
]
