"""Concrete infrastructure implementations and shared helpers."""

from .cache import InMemorySimilarityCache
from .graph import InMemoryConnectionGraph
from .io.filesystem import LocalFileSystem

__all__ = [
    "InMemoryConnectionGraph",
    "InMemorySimilarityCache",
    "LocalFileSystem",
]
