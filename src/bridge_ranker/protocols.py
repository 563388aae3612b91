"""Protocol definitions for dependency injection.

These protocols define the abstract interfaces that ranking components depend on,
enabling isolated unit testing with in-memory implementations.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    import pandas as pd

    from .domain.profiles import Profile
    from .domain.similarity import SimilarityBreakdown


@runtime_checkable
class SimilarityCache(Protocol):
    """Order-independent cache of pairwise similarity results."""

    def get(self, id1: str, id2: str) -> SimilarityBreakdown | None:
        """Return the cached result for the pair, or None when absent or expired."""
        ...

    def set(self, id1: str, id2: str, value: SimilarityBreakdown) -> None:
        """Store a result for the pair, refreshing its expiry."""
        ...

    def sweep(self) -> int:
        """Drop expired entries and return how many were removed."""
        ...

    def clear(self) -> None:
        """Drop every entry."""
        ...


@runtime_checkable
class ConnectionGraph(Protocol):
    """External graph collaborator exposing first-degree connection lookups."""

    def find_node_id(self, profile: Profile) -> str | None:
        """Return the graph node id for a profile, or None when it is not present."""
        ...

    def has_node(self, node_id: str) -> bool:
        """Check whether a node exists in the graph."""
        ...

    def get_connections(self, node_id: str) -> list[Profile]:
        """Return the first-degree connections of a node.

        Raises:
            LookupError: When the node is unknown to the graph.
        """
        ...


@runtime_checkable
class FileSystem(Protocol):
    """Abstract filesystem for reading profile and connection data.

    The ranker only reads. ``write_json`` and ``write_text`` exist so tests can
    seed fixtures through the same interface they read from.
    """

    def read_csv(self, path: Path) -> pd.DataFrame:
        """Read CSV file into DataFrame."""
        ...

    def read_json(self, path: Path) -> dict[str, object]:
        """Read JSON object file."""
        ...

    def write_json(self, data: Mapping[str, object], path: Path) -> None:
        """Write JSON file."""
        ...

    def read_text(self, path: Path) -> str:
        """Read text file."""
        ...

    def write_text(self, content: str, path: Path) -> None:
        """Write text file."""
        ...

    def exists(self, path: Path) -> bool:
        """Check if path exists."""
        ...
