"""In-memory connection graph.

Usage example:
    from bridge_ranker.domain.profiles import Profile
    from bridge_ranker.infrastructure.graph import InMemoryConnectionGraph

    me = Profile(id="me", name="Me")
    graph = InMemoryConnectionGraph()
    graph.add_connections(me, [Profile(id="bo", name="Bo")])
    node_id = graph.find_node_id(me)
    assert node_id == "me"
    assert [p.name for p in graph.get_connections(node_id)] == ["Bo"]
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import override

from ..domain.profiles import Profile
from ..protocols import ConnectionGraph


class UnknownNodeError(LookupError):
    """Raised when a node id is not present in the graph."""

    def __init__(self, node_id: str) -> None:
        super().__init__(f"Unknown graph node: {node_id}")


def _empty_profiles() -> dict[str, Profile]:
    return {}


def _empty_edges() -> dict[str, list[str]]:
    return {}


@dataclass
class InMemoryConnectionGraph(ConnectionGraph):
    """Undirected adjacency map keyed by profile identity.

    Profiles with only a name get their own synthetic node id, so namesakes stay
    separate. Profiles without an id, email or name are ignored.
    """

    _profiles: dict[str, Profile] = field(default_factory=_empty_profiles)
    _edges: dict[str, list[str]] = field(default_factory=_empty_edges)

    def add_profile(self, profile: Profile) -> str | None:
        node_id = profile.identity_key()
        if node_id is None:
            if not profile.name.strip():
                return None
            node_id = self._synthetic_node_id()
        self._profiles.setdefault(node_id, profile)
        self._edges.setdefault(node_id, [])
        return node_id

    def add_connections(self, profile: Profile, connections: Iterable[Profile]) -> None:
        """Add ``profile`` and link it both ways with each connection."""
        node_id = self.add_profile(profile)
        if node_id is None:
            return
        for connection in connections:
            other_id = self.add_profile(connection)
            if other_id is None or other_id == node_id:
                continue
            if other_id not in self._edges[node_id]:
                self._edges[node_id].append(other_id)
            if node_id not in self._edges[other_id]:
                self._edges[other_id].append(node_id)

    def _synthetic_node_id(self) -> str:
        index = len(self._profiles)
        while f"#{index}" in self._profiles:
            index += 1
        return f"#{index}"

    @override
    def find_node_id(self, profile: Profile) -> str | None:
        if profile.id and profile.id in self._profiles:
            return profile.id
        email = (profile.email or "").strip().lower()
        name = profile.name.strip().lower()
        for node_id, known in self._profiles.items():
            if email and (known.email or "").strip().lower() == email:
                return node_id
        if not profile.id and not email and name:
            for node_id, known in self._profiles.items():
                if known.name.strip().lower() == name:
                    return node_id
        return None

    @override
    def has_node(self, node_id: str) -> bool:
        return node_id in self._profiles

    @override
    def get_connections(self, node_id: str) -> list[Profile]:
        if node_id not in self._edges:
            raise UnknownNodeError(node_id)
        return [self._profiles[other] for other in self._edges[node_id]]
