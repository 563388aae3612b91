"""Connection sampling and single-candidate bridge scoring.

Path strength is the geometric mean of the two similarity legs, so a bridge is
only as strong as its weaker link: legs (0.9, 0.6) give ~0.735 while the
balanced (0.75, 0.75) gives 0.75.

Usage example:
    from bridge_ranker.domain.intermediaries import score_intermediary
    from bridge_ranker.domain.profiles import Profile

    me, bridge, target = Profile(name="Me"), Profile(name="Bo"), Profile(name="Tia")
    candidate = score_intermediary(me, bridge, target, "outbound", leg_a=0.75, leg_b=0.75)
    assert candidate.path_strength == 0.75
    assert candidate.score == 0.75 * 0.8
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from typing import Literal

from .acceptance import Direction, estimate_path_acceptance
from .profiles import Profile
from .similarity import calculate_profile_similarity
from .similarity_config import SimilarityConfig

DEFAULT_MAX_CONNECTIONS = 500

DIRECTION_MULTIPLIERS: dict[Direction, float] = {
    "outbound": 0.8,  # bridge is already the caller's connection
    "inbound": 0.6,  # caller must reach the target's connection first
}

SampleStrategy = Literal["all", "mixed"]


@dataclass(frozen=True)
class ConnectionSample:
    """A bounded view of a connection list."""

    sampled: tuple[Profile, ...]
    strategy: SampleStrategy
    original_count: int
    sampled_count: int


@dataclass(frozen=True)
class IntermediaryCandidate:
    """A scored two-hop introduction path through ``person``."""

    person: Profile
    score: float
    path_strength: float
    direction: Direction
    source_to_intermediary: float
    intermediary_to_target: float
    estimated_acceptance: float
    reasoning: str


def sample_connections(
    connections: Sequence[Profile], max_connections: int = DEFAULT_MAX_CONNECTIONS
) -> ConnectionSample:
    """Bound a connection list to ``max_connections``.

    Lists within budget are returned whole. Larger lists take half the budget by
    recency and half by activity score, de-duplicated by identity.
    """
    budget = max(0, max_connections)
    if len(connections) <= budget:
        return ConnectionSample(
            sampled=tuple(connections),
            strategy="all",
            original_count=len(connections),
            sampled_count=len(connections),
        )

    recent_budget = budget // 2
    active_budget = budget - recent_budget
    by_recent = sorted(connections, key=_recency_key, reverse=True)[:recent_budget]
    by_active = sorted(connections, key=_activity_key, reverse=True)[:active_budget]

    seen: set[str] = set()
    merged: list[Profile] = []
    for connection in (*by_recent, *by_active):
        identity = _sample_identity(connection)
        if identity is not None:
            if identity in seen:
                continue
            seen.add(identity)
        merged.append(connection)

    sampled = tuple(merged[:budget])
    return ConnectionSample(
        sampled=sampled,
        strategy="mixed",
        original_count=len(connections),
        sampled_count=len(sampled),
    )


def path_strength(leg_a: float, leg_b: float) -> float:
    """Geometric mean of the two legs (negative legs treated as 0)."""
    return math.sqrt(max(0.0, leg_a) * max(0.0, leg_b))


def score_intermediary(
    source: Profile,
    intermediary: Profile,
    target: Profile,
    direction: Direction,
    leg_a: float | None = None,
    leg_b: float | None = None,
    config: SimilarityConfig | None = None,
) -> IntermediaryCandidate:
    """Score ``intermediary`` as a bridge from ``source`` to ``target``.

    ``leg_a`` is sim(source, intermediary) and ``leg_b`` is sim(intermediary,
    target); either is computed when not supplied.
    """
    sim_from = (
        leg_a
        if leg_a is not None
        else calculate_profile_similarity(source, intermediary, config).overall
    )
    sim_to = (
        leg_b
        if leg_b is not None
        else calculate_profile_similarity(intermediary, target, config).overall
    )

    strength = path_strength(sim_from, sim_to)
    return IntermediaryCandidate(
        person=intermediary,
        score=strength * DIRECTION_MULTIPLIERS[direction],
        path_strength=strength,
        direction=direction,
        source_to_intermediary=sim_from,
        intermediary_to_target=sim_to,
        estimated_acceptance=estimate_path_acceptance(strength, direction),
        reasoning=_reasoning(intermediary, target, direction, sim_from, sim_to),
    )


def _reasoning(
    intermediary: Profile,
    target: Profile,
    direction: Direction,
    sim_from: float,
    sim_to: float,
) -> str:
    bridge = intermediary.display_name()
    target_name = target.display_name()
    if direction == "outbound":
        return (
            f"{bridge} is in your network and similar to {target_name} "
            f"({_pct(sim_to)} match; {_pct(sim_from)} match with you). "
            f"Ask {bridge} to introduce you!"
        )
    return (
        f"{bridge} is similar to you ({_pct(sim_from)} match) and connected to "
        f"{target_name} ({_pct(sim_to)} match). Connect with {bridge} first!"
    )


def _pct(value: float) -> str:
    return f"{value * 100:.0f}%"


def _recency_key(profile: Profile) -> tuple[bool, date]:
    return (profile.connected_on is not None, profile.connected_on or date.min)


def _activity_key(profile: Profile) -> float:
    return profile.activity_score if profile.activity_score is not None else 0.0


def _sample_identity(profile: Profile) -> str | None:
    for value in (profile.email, profile.name, profile.id):
        if value and value.strip():
            return value.strip().lower()
    return None
