"""Two-hop intermediary search across both sides of a connection gap.

Usage example:
    >>> from bridge_ranker.application.intermediary_search import find_best_intermediaries
    >>> candidates = find_best_intermediaries(me, target, my_connections, target_connections)
    >>> best = candidates[0] if candidates else None
"""

from __future__ import annotations

from collections.abc import Sequence

from ..domain.intermediaries import (
    DEFAULT_MAX_CONNECTIONS,
    IntermediaryCandidate,
    sample_connections,
    score_intermediary,
)
from ..domain.profiles import Profile, same_person
from ..domain.similarity import calculate_profile_similarity
from ..domain.similarity_config import (
    DEFAULT_SIMILARITY_CONFIG,
    INTERMEDIARY_VIABLE_THRESHOLD,
    SimilarityConfig,
)
from ..observability import get_logger
from .similarity_service import SimilarityFn

DEFAULT_TOP_CANDIDATES = 5


def find_best_intermediaries(
    source: Profile,
    target: Profile,
    source_connections: Sequence[Profile],
    target_connections: Sequence[Profile],
    *,
    config: SimilarityConfig | None = None,
    similarity: SimilarityFn | None = None,
    max_connections: int = DEFAULT_MAX_CONNECTIONS,
    top_n: int = DEFAULT_TOP_CANDIDATES,
    good_threshold: float = INTERMEDIARY_VIABLE_THRESHOLD,
) -> list[IntermediaryCandidate]:
    """Rank bridges from ``source`` to ``target``.

    Outbound candidates are the source's connections, kept as "good" when they
    resemble the target. Inbound candidates are the target's connections, kept
    as "good" when they resemble the source.

    Returns:
        Up to ``top_n`` good candidates by descending score; otherwise the single
        best candidate of any quality; otherwise an empty list when there is
        nothing to rank.
    """
    logger = get_logger("bridge_ranker.intermediary_search")
    cfg = config or DEFAULT_SIMILARITY_CONFIG

    def overall(a: Profile, b: Profile) -> float:
        if similarity is not None:
            return similarity(a, b).overall
        return calculate_profile_similarity(a, b, cfg).overall

    outbound = sample_connections(source_connections, max_connections)
    inbound = sample_connections(target_connections, max_connections)
    if outbound.strategy == "mixed" or inbound.strategy == "mixed":
        logger.info(
            "Sampled connections: source %s of %s, target %s of %s",
            outbound.sampled_count,
            outbound.original_count,
            inbound.sampled_count,
            inbound.original_count,
        )

    good: list[IntermediaryCandidate] = []
    everyone: list[IntermediaryCandidate] = []

    for connection in outbound.sampled:
        if same_person(connection, target) or same_person(connection, source):
            continue
        to_target = overall(connection, target)
        from_source = overall(source, connection)
        candidate = score_intermediary(
            source, connection, target, "outbound", from_source, to_target, cfg
        )
        everyone.append(candidate)
        if to_target > good_threshold:
            good.append(candidate)

    for connection in inbound.sampled:
        if same_person(connection, source) or same_person(connection, target):
            continue
        to_source = overall(connection, source)
        to_target = overall(connection, target)
        candidate = score_intermediary(
            source, connection, target, "inbound", to_source, to_target, cfg
        )
        everyone.append(candidate)
        if to_source > good_threshold:
            good.append(candidate)

    good.sort(key=_by_score, reverse=True)
    everyone.sort(key=_by_score, reverse=True)

    if good:
        return good[:top_n]
    if everyone:
        logger.info(
            "No strong intermediaries for %s; returning best available (low confidence)",
            target.display_name(),
        )
        return everyone[:1]
    return []


def bridge_pairs(
    source: Profile,
    target: Profile,
    source_connections: Sequence[Profile],
    target_connections: Sequence[Profile],
    max_connections: int = DEFAULT_MAX_CONNECTIONS,
) -> list[tuple[Profile, Profile]]:
    """List every profile pair ``find_best_intermediaries`` will score.

    Used to warm a similarity cache concurrently before a search.
    """
    pairs: list[tuple[Profile, Profile]] = []
    for connection in sample_connections(source_connections, max_connections).sampled:
        if same_person(connection, target) or same_person(connection, source):
            continue
        pairs.extend(((source, connection), (connection, target)))
    for connection in sample_connections(target_connections, max_connections).sampled:
        if same_person(connection, source) or same_person(connection, target):
            continue
        pairs.extend(((connection, source), (connection, target)))
    return pairs


def _by_score(candidate: IntermediaryCandidate) -> float:
    return candidate.score
