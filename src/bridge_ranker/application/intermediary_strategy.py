"""Turn an intermediary search over a connection graph into an outreach plan.

Usage example:
    >>> from bridge_ranker.application.intermediary_strategy import try_intermediary_strategy
    >>> graph = ...  # Injected ConnectionGraph from the CLI/composition root
    >>> strategy = try_intermediary_strategy(me, target, graph)
    >>> if strategy is None:
    ...     print("No bridge: fall back to cold outreach")
"""

from __future__ import annotations

from dataclasses import dataclass

from ..domain.intermediaries import DEFAULT_MAX_CONNECTIONS, IntermediaryCandidate
from ..domain.profiles import Profile
from ..domain.similarity_config import INTERMEDIARY_VIABLE_THRESHOLD, SimilarityConfig
from ..exceptions import SourceProfileNotFoundError
from ..observability import get_logger
from ..protocols import ConnectionGraph
from .intermediary_search import DEFAULT_TOP_CANDIDATES, find_best_intermediaries
from .similarity_service import SimilarityFn

LOW_CONFIDENCE_NOTE = "(Note: Limited similarity - consider building relationship first)"


@dataclass(frozen=True)
class IntermediaryStrategy:
    """Recommended introduction path with actionable next steps."""

    intermediary: IntermediaryCandidate
    candidates: tuple[IntermediaryCandidate, ...]
    confidence: float
    low_confidence: bool
    estimated_acceptance: float
    reasoning: str
    next_steps: tuple[str, ...]


def intermediary_next_steps(candidate: IntermediaryCandidate, target: Profile) -> tuple[str, ...]:
    bridge = candidate.person.display_name()
    target_name = target.display_name()
    if candidate.direction == "outbound":
        return (
            f"Connect with {bridge} first (if not already connected)",
            "Build relationship by engaging with their posts",
            f"Ask {bridge} to introduce you to {target_name}",
            f"Alternative: Message {target_name} mentioning {bridge} as a mutual connection",
        )
    return (
        f"Reach out to {bridge} first",
        f"Mention similarities with {bridge} ({candidate.source_to_intermediary * 100:.0f}% match)",
        "Build relationship before asking for introduction",
        f"After connection is established, ask for introduction to {target_name}",
    )


def try_intermediary_strategy(
    source: Profile,
    target: Profile,
    graph: ConnectionGraph,
    *,
    config: SimilarityConfig | None = None,
    similarity: SimilarityFn | None = None,
    max_connections: int = DEFAULT_MAX_CONNECTIONS,
    top_n: int = DEFAULT_TOP_CANDIDATES,
    good_threshold: float = INTERMEDIARY_VIABLE_THRESHOLD,
    low_confidence_threshold: float = INTERMEDIARY_VIABLE_THRESHOLD,
) -> IntermediaryStrategy | None:
    """Find the best bridge to ``target`` using connections from ``graph``.

    Returns None when the source is not in the graph, a graph lookup fails, or
    there is nobody to rank; callers then fall back to cold outreach.
    """
    logger = get_logger("bridge_ranker.intermediary_strategy")
    try:
        source_id = graph.find_node_id(source)
        if source_id is None:
            raise SourceProfileNotFoundError(source.display_name())
        source_connections = graph.get_connections(source_id)

        target_id = graph.find_node_id(target)
        target_connections: list[Profile] = []
        if target_id is not None and graph.has_node(target_id):
            target_connections = graph.get_connections(target_id)
    except (SourceProfileNotFoundError, LookupError, OSError) as exc:
        logger.warning("Intermediary search failed, falling back to cold outreach: %s", exc)
        return None

    candidates = find_best_intermediaries(
        source,
        target,
        source_connections,
        target_connections,
        config=config,
        similarity=similarity,
        max_connections=max_connections,
        top_n=top_n,
        good_threshold=good_threshold,
    )
    if not candidates:
        return None

    best = candidates[0]
    low_confidence = best.score <= low_confidence_threshold
    reasoning = f"{best.reasoning} {LOW_CONFIDENCE_NOTE}" if low_confidence else best.reasoning
    return IntermediaryStrategy(
        intermediary=best,
        candidates=tuple(candidates),
        confidence=best.score,
        low_confidence=low_confidence,
        estimated_acceptance=best.estimated_acceptance,
        reasoning=reasoning,
        next_steps=intermediary_next_steps(best, target),
    )
