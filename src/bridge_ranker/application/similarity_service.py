"""Cached and concurrent pairwise similarity.

Usage example:
    >>> from bridge_ranker.application.similarity_service import SimilarityService
    >>> from bridge_ranker.infrastructure.cache import InMemorySimilarityCache
    >>> service = SimilarityService(cache=InMemorySimilarityCache())
    >>> result = service.similarity(alice, bob)
    >>> results = service.score_pairs([(alice, bob), (alice, carol)], max_workers=4)
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from ..domain.profiles import Profile
from ..domain.similarity import SimilarityBreakdown, calculate_profile_similarity
from ..domain.similarity_config import DEFAULT_SIMILARITY_CONFIG, SimilarityConfig
from ..protocols import SimilarityCache

type SimilarityFn = Callable[[Profile, Profile], SimilarityBreakdown]


@dataclass(frozen=True)
class SimilarityService:
    """Pairwise similarity backed by an optional cache.

    A cache must only be shared between services using the same configuration.
    Omitting it never changes results.
    """

    config: SimilarityConfig = DEFAULT_SIMILARITY_CONFIG
    cache: SimilarityCache | None = None

    def similarity(self, profile1: Profile, profile2: Profile) -> SimilarityBreakdown:
        key1 = profile1.identity_key()
        key2 = profile2.identity_key()
        if self.cache is None or key1 is None or key2 is None:
            return calculate_profile_similarity(profile1, profile2, self.config)

        cached = self.cache.get(key1, key2)
        if cached is not None:
            return cached
        result = calculate_profile_similarity(profile1, profile2, self.config)
        self.cache.set(key1, key2, result)
        return result

    def score_pairs(
        self,
        pairs: Sequence[tuple[Profile, Profile]],
        *,
        max_workers: int = 4,
    ) -> list[SimilarityBreakdown]:
        """Score many pairs, preserving input order."""
        if max_workers <= 1 or len(pairs) <= 1:
            return [self.similarity(a, b) for a, b in pairs]
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(executor.map(lambda pair: self.similarity(*pair), pairs))
