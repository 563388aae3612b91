"""Similarity-to-acceptance probability estimation.

Two domains share this module: overall similarity scores map through a
piecewise-linear band table, and two-hop path strengths map through a coarser
ladder with an inbound discount.

Usage example:
    from bridge_ranker.domain.acceptance import estimate_acceptance_rate

    estimate = estimate_acceptance_rate(0.7)
    assert estimate.quality == "excellent"
    assert 0.35 <= estimate.acceptance_rate <= 0.40
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Quality = Literal["excellent", "good", "moderate", "low", "very-low"]
Direction = Literal["outbound", "inbound"]


@dataclass(frozen=True)
class AcceptanceBand:
    """A similarity band ``[floor, ceiling)`` mapped linearly onto ``[low, high]``."""

    floor: float
    ceiling: float
    low: float
    high: float
    margin: float
    quality: Quality
    comparable_to: str

    @property
    def slope(self) -> float:
        return (self.high - self.low) / (self.ceiling - self.floor)

    def point_estimate(self, score: float) -> float:
        return min(self.high, self.low + (score - self.floor) * self.slope)


# Ordered by descending floor; band edges meet so the mapping is continuous.
ACCEPTANCE_BANDS: tuple[AcceptanceBand, ...] = (
    AcceptanceBand(0.75, 1.00, 0.40, 0.45, 0.03, "excellent", "Alumni connection + same industry"),
    AcceptanceBand(0.65, 0.75, 0.35, 0.40, 0.04, "excellent", "Same school connection"),
    AcceptanceBand(0.50, 0.65, 0.25, 0.35, 0.04, "good", "Same company (past employer)"),
    AcceptanceBand(0.45, 0.50, 0.22, 0.25, 0.03, "good", "Same industry"),
    AcceptanceBand(0.25, 0.45, 0.15, 0.22, 0.02, "moderate", "Cold outreach with personalization"),
    AcceptanceBand(0.15, 0.25, 0.12, 0.15, 0.02, "low", "Pure cold outreach"),
    AcceptanceBand(0.00, 0.15, 0.08, 0.12, 0.02, "very-low", "Cold outreach with no common ground"),
)

# (min path strength, base acceptance) ladder for two-hop introductions.
PATH_ACCEPTANCE_LADDER: tuple[tuple[float, float], ...] = (
    (0.75, 0.40),
    (0.60, 0.32),
    (0.50, 0.25),
)
PATH_ACCEPTANCE_FLOOR = 0.18
INBOUND_ACCEPTANCE_FACTOR = 0.75


@dataclass(frozen=True)
class AcceptanceEstimate:
    """Expected outreach acceptance for a similarity score."""

    similarity_score: float
    acceptance_rate: float
    lower_bound: float
    upper_bound: float
    quality: Quality
    comparable_to: str


def estimate_acceptance_rate(similarity_score: float) -> AcceptanceEstimate:
    """Map an overall similarity score to an acceptance estimate.

    The input is clamped to [0, 1]; the result is non-decreasing in the score.
    """
    score = max(0.0, min(1.0, similarity_score))
    band = _band_for(score)
    rate = band.point_estimate(score)
    return AcceptanceEstimate(
        similarity_score=score,
        acceptance_rate=rate,
        lower_bound=max(0.0, rate - band.margin),
        upper_bound=min(1.0, rate + band.margin),
        quality=band.quality,
        comparable_to=band.comparable_to,
    )


def estimate_path_acceptance(path_strength: float, direction: Direction) -> float:
    """Map a path strength to acceptance, discounted for inbound paths."""
    base_rate = PATH_ACCEPTANCE_FLOOR
    for min_strength, rate in PATH_ACCEPTANCE_LADDER:
        if path_strength >= min_strength:
            base_rate = rate
            break
    if direction == "inbound":
        return base_rate * INBOUND_ACCEPTANCE_FACTOR
    return base_rate


def _band_for(score: float) -> AcceptanceBand:
    for band in ACCEPTANCE_BANDS:
        if score >= band.floor:
            return band
    return ACCEPTANCE_BANDS[-1]
