"""Domain modules for the ranking core."""

from .acceptance import AcceptanceEstimate, estimate_acceptance_rate, estimate_path_acceptance
from .intermediaries import (
    ConnectionSample,
    IntermediaryCandidate,
    sample_connections,
    score_intermediary,
)
from .profiles import EducationEntry, Profile, WorkEntry
from .similarity import (
    SimilarityBreakdown,
    calculate_detailed_similarity,
    calculate_profile_similarity,
)

__all__ = [
    "AcceptanceEstimate",
    "ConnectionSample",
    "EducationEntry",
    "IntermediaryCandidate",
    "Profile",
    "SimilarityBreakdown",
    "WorkEntry",
    "calculate_detailed_similarity",
    "calculate_profile_similarity",
    "estimate_acceptance_rate",
    "estimate_path_acceptance",
    "sample_connections",
    "score_intermediary",
]
