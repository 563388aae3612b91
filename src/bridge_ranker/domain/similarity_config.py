"""Domain model for similarity weights, matcher thresholds and toggles.

Defaults are calibration constants: the acceptance estimator is tuned against
them, so changing a default is a re-tuning exercise.

Usage example:
    from bridge_ranker.domain.similarity_config import DEFAULT_SIMILARITY_CONFIG

    config = DEFAULT_SIMILARITY_CONFIG.with_overrides(
        weights={"industry": 0.4},
        case_sensitive_skills=True,
    )
    assert config.weights.skills == 0.25
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Self

from .reference_tables import DEFAULT_REFERENCE_TABLES, ReferenceTables


class UnknownOverrideKeyError(KeyError):
    """Raised when an override names a field the target does not have."""

    def __init__(self, target: str, key: str) -> None:
        super().__init__(f"Unknown {target} override: {key!r}")


@dataclass(frozen=True)
class SimilarityWeights:
    """Per-dimension weights; defaults sum to 1.0."""

    industry: float = 0.30
    skills: float = 0.25
    education: float = 0.20
    location: float = 0.15
    companies: float = 0.10

    @property
    def total(self) -> float:
        return self.industry + self.skills + self.education + self.location + self.companies


@dataclass(frozen=True)
class IndustryThresholds:
    exact_match: float = 1.0
    related_industries: float = 0.6
    no_overlap: float = 0.0


@dataclass(frozen=True)
class EducationThresholds:
    same_school: float = 1.0
    same_field: float = 0.5
    no_overlap: float = 0.0


@dataclass(frozen=True)
class LocationThresholds:
    same_city: float = 1.0
    same_state: float = 0.7
    same_country: float = 0.4
    same_region: float = 0.2
    different_regions: float = 0.0


@dataclass(frozen=True)
class SimilarityConfig:
    """Immutable configuration threaded through every matcher.

    Partial weight overrides are applied as given and are not renormalised;
    the overall score is clamped instead.
    """

    weights: SimilarityWeights = SimilarityWeights()
    industry_thresholds: IndustryThresholds = IndustryThresholds()
    education_thresholds: EducationThresholds = EducationThresholds()
    location_thresholds: LocationThresholds = LocationThresholds()
    case_sensitive_skills: bool = False
    case_sensitive_companies: bool = False
    reference_tables: ReferenceTables = DEFAULT_REFERENCE_TABLES

    def with_overrides(
        self,
        *,
        weights: Mapping[str, float] | None = None,
        industry_thresholds: Mapping[str, float] | None = None,
        education_thresholds: Mapping[str, float] | None = None,
        location_thresholds: Mapping[str, float] | None = None,
        case_sensitive_skills: bool | None = None,
        case_sensitive_companies: bool | None = None,
        reference_tables: ReferenceTables | None = None,
    ) -> Self:
        """Return a new config with partial overrides merged over this one."""
        return replace(
            self,
            weights=_merge(self.weights, weights, "weight"),
            industry_thresholds=_merge(
                self.industry_thresholds, industry_thresholds, "industry threshold"
            ),
            education_thresholds=_merge(
                self.education_thresholds, education_thresholds, "education threshold"
            ),
            location_thresholds=_merge(
                self.location_thresholds, location_thresholds, "location threshold"
            ),
            case_sensitive_skills=self.case_sensitive_skills
            if case_sensitive_skills is None
            else case_sensitive_skills,
            case_sensitive_companies=self.case_sensitive_companies
            if case_sensitive_companies is None
            else case_sensitive_companies,
            reference_tables=self.reference_tables
            if reference_tables is None
            else reference_tables,
        )


def _merge[T: (SimilarityWeights, IndustryThresholds, EducationThresholds, LocationThresholds)](
    base: T, overrides: Mapping[str, float] | None, target: str
) -> T:
    if not overrides:
        return base
    allowed = {f.name for f in fields(base)}
    for key in overrides:
        if key not in allowed:
            raise UnknownOverrideKeyError(target, key)
    return replace(base, **dict(overrides))


DEFAULT_SIMILARITY_CONFIG = SimilarityConfig()

# Gate below which a bridge is not meaningfully closer than a cold approach.
INTERMEDIARY_VIABLE_THRESHOLD = 0.35
