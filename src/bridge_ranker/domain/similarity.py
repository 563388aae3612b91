"""Weighted multi-dimensional profile similarity.

Usage example:
    from bridge_ranker.domain.profiles import Profile, WorkEntry
    from bridge_ranker.domain.similarity import calculate_profile_similarity

    a = Profile(name="A", work_experience=(WorkEntry(company="Acme", industry="Tech"),))
    b = Profile(name="B", work_experience=(WorkEntry(company="Beta", industry="tech"),))
    result = calculate_profile_similarity(a, b)
    assert result.breakdown.industry == 1.0
    assert 0.0 <= result.overall <= 1.0
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from .locations import MatchLevel, ParsedLocation, location_match_level, parse_location
from .matchers import (
    company_history_jaccard,
    company_names,
    education_overlap,
    industry_overlap,
    industry_tags,
    location_similarity,
    skill_jaccard_similarity,
    skill_names,
)
from .profiles import Profile
from .similarity_config import DEFAULT_SIMILARITY_CONFIG, SimilarityConfig


@dataclass(frozen=True)
class DimensionScores:
    """Per-dimension scores, each in [0, 1]."""

    industry: float = 0.0
    skills: float = 0.0
    education: float = 0.0
    location: float = 0.0
    companies: float = 0.0

    def as_dict(self) -> dict[str, float]:
        return {
            "industry": self.industry,
            "skills": self.skills,
            "education": self.education,
            "location": self.location,
            "companies": self.companies,
        }


@dataclass(frozen=True)
class SimilarityBreakdown:
    """Overall weighted similarity plus its per-dimension breakdown."""

    overall: float
    breakdown: DimensionScores

    @classmethod
    def empty(cls) -> SimilarityBreakdown:
        return cls(overall=0.0, breakdown=DimensionScores())


@dataclass(frozen=True)
class SetComparison:
    profile1_count: int
    profile2_count: int
    intersection_count: int
    union_count: int


@dataclass(frozen=True)
class EducationDetails:
    profile1_schools: tuple[str, ...]
    profile2_schools: tuple[str, ...]
    matched_schools: tuple[str, ...]
    matched_fields: tuple[str, ...]


@dataclass(frozen=True)
class IndustryDetails:
    profile1_industries: tuple[str, ...]
    profile2_industries: tuple[str, ...]
    exact_matches: tuple[str, ...]
    related_matches: tuple[tuple[str, str], ...]


@dataclass(frozen=True)
class LocationDetails:
    profile1_location: ParsedLocation
    profile2_location: ParsedLocation
    match_level: MatchLevel


@dataclass(frozen=True)
class SimilarityMetadata:
    """Observability detail for a similarity calculation."""

    calculated_at: datetime
    config: SimilarityConfig
    skills_compared: SetComparison
    companies_compared: SetComparison
    education_details: EducationDetails
    industry_details: IndustryDetails
    location_details: LocationDetails


@dataclass(frozen=True)
class DetailedSimilarity:
    overall: float
    breakdown: DimensionScores
    metadata: SimilarityMetadata


def calculate_profile_similarity(
    profile1: Profile | None,
    profile2: Profile | None,
    config: SimilarityConfig | None = None,
) -> SimilarityBreakdown:
    """Combine dimension matchers into one weighted, clamped score.

    A missing profile on either side yields an all-zero breakdown.
    """
    if profile1 is None or profile2 is None:
        return SimilarityBreakdown.empty()

    cfg = config or DEFAULT_SIMILARITY_CONFIG
    scores = DimensionScores(
        industry=industry_overlap(profile1, profile2, cfg),
        skills=skill_jaccard_similarity(profile1, profile2, cfg),
        education=education_overlap(profile1, profile2, cfg),
        location=location_similarity(profile1, profile2, cfg),
        companies=company_history_jaccard(profile1, profile2, cfg),
    )
    weights = cfg.weights
    raw = (
        scores.industry * weights.industry
        + scores.skills * weights.skills
        + scores.education * weights.education
        + scores.location * weights.location
        + scores.companies * weights.companies
    )
    return SimilarityBreakdown(overall=max(0.0, min(1.0, raw)), breakdown=scores)


def calculate_detailed_similarity(
    profile1: Profile | None,
    profile2: Profile | None,
    config: SimilarityConfig | None = None,
) -> DetailedSimilarity:
    """Same scores as ``calculate_profile_similarity`` plus comparison metadata.

    A missing profile is described as an empty one.
    """
    cfg = config or DEFAULT_SIMILARITY_CONFIG
    basic = calculate_profile_similarity(profile1, profile2, cfg)
    profile1 = profile1 or Profile()
    profile2 = profile2 or Profile()

    skills1 = skill_names(profile1, case_sensitive=cfg.case_sensitive_skills)
    skills2 = skill_names(profile2, case_sensitive=cfg.case_sensitive_skills)
    companies1 = company_names(profile1, case_sensitive=cfg.case_sensitive_companies)
    companies2 = company_names(profile2, case_sensitive=cfg.case_sensitive_companies)

    tables = cfg.reference_tables
    location1 = parse_location(profile1.location, tables)
    location2 = parse_location(profile2.location, tables)

    return DetailedSimilarity(
        overall=basic.overall,
        breakdown=basic.breakdown,
        metadata=SimilarityMetadata(
            calculated_at=datetime.now(UTC),
            config=cfg,
            skills_compared=_compare_sets(skills1, skills2),
            companies_compared=_compare_sets(companies1, companies2),
            education_details=_education_details(profile1, profile2),
            industry_details=_industry_details(profile1, profile2, cfg),
            location_details=LocationDetails(
                profile1_location=location1,
                profile2_location=location2,
                match_level=location_match_level(location1, location2),
            ),
        ),
    )


def _compare_sets(a: set[str], b: set[str]) -> SetComparison:
    return SetComparison(
        profile1_count=len(a),
        profile2_count=len(b),
        intersection_count=len(a & b),
        union_count=len(a | b),
    )


def _education_details(profile1: Profile, profile2: Profile) -> EducationDetails:
    schools1 = tuple(entry.school for entry in profile1.education if entry.school)
    schools2 = tuple(entry.school for entry in profile2.education if entry.school)
    fields1 = tuple(entry.field for entry in profile1.education if entry.field)
    fields2 = tuple(entry.field for entry in profile2.education if entry.field)
    folded_schools2 = {school.lower() for school in schools2}
    folded_fields2 = {field.lower() for field in fields2}
    return EducationDetails(
        profile1_schools=schools1,
        profile2_schools=schools2,
        matched_schools=tuple(s for s in schools1 if s.lower() in folded_schools2),
        matched_fields=tuple(f for f in fields1 if f.lower() in folded_fields2),
    )


def _industry_details(
    profile1: Profile, profile2: Profile, config: SimilarityConfig
) -> IndustryDetails:
    industries1 = tuple(industry_tags(profile1))
    industries2 = tuple(industry_tags(profile2))
    folded2 = {industry.lower() for industry in industries2}
    related: list[tuple[str, str]] = []
    for i1 in industries1:
        for i2 in industries2:
            if i1.lower() != i2.lower() and config.reference_tables.are_industries_related(i1, i2):
                related.append((i1, i2))
    return IndustryDetails(
        profile1_industries=industries1,
        profile2_industries=industries2,
        exact_matches=tuple(i for i in industries1 if i.lower() in folded2),
        related_matches=tuple(related),
    )
