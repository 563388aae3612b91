"""Per-dimension similarity matchers.

Every matcher takes two profiles and a ``SimilarityConfig`` and returns a score in
[0, 1]. Matchers are total: missing data on either side scores 0.

Usage example:
    from bridge_ranker.domain.matchers import skill_jaccard_similarity
    from bridge_ranker.domain.profiles import Profile

    a = Profile(name="A", skills=("React", "Node"))
    b = Profile(name="B", skills=("react", "Python"))
    assert round(skill_jaccard_similarity(a, b), 2) == 0.33
"""

from __future__ import annotations

from collections.abc import Iterable

from .locations import location_match_level, parse_location
from .profiles import Profile
from .similarity_config import DEFAULT_SIMILARITY_CONFIG, SimilarityConfig


def industry_tags(profile: Profile) -> list[str]:
    """Distinct industry tags from work history, first-seen order."""
    return _distinct(entry.industry for entry in profile.work_experience if entry.industry)


def skill_names(profile: Profile, *, case_sensitive: bool = False) -> set[str]:
    return _name_set(profile.skills, case_sensitive=case_sensitive)


def company_names(profile: Profile, *, case_sensitive: bool = False) -> set[str]:
    return _name_set(
        (entry.company for entry in profile.work_experience), case_sensitive=case_sensitive
    )


def jaccard_index(a: set[str], b: set[str]) -> float:
    """|A ∩ B| / |A ∪ B|, or 0 for an empty union."""
    union = a | b
    if not union:
        return 0.0
    return len(a & b) / len(union)


def industry_overlap(
    p1: Profile, p2: Profile, config: SimilarityConfig = DEFAULT_SIMILARITY_CONFIG
) -> float:
    """Exact shared industry, then curated adjacency, else no overlap."""
    thresholds = config.industry_thresholds
    industries1 = {tag.strip().lower() for tag in industry_tags(p1)}
    industries2 = {tag.strip().lower() for tag in industry_tags(p2)}
    if not industries1 or not industries2:
        return 0.0

    if industries1 & industries2:
        return thresholds.exact_match

    tables = config.reference_tables
    if any(tables.are_industries_related(i1, i2) for i1 in industries1 for i2 in industries2):
        return thresholds.related_industries

    return thresholds.no_overlap


def skill_jaccard_similarity(
    p1: Profile, p2: Profile, config: SimilarityConfig = DEFAULT_SIMILARITY_CONFIG
) -> float:
    case_sensitive = config.case_sensitive_skills
    return jaccard_index(
        skill_names(p1, case_sensitive=case_sensitive),
        skill_names(p2, case_sensitive=case_sensitive),
    )


def company_history_jaccard(
    p1: Profile, p2: Profile, config: SimilarityConfig = DEFAULT_SIMILARITY_CONFIG
) -> float:
    case_sensitive = config.case_sensitive_companies
    return jaccard_index(
        company_names(p1, case_sensitive=case_sensitive),
        company_names(p2, case_sensitive=case_sensitive),
    )


def education_overlap(
    p1: Profile, p2: Profile, config: SimilarityConfig = DEFAULT_SIMILARITY_CONFIG
) -> float:
    """Shared school (alumni), then shared field of study, else no overlap."""
    if not p1.education or not p2.education:
        return 0.0

    thresholds = config.education_thresholds
    schools1 = _folded(entry.school for entry in p1.education)
    schools2 = _folded(entry.school for entry in p2.education)
    if schools1 & schools2:
        return thresholds.same_school

    fields1 = _folded(entry.field for entry in p1.education if entry.field)
    fields2 = _folded(entry.field for entry in p2.education if entry.field)
    if fields1 & fields2:
        return thresholds.same_field

    return thresholds.no_overlap


def location_similarity(
    p1: Profile, p2: Profile, config: SimilarityConfig = DEFAULT_SIMILARITY_CONFIG
) -> float:
    """Score the most specific shared geographic level."""
    if not p1.location or not p2.location or not p1.location.strip() or not p2.location.strip():
        return 0.0

    thresholds = config.location_thresholds
    if p1.location.strip() == p2.location.strip():
        return thresholds.same_city

    tables = config.reference_tables
    level = location_match_level(
        parse_location(p1.location, tables), parse_location(p2.location, tables)
    )
    if level == "city":
        return thresholds.same_city
    if level == "state":
        return thresholds.same_state
    if level == "country":
        return thresholds.same_country
    if level == "region":
        return thresholds.same_region
    return thresholds.different_regions


def _name_set(values: Iterable[str], *, case_sensitive: bool) -> set[str]:
    names: set[str] = set()
    for value in values:
        text = value.strip() if value else ""
        if text:
            names.add(text if case_sensitive else text.lower())
    return names


def _folded(values: Iterable[str | None]) -> set[str]:
    return {value.strip().lower() for value in values if value and value.strip()}


def _distinct(values: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    ordered: list[str] = []
    for value in values:
        text = value.strip()
        if text and text not in seen:
            seen.add(text)
            ordered.append(text)
    return ordered
