"""Tests for the weighted profile similarity calculator."""

from __future__ import annotations

import itertools

import pytest

from bridge_ranker.domain.profiles import Profile
from bridge_ranker.domain.similarity import (
    SimilarityBreakdown,
    calculate_detailed_similarity,
    calculate_profile_similarity,
)
from bridge_ranker.domain.similarity_config import DEFAULT_SIMILARITY_CONFIG
from tests.support.profiles import farmer, make_profile, tech_engineer, tech_target


def _sample_profiles() -> list[Profile]:
    return [
        tech_target(),
        tech_engineer("Eve"),
        farmer("Fay"),
        make_profile("Gus", industry="SaaS", skills=("Python",), location="Berlin, Germany"),
        make_profile("Hal", location="Los Angeles, CA", school="Stanford", field="Physics"),
        Profile(name="Empty"),
    ]


def test_missing_profile_yields_zero_breakdown() -> None:
    assert calculate_profile_similarity(None, tech_target()) == SimilarityBreakdown.empty()
    assert calculate_profile_similarity(tech_target(), None) == SimilarityBreakdown.empty()


def test_detailed_similarity_describes_missing_profile_as_empty() -> None:
    detailed = calculate_detailed_similarity(tech_target(), None)

    assert detailed.overall == 0.0
    assert detailed.breakdown == SimilarityBreakdown.empty().breakdown
    meta = detailed.metadata
    assert meta.skills_compared.profile2_count == 0
    assert meta.skills_compared.union_count == 3
    assert meta.education_details.profile2_schools == ()
    assert meta.location_details.match_level == "none"


def test_identical_profiles_score_high() -> None:
    result = calculate_profile_similarity(tech_engineer("Eve"), tech_target())

    assert result.overall > 0.7


def test_disjoint_profiles_score_low() -> None:
    result = calculate_profile_similarity(farmer("Fay"), tech_target())

    assert result.overall < 0.1


def test_similarity_is_symmetric_deterministic_and_bounded() -> None:
    for a, b in itertools.product(_sample_profiles(), repeat=2):
        forward = calculate_profile_similarity(a, b)
        backward = calculate_profile_similarity(b, a)

        assert forward == calculate_profile_similarity(a, b)
        assert forward.breakdown == backward.breakdown
        assert 0.0 <= forward.overall <= 1.0
        for score in forward.breakdown.as_dict().values():
            assert 0.0 <= score <= 1.0


def test_shared_industry_and_one_skill_scenario() -> None:
    source = make_profile("Sam", industry="Tech", skills=("React", "Node"), school="MIT")
    target = make_profile("Tia", industry="Tech", skills=("React", "Python"), school="Stanford")

    result = calculate_profile_similarity(source, target)

    assert result.breakdown.industry == 1.0
    assert result.breakdown.skills == pytest.approx(1 / 3)
    assert result.breakdown.education == 0.0
    assert result.breakdown.location == 0.0
    assert result.breakdown.companies == 0.0
    assert result.overall == pytest.approx(0.30 + 0.25 / 3)


def test_partial_weight_overrides_are_not_renormalised_but_clamped() -> None:
    config = DEFAULT_SIMILARITY_CONFIG.with_overrides(weights={"industry": 1.0})
    source = make_profile("Sam", industry="Tech")
    target = make_profile("Tia", industry="tech")

    assert calculate_profile_similarity(source, target, config).overall == 1.0
    assert calculate_profile_similarity(tech_engineer("Eve"), tech_target(), config).overall == 1.0


def test_detailed_similarity_matches_basic_scores() -> None:
    source = make_profile("Sam", industry="SaaS", skills=("React", "Node"), school="MIT")
    target = make_profile("Tia", industry="Cloud Computing", skills=("react", "Python"))

    detailed = calculate_detailed_similarity(source, target)
    basic = calculate_profile_similarity(source, target)

    assert detailed.overall == basic.overall
    assert detailed.breakdown == basic.breakdown
    meta = detailed.metadata
    assert meta.calculated_at.tzinfo is not None
    assert meta.config == DEFAULT_SIMILARITY_CONFIG
    assert (meta.skills_compared.intersection_count, meta.skills_compared.union_count) == (1, 3)
    assert meta.education_details.profile1_schools == ("MIT",)
    assert meta.education_details.matched_schools == ()
    assert meta.industry_details.exact_matches == ()
    assert meta.industry_details.related_matches == (("SaaS", "Cloud Computing"),)
    assert meta.location_details.match_level == "none"


def test_detailed_similarity_reports_location_match() -> None:
    source = make_profile("Sam", location="San Francisco, CA")
    target = make_profile("Tia", location="Los Angeles, California")

    meta = calculate_detailed_similarity(source, target).metadata

    assert meta.location_details.profile1_location.state == "CA"
    assert meta.location_details.match_level == "state"
