"""Tests for curated reference table lookups."""

from __future__ import annotations

from bridge_ranker.domain.reference_tables import DEFAULT_REFERENCE_TABLES, ReferenceTables


def test_industry_relationships_are_bidirectional() -> None:
    tables = ReferenceTables.build(
        industry_relationships={"Fintech": ["Banking"]},
        country_regions={},
        us_states={},
    )

    assert tables.are_industries_related("fintech", "BANKING")
    assert tables.are_industries_related("Banking", "Fintech")
    assert not tables.are_industries_related("Banking", "Retail")


def test_industry_relationships_ignore_blank_names() -> None:
    assert not DEFAULT_REFERENCE_TABLES.are_industries_related("", "SaaS")


def test_default_tables_cover_common_geography() -> None:
    tables = DEFAULT_REFERENCE_TABLES

    assert tables.geographic_region("germany") == "Europe"
    assert tables.geographic_region("Japan") == "Asia"
    assert tables.geographic_region("Atlantis") == "Unknown"


def test_state_abbreviation_accepts_abbreviation_or_name() -> None:
    tables = DEFAULT_REFERENCE_TABLES

    assert tables.state_abbreviation("ca") == "CA"
    assert tables.state_abbreviation(" California ") == "CA"
    assert tables.state_abbreviation("Bavaria") is None
    assert tables.state_abbreviation("") is None
