"""Tests for free-text location parsing and match levels."""

from __future__ import annotations

import pytest

from bridge_ranker.domain.locations import ParsedLocation, location_match_level, parse_location


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_parse_location_empty_input_is_unknown(raw: str | None) -> None:
    assert parse_location(raw) == ParsedLocation.unknown()


def test_parse_location_single_part_country() -> None:
    parsed = parse_location("Germany")

    assert parsed.country == "Germany"
    assert parsed.region == "Europe"
    assert parsed.city == "Unknown"


def test_parse_location_single_part_city() -> None:
    parsed = parse_location("Springfield")

    assert parsed.city == "Springfield"
    assert parsed.country == "Unknown"
    assert parsed.region == "Unknown"


def test_parse_location_us_state_abbreviation() -> None:
    parsed = parse_location("San Francisco, CA")

    assert parsed == ParsedLocation(
        city="San Francisco", state="CA", country="United States", region="North America"
    )


def test_parse_location_us_state_full_name_is_case_insensitive() -> None:
    assert parse_location("Austin, texas").state == "TX"


def test_parse_location_city_and_country() -> None:
    parsed = parse_location("London, United Kingdom")

    assert parsed.city == "London"
    assert parsed.state is None
    assert parsed.country == "United Kingdom"
    assert parsed.region == "Europe"


def test_parse_location_unknown_country_keeps_unknown_region() -> None:
    parsed = parse_location("Paris, Atlantis")

    assert parsed.country == "Atlantis"
    assert parsed.region == "Unknown"


def test_parse_location_three_parts_are_positional() -> None:
    parsed = parse_location("Portland, Oregon, USA")

    assert parsed == ParsedLocation(
        city="Portland", state="OR", country="USA", region="North America"
    )


def test_parse_location_three_parts_keeps_non_us_state() -> None:
    parsed = parse_location("Toronto, Ontario, Canada")

    assert parsed.state == "Ontario"
    assert parsed.region == "North America"


@pytest.mark.parametrize(
    ("left", "right", "level"),
    [
        ("San Francisco, CA", "san francisco, California", "city"),
        ("San Francisco, CA", "Los Angeles, CA", "state"),
        ("Boston, MA", "Austin, TX", "country"),
        ("Berlin, Germany", "Paris, France", "region"),
        ("Berlin, Germany", "Tokyo, Japan", "none"),
        ("", "", "none"),
    ],
)
def test_location_match_level(left: str, right: str, level: str) -> None:
    assert location_match_level(parse_location(left), parse_location(right)) == level
