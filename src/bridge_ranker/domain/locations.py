"""Free-text location parsing and geographic proximity levels.

Usage example:
    from bridge_ranker.domain.locations import location_match_level, parse_location

    sf = parse_location("San Francisco, California")
    la = parse_location("Los Angeles, CA")
    assert sf.state == "CA"
    assert location_match_level(sf, la) == "state"
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .reference_tables import (
    DEFAULT_REFERENCE_TABLES,
    NORTH_AMERICA,
    UNITED_STATES,
    UNKNOWN,
    ReferenceTables,
)

MatchLevel = Literal["city", "state", "country", "region", "none"]


@dataclass(frozen=True)
class ParsedLocation:
    """Hierarchical location components; unknown parts hold ``Unknown``."""

    city: str = UNKNOWN
    country: str = UNKNOWN
    region: str = UNKNOWN
    state: str | None = None

    @classmethod
    def unknown(cls) -> ParsedLocation:
        return cls()


def parse_location(
    location: str | None, tables: ReferenceTables = DEFAULT_REFERENCE_TABLES
) -> ParsedLocation:
    """Parse ``City``, ``City, State``, ``City, Country`` or ``City, State, Country``.

    Never raises; empty input yields an all-``Unknown`` location.
    """
    if not location or not location.strip():
        return ParsedLocation.unknown()

    parts = [part.strip() for part in location.split(",")]

    if len(parts) == 1:
        (only,) = parts
        region = tables.geographic_region(only)
        if region != UNKNOWN:
            return ParsedLocation(country=only, region=region)
        return ParsedLocation(city=only)

    if len(parts) == 2:
        city, second = parts
        state = tables.state_abbreviation(second)
        if state is not None:
            return ParsedLocation(
                city=city or UNKNOWN, state=state, country=UNITED_STATES, region=NORTH_AMERICA
            )
        return ParsedLocation(
            city=city or UNKNOWN,
            country=second or UNKNOWN,
            region=tables.geographic_region(second),
        )

    city, state, country = parts[0], parts[1], parts[2]
    return ParsedLocation(
        city=city or UNKNOWN,
        state=tables.state_abbreviation(state) or state or None,
        country=country or UNKNOWN,
        region=tables.geographic_region(country),
    )


def location_match_level(a: ParsedLocation, b: ParsedLocation) -> MatchLevel:
    """Return the most specific shared level between two parsed locations."""
    if _known(a.city) and _same(a.city, b.city):
        return "city"
    if a.state and b.state and _same(a.state, b.state):
        return "state"
    if _known(a.country) and _same(a.country, b.country):
        return "country"
    if _known(a.region) and a.region == b.region:
        return "region"
    return "none"


def _known(value: str) -> bool:
    return value != UNKNOWN


def _same(a: str, b: str) -> bool:
    return a.strip().lower() == b.strip().lower()
