"""Tests for loading replacement reference tables."""

from __future__ import annotations

from pathlib import Path

import pytest

from bridge_ranker.application.reference_tables import load_reference_tables
from bridge_ranker.exceptions import (
    ReferenceTablesFileNotFoundError,
    ReferenceTablesValidationError,
)
from tests.fakes import InMemoryFileSystem

_PATH = Path("reference/tables.json")


def _payload(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "schema_version": 1,
        "industry_relationships": {"Fintech": ["Banking"]},
        "country_regions": {"Kenya": "Africa"},
        "us_states": {"CA": "California"},
    }
    payload.update(overrides)
    return payload


def test_loads_valid_tables(in_memory_fs: InMemoryFileSystem) -> None:
    in_memory_fs.write_json(_payload(), _PATH)

    tables = load_reference_tables(path=_PATH, fs=in_memory_fs)

    assert tables.are_industries_related("Banking", "Fintech")
    assert tables.geographic_region("kenya") == "Africa"
    assert tables.geographic_region("Germany") == "Unknown"
    assert tables.state_abbreviation("california") == "CA"


def test_missing_file_raises(in_memory_fs: InMemoryFileSystem) -> None:
    with pytest.raises(ReferenceTablesFileNotFoundError):
        load_reference_tables(path=_PATH, fs=in_memory_fs)


@pytest.mark.parametrize(
    "overrides",
    [
        {"schema_version": 2},
        {"us_states": {"CA": " "}},
        {"industry_relationships": {"Fintech": "Banking"}},
        {"extra_table": {}},
    ],
)
def test_invalid_tables_raise(
    in_memory_fs: InMemoryFileSystem, overrides: dict[str, object]
) -> None:
    in_memory_fs.write_json(_payload(**overrides), _PATH)

    with pytest.raises(ReferenceTablesValidationError, match="tables.json"):
        load_reference_tables(path=_PATH, fs=in_memory_fs)
