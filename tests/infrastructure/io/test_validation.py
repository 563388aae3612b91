"""Tests for IO validation helpers."""

from __future__ import annotations

import pytest

from bridge_ranker.exceptions import IncomingDataError
from bridge_ranker.infrastructure.io.validation import (
    parse_connection_export_row,
    parse_connections_file,
    parse_profile,
)


def test_parse_profile_normalises_full_payload() -> None:
    payload: dict[str, object] = {
        "id": 42,
        "name": " Ann Example ",
        "email": "ann@example.com",
        "location": "Boston, MA",
        "work_experience": [
            {"company": "Acme", "industry": "SaaS", "title": "Engineer"},
            {"company": "", "industry": "Retail"},
        ],
        "education": [{"school": "MIT", "field": "Physics"}, {"field": "No school"}],
        "skills": ["Python", {"name": "React"}, "", {"level": 3}],
        "connected_on": "2024-01-31T10:00:00Z",
        "activity_score": "0.4",
    }

    profile = parse_profile(payload)

    assert profile == {
        "id": "42",
        "name": "Ann Example",
        "email": "ann@example.com",
        "location": "Boston, MA",
        "work_experience": [{"company": "Acme", "industry": "SaaS", "title": "Engineer"}],
        "education": [{"school": "MIT", "field": "Physics", "degree": ""}],
        "skills": ["Python", "React"],
        "connected_on": "2024-01-31",
        "activity_score": 0.4,
    }


def test_parse_profile_defaults_missing_fields() -> None:
    profile = parse_profile({})

    assert profile == {
        "id": "",
        "name": "",
        "email": "",
        "location": "",
        "work_experience": [],
        "education": [],
        "skills": [],
        "connected_on": "",
        "activity_score": None,
    }


def test_parse_profile_coerces_invalid_optional_values() -> None:
    profile = parse_profile(
        {"name": "Ann", "connected_on": "last week", "activity_score": "very", "skills": None}
    )

    assert profile["connected_on"] == ""
    assert profile["activity_score"] is None
    assert profile["skills"] == []


@pytest.mark.parametrize("payload", [["not", "a", "profile"], {"work_experience": "Acme"}])
def test_parse_profile_rejects_structurally_invalid_payloads(payload: object) -> None:
    with pytest.raises(IncomingDataError):
        parse_profile(payload)


def test_parse_connections_file_requires_connections_list() -> None:
    with pytest.raises(IncomingDataError, match="connections"):
        parse_connections_file({"people": []})


def test_parse_connections_file_parses_each_profile() -> None:
    parsed = parse_connections_file({"connections": [{"name": "Ann"}, {"name": "Bo"}]})

    assert [item["name"] for item in parsed["connections"]] == ["Ann", "Bo"]


def test_parse_connection_export_row_maps_columns() -> None:
    row = {
        "First Name": "Ann",
        "Last Name": "Example",
        "Email Address": "ann@example.com",
        "Company": "Acme",
        "Position": "Engineer",
        "Connected On": "31 Jan 2024",
        "Skills": "Python; React, Go",
    }

    profile = parse_connection_export_row(row)

    assert profile["name"] == "Ann Example"
    assert profile["email"] == "ann@example.com"
    assert profile["work_experience"] == [
        {"company": "Acme", "industry": "", "title": "Engineer"}
    ]
    assert profile["skills"] == ["Python", "React", "Go"]
    assert profile["connected_on"] == "2024-01-31"
    assert profile["location"] == ""


def test_parse_connection_export_row_without_company_has_no_work_history() -> None:
    profile = parse_connection_export_row({"First Name": "Ann", "Last Name": ""})

    assert profile["name"] == "Ann"
    assert profile["work_experience"] == []
