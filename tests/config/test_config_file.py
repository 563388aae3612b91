"""Tests for config-file schema parsing and fail-fast validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from bridge_ranker.config_file import RankerConfigFile, load_ranker_config_file
from bridge_ranker.exceptions import (
    ConfigFileNotFoundError,
    ConfigFileParseError,
    ConfigFileValidationError,
)
from tests.fakes import InMemoryFileSystem

_PATH = Path("config/bridge-ranker.toml")


def _write(fs: InMemoryFileSystem, path: Path, content: str) -> None:
    fs.write_text(content, path)


def test_load_ranker_config_file_parses_valid_toml() -> None:
    fs = InMemoryFileSystem()
    _write(
        fs,
        _PATH,
        """
schema_version = 1

[ranker]
max_connections = 250
good_candidate_threshold = 0.4
top_candidates = 3
low_confidence_threshold = 0.3
cache_ttl_days = 1
max_workers = 2
case_sensitive_skills = true
case_sensitive_companies = false
reference_tables_path = " data/reference/tables.json "
weight_industry = 0.4
weight_skills = 0.2
""",
    )

    loaded = load_ranker_config_file(path=_PATH, fs=fs)

    assert loaded == RankerConfigFile(
        max_connections=250,
        good_candidate_threshold=0.4,
        top_candidates=3,
        low_confidence_threshold=0.3,
        cache_ttl_days=1,
        max_workers=2,
        case_sensitive_skills=True,
        case_sensitive_companies=False,
        reference_tables_path="data/reference/tables.json",
        weight_industry=0.4,
        weight_skills=0.2,
    )


def test_load_ranker_config_file_allows_empty_section() -> None:
    fs = InMemoryFileSystem()
    _write(fs, _PATH, "schema_version = 1\n[ranker]\n")

    assert load_ranker_config_file(path=_PATH, fs=fs) == RankerConfigFile()


def test_load_ranker_config_file_fails_when_file_missing() -> None:
    fs = InMemoryFileSystem()

    with pytest.raises(ConfigFileNotFoundError):
        load_ranker_config_file(path=Path("missing.toml"), fs=fs)


def test_load_ranker_config_file_fails_for_invalid_toml() -> None:
    fs = InMemoryFileSystem()
    _write(fs, _PATH, "schema_version = 1\n[ranker\nmax_connections = 2")

    with pytest.raises(ConfigFileParseError):
        load_ranker_config_file(path=_PATH, fs=fs)


def test_load_ranker_config_file_fails_when_ranker_section_missing() -> None:
    fs = InMemoryFileSystem()
    _write(fs, _PATH, "schema_version = 1")

    with pytest.raises(ConfigFileValidationError) as exc_info:
        load_ranker_config_file(path=_PATH, fs=fs)

    assert "ranker" in str(exc_info.value)


@pytest.mark.parametrize(
    "content",
    [
        "schema_version = 2\n[ranker]\n",
        "schema_version = 1\n[ranker]\nunknown_key = 1\n",
        "schema_version = 1\n[ranker]\nmax_connections = 0\n",
        "schema_version = 1\n[ranker]\nweight_location = 1.5\n",
        "schema_version = 1\n[ranker]\ngood_candidate_threshold = -0.1\n",
        "schema_version = 1\n[ranker]\nreference_tables_path = '  '\n",
    ],
)
def test_load_ranker_config_file_fails_for_invalid_values(content: str) -> None:
    fs = InMemoryFileSystem()
    _write(fs, _PATH, content)

    with pytest.raises(ConfigFileValidationError):
        load_ranker_config_file(path=_PATH, fs=fs)
