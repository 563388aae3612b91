"""Tests for configuration precedence resolution."""

from __future__ import annotations

from bridge_ranker.config import RankerConfig
from bridge_ranker.config_file import RankerConfigFile


def test_with_file_overrides_applies_config_file_values() -> None:
    env_config = RankerConfig(
        max_connections=100,
        top_candidates=2,
        max_workers=1,
        reference_tables_path="env/tables.json",
        weight_industry=0.2,
    )
    file_config = RankerConfigFile(
        max_connections=300,
        top_candidates=4,
        max_workers=6,
        reference_tables_path="file/tables.json",
        weight_industry=0.5,
        case_sensitive_companies=True,
    )

    resolved = env_config.with_file_overrides(file_config)

    assert resolved.max_connections == 300
    assert resolved.top_candidates == 4
    assert resolved.max_workers == 6
    assert resolved.reference_tables_path == "file/tables.json"
    assert resolved.weight_industry == 0.5
    assert resolved.case_sensitive_companies is True


def test_with_file_overrides_keeps_env_when_file_value_missing() -> None:
    env_config = RankerConfig(max_connections=100, cache_ttl_days=3, log_level="DEBUG")

    resolved = env_config.with_file_overrides(RankerConfigFile())

    assert resolved == env_config


def test_cli_overrides_win_over_file_values() -> None:
    resolved = (
        RankerConfig(top_candidates=2)
        .with_file_overrides(RankerConfigFile(top_candidates=4, max_connections=50))
        .with_overrides(top_candidates=7)
    )

    assert resolved.top_candidates == 7
    assert resolved.max_connections == 50
