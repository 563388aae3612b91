"""Tests for RankerConfig behaviour."""

import pytest

import bridge_ranker.config as config_module
from bridge_ranker.config import (
    BooleanEnvVarError,
    PositiveIntegerEnvVarError,
    RankerConfig,
    ScoreEnvVarError,
)
from bridge_ranker.domain.reference_tables import DEFAULT_REFERENCE_TABLES, ReferenceTables


def _patch_env(monkeypatch: pytest.MonkeyPatch, env: dict[str, str]) -> None:
    def fake_getenv(key: str, default: str = "") -> str:
        return env.get(key, default)

    def fake_load_dotenv(dotenv_path: str | None = None) -> bool:
        _ = dotenv_path
        return True

    monkeypatch.setattr(config_module.os, "getenv", fake_getenv)
    monkeypatch.setattr(config_module, "load_dotenv", fake_load_dotenv)


def test_defaults_without_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_env(monkeypatch, {})

    assert RankerConfig.from_env() == RankerConfig()


def test_from_env_reads_search_and_similarity_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_env(
        monkeypatch,
        {
            "BRIDGE_MAX_CONNECTIONS": "250",
            "BRIDGE_GOOD_CANDIDATE_THRESHOLD": "0.4",
            "BRIDGE_TOP_CANDIDATES": "3",
            "BRIDGE_LOW_CONFIDENCE_THRESHOLD": "0.5",
            "BRIDGE_CACHE_TTL_DAYS": "2",
            "BRIDGE_MAX_WORKERS": "8",
            "BRIDGE_CASE_SENSITIVE_SKILLS": "yes",
            "BRIDGE_CASE_SENSITIVE_COMPANIES": "off",
            "BRIDGE_REFERENCE_TABLES_PATH": " data/reference/tables.json ",
            "BRIDGE_WEIGHT_INDUSTRY": "0.4",
            "BRIDGE_LOG_LEVEL": "debug",
        },
    )

    config = RankerConfig.from_env()

    assert config.max_connections == 250
    assert config.good_candidate_threshold == 0.4
    assert config.top_candidates == 3
    assert config.low_confidence_threshold == 0.5
    assert config.cache_ttl_days == 2
    assert config.max_workers == 8
    assert config.case_sensitive_skills is True
    assert config.case_sensitive_companies is False
    assert config.reference_tables_path == "data/reference/tables.json"
    assert config.weight_overrides() == {"industry": 0.4}
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize(
    ("env_name", "value", "error"),
    [
        ("BRIDGE_MAX_CONNECTIONS", "0", PositiveIntegerEnvVarError),
        ("BRIDGE_TOP_CANDIDATES", "many", PositiveIntegerEnvVarError),
        ("BRIDGE_GOOD_CANDIDATE_THRESHOLD", "1.5", ScoreEnvVarError),
        ("BRIDGE_WEIGHT_SKILLS", "heavy", ScoreEnvVarError),
        ("BRIDGE_CASE_SENSITIVE_SKILLS", "maybe", BooleanEnvVarError),
    ],
)
def test_from_env_rejects_invalid_values(
    monkeypatch: pytest.MonkeyPatch, env_name: str, value: str, error: type[ValueError]
) -> None:
    _patch_env(monkeypatch, {env_name: value})

    with pytest.raises(error, match=env_name):
        RankerConfig.from_env()


def test_with_overrides_preserves_fields() -> None:
    base = RankerConfig(max_workers=2, weight_skills=0.3, reference_tables_path="base.json")

    updated = base.with_overrides(top_candidates=3, log_level="warning")

    assert updated.top_candidates == 3
    assert updated.log_level == "WARNING"
    assert updated.max_connections == base.max_connections
    assert updated.max_workers == 2
    assert updated.weight_skills == 0.3
    assert updated.reference_tables_path == "base.json"


def test_similarity_config_applies_weights_and_toggles() -> None:
    config = RankerConfig(weight_industry=0.4, case_sensitive_skills=True)

    similarity_config = config.similarity_config()

    assert similarity_config.weights.industry == 0.4
    assert similarity_config.weights.skills == 0.25
    assert similarity_config.case_sensitive_skills is True
    assert similarity_config.case_sensitive_companies is False
    assert similarity_config.reference_tables is DEFAULT_REFERENCE_TABLES


def test_similarity_config_uses_supplied_reference_tables() -> None:
    tables = ReferenceTables.build(industry_relationships={}, country_regions={}, us_states={})

    assert RankerConfig().similarity_config(tables).reference_tables is tables
