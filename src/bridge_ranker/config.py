"""Centralised, injectable configuration for the bridge ranker."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Self

from dotenv import load_dotenv

from .config_file import RankerConfigFile
from .domain.reference_tables import ReferenceTables
from .domain.similarity_config import DEFAULT_SIMILARITY_CONFIG, SimilarityConfig


class PositiveIntegerEnvVarError(ValueError):
    """Raised when an environment variable must be a positive integer."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"{env_name} must be a positive integer.")


class BooleanEnvVarError(ValueError):
    """Raised when an environment variable must be a supported boolean."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"{env_name} must be a boolean value (true/false, 1/0, yes/no, on/off).")


class ScoreEnvVarError(ValueError):
    """Raised when an environment variable must be a number between 0 and 1."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"{env_name} must be a number between 0 and 1.")


@dataclass(frozen=True)
class RankerConfig:
    """Immutable configuration for similarity scoring and intermediary search.

    Load from environment with `RankerConfig.from_env()` or construct directly for testing.
    """

    # Intermediary search
    max_connections: int = 500
    good_candidate_threshold: float = 0.35
    top_candidates: int = 5
    low_confidence_threshold: float = 0.35

    # Similarity cache and pair scoring
    cache_ttl_days: int = 7
    max_workers: int = 4

    # Similarity
    case_sensitive_skills: bool = False
    case_sensitive_companies: bool = False
    reference_tables_path: str = ""
    weight_industry: float | None = None
    weight_skills: float | None = None
    weight_education: float | None = None
    weight_location: float | None = None
    weight_companies: float | None = None

    log_level: str = "INFO"

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> Self:
        """Load configuration from environment variables.

        Args:
            dotenv_path: Optional path to .env file. If None, uses default .env discovery.

        Returns:
            RankerConfig instance populated from environment.
        """
        load_dotenv(dotenv_path)

        return cls(
            max_connections=_parse_positive_int(
                os.getenv("BRIDGE_MAX_CONNECTIONS", ""),
                default=500,
                env_name="BRIDGE_MAX_CONNECTIONS",
            ),
            good_candidate_threshold=_parse_score(
                os.getenv("BRIDGE_GOOD_CANDIDATE_THRESHOLD", ""),
                default=0.35,
                env_name="BRIDGE_GOOD_CANDIDATE_THRESHOLD",
            ),
            top_candidates=_parse_positive_int(
                os.getenv("BRIDGE_TOP_CANDIDATES", ""), default=5, env_name="BRIDGE_TOP_CANDIDATES"
            ),
            low_confidence_threshold=_parse_score(
                os.getenv("BRIDGE_LOW_CONFIDENCE_THRESHOLD", ""),
                default=0.35,
                env_name="BRIDGE_LOW_CONFIDENCE_THRESHOLD",
            ),
            cache_ttl_days=_parse_positive_int(
                os.getenv("BRIDGE_CACHE_TTL_DAYS", ""), default=7, env_name="BRIDGE_CACHE_TTL_DAYS"
            ),
            max_workers=_parse_positive_int(
                os.getenv("BRIDGE_MAX_WORKERS", ""), default=4, env_name="BRIDGE_MAX_WORKERS"
            ),
            case_sensitive_skills=_parse_optional_bool(
                os.getenv("BRIDGE_CASE_SENSITIVE_SKILLS", ""),
                env_name="BRIDGE_CASE_SENSITIVE_SKILLS",
            )
            or False,
            case_sensitive_companies=_parse_optional_bool(
                os.getenv("BRIDGE_CASE_SENSITIVE_COMPANIES", ""),
                env_name="BRIDGE_CASE_SENSITIVE_COMPANIES",
            )
            or False,
            reference_tables_path=os.getenv("BRIDGE_REFERENCE_TABLES_PATH", "").strip(),
            weight_industry=_parse_optional_score(
                os.getenv("BRIDGE_WEIGHT_INDUSTRY", ""), env_name="BRIDGE_WEIGHT_INDUSTRY"
            ),
            weight_skills=_parse_optional_score(
                os.getenv("BRIDGE_WEIGHT_SKILLS", ""), env_name="BRIDGE_WEIGHT_SKILLS"
            ),
            weight_education=_parse_optional_score(
                os.getenv("BRIDGE_WEIGHT_EDUCATION", ""), env_name="BRIDGE_WEIGHT_EDUCATION"
            ),
            weight_location=_parse_optional_score(
                os.getenv("BRIDGE_WEIGHT_LOCATION", ""), env_name="BRIDGE_WEIGHT_LOCATION"
            ),
            weight_companies=_parse_optional_score(
                os.getenv("BRIDGE_WEIGHT_COMPANIES", ""), env_name="BRIDGE_WEIGHT_COMPANIES"
            ),
            log_level=os.getenv("BRIDGE_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        )

    def with_overrides(
        self,
        *,
        max_connections: int | None = None,
        top_candidates: int | None = None,
        good_candidate_threshold: float | None = None,
        reference_tables_path: str | None = None,
        log_level: str | None = None,
    ) -> Self:
        """Return a new config with specified overrides (for CLI options)."""
        return replace(
            self,
            max_connections=self.max_connections if max_connections is None else max_connections,
            top_candidates=self.top_candidates if top_candidates is None else top_candidates,
            good_candidate_threshold=self.good_candidate_threshold
            if good_candidate_threshold is None
            else good_candidate_threshold,
            reference_tables_path=self.reference_tables_path
            if reference_tables_path is None
            else reference_tables_path.strip(),
            log_level=self.log_level if log_level is None else log_level.strip().upper(),
        )

    def with_file_overrides(self, file_config: RankerConfigFile) -> Self:
        """Return a new config with config-file values overriding env/default values."""
        return replace(
            self,
            max_connections=self.max_connections
            if file_config.max_connections is None
            else file_config.max_connections,
            good_candidate_threshold=self.good_candidate_threshold
            if file_config.good_candidate_threshold is None
            else file_config.good_candidate_threshold,
            top_candidates=self.top_candidates
            if file_config.top_candidates is None
            else file_config.top_candidates,
            low_confidence_threshold=self.low_confidence_threshold
            if file_config.low_confidence_threshold is None
            else file_config.low_confidence_threshold,
            cache_ttl_days=self.cache_ttl_days
            if file_config.cache_ttl_days is None
            else file_config.cache_ttl_days,
            max_workers=self.max_workers
            if file_config.max_workers is None
            else file_config.max_workers,
            case_sensitive_skills=self.case_sensitive_skills
            if file_config.case_sensitive_skills is None
            else file_config.case_sensitive_skills,
            case_sensitive_companies=self.case_sensitive_companies
            if file_config.case_sensitive_companies is None
            else file_config.case_sensitive_companies,
            reference_tables_path=self.reference_tables_path
            if file_config.reference_tables_path is None
            else file_config.reference_tables_path,
            weight_industry=self.weight_industry
            if file_config.weight_industry is None
            else file_config.weight_industry,
            weight_skills=self.weight_skills
            if file_config.weight_skills is None
            else file_config.weight_skills,
            weight_education=self.weight_education
            if file_config.weight_education is None
            else file_config.weight_education,
            weight_location=self.weight_location
            if file_config.weight_location is None
            else file_config.weight_location,
            weight_companies=self.weight_companies
            if file_config.weight_companies is None
            else file_config.weight_companies,
        )

    def weight_overrides(self) -> dict[str, float]:
        """Return only the weights that were explicitly configured."""
        candidates = {
            "industry": self.weight_industry,
            "skills": self.weight_skills,
            "education": self.weight_education,
            "location": self.weight_location,
            "companies": self.weight_companies,
        }
        return {name: value for name, value in candidates.items() if value is not None}

    def similarity_config(
        self, reference_tables: ReferenceTables | None = None
    ) -> SimilarityConfig:
        """Build the domain similarity configuration."""
        return DEFAULT_SIMILARITY_CONFIG.with_overrides(
            weights=self.weight_overrides(),
            case_sensitive_skills=self.case_sensitive_skills,
            case_sensitive_companies=self.case_sensitive_companies,
            reference_tables=reference_tables,
        )


def _parse_positive_int(value: str, *, default: int, env_name: str) -> int:
    """Parse a positive integer from an environment variable, with a default."""
    text = value.strip()
    if not text:
        return default
    try:
        parsed = int(text)
    except ValueError as exc:
        raise PositiveIntegerEnvVarError(env_name) from exc
    if parsed < 1:
        raise PositiveIntegerEnvVarError(env_name)
    return parsed


def _parse_optional_score(value: str, *, env_name: str) -> float | None:
    """Parse an optional number in [0, 1] from an environment variable."""
    text = value.strip()
    if not text:
        return None
    try:
        parsed = float(text)
    except ValueError as exc:
        raise ScoreEnvVarError(env_name) from exc
    if not 0.0 <= parsed <= 1.0:
        raise ScoreEnvVarError(env_name)
    return parsed


def _parse_score(value: str, *, default: float, env_name: str) -> float:
    parsed = _parse_optional_score(value, env_name=env_name)
    return default if parsed is None else parsed


def _parse_optional_bool(value: str, *, env_name: str) -> bool | None:
    """Parse an optional boolean from an environment variable."""
    text = value.strip().lower()
    if not text:
        return None
    if text in {"1", "true", "yes", "y", "on"}:
        return True
    if text in {"0", "false", "no", "n", "off"}:
        return False
    raise BooleanEnvVarError(env_name)
