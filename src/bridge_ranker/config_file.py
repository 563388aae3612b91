"""Typed parsing and validation for ranker config files.

Usage example:
    # bridge-ranker.toml
    # schema_version = 1
    #
    # [ranker]
    # max_connections = 250
    # weight_industry = 0.4
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .exceptions import ConfigFileNotFoundError, ConfigFileParseError, ConfigFileValidationError
from .protocols import FileSystem

_SCHEMA_VERSION = 1


@dataclass(frozen=True)
class RankerConfigFile:
    """Validated ranker config values loaded from a TOML file."""

    max_connections: int | None = None
    good_candidate_threshold: float | None = None
    top_candidates: int | None = None
    low_confidence_threshold: float | None = None
    cache_ttl_days: int | None = None
    max_workers: int | None = None
    case_sensitive_skills: bool | None = None
    case_sensitive_companies: bool | None = None
    reference_tables_path: str | None = None
    weight_industry: float | None = None
    weight_skills: float | None = None
    weight_education: float | None = None
    weight_location: float | None = None
    weight_companies: float | None = None


class _RankerSectionModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    max_connections: int | None = None
    good_candidate_threshold: float | None = None
    top_candidates: int | None = None
    low_confidence_threshold: float | None = None
    cache_ttl_days: int | None = None
    max_workers: int | None = None
    case_sensitive_skills: bool | None = None
    case_sensitive_companies: bool | None = None
    reference_tables_path: str | None = None
    weight_industry: float | None = None
    weight_skills: float | None = None
    weight_education: float | None = None
    weight_location: float | None = None
    weight_companies: float | None = None

    @field_validator("reference_tables_path")
    @classmethod
    def _validate_non_empty_text(cls, value: str | None) -> str | None:
        if value is None:
            return None
        text = value.strip()
        if not text:
            raise ValueError
        return text

    @field_validator("max_connections", "top_candidates", "cache_ttl_days", "max_workers")
    @classmethod
    def _validate_positive_int(cls, value: int | None) -> int | None:
        if value is None:
            return None
        if value < 1:
            raise ValueError
        return value

    @field_validator(
        "good_candidate_threshold",
        "low_confidence_threshold",
        "weight_industry",
        "weight_skills",
        "weight_education",
        "weight_location",
        "weight_companies",
    )
    @classmethod
    def _validate_score_range(cls, value: float | None) -> float | None:
        if value is None:
            return None
        if value < 0.0 or value > 1.0:
            raise ValueError
        return value


class _ConfigFileModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    schema_version: int
    ranker: _RankerSectionModel

    @field_validator("schema_version")
    @classmethod
    def _validate_schema_version(cls, value: int) -> int:
        if value != _SCHEMA_VERSION:
            raise ValueError
        return value


def _format_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ("<root>",)))
    message = str(first.get("msg", "invalid value"))
    return f"{location}: {message}"


def load_ranker_config_file(*, path: Path, fs: FileSystem) -> RankerConfigFile:
    """Load and validate a ranker TOML config file."""
    if not fs.exists(path):
        raise ConfigFileNotFoundError(str(path))

    raw_payload = fs.read_text(path)
    try:
        payload: object = tomllib.loads(raw_payload)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigFileParseError(str(path), str(exc)) from exc

    try:
        model = _ConfigFileModel.model_validate(payload)
    except ValidationError as exc:
        raise ConfigFileValidationError(str(path), _format_validation_error(exc)) from exc

    section = model.ranker
    return RankerConfigFile(**section.model_dump())
