"""Load replacement reference tables from a validated JSON file.

Usage example:
    >>> from pathlib import Path
    >>> from bridge_ranker.application.reference_tables import load_reference_tables
    >>> fs = ...  # Injected FileSystem from the CLI/composition root
    >>> tables = load_reference_tables(path=Path("data/reference/tables.json"), fs=fs)
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ..domain.reference_tables import ReferenceTables
from ..exceptions import ReferenceTablesFileNotFoundError, ReferenceTablesValidationError
from ..protocols import FileSystem

_SCHEMA_VERSION = 1


class _ReferenceTablesModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    schema_version: int
    industry_relationships: dict[str, list[str]]
    country_regions: dict[str, str]
    us_states: dict[str, str]

    @field_validator("schema_version")
    @classmethod
    def _validate_schema_version(cls, value: int) -> int:
        if value != _SCHEMA_VERSION:
            raise ValueError
        return value

    @field_validator("us_states")
    @classmethod
    def _validate_state_abbreviations(cls, value: dict[str, str]) -> dict[str, str]:
        for abbreviation, name in value.items():
            if not abbreviation.strip() or not name.strip():
                raise ValueError
        return value


def _format_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ("<root>",)))
    message = str(first.get("msg", "invalid value"))
    return f"{location}: {message}"


def load_reference_tables(*, path: Path, fs: FileSystem) -> ReferenceTables:
    """Load and validate a reference tables JSON file."""
    if not fs.exists(path):
        raise ReferenceTablesFileNotFoundError(str(path))

    payload = fs.read_json(path)
    try:
        model = _ReferenceTablesModel.model_validate(payload)
    except ValidationError as exc:
        raise ReferenceTablesValidationError(str(path), _format_validation_error(exc)) from exc

    return ReferenceTables.build(
        industry_relationships=model.industry_relationships,
        country_regions=model.country_regions,
        us_states=model.us_states,
    )
