"""Pydantic-based validation helpers for inbound IO payloads."""

from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import date, datetime
from typing import TypedDict

from pydantic import TypeAdapter, ValidationError

from ...exceptions import IncomingDataError
from ...io_contracts import (
    ConnectionsFileIO,
    EducationEntryIO,
    ProfileIO,
    WorkEntryIO,
)

# Export dates seen in connection CSVs ("31 Jan 2024") besides ISO-8601.
_EXPORT_DATE_FORMATS = ("%d %b %Y", "%d %B %Y", "%m/%d/%Y")


class WorkEntryInput(TypedDict, total=False):
    company: str | None
    industry: str | None
    title: str | None


class EducationEntryInput(TypedDict, total=False):
    school: str | None
    field: str | None
    degree: str | None


class ProfileInput(TypedDict, total=False):
    id: str | int | None
    name: str | None
    email: str | None
    location: str | None
    work_experience: list[object] | None
    education: list[object] | None
    skills: list[object] | None
    connected_on: str | None
    activity_score: object


class ConnectionsFileInput(TypedDict, total=False):
    connections: list[object]


def validate_as[SchemaT](schema: type[SchemaT], payload: object) -> SchemaT:
    try:
        return TypeAdapter(schema).validate_python(payload)
    except ValidationError as exc:
        message = f"Invalid payload for {schema}."
        raise IncomingDataError(message) from exc


def validate_json_as[SchemaT](schema: type[SchemaT], payload: str | bytes | bytearray) -> SchemaT:
    try:
        return TypeAdapter(schema).validate_json(payload)
    except ValidationError as exc:
        message = f"Invalid JSON payload for {schema}."
        raise IncomingDataError(message) from exc


def _as_str(value: object) -> str:
    return value.strip() if isinstance(value, str) else ""


def _coerce_skills(value: object) -> list[str]:
    if value is None:
        return []
    try:
        items = validate_as(list[object], value)
    except IncomingDataError:
        return []
    cleaned: list[str] = []
    for item in items:
        if isinstance(item, Mapping):
            item = item.get("name")
        text = _as_str(item)
        if text:
            cleaned.append(text)
    return cleaned


def _coerce_activity_score(value: object) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        score = validate_as(float, value)
    except IncomingDataError:
        return None
    return score if math.isfinite(score) else None


def _coerce_date_text(value: object) -> str:
    text = _as_str(value)
    if not text:
        return ""
    try:
        return date.fromisoformat(text[:10]).isoformat()
    except ValueError:
        pass
    for fmt in _EXPORT_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date().isoformat()
        except ValueError:
            continue
    return ""


def _parse_work_entries(value: list[object] | None) -> list[WorkEntryIO]:
    entries: list[WorkEntryIO] = []
    for raw_entry in value or []:
        entry = validate_as(WorkEntryInput, raw_entry)
        company = _as_str(entry.get("company"))
        if not company:
            continue
        entries.append(
            {
                "company": company,
                "industry": _as_str(entry.get("industry")),
                "title": _as_str(entry.get("title")),
            }
        )
    return entries


def _parse_education_entries(value: list[object] | None) -> list[EducationEntryIO]:
    entries: list[EducationEntryIO] = []
    for raw_entry in value or []:
        entry = validate_as(EducationEntryInput, raw_entry)
        school = _as_str(entry.get("school"))
        if not school:
            continue
        entries.append(
            {
                "school": school,
                "field": _as_str(entry.get("field")),
                "degree": _as_str(entry.get("degree")),
            }
        )
    return entries


def parse_profile(payload: object) -> ProfileIO:
    profile = validate_as(ProfileInput, payload)
    raw_id = profile.get("id")
    return {
        "id": str(raw_id).strip() if isinstance(raw_id, int) else _as_str(raw_id),
        "name": _as_str(profile.get("name")),
        "email": _as_str(profile.get("email")),
        "location": _as_str(profile.get("location")),
        "work_experience": _parse_work_entries(profile.get("work_experience")),
        "education": _parse_education_entries(profile.get("education")),
        "skills": _coerce_skills(profile.get("skills")),
        "connected_on": _coerce_date_text(profile.get("connected_on")),
        "activity_score": _coerce_activity_score(profile.get("activity_score")),
    }


def parse_connections_file(payload: object) -> ConnectionsFileIO:
    file_payload = validate_as(ConnectionsFileInput, payload)
    if "connections" not in file_payload:
        raise IncomingDataError("Connections file must contain a 'connections' list.")
    return {"connections": [parse_profile(item) for item in file_payload["connections"]]}


def parse_connection_export_row(row: Mapping[str, str]) -> ProfileIO:
    """Map one row of a connections CSV export onto the profile payload shape."""
    first = _as_str(row.get("First Name"))
    last = _as_str(row.get("Last Name"))
    company = _as_str(row.get("Company"))
    work: list[WorkEntryIO] = []
    if company:
        work.append(
            {
                "company": company,
                "industry": _as_str(row.get("Industry")),
                "title": _as_str(row.get("Position")),
            }
        )
    raw_skills = _as_str(row.get("Skills")).replace(",", ";")
    return {
        "id": "",
        "name": " ".join(part for part in (first, last) if part),
        "email": _as_str(row.get("Email Address")),
        "location": _as_str(row.get("Location")),
        "work_experience": work,
        "education": [],
        "skills": [part.strip() for part in raw_skills.split(";") if part.strip()],
        "connected_on": _coerce_date_text(row.get("Connected On")),
        "activity_score": None,
    }

