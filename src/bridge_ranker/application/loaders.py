"""Load profiles and connection lists from JSON payloads and CSV exports.

Usage example:
    >>> from pathlib import Path
    >>> from bridge_ranker.application.loaders import load_connections, load_profile
    >>> fs = ...  # Injected FileSystem from the CLI/composition root
    >>> me = load_profile(Path("data/me.json"), fs)
    >>> connections = load_connections(Path("data/Connections.csv"), fs)
"""

from __future__ import annotations

from datetime import date
from pathlib import Path

from ..domain.profiles import EducationEntry, Profile, WorkEntry
from ..exceptions import IncomingDataError
from ..infrastructure.io.validation import (
    parse_connection_export_row,
    parse_connections_file,
    parse_profile,
)
from ..io_contracts import ProfileIO
from ..observability import get_logger
from ..protocols import FileSystem


class ProfileFileNotFoundError(IncomingDataError):
    """Raised when a profile or connections file does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Profile data file not found: {path}")


def profile_from_io(payload: ProfileIO) -> Profile:
    """Build a domain profile from a validated payload."""
    return Profile(
        id=payload["id"] or None,
        name=payload["name"],
        email=payload["email"] or None,
        location=payload["location"] or None,
        title=next(
            (entry["title"] for entry in payload["work_experience"] if entry["title"]), None
        ),
        work_experience=tuple(
            WorkEntry(
                company=entry["company"],
                industry=entry["industry"] or None,
                title=entry["title"] or None,
            )
            for entry in payload["work_experience"]
        ),
        education=tuple(
            EducationEntry(
                school=entry["school"],
                field=entry["field"] or None,
                degree=entry["degree"] or None,
            )
            for entry in payload["education"]
        ),
        skills=tuple(payload["skills"]),
        connected_on=date.fromisoformat(payload["connected_on"])
        if payload["connected_on"]
        else None,
        activity_score=payload["activity_score"],
    )


def load_profile(path: Path, fs: FileSystem) -> Profile:
    """Load a single profile from a JSON object file."""
    if not fs.exists(path):
        raise ProfileFileNotFoundError(str(path))
    return profile_from_io(parse_profile(fs.read_json(path)))


def load_connections(path: Path, fs: FileSystem) -> list[Profile]:
    """Load a connection list from ``{"connections": [...]}`` JSON or a CSV export."""
    logger = get_logger("bridge_ranker.loaders")
    if not fs.exists(path):
        raise ProfileFileNotFoundError(str(path))

    if path.suffix.lower() == ".csv":
        frame = fs.read_csv(path)
        payloads = [
            parse_connection_export_row({str(key): str(value) for key, value in row.items()})
            for row in frame.to_dict(orient="records")
        ]
    else:
        payloads = parse_connections_file(fs.read_json(path))["connections"]

    profiles = [profile_from_io(payload) for payload in payloads]
    logger.info("Loaded %d connections from %s", len(profiles), path)
    return profiles
