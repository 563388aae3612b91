"""Boundary-neutral IO contracts for infrastructure validation.

Usage example:
    from bridge_ranker.io_contracts import ProfileIO

    profile: ProfileIO = {
        "id": "alice",
        "name": "Alice Example",
        "email": "alice@example.com",
        "location": "San Francisco, CA",
        "work_experience": [{"company": "Acme", "industry": "Tech", "title": "Engineer"}],
        "education": [{"school": "MIT", "field": "Computer Science", "degree": "BSc"}],
        "skills": ["Python", "React"],
        "connected_on": "2024-01-31",
        "activity_score": 0.4,
    }
"""

from __future__ import annotations

from typing import TypedDict


class WorkEntryIO(TypedDict):
    """Work history entry payload shape."""

    company: str
    industry: str
    title: str


class EducationEntryIO(TypedDict):
    """Education entry payload shape."""

    school: str
    field: str
    degree: str


class ProfileIO(TypedDict):
    """Normalised profile payload shape.

    Empty strings stand for missing text values; ``connected_on`` is ISO-8601 or empty.
    """

    id: str
    name: str
    email: str
    location: str
    work_experience: list[WorkEntryIO]
    education: list[EducationEntryIO]
    skills: list[str]
    connected_on: str
    activity_score: float | None


class ConnectionsFileIO(TypedDict):
    """Connections file payload shape."""

    connections: list[ProfileIO]

