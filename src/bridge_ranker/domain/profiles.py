"""Immutable profile records consumed by the ranking core.

Usage example:
    from bridge_ranker.domain.profiles import EducationEntry, Profile, WorkEntry

    profile = Profile(
        id="alice",
        name="Alice Example",
        location="San Francisco, CA",
        work_experience=(WorkEntry(company="Acme", industry="Software Development"),),
        education=(EducationEntry(school="MIT", field="Computer Science"),),
        skills=("Python", "React"),
    )
    assert profile.identity_key() == "alice"
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class WorkEntry:
    """A single work-history entry."""

    company: str
    industry: str | None = None
    title: str | None = None


@dataclass(frozen=True)
class EducationEntry:
    """A single education entry."""

    school: str
    field: str | None = None
    degree: str | None = None


@dataclass(frozen=True)
class Profile:
    """Caller-owned professional profile.

    ``connected_on`` and ``activity_score`` are optional ranking hints used only by
    the connection sampler when a list exceeds its budget.
    """

    name: str = ""
    id: str | None = None
    email: str | None = None
    location: str | None = None
    title: str | None = None
    work_experience: tuple[WorkEntry, ...] = ()
    education: tuple[EducationEntry, ...] = ()
    skills: tuple[str, ...] = ()
    connected_on: date | None = None
    activity_score: float | None = None

    def identity_key(self) -> str | None:
        """Return the id, then the email; None when neither is set.

        Names are not unique, so they never identify a profile on their own.
        """
        for value in (self.id, self.email):
            if value and value.strip():
                return value.strip()
        return None

    def display_name(self) -> str:
        return self.name or self.email or self.id or "Unknown"


def same_person(a: Profile, b: Profile) -> bool:
    """Return True when two profiles share an id or an email address."""
    if a.id and b.id and a.id == b.id:
        return True
    if a.email and b.email and a.email.strip().lower() == b.email.strip().lower():
        return True
    return False
