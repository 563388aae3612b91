"""Tests for profile identity helpers."""

from __future__ import annotations

from bridge_ranker.domain.profiles import Profile, same_person


def test_identity_key_prefers_id_then_email() -> None:
    assert Profile(name="Ann", id="a1", email="ann@example.com").identity_key() == "a1"
    assert Profile(name="Ann", email="ann@example.com").identity_key() == "ann@example.com"
    assert Profile(name="Ann", id="  ", email="").identity_key() is None


def test_identity_key_never_falls_back_to_name() -> None:
    assert Profile(name="Sam Lee").identity_key() is None


def test_same_person_matches_shared_id() -> None:
    assert same_person(Profile(name="A", id="x"), Profile(name="B", id="x"))


def test_same_person_matches_email_case_insensitively() -> None:
    assert same_person(
        Profile(name="A", email="Ann@Example.com"), Profile(name="B", email="ann@example.com ")
    )


def test_same_person_never_matches_on_missing_identity() -> None:
    assert not same_person(Profile(name="A"), Profile(name="A"))
    assert not same_person(Profile(name="A", id=""), Profile(name="B", id=""))


def test_display_name_falls_back_to_email_then_id() -> None:
    assert Profile(email="ann@example.com").display_name() == "ann@example.com"
    assert Profile(id="a1").display_name() == "a1"
    assert Profile().display_name() == "Unknown"
