"""Tests for CLI composition root wiring."""

from __future__ import annotations

from datetime import timedelta

import typer

from bridge_ranker import composition
from bridge_ranker.config import RankerConfig
from bridge_ranker.infrastructure import InMemorySimilarityCache, LocalFileSystem


def test_build_cli_dependencies_wires_local_fs_and_cache() -> None:
    deps = composition.build_cli_dependencies(config=RankerConfig(cache_ttl_days=2))

    assert isinstance(deps.fs, LocalFileSystem)
    assert isinstance(deps.cache, InMemorySimilarityCache)
    assert deps.cache.ttl == timedelta(days=2)
    assert len(deps.cache) == 0


def test_build_cli_dependencies_returns_fresh_cache_per_call() -> None:
    config = RankerConfig()

    first = composition.build_cli_dependencies(config=config)
    second = composition.build_cli_dependencies(config=config)

    assert first.cache is not second.cache


def test_composition_exposes_typer_app() -> None:
    assert isinstance(composition.app, typer.Typer)
