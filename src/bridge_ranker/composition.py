"""Composition root for wiring CLI dependencies."""

from __future__ import annotations

from datetime import timedelta

from .cli import CliDependencies, create_app
from .config import RankerConfig
from .infrastructure import InMemorySimilarityCache, LocalFileSystem


def build_cli_dependencies(*, config: RankerConfig) -> CliDependencies:
    """Build concrete dependencies for CLI commands.

    Args:
        config: Ranker configuration (used for cache wiring).
    """
    fs = LocalFileSystem()
    cache = InMemorySimilarityCache(ttl=timedelta(days=config.cache_ttl_days))
    return CliDependencies(fs=fs, cache=cache)


app = create_app(build_cli_dependencies)
