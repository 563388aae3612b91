"""CLI for the network bridge ranker.

Commands:
- similarity: Score how similar two profiles are
- estimate: Map a similarity score to an expected acceptance rate
- find-bridges: Rank intermediaries who can introduce you to a target
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Protocol

import typer
from rich import print as rprint

from . import __version__
from .application.intermediary_search import bridge_pairs
from .application.intermediary_strategy import try_intermediary_strategy
from .application.loaders import load_connections, load_profile
from .application.reference_tables import load_reference_tables
from .application.similarity_service import SimilarityService
from .config import RankerConfig
from .config_file import load_ranker_config_file
from .domain.acceptance import estimate_acceptance_rate
from .domain.reference_tables import ReferenceTables
from .domain.similarity import calculate_detailed_similarity, calculate_profile_similarity
from .domain.similarity_config import SimilarityConfig
from .exceptions import BridgeRankerError
from .infrastructure.graph import InMemoryConnectionGraph
from .observability import set_log_level
from .protocols import FileSystem, SimilarityCache


class DependenciesBuilder(Protocol):
    """Protocol for constructing CLI dependencies."""

    def __call__(self, *, config: RankerConfig) -> CliDependencies:
        """Build dependencies for CLI commands."""
        ...


@dataclass(frozen=True)
class CliDependencies:
    """Concrete dependencies required by the CLI."""

    fs: FileSystem
    cache: SimilarityCache | None


@dataclass(frozen=True)
class CliContext:
    """Runtime CLI context for a single command invocation."""

    config: RankerConfig
    deps_builder: DependenciesBuilder

    def build_dependencies(self, *, config: RankerConfig | None = None) -> CliDependencies:
        """Return dependencies using the configured builder."""
        return self.deps_builder(config=config or self.config)


class CliContextNotInitialisedError(typer.BadParameter):
    """Raised when CLI context is missing."""

    def __init__(self) -> None:
        super().__init__("CLI context is not initialised. Use the bridge-ranker entry point.")


class ScoreOutOfRangeError(typer.BadParameter):
    """Raised when a similarity score argument is outside [0, 1]."""

    def __init__(self) -> None:
        super().__init__("SCORE must be between 0 and 1.")


def _get_context(ctx: typer.Context) -> CliContext:
    if not isinstance(ctx.obj, CliContext):
        raise CliContextNotInitialisedError()
    return ctx.obj


def _version_callback(value: bool) -> None:
    if value:
        rprint(f"bridge-ranker {__version__}")
        raise typer.Exit()


def _pct(value: float) -> str:
    return f"{value * 100:.1f}%"


def _similarity_config(config: RankerConfig, fs: FileSystem) -> SimilarityConfig:
    tables: ReferenceTables | None = None
    if config.reference_tables_path:
        tables = load_reference_tables(path=Path(config.reference_tables_path), fs=fs)
    return config.similarity_config(tables)


def create_app(deps_builder: DependenciesBuilder) -> typer.Typer:
    """Create a Typer app wired with the provided dependencies builder."""
    app = typer.Typer(
        add_completion=False,
        help="Rank people who can introduce you to someone outside your network.",
    )

    @app.callback()
    def main(
        ctx: typer.Context,
        config_path: Annotated[
            Path | None,
            typer.Option(
                "--config",
                "-c",
                help="TOML config file (schema_version = 1, [ranker] section)",
            ),
        ] = None,
        log_level: Annotated[
            str | None,
            typer.Option("--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)"),
        ] = None,
        version: Annotated[
            bool,
            typer.Option(
                "--version",
                callback=_version_callback,
                is_eager=True,
                help="Show the version and exit.",
            ),
        ] = False,
    ) -> None:
        """Initialise CLI context."""
        config = RankerConfig.from_env()
        if config_path is not None:
            deps = deps_builder(config=config)
            try:
                file_config = load_ranker_config_file(path=config_path, fs=deps.fs)
            except BridgeRankerError as exc:
                raise typer.BadParameter(str(exc), param_hint="--config") from exc
            config = config.with_file_overrides(file_config)
        if log_level is not None:
            config = config.with_overrides(log_level=log_level)
        try:
            set_log_level(config.log_level)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--log-level") from exc
        ctx.obj = CliContext(config=config, deps_builder=deps_builder)

    @app.command()
    def similarity(
        ctx: typer.Context,
        profile_a: Annotated[Path, typer.Argument(help="First profile JSON file")],
        profile_b: Annotated[Path, typer.Argument(help="Second profile JSON file")],
        detailed: Annotated[
            bool,
            typer.Option("--detailed", "-d", help="Show comparison details"),
        ] = False,
    ) -> None:
        """Score how similar two profiles are."""
        state = _get_context(ctx)
        deps = state.build_dependencies()
        try:
            sim_config = _similarity_config(state.config, deps.fs)
            first = load_profile(profile_a, deps.fs)
            second = load_profile(profile_b, deps.fs)
        except BridgeRankerError as exc:
            rprint(f"[red]✗ {exc}[/red]")
            raise typer.Exit(code=1) from exc

        if not detailed:
            result = calculate_profile_similarity(first, second, sim_config)
            rprint(f"[green]✓ Similarity:[/green] {_pct(result.overall)}")
            for name, score in result.breakdown.as_dict().items():
                rprint(f"  {name}: {_pct(score)}")
            return

        details = calculate_detailed_similarity(first, second, sim_config)
        meta = details.metadata
        rprint(f"[green]✓ Similarity:[/green] {_pct(details.overall)}")
        for name, score in details.breakdown.as_dict().items():
            rprint(f"  {name}: {_pct(score)}")
        rprint(
            f"  Skills shared: {meta.skills_compared.intersection_count}"
            f" of {meta.skills_compared.union_count}"
        )
        rprint(
            f"  Companies shared: {meta.companies_compared.intersection_count}"
            f" of {meta.companies_compared.union_count}"
        )
        if meta.education_details.matched_schools:
            rprint(f"  Schools: {', '.join(meta.education_details.matched_schools)}")
        if meta.industry_details.exact_matches:
            rprint(f"  Industries: {', '.join(meta.industry_details.exact_matches)}")
        for left, right in meta.industry_details.related_matches:
            rprint(f"  Related industries: {left} ~ {right}")
        rprint(f"  Location match: {meta.location_details.match_level}")

    @app.command()
    def estimate(
        score: Annotated[float, typer.Argument(help="Overall similarity score (0-1)")],
    ) -> None:
        """Map a similarity score to an expected acceptance rate."""
        if not 0.0 <= score <= 1.0:
            raise ScoreOutOfRangeError()
        result = estimate_acceptance_rate(score)
        rprint(
            f"[green]✓ Acceptance:[/green] {_pct(result.acceptance_rate)} "
            f"({_pct(result.lower_bound)} to {_pct(result.upper_bound)})"
        )
        rprint(f"  Quality: {result.quality}")
        rprint(f"  Comparable to: {result.comparable_to}")

    @app.command(name="find-bridges")
    def find_bridges(
        ctx: typer.Context,
        source_path: Annotated[
            Path,
            typer.Option("--source", "-s", help="Your profile JSON file"),
        ],
        target_path: Annotated[
            Path,
            typer.Option("--target", "-t", help="Target profile JSON file"),
        ],
        source_connections_path: Annotated[
            Path,
            typer.Option(
                "--source-connections",
                help="Your connections (JSON with a 'connections' list, or a CSV export)",
            ),
        ],
        target_connections_path: Annotated[
            Path | None,
            typer.Option(
                "--target-connections",
                help="Target's connections, when known (JSON or CSV export)",
            ),
        ] = None,
        max_connections: Annotated[
            int | None,
            typer.Option(
                "--max-connections",
                min=1,
                help="Sample budget per connection list (default: 500)",
            ),
        ] = None,
        top: Annotated[
            int | None,
            typer.Option("--top", "-n", min=1, help="Number of candidates to show (default: 5)"),
        ] = None,
        reference_tables: Annotated[
            Path | None,
            typer.Option("--reference-tables", help="Replacement reference tables JSON file"),
        ] = None,
    ) -> None:
        """Rank intermediaries who can introduce you to a target."""
        state = _get_context(ctx)
        config = state.config
        if max_connections is not None or top is not None or reference_tables is not None:
            config = config.with_overrides(
                max_connections=max_connections,
                top_candidates=top,
                reference_tables_path=str(reference_tables) if reference_tables else None,
            )
        deps = state.build_dependencies(config=config)

        try:
            sim_config = _similarity_config(config, deps.fs)
            source = load_profile(source_path, deps.fs)
            target = load_profile(target_path, deps.fs)
            source_connections = load_connections(source_connections_path, deps.fs)
            target_connections = (
                load_connections(target_connections_path, deps.fs)
                if target_connections_path is not None
                else []
            )
        except BridgeRankerError as exc:
            rprint(f"[red]✗ {exc}[/red]")
            raise typer.Exit(code=1) from exc

        graph = InMemoryConnectionGraph()
        graph.add_connections(source, source_connections)
        if target_connections:
            graph.add_connections(target, target_connections)

        service = SimilarityService(config=sim_config, cache=deps.cache)
        if deps.cache is not None:
            pairs = bridge_pairs(
                source, target, source_connections, target_connections, config.max_connections
            )
            service.score_pairs(pairs, max_workers=config.max_workers)
        strategy = try_intermediary_strategy(
            source,
            target,
            graph,
            config=sim_config,
            similarity=service.similarity,
            max_connections=config.max_connections,
            top_n=config.top_candidates,
            good_threshold=config.good_candidate_threshold,
            low_confidence_threshold=config.low_confidence_threshold,
        )
        if strategy is None:
            rprint("[yellow]No intermediary found: fall back to cold outreach.[/yellow]")
            return

        colour = "yellow" if strategy.low_confidence else "green"
        bridge = strategy.intermediary.person.display_name()
        rprint(f"[{colour}]✓ Best bridge:[/{colour}] {bridge}")
        rprint(f"  Confidence: {_pct(strategy.confidence)}")
        rprint(f"  Estimated acceptance: {_pct(strategy.estimated_acceptance)}")
        rprint(f"  {strategy.reasoning}")
        rprint("[bold]Next steps:[/bold]")
        for number, step in enumerate(strategy.next_steps, start=1):
            rprint(f"  {number}. {step}")
        if len(strategy.candidates) > 1:
            rprint("[bold]Other candidates:[/bold]")
            for candidate in strategy.candidates[1:]:
                rprint(
                    f"  {candidate.person.display_name()} ({candidate.direction}): "
                    f"score {_pct(candidate.score)}, "
                    f"acceptance {_pct(candidate.estimated_acceptance)}"
                )

    return app
