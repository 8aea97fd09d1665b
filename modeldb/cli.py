"""CLI interface for the model catalog."""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from modeldb.consts import BUNDLED_DATA_DIR
from modeldb.errors import ModelDBError
from modeldb.models.model_artifacts import ArtifactKind
from modeldb.models.model_refresh import RefreshResult, RefreshStatus
from modeldb.pipeline import build_snapshot, open_stores, run_refresh_pipeline
from modeldb.scheduler import RefreshScheduler
from modeldb.settings import Settings, load_settings
from modeldb.sources.upstream_feed import UpstreamFeed
from modeldb.storage.data_store import TieredDataStore
from modeldb.storage.version_store import VersionStore
from modeldb.transform.stats_generator import compute_catalog_stats

app = typer.Typer(
    name="modeldb",
    help="ModelDB - AI model pricing, capability and context-limit catalog",
)

console = Console()


def _configure_logging(verbose: bool = False, default: int = logging.INFO) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else default,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _settings_or_exit(**overrides: Any) -> Settings:
    try:
        return load_settings(**overrides)
    except ModelDBError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


def _print_refresh_result(result: RefreshResult) -> None:
    if result.status == RefreshStatus.UPDATED:
        console.print("\n[bold green]Published new version![/bold green]")
    else:
        console.print("\n[yellow]Upstream unchanged, nothing published.[/yellow]")

    table = Table(title="Refresh Result")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="magenta")
    table.add_row("Status", result.status.value)
    table.add_row("Version", result.version or "-")
    table.add_row("ETag", result.etag or "-")
    table.add_row("Models", str(result.model_count) if result.model_count is not None else "-")
    table.add_row("Checked at", result.checked_at)
    table.add_row("Forced", "yes" if result.forced else "no")
    console.print(table)


@app.command()
def refresh(
    force: bool = typer.Option(False, "--force", help="Skip change detection"),
    source_url: str = typer.Option(None, "--source-url", help="Override upstream feed URL"),
    data_dir: Path = typer.Option(None, "--data-dir", help="Data directory"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Fetch the upstream feed and publish a new version if it changed."""
    _configure_logging(verbose)

    try:
        result = run_refresh_pipeline(force=force, data_dir=data_dir, source_url=source_url)
    except ModelDBError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    _print_refresh_result(result)


@app.command()
def schedule(
    interval: int = typer.Option(None, "--interval", help="Seconds between refreshes"),
    data_dir: Path = typer.Option(None, "--data-dir", help="Data directory"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Run the refresh loop until interrupted."""
    _configure_logging(verbose)

    settings = _settings_or_exit(data_dir=data_dir, refresh_interval_seconds=interval)

    store, cache = open_stores(settings)

    async def run_loop() -> None:
        async with UpstreamFeed(source_url=settings.source_url) as feed:
            scheduler = RefreshScheduler(
                feed,
                VersionStore(store),
                cache,
                interval_seconds=settings.refresh_interval_seconds,
            )
            await scheduler.run_forever()

    console.print(
        f"[bold]Refreshing every {settings.refresh_interval_seconds}s "
        f"into {settings.data_dir}[/bold] (Ctrl+C to stop)"
    )
    try:
        asyncio.run(run_loop())
    except KeyboardInterrupt:
        console.print("\n[yellow]Scheduler stopped.[/yellow]")


@app.command()
def trigger(
    token: str = typer.Option(None, "--token", help="Admin token"),
    force: bool = typer.Option(False, "--force", help="Skip change detection"),
    data_dir: Path = typer.Option(None, "--data-dir", help="Data directory"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Authenticated manual refresh (checks MODELDB_ADMIN_TOKEN)."""
    _configure_logging(verbose)

    async def run_trigger() -> RefreshResult:
        settings = load_settings(data_dir=data_dir)
        store, cache = open_stores(settings)
        async with UpstreamFeed(source_url=settings.source_url) as feed:
            scheduler = RefreshScheduler(
                feed, VersionStore(store), cache, admin_token=settings.admin_token
            )
            return await scheduler.trigger(token, force=force)

    try:
        result = asyncio.run(run_trigger())
    except ModelDBError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    _print_refresh_result(result)


@app.command()
def show(
    kind: str = typer.Argument(..., help="Artifact: list, map, providers or metadata"),
    data_dir: Path = typer.Option(None, "--data-dir", help="Data directory"),
    limit: int = typer.Option(20, "--limit", "-n", help="Rows to display for list/map"),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON"),
) -> None:
    """Read an artifact through the cache -> durable -> bundled read path."""
    _configure_logging(default=logging.WARNING)

    try:
        artifact_kind = ArtifactKind(kind)
    except ValueError:
        valid = ", ".join(k.value for k in ArtifactKind)
        console.print(f"[red]Error:[/red] Invalid kind '{kind}'. Must be one of: {valid}")
        raise typer.Exit(1)

    settings = _settings_or_exit(data_dir=data_dir)
    store, cache = open_stores(settings)
    data_store = TieredDataStore(cache, store, cache_timeout=settings.cache_timeout_seconds)
    payload, tier = asyncio.run(data_store.get_with_tier(artifact_kind))

    if as_json:
        console.print_json(json.dumps(payload, ensure_ascii=False))
        return

    console.print(f"[dim]Served from: {tier.value}[/dim]\n")

    if artifact_kind == ArtifactKind.METADATA:
        table = Table(title="Metadata")
        table.add_column("Field", style="cyan")
        table.add_column("Value", style="magenta")
        for key, value in payload.items():
            table.add_row(key, ", ".join(value) if isinstance(value, list) else str(value))
        console.print(table)
        return

    if artifact_kind == ArtifactKind.PROVIDERS:
        table = Table(title=f"Providers ({len(payload)})")
        table.add_column("Provider", style="cyan")
        table.add_column("Models", justify="right", style="magenta")
        for provider_id, models in payload.items():
            table.add_row(provider_id, str(len(models)))
        console.print(table)
        return

    records = payload if artifact_kind == ArtifactKind.LIST else list(payload.values())
    table = Table(title=f"Models (showing {min(limit, len(records))} of {len(records)})")
    table.add_column("Model", style="cyan")
    table.add_column("Name", style="white")
    table.add_column("Provider", style="blue")
    table.add_column("Type", style="yellow")
    table.add_column("Input $/M", justify="right", style="green")
    table.add_column("Output $/M", justify="right", style="green")
    table.add_column("Context", justify="right", style="magenta")
    for record in records[:limit]:
        table.add_row(
            record.get("model_id", "-"),
            record.get("model_name", "-"),
            record.get("provider_id", "-"),
            record.get("model_type", "-"),
            f"{record.get('input_cost_per_million') or 0:.2f}",
            f"{record.get('output_cost_per_million') or 0:.2f}",
            str(record.get("max_input_tokens") or "-"),
        )
    console.print(table)


@app.command()
def manifest(
    data_dir: Path = typer.Option(None, "--data-dir", help="Data directory"),
    limit: int = typer.Option(10, "--limit", "-n", help="Most recent versions to display"),
) -> None:
    """Show the manifest and its version log."""
    _configure_logging(default=logging.WARNING)

    settings = _settings_or_exit(data_dir=data_dir)
    store, cache = open_stores(settings)
    current = asyncio.run(VersionStore(store).read_manifest())

    if current is None or current.latest is None:
        console.print("[yellow]No version published yet. Run 'modeldb refresh' first.[/yellow]")
        console.print("[dim]Reads are served from the bundled snapshot.[/dim]")
        return

    console.print(f"[bold]Latest:[/bold] {current.latest}")
    console.print(f"[bold]ETag:[/bold] {current.etag or '-'}")
    console.print(f"[bold]Checked at:[/bold] {current.checked_at or '-'}")
    console.print(f"[bold]Edge cache entries:[/bold] {len(cache.list_paths())}\n")

    table = Table(title=f"Versions ({len(current.versions)} total)")
    table.add_column("Version", style="cyan")
    table.add_column("Generated", style="white")
    table.add_column("Models", justify="right", style="magenta")
    table.add_column("ETag", style="dim")
    for entry in reversed(current.versions[-limit:]):
        table.add_row(entry.id, entry.generated_at, str(entry.model_count), entry.etag or "-")
    console.print(table)


@app.command()
def stats(
    data_dir: Path = typer.Option(None, "--data-dir", help="Data directory"),
) -> None:
    """Show catalog statistics for the served model list."""
    _configure_logging(default=logging.WARNING)

    settings = _settings_or_exit(data_dir=data_dir)
    store, cache = open_stores(settings)
    data_store = TieredDataStore(cache, store, cache_timeout=settings.cache_timeout_seconds)

    async def load() -> tuple[list, dict]:
        return await data_store.get_list(), await data_store.get_metadata()

    records, metadata = asyncio.run(load())
    catalog = compute_catalog_stats(records, metadata.get("capabilities"))

    console.print(f"\n[bold]Total models:[/bold] {catalog.total}")
    console.print(
        f"[bold]Active:[/bold] {catalog.deprecation.active}  "
        f"[bold]Deprecated:[/bold] {catalog.deprecation.deprecated}\n"
    )

    for title, counts in (
        ("Models by Provider", catalog.providers),
        ("Models by Type", catalog.types),
        ("Models by Capability", catalog.capabilities),
    ):
        table = Table(title=title)
        table.add_column("Name", style="cyan")
        table.add_column("Count", justify="right", style="magenta")
        for name, count in sorted(counts.items(), key=lambda item: (-item[1], item[0])):
            table.add_row(name, str(count))
        console.print(table)


@app.command()
def snapshot(
    output: Path = typer.Option(BUNDLED_DATA_DIR, "--output", "-o", help="Output directory"),
    source_url: str = typer.Option(None, "--source-url", help="Override upstream feed URL"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Regenerate the bundled fallback snapshot from the upstream feed."""
    _configure_logging(verbose)

    settings = _settings_or_exit(source_url=source_url)
    try:
        artifacts, paths = asyncio.run(build_snapshot(settings.source_url, output))
    except ModelDBError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    console.print(
        f"[bold green]Wrote snapshot of {artifacts.metadata.model_count} models[/bold green]"
    )
    for path in paths:
        console.print(f"  {path}")


if __name__ == "__main__":
    app()
