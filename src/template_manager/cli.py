"""CLI interface for template-manager."""

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from .catalog import (
    Catalog,
    ContentSource,
    DirectoryContentSource,
    HttpContentSource,
    load_catalog,
    resolve_manifest,
)
from .config.logging import get_logger, setup_logging
from .config.settings import Settings, get_settings
from .exceptions import ClipboardError, ManifestError, TemplateNotFoundError
from .ui import CopyFeedback, copy_entry, preview

app = typer.Typer(
    name="template-manager",
    help="Browse, search and copy HTML/text snippet templates.",
    rich_markup_mode="rich",
)

console = Console()
logger = get_logger(__name__)


def build_source(settings: Settings) -> ContentSource:
    """HTTP source when a base URL is configured, local directory otherwise."""
    if settings.base_url:
        return HttpContentSource(settings.base_url, timeout=settings.http_timeout)
    return DirectoryContentSource(settings.content_root)


async def _load(settings: Settings, failures: list[tuple[str, BaseException]]) -> Catalog:
    manifest = resolve_manifest(settings.manifest_path)
    source = build_source(settings)

    def sink(path: str, error: BaseException) -> None:
        logger.debug("Error processing file %s: %s", path, error)
        failures.append((path, error))

    try:
        return await load_catalog(
            manifest,
            source,
            error_sink=sink,
            default_owner=settings.default_owner,
            concurrency=settings.fetch_concurrency,
        )
    finally:
        if isinstance(source, HttpContentSource):
            await source.aclose()


def _get_catalog(ctx: typer.Context) -> Catalog:
    settings: Settings = ctx.obj
    failures: list[tuple[str, BaseException]] = []
    try:
        catalog = asyncio.run(_load(settings, failures))
    except ManifestError as e:
        console.print(f"[red]Invalid manifest:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    for path, error in failures:
        console.print(f"[yellow]Skipped {escape(path)}:[/yellow] {escape(str(error))}")
    return catalog


@app.callback()
def _configure(
    ctx: typer.Context,
    content_root: Path = typer.Option(
        None, "--content-root", "-r", help="Directory containing the template files"
    ),
    base_url: str = typer.Option(None, "--base-url", help="Fetch templates over HTTP instead"),
    manifest: Path = typer.Option(None, "--manifest", "-m", help="JSON manifest file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Load settings and apply command line overrides."""
    settings = get_settings()
    overrides = {
        "content_root": content_root,
        "base_url": base_url,
        "manifest_path": manifest,
    }
    update = {k: v for k, v in overrides.items() if v is not None}
    if verbose:
        update["log_level"] = "DEBUG"
    ctx.obj = settings.model_copy(update=update)
    setup_logging(level=ctx.obj.log_level, console=Console(stderr=True))


@app.command("list")
def list_templates(
    ctx: typer.Context,
    owner: str = typer.Option(None, "--owner", "-o", help="Owner whose templates to show"),
    search: str = typer.Option("", "--search", "-s", help="Filter by name, category or content"),
) -> None:
    """List one owner's templates, optionally filtered by a search term."""
    catalog = _get_catalog(ctx)
    owner = owner or ctx.obj.default_owner
    results = catalog.query(owner, search)
    if not results:
        console.print(
            Panel(
                "[bold]No templates found[/bold]\n"
                "[dim]Try adjusting your search or pick another owner.[/dim]",
                border_style="yellow",
            )
        )
        return
    table = Table(title=Text(f"Templates for {owner}"), show_header=True, header_style="bold")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Category", style="magenta")
    table.add_column("Preview", style="dim")
    for entry in results:
        table.add_row(
            Text(entry.id), Text(entry.name), Text(entry.category), Text(preview(entry.content, 50))
        )
    console.print(table)


@app.command()
def show(
    ctx: typer.Context,
    template_id: str = typer.Argument(..., help="Template id, e.g. 'hiroshima-story.html'"),
) -> None:
    """Print a template's raw content."""
    catalog = _get_catalog(ctx)
    try:
        entry = catalog.get(template_id)
    except TemplateNotFoundError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)
    console.print(
        Panel(
            f"[bold]{escape(entry.name)}[/bold] [dim]({escape(entry.category)})[/dim]",
            border_style="blue",
        )
    )
    console.print(entry.content, markup=False, highlight=False)


@app.command()
def copy(
    ctx: typer.Context,
    template_id: str = typer.Argument(..., help="Template id to copy"),
) -> None:
    """Copy a template's content to the system clipboard."""
    catalog = _get_catalog(ctx)
    try:
        entry = catalog.get(template_id)
    except TemplateNotFoundError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)
    feedback = CopyFeedback(duration=ctx.obj.copy_feedback_seconds)
    try:
        copy_entry(entry, feedback)
    except ClipboardError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]✓ {feedback.label_for(entry.id)}[/green] {escape(entry.name)}")


@app.command()
def owners(ctx: typer.Context) -> None:
    """List owners and how many templates each has."""
    catalog = _get_catalog(ctx)
    table = Table(title="Owners", show_header=True, header_style="bold")
    table.add_column("Owner", style="cyan")
    table.add_column("Templates", justify="right")
    for owner in catalog.owners():
        table.add_row(Text(owner), str(len(catalog.query(owner))))
    console.print(table)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
