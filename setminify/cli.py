"""Command-line interface for setminify."""

import json
from datetime import datetime
from pathlib import Path

import click
import structlog
from rich.console import Console
from rich.table import Table

from . import __version__
from .assets.manager import AssetManager
from .assets.markup import render_tags
from .utils.config import Settings, get_settings
from .utils.errors import SetMinifyError
from .utils.logging import setup_logging
from .utils.types import AssetKind

logger = structlog.get_logger(__name__)
console = Console()


def _manager(ctx: click.Context) -> AssetManager:
    """Load the asset manager for the settings on the context."""
    settings: Settings = ctx.obj["settings"]
    try:
        return AssetManager.from_settings(settings)
    except SetMinifyError as e:
        logger.error("Failed to load asset configuration", error=str(e))
        raise click.ClickException(str(e)) from e


@click.group()
@click.version_option(version=__version__, prog_name="setminify")
@click.option(
    "--root",
    default=None,
    help="Application root (overrides SETMINIFY_ROOT_PATH)",
    type=click.Path(file_okay=False, path_type=Path),
)
@click.option(
    "--config",
    "assets_file",
    default=None,
    help="Asset set file, relative to the root",
)
@click.option(
    "--minify/--no-minify",
    default=None,
    help="Reference built artifacts instead of source files",
)
@click.pass_context
def cli(
    ctx: click.Context,
    root: Path | None,
    assets_file: str | None,
    minify: bool | None,
) -> None:
    """Combine and minify named sets of CSS and JavaScript files."""
    settings = get_settings()
    overrides: dict[str, object] = {}
    if root is not None:
        overrides["root_path"] = root
    if assets_file is not None:
        overrides["assets_file"] = assets_file
    if minify is not None:
        overrides["minify"] = minify
    if overrides:
        settings = Settings(
            app=settings.app.model_copy(update=overrides), paths=settings.paths
        )

    setup_logging(settings)
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


@cli.command()
@click.pass_context
def build(ctx: click.Context) -> None:
    """Build the minified artifact of every set."""
    manager = _manager(ctx)
    try:
        written = manager.build()
    except (SetMinifyError, OSError) as e:
        console.print(f"[bold red]✗[/bold red] Build failed: {e}")
        raise click.ClickException(str(e)) from e

    for path in written:
        console.print(f"[green]✓[/green] {path}")
    console.print(f"Built [yellow]{len(written)}[/yellow] artifact(s)")


@cli.command()
@click.pass_context
def clean(ctx: click.Context) -> None:
    """Delete every built artifact."""
    manager = _manager(ctx)
    try:
        removed = manager.clean()
    except OSError as e:
        raise click.ClickException(str(e)) from e

    for path in removed:
        console.print(f"[red]-[/red] {path}")
    if not removed:
        console.print("[yellow]No artifacts to remove[/yellow]")


@cli.command()
@click.argument("kind", type=click.Choice([k.value for k in AssetKind]))
@click.argument("set_name")
@click.option("--tags", is_flag=True, help="Print rendered HTML tags")
@click.option(
    "--format",
    "-f",
    "output_format",
    default="text",
    help="Output format (text, json)",
    type=click.Choice(["text", "json"]),
)
@click.pass_context
def resolve(
    ctx: click.Context, kind: str, set_name: str, tags: bool, output_format: str
) -> None:
    """Show the references a template would receive for a set."""
    manager = _manager(ctx)
    try:
        references = manager.reference(AssetKind.parse(kind), set_name)
    except (SetMinifyError, OSError) as e:
        raise click.ClickException(str(e)) from e

    if tags:
        click.echo(render_tags(references))
    elif output_format == "json":
        click.echo(
            json.dumps([ref.model_dump(mode="json") for ref in references], indent=2)
        )
    else:
        for ref in references:
            click.echo(ref.url)


@cli.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show configuration and the state of each artifact."""
    settings: Settings = ctx.obj["settings"]
    console.print("[bold blue]setminify status[/bold blue]")
    console.print()
    console.print(f"Root: [cyan]{settings.root}[/cyan]")
    console.print(f"Asset file: [cyan]{settings.assets_file}[/cyan]")
    console.print(f"Minify: [cyan]{settings.minify}[/cyan]")
    for kind in AssetKind:
        console.print(
            f"{kind.value}: [cyan]{settings.kind_root(kind)}[/cyan] "
            f"-> [cyan]{settings.kind_url(kind)}[/cyan]"
        )
    console.print()

    manager = _manager(ctx)
    report = manager.artifact_status()
    if not report:
        console.print("[yellow]No asset sets configured[/yellow]")
        return

    table = Table(title="Artifacts")
    table.add_column("Kind", style="magenta")
    table.add_column("Set", style="cyan", no_wrap=True)
    table.add_column("Patterns")
    table.add_column("Built", style="blue")

    for entry in report:
        built = (
            datetime.fromtimestamp(entry["mtime"]).strftime("%Y-%m-%d %H:%M:%S")
            if entry["built"]
            else "[red]missing[/red]"
        )
        table.add_row(
            entry["kind"], entry["set_name"], ", ".join(entry["patterns"]), built
        )

    console.print(table)


def main() -> None:
    """Entry point for the CLI application."""
    try:
        cli()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")


if __name__ == "__main__":
    main()
