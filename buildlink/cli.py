"""
buildlink CLI.

Command-line interface for dry-running a software model against the in-memory
host engine.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .core.config import get_config
from .core.exceptions import BuildLinkError
from .core.logging import bind_context, clear_context, setup_logging
from .host.memory import MemoryHostProject
from .linking.features import FEATURES
from .linking.resources import build_resource_prefix
from .models.software import apply_values
from .plugins import SOFTWARE_TYPES

app = typer.Typer(
    name="buildlink",
    help="Link declarative software models onto a build engine",
    add_completion=False,
)

console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        from . import __version__
        console.print(f"buildlink v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """buildlink: declarative software models for Android builds."""
    pass


def _parse_properties(pairs: list[str]) -> dict[str, str]:
    properties = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"expected key=value, got '{pair}'", param_hint="--property")
        properties[key] = value
    return properties


@app.command()
def link(
    model_file: Path = typer.Argument(
        ...,
        help="JSON document with the model values",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    ),
    software_type: str = typer.Option(
        "library",
        "--type",
        "-t",
        help=f"Software type: {', '.join(SOFTWARE_TYPES)}",
    ),
    project_path: str = typer.Option(
        ":app",
        "--path",
        "-p",
        help="Project path, e.g. :core:network",
    ),
    project_dir: Path = typer.Option(
        Path("."),
        "--project-dir",
        "-d",
        help="Project directory, used to look up source sets",
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
    ),
    properties: Optional[List[str]] = typer.Option(
        None,
        "--property",
        "-P",
        help="Project property as key=value (repeatable)",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the linked project as JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Enable verbose logging",
    ),
) -> None:
    """Link a model file against an in-memory project and show the result."""
    config = get_config()
    if verbose:
        config = config.model_copy(update={"log_level": "DEBUG"})
    setup_logging(config)

    plugin_type = SOFTWARE_TYPES.get(software_type)
    if plugin_type is None:
        console.print(f"[red]Unknown software type:[/red] {software_type}")
        raise typer.Exit(2)
    clear_context()
    bind_context(command="link", software_type=software_type)

    try:
        values = json.loads(model_file.read_text())
    except json.JSONDecodeError as e:
        console.print(f"[red]Invalid model file:[/red] {e}")
        raise typer.Exit(2)

    project = MemoryHostProject(
        project_path,
        properties=_parse_properties(properties or []),
        project_dir=project_dir,
    )
    driver = plugin_type(config).apply(project)
    try:
        driver.configure(lambda model: apply_values(model, values))
        project.evaluate()
    except BuildLinkError as e:
        console.print(f"[bold red]Link failed:[/bold red] {e}")
        raise typer.Exit(1)

    snapshot = project.snapshot()
    if as_json:
        typer.echo(json.dumps(snapshot, indent=2))
        return

    report = driver.report
    console.print(Panel.fit(
        f"[bold blue]{project.path}[/bold blue] ({software_type})\n"
        f"Features: {', '.join(report.activated_features) if report else '-'}",
        border_style="blue",
    ))

    plugins = Table(title="Applied Plugins")
    plugins.add_column("#", justify="right")
    plugins.add_column("Plugin")
    for i, plugin_id in enumerate(snapshot["plugins"], start=1):
        plugins.add_row(str(i), plugin_id)
    console.print(plugins)

    buckets = Table(title="Dependency Buckets")
    buckets.add_column("Bucket", style="cyan")
    buckets.add_column("Coordinates")
    for name, coordinates in snapshot["buckets"].items():
        buckets.add_row(name, "\n".join(coordinates))
    console.print(buckets)


@app.command()
def features() -> None:
    """List the feature catalog in activation order."""
    table = Table(title="Features")
    table.add_column("Feature", style="cyan")
    table.add_column("Description")
    for feature in FEATURES:
        table.add_row(feature.name, feature.description)
    console.print(table)


@app.command("resource-prefix")
def resource_prefix(
    project_path: str = typer.Argument(..., help="Project path, e.g. :core:network"),
) -> None:
    """Print the Android resource prefix for a project path."""
    typer.echo(build_resource_prefix(project_path))


if __name__ == "__main__":
    app()
