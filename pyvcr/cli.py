"""pyvcr CLI — inspect and check recorder configuration."""

import sys

import click
import yaml
from rich.console import Console
from rich.table import Table

from pyvcr import __version__
from pyvcr.configuration import Configuration
from pyvcr.errors import VCRError
from pyvcr.settings import load_settings, settings_snapshot

console = Console()


@click.group()
@click.version_option(version=__version__)
def main():
    """pyvcr — record and replay HTTP interactions in tests.

    Use the config commands to see which library hooks, storage and request
    matchers a settings file activates.
    """


# ── Config ───────────────────────────────────────────────────────────


@main.group()
def config():
    """Inspect recorder configuration."""


@config.command()
@click.option("--file", "-f", "settings_file", default=None, help="YAML settings file to apply")
@click.option("--format", "output_format", default="table", type=click.Choice(["table", "yaml"]))
def show(settings_file: str | None, output_format: str):
    """Show the effective configuration (defaults, or defaults plus a settings file)."""
    try:
        configuration = load_settings(settings_file) if settings_file else Configuration()
    except VCRError as e:
        console.print(f"[red]Invalid configuration:[/] {e}")
        sys.exit(1)

    snapshot = settings_snapshot(configuration)

    if output_format == "yaml":
        click.echo(yaml.safe_dump(snapshot, sort_keys=False), nl=False)
        return

    table = Table(title="pyvcr configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    for key, value in snapshot.items():
        if isinstance(value, list):
            value = ", ".join(value) if value else "[dim](none)[/]"
        table.add_row(key, value)

    console.print(table)


@config.command()
@click.argument("settings_file")
def check(settings_file: str):
    """Check a YAML settings file, including that the cassette path exists."""
    console.print(f"\n[bold blue]pyvcr[/] — Checking: {settings_file}\n")

    try:
        configuration = load_settings(settings_file)
        configuration.get_cassette_path()
    except VCRError as e:
        console.print(f"  [red]x[/] {e}")
        sys.exit(1)

    console.print("  [green]v[/] Configuration is valid")
