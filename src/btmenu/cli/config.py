from __future__ import annotations

import shutil
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from btmenu.config import Settings, render_settings_toml, write_settings

from .common import load_settings_or_exit, resolve_config_path_or_exit

app = typer.Typer(no_args_is_help=True, help="Show, create or check the config file.")


@app.command("show")
def show_config() -> None:
    """Show current configuration."""
    settings = load_settings_or_exit()
    path, exists = resolve_config_path_or_exit(allow_missing=True)

    source = str(path) if exists else "defaults"
    typer.echo(f"Config source: {source}")
    typer.echo(render_settings_toml(settings))


@app.command("init")
def init_config(
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite existing config"),
    ] = False,
) -> None:
    """Write a config file with default values."""
    path, exists = resolve_config_path_or_exit(allow_missing=True)

    if exists and not force:
        typer.echo(f"Config already exists at {path}")
        return

    write_settings(Settings(), path)
    typer.echo(f"Wrote default config to {path}")


@app.command("check")
def check_config() -> None:
    """Check that the configured external commands can be found."""
    settings = load_settings_or_exit()
    commands = [
        ("Bluetooth", settings.bluetooth.command),
        ("Radio block", settings.bluetooth.rfkill_command),
        ("Picker", settings.picker.command),
    ]

    table = Table(title="External commands")
    table.add_column("Role", style="cyan")
    table.add_column("Command")
    table.add_column("Found at")

    missing = 0
    for role, command in commands:
        found = shutil.which(command)
        if found is None:
            missing += 1
        table.add_row(role, command, found or "[red]not found[/red]")

    Console().print(table)
    if missing:
        typer.echo(f"{missing} command(s) not found on PATH", err=True)
        raise typer.Exit(1)
