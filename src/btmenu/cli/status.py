from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from .common import build_services, load_settings_or_exit


def _flag(value: bool) -> str:
    return "[green]on[/green]" if value else "[red]off[/red]"


def register(app: typer.Typer) -> None:
    @app.command()
    def status() -> None:
        """Show adapter power, pairable, discoverable and scanning flags."""
        settings = load_settings_or_exit()
        adapter = build_services(settings).adapter

        table = Table(title="Bluetooth adapter")
        table.add_column("Flag", style="cyan")
        table.add_column("State")

        powered = adapter.is_powered()
        table.add_row("Powered", _flag(powered))
        if powered:
            table.add_row("Pairable", _flag(adapter.is_pairable()))
            table.add_row("Discoverable", _flag(adapter.is_discoverable()))
            table.add_row("Scanning", _flag(adapter.is_scanning()))

        Console().print(table)
