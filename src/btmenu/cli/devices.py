from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from .common import build_services, load_settings_or_exit


def list_devices(
    unknown: Annotated[
        bool,
        typer.Option("--unknown", help="Devices that are not connected, paired or trusted"),
    ] = False,
    discovered: Annotated[
        bool,
        typer.Option("--discovered", help="Devices seen while scanning, not paired"),
    ] = False,
) -> None:
    """List known Bluetooth devices."""
    if unknown and discovered:
        typer.echo("Use either --unknown or --discovered, not both.", err=True)
        raise typer.Exit(2)

    settings = load_settings_or_exit()
    services = build_services(settings)
    registry = services.registry

    if unknown:
        devices = registry.list_unknown()
    elif discovered:
        devices = registry.list_discovered()
    else:
        devices = registry.list_known()

    console = Console()
    if not devices:
        console.print("No devices found.")
        return

    table = Table()
    table.add_column("Name", style="green")
    table.add_column("Address", style="cyan")
    table.add_column("Status")
    table.add_column("Type")

    for device in devices:
        device = services.devices.refine_type(device)
        table.add_row(
            device.name, device.address, device.status.value, device.type.value
        )

    console.print(table)
    console.print(f"\n[green]{len(devices)} device(s)[/green]")


def register(app: typer.Typer) -> None:
    app.command("devices")(list_devices)
