from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from btmenu.config import Settings, get_settings, resolve_config_path
from btmenu.core import Adapter, CommandRunner, DeviceController, DeviceRegistry
from btmenu.ui import MenuController, Picker


def load_settings_or_exit() -> Settings:
    try:
        return get_settings()
    except (FileNotFoundError, ValueError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc


def resolve_config_path_or_exit(allow_missing: bool = False) -> tuple[Path, bool]:
    try:
        return resolve_config_path(allow_missing=allow_missing)
    except FileNotFoundError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc


@dataclass
class Services:
    adapter: Adapter
    registry: DeviceRegistry
    devices: DeviceController


def build_services(settings: Settings, runner: CommandRunner | None = None) -> Services:
    runner = runner or CommandRunner()
    command = settings.bluetooth.command
    return Services(
        adapter=Adapter(runner, settings.bluetooth, settings.scanning),
        registry=DeviceRegistry(runner, command),
        devices=DeviceController(runner, command),
    )


def build_menu(settings: Settings, runner: CommandRunner | None = None) -> MenuController:
    runner = runner or CommandRunner()
    services = build_services(settings, runner)
    return MenuController(
        services.adapter,
        services.registry,
        services.devices,
        Picker(runner, settings.picker),
        config=settings.menu,
        scanning=settings.scanning,
    )
