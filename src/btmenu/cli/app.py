from __future__ import annotations

from typing import Annotated

import typer

from btmenu.utils.logging import setup_logging

from . import config as config_cmd
from .common import build_menu, load_settings_or_exit
from .devices import register as register_devices
from .status import register as register_status

app = typer.Typer(help="btmenu - Bluetooth menu for wofi and other dmenu-style pickers")

app.add_typer(config_cmd.app, name="config")

register_status(app)
register_devices(app)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version and exit"),
    ] = False,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Log level (overrides LOGLEVEL)"),
    ] = None,
) -> None:
    """Open the Bluetooth menu when no command is given."""
    setup_logging(log_level)

    if version:
        from importlib.metadata import version as get_version

        typer.echo(f"btmenu version {get_version('btmenu')}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        settings = load_settings_or_exit()
        build_menu(settings).run()
