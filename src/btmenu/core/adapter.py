from __future__ import annotations

import logging
import time

from btmenu.config import BluetoothConfig, ScanningConfig

from . import parsing
from .runner import CommandError, CommandRunner
from .scan import BackgroundScan

logger = logging.getLogger(__name__)


def _state(on: bool) -> str:
    return "on" if on else "off"


class Adapter:
    """Global state of the local Bluetooth controller.

    Nothing is cached: each query re-reads `bluetoothctl show`.
    """

    def __init__(
        self,
        runner: CommandRunner,
        config: BluetoothConfig | None = None,
        scanning: ScanningConfig | None = None,
    ) -> None:
        self._runner = runner
        self._config = config or BluetoothConfig()
        scanning = scanning or ScanningConfig()
        self._scan = BackgroundScan(runner, self._config.command, scanning.duration)

    @property
    def scan(self) -> BackgroundScan:
        return self._scan

    def _ctl(self, *args: str) -> str:
        return self._runner.run(self._config.command, *args)

    def _show(self) -> str:
        try:
            return self._ctl("show")
        except CommandError as exc:
            logger.warning("Error reading adapter state: %s", exc)
            return ""

    def is_powered(self) -> bool:
        return parsing.has_marker(self._show(), parsing.POWERED)

    def is_blocked(self) -> bool:
        try:
            output = self._runner.run(
                self._config.rfkill_command, "list", "bluetooth"
            )
        except CommandError as exc:
            logger.debug("Could not query rfkill: %s", exc)
            return False
        return parsing.has_marker(output, parsing.RFKILL_BLOCKED)

    def set_power(self, on: bool) -> None:
        if on and self.is_blocked():
            logger.info("Bluetooth is soft blocked, unblocking")
            self._runner.run(self._config.rfkill_command, "unblock", "bluetooth")
            time.sleep(self._config.unblock_delay)
        self._ctl("power", _state(on))

    def is_pairable(self) -> bool:
        return parsing.has_marker(self._show(), parsing.PAIRABLE)

    def set_pairable(self, on: bool) -> None:
        self._ctl("pairable", _state(on))

    def is_discoverable(self) -> bool:
        return parsing.has_marker(self._show(), parsing.DISCOVERABLE)

    def set_discoverable(self, on: bool) -> None:
        self._ctl("discoverable", _state(on))

    def is_scanning(self) -> bool:
        if self._scan.running:
            return True
        return parsing.has_marker(self._show(), parsing.DISCOVERING)

    def set_scanning(self, on: bool) -> None:
        if on:
            self._scan.start()
            return
        self._scan.stop()
        self._ctl("scan", "off")

    def toggle_power(self) -> None:
        self.set_power(not self.is_powered())

    def toggle_pairable(self) -> None:
        self.set_pairable(not self.is_pairable())

    def toggle_discoverable(self) -> None:
        self.set_discoverable(not self.is_discoverable())
