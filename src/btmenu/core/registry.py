from __future__ import annotations

import logging
from collections.abc import Iterable

from btmenu.models import Device, DeviceStatus

from . import parsing
from .runner import CommandError, CommandRunner

logger = logging.getLogger(__name__)


class DeviceRegistry:
    """Device listings read from `bluetoothctl devices`.

    Every call runs the tool again; nothing is remembered between calls.
    """

    def __init__(self, runner: CommandRunner, command: str = "bluetoothctl") -> None:
        self._runner = runner
        self._command = command

    def _list(self, status: DeviceStatus, *filters: str) -> list[Device]:
        try:
            output = self._runner.run(self._command, "devices", *filters)
        except CommandError as exc:
            logger.warning("Error listing %s devices: %s", status.value, exc)
            return []
        return parsing.parse_devices(output, status)

    def list_all(self) -> list[Device]:
        return self._list(DeviceStatus.DISCOVERED)

    def list_connected(self) -> list[Device]:
        return self._list(DeviceStatus.CONNECTED, "Connected")

    def list_paired(self) -> list[Device]:
        return self._list(DeviceStatus.PAIRED, "Paired")

    def list_trusted(self) -> list[Device]:
        return self._list(DeviceStatus.TRUSTED, "Trusted")

    def list_known(self) -> list[Device]:
        """Connected, paired and trusted devices, one entry per address."""
        return parsing.merge_unique(
            self.list_connected(), self.list_paired(), self.list_trusted()
        )

    def list_unknown(self) -> list[Device]:
        """Devices the tool has seen that are not connected, paired or trusted."""
        return parsing.exclude(self.list_all(), self.list_known())

    def list_discovered(self) -> list[Device]:
        """Devices seen while scanning that are not paired yet."""
        return parsing.exclude(self.list_all(), self.list_paired())

    @staticmethod
    def find_by_name(name: str, devices: Iterable[Device]) -> Device | None:
        for device in devices:
            if device.name == name:
                return device
        return None
