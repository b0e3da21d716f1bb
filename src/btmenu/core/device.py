from __future__ import annotations

import logging

from btmenu.models import Device

from . import parsing
from .runner import CommandError, CommandRunner

logger = logging.getLogger(__name__)


class DeviceController:
    """Per-device queries and actions, one `bluetoothctl` call each."""

    def __init__(self, runner: CommandRunner, command: str = "bluetoothctl") -> None:
        self._runner = runner
        self._command = command

    def _ctl(self, action: str, device: Device) -> str:
        return self._runner.run(self._command, action, device.address)

    def info(self, device: Device) -> str:
        try:
            return self._ctl("info", device)
        except CommandError as exc:
            logger.warning("Error reading info for %s: %s", device.address, exc)
            return ""

    def is_connected(self, device: Device) -> bool:
        return parsing.has_marker(self.info(device), parsing.CONNECTED)

    def is_paired(self, device: Device) -> bool:
        return parsing.has_marker(self.info(device), parsing.PAIRED)

    def is_trusted(self, device: Device) -> bool:
        return parsing.has_marker(self.info(device), parsing.TRUSTED)

    def refine_type(self, device: Device) -> Device:
        """Return a copy typed from the icon `bluetoothctl info` reports."""
        device_type = parsing.parse_icon(self.info(device))
        if device_type is None or device_type == device.type:
            return device
        return device.model_copy(update={"type": device_type})

    def connect(self, device: Device) -> None:
        self._ctl("connect", device)

    def disconnect(self, device: Device) -> None:
        self._ctl("disconnect", device)

    def pair(self, device: Device) -> None:
        self._ctl("pair", device)

    def unpair(self, device: Device) -> None:
        self._ctl("remove", device)

    def trust(self, device: Device) -> None:
        self._ctl("trust", device)

    def untrust(self, device: Device) -> None:
        self._ctl("untrust", device)

    def set_trust(self, device: Device, trusted: bool) -> None:
        if trusted:
            self.trust(device)
        else:
            self.untrust(device)
