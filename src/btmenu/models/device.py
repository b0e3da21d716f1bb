"""Device models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class DeviceStatus(str, Enum):
    """How a device record was obtained."""

    CONNECTED = "connected"
    PAIRED = "paired"
    TRUSTED = "trusted"
    DISCOVERED = "discovered"


class DeviceType(str, Enum):
    """Coarse device category, used only to pick a glyph."""

    PHONE = "phone"
    HEADPHONES = "headphones"
    LAPTOP = "laptop"
    TV = "tv"
    CONTROLLER = "controller"
    GENERIC = "generic"


class Device(BaseModel):
    """Remote Bluetooth device parsed from a `bluetoothctl devices` line.

    Values are snapshots: they are rebuilt on every query and compare equal
    when their addresses match.
    """

    model_config = {"frozen": True}

    name: str
    address: str
    raw_line: str = ""
    status: DeviceStatus = DeviceStatus.DISCOVERED
    type: DeviceType = DeviceType.GENERIC

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Device):
            return NotImplemented
        return self.address == other.address

    def __hash__(self) -> int:
        return hash(self.address)
