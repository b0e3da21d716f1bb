"""btmenu - manage a Bluetooth adapter and its devices from a launcher menu."""

from __future__ import annotations

from importlib.metadata import version

from .config import Settings, get_settings
from .core import Adapter, CommandError, CommandRunner, DeviceController, DeviceRegistry
from .models import Device, DeviceStatus, DeviceType

__all__ = [
    "Adapter",
    "CommandError",
    "CommandRunner",
    "Device",
    "DeviceController",
    "DeviceRegistry",
    "DeviceStatus",
    "DeviceType",
    "Settings",
    "__version__",
    "get_settings",
]

__version__ = version("btmenu")
