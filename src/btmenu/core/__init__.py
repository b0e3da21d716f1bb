from __future__ import annotations

from .adapter import Adapter
from .device import DeviceController
from .registry import DeviceRegistry
from .runner import CommandError, CommandRunner
from .scan import BackgroundScan

__all__ = [
    "Adapter",
    "BackgroundScan",
    "CommandError",
    "CommandRunner",
    "DeviceController",
    "DeviceRegistry",
]
