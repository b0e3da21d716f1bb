from __future__ import annotations

from .menu import (
    DeviceScreen,
    DiscoveredDeviceScreen,
    DiscoveryScreen,
    MainScreen,
    Menu,
    MenuController,
)
from .picker import Picker

__all__ = [
    "DeviceScreen",
    "DiscoveredDeviceScreen",
    "DiscoveryScreen",
    "MainScreen",
    "Menu",
    "MenuController",
    "Picker",
]
