"""Data models for btmenu."""

from btmenu.models.device import Device, DeviceStatus, DeviceType

__all__ = [
    "Device",
    "DeviceStatus",
    "DeviceType",
]
