"""Scraping of `bluetoothctl` and `rfkill` text output.

The tools have no stable machine format, so everything here is prefix and
substring matching against literal strings. Keep all of it in this module.
"""

from __future__ import annotations

from collections.abc import Iterable

from btmenu.models import Device, DeviceStatus, DeviceType

DEVICE_PREFIX = "Device "

POWERED = "Powered: yes"
DISCOVERING = "Discovering: yes"
PAIRABLE = "Pairable: yes"
DISCOVERABLE = "Discoverable: yes"

CONNECTED = "Connected: yes"
PAIRED = "Paired: yes"
TRUSTED = "Trusted: yes"

RFKILL_BLOCKED = "blocked: yes"

ICON_PREFIX = "Icon:"

# Checked in order; the first hint found in the lowercased name wins.
_NAME_HINTS: tuple[tuple[DeviceType, tuple[str, ...]], ...] = (
    (
        DeviceType.HEADPHONES,
        ("headphone", "headset", "buds", "airpods", "earbuds", "wh-", "wf-"),
    ),
    (
        DeviceType.CONTROLLER,
        ("controller", "gamepad", "dualsense", "dualshock", "xbox", "joy-con"),
    ),
    (DeviceType.LAPTOP, ("laptop", "macbook", "thinkpad", "notebook", "xps")),
    (DeviceType.PHONE, ("phone", "iphone", "pixel", "galaxy", "redmi", "oneplus")),
    (DeviceType.TV, ("tv", "bravia", "television")),
)

_ICON_TYPES: dict[str, DeviceType] = {
    "audio-card": DeviceType.HEADPHONES,
    "audio-headphones": DeviceType.HEADPHONES,
    "audio-headset": DeviceType.HEADPHONES,
    "computer": DeviceType.LAPTOP,
    "input-gaming": DeviceType.CONTROLLER,
    "phone": DeviceType.PHONE,
    "video-display": DeviceType.TV,
}


def has_marker(output: str, marker: str) -> bool:
    return marker in output


def classify_name(name: str) -> DeviceType:
    """Guess a device category from its advertised name."""
    lowered = name.lower()
    words = lowered.replace("-", " ").split()
    for device_type, hints in _NAME_HINTS:
        for hint in hints:
            # short hints only count as whole words ("tv" must not match "atv2")
            if len(hint) <= 3 and hint.isalpha():
                if hint in words:
                    return device_type
            elif hint in lowered:
                return device_type
    return DeviceType.GENERIC


def parse_icon(info_output: str) -> DeviceType | None:
    """Map the `Icon:` line of `bluetoothctl info` to a device category."""
    for line in info_output.splitlines():
        line = line.strip()
        if line.startswith(ICON_PREFIX):
            icon = line[len(ICON_PREFIX) :].strip()
            return _ICON_TYPES.get(icon)
    return None


def parse_devices(output: str, status: DeviceStatus) -> list[Device]:
    """Parse `Device <address> <name>` lines, ignoring everything else."""
    devices: list[Device] = []
    for line in output.splitlines():
        line = line.rstrip("\r")
        if not line.startswith(DEVICE_PREFIX):
            continue
        parts = line.split(" ", 2)
        if len(parts) < 3:
            continue
        _, address, name = parts
        devices.append(
            Device(
                name=name,
                address=address,
                raw_line=line,
                status=status,
                type=classify_name(name),
            )
        )
    return devices


def merge_unique(*listings: Iterable[Device]) -> list[Device]:
    """Union of listings keyed by address; the first occurrence wins."""
    seen: set[str] = set()
    merged: list[Device] = []
    for listing in listings:
        for device in listing:
            if device.address in seen:
                continue
            seen.add(device.address)
            merged.append(device)
    return merged


def exclude(devices: Iterable[Device], known: Iterable[Device]) -> list[Device]:
    """Devices whose address does not appear in `known`."""
    known_addresses = {device.address for device in known}
    return [device for device in devices if device.address not in known_addresses]
