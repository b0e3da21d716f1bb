"""Menu labels shown in the picker.

Selections come back as plain text and are matched against these exact
strings, glyphs included, so rendering and recognition must share them.
"""

from __future__ import annotations

from btmenu.models import Device, DeviceStatus, DeviceType

GLYPH_CONNECTED = "\U000f00b1"
GLYPH_DISCONNECTED = "\U000f0fb0"
GLYPH_DISCOVERED = "\U000f0450"

DEVICE_GLYPHS: dict[DeviceType, str] = {
    DeviceType.LAPTOP: "\uf109",
    DeviceType.PHONE: "\ueadb",
    DeviceType.CONTROLLER: "\U000f02b4",
    DeviceType.HEADPHONES: "\U000f02cb",
    DeviceType.TV: "\U000f0379",
    DeviceType.GENERIC: GLYPH_DISCONNECTED,
}

SEPARATOR = "  "

ENABLE_BLUETOOTH = "\U000f00b2  Enable Bluetooth"
DISABLE_BLUETOOTH = "\uf293  Disable Bluetooth"
ENABLE_DISCOVERABLE = "\uf070  Enable discoverable"
DISABLE_DISCOVERABLE = "\uf441  Disable discoverable"
ENABLE_PAIRABLE = "\U000f033a  Enable pairable"
DISABLE_PAIRABLE = "\uf44c  Disable pairable"
SCAN = "\U000f1276  Scan"
REFRESH = "\U000f0450  Refresh"
BACK = "Back"
EXIT = "Exit"

CONNECT = "\U000f00b2  Connect"
DISCONNECT = "\U000f00b1  Disconnect"
PAIR = "\U000f033a  Pair"
UNPAIR = "\uf44c  Unpair"
TRUST = "\U000f16a9  Trust"
UNTRUST = "\U000f139a  Untrust"
PAIR_AND_TRUST = "\U000f16a9  Pair and Trust"

PROMPT_MAIN = "Bluetooth"
PROMPT_DISCOVERY = "Discovery"

GLYPHS = frozenset({GLYPH_CONNECTED, GLYPH_DISCOVERED, *DEVICE_GLYPHS.values()})


def device_glyph(device: Device) -> str:
    if device.status is DeviceStatus.CONNECTED:
        return GLYPH_CONNECTED
    return DEVICE_GLYPHS.get(device.type, GLYPH_DISCONNECTED)


def device_label(device: Device, glyph: str | None = None) -> str:
    return f"{glyph or device_glyph(device)}{SEPARATOR}{device.name}"


def strip_glyph(label: str) -> str:
    """Drop a leading device glyph and the whitespace after it."""
    for glyph in GLYPHS:
        if label.startswith(glyph):
            return label[len(glyph) :].strip()
    return label.strip()


def toggle(enabled: bool, enable_label: str, disable_label: str) -> str:
    """Label offering the opposite of the current state."""
    return disable_label if enabled else enable_label
