from __future__ import annotations

import json
import os
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, ValidationError

from .paths import default_config_path, expand_path

CONFIG_ENV_VAR = "BTMENU_CONFIG"


class BluetoothConfig(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    command: str = "bluetoothctl"
    rfkill_command: str = "rfkill"
    unblock_delay: float = Field(default=3.0, ge=0)


class ScanningConfig(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    duration: float = Field(default=10.0, gt=0)
    settle_delay: float = Field(default=0.5, ge=0)


class PickerConfig(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    command: str = "wofi"
    args: tuple[str, ...] = ("-d", "-i", "-p")
    lines_flag: str = "-L"
    extra_lines: int = Field(default=0, ge=0)


class MenuConfig(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    # What cancelling the device screen does: leave the menu or show it again.
    device_cancel: Literal["exit", "redraw"] = "exit"


class Settings(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    bluetooth: BluetoothConfig = Field(default_factory=BluetoothConfig)
    scanning: ScanningConfig = Field(default_factory=ScanningConfig)
    picker: PickerConfig = Field(default_factory=PickerConfig)
    menu: MenuConfig = Field(default_factory=MenuConfig)


def resolve_config_path(allow_missing: bool = False) -> tuple[Path, bool]:
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = expand_path(env_path)
        if not allow_missing and not path.exists():
            raise FileNotFoundError(f"{CONFIG_ENV_VAR} points to missing file: {path}")
        return path, path.exists()

    path = default_config_path()
    return path, path.exists()


def load_settings(path: Path) -> Settings:
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"Invalid TOML in config file: {path}\n{exc}") from exc

    try:
        return Settings.model_validate(data or {})
    except ValidationError as exc:
        raise ValueError(f"Invalid config file: {path}\n{exc}") from exc


@lru_cache
def get_settings() -> Settings:
    path, exists = resolve_config_path(allow_missing=False)
    if exists:
        return load_settings(path)
    return Settings()


def _toml_string(value: str) -> str:
    return json.dumps(value)


def _toml_list(values: tuple[str, ...]) -> str:
    return "[" + ", ".join(_toml_string(value) for value in values) + "]"


def render_settings_toml(settings: Settings) -> str:
    lines = [
        "# btmenu configuration",
        "",
        "[bluetooth]",
        f"command = {_toml_string(settings.bluetooth.command)}",
        f"rfkill_command = {_toml_string(settings.bluetooth.rfkill_command)}",
        f"unblock_delay = {settings.bluetooth.unblock_delay}",
        "",
        "[scanning]",
        f"duration = {settings.scanning.duration}",
        f"settle_delay = {settings.scanning.settle_delay}",
        "",
        "[picker]",
        f"command = {_toml_string(settings.picker.command)}",
        f"args = {_toml_list(settings.picker.args)}",
        f"lines_flag = {_toml_string(settings.picker.lines_flag)}",
        f"extra_lines = {settings.picker.extra_lines}",
        "",
        "[menu]",
        f"device_cancel = {_toml_string(settings.menu.device_cancel)}",
        "",
    ]
    return "\n".join(lines)


def write_settings(settings: Settings, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_settings_toml(settings))
