"""Interactive menu driven by the external picker.

Each screen is a small value; showing it queries fresh state, asks the
picker for a choice and returns the next screen. `None` ends the loop.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from btmenu.config import MenuConfig, ScanningConfig
from btmenu.core import Adapter, CommandError, DeviceController, DeviceRegistry
from btmenu.models import Device

from . import labels
from .picker import Picker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MainScreen:
    pass


@dataclass(frozen=True)
class DeviceScreen:
    device: Device


@dataclass(frozen=True)
class DiscoveryScreen:
    pass


@dataclass(frozen=True)
class DiscoveredDeviceScreen:
    device: Device


Screen = MainScreen | DeviceScreen | DiscoveryScreen | DiscoveredDeviceScreen
Action = Callable[[], Screen | None]


@dataclass
class Menu:
    """Labels for one picker invocation and what each of them does."""

    prompt: str
    entries: list[tuple[str, Action]]
    on_cancel: Action
    devices: list[tuple[Device, Action]] = field(default_factory=list)

    @property
    def options(self) -> list[str]:
        return [label for label, _ in self.entries]

    def resolve(self, choice: str) -> Action | None:
        for label, action in self.entries:
            if label == choice:
                return action
        # pickers may hand back the text without its glyph
        found = DeviceRegistry.find_by_name(
            labels.strip_glyph(choice), (device for device, _ in self.devices)
        )
        for device, action in self.devices:
            if device is found:
                return action
        return None


class MenuController:
    def __init__(
        self,
        adapter: Adapter,
        registry: DeviceRegistry,
        devices: DeviceController,
        picker: Picker,
        config: MenuConfig | None = None,
        scanning: ScanningConfig | None = None,
    ) -> None:
        self._adapter = adapter
        self._registry = registry
        self._devices = devices
        self._picker = picker
        self._config = config or MenuConfig()
        self._scanning = scanning or ScanningConfig()

    def run(self, start: Screen | None = None) -> None:
        screen: Screen | None = start or MainScreen()
        try:
            while screen is not None:
                screen = self.show(screen)
        finally:
            if self._adapter.scan.running:
                logger.debug("Menu closed while scanning, stopping scan")
                self._adapter.scan.stop()

    def show(self, screen: Screen) -> Screen | None:
        menu = self.build(screen)
        choice = self._picker.choose(menu.options, menu.prompt)
        if not choice:
            return menu.on_cancel()

        action = menu.resolve(choice)
        if action is None:
            logger.info("Ignoring unrecognized selection %r", choice)
            return screen
        return action()

    def build(self, screen: Screen) -> Menu:
        if isinstance(screen, MainScreen):
            return self.main_menu()
        if isinstance(screen, DeviceScreen):
            return self.device_menu(screen)
        if isinstance(screen, DiscoveryScreen):
            return self.discovery_menu()
        return self.discovered_device_menu(screen)

    # -- screens ----------------------------------------------------------

    def main_menu(self) -> Menu:
        main = MainScreen()

        if not self._adapter.is_powered():
            return Menu(
                prompt=labels.PROMPT_MAIN,
                entries=[
                    (
                        labels.ENABLE_BLUETOOTH,
                        self._then(main, self._adapter.toggle_power),
                    ),
                    (labels.EXIT, _exit),
                ],
                on_cancel=_exit,
            )

        devices = [
            (device, _goto(DeviceScreen(device)))
            for device in self._registry.list_known()
            if device.name
        ]
        entries: list[tuple[str, Action]] = [
            (labels.device_label(device), action) for device, action in devices
        ]

        pairable = self._adapter.is_pairable()
        discoverable = self._adapter.is_discoverable()
        entries += [
            (labels.SCAN, self._start_scan),
            (
                labels.DISABLE_BLUETOOTH,
                self._then(main, self._adapter.toggle_power),
            ),
            (
                labels.toggle(
                    pairable, labels.ENABLE_PAIRABLE, labels.DISABLE_PAIRABLE
                ),
                self._then(main, self._adapter.toggle_pairable),
            ),
            (
                labels.toggle(
                    discoverable,
                    labels.ENABLE_DISCOVERABLE,
                    labels.DISABLE_DISCOVERABLE,
                ),
                self._then(main, self._adapter.toggle_discoverable),
            ),
            (labels.EXIT, _exit),
        ]
        return Menu(
            prompt=labels.PROMPT_MAIN,
            entries=entries,
            on_cancel=_exit,
            devices=devices,
        )

    def device_menu(self, screen: DeviceScreen) -> Menu:
        device = screen.device
        ctl = self._devices

        if ctl.is_connected(device):
            connection = (labels.DISCONNECT, self._then(screen, ctl.disconnect, device))
        else:
            connection = (labels.CONNECT, self._then(screen, ctl.connect, device))

        if ctl.is_paired(device):
            pairing = (labels.UNPAIR, self._then(screen, ctl.unpair, device))
        else:
            pairing = (labels.PAIR, self._then(screen, ctl.pair, device))

        trusted = ctl.is_trusted(device)
        trust = (
            labels.toggle(trusted, labels.TRUST, labels.UNTRUST),
            self._then(screen, ctl.set_trust, device, not trusted),
        )

        on_cancel: Action = _exit
        if self._config.device_cancel == "redraw":
            on_cancel = _goto(screen)

        return Menu(
            prompt=device.name,
            entries=[connection, pairing, trust, (labels.BACK, _goto(MainScreen()))],
            on_cancel=on_cancel,
        )

    def discovery_menu(self) -> Menu:
        devices = [
            (device, _goto(DiscoveredDeviceScreen(device)))
            for device in self._registry.list_discovered()
            if device.name
        ]
        entries: list[tuple[str, Action]] = [
            (labels.REFRESH, _goto(DiscoveryScreen()))
        ]
        entries += [
            (labels.device_label(device, labels.GLYPH_DISCOVERED), action)
            for device, action in devices
        ]
        entries.append((labels.BACK, self._stop_scan))
        return Menu(
            prompt=labels.PROMPT_DISCOVERY,
            entries=entries,
            on_cancel=self._stop_scan,
            devices=devices,
        )

    def discovered_device_menu(self, screen: DiscoveredDeviceScreen) -> Menu:
        device = screen.device
        back = _goto(DiscoveryScreen())

        def pair_and_trust() -> Screen:
            if self._attempt(self._devices.pair, device):
                self._attempt(self._devices.trust, device)
            return MainScreen()

        return Menu(
            prompt=device.name,
            entries=[
                (labels.PAIR, self._then(MainScreen(), self._devices.pair, device)),
                (labels.PAIR_AND_TRUST, pair_and_trust),
                (labels.BACK, back),
            ],
            on_cancel=back,
        )

    # -- actions ----------------------------------------------------------

    def _start_scan(self) -> Screen:
        self._attempt(self._adapter.set_scanning, True)
        # give discovery a moment before the first listing
        time.sleep(self._scanning.settle_delay)
        return DiscoveryScreen()

    def _stop_scan(self) -> Screen:
        self._attempt(self._adapter.set_scanning, False)
        return MainScreen()

    def _then(
        self, screen: Screen, func: Callable[..., Any], *args: Any
    ) -> Action:
        def action() -> Screen:
            self._attempt(func, *args)
            return screen

        return action

    @staticmethod
    def _attempt(func: Callable[..., Any], *args: Any) -> bool:
        try:
            func(*args)
        except CommandError as exc:
            logger.warning("%s", exc)
            return False
        return True


def _goto(screen: Screen) -> Action:
    return lambda: screen


def _exit() -> None:
    return None
