"""Fake command runner and canned bluetoothctl output for tests."""

from __future__ import annotations

from btmenu.core import CommandError

PICKER = "wofi"


class FakeProcess:
    def __init__(self, argv: tuple[str, ...]) -> None:
        self.argv = argv
        self.returncode: int | None = None
        self.terminated = False

    def poll(self) -> int | None:
        return self.returncode

    def terminate(self) -> None:
        self.terminated = True
        self.returncode = -15

    def kill(self) -> None:
        self.returncode = -9

    def wait(self, timeout: float | None = None) -> int | None:
        return self.returncode


class FakeRunner:
    """Stands in for CommandRunner, serving canned command output.

    Unknown commands succeed with empty output. Picker invocations pop the
    next entry from `picks`; an empty string (or an empty queue) behaves like
    the user pressing escape.
    """

    def __init__(
        self,
        outputs: dict[tuple[str, ...], str | CommandError] | None = None,
        picks: list[str] | None = None,
    ) -> None:
        self.outputs = dict(outputs or {})
        self.picks = list(picks or [])
        self.calls: list[tuple[str, ...]] = []
        self.menus: list[list[str]] = []
        self.spawned: list[FakeProcess] = []

    def run(self, command: str, *args: str, input_text: str | None = None) -> str:
        self.calls.append((command, *args))
        if command == PICKER:
            self.menus.append((input_text or "").splitlines())
            choice = self.picks.pop(0) if self.picks else ""
            if not choice:
                raise CommandError(command, args, returncode=1)
            return f"{choice}\n"

        result = self.outputs.get((command, *args), "")
        if isinstance(result, CommandError):
            raise result
        return result

    def spawn(self, command: str, *args: str) -> FakeProcess:
        self.calls.append((command, *args))
        process = FakeProcess((command, *args))
        self.spawned.append(process)
        return process

    def called(self, *argv: str) -> bool:
        return tuple(argv) in self.calls

    def index(self, *argv: str) -> int:
        return self.calls.index(tuple(argv))


SHOW_POWERED = """\
Controller 00:1A:7D:DA:71:13 (public)
	Name: thinkpad
	Alias: thinkpad
	Class: 0x006c010c
	Powered: yes
	Discoverable: no
	DiscoverableTimeout: 0x000000b4
	Pairable: yes
	UUID: Audio Source              (0000110a-0000-1000-8000-00805f9b34fb)
	Modalias: usb:v1D6Bp0246d0542
	Discovering: no
"""

SHOW_OFF = SHOW_POWERED.replace("Powered: yes", "Powered: no")

RFKILL_BLOCKED = """\
0: hci0: Bluetooth
	Soft blocked: yes
	Hard blocked: no
"""

RFKILL_UNBLOCKED = RFKILL_BLOCKED.replace("Soft blocked: yes", "Soft blocked: no")


