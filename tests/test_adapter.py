"""Tests for adapter flags and the background scan."""

from __future__ import annotations

import pytest

from btmenu.config import BluetoothConfig, ScanningConfig
from btmenu.core import Adapter, BackgroundScan, CommandError

from fakes import RFKILL_BLOCKED, RFKILL_UNBLOCKED, SHOW_POWERED, FakeRunner

NO_DELAY = BluetoothConfig(unblock_delay=0)


def _adapter(runner: FakeRunner, duration: float = 10.0) -> Adapter:
    return Adapter(runner, NO_DELAY, ScanningConfig(duration=duration))


def test_flags_read_from_show(runner: FakeRunner):
    runner.outputs[("bluetoothctl", "show")] = SHOW_POWERED
    adapter = _adapter(runner)

    assert adapter.is_powered() is True
    assert adapter.is_pairable() is True
    assert adapter.is_discoverable() is False
    assert adapter.is_scanning() is False


def test_failed_show_degrades_to_off(runner: FakeRunner):
    runner.outputs[("bluetoothctl", "show")] = CommandError(
        "bluetoothctl", ("show",), returncode=1
    )
    adapter = _adapter(runner)

    assert adapter.is_powered() is False
    assert adapter.is_pairable() is False


def test_every_query_runs_show_again(runner: FakeRunner):
    runner.outputs[("bluetoothctl", "show")] = SHOW_POWERED
    adapter = _adapter(runner)

    adapter.is_powered()
    adapter.is_powered()

    assert runner.calls.count(("bluetoothctl", "show")) == 2


@pytest.mark.parametrize(
    ("marker", "toggle", "subcommand"),
    [
        ("Pairable", "toggle_pairable", "pairable"),
        ("Discoverable", "toggle_discoverable", "discoverable"),
        ("Powered", "toggle_power", "power"),
    ],
)
@pytest.mark.parametrize(("current", "expected"), [("yes", "off"), ("no", "on")])
def test_toggle_inverts_reported_state(
    runner: FakeRunner, marker, toggle, subcommand, current, expected
):
    runner.outputs[("bluetoothctl", "show")] = f"\t{marker}: {current}\n"
    runner.outputs[("rfkill", "list", "bluetooth")] = RFKILL_UNBLOCKED
    adapter = _adapter(runner)

    getattr(adapter, toggle)()

    assert runner.called("bluetoothctl", subcommand, expected)


def test_power_on_unblocks_first_when_blocked(runner: FakeRunner):
    runner.outputs[("rfkill", "list", "bluetooth")] = RFKILL_BLOCKED
    adapter = _adapter(runner)

    adapter.set_power(True)

    unblock = runner.index("rfkill", "unblock", "bluetooth")
    power = runner.index("bluetoothctl", "power", "on")
    assert unblock < power


def test_power_on_without_block_skips_unblock(runner: FakeRunner):
    runner.outputs[("rfkill", "list", "bluetooth")] = RFKILL_UNBLOCKED
    adapter = _adapter(runner)

    adapter.set_power(True)

    assert not runner.called("rfkill", "unblock", "bluetooth")
    assert runner.called("bluetoothctl", "power", "on")


def test_power_off_does_not_touch_rfkill(runner: FakeRunner):
    adapter = _adapter(runner)

    adapter.set_power(False)

    assert runner.calls == [("bluetoothctl", "power", "off")]


def test_mutator_errors_propagate(runner: FakeRunner):
    runner.outputs[("bluetoothctl", "pairable", "on")] = CommandError(
        "bluetoothctl", ("pairable", "on"), returncode=1, stderr="org.bluez.Error"
    )
    adapter = _adapter(runner)

    with pytest.raises(CommandError) as excinfo:
        adapter.set_pairable(True)

    assert excinfo.value.command == "bluetoothctl"
    assert excinfo.value.arguments == ("pairable", "on")
    assert "org.bluez.Error" in str(excinfo.value)


def test_scan_runs_and_cleans_up(runner: FakeRunner):
    scan = BackgroundScan(runner, "bluetoothctl", duration=0.01)

    scan.start()
    scan.stop(wait=True)

    assert not scan.running
    assert runner.called("bluetoothctl", "power", "on")
    assert [p.argv for p in runner.spawned] == [("bluetoothctl", "scan", "on")]
    assert runner.spawned[0].terminated
    assert runner.calls[-1] == ("bluetoothctl", "scan", "off")


def test_scan_stop_cancels_before_duration(runner: FakeRunner):
    adapter = _adapter(runner, duration=60.0)

    adapter.set_scanning(True)
    assert adapter.is_scanning() is True

    adapter.set_scanning(False)

    assert adapter.scan.running is False
    assert runner.spawned[0].terminated
    assert runner.calls.count(("bluetoothctl", "scan", "off")) == 2


def test_scan_start_twice_spawns_once(runner: FakeRunner):
    adapter = _adapter(runner, duration=60.0)

    adapter.set_scanning(True)
    adapter.set_scanning(True)
    adapter.set_scanning(False)

    assert len(runner.spawned) == 1


def test_scan_start_failure_is_logged(runner: FakeRunner, caplog):
    runner.outputs[("bluetoothctl", "power", "on")] = CommandError(
        "bluetoothctl", ("power", "on"), cause=FileNotFoundError("bluetoothctl")
    )
    scan = BackgroundScan(runner, "bluetoothctl", duration=60.0)

    scan.start()
    scan.stop(wait=True)

    assert runner.spawned == []
    assert "Could not start scan" in caplog.text
