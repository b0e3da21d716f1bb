"""Tests for the picker wrapper."""

import logging

from btmenu.config import PickerConfig
from btmenu.core import CommandRunner
from btmenu.ui import Picker

from fakes import FakeRunner


def test_choose_passes_labels_and_height():
    runner = FakeRunner(picks=["\U000f00b2  Connect"])
    picker = Picker(runner)

    choice = picker.choose(["\U000f00b2  Connect", "Pair", "Back"], "Headphones")

    assert choice == "\U000f00b2  Connect"
    assert runner.calls == [("wofi", "-d", "-i", "-p", "Headphones", "-L", "3")]
    assert runner.menus == [["\U000f00b2  Connect", "Pair", "Back"]]


def test_cancel_returns_empty_string():
    runner = FakeRunner()
    picker = Picker(runner)

    assert picker.choose(["One", "Two", "Three"], "Bluetooth") == ""


def test_height_flag_can_be_disabled():
    runner = FakeRunner(picks=["One"])
    picker = Picker(runner, PickerConfig(args=("-d", "-p"), lines_flag=""))

    picker.choose(["One"], "Bluetooth")

    assert runner.calls == [("wofi", "-d", "-p", "Bluetooth")]


def test_extra_lines_added_to_height():
    picker = Picker(FakeRunner(), PickerConfig(extra_lines=2))

    assert picker.build_args(["a", "b"], "P")[-2:] == ["-L", "4"]


def test_missing_picker_is_logged(caplog):
    picker = Picker(CommandRunner(), PickerConfig(command="btmenu-no-such-picker"))

    with caplog.at_level(logging.WARNING):
        choice = picker.choose(["a", "b", "c"], "Bluetooth")

    assert choice == ""
    assert "Could not start picker" in caplog.text
    assert "btmenu-no-such-picker" in caplog.text


def test_escape_is_not_a_warning(caplog):
    picker = Picker(FakeRunner())

    with caplog.at_level(logging.WARNING):
        assert picker.choose(["a"], "Bluetooth") == ""

    assert caplog.records == []
