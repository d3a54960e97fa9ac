"""Unit tests for airpod_alfred.parser.device and airpod_alfred.model.device."""

from __future__ import annotations

import dataclasses

import pytest

from airpod_alfred.client.errors import BlueutilError, BlueutilParseError
from airpod_alfred.model.device import (
    AllDevices,
    DeviceInfo,
    DeviceListOptions,
    SpecificAddresses,
)
from airpod_alfred.parser.device import parse_device_line, parse_device_list

NOT_CONNECTED_LINE = (
    'address: 5c-2e-fg-da-a3-43, not connected, not favourite, paired, '
    'name: "AirPods Pro", recent access date: 2022-08-01 12:00:10 +0000'
)
CONNECTED_LINE = (
    'address: 80-3b-5c-c2-b1-7f, connected (master, 0 dBm), not favourite, paired, '
    'name: "AirPods Max", recent access date: 2022-08-01 12:10:10 +0000'
)

# ---------------------------------------------------------------------------
# parse_device_line
# ---------------------------------------------------------------------------

def test_parse_not_connected_line() -> None:
    device = parse_device_line(NOT_CONNECTED_LINE)
    assert device.name == "AirPods Pro"
    assert device.address == "5c-2e-fg-da-a3-43"
    assert device.connected is False


def test_parse_connected_line() -> None:
    device = parse_device_line(CONNECTED_LINE)
    assert device == DeviceInfo(name="AirPods Max", address="80-3b-5c-c2-b1-7f", connected=True)


def test_parse_keeps_address_case() -> None:
    line = 'address: 80-3B-5C-C2-B1-7F, connected, name: "Keyboard"'
    assert parse_device_line(line).address == "80-3B-5C-C2-B1-7F"


def test_parse_empty_name() -> None:
    line = 'address: 80-3b-5c-c2-b1-7f, not connected, paired, name: "", recent access date: never'
    device = parse_device_line(line)
    assert device.name == ""
    assert device.connected is False


def test_parse_any_line_without_marker_is_connected() -> None:
    line = 'address: 80-3b-5c-c2-b1-7f, state unknown, paired, name: "Speaker"'
    assert parse_device_line(line).connected is True


def test_parse_marker_anywhere_in_line_means_disconnected() -> None:
    line = 'address: 80-3b-5c-c2-b1-7f, connected, name: "Headset", note: not connected'
    assert parse_device_line(line).connected is False


def test_parse_name_with_comma() -> None:
    line = 'address: 80-3b-5c-c2-b1-7f, connected, name: "Bose QC, Left", recent access date: x'
    assert parse_device_line(line).name == "Bose QC, Left"


@pytest.mark.parametrize(
    "line",
    [
        "address: 5c-2e-fg-da-a3-43",
        'address: 5c-2e-fg, not connected, name: "short address"',
        'name: "AirPods Pro", address: 5c-2e-fg-da-a3-43',
        "garbage",
    ],
)
def test_parse_invalid_line_raises(line: str) -> None:
    with pytest.raises(BlueutilParseError) as exc_info:
        parse_device_line(line)
    assert exc_info.value.line == line


def test_parse_error_is_blueutil_error() -> None:
    assert isinstance(BlueutilParseError("x"), BlueutilError)


# ---------------------------------------------------------------------------
# parse_device_list
# ---------------------------------------------------------------------------

def test_parse_list_preserves_order_and_skips_blank_lines() -> None:
    text = f"{NOT_CONNECTED_LINE}\n\n{CONNECTED_LINE}\n"
    devices = parse_device_list(text)
    assert [d.name for d in devices] == ["AirPods Pro", "AirPods Max"]


def test_parse_list_empty_output() -> None:
    assert parse_device_list("") == []


def test_parse_list_aborts_on_malformed_line() -> None:
    text = f"{CONNECTED_LINE}\nnot a device line\n{NOT_CONNECTED_LINE}\n"
    with pytest.raises(BlueutilParseError):
        parse_device_list(text)


# ---------------------------------------------------------------------------
# model
# ---------------------------------------------------------------------------

def test_device_info_is_immutable() -> None:
    device = DeviceInfo(name="a", address="b", connected=True)
    with pytest.raises(dataclasses.FrozenInstanceError):
        device.connected = False  # type: ignore[misc]


def test_list_options_constructor() -> None:
    options = DeviceListOptions(filters=AllDevices(), previous_address="1234")
    assert options.filters == AllDevices()
    assert options.previous_address == "1234"


def test_list_options_all_devices() -> None:
    options = DeviceListOptions.all_devices()
    assert options.filters == AllDevices()
    assert options.previous_address is None


def test_specific_addresses_stores_tuple() -> None:
    f = SpecificAddresses(addresses=["a", "b"])
    assert f.addresses == ("a", "b")
    assert f == SpecificAddresses(addresses=("a", "b"))
