"""Parser for ``blueutil --paired`` output."""

from __future__ import annotations

import logging
import re

from airpod_alfred.client.errors import BlueutilParseError
from airpod_alfred.model.device import DeviceInfo
from airpod_alfred.vendor.blueutil.flags import NOT_CONNECTED_MARKER

logger = logging.getLogger(__name__)

# address: 80-3b-5c-c2-b1-7f, connected (master, 0 dBm), ..., name: "AirPods Max", ...
_DEVICE_RE: re.Pattern[str] = re.compile(
    r'^address: ([a-zA-Z0-9_-]{17}),.*name: "([^"]*)"'
)


def parse_device_line(line: str) -> DeviceInfo:
    """Parse one line of ``blueutil --paired`` output into a :class:`.DeviceInfo`.

    The connection state is derived from the whole line: any line that does
    not contain ``"not connected"`` is treated as connected.

    Args:
        line: A single non-empty output line.

    Returns:
        Populated :class:`.DeviceInfo` instance.

    Raises:
        BlueutilParseError: If the address/name structure is not found.
    """
    match = _DEVICE_RE.search(line)
    if match is None:
        raise BlueutilParseError(line)

    return DeviceInfo(
        name=match.group(2),
        address=match.group(1),
        connected=NOT_CONNECTED_MARKER not in line,
    )


def parse_device_list(text: str) -> list[DeviceInfo]:
    """Parse the full ``blueutil --paired`` output.

    Empty lines are ignored; every other line must parse.

    Args:
        text: Decoded stdout of ``blueutil --paired``.

    Returns:
        Devices in the order blueutil emitted them.

    Raises:
        BlueutilParseError: On the first malformed line.
    """
    devices = [parse_device_line(line) for line in text.split("\n") if line]
    logger.debug("Parsed %d paired device(s)", len(devices))
    return devices
