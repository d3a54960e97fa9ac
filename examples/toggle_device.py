#!/usr/bin/env python3
"""Example: toggle a device's connection and revert it (safe, dry-run by default).

Usage::

    # Dry-run (no changes): shows the planned toggle:
    export TEST_DEVICE=80-3b-5c-c2-b1-7f
    python examples/toggle_device.py

    # Apply (toggles, waits 5 s, toggles back):
    export APPLY=1
    python examples/toggle_device.py

Environment variables:
    TEST_DEVICE     Address of the device to toggle (required).
    BLUEUTIL_PATH   Directory containing blueutil (default: search PATH).
    APPLY           Set to "1" to actually toggle (default: dry-run).
"""

from __future__ import annotations

import os
import sys
import time

from airpod_alfred.client.blueutil import BlueutilClient
from airpod_alfred.client.errors import BlueutilError
from airpod_alfred.driver import BluetoothClient
from airpod_alfred.model.config import BlueutilConfig


def main() -> None:
    address = os.environ.get("TEST_DEVICE", "")
    if not address:
        print("ERROR: TEST_DEVICE environment variable is required.", file=sys.stderr)
        sys.exit(1)

    apply_changes = os.environ.get("APPLY", "0") == "1"
    client = BluetoothClient(BlueutilClient(config=BlueutilConfig.from_env()))

    try:
        device = client.get_device_info(address)
        print(f"Current state of {device.name!r}:")
        print(f"  address   = {device.address}")
        print(f"  connected = {device.connected}")
        print()

        action = "disconnect" if device.connected else "connect"
        print(f"Dry-run plan: {action} {device.address}, then revert.")
        if not apply_changes:
            print("Dry-run mode: set APPLY=1 to apply changes.")
            return

        connected = client.toggle_connected_status(address)
        print(f"[APPLY] Now {'connected' if connected else 'disconnected'}. Waiting 5 seconds...")
        time.sleep(5)

        # Re-read state; the device may not have reached the requested state.
        print(f"[APPLY] Read back: connected = {client.is_device_connected(address)}")
        connected = client.toggle_connected_status(address)
        print(f"[APPLY] Restored: {'connected' if connected else 'disconnected'}.")
    except BlueutilError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
