#!/usr/bin/env python3
"""Smoke-test script: list paired Bluetooth devices via blueutil.

Usage::

    export BLUEUTIL_PATH=/opt/homebrew/bin   # optional, default: search PATH
    export AIRPODS_MAC=80-3b-5c-c2-b1-7f     # optional, listed first
    python examples/list_devices.py

Exit codes:
    0: devices listed successfully.
    1: blueutil could not be run or its output was not understood.
"""

from __future__ import annotations

import json
import sys
from dataclasses import asdict


def main() -> None:
    # Import here so import errors surface with a clear traceback.
    from airpod_alfred.client.blueutil import BlueutilClient
    from airpod_alfred.client.errors import BlueutilError
    from airpod_alfred.driver import BluetoothClient
    from airpod_alfred.model.config import BlueutilConfig
    from airpod_alfred.model.device import AllDevices, DeviceListOptions

    config = BlueutilConfig.from_env()
    client = BluetoothClient(BlueutilClient(config=config))

    try:
        devices = client.get_device_list(
            DeviceListOptions(filters=AllDevices(), previous_address=config.previous_address)
        )
    except BlueutilError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps([asdict(d) for d in devices], indent=2))


if __name__ == "__main__":
    main()
