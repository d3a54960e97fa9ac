"""Command-line entry point: ``airpod-alfred-bluetooth``.

Usage::

    # Alfred script filter (AirPods only, previous selection first):
    export AIRPODS_MAC=80-3b-5c-c2-b1-7f
    airpod-alfred-bluetooth list

    # Every paired device, or an explicit address list:
    airpod-alfred-bluetooth list --all-devices
    airpod-alfred-bluetooth list -d 80-3b-5c-c2-b1-7f,5c-2e-fa-da-a3-43

    airpod-alfred-bluetooth toggle 80-3b-5c-c2-b1-7f

Environment variables:
    BLUEUTIL_PATH   Directory containing ``blueutil`` (default: search PATH).
    AIRPODS_MAC     Previously selected address; listed first.

Exit codes:
    0: success.
    1: any blueutil error (see stderr).
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Mapping

from airpod_alfred.client.blueutil import BlueutilClient
from airpod_alfred.client.errors import BlueutilError
from airpod_alfred.driver import BluetoothClient
from airpod_alfred.model.config import BlueutilConfig
from airpod_alfred.model.device import (
    AllDevices,
    DeviceFilter,
    DeviceListOptions,
    NameContains,
    SpecificAddresses,
)
from airpod_alfred.utils.normalize import device_list_from_cli_arg
from airpod_alfred.utils.render import render_alfred_items

logger = logging.getLogger(__name__)

# Name filter used by ``list`` unless --all-devices or --device-list is given.
DEFAULT_NAME_FILTER: str = "airpod"

_VERBOSITY_LEVELS: tuple[int, ...] = (
    logging.ERROR,
    logging.WARNING,
    logging.INFO,
    logging.DEBUG,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="airpod-alfred-bluetooth",
        description="Utility to simplify connecting/disconnecting to AirPods from Alfred",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Increase logging verbosity (-v warnings, -vv info, -vvv debug)",
    )
    verbosity.add_argument(
        "-q", "--quiet", action="store_true", help="Only log critical errors",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    list_cmd = sub.add_parser("list", help="List paired devices as Alfred items")
    list_cmd.add_argument(
        "-a", "--all-devices", action="store_true",
        help="List every paired device instead of AirPods only",
    )
    list_cmd.add_argument(
        "-d", "--device-list", metavar="ADDRESSES",
        help="Comma-separated addresses to list (overrides --all-devices)",
    )

    for name, help_text in (
        ("connect", "Connect to a device"),
        ("disconnect", "Disconnect from a device"),
        ("toggle", "Toggle the connection to a device"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("device_id", help="Device address")

    return parser


def build_filter(all_devices: bool, device_list: str | None) -> DeviceFilter:
    """Choose the ``list`` filter from the command-line flags."""
    if device_list:
        addresses = device_list_from_cli_arg(device_list)
        if addresses is not None:
            return SpecificAddresses(addresses=addresses)
    if all_devices:
        return AllDevices()
    return NameContains(value=DEFAULT_NAME_FILTER)


def build_client(config: BlueutilConfig) -> BluetoothClient:
    return BluetoothClient(BlueutilClient(config=config))


def log_level(verbose: int, quiet: bool) -> int:
    """Map -v/-q flags to a logging level.

    Errors only by default; each -v lowers the threshold one step down to
    DEBUG. -q leaves only critical records.
    """
    if quiet:
        return logging.CRITICAL
    return _VERBOSITY_LEVELS[min(verbose, len(_VERBOSITY_LEVELS) - 1)]


def _configure_logging(verbose: int, quiet: bool) -> None:
    logging.basicConfig(
        level=log_level(verbose, quiet),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(
    argv: list[str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose, args.quiet)

    config = BlueutilConfig.from_env(environ)
    client = build_client(config)

    try:
        if args.command == "list":
            options = DeviceListOptions(
                filters=build_filter(args.all_devices, args.device_list),
                previous_address=config.previous_address,
            )
            devices = client.get_device_list(options)
            print(json.dumps(render_alfred_items(devices)))
        elif args.command == "connect":
            client.connect_to_device(args.device_id)
            print("Connected to device")
        elif args.command == "disconnect":
            client.disconnect_from_device(args.device_id)
            print("Disconnected from device")
        elif args.command == "toggle":
            connected = client.toggle_connected_status(args.device_id)
            print("connected" if connected else "disconnected")
    except BlueutilError as exc:
        logger.debug("Command %r failed", args.command, exc_info=True)
        print(exc, file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
