"""Top-level Bluetooth client: device directory and connection toggling."""

from __future__ import annotations

import logging

from airpod_alfred.client.blueutil import BlueutilClient
from airpod_alfred.client.errors import DeviceNotFoundError
from airpod_alfred.model.device import DeviceInfo, DeviceListOptions, SpecificAddresses
from airpod_alfred.utils.filters import filter_devices, move_to_front, sort_connected_first

logger = logging.getLogger(__name__)


class BluetoothClient:
    """Lists, looks up and (dis)connects paired Bluetooth devices.

    Device state is never cached: every call re-reads the paired-device list
    through the gateway.

    Args:
        gateway: blueutil gateway; defaults to a :class:`.BlueutilClient`
            resolving ``blueutil`` from ``PATH``.
    """

    def __init__(self, gateway: BlueutilClient | None = None) -> None:
        self._gateway: BlueutilClient = gateway or BlueutilClient()

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    def get_device_list(self, options: DeviceListOptions) -> list[DeviceInfo]:
        """Return paired devices, filtered and ordered.

        Order: the device matching ``options.previous_address`` (if any)
        first, then connected devices, then disconnected ones.  Ties keep
        blueutil's order.

        Raises:
            BlueutilParseError: If blueutil output is malformed.
            BlueutilLaunchError: If blueutil could not be started.
        """
        devices = self._gateway.get_device_list()
        devices = filter_devices(devices, options.filters)
        devices = sort_connected_first(devices)

        if options.previous_address is not None:
            devices = move_to_front(devices, options.previous_address)

        logger.debug("Listing %d device(s) for %r", len(devices), options)
        return devices

    def get_device_info(self, address: str) -> DeviceInfo:
        """Return the paired device with *address* (case-insensitive).

        If blueutil reports the same address twice, the first match wins.

        Raises:
            DeviceNotFoundError: If no paired device has that address.
        """
        options = DeviceListOptions(
            filters=SpecificAddresses(addresses=(address,)),
            previous_address=None,
        )
        devices = self.get_device_list(options)
        if not devices:
            raise DeviceNotFoundError(address)
        return devices[0]

    def is_device_connected(self, address: str) -> bool:
        """Return whether the device with *address* is currently connected.

        Raises:
            DeviceNotFoundError: If no paired device has that address.
        """
        return self.get_device_info(address).connected

    # ------------------------------------------------------------------
    # Connection control
    # ------------------------------------------------------------------

    def connect_to_device(self, address: str) -> None:
        self._gateway.connect_to_device(address)

    def disconnect_from_device(self, address: str) -> None:
        self._gateway.disconnect_from_device(address)

    def toggle_connected_status(self, address: str) -> bool:
        """Flip the connection state of the device with *address*.

        Reads the current state, then issues the opposite action.  The two
        steps are not atomic: if the state changes in between, the action is
        still based on the earlier read.

        Returns:
            ``True`` if a connect was issued, ``False`` if a disconnect was.

        Raises:
            DeviceNotFoundError: If no paired device has that address.
        """
        device = self.get_device_info(address)

        if device.connected:
            logger.info("Disconnecting from %s (%s)", device.name, device.address)
            self.disconnect_from_device(address)
            return False

        logger.info("Connecting to %s (%s)", device.name, device.address)
        self.connect_to_device(address)
        return True
