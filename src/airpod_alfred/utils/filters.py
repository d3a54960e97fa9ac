"""Filtering and ordering helpers for device listings.

All helpers return new lists and preserve the relative order of the
devices they keep.
"""

from __future__ import annotations

from airpod_alfred.model.device import (
    AllDevices,
    DeviceFilter,
    DeviceInfo,
    NameContains,
    SpecificAddresses,
)


def filter_devices(devices: list[DeviceInfo], filters: DeviceFilter) -> list[DeviceInfo]:
    """Apply *filters* to *devices*.

    - :class:`.AllDevices` returns a copy of *devices* unchanged.
    - :class:`.SpecificAddresses` keeps devices whose address matches one of
      the given addresses, ignoring case.
    - :class:`.NameContains` keeps devices whose name contains the given
      value, ignoring case.

    Raises:
        TypeError: If *filters* is not one of the filter variants.
    """
    if isinstance(filters, AllDevices):
        return list(devices)
    if isinstance(filters, SpecificAddresses):
        wanted = {a.lower() for a in filters.addresses}
        return [d for d in devices if d.address.lower() in wanted]
    if isinstance(filters, NameContains):
        value = filters.value.lower()
        return [d for d in devices if value in d.name.lower()]
    raise TypeError(f"Unsupported device filter: {filters!r}")


def sort_connected_first(devices: list[DeviceInfo]) -> list[DeviceInfo]:
    """Return *devices* with connected devices first (stable)."""
    return sorted(devices, key=lambda d: not d.connected)


def move_to_front(devices: list[DeviceInfo], address: str) -> list[DeviceInfo]:
    """Move the device whose address equals *address* (ignoring case) to the front.

    Every other device keeps its position relative to the rest.
    """
    target = address.lower()
    return sorted(devices, key=lambda d: d.address.lower() != target)
