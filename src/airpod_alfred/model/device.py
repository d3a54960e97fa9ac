"""Typed models for paired Bluetooth devices and device-list options."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class DeviceInfo:
    """One paired device as reported by ``blueutil --paired``.

    Attributes:
        name: Display name; empty if blueutil reported an empty name.
        address: Hardware address (e.g. ``80-3b-5c-c2-b1-7f``).  Compared
            case-insensitively everywhere.
        connected: Connection state at the time of listing.
    """

    name: str
    address: str
    connected: bool


@dataclass(frozen=True)
class AllDevices:
    """Filter that keeps every device."""


@dataclass(frozen=True)
class SpecificAddresses:
    """Filter that keeps devices whose address is in *addresses*.

    Attributes:
        addresses: Addresses to keep (matched case-insensitively).
    """

    addresses: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any iterable (list from the CLI) but store an immutable tuple.
        object.__setattr__(self, "addresses", tuple(self.addresses))


@dataclass(frozen=True)
class NameContains:
    """Filter that keeps devices whose name contains *value*.

    Attributes:
        value: Substring to look for (matched case-insensitively).
    """

    value: str


DeviceFilter = Union[AllDevices, SpecificAddresses, NameContains]


@dataclass(frozen=True)
class DeviceListOptions:
    """Filtering and ordering options for a device listing.

    Attributes:
        filters: Exactly one filter variant.
        previous_address: Address of the previously selected device.  Only
            used to move that device to the top; never filters.
    """

    filters: DeviceFilter = field(default_factory=AllDevices)
    previous_address: str | None = None

    @classmethod
    def all_devices(cls) -> DeviceListOptions:
        """Return options listing every device with no ordering hint."""
        return cls(filters=AllDevices(), previous_address=None)
