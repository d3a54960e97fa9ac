"""Normalization helpers for command-line input."""

from __future__ import annotations


def device_list_from_cli_arg(device_list: str) -> list[str] | None:
    """Split a comma-separated address list.

    Surrounding whitespace is stripped and empty items are dropped.

    Returns:
        The addresses, or ``None`` if *device_list* holds none.
    """
    addresses = [a.strip() for a in device_list.split(",") if a.strip()]
    return addresses or None
