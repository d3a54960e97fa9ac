"""Alfred script-filter renderer for device listings."""

from __future__ import annotations

from typing import Any

from airpod_alfred.model.device import DeviceInfo


def render_alfred_items(devices: list[DeviceInfo]) -> dict[str, Any]:
    """Serialize *devices* to an Alfred script-filter payload.

    Returns:
        A dict ``{"items": [...]}`` with one entry per device, in order.
        Each entry has ``type``, ``title`` (name, suffixed with
        ``" (Connected)"`` when connected), ``subtitle`` (``"MAC:<address>"``)
        and ``arg`` (the address, passed to the next workflow action).
    """
    return {
        "items": [
            {
                "type": "default",
                "title": f"{d.name} (Connected)" if d.connected else d.name,
                "subtitle": f"MAC:{d.address}",
                "arg": d.address,
            }
            for d in devices
        ]
    }
