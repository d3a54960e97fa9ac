"""Custom exceptions for airpod-alfred-connector."""

from __future__ import annotations

from collections.abc import Sequence


class BlueutilError(Exception):
    """Base exception for all airpod-alfred-connector errors."""


class BlueutilParseError(BlueutilError):
    """Raised when a line of blueutil output does not have the expected format.

    blueutil's output format is assumed stable, so this aborts the whole
    listing rather than skipping the line.
    """

    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(f"Failed to parse blueutil device line: {line!r}")


class DeviceNotFoundError(BlueutilError):
    """Raised when no paired device matches the requested address."""

    def __init__(self, address: str) -> None:
        self.address = address
        super().__init__(f"Could not find device id : '{address}'")


class BlueutilLaunchError(BlueutilError):
    """Raised when the blueutil process could not be started."""

    def __init__(self, command: Sequence[str], cause: Exception) -> None:
        self.command = list(command)
        self.cause = cause
        super().__init__(f"Failed to run {' '.join(self.command)!r}: {cause}")
