"""Low-level process runner used to invoke blueutil."""

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

from airpod_alfred.client.errors import BlueutilLaunchError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Captured outcome of one external command.

    Attributes:
        returncode: Process exit status.
        stdout: Raw standard output.
        stderr: Raw standard error.
    """

    returncode: int
    stdout: bytes = b""
    stderr: bytes = b""


class CommandRunner(ABC):
    """Runs an external command and captures its output."""

    @abstractmethod
    def run(self, command: str, args: Sequence[str]) -> CommandResult:
        """Run *command* with *args* and block until it exits.

        Raises:
            BlueutilLaunchError: If the command could not be started.
        """


class SubprocessRunner(CommandRunner):
    """:class:`CommandRunner` backed by :func:`subprocess.run`.

    No timeout is applied: a hung process blocks the caller.
    """

    def run(self, command: str, args: Sequence[str]) -> CommandResult:
        argv = [command, *args]
        logger.debug("Running %s", argv)
        try:
            proc = subprocess.run(argv, capture_output=True, check=False)
        except OSError as exc:
            raise BlueutilLaunchError(argv, exc) from exc
        return CommandResult(
            returncode=proc.returncode,
            stdout=proc.stdout,
            stderr=proc.stderr,
        )
