"""Gateway to the ``blueutil`` command-line tool."""

from __future__ import annotations

import logging

from airpod_alfred.client.errors import BlueutilParseError
from airpod_alfred.client.runner import CommandResult, CommandRunner, SubprocessRunner
from airpod_alfred.model.config import BlueutilConfig
from airpod_alfred.model.device import DeviceInfo
from airpod_alfred.parser.device import parse_device_list
from airpod_alfred.vendor.blueutil.flags import CONNECT, DISCONNECT, INFO, PAIRED

logger = logging.getLogger(__name__)


class BlueutilClient:
    """Runs the three blueutil operations the connector needs.

    Each call launches blueutil exactly once.  Connect and disconnect do not
    inspect the exit status; blueutil-level failures (e.g. device out of
    range) are only visible in the debug log.

    Args:
        config: Executable location (see :attr:`.BlueutilConfig.executable`).
        runner: Command runner; defaults to :class:`.SubprocessRunner`.
    """

    def __init__(
        self,
        config: BlueutilConfig | None = None,
        runner: CommandRunner | None = None,
    ) -> None:
        self._config: BlueutilConfig = config or BlueutilConfig()
        self._runner: CommandRunner = runner or SubprocessRunner()

    @property
    def executable(self) -> str:
        return self._config.executable

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_device_list(self) -> list[DeviceInfo]:
        """Return all paired devices in the order blueutil lists them.

        Raises:
            BlueutilLaunchError: If blueutil could not be started.
            BlueutilParseError: If the output is not UTF-8 or any line is malformed.
        """
        result = self._run(PAIRED)
        try:
            text = result.stdout.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise BlueutilParseError(result.stdout.decode("utf-8", errors="replace")) from exc
        return parse_device_list(text)

    def connect_to_device(self, address: str) -> None:
        """Ask blueutil to connect to *address*.

        Raises:
            BlueutilLaunchError: If blueutil could not be started.
        """
        result = self._run(CONNECT, address)
        self._log_output(result)

    def disconnect_from_device(self, address: str) -> None:
        """Ask blueutil to disconnect from *address* and refresh its info.

        Raises:
            BlueutilLaunchError: If blueutil could not be started.
        """
        result = self._run(DISCONNECT, address, INFO, address)
        self._log_output(result)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _run(self, *args: str) -> CommandResult:
        return self._runner.run(self.executable, list(args))

    @staticmethod
    def _log_output(result: CommandResult) -> None:
        logger.debug("blueutil exited with %d", result.returncode)
        logger.debug("stdout: %r", result.stdout)
        logger.debug("stderr: %r", result.stderr)
