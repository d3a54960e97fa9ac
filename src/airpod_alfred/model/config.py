"""Runtime configuration for the blueutil gateway."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from airpod_alfred.vendor.blueutil.flags import (
    ENV_BLUEUTIL_PATH,
    ENV_PREVIOUS_ADDRESS,
    EXECUTABLE,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BlueutilConfig:
    """Explicit configuration sourced from the process environment.

    Attributes:
        blueutil_dir: Directory containing the ``blueutil`` executable, or
            ``None`` to resolve it from ``PATH``.
        previous_address: Address of the device selected on the previous
            run (saved by the Alfred workflow), or ``None``.
    """

    blueutil_dir: str | None = None
    previous_address: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> BlueutilConfig:
        """Build a :class:`BlueutilConfig` from environment variables.

        Reads ``BLUEUTIL_PATH`` and ``AIRPODS_MAC``.  Empty values are
        treated as unset.

        Args:
            environ: Mapping to read from (defaults to :data:`os.environ`).
        """
        env = os.environ if environ is None else environ
        blueutil_dir = env.get(ENV_BLUEUTIL_PATH) or None
        previous_address = env.get(ENV_PREVIOUS_ADDRESS) or None
        logger.debug(
            "Config: blueutil_dir=%r previous_address=%r",
            blueutil_dir,
            previous_address,
        )
        return cls(blueutil_dir=blueutil_dir, previous_address=previous_address)

    @property
    def executable(self) -> str:
        """Command used to launch blueutil."""
        if self.blueutil_dir is None:
            return EXECUTABLE
        return f"{self.blueutil_dir}/{EXECUTABLE}"
