"""
phpcheck Shell — Run literal shell commands and probe the filesystem.

The validator only depends on the `Shell` protocol, so tests can hand
it a fake host.
"""

import logging
import os
import subprocess
from typing import Protocol

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


class Shell(Protocol):
    """What the validator needs from the host system."""

    def file_exists(self, path: str) -> bool:
        ...

    def pipe(self, command: str) -> str:
        """Run `command` through the shell and return its standard output."""
        ...


class SystemShell:
    """Shell backed by `subprocess`.

    Commands are passed to `/bin/sh` verbatim so pipes work. Output is
    decoded as UTF-8 with undecodable bytes replaced. A command
    that times out or cannot be started yields empty output; a non-zero
    exit status is not an error (e.g. `grep` with no match).
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT):
        self.timeout = timeout

    def file_exists(self, path: str) -> bool:
        return os.path.isfile(path)

    def pipe(self, command: str) -> str:
        logger.debug("Running: %s", command)
        try:
            result = subprocess.run(
                command, shell=True,
                capture_output=True, encoding="utf-8", errors="replace",
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired:
            logger.warning("Command timed out after %ss: %s", self.timeout, command)
            return ""
        except OSError as e:
            logger.warning("Could not run %s: %s", command, e)
            return ""

        if result.returncode != 0:
            logger.debug("Exit status %d from: %s", result.returncode, command)
        return result.stdout
