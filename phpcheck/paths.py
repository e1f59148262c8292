"""
phpcheck Paths — Where Homebrew, PHP and Valet live on this machine.

Homebrew installs under `/opt/homebrew` on Apple Silicon and `/usr/local`
on Intel. The prefix can be forced with the PHPCHECK_BREW_PREFIX
environment variable (or `--prefix` on the command line).
"""

import os
import platform
from dataclasses import dataclass
from typing import Optional

from phpcheck.errors import ConfigError

PREFIX_ENV_VAR = "PHPCHECK_BREW_PREFIX"

ARM_PREFIX = "/opt/homebrew"
INTEL_PREFIX = "/usr/local"

# Older Valet installs land in /usr/local/bin regardless of the Homebrew prefix
VALET_PATHS: tuple[str, ...] = (
    "/usr/local/bin/valet",
    "/opt/homebrew/bin/valet",
)

SUDOERS_BREW = "/private/etc/sudoers.d/brew"
SUDOERS_VALET = "/private/etc/sudoers.d/valet"


@dataclass(frozen=True)
class Paths:
    """Resolved Homebrew locations."""
    prefix: str

    @property
    def bin_path(self) -> str:
        return f"{self.prefix}/bin"

    @property
    def opt_path(self) -> str:
        return f"{self.prefix}/opt"

    @property
    def brew(self) -> str:
        return f"{self.bin_path}/brew"

    @classmethod
    def from_prefix(cls, prefix: str) -> "Paths":
        """Build paths from an explicit prefix.

        Raises:
            ConfigError: if the prefix is empty or not absolute.
        """
        prefix = prefix.strip()
        if not prefix or not prefix.startswith("/"):
            raise ConfigError(f"Homebrew prefix must be an absolute path, got {prefix!r}")
        return cls(prefix=prefix.rstrip("/") or "/")

    @classmethod
    def detect(cls, override: Optional[str] = None) -> "Paths":
        """Pick the prefix: explicit override, then the environment, then the CPU."""
        if override:
            return cls.from_prefix(override)

        from_env = os.environ.get(PREFIX_ENV_VAR)
        if from_env:
            return cls.from_prefix(from_env)

        if platform.machine() == "arm64":
            return cls(prefix=ARM_PREFIX)
        return cls(prefix=INTEL_PREFIX)
