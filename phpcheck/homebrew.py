"""
phpcheck Homebrew — Work out which PHP version the `php` formula means.

Rather than hard-coding which version `php` is aliased to, ask Homebrew:
`brew info php --json` returns a JSON array of formula objects and the
first one is authoritative.

Uses packaging.version to reduce a full version to its `major.minor`
alias (e.g. "8.3.1" -> "8.3", the `php@8.3` formula).
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Optional

from packaging.version import InvalidVersion, Version

from phpcheck.errors import BrewInfoError
from phpcheck.paths import Paths
from phpcheck.shell import Shell

logger = logging.getLogger(__name__)


@dataclass
class HomebrewPackage:
    """The parts of a `brew info --json` formula entry we use."""
    name: str
    version: str
    full_name: str = ""
    aliases: list[str] = field(default_factory=list)
    installed: list[str] = field(default_factory=list)   # installed versions
    linked_keg: Optional[str] = None

    @property
    def short_version(self) -> str:
        """`major.minor` of the resolved version, e.g. "8.3"."""
        try:
            v = Version(self.version)
        except InvalidVersion:
            return ".".join(self.version.split(".")[:2])
        return f"{v.major}.{v.minor}"

    @classmethod
    def from_dict(cls, data: dict) -> "HomebrewPackage":
        """Decode one formula object.

        The version is taken from, in order: a top-level "version" key,
        the first installed version, `versions.stable`, the first
        `php@X.Y` alias.

        Raises:
            BrewInfoError: if no version can be found.
        """
        if not isinstance(data, dict):
            raise BrewInfoError(f"expected a formula object, got {type(data).__name__}")

        raw_aliases = data.get("aliases") or []
        raw_installed = data.get("installed") or []
        if not isinstance(raw_aliases, list):
            raise BrewInfoError(f"expected 'aliases' to be a list, got {type(raw_aliases).__name__}")
        if not isinstance(raw_installed, list):
            raise BrewInfoError(f"expected 'installed' to be a list, got {type(raw_installed).__name__}")

        aliases = [a for a in raw_aliases if isinstance(a, str)]
        installed = [
            entry["version"] for entry in raw_installed
            if isinstance(entry, dict) and isinstance(entry.get("version"), str)
        ]

        version = data.get("version")
        if not isinstance(version, str) or not version:
            version = None
        if version is None and installed:
            version = installed[0]
        if version is None:
            versions = data.get("versions")
            stable = versions.get("stable") if isinstance(versions, dict) else None
            if isinstance(stable, str) and stable:
                version = stable
        if version is None:
            for alias in aliases:
                if alias.startswith("php@"):
                    version = alias[len("php@"):]
                    break
        if version is None:
            raise BrewInfoError("formula entry has no version information")

        name = data.get("name")
        full_name = data.get("full_name")
        linked_keg = data.get("linked_keg")
        return cls(
            name=name if isinstance(name, str) else "php",
            version=version,
            full_name=full_name if isinstance(full_name, str) else "",
            aliases=aliases,
            installed=installed,
            linked_keg=linked_keg if isinstance(linked_keg, str) else None,
        )


def parse_brew_info(raw: str) -> HomebrewPackage:
    """Decode `brew info <formula> --json` output into its first package.

    Raises:
        BrewInfoError: on invalid JSON, a non-array payload, an empty
            array or an entry without a version.
    """
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        raise BrewInfoError(f"brew info returned invalid JSON: {e}") from e

    if not isinstance(payload, list):
        raise BrewInfoError(f"expected a JSON array, got {type(payload).__name__}")
    if not payload:
        raise BrewInfoError("brew info returned no packages")

    return HomebrewPackage.from_dict(payload[0])


def determine_alias_version(shell: Shell, paths: Paths) -> HomebrewPackage:
    """Ask Homebrew which PHP version `php` is aliased to."""
    logger.info("All startup checks passed.")
    logger.info("Determining which version of PHP is aliased to `php` via Homebrew...")

    package = parse_brew_info(shell.pipe(f"{paths.brew} info php --json"))

    logger.info("On this system, the `php` formula means version %s", package.version)
    return package
