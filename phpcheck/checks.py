"""
phpcheck Checks — The ordered list of startup environment checks.

Each check wraps a predicate that returns True when the *failure*
condition is met, plus the alert text shown when it does. Breaking
checks stop the launch; advisory checks only warn.

Order is fixed and matters for which alerts surface first:
  1. php_binary        — php exists in the Homebrew bin directory
  2. php_opt           — a php keg exists in the Homebrew opt directory
  3. valet_executable  — valet is installed at a known location
  4. sudoers_brew      — brew may be run via sudo without a password
  5. sudoers_valet     — valet may be run via sudo without a password
  6. services          — at most one php service is started (advisory)
"""

from dataclasses import dataclass
from typing import Callable

from phpcheck.messages import localized
from phpcheck.paths import SUDOERS_BREW, SUDOERS_VALET, VALET_PATHS, Paths
from phpcheck.shell import Shell

Predicate = Callable[[], bool]


@dataclass(frozen=True)
class EnvironmentCheck:
    """A single startup check.

    Attributes:
        key: Stable identifier, also the message key stem (e.g. "php_binary")
        predicate: Returns True when the failure condition is met
        title: Short description of what is wrong
        description: Expanded description shown with the alert
        breaking: Whether a failure stops the launch
    """
    key: str
    predicate: Predicate
    title: str
    description: str
    breaking: bool = True

    def triggered(self) -> bool:
        return bool(self.predicate())


def count_instances(haystack: str, needle: str) -> int:
    """Count non-overlapping occurrences of `needle` in `haystack`."""
    if not needle:
        return 0
    return haystack.count(needle)


def _check(key: str, predicate: Predicate, breaking: bool = True) -> EnvironmentCheck:
    return EnvironmentCheck(
        key=key,
        predicate=predicate,
        title=localized(f"startup.errors.{key}.title"),
        description=localized(f"startup.errors.{key}.desc"),
        breaking=breaking,
    )


def default_checks(shell: Shell, paths: Paths) -> list[EnvironmentCheck]:
    """Build the standard check list against a host shell and Homebrew layout."""

    def php_binary_missing() -> bool:
        return not shell.file_exists(f"{paths.bin_path}/php")

    def php_opt_missing() -> bool:
        return "php" not in shell.pipe(f"ls {paths.opt_path} | grep php")

    def valet_missing() -> bool:
        return not any(shell.file_exists(p) for p in VALET_PATHS)

    def brew_not_in_sudoers() -> bool:
        return f"{paths.bin_path}/brew" not in shell.pipe(f"cat {SUDOERS_BREW}")

    def valet_not_in_sudoers() -> bool:
        sudoers = shell.pipe(f"cat {SUDOERS_VALET}")
        return not any(p in sudoers for p in VALET_PATHS)

    def multiple_services_started() -> bool:
        services = shell.pipe(f"{paths.brew} services list | grep php")
        return count_instances(services, "started") > 1

    return [
        _check("php_binary", php_binary_missing),
        _check("php_opt", php_opt_missing),
        _check("valet_executable", valet_missing),
        _check("sudoers_brew", brew_not_in_sudoers),
        _check("sudoers_valet", valet_not_in_sudoers),
        _check("services", multiple_services_started, breaking=False),
    ]
