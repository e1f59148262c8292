"""Shared fixtures: a fake host that never runs real commands."""

from __future__ import annotations

import json

import pytest

from phpcheck.paths import Paths

PREFIX = "/opt/homebrew"

SUDOERS_BREW = "Cmnd_Alias BREW = /opt/homebrew/bin/brew *\n%admin ALL=(root) NOPASSWD:SETENV: BREW\n"
SUDOERS_VALET = "Cmnd_Alias VALET = /opt/homebrew/bin/valet *\n%admin ALL=(root) NOPASSWD:SETENV: VALET\n"
SERVICES_ONE = "php         started user ~/Library/LaunchAgents/homebrew.mxcl.php.plist\nphp@8.1     none\n"
SERVICES_TWO = (
    "php         started user ~/Library/LaunchAgents/homebrew.mxcl.php.plist\n"
    "php@8.1     started user ~/Library/LaunchAgents/homebrew.mxcl.php@8.1.plist\n"
)
BREW_INFO = json.dumps([{"name": "php", "full_name": "php", "version": "8.3.1",
                         "aliases": ["php@8.3"], "installed": [{"version": "8.3.1"}]}])


class FakeShell:
    """In-memory host: a set of existing files and canned command output."""

    def __init__(self, files: set[str] | None = None, outputs: dict[str, str] | None = None):
        self.files = set(files or ())
        self.outputs = dict(outputs or {})
        self.commands: list[str] = []

    def file_exists(self, path: str) -> bool:
        return path in self.files

    def pipe(self, command: str) -> str:
        self.commands.append(command)
        return self.outputs.get(command, "")


def healthy_shell() -> FakeShell:
    """A host where every check passes."""
    return FakeShell(
        files={f"{PREFIX}/bin/php", "/opt/homebrew/bin/valet"},
        outputs={
            f"ls {PREFIX}/opt | grep php": "php\nphp@8.1\n",
            "cat /private/etc/sudoers.d/brew": SUDOERS_BREW,
            "cat /private/etc/sudoers.d/valet": SUDOERS_VALET,
            f"{PREFIX}/bin/brew services list | grep php": SERVICES_ONE,
            f"{PREFIX}/bin/brew info php --json": BREW_INFO,
        },
    )


@pytest.fixture
def paths() -> Paths:
    return Paths(prefix=PREFIX)


@pytest.fixture
def shell() -> FakeShell:
    return healthy_shell()
