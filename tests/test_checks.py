"""Tests for the individual environment checks."""

from __future__ import annotations

from conftest import PREFIX, SERVICES_TWO, FakeShell
from phpcheck.checks import count_instances, default_checks


def _by_key(shell, paths):
    return {c.key: c for c in default_checks(shell, paths)}


class TestOrder:

    def test_fixed_order_and_kinds(self, shell, paths) -> None:
        checks = default_checks(shell, paths)
        assert [c.key for c in checks] == [
            "php_binary", "php_opt", "valet_executable",
            "sudoers_brew", "sudoers_valet", "services",
        ]
        assert [c.breaking for c in checks] == [True] * 5 + [False]

    def test_titles_are_localized(self, shell, paths) -> None:
        for check in default_checks(shell, paths):
            assert not check.title.startswith("startup.errors.")
            assert not check.description.startswith("startup.errors.")

    def test_healthy_host_triggers_nothing(self, shell, paths) -> None:
        assert not any(c.triggered() for c in default_checks(shell, paths))


class TestPredicates:

    def test_php_opt_missing(self, shell, paths) -> None:
        shell.outputs[f"ls {PREFIX}/opt | grep php"] = ""
        assert _by_key(shell, paths)["php_opt"].triggered()

    def test_valet_in_legacy_location(self, shell, paths) -> None:
        shell.files.discard("/opt/homebrew/bin/valet")
        shell.files.add("/usr/local/bin/valet")
        assert not _by_key(shell, paths)["valet_executable"].triggered()

    def test_sudoers_brew_for_other_prefix(self, shell, paths) -> None:
        shell.outputs["cat /private/etc/sudoers.d/brew"] = "/usr/local/bin/brew *"
        assert _by_key(shell, paths)["sudoers_brew"].triggered()

    def test_sudoers_valet_accepts_either_path(self, shell, paths) -> None:
        shell.outputs["cat /private/etc/sudoers.d/valet"] = "/usr/local/bin/valet *"
        assert not _by_key(shell, paths)["sudoers_valet"].triggered()

    def test_sudoers_valet_missing(self, shell, paths) -> None:
        shell.outputs["cat /private/etc/sudoers.d/valet"] = ""
        assert _by_key(shell, paths)["sudoers_valet"].triggered()

    def test_services_two_started(self, shell, paths) -> None:
        shell.outputs[f"{PREFIX}/bin/brew services list | grep php"] = SERVICES_TWO
        assert _by_key(shell, paths)["services"].triggered()

    def test_predicates_read_live_state(self, paths) -> None:
        shell = FakeShell()
        check = _by_key(shell, paths)["php_binary"]
        assert check.triggered()
        shell.files.add(f"{PREFIX}/bin/php")
        assert not check.triggered()


class TestCountInstances:

    def test_counts(self) -> None:
        assert count_instances("started none started", "started") == 2
        assert count_instances("", "started") == 0
        assert count_instances("abc", "") == 0
