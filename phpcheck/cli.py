"""
phpcheck Runner — Check this machine from the command line.

Usage:
    python -m phpcheck                   # Run all startup checks
    python -m phpcheck --list            # List the checks in order
    python -m phpcheck --prefix /usr/local
    python -m phpcheck --retry 2         # Re-run up to twice after a breaking failure
    python -m phpcheck -v                # Debug logging (shows shell commands)

Exit codes: 0 ready to launch, 1 a breaking check failed, 2 error.
"""

import argparse
import logging
import sys
import textwrap
from typing import Optional

from phpcheck.checks import default_checks
from phpcheck.errors import PhpCheckError
from phpcheck.homebrew import HomebrewPackage
from phpcheck.paths import Paths
from phpcheck.shell import Shell, SystemShell
from phpcheck.startup import Startup, StartupResult

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_ERROR = 2


def banner(text: str, char: str = "="):
    """Print a formatted banner."""
    width = 70
    print(f"\n{char * width}")
    print(f"  {text}")
    print(f"{char * width}")


def print_alert(title: str, description: str):
    print(f"\n  ⚠ {title}")
    print(textwrap.indent(textwrap.fill(description, width=66), "    "))


def list_checks(shell: Shell, paths: Paths):
    """Print the check table."""
    print(f"{'#':<3} {'Key':<18} {'Kind':<10} Title")
    print("-" * 70)
    for i, check in enumerate(default_checks(shell, paths), 1):
        kind = "breaking" if check.breaking else "advisory"
        print(f"{i:<3} {check.key:<18} {kind:<10} {check.title}")


def run_checks(startup: Startup, retries: int = 0) -> StartupResult:
    """Run validation, re-running after a breaking failure while retries remain."""
    attempt = 0
    while True:
        attempt += 1
        banner(f"Checking environment (attempt {attempt})")
        failures: list[int] = []

        def on_success(package: HomebrewPackage):
            print(f"\n  ✅ Ready. `php` is PHP {package.version} (php@{package.short_version})")

        def on_failure():
            failures.append(attempt)

        result = startup.check_environment(on_success, on_failure)
        if not result.failed or attempt > retries:
            if result.failed:
                print(f"\n  ❌ {len(failures)} breaking issue(s) must be fixed before launch.")
            return result
        logger.info("Retrying after %d breaking failure(s)", len(failures))


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="phpcheck",
        description="Check that PHP, Valet and Homebrew are ready for the PHP monitor.",
    )
    parser.add_argument("--list", action="store_true", help="List all checks in order")
    parser.add_argument("--prefix", help="Homebrew prefix (default: detected)")
    parser.add_argument("--retry", type=int, default=0, metavar="N",
                        help="Re-run up to N times after a breaking failure")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.retry < 0:
        parser.error("--retry must not be negative")

    try:
        paths = Paths.detect(args.prefix)
        shell = SystemShell()

        if args.list:
            list_checks(shell, paths)
            return EXIT_OK

        startup = Startup(notify=print_alert, shell=shell, paths=paths)
        result = run_checks(startup, retries=args.retry)
    except PhpCheckError as e:
        sys.stderr.write(f"error: {e}\n")
        return EXIT_ERROR

    return EXIT_FAILED if result.failed else EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
