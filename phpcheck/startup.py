"""
phpcheck Startup — Decide whether the monitor can launch.

Runs every environment check in order on the calling thread. A check
that triggers queues an alert through the dispatcher; a breaking check
also queues the failure callback. If nothing breaking triggered, the
PHP alias version is looked up and the success callback fires once.

Usage:
    from phpcheck.startup import Startup

    result = Startup(notify=print_alert).check_environment(
        on_success=launch,
        on_failure=offer_retry,
    )
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Optional

from phpcheck.checks import EnvironmentCheck, default_checks
from phpcheck.homebrew import HomebrewPackage, determine_alias_version
from phpcheck.paths import Paths
from phpcheck.shell import Shell, SystemShell

logger = logging.getLogger(__name__)

Notifier = Callable[[str, str], None]
Dispatcher = Callable[[Callable[[], None]], None]


def immediate(fn: Callable[[], None]) -> None:
    """Dispatcher that runs the callable right away."""
    fn()


class QueuedDispatcher:
    """Dispatcher that holds callables until `drain()` is called.

    Stands in for a UI main loop: alerts raised during the checks are
    presented later, after the checks have moved on.
    """

    def __init__(self):
        self.pending: deque[Callable[[], None]] = deque()

    def __call__(self, fn: Callable[[], None]) -> None:
        self.pending.append(fn)

    def drain(self) -> int:
        """Run everything queued so far, in order. Returns how many ran."""
        ran = 0
        while self.pending:
            self.pending.popleft()()
            ran += 1
        return ran


@dataclass
class StartupResult:
    """Outcome of one validation pass."""
    failed: bool = False
    triggered: list[EnvironmentCheck] = field(default_factory=list)
    package: Optional[HomebrewPackage] = None

    @property
    def warnings(self) -> list[EnvironmentCheck]:
        return [c for c in self.triggered if not c.breaking]

    @property
    def breaking(self) -> list[EnvironmentCheck]:
        return [c for c in self.triggered if c.breaking]


class Startup:
    """The environment validator."""

    def __init__(
        self,
        notify: Notifier,
        shell: Optional[Shell] = None,
        paths: Optional[Paths] = None,
        dispatch: Dispatcher = immediate,
        checks: Optional[list[EnvironmentCheck]] = None,
    ):
        self.notify = notify
        self.shell = shell if shell is not None else SystemShell()
        self.paths = paths if paths is not None else Paths.detect()
        self.dispatch = dispatch
        self.checks = checks if checks is not None else default_checks(self.shell, self.paths)

    def check_environment(
        self,
        on_success: Callable[[HomebrewPackage], None],
        on_failure: Callable[[], None],
    ) -> StartupResult:
        """Check that the monitor can run on this machine.

        Args:
            on_success: Called once with the resolved `php` package if
                no breaking check triggered.
            on_failure: Dispatched once per breaking check that triggered;
                the caller may retry from here.

        Returns:
            StartupResult for this pass.

        Raises:
            BrewInfoError: if the alias lookup cannot be decoded. The
                success callback does not fire.
        """
        result = StartupResult()

        for check in self.checks:
            self._perform(check, result, on_failure)

        if result.failed:
            logger.warning(
                "Startup blocked by %d breaking check(s): %s",
                len(result.breaking), ", ".join(c.key for c in result.breaking),
            )
            return result

        result.package = determine_alias_version(self.shell, self.paths)
        on_success(result.package)
        return result

    def _perform(
        self,
        check: EnvironmentCheck,
        result: StartupResult,
        on_failure: Callable[[], None],
    ) -> None:
        if not check.triggered():
            logger.debug("Check passed: %s", check.key)
            return

        result.triggered.append(check)
        if check.breaking:
            result.failed = True
            logger.warning("Breaking check failed: %s", check.key)
        else:
            logger.info("Advisory check failed: %s", check.key)

        title, description = check.title, check.description

        def present() -> None:
            self.notify(title, description)
            # Only breaking issues offer a retry
            if check.breaking:
                on_failure()

        self.dispatch(present)
