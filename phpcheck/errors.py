"""Errors raised by phpcheck."""


class PhpCheckError(Exception):
    """Base error for this package."""


class ConfigError(PhpCheckError):
    """Raised when the Homebrew paths cannot be configured."""


class BrewInfoError(PhpCheckError):
    """Raised when `brew info php --json` cannot be decoded into a package."""
