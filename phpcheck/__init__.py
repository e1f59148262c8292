"""
phpcheck — Startup environment validation for a Homebrew PHP + Valet setup.

Verifies that PHP, Valet and the required sudoers entries are in place
before the monitor is allowed to launch.
"""

__version__ = "0.1.0"
