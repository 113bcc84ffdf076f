"""
Exception taxonomy for profilecore.

Only drivers and configuration raise; the pipeline converts every driver
failure into an empty or failed attempt.
"""

from __future__ import annotations


class ProfileCoreError(Exception):
    """Base class for all profilecore errors."""


class ConfigurationError(ProfileCoreError, ValueError):
    """Invalid strategy, interpreter or section configuration."""


class DriverError(ProfileCoreError):
    """Transient failure reported by a Page Driver."""


class DriverTimeoutError(DriverError):
    """A bounded wait inside the Page Driver expired."""

    def __init__(self, message: str, timeout_ms: float | None = None) -> None:
        super().__init__(message)
        self.timeout_ms = timeout_ms


class NavigationError(DriverError):
    """The driver could not load the requested document."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


__all__ = [
    "ProfileCoreError",
    "ConfigurationError",
    "DriverError",
    "DriverTimeoutError",
    "NavigationError",
]
