"""Exceptions raised while selecting and using an authentication method."""

from __future__ import annotations

from typing import Iterable


class AuthenticationError(Exception):
    """Base class for authentication errors."""


class ConfigurationError(AuthenticationError, ValueError):
    """Raised when user supplied settings are missing or inconsistent.

    Attributes:
        violations: Every individual problem that was found. Validation collects
            all of them before raising, so this may hold more than one entry.
    """

    def __init__(self, message: str, violations: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.violations: tuple[str, ...] = tuple(violations)

    @classmethod
    def from_violations(cls, violations: Iterable[str]) -> "ConfigurationError":
        violations = tuple(violations)
        if len(violations) == 1:
            return cls(violations[0], violations)
        lines = "\n".join(f"  * {v}" for v in violations)
        return cls(f"{len(violations)} errors occurred:\n{lines}", violations)


class NoApplicableAuthMethodError(ConfigurationError):
    """Raised when none of the supported methods matches the settings."""


class IntegrationError(AuthenticationError):
    """Raised when the identity library does not behave the way we expect.

    These are not user errors: an OAuth sub-configuration was not populated,
    an environment name could not be resolved, or an object handed back to us
    lacks a capability we depend on.
    """
