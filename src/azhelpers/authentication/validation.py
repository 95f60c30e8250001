from __future__ import annotations

from dataclasses import dataclass

from .errors import ConfigurationError


@dataclass(frozen=True)
class ValidationResult:
    """Every violation found while validating an authentication method."""

    violations: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.violations

    @property
    def error(self) -> ConfigurationError | None:
        """Return one error combining all violations, or ``None``."""
        if self.is_valid:
            return None
        return ConfigurationError.from_violations(self.violations)

    def raise_for_errors(self) -> None:
        error = self.error
        if error is not None:
            raise error
