from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Context:
    """Deadline carried into token acquisition.

    A context is always passed explicitly. Use :meth:`background` when waiting
    without a deadline is what you want.
    """

    timeout: float | None = None

    @classmethod
    def background(cls) -> "Context":
        """Return a context that never times out."""
        return cls()

    @classmethod
    def with_timeout(cls, seconds: float) -> "Context":
        if seconds <= 0:
            raise ValueError(f"timeout must be positive, got {seconds!r}")
        return cls(timeout=float(seconds))

    @property
    def cancellable(self) -> bool:
        return self.timeout is not None

    def transport_kwargs(self) -> dict[str, float]:
        """Return azure-core transport keyword arguments for this deadline."""
        if self.timeout is None:
            return {}
        return {"connection_timeout": self.timeout, "read_timeout": self.timeout}
