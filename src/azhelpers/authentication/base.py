from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from azure.core.pipeline.transport import HttpTransport

    from .authorizers import Authorizer
    from .builder import Builder
    from .config import Config
    from .context import Context
    from .oauth import OAuthConfig
    from .validation import ValidationResult


class AuthMethod(ABC):
    """A credential strategy selected from :class:`Builder` settings.

    Implementations are immutable. ``is_applicable``, ``build`` and ``name``
    are class-level so a method can be chosen before it is constructed.
    """

    @classmethod
    @abstractmethod
    def is_applicable(cls, builder: "Builder") -> bool:
        """Return True if the builder settings select this method."""

    @classmethod
    @abstractmethod
    def build(cls, builder: "Builder") -> "AuthMethod":
        """Create the method from builder settings."""

    @classmethod
    @abstractmethod
    def name(cls) -> str:
        """Human readable label for the method."""

    @abstractmethod
    def get_authorization_token(
        self,
        sender: "HttpTransport | None",
        oauth_config: "OAuthConfig | None",
        endpoint: str,
    ) -> "Authorizer":
        """Return an authorizer for ``endpoint`` using the legacy OAuth config."""

    @abstractmethod
    def get_authorization_token_v2(
        self,
        sender: "HttpTransport | None",
        oauth_config: "OAuthConfig | None",
        endpoint: str,
        *,
        context: "Context | None" = None,
    ) -> "Authorizer":
        """Return an authorizer for ``endpoint`` resolved from the environment.

        ``context`` overrides the context the method was built with.
        """

    @abstractmethod
    def populate_config(self, config: "Config") -> None:
        """Record what this method implies about the authenticated principal."""

    @abstractmethod
    def validate(self) -> "ValidationResult":
        """Return every missing setting required by this method."""
