from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from .errors import ConfigurationError
from .oauth import OAuthConfig, build_oauth_config

if TYPE_CHECKING:
    from azure.core.pipeline.transport import HttpTransport

    from .authorizers import Authorizer
    from .base import AuthMethod
    from .context import Context
    from .validation import ValidationResult


@dataclass
class Config:
    """Result of :meth:`Builder.build`.

    The chosen :class:`AuthMethod` fills in
    ``authenticated_as_a_service_principal`` and
    ``get_authenticated_object_id`` through ``populate_config``.
    """

    client_id: str | None = None
    subscription_id: str | None = None
    tenant_id: str | None = None
    tenant_only: bool = False
    environment: str = "public"
    auxiliary_tenant_ids: tuple[str, ...] = ()

    authenticated_as_a_service_principal: bool = False
    get_authenticated_object_id: Callable[["Context"], str] | None = None

    auth_method: "AuthMethod | None" = field(default=None, repr=False)

    def _method(self) -> "AuthMethod":
        if self.auth_method is None:
            raise ConfigurationError(
                "No authentication method has been configured; use Builder.build()."
            )
        return self.auth_method

    def build_oauth_config(self, active_directory_endpoint: str) -> OAuthConfig:
        return build_oauth_config(
            active_directory_endpoint, self.tenant_id, self.auxiliary_tenant_ids
        )

    def get_authorization_token(
        self,
        sender: "HttpTransport | None",
        oauth_config: OAuthConfig | None,
        endpoint: str,
    ) -> "Authorizer":
        return self._method().get_authorization_token(sender, oauth_config, endpoint)

    def get_authorization_token_v2(
        self,
        sender: "HttpTransport | None",
        oauth_config: OAuthConfig | None,
        endpoint: str,
        *,
        context: "Context | None" = None,
    ) -> "Authorizer":
        return self._method().get_authorization_token_v2(
            sender, oauth_config, endpoint, context=context
        )

    def validate(self) -> "ValidationResult":
        return self._method().validate()
