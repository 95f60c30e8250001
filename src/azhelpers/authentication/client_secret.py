"""Service principal authentication using a client secret.

Two methods are provided: :class:`ClientSecretAuth` for a single tenant and
:class:`ClientSecretMultiTenantAuth` for a primary tenant plus auxiliary
tenants. Both delegate the client credentials exchange to
:class:`azure.identity.ClientSecretCredential`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from azure.identity import ClientSecretCredential
from pydantic import SecretStr

from .authorizers import Authorizer, BearerAuthorizer, MultiTenantBearerAuthorizer
from .base import AuthMethod
from .context import Context
from .environments import (
    CloudEnvironment,
    UnknownEnvironmentError,
    environment_from_string,
)
from .errors import ConfigurationError, IntegrationError
from .object_id import build_service_principal_object_id_func
from .scopes import scope_from_endpoint
from .validation import ValidationResult

if TYPE_CHECKING:
    from azure.core.credentials import TokenCredential
    from azure.core.pipeline.transport import HttpTransport

    from .builder import Builder
    from .config import Config
    from .oauth import OAuthConfig, TenantOAuthConfig


@dataclass(frozen=True)
class ClientCredentialsConfig:
    """Settings for a client credentials token source in a cloud environment."""

    environment: CloudEnvironment
    tenant_id: str | None
    client_id: str | None
    client_secret: SecretStr | None
    scopes: tuple[str, ...]
    additionally_allowed_tenants: tuple[str, ...] = ()

    def token_source(self, context: Context) -> Authorizer:
        credential = ClientSecretCredential(
            tenant_id=self.tenant_id,
            client_id=self.client_id,
            client_secret=_secret_value(self.client_secret),
            authority=self.environment.authority_host,
            additionally_allowed_tenants=list(self.additionally_allowed_tenants),
            **context.transport_kwargs(),
        )
        return BearerAuthorizer(credential, *self.scopes)


def _secret_value(secret: SecretStr | None) -> str:
    return secret.get_secret_value() if secret is not None else ""


def _tenant_credential(
    oauth: "TenantOAuthConfig",
    client_id: str | None,
    client_secret: str,
    sender: "HttpTransport | None",
) -> "TokenCredential":
    kwargs: dict[str, Any] = {}
    if sender is not None:
        kwargs["transport"] = sender
    return ClientSecretCredential(
        tenant_id=oauth.tenant_id,
        client_id=client_id,
        client_secret=client_secret,
        authority=oauth.authority_host,
        **kwargs,
    )


@dataclass(frozen=True)
class _ServicePrincipalClientSecret(AuthMethod):
    context: Context | None
    client_id: str | None
    client_secret: SecretStr | None
    environment: str | None
    subscription_id: str | None
    tenant_id: str | None
    tenant_only: bool

    def _additionally_allowed_tenants(self) -> tuple[str, ...]:
        return ()

    def _missing_fields(self) -> list[str]:
        missing = []
        if not self.tenant_only and not self.subscription_id:
            missing.append("Subscription ID")
        if not self.client_id:
            missing.append("Client ID")
        if not _secret_value(self.client_secret):
            missing.append("Client Secret")
        if not self.tenant_id:
            missing.append("Tenant ID")
        return missing

    def get_authorization_token_v2(
        self,
        sender: "HttpTransport | None",
        oauth_config: "OAuthConfig | None",
        endpoint: str,
        *,
        context: Context | None = None,
    ) -> Authorizer:
        # sender and oauth_config are unused; the environment drives this path.
        try:
            environment = environment_from_string(self.environment)
        except UnknownEnvironmentError as err:
            raise IntegrationError(f"environment config error: {err}") from err

        context = context if context is not None else self.context
        if context is None:
            raise ConfigurationError(
                "a Context is required to acquire a token; pass "
                "Context.background() to wait without a deadline."
            )

        conf = ClientCredentialsConfig(
            environment=environment,
            tenant_id=self.tenant_id,
            client_id=self.client_id,
            client_secret=self.client_secret,
            scopes=(scope_from_endpoint(endpoint),),
            additionally_allowed_tenants=self._additionally_allowed_tenants(),
        )

        authorizer = conf.token_source(context)
        if isinstance(authorizer, Authorizer):
            return authorizer

        raise IntegrationError("returned token source does not implement Authorizer")

    def populate_config(self, config: "Config") -> None:
        config.authenticated_as_a_service_principal = True
        config.get_authenticated_object_id = build_service_principal_object_id_func(
            config
        )


@dataclass(frozen=True)
class ClientSecretAuth(_ServicePrincipalClientSecret):
    """Single tenant service principal authentication with a client secret."""

    @classmethod
    def is_applicable(cls, builder: "Builder") -> bool:
        return builder.supports_client_secret_auth and bool(
            _secret_value(builder.client_secret)
        )

    @classmethod
    def build(cls, builder: "Builder") -> "ClientSecretAuth":
        return cls(
            context=builder.context,
            client_id=builder.client_id,
            client_secret=builder.client_secret,
            environment=builder.environment,
            subscription_id=builder.subscription_id,
            tenant_id=builder.tenant_id,
            tenant_only=builder.tenant_only,
        )

    @classmethod
    def name(cls) -> str:
        return "Service Principal / Client Secret"

    def get_authorization_token(
        self,
        sender: "HttpTransport | None",
        oauth_config: "OAuthConfig | None",
        endpoint: str,
    ) -> Authorizer:
        if oauth_config is None or oauth_config.oauth is None:
            raise IntegrationError(
                "getting Authorization Token for client secret auth: an OAuth token "
                "wasn't configured correctly; please file a bug with more details"
            )

        credential = _tenant_credential(
            oauth_config.oauth,
            self.client_id,
            _secret_value(self.client_secret),
            sender,
        )
        return BearerAuthorizer(credential, scope_from_endpoint(endpoint))

    def validate(self) -> ValidationResult:
        template = (
            "A {} must be configured when authenticating as a Service Principal "
            "using a Client Secret."
        )
        return ValidationResult(
            tuple(template.format(f) for f in self._missing_fields())
        )


@dataclass(frozen=True)
class ClientSecretMultiTenantAuth(_ServicePrincipalClientSecret):
    """Client secret authentication across a primary and auxiliary tenants."""

    auxiliary_tenant_ids: tuple[str, ...] = ()

    @classmethod
    def is_applicable(cls, builder: "Builder") -> bool:
        return (
            builder.supports_client_secret_auth
            and bool(_secret_value(builder.client_secret))
            and builder.supports_auxiliary_tenants
            and len(builder.auxiliary_tenant_ids) > 0
        )

    @classmethod
    def build(cls, builder: "Builder") -> "ClientSecretMultiTenantAuth":
        return cls(
            context=builder.context,
            client_id=builder.client_id,
            client_secret=builder.client_secret,
            environment=builder.environment,
            subscription_id=builder.subscription_id,
            tenant_id=builder.tenant_id,
            tenant_only=builder.tenant_only,
            auxiliary_tenant_ids=builder.auxiliary_tenant_ids,
        )

    @classmethod
    def name(cls) -> str:
        return "Multi Tenant Service Principal / Client Secret"

    def _additionally_allowed_tenants(self) -> tuple[str, ...]:
        return self.auxiliary_tenant_ids

    def get_authorization_token(
        self,
        sender: "HttpTransport | None",
        oauth_config: "OAuthConfig | None",
        endpoint: str,
    ) -> Authorizer:
        multi_tenant = oauth_config.multi_tenant_oauth if oauth_config else None
        if multi_tenant is None:
            raise IntegrationError(
                "getting Authorization Token for multi tenant client secret auth: a "
                "MultiTenantOAuth token wasn't configured correctly; please file a "
                "bug with more details"
            )

        secret = _secret_value(self.client_secret)
        primary = _tenant_credential(multi_tenant.primary, self.client_id, secret, sender)
        auxiliaries = [
            _tenant_credential(aux, self.client_id, secret, sender)
            for aux in multi_tenant.auxiliary
        ]
        return MultiTenantBearerAuthorizer(
            primary, auxiliaries, scope_from_endpoint(endpoint)
        )

    def validate(self) -> ValidationResult:
        template = (
            "{} must be configured when authenticating as a Service Principal "
            "using a Multi Tenant Client Secret."
        )
        missing = self._missing_fields()
        if not self.auxiliary_tenant_ids:
            missing.append("Auxiliary Tenant IDs")
        return ValidationResult(tuple(template.format(f) for f in missing))
