"""OAuth configuration consumed by the legacy token path."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .errors import ConfigurationError


@dataclass(frozen=True)
class TenantOAuthConfig:
    """Authority and tenant used to request a token for one tenant."""

    authority_host: str
    tenant_id: str

    @property
    def authority_endpoint(self) -> str:
        return f"{self.authority_host.rstrip('/')}/{self.tenant_id}/"

    @property
    def token_endpoint(self) -> str:
        return f"{self.authority_endpoint}oauth2/v2.0/token"


@dataclass(frozen=True)
class MultiTenantOAuthConfig:
    primary: TenantOAuthConfig
    auxiliary: tuple[TenantOAuthConfig, ...] = ()


@dataclass(frozen=True)
class OAuthConfig:
    """Holds the sub-configuration each authentication method expects.

    Single tenant methods read ``oauth``; multi tenant methods read
    ``multi_tenant_oauth``. Either may be ``None`` when it was not built.
    """

    oauth: TenantOAuthConfig | None = None
    multi_tenant_oauth: MultiTenantOAuthConfig | None = field(default=None)


def build_oauth_config(
    active_directory_endpoint: str,
    tenant_id: str | None,
    auxiliary_tenant_ids: Sequence[str] = (),
) -> OAuthConfig:
    """Build the OAuth configuration for a tenant and its auxiliary tenants.

    Args:
        active_directory_endpoint: Authority endpoint, for example
            "https://login.microsoftonline.com/".
        tenant_id: The primary tenant.
        auxiliary_tenant_ids: Additional tenants. When empty no multi tenant
            configuration is built.

    Returns:
        The populated :class:`OAuthConfig`.

    Raises:
        ConfigurationError: If the endpoint or tenant is empty.
    """
    if not active_directory_endpoint:
        raise ConfigurationError("an Active Directory endpoint is required")
    if not tenant_id:
        raise ConfigurationError("a Tenant ID is required to build an OAuth config")

    primary = TenantOAuthConfig(active_directory_endpoint, tenant_id)
    multi_tenant = None
    if auxiliary_tenant_ids:
        multi_tenant = MultiTenantOAuthConfig(
            primary=primary,
            auxiliary=tuple(
                TenantOAuthConfig(active_directory_endpoint, t)
                for t in auxiliary_tenant_ids
            ),
        )
    return OAuthConfig(oauth=primary, multi_tenant_oauth=multi_tenant)
