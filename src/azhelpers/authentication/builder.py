from __future__ import annotations

import json
import logging
from typing import Annotated, Any, Final

from pydantic import PrivateAttr, SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from .base import AuthMethod
from .client_secret import ClientSecretAuth, ClientSecretMultiTenantAuth
from .config import Config
from .context import Context
from .errors import NoApplicableAuthMethodError

logger = logging.getLogger(__name__)

# Azure Resource Manager accepts at most three auxiliary tenants per request.
MAX_AUXILIARY_TENANTS: Final[int] = 3

# Checked in order; the first applicable method wins.
AUTH_METHODS: Final[tuple[type[AuthMethod], ...]] = (
    ClientSecretMultiTenantAuth,
    ClientSecretAuth,
)


class Builder(BaseSettings):
    """Settings used to select and build an authentication method.

    This model reads environment variables automatically using the ``ARM_``
    prefix (e.g., ``ARM_CLIENT_ID``). Only prefixed names are read, so
    generic variables such as ``ENVIRONMENT`` are ignored. Fields may also be
    passed by name.

    The :class:`Context` is not a setting; pass it as ``context=``.

    Environment variables:
        - ARM_CLIENT_ID
        - ARM_CLIENT_SECRET
        - ARM_ENVIRONMENT
        - ARM_SUBSCRIPTION_ID
        - ARM_TENANT_ID
        - ARM_TENANT_ONLY
        - ARM_AUXILIARY_TENANT_IDS (comma separated or a JSON list)
        - ARM_SUPPORTS_CLIENT_SECRET_AUTH
        - ARM_SUPPORTS_AUXILIARY_TENANTS
    """

    model_config = SettingsConfigDict(
        env_prefix="ARM_",
        case_sensitive=False,
        extra="ignore",
    )

    client_id: str | None = None
    client_secret: SecretStr | None = None
    environment: str = "public"
    subscription_id: str | None = None
    tenant_id: str | None = None
    tenant_only: bool = False
    auxiliary_tenant_ids: Annotated[tuple[str, ...], NoDecode] = ()
    supports_client_secret_auth: bool = True
    supports_auxiliary_tenants: bool = False

    _context: Context | None = PrivateAttr(default=None)

    def __init__(self, context: Context | None = None, **values: Any) -> None:
        super().__init__(**values)
        self._context = context

    @property
    def context(self) -> Context | None:
        return self._context

    @field_validator("auxiliary_tenant_ids", mode="before")
    @classmethod
    def _split_tenant_ids(cls, v: Any) -> Any:
        """Accept a comma separated string or a JSON list."""
        if not isinstance(v, str):
            return v
        v = v.strip()
        if v.startswith("["):
            return json.loads(v)
        return tuple(t.strip() for t in v.split(",") if t.strip())

    @field_validator("auxiliary_tenant_ids")
    @classmethod
    def _limit_tenant_ids(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if len(v) > MAX_AUXILIARY_TENANTS:
            raise ValueError(
                f"at most {MAX_AUXILIARY_TENANTS} auxiliary tenants are supported, "
                f"got {len(v)}"
            )
        return v

    def build(self) -> Config:
        """Select, build and validate an authentication method.

        Returns:
            A :class:`Config` populated by the selected method.

        Raises:
            NoApplicableAuthMethodError: If no method matches these settings.
            ConfigurationError: If the selected method is missing settings.
                All missing settings are reported together.
        """
        method_type = select_auth_method(self)
        method = method_type.build(self)
        method.validate().raise_for_errors()

        config = Config(
            client_id=self.client_id,
            subscription_id=self.subscription_id,
            tenant_id=self.tenant_id,
            tenant_only=self.tenant_only,
            environment=self.environment,
            auxiliary_tenant_ids=self.auxiliary_tenant_ids,
            auth_method=method,
        )
        method.populate_config(config)
        logger.debug("Authenticating using %s", method_type.name())
        return config


def select_auth_method(builder: Builder) -> type[AuthMethod]:
    """Return the first method in :data:`AUTH_METHODS` applicable to ``builder``.

    Raises:
        NoApplicableAuthMethodError: If none applies.
    """
    for method in AUTH_METHODS:
        if method.is_applicable(builder):
            return method
    raise NoApplicableAuthMethodError("No supported authentication methods were found!")
