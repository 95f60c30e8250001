from __future__ import annotations

import pytest
from pydantic import ValidationError

from azhelpers.authentication.builder import AUTH_METHODS, Builder, select_auth_method
from azhelpers.authentication.client_secret import (
    ClientSecretAuth,
    ClientSecretMultiTenantAuth,
)
from azhelpers.authentication.context import Context
from azhelpers.authentication.errors import (
    ConfigurationError,
    NoApplicableAuthMethodError,
)


def test_env__reads_arm_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ARM_CLIENT_ID", "cid")
    monkeypatch.setenv("ARM_CLIENT_SECRET", "sekrit")
    monkeypatch.setenv("ARM_TENANT_ID", "tid")
    monkeypatch.setenv("ARM_SUBSCRIPTION_ID", "sid")
    monkeypatch.setenv("ARM_ENVIRONMENT", "china")
    monkeypatch.setenv("ARM_TENANT_ONLY", "true")
    monkeypatch.setenv("ARM_SUPPORTS_AUXILIARY_TENANTS", "true")

    b = Builder()
    assert b.client_id == "cid"
    assert b.client_secret is not None
    assert b.client_secret.get_secret_value() == "sekrit"
    assert b.tenant_id == "tid"
    assert b.subscription_id == "sid"
    assert b.environment == "china"
    assert b.tenant_only is True
    assert b.supports_auxiliary_tenants is True
    assert b.supports_client_secret_auth is True


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("a, b,c", ("a", "b", "c")),
        ('["a", "b"]', ("a", "b")),
        ("", ()),
        (" , ", ()),
    ],
)
def test_env__auxiliary_tenant_ids(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: tuple[str, ...]
) -> None:
    monkeypatch.setenv("ARM_AUXILIARY_TENANT_IDS", raw)
    assert Builder().auxiliary_tenant_ids == expected


def test_auxiliary_tenant_ids__limit() -> None:
    with pytest.raises(ValidationError, match="at most 3 auxiliary tenants"):
        Builder(auxiliary_tenant_ids=["a", "b", "c", "d"])


def test_secret_is_not_in_repr() -> None:
    b = Builder(client_secret="sekrit")
    assert "sekrit" not in repr(b)


def test_auth_methods__most_specific_first() -> None:
    assert AUTH_METHODS == (ClientSecretMultiTenantAuth, ClientSecretAuth)


def test_select__multi_tenant_wins_when_applicable(multi_tenant_builder: Builder) -> None:
    assert select_auth_method(multi_tenant_builder) is ClientSecretMultiTenantAuth


def test_select__single_tenant_without_auxiliary_support(builder: Builder) -> None:
    assert select_auth_method(builder) is ClientSecretAuth


def test_select__nothing_applicable() -> None:
    with pytest.raises(NoApplicableAuthMethodError, match="No supported"):
        select_auth_method(Builder(client_id="cid"))


def test_build__populates_config(builder: Builder) -> None:
    config = builder.build()

    assert isinstance(config.auth_method, ClientSecretAuth)
    assert config.client_id == "client-id"
    assert config.tenant_id == "tenant-id"
    assert config.subscription_id == "subscription-id"
    assert config.environment == "public"
    assert config.authenticated_as_a_service_principal is True
    assert config.get_authenticated_object_id is not None
    assert config.validate().is_valid


def test_build__multi_tenant(multi_tenant_builder: Builder) -> None:
    config = multi_tenant_builder.build()

    assert isinstance(config.auth_method, ClientSecretMultiTenantAuth)
    assert config.auxiliary_tenant_ids == ("aux-1", "aux-2")
    oauth = config.build_oauth_config("https://login.microsoftonline.com/")
    assert oauth.multi_tenant_oauth is not None
    assert [a.tenant_id for a in oauth.multi_tenant_oauth.auxiliary] == [
        "aux-1",
        "aux-2",
    ]


def test_build__aggregates_validation_errors() -> None:
    b = Builder(context=Context.background(), client_secret="s")
    with pytest.raises(ConfigurationError) as exc:
        b.build()
    assert len(exc.value.violations) == 3
    assert "Subscription ID" in str(exc.value)
    assert "Client ID" in str(exc.value)
    assert "Tenant ID" in str(exc.value)


def test_build__uses_legacy_token_path(builder: Builder, recorded_credentials) -> None:
    config = builder.build()
    oauth = config.build_oauth_config("https://login.microsoftonline.com/")

    authorizer = config.get_authorization_token(None, oauth, "https://management.azure.com")

    assert authorizer.authorization_headers() == {
        "Authorization": "Bearer token-tenant-id"
    }


def test_env__ignores_unprefixed_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("CONTEXT", "dev")
    monkeypatch.setenv("CLIENT_ID", "not-this-one")

    b = Builder()
    assert b.environment == "public"
    assert b.client_id is None
    assert b.context is None


def test_context__passed_to_constructor(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ARM_CONTEXT", "dev")
    context = Context.with_timeout(4)

    b = Builder(context=context, client_id="cid")
    assert b.context is context
    assert Builder().context is None
    assert "context" not in b.model_dump()
