from __future__ import annotations

import os
from typing import Any, Iterator

import pytest
from azure.core.credentials import AccessToken

import azhelpers.authentication.client_secret as client_secret
from azhelpers.authentication.builder import Builder
from azhelpers.authentication.context import Context


@pytest.fixture(autouse=True)
def clear_arm_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove ARM_* vars to prevent cross-test leakage.

    Yields:
        Iterator[None]: Context manager semantics for pytest.
    """
    to_clear = [k for k in os.environ.keys() if k.upper().startswith("ARM_")]
    for k in to_clear:
        monkeypatch.delenv(k, raising=False)
    yield


class _RecordingCredential:
    """Stand-in for ClientSecretCredential that captures init kwargs."""

    instances: list["_RecordingCredential"] = []

    def __init__(self, **kwargs: Any) -> None:
        self.kwargs = dict(kwargs)
        self.requested_scopes: list[tuple[str, ...]] = []
        type(self).instances.append(self)

    def get_token(self, *scopes: str, **kwargs: Any) -> AccessToken:
        self.requested_scopes.append(scopes)
        return AccessToken(f"token-{self.kwargs['tenant_id']}", 4102444800)


@pytest.fixture()
def recorded_credentials(monkeypatch: pytest.MonkeyPatch) -> type[_RecordingCredential]:
    """Replace ClientSecretCredential in the auth methods with a recorder.

    Returns:
        type: The recorder class; ``instances`` lists every credential built.
    """

    class RecordingCredential(_RecordingCredential):
        instances: list[_RecordingCredential] = []

    monkeypatch.setattr(client_secret, "ClientSecretCredential", RecordingCredential)
    return RecordingCredential


@pytest.fixture()
def builder() -> Builder:
    """A builder with every client secret setting populated."""
    return Builder(
        context=Context.background(),
        client_id="client-id",
        client_secret="s3cret",
        environment="public",
        subscription_id="subscription-id",
        tenant_id="tenant-id",
    )


@pytest.fixture()
def multi_tenant_builder() -> Builder:
    return Builder(
        context=Context.background(),
        client_id="client-id",
        client_secret="s3cret",
        environment="public",
        subscription_id="subscription-id",
        tenant_id="tenant-id",
        supports_auxiliary_tenants=True,
        auxiliary_tenant_ids=["aux-1", "aux-2"],
    )
