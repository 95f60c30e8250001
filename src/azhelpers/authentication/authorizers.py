"""Authorizers attach bearer tokens to outbound requests.

Token caching and refresh are left to the wrapped
:class:`~azure.core.credentials.TokenCredential`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, Protocol, Sequence, runtime_checkable

from azure.core.pipeline.policies import SansIOHTTPPolicy

if TYPE_CHECKING:
    from azure.core.credentials import TokenCredential
    from azure.core.pipeline import PipelineRequest

AUXILIARY_AUTHORIZATION_HEADER: Final[str] = "x-ms-authorization-auxiliary"


@runtime_checkable
class Authorizer(Protocol):
    """Produces credentials for the next outbound request."""

    def authorization_headers(self) -> dict[str, str]:
        """Return the headers that authorize a request."""
        raise NotImplementedError

    def authorize(self, request: Any) -> Any:
        """Add authorization headers to ``request`` and return it."""
        raise NotImplementedError


class BearerAuthorizer:
    """Authorizer backed by a single token credential."""

    def __init__(self, credential: "TokenCredential", *scopes: str) -> None:
        if not scopes:
            raise ValueError("at least one scope is required")
        self._credential = credential
        self._scopes = scopes

    @property
    def credential(self) -> "TokenCredential":
        return self._credential

    @property
    def scopes(self) -> tuple[str, ...]:
        return self._scopes

    def authorization_headers(self) -> dict[str, str]:
        token = self._credential.get_token(*self._scopes)
        return {"Authorization": f"Bearer {token.token}"}

    def authorize(self, request: Any) -> Any:
        request.headers.update(self.authorization_headers())
        return request


class MultiTenantBearerAuthorizer(BearerAuthorizer):
    """Authorizer for a primary tenant plus auxiliary tenants.

    Auxiliary tokens are sent in the ``x-ms-authorization-auxiliary`` header,
    in the order the auxiliary credentials were given.
    """

    def __init__(
        self,
        primary: "TokenCredential",
        auxiliaries: Sequence["TokenCredential"],
        *scopes: str,
    ) -> None:
        super().__init__(primary, *scopes)
        self._auxiliaries = tuple(auxiliaries)

    @property
    def auxiliary_credentials(self) -> tuple["TokenCredential", ...]:
        return self._auxiliaries

    def authorization_headers(self) -> dict[str, str]:
        headers = super().authorization_headers()
        if self._auxiliaries:
            tokens = [a.get_token(*self.scopes).token for a in self._auxiliaries]
            headers[AUXILIARY_AUTHORIZATION_HEADER] = ", ".join(
                f"Bearer {t}" for t in tokens
            )
        return headers


class AuthorizerPolicy(SansIOHTTPPolicy):
    """azure-core pipeline policy that authorizes every request."""

    def __init__(self, authorizer: Authorizer) -> None:
        super().__init__()
        self._authorizer = authorizer

    def on_request(self, request: "PipelineRequest") -> None:
        self._authorizer.authorize(request.http_request)
