"""Service principal authentication for Azure management APIs.

Public API:
- Builder (settings) and Builder.build() → Config
- select_auth_method(), AUTH_METHODS
- ClientSecretAuth, ClientSecretMultiTenantAuth (auth methods)
- Authorizer, BearerAuthorizer, MultiTenantBearerAuthorizer, AuthorizerPolicy
- Context (explicit deadline for token acquisition)
- environment_from_string(), scope_from_endpoint(), build_oauth_config()
"""

from .authorizers import (
    Authorizer,
    AuthorizerPolicy,
    BearerAuthorizer,
    MultiTenantBearerAuthorizer,
)
from .base import AuthMethod
from .builder import AUTH_METHODS, Builder, select_auth_method
from .client_secret import ClientSecretAuth, ClientSecretMultiTenantAuth
from .config import Config
from .context import Context
from .environments import CloudEnvironment, environment_from_string
from .errors import (
    AuthenticationError,
    ConfigurationError,
    IntegrationError,
    NoApplicableAuthMethodError,
)
from .oauth import OAuthConfig, build_oauth_config
from .scopes import scope_from_endpoint
from .validation import ValidationResult

__all__ = [
    "AUTH_METHODS",
    "AuthMethod",
    "AuthenticationError",
    "Authorizer",
    "AuthorizerPolicy",
    "BearerAuthorizer",
    "Builder",
    "ClientSecretAuth",
    "ClientSecretMultiTenantAuth",
    "CloudEnvironment",
    "Config",
    "ConfigurationError",
    "Context",
    "IntegrationError",
    "MultiTenantBearerAuthorizer",
    "NoApplicableAuthMethodError",
    "OAuthConfig",
    "ValidationResult",
    "build_oauth_config",
    "environment_from_string",
    "scope_from_endpoint",
    "select_auth_method",
]
