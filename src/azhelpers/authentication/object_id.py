from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

import requests

from .environments import UnknownEnvironmentError, environment_from_string
from .errors import IntegrationError

if TYPE_CHECKING:
    from .config import Config
    from .context import Context

logger = logging.getLogger(__name__)

GRAPH_API_VERSION = "v1.0"


def build_service_principal_object_id_func(
    config: "Config",
) -> Callable[["Context"], str]:
    """Return a callable that looks up the object ID of the service principal.

    The lookup queries Microsoft Graph for the service principal whose
    ``appId`` matches ``config.client_id``. It is deferred until called
    because it needs network access and a Graph token.

    Args:
        config: The configuration the authenticated method populated.

    Returns:
        A function taking a :class:`Context` and returning the object ID.
    """

    def _get_object_id(context: "Context") -> str:
        try:
            environment = environment_from_string(config.environment)
        except UnknownEnvironmentError as err:
            raise IntegrationError(f"environment config error: {err}") from err

        authorizer = config.get_authorization_token_v2(
            None, None, environment.microsoft_graph_endpoint, context=context
        )
        url = (
            f"{environment.microsoft_graph_endpoint.rstrip('/')}/"
            f"{GRAPH_API_VERSION}/servicePrincipals"
        )
        response = requests.get(
            url,
            params={"$filter": f"appId eq '{config.client_id}'"},
            headers=authorizer.authorization_headers(),
            timeout=context.timeout,
        )
        response.raise_for_status()

        results = response.json().get("value", [])
        if len(results) != 1:
            raise IntegrationError(
                f"unexpected number of results when listing service principals "
                f"with client ID {config.client_id!r}: expected 1, got {len(results)}"
            )

        object_id = results[0].get("id")
        if not object_id:
            raise IntegrationError(
                f"service principal with client ID {config.client_id!r} "
                f"was returned without an object ID"
            )
        logger.debug("Resolved service principal object ID %s", object_id)
        return object_id

    return _get_object_id
