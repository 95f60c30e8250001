"""Known Azure cloud environments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from azure.identity import AzureAuthorityHosts


class UnknownEnvironmentError(ValueError):
    """Raised when an environment name does not match a known cloud."""


@dataclass(frozen=True)
class CloudEnvironment:
    """Endpoints for one Azure cloud."""

    name: str
    authority_host: str
    resource_manager_endpoint: str
    microsoft_graph_endpoint: str

    @property
    def active_directory_endpoint(self) -> str:
        return f"https://{self.authority_host}/"


PUBLIC: Final = CloudEnvironment(
    name="public",
    authority_host=AzureAuthorityHosts.AZURE_PUBLIC_CLOUD,
    resource_manager_endpoint="https://management.azure.com/",
    microsoft_graph_endpoint="https://graph.microsoft.com/",
)
US_GOVERNMENT: Final = CloudEnvironment(
    name="usgovernment",
    authority_host=AzureAuthorityHosts.AZURE_GOVERNMENT,
    resource_manager_endpoint="https://management.usgovcloudapi.net/",
    microsoft_graph_endpoint="https://graph.microsoft.us/",
)
DOD: Final = CloudEnvironment(
    name="dod",
    authority_host=AzureAuthorityHosts.AZURE_GOVERNMENT,
    resource_manager_endpoint="https://management.usgovcloudapi.net/",
    microsoft_graph_endpoint="https://dod-graph.microsoft.us/",
)
CHINA: Final = CloudEnvironment(
    name="china",
    authority_host=AzureAuthorityHosts.AZURE_CHINA,
    resource_manager_endpoint="https://management.chinacloudapi.cn/",
    microsoft_graph_endpoint="https://microsoftgraph.chinacloudapi.cn/",
)
# AzureAuthorityHosts no longer ships the Germany host.
GERMANY: Final = CloudEnvironment(
    name="germany",
    authority_host="login.microsoftonline.de",
    resource_manager_endpoint="https://management.microsoftazure.de/",
    microsoft_graph_endpoint="https://graph.microsoft.de/",
)
CANARY: Final = CloudEnvironment(
    name="canary",
    authority_host=AzureAuthorityHosts.AZURE_PUBLIC_CLOUD,
    resource_manager_endpoint="https://management.azure.com/",
    microsoft_graph_endpoint="https://canary.graph.microsoft.com/",
)

_ENVIRONMENTS: Final[dict[str, CloudEnvironment]] = {
    "": PUBLIC,
    "public": PUBLIC,
    "global": PUBLIC,
    "usgovernment": US_GOVERNMENT,
    "usgovernmentl4": US_GOVERNMENT,
    "dod": DOD,
    "usgovernmentl5": DOD,
    "china": CHINA,
    "german": GERMANY,
    "germany": GERMANY,
    "canary": CANARY,
}


def environment_from_string(name: str | None) -> CloudEnvironment:
    """Resolve an environment name such as ``"public"`` or ``"china"``.

    Args:
        name: Environment name, matched case-insensitively. ``None`` and the
            empty string resolve to the public cloud.

    Returns:
        The matching :class:`CloudEnvironment`.

    Raises:
        UnknownEnvironmentError: If the name is not recognised.
    """
    key = (name or "").strip().lower()
    try:
        return _ENVIRONMENTS[key]
    except KeyError:
        raise UnknownEnvironmentError(
            f"unknown environment specified: {name!r}"
        ) from None
