from typing import Final

DEFAULT_SCOPE_SUFFIX: Final[str] = "/.default"


def scope_from_endpoint(endpoint: str) -> str:
    """Return the ``.default`` scope for a resource endpoint.

    Args:
        endpoint: Resource endpoint (e.g., "https://management.azure.com/").

    Returns:
        The endpoint without trailing slashes, suffixed with "/.default".

    Raises:
        ValueError: If ``endpoint`` is empty.
    """
    resource = endpoint.rstrip("/")
    if not resource:
        raise ValueError("endpoint must not be empty")
    return f"{resource}{DEFAULT_SCOPE_SUFFIX}"
