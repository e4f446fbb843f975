# riot_sso_client/transport.py
"""HTTP helpers shared by the sync and async clients.

Requests and response statuses are logged at DEBUG level on this module's
logger. No handlers are installed, so nothing is emitted unless the host
application configures logging. Credentials, codes and tokens are never logged.
"""

import logging
from typing import Any, Dict, Mapping, Optional

import httpx

from .exceptions import ProviderError, ResponseFormatError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
MAX_REDIRECTS = 5


def default_client_options() -> Dict[str, Any]:
    """Options for clients created when the caller does not inject one."""
    return {
        "verify": True,
        "follow_redirects": True,
        "max_redirects": MAX_REDIRECTS,
        "timeout": DEFAULT_TIMEOUT,
    }


def _error_message(response: httpx.Response) -> str:
    try:
        error_data = response.json()
    except ValueError:
        error_data = None

    if isinstance(error_data, dict):
        for key in ("error_description", "error"):
            if error_data.get(key) is not None:
                return str(error_data[key])

    return f"HTTP {response.status_code} error"


def parse_response(response: httpx.Response) -> Dict[str, Any]:
    """
    Map an HTTP response to its JSON object or to a RiotGamesError.

    Args:
        response: Response returned by httpx

    Returns:
        Decoded JSON object

    Raises:
        ProviderError: If the status code is 400 or above
        ResponseFormatError: If the body is not a JSON object
    """
    logger.debug(f"Riot Games API responded with HTTP {response.status_code}")

    if response.status_code >= 400:
        raise ProviderError(_error_message(response), response.status_code)

    try:
        decoded = response.json()
    except ValueError as e:
        raise ResponseFormatError(
            f"Invalid JSON response from Riot Games API: {e}"
        ) from e

    if not isinstance(decoded, dict):
        raise ResponseFormatError(
            "Invalid JSON response from Riot Games API: "
            f"expected an object, got {type(decoded).__name__}"
        )

    return decoded


def request_json(
    client: httpx.Client,
    method: str,
    url: str,
    headers: Mapping[str, str],
    data: Optional[Mapping[str, str]] = None,
) -> Dict[str, Any]:
    """
    Perform a request and return its decoded JSON object.

    Args:
        client: HTTP client to send the request with
        method: HTTP method (GET, POST)
        url: Full URL
        headers: Request headers
        data: Form fields, sent url-encoded

    Returns:
        Decoded JSON object

    Raises:
        TransportError: If no HTTP response was received
        ProviderError: If the status code is 400 or above
        ResponseFormatError: If the body is not a JSON object
    """
    logger.debug(f"{method} {url}")
    try:
        response = client.request(
            method, url, headers=dict(headers), data=data, follow_redirects=True
        )
    except httpx.RequestError as e:
        raise TransportError(f"HTTP transport error: {e}") from e

    return parse_response(response)


async def arequest_json(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    headers: Mapping[str, str],
    data: Optional[Mapping[str, str]] = None,
) -> Dict[str, Any]:
    """Async counterpart of request_json."""
    logger.debug(f"{method} {url}")
    try:
        response = await client.request(
            method, url, headers=dict(headers), data=data, follow_redirects=True
        )
    except httpx.RequestError as e:
        raise TransportError(f"HTTP transport error: {e}") from e

    return parse_response(response)


__all__ = [
    "DEFAULT_TIMEOUT",
    "MAX_REDIRECTS",
    "default_client_options",
    "parse_response",
    "request_json",
    "arequest_json",
]
