"""HTTP client utilities and helpers."""

from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager

from typing import Any

import httpx

from stacks_mock.helpers.constants import DEFAULT_TIMEOUT
from stacks_mock.helpers.errors import NetworkError
from stacks_mock.helpers.logging import get_logger


logger = get_logger(__name__)


def create_http_client(
    timeout: float = DEFAULT_TIMEOUT, **kwargs: Any
) -> httpx.AsyncClient:
    """Create a configured httpx AsyncClient.

    Args:
        timeout: Default timeout in seconds (default: DEFAULT_TIMEOUT)
        **kwargs: Additional httpx.AsyncClient kwargs

    Returns:
        Configured AsyncClient instance

    Example:
        ```python
        from stacks_mock.helpers.http import create_http_client

        async with create_http_client(timeout=5.0) as client:
            await announce_stacks_block(20443, 1, 101, client=client)
        ```
    """
    return httpx.AsyncClient(timeout=timeout, **kwargs)


@asynccontextmanager
async def client_session(
    client: httpx.AsyncClient | None = None,
) -> AsyncIterator[httpx.AsyncClient]:
    """Yield the given client, or a fresh one that is closed on exit.

    Args:
        client: Caller-owned client to reuse (left open)

    Yields:
        AsyncClient to issue requests with
    """
    if client is not None:
        yield client
        return

    async with create_http_client() as owned:
        yield owned


async def post_text(
    client: httpx.AsyncClient,
    url: str,
    *,
    content: str | bytes | None = None,
    headers: Mapping[str, str] | None = None,
) -> str:
    """POST to a URL and return the response body as text.

    The response status is not checked: the mock node's status semantics
    belong to the server, the caller only needs a completed round trip.

    Args:
        client: HTTP client instance
        url: URL to post to
        content: Optional raw request body
        headers: Optional request headers

    Returns:
        Response body text

    Raises:
        NetworkError: If the URL is invalid or the request fails
    """
    try:
        response = await client.post(url, content=content, headers=headers)
        text = response.text
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.warning("HTTP error posting to %s: %s", url, e)
        msg = f"POST {url} failed: {e}"
        raise NetworkError(msg) from e

    logger.debug("POST %s -> %s", url, response.status_code)
    return text


__all__ = [
    "client_session",
    "create_http_client",
    "post_text",
]
