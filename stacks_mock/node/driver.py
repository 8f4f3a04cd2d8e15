"""Client side of the mock stacks node protocol.

A live test mines by announcing blocks to the indexer's stacks ingestion
endpoint, and advances the burn chain through the mock bitcoin RPC
endpoint. Each call makes a single attempt; retries and deadlines belong
to the caller.
"""

from collections.abc import Iterable

import httpx

from stacks_mock.chain.synthesizer import synthesize_block, synthesize_burn_block
from stacks_mock.helpers.config import get_mock_node_host
from stacks_mock.helpers.constants import (
    BURN_HEIGHT_OFFSET,
    INCREMENT_CHAIN_TIP_PATH,
    JSON_HEADERS,
    NEW_BLOCK_PATH,
    NEW_BURN_BLOCK_PATH,
)
from stacks_mock.helpers.errors import ProtocolError
from stacks_mock.helpers.http import client_session, post_text
from stacks_mock.helpers.logging import get_logger


logger = get_logger(__name__)


def endpoint_url(port: int, path: str, host: str | None = None) -> str:
    """URL of a mock node endpoint."""
    return f"http://{host or get_mock_node_host()}:{port}{path}"


async def announce_stacks_block(
    port: int,
    height: int,
    burn_height: int,
    *,
    host: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> None:
    """POST a synthetic stacks block to `/new_block`.

    The response body is read and discarded; its status is not checked.

    Args:
        port: Stacks ingestion port
        height: Stacks block height
        burn_height: Burn block height of the block
        host: Mock node host (default: MOCK_NODE_HOST setting)
        client: Optional client to reuse; a fresh one is used otherwise

    Raises:
        NetworkError: If the request fails or the response cannot be read
    """
    body = synthesize_block(height, burn_height).model_dump_json()
    url = endpoint_url(port, NEW_BLOCK_PATH, host)

    async with client_session(client) as session:
        await post_text(session, url, content=body, headers=JSON_HEADERS)

    logger.debug("Announced stacks block %d (burn height %d)", height, burn_height)


async def announce_burn_block(
    stacks_port: int,
    bitcoin_port: int,
    burn_height: int,
    *,
    host: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> None:
    """Advance the mock bitcoin chain tip, then POST the burn block.

    The tip is incremented first and must be acknowledged as `burn_height`
    before `/new_burn_block` is sent; otherwise the two mock endpoints'
    height counters drift apart.

    Args:
        stacks_port: Stacks ingestion port
        bitcoin_port: Mock bitcoin RPC port
        burn_height: Burn block height expected after the increment
        host: Mock node host (default: MOCK_NODE_HOST setting)
        client: Optional client to reuse; a fresh one is used otherwise

    Raises:
        NetworkError: If either request fails
        ProtocolError: If the acknowledged tip is not `burn_height`; the
            burn block is not announced in that case
    """
    body = synthesize_burn_block(burn_height).model_dump_json()
    expected = str(burn_height)

    async with client_session(client) as session:
        acknowledged = await post_text(
            session, endpoint_url(bitcoin_port, INCREMENT_CHAIN_TIP_PATH, host)
        )
        if acknowledged != expected:
            logger.error(
                "Chain tip acknowledged as %r, expected %r", acknowledged, expected
            )
            raise ProtocolError(expected, acknowledged)

        await post_text(
            session,
            endpoint_url(stacks_port, NEW_BURN_BLOCK_PATH, host),
            content=body,
            headers=JSON_HEADERS,
        )

    logger.debug("Announced burn block %d", burn_height)


async def mine_chain(
    stacks_port: int,
    bitcoin_port: int,
    heights: Iterable[int],
    *,
    burn_height_offset: int = BURN_HEIGHT_OFFSET,
    host: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> None:
    """Mine one burn block and one stacks block per height, in order.

    For each height the burn block at `height + burn_height_offset` is
    announced first, then the stacks block anchored to it. Stops at the
    first failure.

    Example:
        ```python
        await mine_chain(20443, 18443, range(1, 11))
        ```
    """
    async with client_session(client) as session:
        for height in heights:
            burn_height = height + burn_height_offset
            await announce_burn_block(
                stacks_port, bitcoin_port, burn_height, host=host, client=session
            )
            await announce_stacks_block(
                stacks_port, height, burn_height, host=host, client=session
            )
            logger.info("Mined stacks block %d at burn height %d", height, burn_height)


__all__ = [
    "announce_burn_block",
    "announce_stacks_block",
    "endpoint_url",
    "mine_chain",
]
