"""Synthetic stacks block and burn block generation.

Every function here is pure: the same heights always produce the same
block, so any test can rebuild the block it expects the indexer to have
seen.
"""

from stacks_mock.chain.hashes import height_to_hash, transaction_id
from stacks_mock.chain.models import (
    Block,
    BurnBlock,
    EventData,
    FTBurnEventData,
    FTMintEventData,
    FTTransferEventData,
    NewEvent,
    NFTBurnEventData,
    NFTMintEventData,
    NFTTransferEventData,
    SmartContractEventData,
    STXBurnEventData,
    STXLockEventData,
    STXMintEventData,
    STXTransferEventData,
    Transaction,
)
from stacks_mock.helpers.constants import (
    NULL_MICROBLOCK_HASH,
    PLACEHOLDER_RAW_RESULT,
    PLACEHOLDER_RAW_TX,
    TRANSACTION_STATUS,
    TRANSACTIONS_PER_BLOCK,
)

# One payload of every kind, in the order they are attached to a block
EVENT_PAYLOADS: tuple[EventData, ...] = (
    STXTransferEventData(),
    STXMintEventData(),
    STXBurnEventData(),
    STXLockEventData(),
    NFTTransferEventData(),
    NFTMintEventData(),
    NFTBurnEventData(),
    FTTransferEventData(),
    FTMintEventData(),
    FTBurnEventData(),
    SmartContractEventData(),
)


def parent_height(height: int) -> int:
    """Height of the parent block; genesis is its own parent."""
    if height < 0:
        msg = f"Height must be non-negative, got {height}"
        raise ValueError(msg)
    return height - 1 if height > 0 else 0


def synthesize_event(
    payload: EventData,
    *,
    tx_index: int | None = None,
    event_index: int = 0,
) -> NewEvent:
    """Wrap a payload in an event envelope.

    Args:
        payload: Event payload of any kind
        tx_index: Index of the transaction that emitted the event; when
            omitted the event carries an empty txid
        event_index: Position of the event in the block

    Returns:
        NewEvent: Envelope with the payload in its slot
    """
    txid = transaction_id(tx_index) if tx_index is not None else ""
    return NewEvent(txid=txid, event_index=event_index, payload=payload)


def synthesize_events(tx_index: int | None = None) -> list[NewEvent]:
    """One event of each kind, in fixed order, with placeholder values."""
    return [synthesize_event(payload, tx_index=tx_index) for payload in EVENT_PAYLOADS]


def synthesize_transaction(index: int) -> Transaction:
    """Successful placeholder transaction at a position in a block."""
    return Transaction(
        txid=transaction_id(index),
        tx_index=index,
        status=TRANSACTION_STATUS,
        raw_result=PLACEHOLDER_RAW_RESULT,
        raw_tx=PLACEHOLDER_RAW_TX,
    )


def synthesize_block(height: int, burn_height: int) -> Block:
    """Build a fully populated stacks block.

    The block links to `height - 1` and `burn_height - 1` (0 at genesis),
    carries TRANSACTIONS_PER_BLOCK transactions and one event of every kind.

    Args:
        height: Stacks block height
        burn_height: Height of the burn block anchoring it

    Returns:
        Block: Synthetic block

    Raises:
        ValueError: If either height is negative

    Example:
        >>> block = synthesize_block(5, 105)
        >>> block.parent_block_hash == height_to_hash(4)
        True
    """
    stacks_parent = parent_height(height)
    burn_parent = parent_height(burn_height)

    return Block(
        block_height=height,
        block_hash=height_to_hash(height),
        index_block_hash=height_to_hash(height),
        burn_block_height=burn_height,
        burn_block_hash=height_to_hash(burn_height),
        parent_block_hash=height_to_hash(stacks_parent),
        parent_index_block_hash=height_to_hash(stacks_parent),
        parent_microblock=NULL_MICROBLOCK_HASH,
        parent_microblock_sequence=0,
        parent_burn_block_hash=height_to_hash(burn_parent),
        parent_burn_block_height=burn_parent,
        parent_burn_block_timestamp=0,
        transactions=[synthesize_transaction(i) for i in range(TRANSACTIONS_PER_BLOCK)],
        events=synthesize_events(),
        matured_miner_rewards=[],
    )


def synthesize_burn_block(burn_height: int) -> BurnBlock:
    """Build a burn block with no rewards and nothing burnt."""
    return BurnBlock(
        burn_block_hash=height_to_hash(burn_height),
        burn_block_height=burn_height,
        reward_recipients=[],
        reward_slot_holders=[],
        burn_amount=0,
    )


__all__ = [
    "EVENT_PAYLOADS",
    "parent_height",
    "synthesize_block",
    "synthesize_burn_block",
    "synthesize_event",
    "synthesize_events",
    "synthesize_transaction",
]
