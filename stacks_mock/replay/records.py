"""Replay log records wrapping serialized chain payloads."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from stacks_mock.chain.models import Block, BurnBlock
from stacks_mock.chain.synthesizer import synthesize_block, synthesize_burn_block
from stacks_mock.helpers.errors import EncodeError
from stacks_mock.helpers.logging import get_logger


logger = get_logger(__name__)


class RecordKind(StrEnum):
    """Kind of chain notification a record holds."""

    STACKS_BLOCK_RECEIVED = "stacks_block_received"
    BURN_BLOCK_RECEIVED = "burn_block_received"


# Model each kind's blob decodes into
PAYLOAD_MODELS: dict[RecordKind, type[Block] | type[BurnBlock]] = {
    RecordKind.STACKS_BLOCK_RECEIVED: Block,
    RecordKind.BURN_BLOCK_RECEIVED: BurnBlock,
}


class Record(BaseModel):
    """One row of a replay log."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=0)
    created_at: str
    kind: RecordKind
    blob: str | None = None


def _serialize(payload: Block | BurnBlock) -> str:
    try:
        return payload.model_dump_json()
    except (ValueError, TypeError) as e:
        logger.error("Failed to serialize %s: %s", type(payload).__name__, e)
        msg = f"failed to serialize {type(payload).__name__}: {e}"
        raise EncodeError(msg) from e


def encode_record(height: int, burn_height: int) -> Record:
    """Synthesize a stacks block and wrap it in a record.

    Args:
        height: Stacks block height, also used as record id and timestamp
        burn_height: Burn block height of the block

    Returns:
        Record: `stacks_block_received` record with the block JSON as blob

    Raises:
        EncodeError: If the block cannot be serialized
    """
    block = synthesize_block(height, burn_height)
    return Record(
        id=height,
        created_at=str(height),
        kind=RecordKind.STACKS_BLOCK_RECEIVED,
        blob=_serialize(block),
    )


def encode_burn_record(record_id: int, burn_height: int) -> Record:
    """Synthesize a burn block and wrap it in a `burn_block_received` record."""
    block = synthesize_burn_block(burn_height)
    return Record(
        id=record_id,
        created_at=str(record_id),
        kind=RecordKind.BURN_BLOCK_RECEIVED,
        blob=_serialize(block),
    )


def decode_record(record: Record) -> Block | BurnBlock | None:
    """Parse a record's blob back into its payload model.

    Returns:
        The decoded payload, or None for a record without a blob

    Raises:
        EncodeError: If the blob is not a valid payload for the record kind
    """
    if record.blob is None:
        return None

    model = PAYLOAD_MODELS[record.kind]
    try:
        return model.model_validate_json(record.blob)
    except ValidationError as e:
        logger.error("Record %d holds an invalid %s payload", record.id, record.kind)
        msg = f"failed to decode {record.kind} record {record.id}: {e}"
        raise EncodeError(msg) from e


__all__ = [
    "PAYLOAD_MODELS",
    "Record",
    "RecordKind",
    "decode_record",
    "encode_burn_record",
    "encode_record",
]
