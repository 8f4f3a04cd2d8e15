"""Pydantic models for the stacks node event-observer payloads.

Field names and layout follow the JSON the stacks node posts to an event
observer, which is what the chain indexer ingests.
"""

from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    model_serializer,
    model_validator,
)

from stacks_mock.helpers.constants import PLACEHOLDER_AMOUNT, PRINT_TOPIC


class EventData(BaseModel):
    """Base class for event payloads.

    Subclasses carry a literal `event_type` tag used to pick the union
    member. The tag is excluded from dumps: on the wire it lives on the
    envelope, not inside the payload.
    """

    model_config = ConfigDict(frozen=True)


class STXTransferEventData(EventData):
    event_type: Literal["stx_transfer"] = Field(default="stx_transfer", exclude=True)
    sender: str = ""
    recipient: str = ""
    amount: str = PLACEHOLDER_AMOUNT


class STXMintEventData(EventData):
    event_type: Literal["stx_mint"] = Field(default="stx_mint", exclude=True)
    recipient: str = ""
    amount: str = PLACEHOLDER_AMOUNT


class STXBurnEventData(EventData):
    event_type: Literal["stx_burn"] = Field(default="stx_burn", exclude=True)
    sender: str = ""
    amount: str = PLACEHOLDER_AMOUNT


class STXLockEventData(EventData):
    event_type: Literal["stx_lock"] = Field(default="stx_lock", exclude=True)
    locked_amount: str = PLACEHOLDER_AMOUNT
    unlock_height: str = ""
    locked_address: str = ""


class NFTTransferEventData(EventData):
    event_type: Literal["nft_transfer"] = Field(default="nft_transfer", exclude=True)
    asset_class_identifier: str = ""
    hex_asset_identifier: str = ""
    sender: str = ""
    recipient: str = ""


class NFTMintEventData(EventData):
    event_type: Literal["nft_mint"] = Field(default="nft_mint", exclude=True)
    asset_class_identifier: str = ""
    hex_asset_identifier: str = ""
    recipient: str = ""


class NFTBurnEventData(EventData):
    event_type: Literal["nft_burn"] = Field(default="nft_burn", exclude=True)
    asset_class_identifier: str = ""
    hex_asset_identifier: str = ""
    sender: str = ""


class FTTransferEventData(EventData):
    event_type: Literal["ft_transfer"] = Field(default="ft_transfer", exclude=True)
    asset_class_identifier: str = ""
    sender: str = ""
    recipient: str = ""
    amount: str = PLACEHOLDER_AMOUNT


class FTMintEventData(EventData):
    event_type: Literal["ft_mint"] = Field(default="ft_mint", exclude=True)
    asset_class_identifier: str = ""
    recipient: str = ""
    amount: str = PLACEHOLDER_AMOUNT


class FTBurnEventData(EventData):
    event_type: Literal["ft_burn"] = Field(default="ft_burn", exclude=True)
    asset_class_identifier: str = ""
    sender: str = ""
    amount: str = PLACEHOLDER_AMOUNT


class SmartContractEventData(EventData):
    event_type: Literal["smart_contract_print_event"] = Field(
        default="smart_contract_print_event", exclude=True
    )
    contract_identifier: str = ""
    topic: str = PRINT_TOPIC
    hex_value: str = ""


StacksEventData = Annotated[
    STXTransferEventData
    | STXMintEventData
    | STXBurnEventData
    | STXLockEventData
    | NFTTransferEventData
    | NFTMintEventData
    | NFTBurnEventData
    | FTTransferEventData
    | FTMintEventData
    | FTBurnEventData
    | SmartContractEventData,
    Field(discriminator="event_type"),
]

# Event type tag -> envelope slot holding its payload, in block order
EVENT_SLOTS: dict[str, str] = {
    "stx_transfer": "stx_transfer_event",
    "stx_mint": "stx_mint_event",
    "stx_burn": "stx_burn_event",
    "stx_lock": "stx_lock_event",
    "nft_transfer": "nft_transfer_event",
    "nft_mint": "nft_mint_event",
    "nft_burn": "nft_burn_event",
    "ft_transfer": "ft_transfer_event",
    "ft_mint": "ft_mint_event",
    "ft_burn": "ft_burn_event",
    "smart_contract_print_event": "contract_event",
}

ENVELOPE_FIELDS = ("txid", "committed", "event_index")


class NewEvent(BaseModel):
    """Event envelope as posted alongside a new block.

    Holds a single payload. On the wire the envelope carries a `type` tag
    and one slot per event kind; only the slot matching the tag is set and
    every other slot is null.
    """

    model_config = ConfigDict(frozen=True)

    txid: str = ""
    committed: bool = False
    event_index: int = Field(default=0, ge=0)
    payload: StacksEventData

    @property
    def event_type(self) -> str:
        """Type tag of the payload."""
        return self.payload.event_type

    @property
    def slot(self) -> str:
        """Wire slot the payload is written to."""
        return EVENT_SLOTS[self.event_type]

    @model_validator(mode="before")
    @classmethod
    def from_wire(cls, data: Any) -> Any:
        """Accept the wire layout and check exactly one slot is populated."""
        if not isinstance(data, dict) or "payload" in data:
            return data

        event_type = data.get("type")
        if event_type not in EVENT_SLOTS:
            msg = f"Unknown event type: {event_type!r}"
            raise ValueError(msg)

        expected = EVENT_SLOTS[event_type]
        populated = [slot for slot in EVENT_SLOTS.values() if data.get(slot) is not None]
        if populated != [expected]:
            msg = (
                f"Event of type {event_type!r} must populate only {expected!r}, "
                f"found {populated}"
            )
            raise ValueError(msg)

        body = data[expected]
        if not isinstance(body, dict):
            msg = f"Slot {expected!r} must be an object"
            raise ValueError(msg)

        fields = {key: data[key] for key in ENVELOPE_FIELDS if key in data}
        return {**fields, "payload": {**body, "event_type": event_type}}

    @model_serializer(mode="plain")
    def to_wire(self) -> dict[str, Any]:
        wire: dict[str, Any] = {
            "txid": self.txid,
            "committed": self.committed,
            "event_index": self.event_index,
            "type": self.event_type,
        }
        for slot in EVENT_SLOTS.values():
            wire[slot] = None
        wire[self.slot] = self.payload.model_dump()
        return wire


class Transaction(BaseModel):
    """Transaction receipt included in a new block."""

    model_config = ConfigDict(frozen=True)

    txid: str
    tx_index: int = Field(ge=0)
    status: str
    raw_result: str
    raw_tx: str
    execution_cost: dict[str, Any] | None = None
    contract_abi: dict[str, Any] | None = None


class MaturedMinerReward(BaseModel):
    """Miner reward that matured in a block."""

    model_config = ConfigDict(frozen=True)

    from_index_consensus_hash: str
    from_stacks_block_hash: str
    recipient: str
    coinbase_amount: str
    tx_fees_anchored: str
    tx_fees_streamed_confirmed: str
    tx_fees_streamed_produced: str


class Block(BaseModel):
    """Stacks block announcement (`/new_block` body)."""

    model_config = ConfigDict(frozen=True)

    block_height: int = Field(ge=0)
    block_hash: str
    index_block_hash: str
    burn_block_height: int = Field(ge=0)
    burn_block_hash: str
    parent_block_hash: str
    parent_index_block_hash: str
    parent_microblock: str
    parent_microblock_sequence: int = 0
    parent_burn_block_hash: str
    parent_burn_block_height: int = Field(ge=0)
    parent_burn_block_timestamp: int = 0
    transactions: list[Transaction]
    events: list[NewEvent]
    matured_miner_rewards: list[MaturedMinerReward] = Field(default_factory=list)


class RewardRecipient(BaseModel):
    """PoX reward paid out in a burn block."""

    model_config = ConfigDict(frozen=True)

    recipient: str
    amt: int = Field(ge=0)


class BurnBlock(BaseModel):
    """Burn chain block announcement (`/new_burn_block` body)."""

    model_config = ConfigDict(frozen=True)

    burn_block_hash: str
    burn_block_height: int = Field(ge=0)
    reward_recipients: list[RewardRecipient] = Field(default_factory=list)
    reward_slot_holders: list[str] = Field(default_factory=list)
    burn_amount: int = 0


__all__ = [
    "EVENT_SLOTS",
    "Block",
    "BurnBlock",
    "EventData",
    "FTBurnEventData",
    "FTMintEventData",
    "FTTransferEventData",
    "MaturedMinerReward",
    "NFTBurnEventData",
    "NFTMintEventData",
    "NFTTransferEventData",
    "NewEvent",
    "RewardRecipient",
    "STXBurnEventData",
    "STXLockEventData",
    "STXMintEventData",
    "STXTransferEventData",
    "SmartContractEventData",
    "StacksEventData",
    "Transaction",
]
