"""Tests for synthetic block generation."""

import json

import pytest

from stacks_mock.chain.hashes import height_to_hash
from stacks_mock.chain.models import EVENT_SLOTS, Block, NFTMintEventData
from stacks_mock.chain.synthesizer import (
    parent_height,
    synthesize_block,
    synthesize_burn_block,
    synthesize_event,
    synthesize_events,
    synthesize_transaction,
)


class TestSynthesizeBlock:
    """Tests for synthesize_block."""

    def test_concrete_scenario(self, block: Block) -> None:
        """Test height 5 at burn height 105."""
        assert block.block_height == 5
        assert block.burn_block_height == 105
        assert block.block_hash == height_to_hash(5)
        assert block.index_block_hash == height_to_hash(5)
        assert block.burn_block_hash == height_to_hash(105)
        assert block.parent_block_hash == height_to_hash(4)
        assert block.parent_index_block_hash == height_to_hash(4)
        assert block.parent_burn_block_hash == height_to_hash(104)
        assert block.parent_burn_block_height == 104
        assert len(block.transactions) == 4
        assert len(block.events) == 11

    def test_deterministic(self) -> None:
        """Test identical inputs give byte-identical JSON."""
        for height in (0, 1, 17, 500):
            first = synthesize_block(height, height + 100)
            second = synthesize_block(height, height + 100)
            assert first == second
            assert first.model_dump_json() == second.model_dump_json()

    def test_parent_linkage(self) -> None:
        """Test every block links to the hash of the previous height."""
        for height in range(1, 50):
            block = synthesize_block(height, height + 100)
            assert block.parent_block_hash == height_to_hash(height - 1)
            assert block.parent_burn_block_hash == height_to_hash(height + 99)

    def test_genesis_self_parents(self) -> None:
        """Test height 0 and burn height 0 link to themselves."""
        block = synthesize_block(0, 0)

        assert block.parent_block_hash == height_to_hash(0)
        assert block.parent_burn_block_hash == height_to_hash(0)
        assert block.parent_burn_block_height == 0

    def test_fixed_fields(self, block: Block) -> None:
        """Test the zero microblock reference and empty rewards."""
        assert block.parent_microblock == "0x" + "0" * 64
        assert block.parent_microblock_sequence == 0
        assert block.parent_burn_block_timestamp == 0
        assert block.matured_miner_rewards == []

    def test_transactions(self, block: Block) -> None:
        """Test four successful transactions with indices 0..3."""
        assert [tx.tx_index for tx in block.transactions] == [0, 1, 2, 3]
        assert all(tx.status == "success" for tx in block.transactions)
        assert [tx.txid for tx in block.transactions] == [
            f"transaction_id_{i}" for i in range(4)
        ]
        assert all(tx.execution_cost is None for tx in block.transactions)
        assert all(tx.contract_abi is None for tx in block.transactions)

    def test_events_cover_every_kind_once_in_order(self, block: Block) -> None:
        """Test one event per kind, in the fixed order."""
        assert [event.event_type for event in block.events] == list(EVENT_SLOTS)

    def test_events_populate_exactly_one_slot(self, block: Block) -> None:
        """Test each serialized event sets only the slot matching its type."""
        wire = json.loads(block.model_dump_json())

        for event in wire["events"]:
            populated = [slot for slot in EVENT_SLOTS.values() if event[slot] is not None]
            absent = [slot for slot in EVENT_SLOTS.values() if event[slot] is None]
            assert populated == [EVENT_SLOTS[event["type"]]]
            assert len(absent) == 10

    def test_placeholder_values(self, block: Block) -> None:
        """Test amounts are "1", topic is "print" and other fields are empty."""
        wire = json.loads(block.model_dump_json())

        for event in wire["events"]:
            body = event[EVENT_SLOTS[event["type"]]]
            for field, value in body.items():
                if field in {"amount", "locked_amount"}:
                    assert value == "1"
                elif field == "topic":
                    assert value == "print"
                else:
                    assert value == ""

    def test_negative_height_raises(self) -> None:
        """Test negative heights are rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            synthesize_block(-1, 100)


class TestSynthesizeParts:
    """Tests for the smaller synthesizer helpers."""

    def test_parent_height(self) -> None:
        """Test parent height saturates at genesis."""
        assert parent_height(0) == 0
        assert parent_height(1) == 0
        assert parent_height(10) == 9

    def test_synthesize_transaction(self) -> None:
        """Test placeholder transaction contents."""
        tx = synthesize_transaction(2)

        assert tx.txid == "transaction_id_2"
        assert tx.tx_index == 2
        assert tx.raw_result == "0x0703"
        assert tx.raw_tx.startswith("0x0000000001")

    def test_synthesize_event_without_transaction(self) -> None:
        """Test events default to an empty txid."""
        event = synthesize_event(NFTMintEventData())

        assert event.txid == ""
        assert event.event_index == 0
        assert event.committed is False

    def test_synthesize_event_with_transaction(self) -> None:
        """Test tx_index and event_index are carried on the envelope."""
        event = synthesize_event(NFTMintEventData(), tx_index=1, event_index=4)

        assert event.txid == "transaction_id_1"
        assert event.event_index == 4

    def test_synthesize_events_for_transaction(self) -> None:
        """Test every event is attributed to the given transaction."""
        events = synthesize_events(tx_index=3)

        assert len(events) == 11
        assert {event.txid for event in events} == {"transaction_id_3"}


class TestSynthesizeBurnBlock:
    """Tests for synthesize_burn_block."""

    def test_burn_block(self) -> None:
        """Test burn block contents."""
        burn = synthesize_burn_block(101)

        assert burn.burn_block_hash == height_to_hash(101)
        assert burn.burn_block_height == 101
        assert burn.reward_recipients == []
        assert burn.reward_slot_holders == []
        assert burn.burn_amount == 0

    def test_deterministic(self) -> None:
        """Test identical inputs give identical burn blocks."""
        assert synthesize_burn_block(7).model_dump_json() == synthesize_burn_block(7).model_dump_json()
