"""Pytest configuration and shared fixtures for stacks_mock tests."""

import random

import pytest

from stacks_mock.chain.models import Block
from stacks_mock.chain.synthesizer import synthesize_block


MOCK_ENV_KEYS = (
    "MOCK_NODE_HOST",
    "STACKS_MOCK_WORKING_DIR",
    "STACKS_INGESTION_PORT",
    "BITCOIN_RPC_PORT",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove stacks_mock settings that a local .env may have loaded."""
    for key in MOCK_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def block() -> Block:
    """Block used by the concrete height 5 / burn height 105 scenario."""
    return synthesize_block(5, 105)


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic random source for scratch directory names."""
    return random.Random(1234)


@pytest.fixture
def stacks_port() -> int:
    """Stacks ingestion port of the fake mock node."""
    return 20443


@pytest.fixture
def bitcoin_port() -> int:
    """Mock bitcoin RPC port of the fake mock node."""
    return 18443
