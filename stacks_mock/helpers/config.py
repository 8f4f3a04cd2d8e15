"""Configuration management and environment variable utilities."""

import os

from dotenv import load_dotenv

from stacks_mock.helpers.constants import DEFAULT_HOST, DEFAULT_WORKING_DIR


# Load environment variables from .env file
load_dotenv()

MAX_PORT = 65_535


def get_required_env(key: str) -> str:
    """Get a required environment variable.

    Args:
        key: Environment variable name

    Returns:
        Environment variable value

    Raises:
        ValueError: If the environment variable is not set

    Example:
        ```python
        from stacks_mock.helpers.config import get_required_env

        host = get_required_env("MOCK_NODE_HOST")
        ```
    """
    value = os.getenv(key)
    if not value:
        msg = f"{key} environment variable is not set"
        raise ValueError(msg)
    return value


def get_optional_env(key: str, default: str | None = None) -> str | None:
    """Get an optional environment variable with a default value.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value or default
    """
    return os.getenv(key, default)


def get_port(key: str, port: int | None = None) -> int:
    """Get a TCP port from parameter or environment.

    Args:
        key: Environment variable holding the port (e.g. "STACKS_INGESTION_PORT")
        port: Optional port to use directly

    Returns:
        Port number

    Raises:
        ValueError: If the port is missing, not an integer or out of range

    Example:
        ```python
        from stacks_mock.helpers.config import get_port

        # Get from environment
        stacks_port = get_port("STACKS_INGESTION_PORT")

        # Or provide explicitly
        bitcoin_port = get_port("BITCOIN_RPC_PORT", 18443)
        ```
    """
    if port is None:
        raw = get_required_env(key)
        try:
            port = int(raw)
        except ValueError:
            msg = f"{key} must be an integer, got {raw!r}"
            raise ValueError(msg) from None

    if not 0 < port <= MAX_PORT:
        msg = f"{key} out of range: {port}"
        raise ValueError(msg)

    return port


def get_mock_node_host() -> str:
    """Get the host the mock node endpoints listen on (default: localhost)."""
    return get_optional_env("MOCK_NODE_HOST") or DEFAULT_HOST


def get_working_dir_base() -> str:
    """Get the base directory for scratch working directories."""
    return get_optional_env("STACKS_MOCK_WORKING_DIR") or DEFAULT_WORKING_DIR


__all__ = [
    "get_mock_node_host",
    "get_optional_env",
    "get_port",
    "get_required_env",
    "get_working_dir_base",
]
