"""Deterministic synthetic hashes and identifiers.

These are stand-ins, not real chain hashes: a height maps to its decimal
text zero-padded to a fixed width, so tests can recompute any expected
hash from a height alone.
"""

from stacks_mock.helpers.constants import HASH_PREFIX, HASH_WIDTH


def height_to_hash_str(height: int) -> str:
    """Map a height to an unprefixed fixed-width hash string.

    Args:
        height: Non-negative block height

    Returns:
        str: Height zero-padded to HASH_WIDTH characters

    Raises:
        ValueError: If height is negative or too large to fit the width

    Example:
        >>> height_to_hash_str(42)[-4:]
        '0042'
    """
    if height < 0:
        msg = f"Height must be non-negative, got {height}"
        raise ValueError(msg)

    digits = str(height)
    if len(digits) > HASH_WIDTH:
        msg = f"Height {height} does not fit in {HASH_WIDTH} characters"
        raise ValueError(msg)

    return digits.zfill(HASH_WIDTH)


def height_to_hash(height: int) -> str:
    """Map a height to a prefixed fixed-width hash.

    Example:
        >>> height_to_hash(1) == "0x" + "0" * 63 + "1"
        True
    """
    return HASH_PREFIX + height_to_hash_str(height)


def transaction_id(index: int) -> str:
    """Transaction id for the transaction at a position in a block."""
    return f"transaction_id_{index}"


__all__ = [
    "height_to_hash",
    "height_to_hash_str",
    "transaction_id",
]
