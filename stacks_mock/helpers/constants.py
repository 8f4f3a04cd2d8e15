"""Fixed values shared by the block synthesizer, replay log and mock node driver."""

# Synthetic hashing
HASH_PREFIX = "0x"
"""Prefix carried by every synthetic hash"""

HASH_WIDTH = 64
"""Number of characters the height is zero-padded to"""

NULL_MICROBLOCK_HASH = HASH_PREFIX + "0" * HASH_WIDTH
"""Parent microblock reference used by every synthesized block"""

# Synthesized block contents
TRANSACTIONS_PER_BLOCK = 4
"""Number of transactions attached to every synthesized block"""

TRANSACTION_STATUS = "success"
"""Status of every synthesized transaction"""

PLACEHOLDER_RAW_RESULT = "0x0703"
"""Clarity-encoded `(ok true)` result shared by every transaction"""

PLACEHOLDER_RAW_TX = (
    "0x00000000010400e2cd0871da5bdd38c4d5569493dc3b14aac4e0a1000000000000001900"
    "0000000000000000008373b16e4a6f9d87864c314dd77bbd8b27a2b1805e96ec5a6509e7e4"
    "f833cd6a7bdb2462c95f6968a867ab6b0e8f0a6498e600dbc46cfe9f84c79709da7b963701"
    "0200000000040000000000000000000000000000000000000000000000000000000000000000"
)
"""Raw transaction bytes shared by every transaction"""

PLACEHOLDER_AMOUNT = "1"
"""Amount carried by every transfer, mint, burn and lock event"""

PRINT_TOPIC = "print"
"""Topic of the smart contract print event"""

# Replay log
BURN_HEIGHT_OFFSET = 100
"""Distance between a stacks height and its burn height in replay logs"""

STACKS_BLOCKS_TSV = "stacks_blocks.tsv"
"""File name of the replay log inside a scratch working directory"""

DEFAULT_WORKING_DIR = "tests/fixtures/tmp"
"""Base directory for scratch working directories"""

TSV_DELIMITER = "\t"
"""Column delimiter of the replay log"""

TSV_QUOTE_CHAR = "'"
"""Quote character for fields that contain the delimiter"""

TSV_ESCAPE_CHAR = "\\"
"""Escape character used instead of doubling the quote character"""

TSV_LINE_TERMINATOR = "\n"
"""Row terminator of the replay log"""

TSV_BUFFER_SIZE = 8 * (1 << 10)
"""Write buffer size for the replay log in bytes"""

# Mock node protocol
DEFAULT_HOST = "localhost"
"""Host the mock node endpoints listen on"""

NEW_BLOCK_PATH = "/new_block"
"""Stacks ingestion endpoint for new stacks blocks"""

NEW_BURN_BLOCK_PATH = "/new_burn_block"
"""Stacks ingestion endpoint for new burn blocks"""

INCREMENT_CHAIN_TIP_PATH = "/increment-chain-tip"
"""Mock bitcoin RPC endpoint that advances the burn chain tip"""

JSON_HEADERS = {"content-type": "application/json"}
"""Headers sent with every block announcement"""

DEFAULT_TIMEOUT = 30.0
"""Default HTTP request timeout in seconds"""


__all__ = [
    "BURN_HEIGHT_OFFSET",
    "DEFAULT_HOST",
    "DEFAULT_TIMEOUT",
    "DEFAULT_WORKING_DIR",
    "HASH_PREFIX",
    "HASH_WIDTH",
    "INCREMENT_CHAIN_TIP_PATH",
    "JSON_HEADERS",
    "NEW_BLOCK_PATH",
    "NEW_BURN_BLOCK_PATH",
    "NULL_MICROBLOCK_HASH",
    "PLACEHOLDER_AMOUNT",
    "PLACEHOLDER_RAW_RESULT",
    "PLACEHOLDER_RAW_TX",
    "PRINT_TOPIC",
    "STACKS_BLOCKS_TSV",
    "TRANSACTIONS_PER_BLOCK",
    "TRANSACTION_STATUS",
    "TSV_BUFFER_SIZE",
    "TSV_DELIMITER",
    "TSV_ESCAPE_CHAR",
    "TSV_LINE_TERMINATOR",
    "TSV_QUOTE_CHAR",
]
