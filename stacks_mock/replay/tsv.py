"""Tab-delimited replay log of stacks block records.

Rows are `id, created_at, kind, blob` with no header. Block JSON never
contains raw tabs or newlines, so rows are normally unquoted; a field that
does contain the delimiter is wrapped in single quotes and quote characters
inside it are backslash-escaped.
"""

import csv
from pathlib import Path

from pydantic import ValidationError

from stacks_mock.helpers.constants import (
    BURN_HEIGHT_OFFSET,
    TSV_BUFFER_SIZE,
    TSV_DELIMITER,
    TSV_ESCAPE_CHAR,
    TSV_LINE_TERMINATOR,
    TSV_QUOTE_CHAR,
)
from stacks_mock.helpers.errors import EncodeError, LogWriteError
from stacks_mock.helpers.logging import get_logger
from stacks_mock.replay.records import Record, RecordKind, encode_record


logger = get_logger(__name__)

RECORD_COLUMNS = ("id", "created_at", "kind", "blob")


class ReplayLogDialect(csv.Dialect):
    """csv dialect of the replay log."""

    delimiter = TSV_DELIMITER
    quotechar = TSV_QUOTE_CHAR
    escapechar = TSV_ESCAPE_CHAR
    doublequote = False
    skipinitialspace = False
    lineterminator = TSV_LINE_TERMINATOR
    quoting = csv.QUOTE_MINIMAL


def record_to_row(record: Record) -> list[str]:
    """Flatten a record into log columns; an absent blob is an empty column."""
    return [
        str(record.id),
        record.created_at,
        record.kind.value,
        record.blob if record.blob is not None else "",
    ]


def row_to_record(row: list[str]) -> Record:
    """Parse log columns back into a record.

    Raises:
        EncodeError: If the row does not hold a valid record
    """
    if len(row) != len(RECORD_COLUMNS):
        msg = f"expected {len(RECORD_COLUMNS)} columns, got {len(row)}"
        raise EncodeError(msg)

    record_id, created_at, kind, blob = row
    try:
        return Record(
            id=int(record_id),
            created_at=created_at,
            kind=RecordKind(kind),
            blob=blob or None,
        )
    except (ValueError, ValidationError) as e:
        msg = f"invalid record row {record_id!r}: {e}"
        raise EncodeError(msg) from e


def write_log(block_count: int, path: str | Path) -> Path:
    """Write records for stacks heights 1..block_count to a replay log.

    Each height is paired with burn height `height + BURN_HEIGHT_OFFSET`.
    Missing parent directories are created. Writing stops at the first
    record that fails to encode.

    Args:
        block_count: Number of blocks to write
        path: Destination file, overwritten if present

    Returns:
        Path: The written file

    Raises:
        ValueError: If block_count is negative
        LogWriteError: If the directory or file cannot be created or written
        EncodeError: If a block cannot be serialized

    Example:
        ```python
        from stacks_mock.replay.tsv import write_log

        write_log(3, "tests/fixtures/tmp/run/stacks_blocks.tsv")
        ```
    """
    if block_count < 0:
        msg = f"block_count must be non-negative, got {block_count}"
        raise ValueError(msg)

    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open(
            "w", newline="", encoding="utf-8", buffering=TSV_BUFFER_SIZE
        ) as f:
            writer = csv.writer(f, dialect=ReplayLogDialect)
            for height in range(1, block_count + 1):
                record = encode_record(height, height + BURN_HEIGHT_OFFSET)
                writer.writerow(record_to_row(record))
    except OSError as e:
        logger.error("Failed to write replay log %s: %s", path, e)
        msg = f"failed to write tsv file: {e}"
        raise LogWriteError(msg) from e

    logger.info("Wrote %d stacks blocks to %s", block_count, path)
    return path


def read_log(path: str | Path) -> list[Record]:
    """Read every record of a replay log, in file order.

    Raises:
        LogWriteError: If the file cannot be read
        EncodeError: If a row does not hold a valid record
    """
    path = Path(path)
    try:
        with path.open(newline="", encoding="utf-8") as f:
            return [row_to_record(row) for row in csv.reader(f, dialect=ReplayLogDialect)]
    except OSError as e:
        logger.error("Failed to read replay log %s: %s", path, e)
        msg = f"failed to read tsv file: {e}"
        raise LogWriteError(msg) from e


__all__ = [
    "RECORD_COLUMNS",
    "ReplayLogDialect",
    "read_log",
    "record_to_row",
    "row_to_record",
    "write_log",
]
