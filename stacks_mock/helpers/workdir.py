"""Scratch working directories for replay tests."""

import random
from pathlib import Path

from stacks_mock.helpers.config import get_working_dir_base
from stacks_mock.helpers.constants import STACKS_BLOCKS_TSV
from stacks_mock.helpers.errors import LogWriteError
from stacks_mock.helpers.logging import get_logger


logger = get_logger(__name__)


def create_tmp_working_dir(
    base_dir: str | Path | None = None,
    *,
    rng: random.Random | None = None,
) -> tuple[Path, Path]:
    """Create an isolated scratch directory named by a random 64-bit suffix.

    The caller owns cleanup of the returned directory.

    Args:
        base_dir: Parent directory (default: STACKS_MOCK_WORKING_DIR setting)
        rng: Random source for the suffix; pass a seeded Random for
            reproducible paths

    Returns:
        Tuple of (working directory, replay log path inside it)

    Raises:
        LogWriteError: If the directory cannot be created

    Example:
        ```python
        working_dir, tsv_path = create_tmp_working_dir()
        write_log(10, tsv_path)
        ```
    """
    rng = rng or random.Random()
    base = Path(base_dir) if base_dir is not None else Path(get_working_dir_base())
    working_dir = base / str(rng.getrandbits(64))

    try:
        working_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error("Failed to create working dir %s: %s", working_dir, e)
        msg = f"failed to create temp working dir: {e}"
        raise LogWriteError(msg) from e

    logger.debug("Created working dir %s", working_dir)
    return working_dir, working_dir / STACKS_BLOCKS_TSV


__all__ = ["create_tmp_working_dir"]
