"""Generate a replay log of synthetic stacks blocks.

Usage:
    python -m stacks_mock.replay.generate --blocks 100
    python -m stacks_mock.replay.generate --blocks 10 --output /tmp/stacks_blocks.tsv
"""

from argparse import ArgumentParser
from pathlib import Path

from rich.console import Console

from stacks_mock.helpers.workdir import create_tmp_working_dir
from stacks_mock.replay.tsv import write_log


def generate(
    block_count: int,
    output: str | Path | None = None,
    console: Console | None = None,
) -> Path:
    """Write a replay log, into a fresh scratch directory unless output is given.

    Args:
        block_count: Number of stacks blocks to write
        output: Destination file (optional)
        console: Rich console for status output

    Returns:
        Path of the written log
    """
    console = console or Console()

    if output is None:
        working_dir, output = create_tmp_working_dir()
        console.print(f"[dim]Working dir: {working_dir}[/dim]")

    path = write_log(block_count, output)
    console.print(f"[bold green]✓ Wrote {block_count} stacks blocks to {path}[/bold green]")
    return path


def main(argv: list[str] | None = None) -> Path:
    parser = ArgumentParser(description="Write synthetic stacks blocks to a replay log")
    parser.add_argument(
        "--blocks",
        type=int,
        default=100,
        help="Number of stacks blocks to write (default: 100)",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Output TSV path (default: stacks_blocks.tsv in a new scratch dir)",
    )
    args = parser.parse_args(argv)

    return generate(args.blocks, args.output)


if __name__ == "__main__":
    main()
