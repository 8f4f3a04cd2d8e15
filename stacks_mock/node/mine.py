"""Mine synthetic blocks against a running mock stacks node.

Usage:
    python -m stacks_mock.node.mine --start 1 --count 10
    python -m stacks_mock.node.mine --stacks-port 20443 --bitcoin-port 18443

Ports fall back to STACKS_INGESTION_PORT and BITCOIN_RPC_PORT.
"""

from argparse import ArgumentParser
from asyncio import run

from rich.console import Console

from stacks_mock.helpers.config import get_port
from stacks_mock.helpers.constants import BURN_HEIGHT_OFFSET
from stacks_mock.helpers.errors import MockNodeError
from stacks_mock.node.driver import mine_chain


async def main(
    start: int,
    count: int,
    *,
    stacks_port: int | None = None,
    bitcoin_port: int | None = None,
    burn_height_offset: int = BURN_HEIGHT_OFFSET,
    console: Console | None = None,
) -> bool:
    """Mine `count` blocks starting at stacks height `start`.

    Returns:
        True if every block was announced
    """
    console = console or Console()
    stacks_port = get_port("STACKS_INGESTION_PORT", stacks_port)
    bitcoin_port = get_port("BITCOIN_RPC_PORT", bitcoin_port)

    try:
        await mine_chain(
            stacks_port,
            bitcoin_port,
            range(start, start + count),
            burn_height_offset=burn_height_offset,
        )
    except MockNodeError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        return False

    console.print(f"[bold green]✓ Mined {count} blocks from height {start}[/bold green]")
    return True


if __name__ == "__main__":
    parser = ArgumentParser(description="Mine synthetic blocks against a mock stacks node")
    parser.add_argument("--start", type=int, default=1, help="First stacks height (default: 1)")
    parser.add_argument("--count", type=int, default=1, help="Number of blocks (default: 1)")
    parser.add_argument("--stacks-port", type=int, default=None, help="Stacks ingestion port")
    parser.add_argument("--bitcoin-port", type=int, default=None, help="Mock bitcoin RPC port")
    parser.add_argument(
        "--burn-height-offset",
        type=int,
        default=BURN_HEIGHT_OFFSET,
        help=f"Burn height minus stacks height (default: {BURN_HEIGHT_OFFSET})",
    )
    args = parser.parse_args()

    ok = run(
        main(
            args.start,
            args.count,
            stacks_port=args.stacks_port,
            bitcoin_port=args.bitcoin_port,
            burn_height_offset=args.burn_height_offset,
        )
    )
    raise SystemExit(0 if ok else 1)
