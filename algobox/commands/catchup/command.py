"""
Catchup command - fast catchup the sandbox node to a catchpoint.
"""

import sys

import click

from algobox.commands.catchpoint import fetch_latest_catchpoint, is_valid_catchpoint
from algobox.commands.catchup.client import SandboxNodeClient
from algobox.commands.catchup.config import CatchupConfig
from algobox.commands.catchup.monitor import run_catchup
from algobox.commands.catchup.progress import ProgressReporter
from algobox.commands.constants import (
    CATCHPOINT_NETWORKS,
    CATCHUP_COMPLETION_CONFIRMATIONS,
    CATCHUP_POLL_INTERVAL,
    DEFAULT_ALGOD_CONTAINER,
    ENV_PREFIX,
)
from algobox.commands.errors import AlgoboxError
from algobox.commands.utils import console, setup_logging


@click.command()
@click.argument("catchpoint", required=False)
@click.option(
    "--network",
    type=click.Choice(CATCHPOINT_NETWORKS),
    default="testnet",
    show_default=True,
    envvar=f"{ENV_PREFIX}_NETWORK",
    help="Network whose latest catchpoint is used when CATCHPOINT is omitted",
)
@click.option(
    "--container",
    default=DEFAULT_ALGOD_CONTAINER,
    show_default=True,
    envvar=f"{ENV_PREFIX}_ALGOD_CONTAINER",
    help="Name of the algod container",
)
@click.option(
    "--data-dir",
    default=None,
    envvar=f"{ENV_PREFIX}_ALGOD_DATA",
    help="algod data directory inside the container (passed to goal -d)",
)
@click.option(
    "--interval",
    type=float,
    default=CATCHUP_POLL_INTERVAL,
    show_default=True,
    help="Seconds between status polls",
)
@click.option(
    "--timeout",
    type=float,
    default=None,
    envvar=f"{ENV_PREFIX}_CATCHUP_TIMEOUT",
    help="Give up after this many seconds (default: wait forever)",
)
@click.option(
    "--confirmations",
    type=int,
    default=CATCHUP_COMPLETION_CONFIRMATIONS,
    show_default=True,
    help="Consecutive polls without a phase marker before the phase counts as done",
)
@click.option("--verbose", "-v", is_flag=True, help="Show verbose output")
def catchup(
    catchpoint, network, container, data_dir, interval, timeout, confirmations, verbose
):
    """Fast catchup the sandbox node to CATCHPOINT."""
    setup_logging(verbose)

    try:
        config = CatchupConfig(
            container=container,
            data_dir=data_dir,
            poll_interval=interval,
            timeout=timeout,
            completion_confirmations=confirmations,
        ).validate()

        if catchpoint is None:
            catchpoint = fetch_latest_catchpoint(network)
        elif not is_valid_catchpoint(catchpoint):
            console.print(
                f"[yellow]⚠️  '{catchpoint}' does not look like a catchpoint label, trying anyway[/yellow]"
            )

        console.print(f"[bold]Starting fast catchup to {catchpoint}[/bold]")
        client = SandboxNodeClient(config)
        run_catchup(
            catchpoint,
            client,
            config=config,
            reporter=ProgressReporter(console, width=config.bar_width),
        )
    except AlgoboxError as e:
        console.print(f"[red]✗ {e}[/red]")
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Catchup monitoring interrupted[/yellow]")
        sys.exit(1)

    console.print("[green]✓ Fast catchup complete[/green]")
