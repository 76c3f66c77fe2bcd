"""
Health command - check the algod and indexer REST health endpoints.
"""

import sys

import click
import requests
from rich.table import Table

from algobox.commands.constants import (
    DEFAULT_ALGOD_URL,
    DEFAULT_INDEXER_URL,
    ENV_PREFIX,
    HEALTH_CHECK_TIMEOUT,
    HEALTH_ENDPOINT,
)
from algobox.commands.utils import console


def check_health(base_url: str, timeout: float = HEALTH_CHECK_TIMEOUT) -> dict:
    """Query ``<base_url>/health`` and return a result dict."""
    url = base_url.rstrip("/") + HEALTH_ENDPOINT
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        return {"url": url, "healthy": False, "error": f"{type(e).__name__}: {e}"}

    result = {
        "url": url,
        "healthy": response.ok,
        "status_code": response.status_code,
    }
    if not response.ok:
        result["error"] = (response.text or "").strip()[:200]
    return result


@click.command()
@click.option(
    "--algod-url",
    default=DEFAULT_ALGOD_URL,
    show_default=True,
    envvar=f"{ENV_PREFIX}_ALGOD_URL",
    help="Base URL of the algod REST API",
)
@click.option(
    "--indexer-url",
    default=DEFAULT_INDEXER_URL,
    show_default=True,
    envvar=f"{ENV_PREFIX}_INDEXER_URL",
    help="Base URL of the indexer REST API",
)
@click.option(
    "--timeout",
    type=float,
    default=HEALTH_CHECK_TIMEOUT,
    show_default=True,
    help="Request timeout in seconds",
)
def health(algod_url, indexer_url, timeout):
    """Check that the sandbox algod and indexer are healthy."""
    results = {
        "algod": check_health(algod_url, timeout),
        "indexer": check_health(indexer_url, timeout),
    }

    table = Table(title="Sandbox Health")
    table.add_column("Service", style="cyan")
    table.add_column("Endpoint", style="blue")
    table.add_column("Status")
    table.add_column("Details", style="white")

    for service, result in results.items():
        status = (
            "[green]healthy[/green]" if result["healthy"] else "[red]unhealthy[/red]"
        )
        details = result.get("error") or str(result.get("status_code", ""))
        table.add_row(service, result["url"], status, details)

    console.print(table)

    if not all(result["healthy"] for result in results.values()):
        sys.exit(1)
