"""
Resolve the latest published catchpoint for a public Algorand network.

Fast catchup only applies to networks with published catchpoints; a
private sandbox network has none and must sync from genesis.
"""

import re

import requests

from algobox.commands.constants import (
    CATCHPOINT_LOOKUP_TIMEOUT,
    CATCHPOINT_NETWORKS,
    CATCHPOINT_URL_TEMPLATE,
)
from algobox.commands.errors import CatchpointResolutionError
from algobox.commands.utils import console

# <round>#<base32 digest>
CATCHPOINT_PATTERN = re.compile(r"^\d+#[A-Z2-7]+$")


def supports_fast_catchup(network: str) -> bool:
    return network in CATCHPOINT_NETWORKS


def is_valid_catchpoint(label: str) -> bool:
    return bool(label) and CATCHPOINT_PATTERN.match(label) is not None


def fetch_latest_catchpoint(
    network: str, timeout: float = CATCHPOINT_LOOKUP_TIMEOUT
) -> str:
    """
    Download the latest catchpoint label for ``network``.

    Raises:
        CatchpointResolutionError: Unsupported network, HTTP failure or a
            malformed label in the response.
    """
    if not supports_fast_catchup(network):
        raise CatchpointResolutionError(
            f"Fast catchup is not available for network '{network}'. "
            f"Supported: {', '.join(CATCHPOINT_NETWORKS)}",
            network=network,
        )

    url = CATCHPOINT_URL_TEMPLATE.format(network=network)
    console.print(f"[yellow]Fetching latest {network} catchpoint...[/yellow]")
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        status_code = getattr(getattr(e, "response", None), "status_code", None)
        raise CatchpointResolutionError(
            f"Failed to fetch catchpoint ({type(e).__name__}): {e}",
            url=url,
            network=network,
            details={"status_code": status_code} if status_code else None,
        ) from e

    label = (response.text or "").strip()
    if not is_valid_catchpoint(label):
        raise CatchpointResolutionError(
            f"Unexpected catchpoint format: {label!r}", url=url, network=network
        )
    console.print(f"[cyan]Latest catchpoint: {label}[/cyan]")
    return label
