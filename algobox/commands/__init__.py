"""
Commands module - All available CLI commands.
"""

from algobox.commands.catchup import catchup
from algobox.commands.errors import (
    AlgoboxError,
    CatchpointResolutionError,
    CatchupCancelledError,
    CatchupError,
    CatchupStartError,
    CatchupTimeoutError,
    ClientError,
    ConfigurationError,
    NodeError,
    StatusFetchError,
)
from algobox.commands.health import health

__all__ = [
    # Commands
    "catchup",
    "health",
    # Error classes
    "AlgoboxError",
    "NodeError",
    "ClientError",
    "StatusFetchError",
    "CatchpointResolutionError",
    "CatchupTimeoutError",
    "CatchupError",
    "CatchupStartError",
    "CatchupCancelledError",
    "ConfigurationError",
]
