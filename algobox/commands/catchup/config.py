"""
Settings for a fast catchup run.
"""

from dataclasses import dataclass, field
from typing import Optional

from algobox.commands.constants import (
    CATCHUP_COMPLETION_CONFIRMATIONS,
    CATCHUP_POLL_INTERVAL,
    CATCHUP_TIMEOUT,
    DEFAULT_ALGOD_CONTAINER,
    PLACEHOLDER_TOTAL,
    PROGRESS_BAR_WIDTH,
)
from algobox.commands.errors import ConfigurationError
from algobox.commands.retry import RetryConfig, fetch_retry_config


@dataclass
class CatchupConfig:
    """Explicit configuration passed to the monitor, client and reporter."""

    container: str = DEFAULT_ALGOD_CONTAINER
    data_dir: Optional[str] = None
    poll_interval: float = CATCHUP_POLL_INTERVAL
    timeout: Optional[float] = CATCHUP_TIMEOUT
    completion_confirmations: int = CATCHUP_COMPLETION_CONFIRMATIONS
    placeholder_total: int = PLACEHOLDER_TOTAL
    bar_width: int = PROGRESS_BAR_WIDTH
    fetch_retry: RetryConfig = field(default_factory=fetch_retry_config)

    def validate(self) -> "CatchupConfig":
        """Raise ConfigurationError for out-of-range settings."""
        if not self.container:
            raise ConfigurationError("A container name is required", field="container")
        if self.poll_interval <= 0:
            raise ConfigurationError(
                "Poll interval must be positive",
                field="poll_interval",
                value=self.poll_interval,
            )
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigurationError(
                "Timeout must be positive", field="timeout", value=self.timeout
            )
        if self.completion_confirmations < 1:
            raise ConfigurationError(
                "At least one confirmation poll is required",
                field="completion_confirmations",
                value=self.completion_confirmations,
            )
        if self.placeholder_total <= 0:
            raise ConfigurationError(
                "Placeholder total must be positive",
                field="placeholder_total",
                value=self.placeholder_total,
            )
        if self.bar_width <= 0:
            raise ConfigurationError(
                "Bar width must be positive", field="bar_width", value=self.bar_width
            )
        return self
