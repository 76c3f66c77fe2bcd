"""
Retry utilities for status polls.
"""

import logging
import time
from typing import Any, Callable, Optional

from algobox.commands.constants import (
    FETCH_RETRY_ATTEMPTS,
    FETCH_RETRY_BACKOFF,
    FETCH_RETRY_DELAY,
    FETCH_RETRY_MAX_DELAY,
)
from algobox.commands.errors import StatusFetchError

logger = logging.getLogger(__name__)


class RetryConfig:
    """Configuration for retry behavior."""

    def __init__(
        self,
        max_attempts: int = FETCH_RETRY_ATTEMPTS,
        delay: float = FETCH_RETRY_DELAY,
        backoff: float = FETCH_RETRY_BACKOFF,
        max_delay: float = FETCH_RETRY_MAX_DELAY,
        exceptions: tuple = (Exception,),
    ):
        self.max_attempts = max_attempts
        self.delay = delay
        self.backoff = backoff
        self.max_delay = max_delay
        self.exceptions = exceptions


def retry_call(
    func: Callable,
    *args,
    config: Optional[RetryConfig] = None,
    sleep: Callable[[float], None] = time.sleep,
    **kwargs,
) -> Any:
    """
    Retry a blocking function call with the given configuration.

    Args:
        func: The function to call
        *args: Positional arguments for the function
        config: RetryConfig instance
        sleep: Function used to wait between attempts
        **kwargs: Keyword arguments for the function

    Returns:
        The result of the function call

    Raises:
        The last exception if all retries fail
    """
    retry_config = config or RetryConfig()
    last_exception = None
    current_delay = retry_config.delay

    for attempt in range(max(retry_config.max_attempts, 1)):
        try:
            return func(*args, **kwargs)
        except retry_config.exceptions as e:
            last_exception = e

            # Don't retry on the last attempt
            if attempt == retry_config.max_attempts - 1:
                break

            logger.debug(
                "Attempt %d/%d failed (%s), retrying in %.2fs",
                attempt + 1,
                retry_config.max_attempts,
                e,
                current_delay,
            )
            sleep(current_delay)
            current_delay = min(
                current_delay * retry_config.backoff, retry_config.max_delay
            )

    raise last_exception


def fetch_retry_config() -> RetryConfig:
    """Fresh retry settings for transient status poll failures."""
    return RetryConfig(exceptions=(StatusFetchError,))
