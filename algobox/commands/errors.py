"""
Typed error classes for algobox.

This module provides the error hierarchy used across the sandbox tooling:
- AlgoboxError: Base exception for all algobox errors
- NodeError: Errors related to sandbox containers and connectivity
- ClientError: Status queries and HTTP communication errors
- CatchupError: Fast catchup failures (start, cancellation)
- ConfigurationError: Invalid settings
"""

from typing import Any, Optional


class AlgoboxError(Exception):
    """Base exception class for all algobox errors.

    Attributes:
        message: Human-readable error message
        code: Optional error code for programmatic handling
        details: Optional dictionary with additional error context
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to a dictionary for serialization."""
        result: dict[str, Any] = {
            "type": self.__class__.__name__,
            "message": self.message,
        }
        if self.code:
            result["code"] = self.code
        if self.details:
            result["details"] = self.details
        return result

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class NodeError(AlgoboxError):
    """Errors related to sandbox node containers.

    Raised when:
    - A sandbox container does not exist or is not running
    - Docker refuses a request for a container
    """

    def __init__(
        self,
        message: str,
        container: Optional[str] = None,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.container = container
        details = details or {}
        if container:
            details["container"] = container
        super().__init__(message, code=code, details=details)


class ClientError(AlgoboxError):
    """Status query and HTTP communication errors.

    Raised when:
    - A command executed inside a container fails
    - An HTTP request fails or returns an unexpected response
    """

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.url = url
        self.status_code = status_code
        details = details or {}
        if url:
            details["url"] = url
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message, code=code, details=details)


class StatusFetchError(ClientError):
    """Raised when the node status could not be read."""

    def __init__(
        self,
        message: str,
        container: Optional[str] = None,
        exit_code: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.container = container
        self.exit_code = exit_code
        details = details or {}
        if container:
            details["container"] = container
        if exit_code is not None:
            details["exit_code"] = exit_code
        super().__init__(message, code="STATUS_FETCH_FAILED", details=details)


class CatchpointResolutionError(ClientError):
    """Raised when the latest catchpoint label cannot be determined."""

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        network: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.network = network
        details = details or {}
        if network:
            details["network"] = network
        super().__init__(
            message, url=url, code="CATCHPOINT_RESOLUTION_FAILED", details=details
        )


class CatchupTimeoutError(ClientError):
    """Raised when a catchup does not finish within the configured timeout."""

    def __init__(
        self,
        message: str,
        timeout_seconds: Optional[float] = None,
        phase: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.timeout_seconds = timeout_seconds
        self.phase = phase
        details = details or {}
        if timeout_seconds is not None:
            details["timeout_seconds"] = timeout_seconds
        if phase:
            details["phase"] = phase
        super().__init__(message, code="TIMEOUT", details=details)


class CatchupError(AlgoboxError):
    """Errors related to a fast catchup run.

    Raised when:
    - The node refuses to start catching up to a catchpoint
    - The caller aborts a running catchup
    """

    def __init__(
        self,
        message: str,
        catchpoint: Optional[str] = None,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.catchpoint = catchpoint
        details = details or {}
        if catchpoint:
            details["catchpoint"] = catchpoint
        super().__init__(message, code=code, details=details)


class CatchupStartError(CatchupError):
    """Raised when the catchup-start request fails. Always fatal."""

    def __init__(
        self,
        message: str,
        catchpoint: Optional[str] = None,
        output: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.output = output
        details = details or {}
        if output:
            details["output"] = output
        super().__init__(
            message,
            catchpoint=catchpoint,
            code="CATCHUP_START_FAILED",
            details=details,
        )


class CatchupCancelledError(CatchupError):
    """Raised when a running catchup is cancelled by its caller."""

    def __init__(
        self,
        message: str,
        phase: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.phase = phase
        details = details or {}
        if phase:
            details["phase"] = phase
        super().__init__(message, code="CATCHUP_CANCELLED", details=details)


class ConfigurationError(AlgoboxError):
    """Configuration-related errors.

    Raised when:
    - A setting is out of range
    - Settings conflict with each other
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.field = field
        self.value = value
        details = details or {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, code="CONFIGURATION_ERROR", details=details)


__all__ = [
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
