"""
Unit tests for the algobox typed error classes.
"""

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


class TestAlgoboxError:
    """Tests for the base AlgoboxError class."""

    def test_basic_error(self):
        error = AlgoboxError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.code is None
        assert error.details == {}

    def test_error_with_code(self):
        error = AlgoboxError("Something went wrong", code="ERR_001")
        assert str(error) == "[ERR_001] Something went wrong"

    def test_to_dict(self):
        error = AlgoboxError("Test error", code="TEST_CODE", details={"key": "value"})
        assert error.to_dict() == {
            "type": "AlgoboxError",
            "message": "Test error",
            "code": "TEST_CODE",
            "details": {"key": "value"},
        }

    def test_to_dict_minimal(self):
        assert AlgoboxError("Test error").to_dict() == {
            "type": "AlgoboxError",
            "message": "Test error",
        }


class TestNodeError:
    def test_container_in_details(self):
        error = NodeError("Container missing", container="algod")
        assert error.container == "algod"
        assert error.details["container"] == "algod"


class TestClientErrors:
    def test_status_fetch_error(self):
        error = StatusFetchError("exec failed", container="algod", exit_code=2)
        assert isinstance(error, ClientError)
        assert error.code == "STATUS_FETCH_FAILED"
        assert error.details == {"container": "algod", "exit_code": 2}

    def test_catchpoint_resolution_error(self):
        error = CatchpointResolutionError(
            "lookup failed", url="https://example.com/latest.catchpoint", network="testnet"
        )
        assert isinstance(error, ClientError)
        assert error.url == "https://example.com/latest.catchpoint"
        assert error.details["network"] == "testnet"

    def test_timeout_error(self):
        error = CatchupTimeoutError("too slow", timeout_seconds=30, phase="BLOCK_DOWNLOAD")
        assert error.code == "TIMEOUT"
        assert error.details == {"timeout_seconds": 30, "phase": "BLOCK_DOWNLOAD"}


class TestCatchupErrors:
    def test_start_error(self):
        error = CatchupStartError("refused", catchpoint="1#AAAA", output="too old")
        assert isinstance(error, CatchupError)
        assert isinstance(error, AlgoboxError)
        assert error.code == "CATCHUP_START_FAILED"
        assert error.details == {"catchpoint": "1#AAAA", "output": "too old"}
        assert str(error) == "[CATCHUP_START_FAILED] refused"

    def test_cancelled_error(self):
        error = CatchupCancelledError("stopped", phase="ACCOUNT_PROCESSING")
        assert isinstance(error, CatchupError)
        assert error.code == "CATCHUP_CANCELLED"
        assert error.phase == "ACCOUNT_PROCESSING"

    def test_catchup_error_can_be_caught_as_base(self):
        try:
            raise CatchupStartError("refused")
        except AlgoboxError as e:
            assert e.message == "refused"


class TestConfigurationError:
    def test_field_and_value(self):
        error = ConfigurationError("bad interval", field="poll_interval", value=0)
        assert error.code == "CONFIGURATION_ERROR"
        assert error.details == {"field": "poll_interval", "value": 0}
