import pytest

from algobox.commands.catchup.config import CatchupConfig
from algobox.commands.constants import DEFAULT_ALGOD_CONTAINER
from algobox.commands.errors import ConfigurationError


def test_defaults_are_valid():
    config = CatchupConfig().validate()

    assert config.container == DEFAULT_ALGOD_CONTAINER
    assert config.poll_interval == 0.1
    assert config.timeout is None
    assert config.completion_confirmations == 1
    assert config.placeholder_total == 1000
    assert config.bar_width == 40


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"container": ""}, "container"),
        ({"poll_interval": 0}, "poll_interval"),
        ({"poll_interval": -1}, "poll_interval"),
        ({"timeout": 0}, "timeout"),
        ({"completion_confirmations": 0}, "completion_confirmations"),
        ({"placeholder_total": 0}, "placeholder_total"),
        ({"bar_width": 0}, "bar_width"),
    ],
)
def test_invalid_values_are_rejected(overrides, field):
    with pytest.raises(ConfigurationError) as exc_info:
        CatchupConfig(**overrides).validate()

    assert exc_info.value.field == field


def test_fetch_retry_is_not_shared_between_configs():
    first = CatchupConfig()
    second = CatchupConfig()

    first.fetch_retry.max_attempts = 1

    assert first.fetch_retry is not second.fetch_retry
    assert second.fetch_retry.max_attempts == 5
    assert CatchupConfig().fetch_retry.max_attempts == 5
