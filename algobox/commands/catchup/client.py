"""
Node status client - runs `goal` inside the sandbox algod container.
"""

from typing import Optional, Protocol

import docker
import requests

from algobox.commands.catchup.config import CatchupConfig
from algobox.commands.constants import GOAL_NODE_CATCHUP, GOAL_NODE_STATUS
from algobox.commands.errors import CatchupStartError, NodeError, StatusFetchError
from algobox.commands.managers.base import BaseManager

# Docker transport failures are not wrapped by the SDK
EXEC_ERRORS = (
    NodeError,
    docker.errors.DockerException,
    requests.exceptions.RequestException,
)


class StatusClient(Protocol):
    """What the catchup monitor needs from a node."""

    def fetch(self) -> str:
        """Return the node's current status text."""
        ...

    def start_catchup(self, catchpoint: str) -> None:
        """Ask the node to fast catchup to ``catchpoint``."""
        ...


class SandboxNodeClient(BaseManager):
    """StatusClient backed by `goal` in the algod container."""

    def __init__(
        self,
        config: Optional[CatchupConfig] = None,
        client: Optional[docker.DockerClient] = None,
    ):
        super().__init__(client)
        self.config = config or CatchupConfig()

    def _goal(self, command: list[str]) -> list[str]:
        if self.config.data_dir:
            return [*command, "-d", self.config.data_dir]
        return list(command)

    def fetch(self) -> str:
        container = self.config.container
        try:
            exit_code, output = self._exec(container, self._goal(GOAL_NODE_STATUS))
        except EXEC_ERRORS as e:
            raise StatusFetchError(
                f"Failed to query node status: {e}", container=container
            ) from e

        if exit_code != 0:
            raise StatusFetchError(
                f"goal node status exited with {exit_code}: {output.strip()}",
                container=container,
                exit_code=exit_code,
            )
        return output

    def start_catchup(self, catchpoint: str) -> None:
        container = self.config.container
        command = self._goal([*GOAL_NODE_CATCHUP, catchpoint])
        try:
            exit_code, output = self._exec(container, command)
        except EXEC_ERRORS as e:
            raise CatchupStartError(
                f"Failed to start fast catchup: {e}", catchpoint=catchpoint
            ) from e

        if exit_code != 0:
            raise CatchupStartError(
                f"goal node catchup exited with {exit_code}",
                catchpoint=catchpoint,
                output=output.strip(),
            )
