"""
BaseManager - Common Docker client utilities and shared functionality.
"""

import logging
import sys
from typing import Optional

import docker
from rich.console import Console

from algobox.commands.constants import (
    ERROR_CONTAINER_NOT_FOUND,
    ERROR_CONTAINER_NOT_RUNNING,
)
from algobox.commands.errors import NodeError

logger = logging.getLogger(__name__)
console = Console()


class BaseManager:
    """Base class with shared Docker client utilities."""

    def __init__(self, client: Optional[docker.DockerClient] = None):
        """Initialize with an optional Docker client.

        Args:
            client: Optional Docker client. If not provided, creates one from environment.
        """
        if client is not None:
            self.client = client
        else:
            try:
                self.client = docker.from_env()
            except Exception as e:
                console.print(f"[red]Failed to connect to Docker: {str(e)}[/red]")
                console.print(
                    "[yellow]Make sure Docker is running and you have permission to access it.[/yellow]"
                )
                sys.exit(1)

    def _get_running_container(self, container_name: str):
        """Return a running container or raise NodeError."""
        try:
            container = self.client.containers.get(container_name)
        except docker.errors.NotFound as e:
            raise NodeError(
                ERROR_CONTAINER_NOT_FOUND.format(container=container_name),
                container=container_name,
                code="CONTAINER_NOT_FOUND",
            ) from e
        except docker.errors.APIError as e:
            raise NodeError(
                f"Docker API error looking up {container_name}: {e}",
                container=container_name,
            ) from e

        if container.status != "running":
            raise NodeError(
                ERROR_CONTAINER_NOT_RUNNING.format(container=container_name),
                container=container_name,
                code="CONTAINER_NOT_RUNNING",
            )
        return container

    def _exec(self, container_name: str, command: list[str]) -> tuple[int, str]:
        """Run a command inside a running container.

        Returns:
            (exit code, decoded combined output)
        """
        container = self._get_running_container(container_name)
        logger.debug("exec in %s: %s", container_name, " ".join(command))
        result = container.exec_run(command)
        output = result.output or b""
        if isinstance(output, bytes):
            output = output.decode("utf-8", errors="replace")
        return result.exit_code, output

