"""Pytest configuration for algobox tests."""

import io

import pytest
from rich.console import Console

from algobox.commands.catchup.progress import ProgressReporter


class ScriptedClient:
    """StatusClient that replays a fixed list of status snapshots.

    Entries that are exceptions are raised instead of returned. The last
    snapshot is repeated once the script runs out.
    """

    def __init__(self, snapshots, start_error=None):
        self.snapshots = list(snapshots)
        self.start_error = start_error
        self.fetch_calls = 0
        self.started_with = []

    def start_catchup(self, catchpoint):
        self.started_with.append(catchpoint)
        if self.start_error is not None:
            raise self.start_error

    def fetch(self):
        index = min(self.fetch_calls, len(self.snapshots) - 1)
        self.fetch_calls += 1
        item = self.snapshots[index]
        if isinstance(item, Exception):
            raise item
        return item


def status_text(**counters):
    """Build `goal node status` output with the given catchpoint counters."""
    labels = {
        "total_accounts": "Catchpoint total accounts",
        "accounts_processed": "Catchpoint accounts processed",
        "total_blocks": "Catchpoint total blocks",
        "downloaded_blocks": "Catchpoint downloaded blocks",
    }
    lines = [
        "Last committed block: 0",
        "Time since last block: 0.0s",
        "Sync Time: 12.3s",
        "Catchpoint: 4420000#Q7T3SMXJMUDGVYSTYX3NSQWUWKNFGAIXH3KQHBDVZJDG2RAZA5NQ",
    ]
    for key, value in counters.items():
        lines.append(f"{labels[key]}: {value}")
    lines.append("Genesis ID: testnet-v1.0")
    return "\n".join(lines) + "\n"


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def console(output, monkeypatch):
    monkeypatch.setenv("TERM", "xterm")
    return Console(file=output, force_terminal=True, color_system=None, width=120)


@pytest.fixture
def reporter(console):
    return ProgressReporter(console)


@pytest.fixture
def make_status():
    return status_text


@pytest.fixture
def make_client():
    return ScriptedClient
