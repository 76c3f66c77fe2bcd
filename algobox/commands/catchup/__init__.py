"""
Catchup command package - fast catchup a sandbox node to a catchpoint.

This package provides:
- catchup: CLI command
- run_catchup: blocking programmatic entry point
- CatchupMonitor: two-phase status polling state machine
"""

from .command import catchup
from .monitor import CatchupMonitor, run_catchup

__all__ = ["catchup", "run_catchup", "CatchupMonitor"]
