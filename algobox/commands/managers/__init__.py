"""
Managers module - Docker-backed helpers for the sandbox containers.
"""

from algobox.commands.managers.base import BaseManager

__all__ = [
    "BaseManager",
]
