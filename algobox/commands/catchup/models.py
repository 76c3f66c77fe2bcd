"""
Data types for the fast catchup monitor.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from algobox.commands.constants import (
    LABEL_ACCOUNTS_PROCESSED,
    LABEL_DOWNLOADED_BLOCKS,
    LABEL_TOTAL_ACCOUNTS,
    LABEL_TOTAL_BLOCKS,
    MESSAGE_ACCOUNTS_COMPLETE,
    MESSAGE_BLOCKS_COMPLETE,
    UNKNOWN_TOTAL,
)


class CatchupPhase(Enum):
    """Ordered phases of a fast catchup.

    Each value is (marker, total label, processed label, progress label,
    completion message).
    """

    ACCOUNT_PROCESSING = (
        LABEL_TOTAL_ACCOUNTS,
        LABEL_TOTAL_ACCOUNTS,
        LABEL_ACCOUNTS_PROCESSED,
        "Processing accounts",
        MESSAGE_ACCOUNTS_COMPLETE,
    )
    BLOCK_DOWNLOAD = (
        LABEL_DOWNLOADED_BLOCKS,
        LABEL_TOTAL_BLOCKS,
        LABEL_DOWNLOADED_BLOCKS,
        "Downloading blocks",
        MESSAGE_BLOCKS_COMPLETE,
    )

    def __init__(self, marker, total_key, processed_key, label, complete_message):
        self.marker = marker
        self.total_key = total_key
        self.processed_key = processed_key
        self.label = label
        self.complete_message = complete_message


class PhaseStatus(Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"


@dataclass(frozen=True)
class ProgressSample:
    """Progress counters for one phase at one poll tick."""

    phase: CatchupPhase
    total: int = UNKNOWN_TOTAL
    processed: int = 0

    @property
    def total_known(self) -> bool:
        return self.total != UNKNOWN_TOTAL

    @property
    def finished(self) -> bool:
        """
        True once a known total has been fully processed.

        A total of 0 means the node has not reported one yet, so a sample
        reading 0 of 0 is not finished. A phase in that state only completes
        when its marker disappears from the status text.
        """
        return self.total_known and self.processed == self.total


@dataclass
class MonitorState:
    """
    Mutable state of a single phase loop.

    The phase completes when a sample is finished, or when the marker has
    been seen and then stays absent for the configured number of polls. A
    present marker with an unreported (zero) total never completes on its
    own counters.
    """

    phase: CatchupPhase
    started: bool = False
    done: bool = False
    current: Optional[ProgressSample] = None
    ticks: int = 0
    absent_polls: int = 0
    # status transitions, one entry per change
    history: list[PhaseStatus] = field(default_factory=list)

    def __post_init__(self):
        if self.current is None:
            self.current = ProgressSample(self.phase)

    @property
    def status(self) -> PhaseStatus:
        if self.done:
            return PhaseStatus.COMPLETE
        if self.started:
            return PhaseStatus.IN_PROGRESS
        return PhaseStatus.NOT_STARTED
