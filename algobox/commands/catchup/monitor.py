"""
Fast catchup monitor.

After the node is told to catch up to a catchpoint, progress is reported in
two ordered phases: account processing, then block download. The status text
has no explicit "phase succeeded" signal, so completion is inferred from the
phase marker disappearing after it has been seen at least once.
"""

import logging
import threading
import time
from dataclasses import replace
from typing import Callable, Optional

from algobox.commands.catchup import parser
from algobox.commands.catchup.client import StatusClient
from algobox.commands.catchup.config import CatchupConfig
from algobox.commands.catchup.models import (
    CatchupPhase,
    MonitorState,
    ProgressSample,
)
from algobox.commands.catchup.progress import ProgressReporter
from algobox.commands.errors import CatchupCancelledError, CatchupTimeoutError
from algobox.commands.retry import retry_call

logger = logging.getLogger(__name__)


class CatchupMonitor:
    """Polls node status and drives the two-phase progress display."""

    def __init__(
        self,
        client: StatusClient,
        config: Optional[CatchupConfig] = None,
        reporter: Optional[ProgressReporter] = None,
        cancel_event: Optional[threading.Event] = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.client = client
        self.config = (config or CatchupConfig()).validate()
        self.reporter = reporter or ProgressReporter(width=self.config.bar_width)
        self.cancel_event = cancel_event or threading.Event()
        self._sleep = sleep
        self._clock = clock
        self._deadline: Optional[float] = None

    def step(self, state: MonitorState, snapshot: str) -> MonitorState:
        """Apply one status snapshot to ``state``."""
        phase = state.phase
        state.ticks += 1
        sample = parser.read_sample(snapshot, phase)

        if sample is not None:
            state.started = True
            state.absent_polls = 0
            state.current = sample
            state.done = sample.finished
        elif state.started:
            state.absent_polls += 1
            if state.absent_polls >= self.config.completion_confirmations:
                logger.debug(
                    "%s marker gone after %d poll(s), treating phase as complete",
                    phase.name,
                    state.absent_polls,
                )
                state.current = replace(state.current, processed=state.current.total)
                state.done = True
        else:
            state.current = ProgressSample(
                phase, total=self.config.placeholder_total, processed=0
            )
            state.done = state.current.finished

        if not state.history or state.history[-1] is not state.status:
            state.history.append(state.status)
        return state

    def _check_interrupts(self, phase: CatchupPhase) -> None:
        if self.cancel_event.is_set():
            raise CatchupCancelledError(
                f"Catchup cancelled during {phase.label.lower()}", phase=phase.name
            )
        if self._deadline is not None and self._clock() >= self._deadline:
            raise CatchupTimeoutError(
                f"Catchup did not finish within {self.config.timeout}s",
                timeout_seconds=self.config.timeout,
                phase=phase.name,
            )

    def _backoff_sleep(self, phase: CatchupPhase) -> Callable[[float], None]:
        def sleep(delay: float) -> None:
            self._check_interrupts(phase)
            self._sleep(delay)
            self._check_interrupts(phase)

        return sleep

    def _fetch(self, phase: CatchupPhase) -> str:
        return retry_call(
            self.client.fetch,
            config=self.config.fetch_retry,
            sleep=self._backoff_sleep(phase),
        )

    def run_phase(self, phase: CatchupPhase) -> MonitorState:
        """Poll until ``phase`` completes; returns its final state."""
        state = MonitorState(phase=phase)
        while True:
            self._check_interrupts(phase)
            self.step(state, self._fetch(phase))
            if state.done:
                break
            self.reporter.render(
                phase.label, state.current.processed, state.current.total
            )
            self._sleep(self.config.poll_interval)

        self.reporter.complete(phase.complete_message)
        logger.debug("%s complete after %d tick(s)", phase.name, state.ticks)
        return state

    def run(self) -> list[MonitorState]:
        """Run both phases in order."""
        if self.config.timeout is not None:
            self._deadline = self._clock() + self.config.timeout
        return [self.run_phase(phase) for phase in CatchupPhase]


def run_catchup(
    target_label: str,
    client: StatusClient,
    config: Optional[CatchupConfig] = None,
    reporter: Optional[ProgressReporter] = None,
    cancel_event: Optional[threading.Event] = None,
    sleep: Callable[[float], None] = time.sleep,
    clock: Callable[[], float] = time.monotonic,
) -> list[MonitorState]:
    """
    Fast catchup the node to ``target_label`` and block until it finishes.

    Args:
        target_label: Catchpoint label, e.g. ``"4420000#Q7T..."``
        client: Node to start and poll
        config: Monitor settings
        reporter: Progress output; defaults to a console reporter
        cancel_event: Set from another thread to abort the run

    Returns:
        Final MonitorState of each phase, in order.

    Raises:
        CatchupStartError: The node refused the catchup. No polls are made.
        StatusFetchError: Status polls kept failing after retries.
        CatchupTimeoutError: The configured timeout elapsed.
        CatchupCancelledError: ``cancel_event`` was set.
    """
    monitor = CatchupMonitor(
        client,
        config=config,
        reporter=reporter,
        cancel_event=cancel_event,
        sleep=sleep,
        clock=clock,
    )
    logger.info("Starting fast catchup to %s", target_label)
    client.start_catchup(target_label)
    return monitor.run()
