"""
Single-line progress bar that redraws itself in place.
"""

from typing import Optional

from rich.console import Console
from rich.control import Control, ControlType
from rich.text import Text

from algobox.commands.constants import (
    PROGRESS_BAR_WIDTH,
    PROGRESS_EMPTY_CHAR,
    PROGRESS_FILL_CHAR,
)


def percent_complete(current: int, total: int) -> int:
    """Whole percent of ``current`` over ``total``; 0 when total is 0."""
    if total <= 0:
        return 0
    current = max(0, min(current, total))
    return current * 100 // total


def format_bar(
    label: str, current: int, total: int, width: int = PROGRESS_BAR_WIDTH
) -> str:
    percent = percent_complete(current, total)
    filled = percent * width // 100
    bar = PROGRESS_FILL_CHAR * filled + PROGRESS_EMPTY_CHAR * (width - filled)
    return f"{label} [{bar}] {percent:3d}% ({current}/{total})"


class ProgressReporter:
    """Renders one progress line per phase, overwriting it on every update."""

    def __init__(
        self, console: Optional[Console] = None, width: int = PROGRESS_BAR_WIDTH
    ):
        self.console = console or Console()
        self.width = width
        self._line_active = False

    def _clear_previous_line(self) -> None:
        # The previous render ended with a newline, so step back up onto it.
        if self._line_active:
            self.console.control(
                Control.move(0, -1),
                Control((ControlType.ERASE_IN_LINE, 2)),
                Control.move_to_column(0),
            )

    def render(self, label: str, current: int, total: int) -> None:
        """Draw the bar for (label, current, total) over the previous one."""
        self._clear_previous_line()
        self.console.print(
            Text(format_bar(label, current, total, self.width)),
            no_wrap=True,
            overflow="crop",
        )
        self._line_active = True

    def complete(self, message: str) -> None:
        """Replace the last bar with ``message`` and start a fresh line."""
        self._clear_previous_line()
        self.console.print(f"[green]✓ {message}[/green]")
        self._line_active = False
