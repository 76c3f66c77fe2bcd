"""
Extract catchpoint progress counters from `goal node status` output.

The status text is free-form, made of lines shaped like
``Catchpoint total accounts: 1200``. Labels are matched literally and
case-sensitively; the value is the first run of digits after the colon.
A phase only reports counters while its marker label is present, so
"marker absent" is kept distinct from "value present but zero".
"""

import logging
import re
from typing import Optional

from algobox.commands.catchup.models import CatchupPhase, ProgressSample

logger = logging.getLogger(__name__)


def normalize(snapshot: Optional[str]) -> str:
    """Collapse all whitespace (including newlines) into single spaces."""
    if not snapshot:
        return ""
    return " ".join(snapshot.split())


def has_marker(snapshot: str, marker_key: str) -> bool:
    """Check whether a phase-start marker is present in the snapshot."""
    return marker_key in normalize(snapshot)


def extract(snapshot: str, marker_key: str, value_key: str) -> Optional[int]:
    """
    Read the integer reported for ``value_key``.

    Args:
        snapshot: Raw status text
        marker_key: Substring that must be present for the phase to be reporting
        value_key: Label whose trailing integer is returned

    Returns:
        The parsed value, or None when the marker is absent or the value
        cannot be parsed.
    """
    text = normalize(snapshot)
    if marker_key not in text:
        return None

    match = re.search(re.escape(value_key) + r"\s*:\s*(\d+)", text)
    if match is None:
        logger.debug("No numeric value for %r in status output", value_key)
        return None
    return int(match.group(1))


def read_sample(snapshot: str, phase: CatchupPhase) -> Optional[ProgressSample]:
    """Build a ProgressSample for ``phase``, or None if its marker is absent.

    Unparsable counters are reported as 0 since the node's output can be
    incomplete while it is starting up.
    """
    if not has_marker(snapshot, phase.marker):
        return None

    total = extract(snapshot, phase.marker, phase.total_key) or 0
    processed = extract(snapshot, phase.marker, phase.processed_key) or 0
    if total and processed > total:
        processed = total
    return ProgressSample(phase=phase, total=total, processed=processed)
