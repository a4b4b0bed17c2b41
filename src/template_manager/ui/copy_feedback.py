"""Copy button feedback state.

Each copy button is either IDLE ("Copy") or COPIED ("Copied!"). A successful
copy moves that entry to COPIED and every other entry back to IDLE; COPIED
reverts to IDLE after the feedback window or on reset() (a click anywhere
else).
"""

from __future__ import annotations

import time
from enum import Enum
from typing import Callable

from template_manager.config.logging import get_logger
from template_manager.constants import COPY_FEEDBACK_SECONDS
from template_manager.exceptions import ClipboardError

from ..catalog.models import TemplateEntry
from .clipboard import copy_to_clipboard

logger = get_logger(__name__)


class CopyState(str, Enum):
    IDLE = "idle"
    COPIED = "copied"


LABELS = {CopyState.IDLE: "Copy", CopyState.COPIED: "Copied!"}


class CopyFeedback:
    """Tracks which entry, if any, currently shows copied feedback.

    Supports dependency injection of the clock for testing.
    """

    def __init__(
        self,
        duration: float = COPY_FEEDBACK_SECONDS,
        time_fn: Callable[[], float] = time.monotonic,
    ):
        if duration <= 0:
            raise ValueError("duration must be positive")
        self._duration = duration
        self._time_fn = time_fn
        self._copied_id: str | None = None
        self._copied_at = 0.0

    def _expire(self) -> None:
        if self._copied_id is not None and self._time_fn() - self._copied_at >= self._duration:
            self._copied_id = None

    @property
    def copied_id(self) -> str | None:
        self._expire()
        return self._copied_id

    def mark_copied(self, entry_id: str) -> None:
        """IDLE -> COPIED for ``entry_id``; any other copied entry resets."""
        self._copied_id = entry_id
        self._copied_at = self._time_fn()

    def reset(self) -> None:
        """Return every entry to IDLE."""
        self._copied_id = None

    def state_for(self, entry_id: str) -> CopyState:
        return CopyState.COPIED if self.copied_id == entry_id else CopyState.IDLE

    def label_for(self, entry_id: str) -> str:
        return LABELS[self.state_for(entry_id)]


def copy_entry(
    entry: TemplateEntry,
    feedback: CopyFeedback,
    writer: Callable[[str], None] | None = None,
) -> None:
    """Copy an entry's content and show feedback on success.

    Raises:
        ClipboardError: If the write fails. Feedback state is left untouched.
    """
    write = writer or copy_to_clipboard
    try:
        write(entry.content)
    except ClipboardError:
        logger.error("Failed to copy %s", entry.id)
        raise
    feedback.mark_copied(entry.id)
