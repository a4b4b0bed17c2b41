"""Presentation helpers: clipboard, copy feedback and display formatting."""

from template_manager.ui.clipboard import clipboard_command, copy_to_clipboard
from template_manager.ui.copy_feedback import LABELS, CopyFeedback, CopyState, copy_entry
from template_manager.ui.formatting import escape_html, preview

__all__ = [
    "clipboard_command",
    "copy_to_clipboard",
    "CopyFeedback",
    "CopyState",
    "LABELS",
    "copy_entry",
    "escape_html",
    "preview",
]
